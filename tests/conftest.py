"""Fixtures compartidos: base SQLite temporal y cliente HTTP sobre la app."""

import os
import tempfile

_DB_DIR = tempfile.mkdtemp(prefix="desenvolvedores-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_DIR}/test.db"
os.environ["DEBUG"] = "false"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

import app.models  # noqa: E402,F401
from app.config.database import Base, async_session_factory, engine  # noqa: E402
from app.main import app as fastapi_app  # noqa: E402


@pytest.fixture
async def database():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    # las conexiones aiosqlite quedan atadas al event loop de cada test
    await engine.dispose()


@pytest.fixture
async def session(database):
    async with async_session_factory() as db:
        yield db


@pytest.fixture
async def client(database):
    transport = ASGITransport(app=fastapi_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def create_nivel(client):
    async def _create(nome: str) -> dict:
        response = await client.post("/levels", json={"nivel": nome})
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create


@pytest.fixture
def create_desenvolvedor(client):
    async def _create(nivel_id: int, nome: str, **fields) -> dict:
        payload = {
            "nivel_id": nivel_id,
            "nome": nome,
            "sexo": fields.pop("sexo", "M"),
            "data_nascimento": fields.pop("data_nascimento", "1990-05-17"),
            "hobby": fields.pop("hobby", None),
        }
        response = await client.post("/developers", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create
