import asyncio
import logging

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import declarative_base

from .settings import settings

logger = logging.getLogger(__name__)


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def _engine_options(url: str) -> dict:
    """Pool/connect args per backend; SQLite rejects the Postgres ones."""
    if _is_sqlite(url):
        return {}
    return {
        "pool_recycle": 1200,
        "pool_size": 20,
        "max_overflow": 40,
        "pool_timeout": 10,
        "connect_args": {
            "server_settings": {
                "application_name": "desenvolvedores_api",
            },
            "command_timeout": 60,
        },
    }


# Create async engine with better connection handling
engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    future=True,
    pool_pre_ping=True,
    **_engine_options(settings.database_url),
)

if _is_sqlite(settings.database_url):

    @event.listens_for(engine.sync_engine, "connect")
    def set_sqlite_pragmas(dbapi_connection, connection_record):
        # SQLite only enforces FOREIGN KEY ... ON DELETE RESTRICT when asked to
        cur = dbapi_connection.cursor()
        cur.execute("PRAGMA foreign_keys=ON;")
        cur.close()


# Create session factory
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=True,
    autocommit=False,
)

Base = declarative_base()


async def get_db() -> AsyncSession:
    """Get database session with proper error handling"""
    session = None
    try:
        session = async_session_factory()
        yield session
    except Exception:
        if session:
            await session.rollback()
        raise
    finally:
        if session:
            await session.close()


async def test_connection(max_retries: int = 5, delay: float = 2.0) -> bool:
    """Test database connection with retries"""
    for attempt in range(max_retries):
        try:
            async with async_session_factory() as session:
                await session.execute(text("SELECT 1"))
                logger.info("Database connection successful on attempt %s", attempt + 1)
                return True
        except Exception as e:
            logger.warning("Database connection attempt %s failed: %s", attempt + 1, e)
            if attempt < max_retries - 1:
                await asyncio.sleep(delay)
    logger.error("All database connection attempts failed")
    return False


async def wait_for_db(max_wait: int = 60) -> bool:
    """Wait for database to be ready"""
    logger.info("Waiting for database to be ready...")
    loop = asyncio.get_running_loop()
    start_time = loop.time()

    while True:
        if await test_connection(max_retries=1):
            return True

        elapsed = loop.time() - start_time
        if elapsed > max_wait:
            logger.error("Timeout waiting for database after %s seconds", max_wait)
            return False

        await asyncio.sleep(2)


async def init_db():
    """Initialize database tables with connection verification"""
    if not await wait_for_db(settings.db_wait_timeout):
        raise RuntimeError("Database is not ready")

    # Importar modelos para registrarlos en Base.metadata
    import app.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database tables initialized successfully")
    return True


async def close_db():
    """Close database connections"""
    await engine.dispose()
    logger.info("Database connections closed")
