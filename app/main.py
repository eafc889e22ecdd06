import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import register_exception_handlers
from app.api.v1.router import api_router
from app.config.database import close_db, init_db
from app.config.settings import settings
from app.core.seeder import run_seeder

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🚀 Iniciando API de Desenvolvedores...")

    # 1. Inicializar base de datos
    logger.info("📊 Inicializando base de datos...")
    await init_db()

    # 2. Seeding opcional
    if settings.seed_on_startup:
        if await run_seeder():
            logger.info("✅ Datos iniciales creados")

    logger.info("🎉 Sistema listo!")

    yield

    logger.info("🔄 Cerrando sistema...")
    await close_db()


app = FastAPI(
    title="Desenvolvedores API",
    description="""
    ## Gestión de niveles y desenvolvedores

    - Listados con paginación (`page`, `limit`), búsqueda (`search`) y orden (`sort`, `order`)
    - Sin parámetros de paginación/búsqueda se devuelve la colección completa
    - Un nivel con desenvolvedores asociados no puede eliminarse
    """,
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(api_router, prefix=settings.api_prefix)


@app.get("/", tags=["general"])
async def root():
    """Información general del servicio"""
    return {
        "message": "Desenvolvedores API",
        "status": "running",
        "docs": "/docs",
        "health": f"{settings.api_prefix}/health",
    }
