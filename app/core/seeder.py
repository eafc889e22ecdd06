import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config.database import async_session_factory
from app.models.nivel import Nivel

logger = logging.getLogger(__name__)

NIVEIS_DEMO = ["Junior", "Pleno", "Senior"]


async def seed_database(db: AsyncSession) -> int:
    """Poblar la base de datos con los niveles de demostración"""
    logger.info("🌱 Creando niveles de demostración...")
    for nome in NIVEIS_DEMO:
        db.add(Nivel(nivel=nome))
    await db.commit()
    logger.info("✅ Seeding completado: %s niveles", len(NIVEIS_DEMO))
    return len(NIVEIS_DEMO)


async def check_if_seeded(db: AsyncSession) -> bool:
    """Verificar si la base de datos ya tiene datos"""
    result = await db.execute(select(Nivel.id).limit(1))
    return result.first() is not None


async def run_seeder(session_factory=async_session_factory) -> bool:
    """Ejecutar seeder solo si no hay niveles"""
    async with session_factory() as db:
        if await check_if_seeded(db):
            logger.info("📊 Base de datos ya tiene datos, saltando seeding...")
            return False
        try:
            await seed_database(db)
        except Exception:
            await db.rollback()
            logger.exception("❌ Error durante seeding")
            raise
    return True
