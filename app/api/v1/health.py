import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config.database import get_db
from app.config.settings import settings
from app.utils.helpers import format_datetime

logger = logging.getLogger(__name__)

router = APIRouter()

VERSION = "1.0.0"


@router.get("")
async def health_check(db: AsyncSession = Depends(get_db)):
    """Verificación de salud del servicio y de la base de datos"""
    timestamp = format_datetime(datetime.now(timezone.utc))
    try:
        await db.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.error("Health check sin base de datos: %s", e)
        return JSONResponse(
            status_code=503,
            content={
                "status": "ERROR",
                "timestamp": timestamp,
                "database": "disconnected",
                "error": str(e),
            },
        )

    return {
        "status": "OK",
        "timestamp": timestamp,
        "database": "connected",
        "environment": settings.environment,
        "version": VERSION,
    }
