from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.config.database import get_db
from app.config.settings import settings
from app.core.exceptions import NotFound
from app.crud.desenvolvedor import desenvolvedor as crud_desenvolvedor
from app.crud.nivel import nivel as crud_nivel
from app.models.desenvolvedor import Desenvolvedor
from app.models.nivel import Nivel
from app.utils.helpers import ResponseFormatter

router = APIRouter()


@router.get("/models")
async def debug_models(db: AsyncSession = Depends(get_db)):
    """Modelos, relaciones y conteos (solo con DEBUG activo)"""
    if not settings.debug:
        raise NotFound("Not found")

    return ResponseFormatter.success(
        {
            "models": [Nivel.__name__, Desenvolvedor.__name__],
            "associations": {
                "nivel": list(Nivel.__mapper__.relationships.keys()),
                "desenvolvedor": list(Desenvolvedor.__mapper__.relationships.keys()),
            },
            "counts": {
                "niveis": await crud_nivel.count(db),
                "desenvolvedores": await crud_desenvolvedor.count(db),
            },
        }
    )
