"""Operaciones sobre desenvolvedores."""

import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import InvalidReference, NotFound
from app.core.pagination import meta_for
from app.core.query_builder import QuerySpec
from app.crud.desenvolvedor import desenvolvedor as crud_desenvolvedor
from app.crud.nivel import nivel as crud_nivel
from app.models.base import MAX_DB_INTEGER
from app.models.desenvolvedor import Desenvolvedor
from app.schemas.desenvolvedor import DesenvolvedorCreate, DesenvolvedorUpdate

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Developer not found"


async def _ensure_nivel(db: AsyncSession, nivel_id: int) -> None:
    if not 1 <= nivel_id <= MAX_DB_INTEGER:
        raise InvalidReference()
    if not await crud_nivel.exists(db, nivel_id):
        raise InvalidReference()


async def list_desenvolvedores(
    db: AsyncSession, spec: QuerySpec
) -> Tuple[List[Desenvolvedor], Optional[Dict[str, Any]]]:
    desenvolvedores, total = await crud_desenvolvedor.get_multi(db, spec)
    return desenvolvedores, meta_for(spec, total)


async def get_desenvolvedor(db: AsyncSession, desenvolvedor_id: int) -> Desenvolvedor:
    obj = await crud_desenvolvedor.get(db, desenvolvedor_id)
    if not obj:
        raise NotFound(NOT_FOUND_MESSAGE)
    return obj


async def create_desenvolvedor(
    db: AsyncSession, desenvolvedor_in: DesenvolvedorCreate
) -> Desenvolvedor:
    """Crear un desenvolvedor validando antes que el nivel exista.

    Raises:
        InvalidReference: nivel_id no corresponde a ningún nivel.
    """
    await _ensure_nivel(db, desenvolvedor_in.nivel_id)
    try:
        created = await crud_desenvolvedor.create(db, obj_in=desenvolvedor_in)
    except IntegrityError:
        # nivel eliminado entre la verificación y el INSERT
        await db.rollback()
        raise InvalidReference()

    logger.info("Desenvolvedor %s creado", created.id)
    return await crud_desenvolvedor.get_with_nivel(db, created.id)


async def update_desenvolvedor(
    db: AsyncSession, desenvolvedor_id: int, desenvolvedor_in: DesenvolvedorUpdate
) -> Desenvolvedor:
    obj = await get_desenvolvedor(db, desenvolvedor_id)
    await _ensure_nivel(db, desenvolvedor_in.nivel_id)
    try:
        await crud_desenvolvedor.update(db, db_obj=obj, obj_in=desenvolvedor_in)
    except IntegrityError:
        await db.rollback()
        raise InvalidReference()

    return await crud_desenvolvedor.get_with_nivel(db, desenvolvedor_id)


async def delete_desenvolvedor(db: AsyncSession, desenvolvedor_id: int) -> None:
    obj = await get_desenvolvedor(db, desenvolvedor_id)
    await crud_desenvolvedor.remove(db, db_obj=obj)
    logger.info("Desenvolvedor %s eliminado", desenvolvedor_id)
