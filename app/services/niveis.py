"""Operaciones sobre niveles, incluida la regla de eliminación protegida."""

import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import Conflict, NotFound
from app.core.pagination import meta_for
from app.core.query_builder import QuerySpec
from app.crud.nivel import nivel as crud_nivel
from app.models.nivel import Nivel
from app.schemas.nivel import NivelCreate, NivelUpdate

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Level not found"


async def list_niveis(
    db: AsyncSession, spec: QuerySpec
) -> Tuple[List[Nivel], Optional[Dict[str, Any]]]:
    niveis, total = await crud_nivel.get_multi(db, spec)
    return niveis, meta_for(spec, total)


async def get_nivel(db: AsyncSession, nivel_id: int) -> Nivel:
    nivel_obj = await crud_nivel.get(db, nivel_id)
    if not nivel_obj:
        raise NotFound(NOT_FOUND_MESSAGE)
    return nivel_obj


async def create_nivel(db: AsyncSession, nivel_in: NivelCreate) -> Nivel:
    created = await crud_nivel.create(db, obj_in=nivel_in)
    logger.info("Nivel %s creado (%s)", created.id, created.nivel)
    return await get_nivel(db, created.id)


async def update_nivel(db: AsyncSession, nivel_id: int, nivel_in: NivelUpdate) -> Nivel:
    nivel_obj = await get_nivel(db, nivel_id)
    await crud_nivel.update(db, db_obj=nivel_obj, obj_in=nivel_in)
    return await get_nivel(db, nivel_id)


async def delete_nivel(db: AsyncSession, nivel_id: int) -> None:
    """Eliminar un nivel solo si ningún desenvolvedor lo referencia.

    El nivel se lee con FOR UPDATE, así en Postgres un INSERT concurrente de
    desenvolvedor con ese nivel_id espera hasta el final de esta transacción.
    Si aun así el motor rechaza el DELETE por la clave foránea, se informa el
    mismo ``Conflict``.

    Raises:
        NotFound: el nivel no existe.
        Conflict: el nivel tiene desenvolvedores asociados.
    """
    nivel_obj = await crud_nivel.get_for_delete(db, nivel_id)
    if not nivel_obj:
        await db.rollback()
        raise NotFound(NOT_FOUND_MESSAGE)

    associados = await crud_nivel.count_desenvolvedores(db, nivel_id)
    if associados > 0:
        await db.rollback()
        logger.warning(
            "Eliminación rechazada: nivel %s tiene %s desenvolvedores", nivel_id, associados
        )
        raise Conflict()

    try:
        await crud_nivel.remove(db, db_obj=nivel_obj)
    except IntegrityError:
        await db.rollback()
        logger.warning("Eliminación del nivel %s rechazada por la clave foránea", nivel_id)
        raise Conflict()

    logger.info("Nivel %s eliminado", nivel_id)
