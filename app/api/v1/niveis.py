from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.params import RecordId
from app.config.database import get_db
from app.core.query_builder import build_query_spec
from app.schemas.nivel import Nivel, NivelCreate, NivelUpdate
from app.services import niveis as service
from app.utils.helpers import ResponseFormatter

router = APIRouter()


def _dump(nivel_obj) -> dict:
    return Nivel.model_validate(nivel_obj).model_dump(mode="json")


@router.get("", response_model=dict)
async def read_niveis(
    page: Optional[str] = Query(default=None, description="Página (>= 1)"),
    limit: Optional[str] = Query(default=None, description="Itens por página (1-100)"),
    search: Optional[str] = Query(default=None, description="Busca por nivel"),
    sort: Optional[str] = Query(default=None, description="Campo de ordenação"),
    order: Optional[str] = Query(default=None, description="asc ou desc"),
    db: AsyncSession = Depends(get_db),
):
    """Listar niveles con paginación, búsqueda y orden opcionales"""
    spec = build_query_spec(
        "niveis", page=page, limit=limit, search=search, sort=sort, order=order
    )
    niveis_list, meta = await service.list_niveis(db, spec)
    return ResponseFormatter.success([_dump(n) for n in niveis_list], meta)


@router.get("/{id}", response_model=dict)
async def read_nivel(id: RecordId, db: AsyncSession = Depends(get_db)):
    """Obtener nivel específico"""
    nivel_obj = await service.get_nivel(db, id)
    return ResponseFormatter.success(_dump(nivel_obj))


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
async def create_nivel(nivel_in: NivelCreate, db: AsyncSession = Depends(get_db)):
    """Crear nivel"""
    nivel_obj = await service.create_nivel(db, nivel_in)
    return ResponseFormatter.success(_dump(nivel_obj))


@router.put("/{id}", response_model=dict)
async def update_nivel(
    id: RecordId, nivel_in: NivelUpdate, db: AsyncSession = Depends(get_db)
):
    """Actualizar nivel"""
    nivel_obj = await service.update_nivel(db, id, nivel_in)
    return ResponseFormatter.success(_dump(nivel_obj))


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_nivel(id: RecordId, db: AsyncSession = Depends(get_db)):
    """Eliminar nivel (rechazado si tiene desenvolvedores)"""
    await service.delete_nivel(db, id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
