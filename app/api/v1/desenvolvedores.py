from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.params import RecordId
from app.config.database import get_db
from app.core.query_builder import build_query_spec
from app.schemas.desenvolvedor import (
    Desenvolvedor,
    DesenvolvedorCreate,
    DesenvolvedorUpdate,
)
from app.services import desenvolvedores as service
from app.utils.helpers import ResponseFormatter

router = APIRouter()


def _dump(obj) -> dict:
    return Desenvolvedor.model_validate(obj).model_dump(mode="json")


@router.get("", response_model=dict)
async def read_desenvolvedores(
    page: Optional[str] = Query(default=None, description="Página (>= 1)"),
    limit: Optional[str] = Query(default=None, description="Itens por página (1-100)"),
    search: Optional[str] = Query(default=None, description="Busca por nome"),
    sort: Optional[str] = Query(default=None, description="Campo de ordenação"),
    order: Optional[str] = Query(default=None, description="asc ou desc"),
    db: AsyncSession = Depends(get_db),
):
    """Listar desenvolvedores con su nivel"""
    spec = build_query_spec(
        "desenvolvedores", page=page, limit=limit, search=search, sort=sort, order=order
    )
    items, meta = await service.list_desenvolvedores(db, spec)
    return ResponseFormatter.success([_dump(d) for d in items], meta)


@router.get("/{id}", response_model=dict)
async def read_desenvolvedor(id: RecordId, db: AsyncSession = Depends(get_db)):
    """Obtener desenvolvedor específico con nivel embebido"""
    obj = await service.get_desenvolvedor(db, id)
    return ResponseFormatter.success(_dump(obj))


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
async def create_desenvolvedor(
    desenvolvedor_in: DesenvolvedorCreate, db: AsyncSession = Depends(get_db)
):
    obj = await service.create_desenvolvedor(db, desenvolvedor_in)
    return ResponseFormatter.success(_dump(obj))


@router.put("/{id}", response_model=dict)
async def update_desenvolvedor(
    id: RecordId,
    desenvolvedor_in: DesenvolvedorUpdate,
    db: AsyncSession = Depends(get_db),
):
    obj = await service.update_desenvolvedor(db, id, desenvolvedor_in)
    return ResponseFormatter.success(_dump(obj))


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_desenvolvedor(id: RecordId, db: AsyncSession = Depends(get_db)):
    await service.delete_desenvolvedor(db, id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
