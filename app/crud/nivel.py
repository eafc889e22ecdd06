from typing import Any, Dict, List, Optional
from sqlalchemy import Select, select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.base import CRUDBase
from app.models.desenvolvedor import Desenvolvedor
from app.models.nivel import Nivel
from app.schemas.nivel import NivelCreate, NivelUpdate


class CRUDNivel(CRUDBase[Nivel, NivelCreate, NivelUpdate]):
    search_field = "nivel"

    def __init__(self):
        super().__init__(Nivel)
        # Conteo agrupado de desenvolvedores por nivel, siempre calculado
        self._contagem = (
            select(
                Desenvolvedor.nivel_id.label("nivel_id"),
                func.count(Desenvolvedor.id).label("total"),
            )
            .group_by(Desenvolvedor.nivel_id)
            .subquery("contagem_desenvolvedores")
        )
        self._total = func.coalesce(self._contagem.c.total, 0).label(
            "total_desenvolvedores"
        )

    def base_query(self) -> Select:
        return select(Nivel, self._total).outerjoin(
            self._contagem, self._contagem.c.nivel_id == Nivel.id
        )

    def sort_columns(self) -> Dict[str, Any]:
        columns = super().sort_columns()
        columns["total_desenvolvedores"] = self._total
        return columns

    async def fetch(self, db: AsyncSession, query: Select) -> List[Nivel]:
        result = await db.execute(query)
        niveis = []
        for nivel_obj, total in result.all():
            nivel_obj.total_desenvolvedores = total
            niveis.append(nivel_obj)
        return niveis

    async def count_desenvolvedores(self, db: AsyncSession, nivel_id: int) -> int:
        """Cantidad de desenvolvedores que referencian el nivel."""
        result = await db.execute(
            select(func.count(Desenvolvedor.id)).where(Desenvolvedor.nivel_id == nivel_id)
        )
        return result.scalar_one()

    async def get_for_delete(self, db: AsyncSession, nivel_id: int) -> Optional[Nivel]:
        """Leer el nivel con FOR UPDATE (ignorado por SQLite)."""
        result = await db.execute(
            select(Nivel).where(Nivel.id == nivel_id).with_for_update()
        )
        return result.scalar_one_or_none()

    async def exists(self, db: AsyncSession, nivel_id: int) -> bool:
        result = await db.execute(select(Nivel.id).where(Nivel.id == nivel_id))
        return result.scalar_one_or_none() is not None


nivel = CRUDNivel()
