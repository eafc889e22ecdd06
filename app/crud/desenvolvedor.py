from typing import Optional
from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.query_builder import QuerySpec, SortOrder
from app.crud.base import CRUDBase
from app.models.desenvolvedor import Desenvolvedor
from app.models.nivel import Nivel
from app.schemas.desenvolvedor import DesenvolvedorCreate, DesenvolvedorUpdate


class CRUDDesenvolvedor(CRUDBase[Desenvolvedor, DesenvolvedorCreate, DesenvolvedorUpdate]):
    search_field = "nome"

    def __init__(self):
        super().__init__(Desenvolvedor)

    def base_query(self) -> Select:
        return select(Desenvolvedor).options(selectinload(Desenvolvedor.nivel))

    def apply_ordering(self, query: Select, spec: QuerySpec) -> Select:
        if spec.sort_field != "nivel":
            return super().apply_ordering(query, spec)
        # "nivel" ordena por la etiqueta del nivel, no por nivel_id
        label = Nivel.nivel.desc() if spec.sort_order == SortOrder.DESC else Nivel.nivel.asc()
        return (
            query.join(Nivel, Desenvolvedor.nivel_id == Nivel.id)
            .order_by(label)
            .order_by(Desenvolvedor.id.asc())
        )

    async def get_with_nivel(
        self, db: AsyncSession, desenvolvedor_id: int
    ) -> Optional[Desenvolvedor]:
        """Releer el registro con su nivel actual (tras create/update)."""
        result = await db.execute(
            self.base_query()
            .where(Desenvolvedor.id == desenvolvedor_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()


desenvolvedor = CRUDDesenvolvedor()
