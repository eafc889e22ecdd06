from typing import Any, Dict, Generic, List, Optional, Tuple, Type, TypeVar, Union
from pydantic import BaseModel
from sqlalchemy import Select, select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.config.database import Base
from app.core.query_builder import QuerySpec, SortOrder

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    # Campo de texto usado por ``search`` (ILIKE %term%)
    search_field: Optional[str] = None

    def __init__(self, model: Type[ModelType]):
        """
        Objeto CRUD con métodos por defecto para Create, Read, Update, Delete (CRUD).
        """
        self.model = model

    def base_query(self) -> Select:
        return select(self.model)

    def sort_columns(self) -> Dict[str, Any]:
        """Mapa nombre ordenable -> expresión SQL."""
        return {column.name: column for column in self.model.__table__.columns}

    def apply_filters(self, query: Select, spec: QuerySpec) -> Select:
        if spec.search_term and self.search_field:
            column = getattr(self.model, self.search_field)
            # % y _ se buscan literalmente
            query = query.where(column.icontains(spec.search_term, autoescape=True))
        return query

    def apply_ordering(self, query: Select, spec: QuerySpec) -> Select:
        columns = self.sort_columns()
        column = columns.get(spec.sort_field, self.model.id)
        direction = column.desc() if spec.sort_order == SortOrder.DESC else column.asc()
        query = query.order_by(direction)
        if spec.sort_field != "id":
            # desempate estable para que las páginas no se solapen
            query = query.order_by(self.model.id.asc())
        return query

    async def fetch(self, db: AsyncSession, query: Select) -> List[ModelType]:
        result = await db.execute(query)
        return list(result.scalars().all())

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        rows = await self.fetch(db, self.base_query().where(self.model.id == id))
        return rows[0] if rows else None

    async def get_multi(
        self, db: AsyncSession, spec: QuerySpec
    ) -> Tuple[List[ModelType], int]:
        """Listado filtrado y ordenado; devuelve (filas, total sin paginar)."""
        query = self.apply_ordering(self.apply_filters(self.base_query(), spec), spec)

        if not spec.paginated:
            rows = await self.fetch(db, query)
            return rows, len(rows)

        count_query = self.apply_filters(
            select(func.count()).select_from(self.model), spec
        )
        total = (await db.execute(count_query)).scalar_one()
        if spec.offset >= total:
            # página fuera de rango; evita un OFFSET mayor que el entero SQL
            return [], total

        rows = await self.fetch(db, query.offset(spec.offset).limit(spec.limit))
        return rows, total

    async def create(self, db: AsyncSession, *, obj_in: CreateSchemaType) -> ModelType:
        db_obj = self.model(**obj_in.model_dump())
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)

        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def remove(self, db: AsyncSession, *, db_obj: ModelType) -> ModelType:
        await db.delete(db_obj)
        await db.commit()
        return db_obj

    async def count(self, db: AsyncSession) -> int:
        result = await db.execute(select(func.count(self.model.id)))
        return result.scalar()
