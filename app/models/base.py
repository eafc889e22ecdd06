from sqlalchemy import Column, Integer, DateTime, func
from sqlalchemy.orm import declared_attr
from app.config.database import Base


class TimestampMixin:
    """Mixin para agregar campos de timestamp a los modelos"""

    @declared_attr
    def created_at(cls):
        return Column(DateTime(timezone=True), server_default=func.now())

    @declared_attr
    def updated_at(cls):
        return Column(
            DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
        )


class BaseModel(Base, TimestampMixin):
    """Modelo base con id entero autoincremental y timestamps"""

    __abstract__ = True

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)


# Rango de INTEGER en Postgres (int4); ids fuera de él no pueden existir
MAX_DB_INTEGER = 2**31 - 1
