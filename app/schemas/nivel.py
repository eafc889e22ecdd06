from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional
from datetime import datetime


class NivelBase(BaseModel):
    nivel: str

    @field_validator("nivel", mode="before")
    @classmethod
    def nivel_obrigatorio(cls, value):
        if not isinstance(value, str) or not value.strip():
            raise ValueError("nivel is required")
        return value.strip()


class NivelCreate(NivelBase):
    pass


class NivelUpdate(NivelBase):
    pass


class NivelSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nivel: str


class NivelInDB(NivelSummary):
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Nivel(NivelInDB):
    total_desenvolvedores: int = 0
