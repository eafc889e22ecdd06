import re
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from .nivel import NivelSummary

SEXOS = ("M", "F")
ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class DesenvolvedorBase(BaseModel):
    nivel_id: int
    nome: str
    sexo: str
    data_nascimento: date
    hobby: Optional[str] = None

    @field_validator("nivel_id", mode="before")
    @classmethod
    def nivel_id_numerico(cls, value):
        if isinstance(value, bool) or value is None:
            raise ValueError("nivel_id is required and must be a number")
        try:
            return int(str(value).strip())
        except ValueError:
            raise ValueError("nivel_id is required and must be a number")

    @field_validator("nome", mode="before")
    @classmethod
    def nome_obrigatorio(cls, value):
        if not isinstance(value, str) or not value.strip():
            raise ValueError("nome is required")
        return value.strip()

    @field_validator("sexo", mode="before")
    @classmethod
    def sexo_valido(cls, value):
        if not isinstance(value, str) or value.strip().upper() not in SEXOS:
            raise ValueError("sexo must be M or F")
        return value.strip().upper()

    @field_validator("data_nascimento", mode="before")
    @classmethod
    def data_iso(cls, value):
        """Solo YYYY-MM-DD y fecha real de calendario (no 1990-02-30)."""
        message = "data_nascimento is required and must be in YYYY-MM-DD format"
        if isinstance(value, date) and not isinstance(value, datetime):
            return value
        if not isinstance(value, str) or not ISO_DATE.match(value):
            raise ValueError(message)
        try:
            return date.fromisoformat(value)
        except ValueError:
            raise ValueError(message)

    @field_validator("hobby", mode="before")
    @classmethod
    def hobby_opcional(cls, value):
        if value is None:
            return None
        if not isinstance(value, str):
            raise ValueError("hobby must be a string")
        return value.strip() or None


class DesenvolvedorCreate(DesenvolvedorBase):
    pass


class DesenvolvedorUpdate(DesenvolvedorBase):
    pass


class DesenvolvedorInDB(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nivel_id: int
    nome: str
    sexo: str
    data_nascimento: date
    hobby: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Desenvolvedor(DesenvolvedorInDB):
    nivel: Optional[NivelSummary] = None
