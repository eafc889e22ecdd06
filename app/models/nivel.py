from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from .base import BaseModel


class Nivel(BaseModel):
    __tablename__ = "niveis"

    nivel = Column(String(255), nullable=False)

    # Relationships
    # Sin cascade: un nivel con desenvolvedores no se elimina
    desenvolvedores = relationship(
        "Desenvolvedor", back_populates="nivel", passive_deletes="all"
    )
