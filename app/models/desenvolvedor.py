from sqlalchemy import CHAR, Column, Date, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from .base import BaseModel


class Desenvolvedor(BaseModel):
    __tablename__ = "desenvolvedores"

    nivel_id = Column(
        Integer,
        ForeignKey("niveis.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    nome = Column(String(255), nullable=False)
    sexo = Column(CHAR(1), nullable=False)
    data_nascimento = Column(Date, nullable=False)
    hobby = Column(String(255), nullable=True)

    # Relationships
    nivel = relationship("Nivel", back_populates="desenvolvedores")
