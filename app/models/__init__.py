from .base import BaseModel
from .nivel import Nivel
from .desenvolvedor import Desenvolvedor

__all__ = [
    "BaseModel",
    "Nivel",
    "Desenvolvedor",
]
