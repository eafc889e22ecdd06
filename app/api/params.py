from typing import Annotated

from fastapi import Path

from app.models.base import MAX_DB_INTEGER

# id de ruta; fuera del rango de la columna responde "Invalid ID"
RecordId = Annotated[int, Path(le=MAX_DB_INTEGER)]
