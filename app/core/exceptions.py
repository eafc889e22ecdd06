"""Errores de dominio de la API.

Cada error lleva su código HTTP y el mensaje público; los handlers en
``app.api.errors`` los convierten en el sobre ``{success: false, ...}``.
"""

from typing import List, Optional


class AppError(Exception):
    """Base de errores de la aplicación."""

    status_code: int = 400
    default_message: str = "Bad request"

    def __init__(self, message: Optional[str] = None, errors: Optional[List[str]] = None):
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)


class InvalidParameter(AppError):
    """page, limit o id con formato o rango inválido."""

    default_message = "Invalid parameter"


class ValidationFailed(AppError):
    """Uno o más campos del cuerpo son inválidos."""

    default_message = "Invalid data"

    def __init__(self, errors: List[str], message: Optional[str] = None):
        super().__init__(message, errors=list(errors))


class InvalidReference(AppError):
    """nivel_id no corresponde a ningún nivel."""

    default_message = "The specified level does not exist"


class NotFound(AppError):
    status_code = 404
    default_message = "Resource not found"


class Conflict(AppError):
    """Eliminación bloqueada por la regla de integridad referencial."""

    default_message = "Cannot remove a level with associated developers"


class InternalError(AppError):
    status_code = 500
    default_message = "Internal server error"


__all__ = [
    "AppError",
    "Conflict",
    "InternalError",
    "InvalidParameter",
    "InvalidReference",
    "NotFound",
    "ValidationFailed",
]
