"""Handlers que convierten errores en el sobre ``{success: false, ...}``."""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.exceptions import AppError, InternalError, InvalidParameter, ValidationFailed
from app.utils.helpers import ResponseFormatter

logger = logging.getLogger(__name__)

# Mensaje por campo cuando falta o no se puede convertir
FIELD_MESSAGES = {
    "nivel": "nivel is required",
    "nivel_id": "nivel_id is required and must be a number",
    "nome": "nome is required",
    "sexo": "sexo must be M or F",
    "data_nascimento": "data_nascimento is required and must be in YYYY-MM-DD format",
    "hobby": "hobby must be a string",
}


def _field_message(error: Dict[str, Any]) -> str:
    loc = error.get("loc", ())
    field = loc[-1] if len(loc) > 1 else None

    if error.get("type") == "value_error" and "error" in error.get("ctx", {}):
        return str(error["ctx"]["error"])
    if field in FIELD_MESSAGES:
        return FIELD_MESSAGES[field]
    if error.get("type") == "json_invalid":
        return "Request body must be valid JSON"
    if field is None and error.get("type") == "missing":
        return "Request body is required"
    return error.get("msg", "Invalid value")


def validation_messages(errors: List[Dict[str, Any]]) -> List[str]:
    messages: List[str] = []
    for error in errors:
        message = _field_message(error)
        if message not in messages:
            messages.append(message)
    return messages


def to_app_error(exc: RequestValidationError) -> AppError:
    errors = exc.errors()
    sources = {error.get("loc", ("body",))[0] for error in errors}
    if "path" in sources:
        return InvalidParameter("Invalid ID")
    return ValidationFailed(validation_messages(errors))


def _envelope(exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ResponseFormatter.error(exc.message, exc.errors),
    )


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return _envelope(exc)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return _envelope(to_app_error(exc))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("❌ Error no controlado en %s %s", request.method, request.url.path)
    return _envelope(InternalError())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
