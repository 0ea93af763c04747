"""
Application-level exception handlers.

Request-deserialization failures are reported with the same
VALIDATION_ERROR envelope the domain validator produces. Storage
failures become a generic SERVER_ERROR without leaking driver details.
"""

import logging

import psycopg
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.api.models import ErrorResponse, ValidationErrorResponse

logger = logging.getLogger(__name__)


def _format_error(error: dict) -> str:
    """Render one pydantic error as ``field: message``."""
    location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    if not location:
        return error["msg"]
    return f"{'.'.join(location)}: {error['msg']}"


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = [_format_error(error) for error in exc.errors()]
    body = ValidationErrorResponse(messages=messages)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


async def storage_error_handler(request: Request, exc: psycopg.Error) -> JSONResponse:
    logger.error("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
    body = ErrorResponse(error_code=500, type="SERVER_ERROR", message="Unknown error")
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error envelope handlers to an application."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(psycopg.Error, storage_error_handler)
