from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from agromano.application.errors import AppError, InfrastructureError, ValidationError
from agromano.infrastructure.repos.integrity import translate_integrity_error

logger = logging.getLogger(__name__)

DUPLICATE_ON_COMMIT = "Ya existe un registro con esos datos"


def _error_response(error: AppError) -> JSONResponse:
    payload = {"code": error.code, "message": error.message}
    if error.details is not None:
        payload["details"] = error.details
    return JSONResponse(status_code=error.status_code, content=payload)


def register_error_handlers(app: FastAPI) -> None:
    """Every error leaves the API as ``{"code", "message"[, "details"]}``."""

    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:  # noqa: WPS430
        logger.info(
            "Application error handled: %s - %s (status: %d)",
            exc.code,
            exc.message,
            exc.status_code,
            extra={"path": request.url.path, "method": request.method},
        )
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(  # noqa: WPS430
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        error = ValidationError(
            "Datos de entrada no válidos", details={"errors": jsonable_encoder(exc.errors())}
        )
        return _error_response(error)

    # Constraints checked at commit time never pass through a repository
    @app.exception_handler(IntegrityError)
    async def handle_integrity_error(request: Request, exc: IntegrityError) -> JSONResponse:  # noqa: WPS430
        logger.warning("Constraint violation on %s %s", request.method, request.url.path)
        return _error_response(translate_integrity_error(exc, DUPLICATE_ON_COMMIT))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:  # noqa: WPS430
        payload = {"code": "http_error", "message": exc.detail}
        return JSONResponse(status_code=exc.status_code, content=payload)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:  # noqa: WPS430
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        error = InfrastructureError("Error inesperado del servidor")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"code": error.code, "message": error.message},
        )
