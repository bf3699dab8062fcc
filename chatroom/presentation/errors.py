"""
Error translation at the request boundary.

Routers let domain errors propagate; the handlers registered here turn them
into responses. Unexpected failures are logged with full detail and returned
as a generic 500 without internal details.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from redis.exceptions import RedisError
from starlette.exceptions import HTTPException as StarletteHTTPException

from chatroom.domain.exceptions import ChatError, ErrorKind
from chatroom.observability.metrics import increment_error

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorKind.VALIDATION: 422,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _internal_error_response() -> JSONResponse:
    increment_error(ErrorKind.INTERNAL.value)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ChatError)
    async def chat_error_handler(request: Request, exc: ChatError):
        if exc.kind is ErrorKind.INTERNAL:
            logger.error(
                f"[{request.method} {request.url.path}] {exc.message}",
                exc_info=exc,
            )
            return _internal_error_response()

        logger.info(f"[{request.method} {request.url.path}] {exc.kind.value}: {exc.message}")
        increment_error(exc.kind.value)
        return JSONResponse(
            status_code=ERROR_STATUS[exc.kind],
            content={"error": exc.message},
        )

    # Validation error handler - shows detailed Pydantic errors
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = jsonable_encoder(exc.errors())
        logger.info(f"[{request.method} {request.url.path}] validation: {errors}")
        increment_error(ErrorKind.VALIDATION.value)
        return JSONResponse(
            status_code=422,
            content={"error": "Validation error", "details": errors},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
        )

    @app.exception_handler(RedisError)
    async def store_exception_handler(request: Request, exc: RedisError):
        logger.error(
            f"[{request.method} {request.url.path}] Store failure: {exc}",
            exc_info=exc,
        )
        return _internal_error_response()

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(
            f"[{request.method} {request.url.path}] {type(exc).__name__}: {exc}",
            exc_info=exc,
        )
        return _internal_error_response()
