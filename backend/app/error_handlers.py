"""
Custom exception handlers for FastAPI.

Maps domain errors from core.exceptions to HTTP status codes:
- ProfileNotFoundError -> 404
- InvalidProfileError -> 400

Security:
- Request IDs are logged server-side for tracing but NOT exposed in error bodies
- Generic error messages for 500 errors to prevent information disclosure
"""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from core.exceptions import InvalidProfileError, ProfileNotFoundError
from core.logging import get_logger

logger = get_logger("backend.errors")


def _get_request_id() -> str:
    """
    Get the current request ID from context.

    Used for server-side logging only - NOT exposed to clients.
    """
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("request_id", "-")


def _response_payload(detail: str, status_code: int) -> dict:
    return {
        "detail": detail,
        "status_code": status_code,
    }


def _error_response(detail: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=_response_payload(detail, status_code))


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ProfileNotFoundError)
    async def profile_not_found_handler(request: Request, exc: ProfileNotFoundError):
        logger.warning(
            "profile_not_found",
            profile_id=exc.profile_id,
            path=request.url.path,
            request_id=_get_request_id(),
        )
        return _error_response(str(exc), status.HTTP_404_NOT_FOUND)

    @app.exception_handler(InvalidProfileError)
    async def invalid_profile_handler(request: Request, exc: InvalidProfileError):
        logger.warning(
            "invalid_profile",
            detail=str(exc),
            path=request.url.path,
            request_id=_get_request_id(),
        )
        return _error_response(str(exc), status.HTTP_400_BAD_REQUEST)

    # Starlette base class so routing 404/405 share the payload shape
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        logger.warning(
            "http_exception",
            detail=exc.detail,
            status_code=exc.status_code,
            request_id=_get_request_id(),
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=_response_payload(str(exc.detail), exc.status_code),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = jsonable_encoder(exc.errors())
        logger.warning(
            "validation_error",
            errors=errors,
            request_id=_get_request_id(),
        )
        return JSONResponse(
            status_code=422,
            content={
                **_response_payload("Validation error", 422),
                "errors": errors,
            },
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        # Full details stay in the server log
        logger.error(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
            request_id=_get_request_id(),
            exc_info=exc,
        )
        return _error_response("Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR)
