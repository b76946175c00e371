"""Structured logging configuration for the profile service."""

import logging
import sys
import time
import uuid
from collections.abc import Mapping, MutableMapping
from functools import lru_cache
from typing import Any

import structlog
from structlog.types import Processor


def _is_development() -> bool:
    """Check if running in development mode."""
    from .config import get_settings

    settings = get_settings()
    return settings.debug or settings.env == "development"


def _add_app_context(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> Mapping[str, Any] | str | bytes | bytearray | tuple[Any, ...]:
    """Add application context to log entries."""
    event_dict["app"] = "profile_service"
    return event_dict


def get_processors() -> list[Processor]:
    """Get structlog processors based on environment."""
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_app_context,
    ]

    if _is_development():
        return shared_processors + [
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            )
        ]
    return shared_processors + [
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]


@lru_cache(maxsize=1)
def configure_logging(level: str = "INFO") -> None:
    """Configure structured logging. Call once at application startup."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=get_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    if not structlog.is_configured():
        configure_logging()
    return structlog.get_logger(name)  # type: ignore[no-any-return]


# =============================================================================
# Context Management
# =============================================================================


def bind_context(**kwargs: Any) -> None:
    """Bind context variables included in all subsequent log entries."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all context variables."""
    structlog.contextvars.clear_contextvars()


# =============================================================================
# FastAPI Integration
# =============================================================================


class RequestLoggingMiddleware:
    """
    ASGI middleware for request logging.

    Binds a request ID (taken from X-Request-ID when the client sends one) to
    the logging context and echoes it back on the response.
    """

    def __init__(self, app):
        self.app = app
        self._logger: structlog.stdlib.BoundLogger | None = None

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        """Lazy-load logger to avoid import-time configuration issues."""
        if self._logger is None:
            self._logger = get_logger("http")
        return self._logger

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = dict(scope.get("headers") or [])
        incoming = headers.get(b"x-request-id")
        request_id = incoming.decode("latin-1") if incoming else str(uuid.uuid4())[:8]
        start_time = time.perf_counter()

        bind_context(request_id=request_id)

        path = scope.get("path", "")
        method = scope.get("method", "")

        self.logger.info("request_started", method=method, path=path)

        status_code = 500

        async def send_wrapper(message):
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message.get("status", 500)
                message.setdefault("headers", [])
                message["headers"] = list(message["headers"]) + [
                    (b"x-request-id", request_id.encode("latin-1"))
                ]
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            duration = time.perf_counter() - start_time

            log_method = self.logger.info if status_code < 400 else self.logger.warning
            if status_code >= 500:
                log_method = self.logger.error

            log_method(
                "request_complete",
                method=method,
                path=path,
                status_code=status_code,
                duration_seconds=round(duration, 3),
            )

            clear_context()


__all__ = [
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    "RequestLoggingMiddleware",
]
