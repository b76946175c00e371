"""
FastAPI application entry point.

Uses structured logging from core.logging module. The DatabaseManager is
created here, kept on app.state and opened/closed by the lifespan.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.config import get_settings
from core.db import DatabaseManager
from core.logging import RequestLoggingMiddleware, configure_logging, get_logger

from .error_handlers import register_exception_handlers
from .routers import profiles as profiles_router

CORS_ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE"]

logger = get_logger("api")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    database: DatabaseManager = app.state.database

    logger.info("app_startup", app_name=settings.app_name, env=settings.env)

    database.initialize(settings.database_url)
    if settings.db_create_tables:
        database.create_all_tables()
    logger.info("database_initialized")

    try:
        yield
    finally:
        database.dispose()
        logger.info("app_shutdown")


def create_app(database: DatabaseManager | None = None) -> FastAPI:
    """
    Build the application.

    Args:
        database: Pre-built manager to use instead of a fresh one. It is
            initialized at startup unless already initialized.
    """
    settings = get_settings()
    configure_logging(level="DEBUG" if settings.debug else settings.log_level)

    app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)
    app.state.database = database or DatabaseManager()

    # One policy for the whole app; only /api/ routes carry profile data
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=CORS_ALLOWED_METHODS,
        allow_headers=["*"],
    )

    # Structured request logging middleware
    app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app)

    @app.get("/health", tags=["health"])
    def health_check():
        """Liveness probe."""
        return {"status": "ok"}

    @app.get("/health/ready", tags=["health"])
    def readiness_check(request: Request):
        """
        Readiness probe.

        Returns 200 if the database answers a trivial query, 503 if not.
        """
        result = request.app.state.database.health_check()
        if not result["healthy"]:
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "not_ready", "checks": {"database": False}},
            )
        return {"status": "ready", "checks": {"database": True}}

    # API is accessible at /api/profiles
    app.include_router(profiles_router.router, prefix=settings.api_prefix)

    return app


app = create_app()

