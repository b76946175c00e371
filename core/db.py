"""
Database Management Layer.

Provides a DatabaseManager that owns:
- Connection pooling (PostgreSQL) / StaticPool (SQLite)
- Session management with context managers
- Auto-commit/rollback behavior

The manager is created by the application and passed to whoever needs it;
there is no module-level instance.

Usage:
    from core.db import DatabaseManager

    database = DatabaseManager()
    database.initialize("sqlite:///profiles.db")
    with database.session() as session:
        profile = session.get(Profile, 1)
    database.dispose()
"""

import time
from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

from .config import get_settings


class Base(DeclarativeBase):
    """SQLAlchemy declarative base for all models."""

    pass


class DatabaseManager:
    """
    Database manager with connection pooling and health checks.

    Features:
    - Connection pooling (QueuePool for PostgreSQL, StaticPool for SQLite)
    - Context manager for automatic commit/rollback
    - Thread-safe session factory
    - Health check support
    """

    def __init__(self) -> None:
        self.engine: Engine | None = None
        self.SessionLocal: sessionmaker | None = None
        self._initialized = False

    def initialize(self, database_url: str | None = None) -> None:
        """
        Initialize database connection. Call once at app startup.

        Args:
            database_url: Optional override. Uses settings.database_url if not provided.
        """
        if self._initialized:
            return

        settings = get_settings()
        url = database_url or settings.database_url
        is_sqlite = url.startswith("sqlite")

        if is_sqlite:
            connect_args = {"check_same_thread": False}
            pool_class: type[StaticPool | QueuePool] = StaticPool
            pool_config = {}
        else:
            connect_args = {}
            pool_class = QueuePool
            pool_config = {
                "pool_size": settings.db_pool_size,
                "max_overflow": settings.db_max_overflow,
                "pool_pre_ping": settings.db_pool_pre_ping,
            }

        self.engine = create_engine(
            url,
            poolclass=pool_class,
            connect_args=connect_args,
            echo=settings.debug,
            **pool_config,
        )

        self.SessionLocal = sessionmaker(
            bind=self.engine,
            autoflush=False,
            autocommit=False,
            expire_on_commit=False,
        )

        self._initialized = True

    def create_all_tables(self) -> None:
        """Create all tables defined by models that do not exist yet."""
        self._ensure_initialized()
        Base.metadata.create_all(bind=self.engine)

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Context manager for database sessions with auto-commit/rollback.

        Usage:
            with database.session() as session:
                profiles = ProfileRepository(session).get_all()
        """
        self._ensure_initialized()
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def health_check(self) -> dict:
        """
        Perform database health check.

        Returns:
            dict with 'healthy' (bool), 'latency_ms' (float), and 'error' (str or None)
        """
        if not self._initialized:
            return {"healthy": False, "latency_ms": 0, "error": "Database not initialized"}

        start = time.perf_counter()
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            latency = (time.perf_counter() - start) * 1000
            return {"healthy": True, "latency_ms": round(latency, 2), "error": None}
        except Exception as e:
            latency = (time.perf_counter() - start) * 1000
            return {"healthy": False, "latency_ms": round(latency, 2), "error": str(e)}

    def dispose(self) -> None:
        """Close pooled connections and return to the uninitialized state."""
        if self.engine is not None:
            self.engine.dispose()
        self.engine = None
        self.SessionLocal = None
        self._initialized = False

    def _ensure_initialized(self) -> None:
        """Raise error if not initialized."""
        if not self._initialized:
            raise RuntimeError("DatabaseManager not initialized. Call initialize() first.")


__all__ = ["Base", "DatabaseManager"]
