"""
FastAPI dependency injection module.

Provides centralized dependencies for:
- Database sessions
- Repositories
- Services
"""

from collections.abc import Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from core.db import DatabaseManager
from core.repositories import ProfileRepository
from core.services import ProfileService


def get_database(request: Request) -> DatabaseManager:
    """Get the DatabaseManager owned by the running application."""
    return request.app.state.database


def get_db(database: DatabaseManager = Depends(get_database)) -> Generator[Session, None, None]:
    """
    Yield a session scoped to the request.

    Commits when the handler returns normally, rolls back if it raises.
    """
    with database.session() as session:
        yield session


# =============================================================================
# Repository Dependencies
# =============================================================================


def get_profile_repository(db: Session = Depends(get_db)) -> ProfileRepository:
    """Get ProfileRepository instance."""
    return ProfileRepository(db)


# =============================================================================
# Service Dependencies
# =============================================================================


def get_profile_service(
    profile_repo: ProfileRepository = Depends(get_profile_repository),
) -> ProfileService:
    """Get ProfileService instance with injected repository."""
    return ProfileService(profile_repo)


__all__ = [
    "get_database",
    "get_db",
    "get_profile_repository",
    "get_profile_service",
]
