"""
Repository pattern implementations for data access.

Repositories provide a clean abstraction over database operations.

Usage:
    from core.repositories import ProfileRepository

    with database.session() as session:
        repo = ProfileRepository(session)
        profiles = repo.get_all()
"""

from .base import BaseRepository
from .profile_repository import ProfileRepository

__all__ = [
    "BaseRepository",
    "ProfileRepository",
]
