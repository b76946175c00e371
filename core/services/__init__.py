"""
Core services with business logic.

Services wrap repositories and raise domain errors from core.exceptions.
"""

from core.services.profile_service import ProfileService

__all__ = [
    "ProfileService",
]
