"""
SQLAlchemy models for the profile service.

Usage:
    from core.models import Profile
"""

from core.db import Base

from .profile import Profile

__all__ = [
    "Base",
    "Profile",
]
