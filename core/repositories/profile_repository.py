"""Profile repository."""

from core.models import Profile

from .base import BaseRepository


class ProfileRepository(BaseRepository[Profile]):
    """Repository for Profile operations over the ``profiles`` table."""

    model = Profile
