"""
Profile service.

Business rules on top of ProfileRepository: presence checks for id-based
operations and the non-empty name rule on creation.
"""

from core.exceptions import InvalidProfileError, ProfileNotFoundError
from core.logging import get_logger
from core.models import Profile
from core.repositories import ProfileRepository

logger = get_logger("service.profile")


class ProfileService:
    """
    Profile CRUD service.

    Usage:
        with database.session() as session:
            service = ProfileService(ProfileRepository(session))
            profile = service.create_profile(name="Alice", icon="star")
    """

    def __init__(self, profile_repo: ProfileRepository):
        self.profile_repo = profile_repo

    def list_all_profiles(self) -> list[Profile]:
        return self.profile_repo.get_all()

    def get_profile_by_id(self, profile_id: int) -> Profile:
        """Return the profile or raise ProfileNotFoundError."""
        profile = self.profile_repo.get_by_id(profile_id)
        if profile is None:
            raise ProfileNotFoundError(profile_id)
        return profile

    def create_profile(self, name: str | None, icon: str | None = None) -> Profile:
        """
        Insert a new profile.

        Raises:
            InvalidProfileError: If name is missing or only whitespace.
        """
        if name is None or not name.strip():
            raise InvalidProfileError("Profile name cannot be empty")

        profile = self.profile_repo.save(Profile(name=name, icon=icon))
        logger.info("profile_created", profile_id=profile.id)
        return profile

    def update_profile(self, profile_id: int, name: str | None, icon: str | None) -> Profile:
        """
        Overwrite name and icon of an existing profile.

        The creation-time name check is not applied here, so an update may
        store an empty or null name.
        """
        profile = self.get_profile_by_id(profile_id)
        profile.name = name
        profile.icon = icon
        profile = self.profile_repo.save(profile)
        logger.info("profile_updated", profile_id=profile.id)
        return profile

    def delete_profile(self, profile_id: int) -> None:
        """Delete a profile or raise ProfileNotFoundError."""
        if not self.profile_repo.exists(profile_id):
            raise ProfileNotFoundError(profile_id)
        self.profile_repo.delete_by_id(profile_id)
        logger.info("profile_deleted", profile_id=profile_id)
