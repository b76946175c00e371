"""
Domain errors raised by the service layer.

These are plain exceptions; the HTTP layer maps them to status codes in
backend.app.error_handlers.
"""


class ProfileError(Exception):
    """Base class for profile domain errors."""


class ProfileNotFoundError(ProfileError):
    """No profile exists with the requested id."""

    def __init__(self, profile_id: int):
        self.profile_id = profile_id
        super().__init__(f"Profile not found with id: {profile_id}")


class InvalidProfileError(ProfileError):
    """Profile input failed validation."""

    def __init__(self, message: str = "Profile name cannot be empty"):
        super().__init__(message)


__all__ = ["ProfileError", "ProfileNotFoundError", "InvalidProfileError"]
