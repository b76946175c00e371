"""
Pydantic schemas for request and response validation.
"""

from pydantic import BaseModel, ConfigDict, Field


class ProfileRequest(BaseModel):
    """
    Body for creating or updating a profile.

    ``name`` is optional at the schema level so a missing name reaches the
    service and is reported as a 400 rather than a 422. Any ``id`` sent by
    the client is ignored.
    """

    name: str | None = Field(default=None, max_length=255)
    icon: str | None = Field(default=None, max_length=255)


class ProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str | None = None
    icon: str | None = None


class ErrorResponse(BaseModel):
    detail: str
    status_code: int
