"""
Profile CRUD endpoints.

Handlers translate HTTP to ProfileService calls. Domain errors are not caught
here; error_handlers maps them to 404/400.
"""

from fastapi import APIRouter, Depends, Response, status

from core.services import ProfileService

from ..dependencies import get_profile_service
from ..schemas import ErrorResponse, ProfileRequest, ProfileResponse

router = APIRouter(prefix="/profiles", tags=["profiles"])

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


@router.get("", response_model=list[ProfileResponse])
def list_profiles(service: ProfileService = Depends(get_profile_service)):
    return service.list_all_profiles()


@router.get("/{profile_id}", response_model=ProfileResponse, responses=NOT_FOUND)
def get_profile(profile_id: int, service: ProfileService = Depends(get_profile_service)):
    return service.get_profile_by_id(profile_id)


@router.post(
    "",
    response_model=ProfileResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
def create_profile(
    payload: ProfileRequest,
    service: ProfileService = Depends(get_profile_service),
):
    """Create a profile. The name must contain a non-whitespace character."""
    return service.create_profile(name=payload.name, icon=payload.icon)


@router.put("/{profile_id}", response_model=ProfileResponse, responses=NOT_FOUND)
def update_profile(
    profile_id: int,
    payload: ProfileRequest,
    service: ProfileService = Depends(get_profile_service),
):
    """Replace name and icon of an existing profile."""
    return service.update_profile(profile_id, name=payload.name, icon=payload.icon)


@router.delete(
    "/{profile_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
)
def delete_profile(profile_id: int, service: ProfileService = Depends(get_profile_service)):
    service.delete_profile(profile_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
