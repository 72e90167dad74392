"""
User management endpoints (admin only).
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from modules.auth.models import Profile, UserRole
from modules.users.interfaces import IUserService
from modules.users.models import UserCreate, UserList, UserUpdate
from ..dependencies import get_current_profile, get_user_service
from ..models import ErrorResponse

router = APIRouter(responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}})


@router.get("", response_model=UserList)
async def list_users(
    search: Optional[str] = Query(default=None, description="Match on full name or email"),
    role: Optional[UserRole] = Query(default=None, description="Filter by role"),
    profile: Profile = Depends(get_current_profile),
    service: IUserService = Depends(get_user_service),
) -> UserList:
    return await service.list_users(profile, search=search, role=role)


@router.post("", response_model=Profile, status_code=201)
async def create_user(
    request: UserCreate,
    profile: Profile = Depends(get_current_profile),
    service: IUserService = Depends(get_user_service),
) -> Profile:
    """
    Create a user profile.

    The matching Supabase Auth login is provisioned separately.
    """
    return await service.create_user(profile, request)


@router.patch("/{user_id}", response_model=Profile, responses={404: {"model": ErrorResponse}})
async def update_user(
    user_id: str,
    request: UserUpdate,
    profile: Profile = Depends(get_current_profile),
    service: IUserService = Depends(get_user_service),
) -> Profile:
    return await service.update_user(profile, user_id, request)


@router.delete(
    "/{user_id}",
    status_code=204,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def delete_user(
    user_id: str,
    confirm: bool = Query(default=False, description="Must be true to delete"),
    profile: Profile = Depends(get_current_profile),
    service: IUserService = Depends(get_user_service),
) -> None:
    """Delete a user profile. Requires ?confirm=true."""
    await service.delete_user(profile, user_id, confirm=confirm)
