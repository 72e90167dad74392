"""
User management service implementation.
"""

import logging
import uuid
from typing import Optional

from shared.exceptions import ConfirmationRequiredError, DataAccessError
from modules.auth.authorization import Action, require_permission
from modules.auth.models import Profile, UserRole

from .exceptions import UserNotFoundError
from .interfaces import IUserService
from .models import UserCreate, UserList, UserUpdate
from .repository import UserRepository

logger = logging.getLogger(__name__)


def filter_users(
    users: list[Profile],
    search: Optional[str] = None,
    role: Optional[UserRole] = None,
) -> list[Profile]:
    needle = search.lower() if search else None
    matched = []
    for user in users:
        if role is not None and user.role != role:
            continue
        if needle and needle not in (user.full_name or "").lower() and needle not in user.email.lower():
            continue
        matched.append(user)
    return matched


class UserService(IUserService):
    """User management with Supabase backend."""

    def __init__(self, repository: UserRepository):
        self._repository = repository

    async def list_users(
        self,
        profile: Profile,
        search: Optional[str] = None,
        role: Optional[UserRole] = None,
    ) -> UserList:
        require_permission(profile, Action.MANAGE_USERS)
        try:
            users = await self._repository.list_users()
        except DataAccessError as e:
            logger.error(f"Error fetching users: {e.message}")
            return UserList()
        matched = filter_users(users, search, role)
        return UserList(users=matched, total=len(matched))

    async def create_user(self, profile: Profile, request: UserCreate) -> Profile:
        require_permission(profile, Action.MANAGE_USERS)
        data = request.model_dump(mode="json")
        data["id"] = str(uuid.uuid4())
        user = await self._repository.create_user(data)
        logger.info(f"User profile {user.id} created by {profile.id}")
        return user

    async def update_user(self, profile: Profile, user_id: str, request: UserUpdate) -> Profile:
        require_permission(profile, Action.MANAGE_USERS)
        changes = request.model_dump(mode="json", exclude_unset=True)
        changes = {k: v for k, v in changes.items() if v is not None or k == "store_id"}
        user = await self._repository.update_user(user_id, changes)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def delete_user(self, profile: Profile, user_id: str, confirm: bool = False) -> None:
        require_permission(profile, Action.MANAGE_USERS)
        if not confirm:
            raise ConfirmationRequiredError("delete user", user_id)
        if not await self._repository.delete_user(user_id):
            raise UserNotFoundError(user_id)
        logger.info(f"User profile {user_id} deleted by {profile.id}")
