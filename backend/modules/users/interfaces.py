"""
Users module interface.

All operations are restricted to admins.
"""

from typing import Optional, Protocol, runtime_checkable

from modules.auth.models import Profile, UserRole

from .models import UserCreate, UserList, UserUpdate


@runtime_checkable
class IUserService(Protocol):
    """Interface for user profile management."""

    async def list_users(
        self,
        profile: Profile,
        search: Optional[str] = None,
        role: Optional[UserRole] = None,
    ) -> UserList:
        """
        List profiles ordered by full name.

        Args:
            search: Case-insensitive match on full name or email
            role: Only return this role
        """
        ...

    async def create_user(self, profile: Profile, request: UserCreate) -> Profile:
        ...

    async def update_user(self, profile: Profile, user_id: str, request: UserUpdate) -> Profile:
        ...

    async def delete_user(self, profile: Profile, user_id: str, confirm: bool = False) -> None:
        """
        Raises:
            ConfirmationRequiredError: If confirm is not set
            UserNotFoundError: If no profile has this id
        """
        ...
