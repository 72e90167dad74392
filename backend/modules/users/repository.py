"""
User repository for database access.

Encapsulates Supabase queries for user_profiles management. Reads of the
signed-in user's own profile live in modules.auth.repository.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from modules.auth.models import Profile

PROFILE_COLUMNS = "*, store:stores(*)"


class UserRepository(BaseRepository[Profile]):
    """Repository for user profile management."""

    async def list_users(self) -> list[Profile]:
        result = await self._execute(
            self._db.table("user_profiles").select(PROFILE_COLUMNS).order("full_name"),
            "list_users",
        )
        return [Profile.model_validate(row) for row in result.data]

    async def create_user(self, data: dict[str, Any]) -> Profile:
        result = await self._execute(
            self._db.table("user_profiles").insert(data),
            "create_user",
        )
        return Profile.model_validate(result.data[0])

    async def update_user(self, user_id: str, changes: dict[str, Any]) -> Optional[Profile]:
        """Returns None if no profile matched."""
        result = await self._execute(
            self._db.table("user_profiles").update(changes).eq("id", user_id),
            "update_user",
        )
        if not result.data:
            return None
        return Profile.model_validate(result.data[0])

    async def delete_user(self, user_id: str) -> bool:
        result = await self._execute(
            self._db.table("user_profiles").delete().eq("id", user_id),
            "delete_user",
        )
        return bool(result.data)
