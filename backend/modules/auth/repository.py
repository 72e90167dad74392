"""
Profile repository for database access.

Encapsulates Supabase queries against user_profiles for the signed-in user.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import Profile

PROFILE_COLUMNS = "*, store:stores(*)"


class ProfileRepository(BaseRepository[Profile]):
    """
    Repository for the signed-in user's profile row.

    Note: Row Level Security decides what the current user may read;
    a denied read surfaces as DataAccessError.
    """

    async def get_profile(self, user_id: str) -> Optional[Profile]:
        """
        Get a profile by user ID with its assigned store.

        Returns:
            Profile if the row exists, None otherwise.
        """
        result = await self._execute(
            self._db.table("user_profiles").select(PROFILE_COLUMNS).eq("id", user_id).limit(1),
            "get_profile",
        )
        if not result.data:
            return None
        return Profile.model_validate(result.data[0])

    async def update_profile(self, user_id: str, changes: dict[str, Any]) -> Optional[Profile]:
        """
        Apply changes to a profile and return the fresh row.

        Returns:
            Updated Profile, or None if no row matched.
        """
        await self._execute(
            self._db.table("user_profiles").update(changes).eq("id", user_id),
            "update_profile",
        )
        return await self.get_profile(user_id)
