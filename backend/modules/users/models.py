"""
Users module data models.

Profiles themselves are modelled in modules.auth; this module adds the
management payloads.
"""

from typing import Annotated, Any, Optional
from pydantic import BaseModel, BeforeValidator, EmailStr, Field

from modules.auth.models import Profile, UserRole


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


StoreAssignment = Annotated[Optional[str], BeforeValidator(_blank_to_none)]


class UserCreate(BaseModel):
    """Create a user profile. The login itself is provisioned in Supabase Auth."""

    full_name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    role: UserRole = UserRole.STORE_MANAGER
    store_id: StoreAssignment = None


class UserUpdate(BaseModel):
    """
    Partial profile update.

    Only fields present in the request are written; an explicit null or
    empty store_id removes the store assignment.
    """

    full_name: Optional[str] = Field(None, min_length=1, max_length=200)
    email: Optional[EmailStr] = None
    role: Optional[UserRole] = None
    store_id: StoreAssignment = None


class UserList(BaseModel):
    users: list[Profile] = Field(default_factory=list)
    total: int = 0
