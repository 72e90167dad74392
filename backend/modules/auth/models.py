"""
Authentication module data models.

These models define the session and profile structures owned by the
auth module and exposed to other modules through the interface.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, EmailStr

from shared.models import Identity


class UserRole(str, Enum):
    """Application roles stored on user_profiles.role."""

    ADMIN = "admin"
    SUPERVISOR = "supervisor"
    STORE_MANAGER = "encargada"


class SessionState(str, Enum):
    """Lifecycle of the session store."""

    UNINITIALIZED = "uninitialized"      # No provider event seen yet
    LOADING = "loading"                  # Identity known, profile fetch outstanding
    AUTHENTICATED = "authenticated"      # Identity known, profile fetch finished
    UNAUTHENTICATED = "unauthenticated"  # No identity


class StoreSummary(BaseModel):
    """Store joined onto a profile (store:stores(*))."""

    id: str
    name: str
    address: Optional[str] = None
    zone_id: Optional[str] = None

    model_config = {"extra": "ignore"}


class Profile(BaseModel):
    """
    Application-level user record from user_profiles.

    Distinct from the raw identity: carries the role and the
    optional store assignment that drive authorization.
    """

    id: str = Field(..., description="User ID (UUID)")
    email: str = Field(..., description="Email address")
    full_name: str = Field(..., description="Display name")
    role: UserRole = Field(..., description="Application role")
    store_id: Optional[str] = Field(None, description="Assigned store, if any")
    store: Optional[StoreSummary] = Field(None, description="Assigned store details")
    created_at: Optional[datetime] = Field(None, description="Profile creation time")

    model_config = {"extra": "ignore"}


class ProfileUpdate(BaseModel):
    """Changes the signed-in user may make to their own profile."""

    full_name: Optional[str] = Field(None, min_length=1, max_length=200)
    email: Optional[EmailStr] = None


class SignInRequest(BaseModel):
    """Credentials forwarded to the identity provider."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class SessionSnapshot(BaseModel):
    """Read-only view of the session store at one point in time."""

    state: SessionState
    loading: bool
    identity: Optional[Identity] = None
    profile: Optional[Profile] = None

    @property
    def is_authenticated(self) -> bool:
        return self.identity is not None
