"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from typing import Optional
from pydantic import BaseModel, Field


class Identity(BaseModel):
    """
    The signed-in user as reported by the identity provider.

    Owned and validated entirely by Supabase Auth; the console never
    sees credentials beyond the live session held by the client.
    """

    id: str = Field(..., description="User ID (UUID from Supabase)")
    email: Optional[str] = Field(None, description="User's email address")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }
