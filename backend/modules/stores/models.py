"""
Stores module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class Zone(BaseModel):
    """A geographic grouping of stores."""

    id: str
    name: str
    created_at: Optional[datetime] = None

    model_config = {"extra": "ignore"}


class Store(BaseModel):
    """A row from the stores table with its zone."""

    id: str
    name: str
    address: str = ""
    zone_id: Optional[str] = None
    zone: Optional[Zone] = None
    created_at: Optional[datetime] = None

    model_config = {"extra": "ignore"}


class StoreCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    address: str = Field(..., min_length=1, max_length=500)
    zone_id: str = Field(..., min_length=1)


class StoreUpdate(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    address: Optional[str] = Field(None, min_length=1, max_length=500)
    zone_id: Optional[str] = Field(None, min_length=1)


class StoreDirectory(BaseModel):
    """Stores page payload: stores with zones plus the zone list for the form."""

    stores: list[Store] = Field(default_factory=list)
    zones: list[Zone] = Field(default_factory=list)
