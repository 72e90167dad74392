"""
Stores module interface.
"""

from typing import Optional, Protocol, runtime_checkable

from modules.auth.models import Profile

from .models import Store, StoreCreate, StoreDirectory, StoreUpdate, Zone


@runtime_checkable
class IStoreService(Protocol):
    """Interface for store management. Writes are restricted to admins."""

    async def get_directory(self, profile: Profile, search: Optional[str] = None) -> StoreDirectory:
        """Stores with zones (filtered by name or address) and all zones."""
        ...

    async def list_zones(self) -> list[Zone]:
        ...

    async def list_auditable_stores(self, profile: Profile) -> list[Store]:
        """Stores the user may audit: a store manager only gets their own store."""
        ...

    async def create_store(self, profile: Profile, request: StoreCreate) -> Store:
        ...

    async def update_store(self, profile: Profile, store_id: str, request: StoreUpdate) -> Store:
        """
        Raises:
            StoreNotFoundError: If no store has this id
        """
        ...

    async def delete_store(self, profile: Profile, store_id: str, confirm: bool = False) -> None:
        """
        Delete a store.

        Raises:
            ConfirmationRequiredError: If confirm is not set
            StoreNotFoundError: If no store has this id
        """
        ...
