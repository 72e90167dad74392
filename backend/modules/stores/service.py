"""
Store service implementation.

Everyone may read the store directory; only admins create, edit or
delete stores, and deletes must be confirmed explicitly.
"""

import asyncio
import logging
from typing import Optional

from shared.exceptions import ConfirmationRequiredError, DataAccessError
from modules.auth.authorization import Action, require_permission, store_scope
from modules.auth.models import Profile

from .exceptions import StoreNotFoundError
from .interfaces import IStoreService
from .models import Store, StoreCreate, StoreDirectory, StoreUpdate, Zone
from .repository import StoreRepository

logger = logging.getLogger(__name__)


def filter_stores(stores: list[Store], search: Optional[str]) -> list[Store]:
    """Case-insensitive match on name or address."""
    if not search:
        return stores
    needle = search.lower()
    return [s for s in stores if needle in s.name.lower() or needle in s.address.lower()]


class StoreService(IStoreService):
    """Store service with Supabase backend."""

    def __init__(self, repository: StoreRepository):
        self._repository = repository

    async def get_directory(self, profile: Profile, search: Optional[str] = None) -> StoreDirectory:
        try:
            stores, zones = await asyncio.gather(
                self._repository.list_stores(),
                self._repository.list_zones(),
            )
        except DataAccessError as e:
            logger.error(f"Error fetching stores: {e.message}")
            return StoreDirectory()
        return StoreDirectory(stores=filter_stores(stores, search), zones=zones)

    async def list_zones(self) -> list[Zone]:
        try:
            return await self._repository.list_zones()
        except DataAccessError as e:
            logger.error(f"Error fetching zones: {e.message}")
            return []

    async def list_auditable_stores(self, profile: Profile) -> list[Store]:
        try:
            return await self._repository.list_stores(store_id=store_scope(profile))
        except DataAccessError as e:
            logger.error(f"Error fetching auditable stores: {e.message}")
            return []

    async def create_store(self, profile: Profile, request: StoreCreate) -> Store:
        require_permission(profile, Action.MANAGE_STORES)
        store = await self._repository.create_store(request.model_dump())
        logger.info(f"Store {store.id} created by {profile.id}")
        return store

    async def update_store(self, profile: Profile, store_id: str, request: StoreUpdate) -> Store:
        require_permission(profile, Action.MANAGE_STORES)
        store = await self._repository.update_store(store_id, request.model_dump(exclude_none=True))
        if store is None:
            raise StoreNotFoundError(store_id)
        return store

    async def delete_store(self, profile: Profile, store_id: str, confirm: bool = False) -> None:
        require_permission(profile, Action.MANAGE_STORES)
        if not confirm:
            raise ConfirmationRequiredError("delete store", store_id)
        if not await self._repository.delete_store(store_id):
            raise StoreNotFoundError(store_id)
        logger.info(f"Store {store_id} deleted by {profile.id}")
