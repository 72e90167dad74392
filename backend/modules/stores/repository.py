"""
Store repository for database access.

Encapsulates Supabase queries for the stores and zones tables.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import Store, Zone


class StoreRepository(BaseRepository[Store]):
    """Repository for store and zone data access."""

    async def list_stores(self, store_id: Optional[str] = None) -> list[Store]:
        """List stores with their zone ordered by name, optionally just one."""
        query = self._db.table("stores").select("*, zone:zones(*)")
        if store_id:
            query = query.eq("id", store_id)
        result = await self._execute(query.order("name"), "list_stores")
        return [Store.model_validate(row) for row in result.data]

    async def list_zones(self) -> list[Zone]:
        result = await self._execute(
            self._db.table("zones").select("*").order("name"),
            "list_zones",
        )
        return [Zone.model_validate(row) for row in result.data]

    async def count_stores(self) -> int:
        result = await self._execute(
            self._db.table("stores").select("id", count="exact"),
            "count_stores",
        )
        return result.count or 0

    async def create_store(self, data: dict[str, Any]) -> Store:
        result = await self._execute(
            self._db.table("stores").insert(data),
            "create_store",
        )
        return Store.model_validate(result.data[0])

    async def update_store(self, store_id: str, changes: dict[str, Any]) -> Optional[Store]:
        """
        Update a store.

        Returns:
            The updated store, or None if no row matched
        """
        result = await self._execute(
            self._db.table("stores").update(changes).eq("id", store_id),
            "update_store",
        )
        if not result.data:
            return None
        return Store.model_validate(result.data[0])

    async def delete_store(self, store_id: str) -> bool:
        """Delete a store. Returns False if no row matched."""
        result = await self._execute(
            self._db.table("stores").delete().eq("id", store_id),
            "delete_store",
        )
        return bool(result.data)
