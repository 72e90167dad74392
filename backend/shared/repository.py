"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and translating backend failures into
DataAccessError.
"""

import logging
from typing import Any, TypeVar, Generic

import httpx
from supabase import AsyncClient, PostgrestAPIError

from .exceptions import DataAccessError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - _execute() to run a query and map failures to DataAccessError
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class StoreRepository(BaseRepository[Store]):
            async def list_stores(self) -> list[Store]:
                result = await self._execute(
                    self._db.table("stores").select("*").order("name"),
                    "list_stores",
                )
                return [Store(**row) for row in result.data]
    """

    def __init__(self, db: AsyncClient) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    async def _execute(self, query: Any, operation: str) -> Any:
        """
        Execute a query builder and return its response.

        Args:
            query: A postgrest request builder ready to execute
            operation: Short name of the operation, for logs and errors

        Raises:
            DataAccessError: If the backend rejects the query or is unreachable
        """
        try:
            return await query.execute()
        except PostgrestAPIError as e:
            logger.error(f"{operation} failed: {e.message}")
            raise DataAccessError(
                f"{operation} failed: {e.message}",
                operation=operation,
                details={"backend_code": e.code},
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"{operation} failed: {e}")
            raise DataAccessError(
                f"{operation} failed: backend unreachable",
                operation=operation,
            ) from e
