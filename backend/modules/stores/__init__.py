"""
Stores module.

Store directory with zones, and admin-only store management.

Public API:
- IStoreService: Interface for store operations
- Store, Zone: Models
"""

from .interfaces import IStoreService
from .models import Zone, Store, StoreCreate, StoreUpdate, StoreDirectory
from .exceptions import StoreNotFoundError

__all__ = [
    # Interface
    "IStoreService",
    # Models
    "Zone",
    "Store",
    "StoreCreate",
    "StoreUpdate",
    "StoreDirectory",
    # Exceptions
    "StoreNotFoundError",
]
