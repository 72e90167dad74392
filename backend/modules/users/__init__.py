"""
Users module.

Admin-only management of user profiles: listing with search and role
filters, create, update and confirmed delete.
"""

from .interfaces import IUserService
from .models import UserCreate, UserUpdate, UserList
from .exceptions import UserNotFoundError

__all__ = [
    "IUserService",
    "UserCreate",
    "UserUpdate",
    "UserList",
    "UserNotFoundError",
]
