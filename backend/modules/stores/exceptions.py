"""
Stores module exceptions.
"""

from shared.exceptions import NotFoundError


class StoreNotFoundError(NotFoundError):
    """Raised when a store doesn't exist or is not visible to the user."""

    def __init__(self, store_id: str):
        super().__init__(
            f"Store not found: {store_id}",
            code="STORE_NOT_FOUND",
            details={"store_id": store_id},
        )
