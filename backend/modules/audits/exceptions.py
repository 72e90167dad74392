"""
Audits module exceptions.
"""

from shared.exceptions import AuthorizationError, ValidationError


class StoreNotAssignedError(AuthorizationError):
    """Raised when a store manager audits a store other than their own."""

    def __init__(self, store_id: str, assigned_store_id: str):
        super().__init__(
            f"You can only audit your assigned store: {assigned_store_id}",
            code="STORE_NOT_ASSIGNED",
            details={"store_id": store_id, "assigned_store_id": assigned_store_id},
        )


class UnknownChecklistItemError(ValidationError):
    """Raised when a response references an item not on the checklist."""

    def __init__(self, item_ids: list[str]):
        super().__init__(
            f"Unknown checklist items: {', '.join(item_ids)}",
            code="UNKNOWN_CHECKLIST_ITEM",
            details={"checklist_item_ids": item_ids},
        )
