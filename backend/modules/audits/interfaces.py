"""
Audits module interface.

The API layer depends on IAuditService for history, checklist and
new-audit submission.
"""

from typing import Protocol, runtime_checkable

from modules.auth.models import Profile

from .models import AuditRecord, AuditSubmission, ChecklistCategory, NewAuditRequest, PhotoUpload


@runtime_checkable
class IAuditService(Protocol):
    """Interface for audit operations."""

    async def list_history(self, profile: Profile) -> list[AuditRecord]:
        """
        List audits newest first.

        Store managers with an assigned store only see that store's audits.
        Read failures are logged and give an empty list.
        """
        ...

    async def get_checklist(self) -> list[ChecklistCategory]:
        """Checklist categories with items, both in display order."""
        ...

    async def submit_audit(
        self,
        profile: Profile,
        request: NewAuditRequest,
        photos: list[PhotoUpload],
    ) -> AuditSubmission:
        """
        Record a completed audit with its responses and photos.

        Raises:
            InsufficientPermissionsError: If the role cannot create audits
            StoreNotAssignedError: If a store manager targets another store
            UnknownChecklistItemError: If a response is not on the checklist
            DataAccessError: If the audit or its responses cannot be saved
        """
        ...
