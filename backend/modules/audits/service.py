"""
Audit service implementation.

Reads audit history and the checklist, and submits new audits. A new
audit is stored as completed with its score computed from the checklist:
compliant answers over all checklist items, unanswered items counting
against the store.
"""

import logging
import time
from datetime import datetime, timezone

from shared.exceptions import DataAccessError
from modules.auth.authorization import Action, require_permission, store_scope
from modules.auth.models import Profile, UserRole
from modules.reports.metrics import compute_audit_score

from .exceptions import StoreNotAssignedError, UnknownChecklistItemError
from .interfaces import IAuditService
from .models import (
    AuditRecord,
    AuditStatus,
    AuditSubmission,
    ChecklistCategory,
    NewAuditRequest,
    PhotoUpload,
)
from .repository import AuditRepository

logger = logging.getLogger(__name__)


class AuditService(IAuditService):
    """Audit service with Supabase backend."""

    def __init__(self, repository: AuditRepository):
        self._repository = repository

    async def list_history(self, profile: Profile) -> list[AuditRecord]:
        require_permission(profile, Action.VIEW_AUDIT_HISTORY)
        try:
            return await self._repository.list_history(store_id=store_scope(profile))
        except DataAccessError as e:
            logger.error(f"Error fetching audit history: {e.message}")
            return []

    async def get_checklist(self) -> list[ChecklistCategory]:
        try:
            return await self._repository.list_checklist()
        except DataAccessError as e:
            logger.error(f"Error fetching checklist: {e.message}")
            return []

    async def submit_audit(
        self,
        profile: Profile,
        request: NewAuditRequest,
        photos: list[PhotoUpload],
    ) -> AuditSubmission:
        require_permission(profile, Action.CREATE_AUDIT)
        if (
            profile.role == UserRole.STORE_MANAGER
            and profile.store_id
            and request.store_id != profile.store_id
        ):
            raise StoreNotAssignedError(request.store_id, profile.store_id)

        # Checklist read errors propagate; the score needs the full item count
        categories = await self._repository.list_checklist()
        item_ids = {item.id for category in categories for item in category.items}

        unknown = [r.checklist_item_id for r in request.responses if r.checklist_item_id not in item_ids]
        if unknown:
            raise UnknownChecklistItemError(unknown)

        answered = [r for r in request.responses if r.compliant is not None]
        compliant = sum(1 for r in answered if r.compliant)
        score = compute_audit_score(compliant, len(item_ids))

        audit = await self._repository.create_audit({
            "store_id": request.store_id,
            "auditor_id": profile.id,
            "status": AuditStatus.COMPLETED.value,
            "score": score,
            "notes": request.notes or None,
            "completed_at": _utc_now_iso(),
        })
        logger.info(f"Audit {audit.id} recorded for store {request.store_id} with score {score}")

        saved = await self._repository.save_responses([
            {
                "audit_id": audit.id,
                "checklist_item_id": r.checklist_item_id,
                "compliant": r.compliant,
                "observation": r.observation or None,
            }
            for r in answered
        ])

        uploaded = 0
        failed = 0
        for photo in photos:
            path = f"{audit.id}/{int(time.time() * 1000)}-{photo.filename}"
            try:
                url = await self._repository.upload_photo(path, photo.content, photo.content_type)
                await self._repository.save_photo(audit.id, url)
                uploaded += 1
            except DataAccessError as e:
                logger.warning(f"Skipping photo {photo.filename} for audit {audit.id}: {e.message}")
                failed += 1

        return AuditSubmission(
            audit=audit,
            responses_saved=saved,
            photos_uploaded=uploaded,
            photos_failed=failed,
        )


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()
