"""
Audit repository for database access.

Encapsulates all Supabase queries and data mapping for audit-related tables:
- audits
- audit_responses
- audit_photos
- checklist_categories / checklist_items
and uploads to the audit photo storage bucket.
"""

import logging
from typing import Any, Optional

import httpx
from supabase import AsyncClient, StorageException

from shared.exceptions import DataAccessError
from shared.repository import BaseRepository
from .models import AuditRecord, AuditStatus, ChecklistCategory

logger = logging.getLogger(__name__)

HISTORY_COLUMNS = "*, store:stores(id, name), auditor:user_profiles(id, full_name, email)"
REPORT_COLUMNS = "*, store:stores(id, name)"


class AuditRepository(BaseRepository[AuditRecord]):
    """
    Repository for audit data access.

    Note: This repository does NOT perform authorization checks.
    The service layer decides which store a caller may see.
    """

    def __init__(self, db: AsyncClient, photos_bucket: str = "audit-photos") -> None:
        super().__init__(db)
        self._photos_bucket = photos_bucket

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    async def list_history(self, store_id: Optional[str] = None) -> list[AuditRecord]:
        """List audits newest first, optionally for one store, with store and auditor."""
        query = self._db.table("audits").select(HISTORY_COLUMNS)
        if store_id:
            query = query.eq("store_id", store_id)
        result = await self._execute(query.order("created_at", desc=True), "list_audit_history")
        return [AuditRecord.model_validate(row) for row in result.data]

    async def list_completed(self) -> list[AuditRecord]:
        """List completed audits newest first with store names."""
        result = await self._execute(
            self._db.table("audits")
            .select(REPORT_COLUMNS)
            .eq("status", AuditStatus.COMPLETED.value)
            .order("created_at", desc=True),
            "list_completed_audits",
        )
        return [AuditRecord.model_validate(row) for row in result.data]

    async def list_all_with_count(self) -> tuple[list[AuditRecord], int]:
        """List every audit visible to the user plus the exact total count."""
        result = await self._execute(
            self._db.table("audits").select("*", count="exact"),
            "list_audits",
        )
        records = [AuditRecord.model_validate(row) for row in result.data]
        return records, result.count or 0

    async def count_by_status(self, status: AuditStatus) -> int:
        result = await self._execute(
            self._db.table("audits").select("id", count="exact").eq("status", status.value),
            "count_audits",
        )
        return result.count or 0

    async def list_recent(self, limit: int = 5) -> list[AuditRecord]:
        result = await self._execute(
            self._db.table("audits")
            .select(REPORT_COLUMNS)
            .order("created_at", desc=True)
            .limit(limit),
            "list_recent_audits",
        )
        return [AuditRecord.model_validate(row) for row in result.data]

    async def list_checklist(self) -> list[ChecklistCategory]:
        """Load checklist categories with their items, both in display order."""
        result = await self._execute(
            self._db.table("checklist_categories")
            .select("*, items:checklist_items(*)")
            .order("order_index"),
            "list_checklist",
        )
        categories = [ChecklistCategory.model_validate(row) for row in result.data]
        for category in categories:
            category.items.sort(key=lambda item: item.order_index)
        return categories

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    async def create_audit(self, data: dict[str, Any]) -> AuditRecord:
        """Insert an audit row and return it."""
        result = await self._execute(
            self._db.table("audits").insert(data),
            "create_audit",
        )
        return AuditRecord.model_validate(result.data[0])

    async def save_responses(self, rows: list[dict[str, Any]]) -> int:
        """Insert checklist responses in one request."""
        if not rows:
            return 0
        await self._execute(
            self._db.table("audit_responses").insert(rows),
            "save_audit_responses",
        )
        return len(rows)

    async def save_photo(self, audit_id: str, photo_url: str, caption: Optional[str] = None) -> None:
        await self._execute(
            self._db.table("audit_photos").insert({
                "audit_id": audit_id,
                "photo_url": photo_url,
                "caption": caption,
            }),
            "save_audit_photo",
        )

    async def upload_photo(self, path: str, content: bytes, content_type: str) -> str:
        """
        Upload a photo to the audit bucket.

        Returns:
            Public URL of the stored object

        Raises:
            DataAccessError: If storage rejects the upload
        """
        bucket = self._db.storage.from_(self._photos_bucket)
        try:
            await bucket.upload(path, content, {"content-type": content_type})
            return await bucket.get_public_url(path)
        except (StorageException, httpx.HTTPError) as e:
            logger.error(f"upload_photo failed for {path}: {e}")
            raise DataAccessError(
                f"upload_photo failed: {e}",
                operation="upload_photo",
                details={"path": path},
            ) from e
