"""
Audits module data models.

Audit rows are consumed by the reporting calculator and produced by the
new-audit form; checklist categories and items drive that form.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class AuditStatus(str, Enum):
    """Audit lifecycle status."""

    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class StoreRef(BaseModel):
    """Store joined onto an audit row (store:stores(...))."""

    id: Optional[str] = None
    name: str

    model_config = {"extra": "ignore"}


class AuditorRef(BaseModel):
    """Auditor profile joined onto an audit row."""

    id: str
    full_name: Optional[str] = None
    email: Optional[str] = None

    model_config = {"extra": "ignore"}


class AuditRecord(BaseModel):
    """A row from the audits table."""

    id: str = Field(..., description="Audit ID (UUID)")
    store_id: str = Field(..., description="Audited store")
    auditor_id: Optional[str] = Field(None, description="User who ran the audit")
    status: AuditStatus
    score: Optional[int] = Field(None, ge=0, le=100, description="Compliance percentage")
    notes: Optional[str] = None
    created_at: datetime
    completed_at: Optional[datetime] = None
    store: Optional[StoreRef] = None
    auditor: Optional[AuditorRef] = None

    model_config = {"extra": "ignore"}


class ChecklistItem(BaseModel):
    """A single checklist question."""

    id: str
    category_id: str
    description: str
    order_index: int = 0

    model_config = {"extra": "ignore"}


class ChecklistCategory(BaseModel):
    """A checklist section with its ordered items."""

    id: str
    name: str
    order_index: int = 0
    items: list[ChecklistItem] = Field(default_factory=list)

    model_config = {"extra": "ignore"}


class ItemResponse(BaseModel):
    """The auditor's answer to one checklist item. None means unanswered."""

    checklist_item_id: str
    compliant: Optional[bool] = None
    observation: Optional[str] = Field(None, max_length=2000)


class NewAuditRequest(BaseModel):
    """Payload of the new-audit form."""

    store_id: str = Field(..., min_length=1)
    responses: list[ItemResponse] = Field(default_factory=list)
    notes: Optional[str] = Field(None, max_length=5000)


class PhotoUpload(BaseModel):
    """A photo attached to a new audit."""

    filename: str = Field(..., min_length=1)
    content: bytes
    content_type: str = "image/jpeg"


class AuditSubmission(BaseModel):
    """Result of submitting a new audit."""

    audit: AuditRecord
    responses_saved: int = 0
    photos_uploaded: int = 0
    photos_failed: int = 0
