"""
Audits module.

Audit history, the compliance checklist, and new-audit submission with
photo uploads.

Public API:
- IAuditService: Interface for audit operations
- AuditRecord: Audit row with joined store and auditor
- NewAuditRequest, ItemResponse, PhotoUpload: Submission inputs
"""

from .interfaces import IAuditService
from .models import (
    AuditStatus,
    AuditRecord,
    StoreRef,
    AuditorRef,
    ChecklistItem,
    ChecklistCategory,
    ItemResponse,
    NewAuditRequest,
    PhotoUpload,
    AuditSubmission,
)
from .exceptions import StoreNotAssignedError, UnknownChecklistItemError

__all__ = [
    # Interface
    "IAuditService",
    # Models
    "AuditStatus",
    "AuditRecord",
    "StoreRef",
    "AuditorRef",
    "ChecklistItem",
    "ChecklistCategory",
    "ItemResponse",
    "NewAuditRequest",
    "PhotoUpload",
    "AuditSubmission",
    # Exceptions
    "StoreNotAssignedError",
    "UnknownChecklistItemError",
]
