"""
Audit endpoints.

History, the checklist that drives the new-audit form, the stores the
user may audit, and submission of a completed audit with photos.
"""

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from pydantic import ValidationError as PydanticValidationError

from modules.audits.interfaces import IAuditService
from modules.audits.models import (
    AuditRecord,
    AuditSubmission,
    ChecklistCategory,
    NewAuditRequest,
    PhotoUpload,
)
from modules.auth.models import Profile
from modules.stores.interfaces import IStoreService
from modules.stores.models import Store
from ..dependencies import get_audit_service, get_current_profile, get_store_service
from ..models import ErrorResponse

router = APIRouter(responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}})


@router.get("", response_model=list[AuditRecord])
async def list_audits(
    profile: Profile = Depends(get_current_profile),
    service: IAuditService = Depends(get_audit_service),
) -> list[AuditRecord]:
    """
    Audit history, newest first.

    Store managers only see audits of their assigned store.
    """
    return await service.list_history(profile)


@router.get("/checklist", response_model=list[ChecklistCategory])
async def get_checklist(
    profile: Profile = Depends(get_current_profile),
    service: IAuditService = Depends(get_audit_service),
) -> list[ChecklistCategory]:
    return await service.get_checklist()


@router.get("/stores", response_model=list[Store])
async def list_auditable_stores(
    profile: Profile = Depends(get_current_profile),
    service: IStoreService = Depends(get_store_service),
) -> list[Store]:
    """Stores offered by the new-audit form."""
    return await service.list_auditable_stores(profile)


@router.post("", response_model=AuditSubmission, status_code=201)
async def submit_audit(
    payload: str = Form(..., description="NewAuditRequest as JSON"),
    photos: list[UploadFile] = File(default=[]),
    profile: Profile = Depends(get_current_profile),
    service: IAuditService = Depends(get_audit_service),
) -> AuditSubmission:
    """
    Submit a completed audit.

    Multipart form with a `payload` JSON field and any number of `photos`
    files. Photos that fail to upload are skipped and counted in
    photos_failed; the audit itself is still recorded.
    """
    try:
        request = NewAuditRequest.model_validate_json(payload)
    except PydanticValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False))

    uploads = [
        PhotoUpload(
            filename=photo.filename or "photo",
            content=await photo.read(),
            content_type=photo.content_type or "application/octet-stream",
        )
        for photo in photos
    ]
    return await service.submit_audit(profile, request, uploads)
