"""
Report endpoints.
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from modules.auth.models import Profile
from modules.reports.interfaces import IReportService
from modules.reports.models import ExportFormat, StoreReport
from ..dependencies import get_current_profile, get_report_service
from ..models import ErrorResponse

router = APIRouter(responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}})


@router.get("", response_model=list[StoreReport])
async def get_store_reports(
    profile: Profile = Depends(get_current_profile),
    service: IReportService = Depends(get_report_service),
) -> list[StoreReport]:
    """Per-store averages and trends, best average first."""
    return await service.get_store_reports(profile)


@router.get("/export")
async def export_store_reports(
    export_format: ExportFormat = Query(default=ExportFormat.HTML, alias="format"),
    profile: Profile = Depends(get_current_profile),
    service: IReportService = Depends(get_report_service),
) -> Response:
    """Download the per-store report as an HTML page or plain text."""
    document = await service.export_reports(profile, export_format)
    return Response(
        content=document.content,
        media_type=document.media_type,
        headers={"Content-Disposition": f'attachment; filename="{document.filename}"'},
    )
