"""
Dashboard endpoint.
"""

from fastapi import APIRouter, Depends

from modules.auth.models import Profile
from modules.reports.interfaces import IReportService
from modules.reports.models import DashboardSummary
from ..dependencies import get_current_profile, get_report_service

router = APIRouter()


@router.get("", response_model=DashboardSummary)
async def get_dashboard(
    profile: Profile = Depends(get_current_profile),
    service: IReportService = Depends(get_report_service),
) -> DashboardSummary:
    """Key figures and the five most recent audits."""
    return await service.get_dashboard(profile)
