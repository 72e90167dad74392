"""
Report service implementation.

Loads audits from Supabase and hands them to the metrics functions.
"""

import asyncio
import logging

from shared.exceptions import DataAccessError
from modules.audits.models import AuditStatus
from modules.audits.repository import AuditRepository
from modules.auth.authorization import Action, require_permission
from modules.auth.models import Profile
from modules.stores.repository import StoreRepository

from .export import render_report
from .interfaces import IReportService
from .metrics import dashboard_stats, per_store_report
from .models import DashboardSummary, ExportFormat, ReportDocument, StoreReport

logger = logging.getLogger(__name__)

RECENT_AUDITS_LIMIT = 5


class ReportService(IReportService):
    """Report service with Supabase backend."""

    def __init__(self, audits: AuditRepository, stores: StoreRepository):
        self._audits = audits
        self._stores = stores

    async def get_store_reports(self, profile: Profile) -> list[StoreReport]:
        require_permission(profile, Action.VIEW_REPORTS)
        try:
            records = await self._audits.list_completed()
        except DataAccessError as e:
            logger.error(f"Error fetching reports: {e.message}")
            return []
        return per_store_report(records)

    async def get_dashboard(self, profile: Profile) -> DashboardSummary:
        """Run the four dashboard queries concurrently; any failure gives an empty dashboard."""
        require_permission(profile, Action.VIEW_DASHBOARD)
        try:
            (records, total_audits), total_stores, in_progress, recent = await asyncio.gather(
                self._audits.list_all_with_count(),
                self._stores.count_stores(),
                self._audits.count_by_status(AuditStatus.IN_PROGRESS),
                self._audits.list_recent(RECENT_AUDITS_LIMIT),
            )
        except DataAccessError as e:
            logger.error(f"Error fetching dashboard stats: {e.message}")
            return DashboardSummary()

        return DashboardSummary(
            stats=dashboard_stats(records, total_audits, total_stores, in_progress),
            recent_audits=recent,
        )

    async def export_reports(self, profile: Profile, export_format: ExportFormat) -> ReportDocument:
        require_permission(profile, Action.EXPORT_REPORTS)
        reports = await self.get_store_reports(profile)
        logger.info(f"Exporting {len(reports)} store rows as {export_format.value}")
        return render_report(reports, export_format)
