"""
Reports module interface.
"""

from typing import Protocol, runtime_checkable

from modules.auth.models import Profile

from .models import DashboardSummary, ExportFormat, ReportDocument, StoreReport


@runtime_checkable
class IReportService(Protocol):
    """Interface for dashboard and report reads. Read failures degrade to empty results."""

    async def get_store_reports(self, profile: Profile) -> list[StoreReport]:
        ...

    async def get_dashboard(self, profile: Profile) -> DashboardSummary:
        ...

    async def export_reports(self, profile: Profile, export_format: ExportFormat) -> ReportDocument:
        """
        Render the per-store report for download.

        Raises:
            InsufficientPermissionsError: If the role cannot export reports
        """
        ...
