"""
Reports module.

Derived metrics over audit records (averages, trends, per-store report,
dashboard figures) and report export.

Public API:
- IReportService: Interface for report reads
- StoreReport, DashboardSummary: Report models
- Trend, ScoreBand: Classifications
"""

from .interfaces import IReportService
from .models import (
    Trend,
    ScoreBand,
    StoreReport,
    DashboardStats,
    DashboardSummary,
    ExportFormat,
    ReportDocument,
)

__all__ = [
    # Interface
    "IReportService",
    # Models
    "Trend",
    "ScoreBand",
    "StoreReport",
    "DashboardStats",
    "DashboardSummary",
    "ExportFormat",
    "ReportDocument",
]
