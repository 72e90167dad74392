"""
Reports module data models.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from modules.audits.models import AuditRecord


class Trend(str, Enum):
    """Direction of a store's recent scores against its older ones."""

    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class ScoreBand(str, Enum):
    """Traffic-light classification of a compliance score."""

    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_IMPROVEMENT = "needs_improvement"


class StoreReport(BaseModel):
    """Per-store row of the reports page."""

    store_id: str
    store_name: str
    total_audits: int = Field(..., ge=1, description="Number of scored completed audits")
    average_score: float = Field(..., description="Mean score rounded to one decimal")
    last_audit_at: Optional[datetime] = None
    trend: Trend = Trend.STABLE
    band: ScoreBand = ScoreBand.NEEDS_IMPROVEMENT


class DashboardStats(BaseModel):
    """Dashboard key figures."""

    total_audits: int = 0
    total_stores: int = 0
    in_progress_audits: int = 0
    average_score: float = 0


class DashboardSummary(BaseModel):
    """Dashboard figures plus the most recent audits."""

    stats: DashboardStats = Field(default_factory=DashboardStats)
    recent_audits: list[AuditRecord] = Field(default_factory=list)


class ExportFormat(str, Enum):
    HTML = "html"
    TEXT = "text"


class ReportDocument(BaseModel):
    """A rendered report ready to download."""

    filename: str
    media_type: str
    content: str
