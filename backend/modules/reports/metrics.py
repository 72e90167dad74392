"""
Derived metrics over audit records.

Pure functions with no I/O: averages, trend classification, the
per-store report and dashboard figures. Rounding is half-up to one
decimal, so 79.95 shows as 80.0.
"""

from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional, Sequence

from modules.audits.models import AuditRecord, AuditStatus

from .models import DashboardStats, ScoreBand, StoreReport, Trend

TREND_WINDOW = 3
TREND_THRESHOLD = 2.0

EXCELLENT_THRESHOLD = 80
GOOD_THRESHOLD = 60

UNKNOWN_STORE_NAME = "Unknown"
ONE_DECIMAL = Decimal("0.1")


def _rounded_mean(scores: Sequence[int]) -> float:
    return float((Decimal(sum(scores)) / Decimal(len(scores))).quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP))


def _mean(values: Sequence[float]) -> Optional[float]:
    if not values:
        return None
    return sum(values) / len(values)


def average_score(records: Iterable[AuditRecord]) -> float:
    """
    Mean of the scored records, rounded half-up to one decimal.

    Records without a score are ignored. Returns 0 when nothing is scored.
    """
    scores = [r.score for r in records if r.score is not None]
    if not scores:
        return 0
    return _rounded_mean(scores)


def classify_trend(scores: Sequence[float]) -> Trend:
    """
    Compare the newest three scores against the three before them.

    Args:
        scores: Scores ordered newest first

    A missing group takes the other group's mean, which yields STABLE.
    """
    recent = _mean(scores[:TREND_WINDOW])
    older = _mean(scores[TREND_WINDOW:TREND_WINDOW * 2])
    if recent is None:
        recent = older
    if older is None:
        older = recent
    if recent is None or older is None:
        return Trend.STABLE

    if recent > older + TREND_THRESHOLD:
        return Trend.UP
    if recent < older - TREND_THRESHOLD:
        return Trend.DOWN
    return Trend.STABLE


def score_band(score: float) -> ScoreBand:
    if score >= EXCELLENT_THRESHOLD:
        return ScoreBand.EXCELLENT
    if score >= GOOD_THRESHOLD:
        return ScoreBand.GOOD
    return ScoreBand.NEEDS_IMPROVEMENT


def per_store_report(records: Iterable[AuditRecord]) -> list[StoreReport]:
    """
    Group completed, scored audits by store.

    Args:
        records: Audit records ordered newest first

    Returns:
        One row per store with at least one scored completed audit,
        sorted by average score descending

    last_audit_at comes from the newest completed audit even when that
    audit has no score.
    """
    names: dict[str, str] = {}
    last_seen: dict[str, datetime] = {}
    scores: dict[str, list[int]] = {}

    for record in records:
        if record.status != AuditStatus.COMPLETED:
            continue
        store_id = record.store.id if record.store and record.store.id else record.store_id
        if store_id not in names:
            names[store_id] = record.store.name if record.store else UNKNOWN_STORE_NAME
            last_seen[store_id] = record.created_at
            scores[store_id] = []
        if record.score is not None:
            scores[store_id].append(record.score)

    reports = []
    for store_id, store_scores in scores.items():
        if not store_scores:
            continue
        average = _rounded_mean(store_scores)
        reports.append(
            StoreReport(
                store_id=store_id,
                store_name=names[store_id],
                total_audits=len(store_scores),
                average_score=average,
                last_audit_at=last_seen[store_id],
                trend=classify_trend(store_scores),
                band=score_band(average),
            )
        )

    reports.sort(key=lambda r: r.average_score, reverse=True)
    return reports


def dashboard_stats(
    records: Iterable[AuditRecord],
    total_audits: int,
    total_stores: int,
    in_progress_audits: int,
) -> DashboardStats:
    """Dashboard figures; the average covers every scored record given."""
    return DashboardStats(
        total_audits=total_audits,
        total_stores=total_stores,
        in_progress_audits=in_progress_audits,
        average_score=average_score(records),
    )


def compute_audit_score(compliant: int, total_items: int) -> int:
    """
    Percentage of checklist items answered compliant, rounded half-up.

    Unanswered items count as non-compliant. An empty checklist scores 0.
    """
    if total_items <= 0:
        return 0
    return int((Decimal(compliant * 100) / Decimal(total_items)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
