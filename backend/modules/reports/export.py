"""
Report export.

Renders the per-store report as a table with rich and exports the
recorded console as a standalone HTML page or plain text.
"""

import io
from datetime import date
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .models import ExportFormat, ReportDocument, ScoreBand, StoreReport, Trend

EXPORT_WIDTH = 100

BAND_STYLES = {
    ScoreBand.EXCELLENT: "green",
    ScoreBand.GOOD: "yellow",
    ScoreBand.NEEDS_IMPROVEMENT: "red",
}

TREND_LABELS = {
    Trend.UP: "▲ up",
    Trend.DOWN: "▼ down",
    Trend.STABLE: "= stable",
}


def build_report_table(reports: list[StoreReport]) -> Table:
    """Build the per-store table, one row per store in report order."""
    table = Table(title="Store compliance report", show_lines=False)
    table.add_column("Store", style="bold")
    table.add_column("Audits", justify="right")
    table.add_column("Average", justify="right")
    table.add_column("Last audit")
    table.add_column("Trend")

    for report in reports:
        last_audit = report.last_audit_at.strftime("%Y-%m-%d") if report.last_audit_at else "-"
        table.add_row(
            report.store_name,
            str(report.total_audits),
            Text(f"{report.average_score:.1f}", style=BAND_STYLES[report.band]),
            last_audit,
            TREND_LABELS[report.trend],
        )
    return table


def render_report(
    reports: list[StoreReport],
    export_format: ExportFormat,
    today: Optional[date] = None,
) -> ReportDocument:
    """
    Render the report to a downloadable document.

    Args:
        reports: Rows from per_store_report
        export_format: HTML page or plain text
        today: Date used in the file name (defaults to today)
    """
    console = Console(record=True, file=io.StringIO(), width=EXPORT_WIDTH)
    if reports:
        console.print(build_report_table(reports))
    else:
        console.print("No completed audits with a score yet.")

    stamp = (today or date.today()).strftime("%Y%m%d")
    if export_format == ExportFormat.HTML:
        return ReportDocument(
            filename=f"store-report-{stamp}.html",
            media_type="text/html",
            content=console.export_html(inline_styles=True),
        )
    return ReportDocument(
        filename=f"store-report-{stamp}.txt",
        media_type="text/plain",
        content=console.export_text(),
    )
