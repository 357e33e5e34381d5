"""
Terminal run summary for METAR Scraper.

Uses Rich to show what happened to each station during a run.
"""

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich import box

from metar_scraper.core.models import ResultStatus, RunSummary, StationResult

STATUS_STYLES = {
    ResultStatus.ARCHIVED: "green",
    ResultStatus.UNCHANGED: "dim",
    ResultStatus.NO_DATA: "yellow",
    ResultStatus.FAILED: "bold red",
}


def describe_result(result: StationResult) -> str:
    """One-line detail for a station result."""
    if result.status == ResultStatus.ARCHIVED and result.archived_path:
        return result.archived_path.name
    if result.status == ResultStatus.FAILED and result.error is not None:
        return f"{type(result.error).__name__}: {result.error}"
    if result.bulletin is not None:
        return result.bulletin.text
    return ""


def build_summary_table(summary: RunSummary) -> Table:
    """Create the per-station results table."""
    table = Table(title="METAR Scraper Run", box=box.SIMPLE, expand=True)
    table.add_column("Station")
    table.add_column("Status")
    table.add_column("Detail", overflow="fold")

    for result in summary.results:
        style = STATUS_STYLES.get(result.status, "")
        table.add_row(
            result.source.station_code.upper(),
            Text(result.status.value, style=style),
            Text(describe_result(result)),
        )

    return table


def render_summary(summary: RunSummary, console: Optional[Console] = None) -> None:
    """Print the run summary table."""
    console = console or Console()
    console.print(build_summary_table(summary))

    if summary.started_at and summary.finished_at:
        elapsed = (summary.finished_at - summary.started_at).total_seconds()
        console.print(f"[dim]{len(summary.results)} station(s) in {elapsed:.1f}s[/dim]")
