"""
Console summary generator built on rich.

Prints the report header, one table row per test case and the log steps
beneath it. Counts are plain tallies of the statuses the caller set.
"""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..errors import GenerationError
from ..model import Status
from .base import ReportGenerator

if TYPE_CHECKING:
    from ..api import VisionReport
    from ..model import TestCase

logger = logging.getLogger(__name__)

STATUS_STYLES = {
    Status.PASS: "green",
    Status.FAIL: "red",
    Status.SKIP: "dim",
    Status.INFO: "cyan",
    Status.WARNING: "yellow",
}


class ConsoleReportGenerator(ReportGenerator):
    """
    Renders a human-readable summary to a rich Console.

    Args:
        console: Console to print to (a new one if omitted)
        export_path: If given, the printed text is also saved to this file
    """

    def __init__(self, console: Console | None = None, export_path: str | Path | None = None):
        self.export_path = Path(export_path) if export_path else None
        self.console = console or Console()
        # save_text only works on a recording console
        if self.export_path is not None:
            self.console.record = True

    def generate(self, report: VisionReport) -> Path | None:
        test_cases = report.test_cases

        self.console.print(self._header(report))
        self.console.print(self._test_table(test_cases))
        for test_case in test_cases:
            self._print_logs(test_case)
        self.console.print(f"  {_tally(test_cases)}")

        if self.export_path is None:
            return None

        try:
            self.export_path.parent.mkdir(parents=True, exist_ok=True)
            self.console.save_text(str(self.export_path))
        except OSError as e:
            raise GenerationError(f"Failed to save console report to {self.export_path}: {e}") from e

        logger.info(f"Saved console report: {self.export_path}")
        return self.export_path

    def _header(self, report: VisionReport) -> Panel:
        analysts = ", ".join(sorted(report.business_analysts)) or "N/A"
        body = "\n".join([
            f"[bold]Type:[/bold]        {report.report_type.value}",
            f"[bold]Project:[/bold]     {escape(report.project_name)}",
            f"[bold]Application:[/bold] {escape(report.application_name)}",
            f"[bold]Environment:[/bold] {escape(report.environment)}",
            f"[bold]Domain:[/bold]      {escape(report.domain)}",
            f"[bold]Tester:[/bold]      {escape(report.tester_name)}",
            f"[bold]Analysts:[/bold]    {escape(analysts)}",
        ])
        return Panel(body, title=f"[bold]{escape(report.title)}[/bold]", border_style="cyan")

    def _test_table(self, test_cases: list[TestCase]) -> Table:
        table = Table(title="Test Cases")
        table.add_column("ID", style="cyan")
        table.add_column("Name")
        table.add_column("Status")
        table.add_column("Tags", style="magenta")
        table.add_column("Logs", justify="right")

        for test_case in test_cases:
            table.add_row(
                escape(str(test_case.test_id)),
                escape(test_case.name),
                _status_label(test_case.status),
                escape(", ".join(sorted(test_case.tags))),
                str(len(test_case.logs)),
            )
        return table

    def _print_logs(self, test_case: TestCase) -> None:
        logs = test_case.logs
        if not logs:
            return
        self.console.print(f"[bold]{escape(str(test_case.test_id))}[/bold] {escape(test_case.name)}")
        for log in logs:
            self.console.print(
                f"  {_status_icon(log.status)} {escape(f'[{log.log_id}]')} "
                f"{escape(log.name)} - {escape(log.message)}",
                highlight=False,
            )
            if log.media is not None:
                kind = "link" if log.media.is_url else "embedded"
                self.console.print(f"      └─ 📎 {kind} media", highlight=False)


def _tally(test_cases: list[TestCase]) -> str:
    counts = Counter(test_case.status for test_case in test_cases)
    parts = [f"{counts.get(status, 0)} {status.value}" for status in Status]
    return f"Tests: {len(test_cases)} total, " + ", ".join(parts)


def _status_label(status: Status | str) -> str:
    try:
        status = Status(status)
    except ValueError:
        # set_status stores whatever the caller passes
        return f"{_status_icon(status)} {escape(str(status).upper())}"
    style = STATUS_STYLES[status]
    return f"{_status_icon(status)} [{style}]{status.value.upper()}[/{style}]"


def _status_icon(status: Status) -> str:
    """Get icon for a test or log status."""
    return {
        Status.PASS: "✅",
        Status.FAIL: "❌",
        Status.SKIP: "⏭️",
        Status.INFO: "ℹ️",
        Status.WARNING: "⚠️",
    }.get(status, "❓")
