"""End-of-run summary: plain text block or rich table."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from packguard.pipeline import PipelineReport

_TITLES = {
    "image_count": "Images per directory",
    "file_size": "Image file size",
    "extension": "Image extensions",
}


def _title(name: str) -> str:
    return _TITLES.get(name, name)


def format_summary_text(report: PipelineReport) -> str:
    """Plain summary, one line per check plus an overall verdict."""
    lines = ["", f"PACK IMAGES: {report.base_path} ({report.entries} entries)"]
    for r in report.results:
        status = "PASS" if r.passed else f"FAIL ({len(r.violations)})"
        lines.append(f"  {_title(r.name)}: {status}")
    lines.append("Result: " + ("PASS" if report.passed else "FAIL"))
    return "\n".join(lines)


def build_summary_table(report: PipelineReport) -> Table:
    table = Table(title=f"Pack images: {report.base_path}", title_justify="left")
    table.add_column("Check")
    table.add_column("Status")
    table.add_column("Violations", justify="right")
    for r in report.results:
        status = "[green]PASS[/green]" if r.passed else "[bold red]FAIL[/bold red]"
        table.add_row(_title(r.name), status, str(len(r.violations)))
    return table


def render_summary(report: PipelineReport, console: Console) -> None:
    console.print(build_summary_table(report))
    verdict = "[bold green]PASS[/bold green]" if report.passed else "[bold red]FAIL[/bold red]"
    console.print(f"{report.entries} entries scanned. Result: {verdict}")
