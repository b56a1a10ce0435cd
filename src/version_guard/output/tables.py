"""Rich table builders for each command."""

from __future__ import annotations

from rich.markup import escape
from rich.table import Table

from version_guard.models.report import ConsistencyReport
from version_guard.models.source import SourceSpec
from version_guard.output.themes import styled_kind


def report_table(report: ConsistencyReport) -> Table:
    mismatched = {s.name for s in report.mismatches}
    reference = report.reference.name if report.reference else ""

    table = Table(title=f"Version Consistency ({styled_kind(report.kind)})", expand=True)
    table.add_column("", width=3, no_wrap=True)
    table.add_column("Source", style="cyan", no_wrap=True)
    table.add_column("Location", style="dim")
    table.add_column("Version", style="bold")

    for s in report.sources:
        if s.name == reference:
            marker = "[blue]*[/blue]"
        elif s.name in mismatched:
            marker = "[red bold]X[/red bold]"
        else:
            marker = "[green]ok[/green]"
        table.add_row(marker, s.name, escape(s.path), escape(s.value))
    return table


def sources_table(rows: list[tuple[SourceSpec, str | None]]) -> Table:
    table = Table(title="Known Version Sources", expand=True)
    table.add_column("Source", style="cyan", no_wrap=True)
    table.add_column("Kind", style="magenta", no_wrap=True)
    table.add_column("Location", style="dim")
    table.add_column("Version", style="bold")

    for spec, value in rows:
        shown = escape(value) if value is not None else "[dim]-[/dim]"
        table.add_row(spec.name, spec.kind.value, escape(spec.label), shown)
    return table
