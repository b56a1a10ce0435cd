"""Table / JSON / YAML / text output dispatch."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console
from rich.markup import escape

from version_guard.core.checker import render, summary_lines
from version_guard.models import ReportKind
from version_guard.models.report import ConsistencyReport
from version_guard.models.source import SourceSpec
from version_guard.output.themes import KIND_COLORS

console = Console()


def output_report(report: ConsistencyReport, fmt: str) -> int:
    """Print ``report`` in ``fmt`` and return the exit code."""
    text, exit_code = render(report)
    if fmt == "json":
        console.print_json(json.dumps(report.to_dict(), indent=2))
    elif fmt == "yaml":
        console.print(escape(yaml.dump(report.to_dict(), default_flow_style=False, sort_keys=False)), soft_wrap=True)
    elif fmt == "text":
        console.print(escape(text), highlight=False, soft_wrap=True)
    else:
        from version_guard.output.tables import report_table
        if report.sources:
            console.print(report_table(report))
        _print_summary(report)
    return exit_code


def _print_summary(report: ConsistencyReport) -> None:
    lines = summary_lines(report)
    if report.kind != ReportKind.INCONSISTENT:
        color = KIND_COLORS.get(report.kind, "white")
        console.print(f"[{color}]{escape(lines[0])}[/{color}]", soft_wrap=True)
        return

    for line in lines:
        stripped = line.lstrip()
        if stripped.startswith("Inconsistent:") or line == lines[0]:
            console.print(f"[red]{escape(line)}[/red]", highlight=False, soft_wrap=True)
        else:
            console.print(f"[yellow]{escape(line)}[/yellow]", highlight=False, soft_wrap=True)


def _sources_to_dicts(rows: list[tuple[SourceSpec, str | None]]) -> list[dict[str, Any]]:
    return [
        {
            "name": spec.name,
            "kind": spec.kind.value,
            "location": spec.label,
            "value": value,
        }
        for spec, value in rows
    ]


def output_sources(rows: list[tuple[SourceSpec, str | None]], fmt: str) -> None:
    if fmt == "json":
        console.print_json(json.dumps(_sources_to_dicts(rows), indent=2))
    elif fmt == "yaml":
        console.print(escape(yaml.dump(_sources_to_dicts(rows), default_flow_style=False, sort_keys=False)), soft_wrap=True)
    elif fmt == "text":
        for spec, value in rows:
            console.print(escape(f"{spec.name}: {value if value is not None else '-'}"), highlight=False, soft_wrap=True)
    else:
        from version_guard.output.tables import sources_table
        console.print(sources_table(rows))
