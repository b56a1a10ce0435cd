"""Compare discovered versions against a reference."""

from __future__ import annotations

import logging
from pathlib import Path

from version_guard.config.settings import Settings
from version_guard.core.discovery import discover_sources
from version_guard.core.readers import ProjectReader, VersionReader
from version_guard.models import ReportKind
from version_guard.models.report import ConsistencyReport
from version_guard.models.source import VersionSource
from version_guard.utils.version_compare import classify_drift

logger = logging.getLogger(__name__)

FIX_HINTS = (
    "To fix version inconsistencies:",
    "  1. Decide on the correct version",
    "  2. Update all version files to match",
    "  3. Consider using a version bump script for automation",
)


def build_report(sources: list[VersionSource]) -> ConsistencyReport:
    """Build a report; the first source in discovery order is the reference."""
    if not sources:
        return ConsistencyReport(kind=ReportKind.NO_SOURCES_FOUND)

    reference = sources[0]
    if len(sources) == 1:
        return ConsistencyReport(
            kind=ReportKind.SINGLE_SOURCE,
            sources=(reference,),
            reference=reference,
        )

    mismatches = tuple(s for s in sources[1:] if s.value != reference.value)
    return ConsistencyReport(
        kind=ReportKind.INCONSISTENT if mismatches else ReportKind.CONSISTENT,
        sources=tuple(sources),
        reference=reference,
        mismatches=mismatches,
    )


def summary_lines(report: ConsistencyReport) -> list[str]:
    ref = report.reference
    if report.kind == ReportKind.NO_SOURCES_FOUND:
        return ["No version files found to check"]
    if report.kind == ReportKind.SINGLE_SOURCE:
        return [f"Only one version source found ({ref.name} = {ref.value}), consistency check passed"]
    if report.kind == ReportKind.CONSISTENT:
        return [f"All versions are consistent: {ref.value}"]

    lines = [
        "Version inconsistencies detected:",
        f"  Reference: {ref.name}: {ref.value}",
    ]
    for m in report.mismatches:
        drift = classify_drift(ref.value, m.value)
        lines.append(f"  Inconsistent: {m.name}: {m.value} [{drift}] ({m.path})")
    lines.append("")
    lines.extend(FIX_HINTS)
    return lines


def render(report: ConsistencyReport) -> tuple[str, int]:
    """Return the human-readable summary and the process exit code."""
    return "\n".join(summary_lines(report)), report.exit_code


def run_check(
    project_root: Path,
    settings: Settings,
    reader: VersionReader | None = None,
) -> ConsistencyReport:
    """Discover sources under ``project_root`` and build the report."""
    reader = reader or ProjectReader(git_binary=settings.git_binary, git_timeout=settings.git_timeout)
    sources = discover_sources(project_root, settings.source_specs(), reader)
    report = build_report(sources)
    logger.debug("Report kind %s with %d source(s)", report.kind.value, len(report.sources))
    return report
