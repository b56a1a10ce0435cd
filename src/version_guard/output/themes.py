"""Report kind color maps."""

from version_guard.models import ReportKind

KIND_COLORS: dict[ReportKind, str] = {
    ReportKind.NO_SOURCES_FOUND: "yellow",
    ReportKind.SINGLE_SOURCE: "green",
    ReportKind.CONSISTENT: "green",
    ReportKind.INCONSISTENT: "red bold",
}


def styled_kind(kind: ReportKind) -> str:
    color = KIND_COLORS.get(kind, "white")
    return f"[{color}]{kind.value}[/{color}]"
