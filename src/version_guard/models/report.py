"""Consistency report models."""

from __future__ import annotations

from dataclasses import dataclass

from version_guard.models import ReportKind
from version_guard.models.source import VersionSource


@dataclass(frozen=True)
class ConsistencyReport:
    kind: ReportKind
    sources: tuple[VersionSource, ...] = ()
    reference: VersionSource | None = None
    mismatches: tuple[VersionSource, ...] = ()

    @property
    def is_consistent(self) -> bool:
        return not self.mismatches

    @property
    def exit_code(self) -> int:
        return 0 if self.is_consistent else 1

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "consistent": self.is_consistent,
            "exit_code": self.exit_code,
            "reference": _source_to_dict(self.reference) if self.reference else None,
            "sources": [_source_to_dict(s) for s in self.sources],
            "mismatches": [_source_to_dict(s) for s in self.mismatches],
        }


def _source_to_dict(s: VersionSource) -> dict[str, str]:
    return {"name": s.name, "path": s.path, "value": s.value}
