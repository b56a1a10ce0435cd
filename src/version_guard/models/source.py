"""Version source models."""

from __future__ import annotations

from dataclasses import dataclass

from version_guard.models import SourceKind


@dataclass(frozen=True)
class SourceSpec:
    """A known location that may declare a version.

    ``path`` is relative to the project root. ``key`` is a dotted key path
    for structured files and ``None`` for plain text and git tags.
    """

    name: str
    path: str
    kind: SourceKind
    key: str | None = None
    requires: str | None = None

    @property
    def label(self) -> str:
        if self.kind == SourceKind.GIT_TAG:
            return "git tag"
        if self.key and self.key != "version":
            return f"{self.path} ({self.key})"
        return self.path


@dataclass(frozen=True)
class VersionSource:
    name: str
    path: str
    value: str
