"""Locate declared versions under a project root."""

from __future__ import annotations

import logging
from pathlib import Path

from version_guard.core.readers import ProjectReader, VersionReader
from version_guard.models import SourceKind
from version_guard.models.source import SourceSpec, VersionSource

logger = logging.getLogger(__name__)


def read_source(project_root: Path, spec: SourceSpec, reader: VersionReader) -> str | None:
    """Read a single known location, returning None when it is absent."""
    if spec.requires and not (project_root / spec.requires).exists():
        logger.debug("Skipping %s: %s not present", spec.name, spec.requires)
        return None
    if spec.kind == SourceKind.GIT_TAG:
        return reader.latest_tag(project_root / spec.path)
    return reader.read_version_field(project_root / spec.path, spec.key)


def discover_sources(
    project_root: Path,
    specs: list[SourceSpec],
    reader: VersionReader | None = None,
) -> list[VersionSource]:
    """Read every known location in order and keep the ones that resolved.

    Each location is independent; an absent or unreadable one is dropped
    without affecting the others.
    """
    reader = reader or ProjectReader()
    found: list[VersionSource] = []
    for spec in specs:
        value = read_source(project_root, spec, reader)
        if value is None:
            logger.debug("No version from %s (%s)", spec.name, spec.label)
            continue
        logger.debug("Found %s = %s", spec.name, value)
        found.append(VersionSource(name=spec.name, path=spec.label, value=value))
    return found


def inspect_sources(
    project_root: Path,
    specs: list[SourceSpec],
    reader: VersionReader | None = None,
) -> list[tuple[SourceSpec, str | None]]:
    """Like :func:`discover_sources` but keeps absent locations (value None)."""
    reader = reader or ProjectReader()
    return [(spec, read_source(project_root, spec, reader)) for spec in specs]
