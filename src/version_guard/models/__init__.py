"""Data models for Version Guard."""

from __future__ import annotations

import enum


class SourceKind(enum.Enum):
    TEXT = "text"
    JSON = "json"
    YAML = "yaml"
    GIT_TAG = "git-tag"


class ReportKind(enum.Enum):
    NO_SOURCES_FOUND = "no-sources-found"
    SINGLE_SOURCE = "single-source"
    CONSISTENT = "consistent"
    INCONSISTENT = "inconsistent"
