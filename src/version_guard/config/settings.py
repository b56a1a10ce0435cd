"""Application configuration and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from version_guard.models import SourceKind
from version_guard.models.source import SourceSpec


def _env_path(name: str, default: str) -> str:
    """Return an env override for a source path, falling back to ``default``.

    An explicitly empty variable is honored (it disables the git tag gate).
    """
    return os.environ.get(name, default)


@dataclass
class Settings:
    version_file: str = field(default_factory=lambda: _env_path("VGUARD_VERSION_FILE", "VERSION"))
    ui_manifest: str = field(default_factory=lambda: _env_path("VGUARD_UI_MANIFEST", "ui/package.json"))
    chart_file: str = field(default_factory=lambda: _env_path("VGUARD_CHART_FILE", "helm/kagent/Chart.yaml"))
    # Git tags are only compared when this file exists; "" always consults git.
    git_tag_gate: str = field(default_factory=lambda: _env_path("VGUARD_GIT_TAG_GATE", "go/go.mod"))
    git_binary: str = "git"
    git_timeout: float = 10.0
    default_output: str = field(default_factory=lambda: os.environ.get("VGUARD_OUTPUT", "table"))

    def source_specs(self) -> list[SourceSpec]:
        """Return the known sources in discovery order."""
        return [
            SourceSpec("root-version-file", self.version_file, SourceKind.TEXT),
            SourceSpec("ui-package-manifest", self.ui_manifest, SourceKind.JSON, key="version"),
            SourceSpec("chart-definition", self.chart_file, SourceKind.YAML, key="version"),
            SourceSpec("chart-app-version", self.chart_file, SourceKind.YAML, key="appVersion"),
            SourceSpec(
                "latest-git-tag",
                ".",
                SourceKind.GIT_TAG,
                requires=self.git_tag_gate or None,
            ),
        ]


# Global singleton
settings = Settings()
