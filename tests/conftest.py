"""Shared fixtures for Version Guard tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from version_guard.config.settings import Settings


class FakeReader:
    """In-memory VersionReader keyed by (relative path, key)."""

    def __init__(self, root: Path, values: dict[tuple[str, str | None], str], tag: str | None = None):
        self.root = root
        self.values = values
        self.tag = tag
        self.calls: list[tuple[str, str | None]] = []

    def read_version_field(self, path: Path, key: str | None) -> str | None:
        rel = path.relative_to(self.root).as_posix()
        self.calls.append((rel, key))
        return self.values.get((rel, key))

    def latest_tag(self, root: Path) -> str | None:
        self.calls.append(("git", None))
        return self.tag


@pytest.fixture
def settings() -> Settings:
    return Settings(
        version_file="VERSION",
        ui_manifest="ui/package.json",
        chart_file="helm/kagent/Chart.yaml",
        git_tag_gate="go/go.mod",
    )


@pytest.fixture
def make_project(tmp_path: Path):
    """Write the usual version files under tmp_path; None skips a file."""

    def _make(
        version: str | None = None,
        ui: str | None = None,
        chart_version: str | None = None,
        app_version: str | None = None,
        go_mod: bool = False,
        quote_chart: bool = True,
    ) -> Path:
        if version is not None:
            (tmp_path / "VERSION").write_text(version)
        if ui is not None:
            (tmp_path / "ui").mkdir(exist_ok=True)
            (tmp_path / "ui" / "package.json").write_text(json.dumps({"name": "ui", "version": ui}))
        if chart_version is not None or app_version is not None:
            chart_dir = tmp_path / "helm" / "kagent"
            chart_dir.mkdir(parents=True, exist_ok=True)
            q = '"' if quote_chart else ""
            lines = ["apiVersion: v2", "name: kagent"]
            if chart_version is not None:
                lines.append(f"version: {q}{chart_version}{q}")
            if app_version is not None:
                lines.append(f"appVersion: {q}{app_version}{q}")
            (chart_dir / "Chart.yaml").write_text("\n".join(lines) + "\n")
        if go_mod:
            (tmp_path / "go").mkdir(exist_ok=True)
            (tmp_path / "go" / "go.mod").write_text("module example.com/kagent\n")
        return tmp_path

    return _make
