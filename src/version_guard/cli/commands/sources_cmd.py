"""vguard sources - Show every known version location."""

from __future__ import annotations

from pathlib import Path

import typer

from version_guard.cli.options import OutputOption, RootOption
from version_guard.config.settings import settings
from version_guard.core.discovery import inspect_sources
from version_guard.core.readers import ProjectReader
from version_guard.output.formatters import output_sources

app = typer.Typer()


@app.callback(invoke_without_command=True)
def sources(
    root: Path = RootOption,
    output: str = OutputOption,
) -> None:
    """List the known version locations in discovery order."""
    reader = ProjectReader(git_binary=settings.git_binary, git_timeout=settings.git_timeout)
    rows = inspect_sources(root, settings.source_specs(), reader)
    output_sources(rows, output)
