"""Shared CLI options."""

from __future__ import annotations

from pathlib import Path

import typer

from version_guard.config.settings import settings

OutputOption = typer.Option(settings.default_output, "--output", "-o", help="Output format: table, json, yaml, text")
RootOption = typer.Option(
    Path("."),
    "--root",
    "-r",
    help="Project root to check (default: current directory)",
    exists=True,
    file_okay=False,
    dir_okay=True,
    resolve_path=True,
)
