"""vguard check - Compare declared versions across project files."""

from __future__ import annotations

from pathlib import Path

import typer

from version_guard.cli.options import OutputOption, RootOption
from version_guard.config.settings import settings
from version_guard.core.checker import run_check
from version_guard.output.formatters import output_report

app = typer.Typer()


@app.callback(invoke_without_command=True)
def check(
    root: Path = RootOption,
    output: str = OutputOption,
) -> None:
    """Fail when any declared version differs from the first one found."""
    report = run_check(root, settings)
    exit_code = output_report(report, output)
    if exit_code:
        raise typer.Exit(code=exit_code)
