"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

import typer
from rich.console import Console
from rich.logging import RichHandler

app = typer.Typer(
    name="vguard",
    help="Version Guard - Check that declared project versions agree.",
    no_args_is_help=True,
)


def _package_version() -> str:
    try:
        return version("version-guard")
    except PackageNotFoundError:
        return "unknown"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"vguard {_package_version()}")
        raise typer.Exit()


@app.callback()
def root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log source discovery details to stderr"),
    show_version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit",
    ),
) -> None:
    _configure_logging(verbose)


def _register_commands() -> None:
    from version_guard.cli.commands.check_cmd import app as check_app
    from version_guard.cli.commands.sources_cmd import app as sources_app

    app.add_typer(check_app, name="check", help="Check version consistency across project files")
    app.add_typer(sources_app, name="sources", help="List known version sources and their values")


_register_commands()


def main() -> None:
    app()
