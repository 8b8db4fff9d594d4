"""CLI application setup."""

from __future__ import annotations

import logging
import os
import sys
from typing import Annotated

import typer
from rich.markup import escape

from readme_toc import __version__
from readme_toc.config import get_settings
from readme_toc.errors import ConfigError
from readme_toc.log import log_debug, set_log_context
from readme_toc.logging_config import setup_logging

from .shared import console


app = typer.Typer(
    help="Generate a docs table of contents and keep it in sync inside a README",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]readme-toc[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    _version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-V", help="Enable verbose logging"),
    ] = False,
) -> None:
    """readme-toc - keep a generated docs table of contents inside a README."""
    try:
        settings = get_settings()
    except ConfigError as err:
        console.print(f"[red]{escape(str(err))}[/red]")
        raise typer.Exit(1) from err

    level = logging.DEBUG if verbose else logging.WARNING
    setup_logging(level=level, log_dir=settings.log_dir)

    set_log_context(pid=os.getpid())
    log_debug(
        logging.getLogger("readme_toc.cli"),
        "cli.start",
        argv=" ".join(sys.argv),
        verbose=verbose,
        base_dir=settings.base_dir,
        readme=settings.readme_path,
    )
