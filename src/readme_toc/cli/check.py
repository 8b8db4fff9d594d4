"""CLI command: check."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from readme_toc.errors import ReadmeTocError
from readme_toc.runner import preview_toc

from .app import app
from .shared import console, resolve_settings, show_preview


@app.command()
def check(
    base_dir: Annotated[
        Path | None,
        typer.Argument(help="Directory to scan for Markdown files (default: docs)"),
    ] = None,
    readme: Annotated[
        Path | None,
        typer.Option("--readme", "-r", help="Document that receives the TOC (default: README.md)"),
    ] = None,
    max_depth: Annotated[
        int | None,
        typer.Option("--max-depth", "-d", min=0, help="Deepest path level to include (0 = all)"),
    ] = None,
    ignore: Annotated[
        list[str] | None,
        typer.Option("--ignore", "-i", help="Extra glob pattern to skip (repeatable)"),
    ] = None,
) -> None:
    """Report whether the TOC is current; exit 1 if it would change."""
    settings = resolve_settings(base_dir=base_dir, readme=readme, max_depth=max_depth, ignore=ignore)

    try:
        plan = asyncio.run(preview_toc(settings))
    except (ReadmeTocError, OSError) as err:
        console.print(f"[red]TOC check failed:[/red] {escape(str(err))}")
        raise typer.Exit(1) from err

    if plan.preview.needs_cleanup:
        show_preview(plan.preview)

    if not plan.changed:
        console.print(f"[green]TOC is up to date:[/green] {settings.host_path}")
        return

    action = "appended to" if plan.appended else "updated in"
    console.print(f"[yellow]TOC would be {action}:[/yellow] {settings.host_path}")
    raise typer.Exit(1)
