"""CLI command: generate."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from readme_toc.errors import ReadmeTocError
from readme_toc.runner import run_toc

from .app import app
from .shared import confirm_cleanup, console, resolve_settings


@app.command()
def generate(
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
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Remove stale TOC regions without asking"),
    ] = False,
) -> None:
    """Generate the TOC and write it at the <!--toc--> marker."""
    settings = resolve_settings(base_dir=base_dir, readme=readme, max_depth=max_depth, ignore=ignore)
    confirm = None if yes or settings.assume_yes else confirm_cleanup

    try:
        result = asyncio.run(run_toc(settings, confirm=confirm))
    except (ReadmeTocError, OSError) as err:
        console.print(f"[red]TOC generation failed:[/red] {escape(str(err))}")
        raise typer.Exit(1) from err

    if not result.success:
        console.print(f"[yellow]{result.message}[/yellow]")
        raise typer.Exit(1)

    table = Table(title="TOC Result", show_header=True, header_style="bold green")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("Document", str(result.path))
    table.add_row("Status", str(result.status))
    table.add_row("Stale regions removed", str(len(result.preview.regions) if result.preview else 0))
    table.add_row("Message", result.message)
    console.print(table)
