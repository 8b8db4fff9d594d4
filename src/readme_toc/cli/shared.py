"""Shared CLI helpers."""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from readme_toc.config import Settings, get_settings
from readme_toc.models.tags import CleanupPreview


console = Console()


def resolve_settings(
    *,
    base_dir: Path | None = None,
    readme: Path | None = None,
    max_depth: int | None = None,
    ignore: list[str] | None = None,
) -> Settings:
    """Apply command-line overrides on top of the configured settings."""
    settings = get_settings()
    update: dict[str, object] = {}
    if base_dir is not None:
        update["base_dir"] = base_dir
    if readme is not None:
        update["readme_path"] = readme
    if max_depth is not None:
        update["max_depth"] = max_depth
    if ignore:
        update["ignore"] = [*settings.ignore, *ignore]
    return settings.model_copy(update=update)


def show_preview(preview: CleanupPreview) -> None:
    console.print(Panel(preview.summary, title="Stale TOC content", border_style="yellow"))


async def confirm_cleanup(preview: CleanupPreview) -> bool:
    """Show what will be removed and ask before touching the document.

    The blocking stdin prompt runs in a worker thread.
    """
    show_preview(preview)
    return await asyncio.to_thread(typer.confirm, "Proceed with cleanup?", default=False)
