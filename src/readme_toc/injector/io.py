"""Async file access for the host document."""

from __future__ import annotations

from pathlib import Path

import aiofiles

from readme_toc.log import log_warning
from readme_toc.logging_config import get_logger


__all__ = ["atomic_write_text", "read_document"]

logger = get_logger(__name__)


async def read_document(path: Path) -> str:
    """Read the host document; a missing file reads as empty."""
    try:
        async with aiofiles.open(path, encoding="utf-8", newline="") as f:
            return await f.read()
    except FileNotFoundError:
        log_warning(logger, "document.missing", path=path)
        return ""


async def atomic_write_text(path: Path, text: str) -> None:
    """Write text through a temporary sibling so readers never see a partial file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")

    async with aiofiles.open(tmp_path, "w", encoding="utf-8", newline="") as f:
        await f.write(text)

    tmp_path.replace(path)
