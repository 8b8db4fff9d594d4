"""Exceptions raised outside the pure scan/analyze/transform core."""

from __future__ import annotations

from pathlib import Path


__all__ = ["ConfigError", "NoDocumentsError", "ReadmeTocError"]


class ReadmeTocError(Exception):
    """Base class for errors the CLI reports without a traceback."""


class NoDocumentsError(ReadmeTocError):
    """No Markdown files were found under the scan root."""

    def __init__(self, root: Path) -> None:
        super().__init__(f"No Markdown files found in {root}")
        self.root = root


class ConfigError(ReadmeTocError):
    """The configuration file could not be loaded."""
