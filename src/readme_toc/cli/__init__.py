"""CLI entry point for readme-toc."""

from . import check as _check  # noqa: F401
from . import generate as _generate  # noqa: F401
from .app import app


__all__ = ["app"]
