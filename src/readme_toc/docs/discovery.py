"""Find the Markdown files that make up the docs tree."""

from __future__ import annotations

from collections.abc import Iterable
from fnmatch import fnmatchcase
from pathlib import Path

from readme_toc.log import log_debug
from readme_toc.logging_config import get_logger


__all__ = ["discover_documents", "is_ignored"]

logger = get_logger(__name__)


def is_ignored(rel_path: str, patterns: Iterable[str]) -> bool:
    """Match a POSIX relative path against glob patterns.

    A leading ``**/`` also matches at the top level, so ``**/dist/**`` skips
    both ``dist/a.md`` and ``pkg/dist/a.md``.
    """
    for pattern in patterns:
        if fnmatchcase(rel_path, pattern):
            return True
        if pattern.startswith("**/") and fnmatchcase(rel_path, pattern[3:]):
            return True
    return False


def discover_documents(
    root: Path,
    *,
    ignore: Iterable[str] = (),
    max_depth: int = 0,
    exclude: Path | None = None,
) -> list[str]:
    """Return sorted POSIX paths of ``*.md`` files below ``root``.

    ``max_depth`` limits the number of path parts (0 = unlimited). ``exclude``
    is typically the host document, which must not list itself.
    """
    if not root.is_dir():
        return []

    patterns = list(ignore)
    excluded = exclude.resolve() if exclude is not None else None
    found: list[str] = []
    skipped = 0

    for path in root.rglob("*.md"):
        if not path.is_file():
            continue
        rel = path.relative_to(root).as_posix()
        if max_depth > 0 and len(rel.split("/")) > max_depth:
            skipped += 1
            continue
        if is_ignored(rel, patterns) or (excluded is not None and path.resolve() == excluded):
            skipped += 1
            continue
        found.append(rel)

    found.sort()
    log_debug(logger, "discover.done", root=root, count=len(found), skipped=skipped)
    return found
