"""Turn a flat list of relative paths into a nested DocNode tree."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from readme_toc.log import log_warning
from readme_toc.logging_config import get_logger
from readme_toc.models.docs import DocNode, NodeKind


__all__ = ["build_tree", "link_prefix_for"]

logger = get_logger(__name__)


def link_prefix_for(host_path: Path, scan_path: Path) -> str:
    """Relative POSIX path from the host document's directory to the scan root."""
    rel = os.path.relpath(scan_path.resolve(), host_path.resolve().parent)
    return Path(rel).as_posix()


def _link(prefix: str, path: str) -> str:
    if not prefix or prefix == ".":
        return path
    return f"{prefix.rstrip('/')}/{path}"


def build_tree(paths: Iterable[str], link_prefix: str = ".") -> list[DocNode]:
    """Build a trie keyed on path segments; insertion order is kept."""
    roots: list[DocNode] = []

    for file_path in paths:
        parts = file_path.split("/")
        level = roots
        for depth, part in enumerate(parts):
            is_file = depth == len(parts) - 1
            existing = next((node for node in level if node.name == part), None)
            if existing is not None:
                if is_file or not existing.is_dir:
                    log_warning(logger, "tree.duplicate", path=file_path)
                    break
                level = existing.children
                continue

            node_path = "/".join(parts[: depth + 1])
            node = DocNode(
                name=part,
                path=node_path,
                kind=NodeKind.FILE if is_file else NodeKind.DIR,
                link_path=_link(link_prefix, node_path),
            )
            level.append(node)
            level = node.children

    return roots
