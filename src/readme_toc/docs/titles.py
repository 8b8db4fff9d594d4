"""Fill in display names and ordering hints from the documents themselves.

Title priority: front matter ``title``, then the first ``# H1`` outside code
fences, then the cleaned filename. Order priority: front matter ``order``,
then a numeric ``NN-``/``NN_`` filename prefix.
"""

from __future__ import annotations

import asyncio
import re
from pathlib import Path
from typing import Any

import aiofiles
import yaml

from readme_toc.injector.scanner import CODE_FENCE_RE, split_lines
from readme_toc.log import log_debug, log_warning
from readme_toc.logging_config import get_logger
from readme_toc.models.docs import DocNode


__all__ = ["cleanup_name", "enrich_tree", "extract_h1", "parse_document_meta", "split_front_matter"]

logger = get_logger(__name__)

_FRONT_MATTER_RE = re.compile(r"\A\ufeff?---[ \t]*\r?\n(?P<body>.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.S)
_H1_RE = re.compile(r"^\s*#\s+(.*)")
_ORDER_PREFIX_RE = re.compile(r"^(\d+)[-_]")


def split_front_matter(text: str) -> tuple[dict[str, Any], str]:
    """Return ``(front_matter, body)``; malformed YAML yields an empty mapping."""
    match = _FRONT_MATTER_RE.match(text)
    if not match:
        return {}, text
    body = text[match.end() :]
    try:
        parsed = yaml.safe_load(match.group("body"))
    except yaml.YAMLError as err:
        log_debug(logger, "front_matter.invalid", error=str(err))
        return {}, body
    return (parsed if isinstance(parsed, dict) else {}), body


def extract_h1(text: str) -> str | None:
    """First ``# Title`` line that is not inside a fenced code block."""
    in_code = False
    for line in split_lines(text):
        if CODE_FENCE_RE.match(line):
            in_code = not in_code
            continue
        if in_code:
            continue
        match = _H1_RE.match(line)
        if match and match.group(1).strip():
            return match.group(1).strip()
    return None


def _coerce_order(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().lstrip("-").isdecimal():
        return int(value.strip())
    return None


def parse_document_meta(text: str) -> tuple[str | None, int | None]:
    """Return ``(title, order)`` for one Markdown document."""
    front_matter, body = split_front_matter(text)
    raw_title = front_matter.get("title")
    title = str(raw_title).strip() if raw_title not in (None, "") else None
    if not title:
        title = extract_h1(body)
    return title, _coerce_order(front_matter.get("order"))


def cleanup_name(filename: str, title: str | None = None) -> str:
    """Title when known, else the filename without ``.md`` and numeric prefix."""
    if title:
        return title
    name = filename[:-3] if filename.lower().endswith(".md") else filename
    return _ORDER_PREFIX_RE.sub("", name, count=1) or name


async def _read_meta(path: Path) -> tuple[str | None, int | None]:
    try:
        async with aiofiles.open(path, encoding="utf-8") as f:
            text = await f.read()
    except (OSError, UnicodeDecodeError) as err:
        log_warning(logger, "document.unreadable", path=path, error=str(err))
        return None, None
    return parse_document_meta(text)


async def _enrich_node(node: DocNode, root: Path) -> None:
    if node.is_dir:
        node.display_name = cleanup_name(node.name)
        await enrich_tree(node.children, root)
        return

    title, order = await _read_meta(root / node.path)
    node.title = title
    node.display_name = cleanup_name(node.name, title)
    if order is None:
        prefix = _ORDER_PREFIX_RE.match(node.name)
        order = int(prefix.group(1)) if prefix else None
    node.order = order


async def enrich_tree(nodes: list[DocNode], root: Path) -> list[DocNode]:
    """Read every file concurrently and fill in ``title``, ``display_name`` and ``order``."""
    await asyncio.gather(*(_enrich_node(node, root) for node in nodes))
    return nodes
