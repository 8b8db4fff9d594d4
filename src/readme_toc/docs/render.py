"""Sort the docs tree and render it as a nested Markdown list."""

from __future__ import annotations

import functools
import re
from urllib.parse import quote

from readme_toc.docs.sortkey import compare_sort_keys, extract_sort_key
from readme_toc.models.docs import DocNode


__all__ = ["compare_nodes", "natural_key", "render_markdown", "sort_tree"]

_INDENT = "  "
# Characters encodeURI leaves alone, so links stay readable.
_LINK_SAFE = ";,/?:@&=+$!*'()#"
_DIGIT_RUN_RE = re.compile(r"(\d+)")


def natural_key(text: str) -> list[int | str]:
    """Case-insensitive key where ``2`` sorts before ``10``."""
    return [int(part) if part.isdecimal() else part.casefold() for part in _DIGIT_RUN_RE.split(text)]


def compare_nodes(a: DocNode, b: DocNode) -> int:
    """Order, then sort key, then directories first, then natural name order."""
    order_a = a.order if a.order is not None else float("inf")
    order_b = b.order if b.order is not None else float("inf")
    if order_a != order_b:
        return -1 if order_a < order_b else 1

    key_cmp = compare_sort_keys(extract_sort_key(a.name), extract_sort_key(b.name))
    if key_cmp:
        return key_cmp

    if a.kind != b.kind:
        return -1 if a.is_dir else 1

    name_a, name_b = natural_key(a.label), natural_key(b.label)
    if name_a == name_b:
        return 0
    return -1 if name_a < name_b else 1


def sort_tree(nodes: list[DocNode]) -> list[DocNode]:
    """Sort every level in place and return ``nodes``."""
    nodes.sort(key=functools.cmp_to_key(compare_nodes))
    for node in nodes:
        if node.children:
            sort_tree(node.children)
    return nodes


def render_markdown(nodes: list[DocNode], depth: int = 0) -> str:
    lines: list[str] = []
    indent = _INDENT * depth
    for node in nodes:
        if node.is_dir:
            lines.append(f"{indent}- {node.label}\n")
            lines.append(render_markdown(node.children, depth + 1))
        else:
            lines.append(f"{indent}- [{node.label}]({quote(node.link_path, safe=_LINK_SAFE)})\n")
    return "".join(lines)
