"""Locate TOC marker tags in a document, skipping fenced code blocks."""

from __future__ import annotations

import re
from collections.abc import Sequence

from readme_toc.models.tags import EndTag, MarkTag


__all__ = [
    "CODE_FENCE_RE",
    "LINE_BREAK_RE",
    "TOC_END_RE",
    "TOC_MARK_RE",
    "scan_tags",
    "split_lines",
]


# <!--toc-->, <!-- TOC -->, ... alone on a line.
TOC_MARK_RE = re.compile(r"^\s*<!--\s*toc\s*-->\s*$", re.IGNORECASE)
# <!--tocEnd--> or <!--tocEnd:offset=N--> alone on a line.
TOC_END_RE = re.compile(r"^\s*<!--\s*tocEnd(?::offset=(\d+))?\s*-->\s*$", re.IGNORECASE)
CODE_FENCE_RE = re.compile(r"^\s*(`{3,}|~{3,})")
# Only LF and CRLF end a line; form feeds, U+2028 and friends stay in the text.
LINE_BREAK_RE = re.compile(r"\r?\n")


def split_lines(text: str) -> list[str]:
    """Split on LF or CRLF; the empty document has no lines."""
    if not text:
        return []
    lines = LINE_BREAK_RE.split(text)
    if text.endswith("\n"):
        lines.pop()
    return lines


def _parse_offset(raw: str | None) -> int:
    if not raw:
        return 0
    try:
        return max(0, int(raw))
    except ValueError:
        return 0


def scan_tags(lines: Sequence[str]) -> tuple[list[MarkTag], list[EndTag]]:
    """Return start and end markers in document order."""
    marks: list[MarkTag] = []
    ends: list[EndTag] = []
    in_code = False

    for index, line in enumerate(lines):
        if CODE_FENCE_RE.match(line):
            in_code = not in_code
            continue
        if in_code:
            continue

        if TOC_MARK_RE.match(line):
            marks.append(MarkTag(line_index=index, raw_text=line.strip()))
            continue

        end_match = TOC_END_RE.match(line)
        if end_match:
            ends.append(EndTag(line_index=index, offset=_parse_offset(end_match.group(1))))

    return marks, ends
