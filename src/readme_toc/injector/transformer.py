"""Rewrite a document around its active TOC mark."""

from __future__ import annotations

from collections.abc import Iterable

from readme_toc.injector.scanner import LINE_BREAK_RE
from readme_toc.models.tags import CleanupPreview, DocumentAnalysis


__all__ = [
    "MARK_TAG",
    "build_cleanup_preview",
    "build_end_tag",
    "collapse_blank_runs",
    "content_lines",
    "render_block",
    "transform_document",
]


MARK_TAG = "<!--toc-->"
_MAX_BLANK_RUN = 2


def build_end_tag(offset: int) -> str:
    return f"<!--tocEnd:offset={offset}-->"


def render_block(rendered_content: str) -> list[str]:
    """Mark, content and end tag for a document that has no marker yet."""
    toc = content_lines(rendered_content)
    return [MARK_TAG, *toc, build_end_tag(len(toc))]


def content_lines(rendered_content: str) -> list[str]:
    """Split rendered content; trailing line breaks do not add empty lines."""
    stripped = rendered_content.rstrip("\r\n")
    if not stripped:
        return []
    return LINE_BREAK_RE.split(stripped)


def build_cleanup_preview(analysis: DocumentAnalysis) -> CleanupPreview:
    """Describe the stale regions without touching the document."""
    regions = list(analysis.stale_regions)
    if not regions:
        return CleanupPreview(needs_cleanup=False, regions=[], summary="")

    noun = "region" if len(regions) == 1 else "regions"
    summary_lines = [f"Found {len(regions)} stale TOC {noun} to remove:"]
    summary_lines.extend(f"  {region.describe()}" for region in regions)
    return CleanupPreview(needs_cleanup=True, regions=regions, summary="\n".join(summary_lines))


def collapse_blank_runs(lines: Iterable[str], *, limit: int = _MAX_BLANK_RUN) -> list[str]:
    """Shorten every run of blank lines longer than ``limit`` to ``limit``."""
    out: list[str] = []
    blank_run = 0
    for line in lines:
        if line.strip():
            blank_run = 0
        else:
            blank_run += 1
            if blank_run > limit:
                continue
        out.append(line)
    return out


def transform_document(analysis: DocumentAnalysis, rendered_content: str) -> list[str]:
    """Return the new line sequence with the TOC injected and stale regions dropped."""
    lines = analysis.lines
    active = analysis.active_mark
    new_content = content_lines(rendered_content)

    stale: set[int] = set()
    for region in analysis.stale_regions:
        stale.update(range(region.start_line, region.end_line + 1))

    out: list[str] = []
    index = 0
    while index < len(lines):
        if active is not None and index == active.line_index:
            out.append(lines[index])
            out.extend(new_content)
            out.append(build_end_tag(len(new_content)))
            if active.paired_end_index is not None:
                index = active.paired_end_index + 1
            else:
                index += 1
            continue

        if index not in stale:
            out.append(lines[index])
        index += 1

    return collapse_blank_runs(out)
