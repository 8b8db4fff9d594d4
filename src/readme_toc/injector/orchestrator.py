"""Read, analyze, confirm, rewrite and persist a host document."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path

from readme_toc.injector.analyzer import analyze_document
from readme_toc.injector.io import atomic_write_text, read_document
from readme_toc.injector.scanner import scan_tags, split_lines
from readme_toc.injector.transformer import (
    build_cleanup_preview,
    render_block,
    transform_document,
)
from readme_toc.log import log_debug, log_info, log_warning
from readme_toc.logging_config import get_logger
from readme_toc.models.tags import (
    CleanupPreview,
    DocumentAnalysis,
    InjectionResult,
    InjectionStatus,
)


__all__ = ["ConfirmCallback", "InjectionPlan", "inject_toc", "plan_injection"]

logger = get_logger(__name__)

ConfirmCallback = Callable[[CleanupPreview], Awaitable[bool]]


@dataclass(frozen=True)
class InjectionPlan:
    """The rewrite computed for one document, before anything is written."""

    original_text: str
    new_text: str
    analysis: DocumentAnalysis
    preview: CleanupPreview
    appended: bool

    @property
    def changed(self) -> bool:
        return self.new_text != self.original_text


def _newline_of(text: str) -> str:
    return "\r\n" if "\r\n" in text else "\n"


def _append_block(lines: list[str], rendered_content: str, heading: str) -> list[str]:
    body = list(lines)
    while body and not body[-1].strip():
        body.pop()

    block = [f"## {heading}", *render_block(rendered_content)]
    if not body:
        return block
    return [*body, "", *block]


def plan_injection(text: str, rendered_content: str, *, heading: str = "Contents") -> InjectionPlan:
    """Compute the new document text for ``rendered_content``.

    When the document has no start marker a fresh ``## heading`` block with a
    marker pair is appended after any stale-region cleanup.
    """
    lines = split_lines(text)
    marks, ends = scan_tags(lines)
    analysis = analyze_document(lines, marks, ends)
    preview = build_cleanup_preview(analysis)

    new_lines = transform_document(analysis, rendered_content)
    appended = analysis.active_mark is None
    if appended:
        new_lines = _append_block(new_lines, rendered_content, heading)

    newline = _newline_of(text)
    new_text = newline.join(new_lines)
    if not text or text.endswith("\n"):
        new_text += newline

    return InjectionPlan(
        original_text=text,
        new_text=new_text,
        analysis=analysis,
        preview=preview,
        appended=appended,
    )


async def inject_toc(
    path: Path,
    rendered_content: str,
    *,
    confirm: ConfirmCallback | None = None,
    heading: str = "Contents",
) -> InjectionResult:
    """Write ``rendered_content`` into the managed region of ``path``.

    ``confirm`` is awaited only when stale regions would be removed; a False
    answer aborts the whole run without touching the file. Without a callback
    the cleanup is applied directly.
    """
    text = await read_document(path)
    plan = plan_injection(text, rendered_content, heading=heading)
    analysis = plan.analysis

    log_debug(
        logger,
        "inject.analyzed",
        path=path,
        lines=len(analysis.lines),
        marks=len(analysis.marks),
        ends=len(analysis.ends),
        active=analysis.active_mark.line_index if analysis.active_mark else None,
        regions=len(analysis.stale_regions),
        moved=analysis.move_detected,
    )

    preview = plan.preview if plan.preview.needs_cleanup else None
    if preview is not None and confirm is not None and not await confirm(preview):
        log_warning(logger, "inject.cancelled", path=path, regions=len(preview.regions))
        return InjectionResult(
            status=InjectionStatus.CANCELLED,
            path=path,
            preview=preview,
            message="Cleanup of stale TOC regions was declined; document left unchanged.",
        )

    if not plan.changed:
        log_info(logger, "inject.unchanged", path=path)
        return InjectionResult(
            status=InjectionStatus.UNCHANGED,
            path=path,
            preview=preview,
            message="TOC already up to date.",
        )

    await atomic_write_text(path, plan.new_text)

    if plan.appended:
        status = InjectionStatus.APPENDED
        message = "No TOC marker found; appended a new TOC section."
    else:
        status = InjectionStatus.UPDATED
        message = "TOC updated."
    log_info(logger, f"inject.{status}", path=path, regions=len(analysis.stale_regions))
    return InjectionResult(status=status, path=path, changed=True, preview=preview, message=message)
