"""The TOC pipeline: discover, build, enrich, sort, render, inject."""

from __future__ import annotations

from readme_toc.config import Settings
from readme_toc.docs import (
    build_tree,
    discover_documents,
    enrich_tree,
    link_prefix_for,
    render_markdown,
    sort_tree,
)
from readme_toc.errors import NoDocumentsError
from readme_toc.injector import ConfirmCallback, InjectionPlan, inject_toc, plan_injection
from readme_toc.injector.io import read_document
from readme_toc.log import bind_log_context, timed
from readme_toc.logging_config import get_logger
from readme_toc.models.tags import InjectionResult


__all__ = ["build_toc", "preview_toc", "run_toc"]

logger = get_logger(__name__)


async def build_toc(settings: Settings) -> str:
    """Render the Markdown list for the configured docs tree."""
    root = settings.scan_path
    paths = discover_documents(
        root,
        ignore=settings.ignore_patterns,
        max_depth=settings.max_depth,
        exclude=settings.host_path,
    )
    if not paths:
        raise NoDocumentsError(root)

    tree = build_tree(paths, link_prefix_for(settings.host_path, root))
    await enrich_tree(tree, root)
    return render_markdown(sort_tree(tree))


async def run_toc(settings: Settings, *, confirm: ConfirmCallback | None = None) -> InjectionResult:
    """Regenerate the TOC and write it into the host document."""
    with bind_log_context(path=settings.host_path), timed(logger, "toc.run"):
        rendered = await build_toc(settings)
        return await inject_toc(
            settings.host_path,
            rendered,
            confirm=confirm,
            heading=settings.heading,
        )


async def preview_toc(settings: Settings) -> InjectionPlan:
    """Compute what ``run_toc`` would write, without writing it."""
    with bind_log_context(path=settings.host_path), timed(logger, "toc.preview"):
        rendered = await build_toc(settings)
        text = await read_document(settings.host_path)
        return plan_injection(text, rendered, heading=settings.heading)
