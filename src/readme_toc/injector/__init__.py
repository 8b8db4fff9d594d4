"""Marker-tag injection engine: scan, analyze, transform and persist."""

from readme_toc.injector.analyzer import analyze_document
from readme_toc.injector.orchestrator import (
    ConfirmCallback,
    InjectionPlan,
    inject_toc,
    plan_injection,
)
from readme_toc.injector.scanner import scan_tags, split_lines
from readme_toc.injector.transformer import (
    build_cleanup_preview,
    build_end_tag,
    render_block,
    transform_document,
)


__all__ = [
    "ConfirmCallback",
    "InjectionPlan",
    "analyze_document",
    "build_cleanup_preview",
    "build_end_tag",
    "inject_toc",
    "plan_injection",
    "render_block",
    "scan_tags",
    "split_lines",
    "transform_document",
]
