"""Data models for tags, analysis results and the docs tree."""

from readme_toc.models.docs import DocNode, NodeKind
from readme_toc.models.tags import (
    CleanupPreview,
    CompleteRegion,
    DocumentAnalysis,
    EndTag,
    InjectionResult,
    InjectionStatus,
    MarkTag,
    MovedContentRegion,
    OrphanEndRegion,
    StaleKind,
    StaleRegion,
)


__all__ = [
    "CleanupPreview",
    "CompleteRegion",
    "DocNode",
    "DocumentAnalysis",
    "EndTag",
    "InjectionResult",
    "InjectionStatus",
    "MarkTag",
    "MovedContentRegion",
    "NodeKind",
    "OrphanEndRegion",
    "StaleKind",
    "StaleRegion",
]
