"""Tests for the tag and result models."""

from pathlib import Path

from readme_toc.models.docs import DocNode, NodeKind
from readme_toc.models.tags import (
    CompleteRegion,
    DocumentAnalysis,
    InjectionResult,
    InjectionStatus,
    MarkTag,
    MovedContentRegion,
    OrphanEndRegion,
)


class TestStaleRegion:
    """Tests for the stale region union."""

    def test_kind_selects_variant(self) -> None:
        analysis = DocumentAnalysis.model_validate(
            {
                "lines": [],
                "stale_regions": [
                    {"kind": "orphan-end", "start_line": 4, "end_line": 4},
                    {"kind": "complete", "start_line": 0, "end_line": 2},
                    {"kind": "moved-content", "start_line": 1, "end_line": 3},
                ],
            }
        )

        kinds = [type(region) for region in analysis.stale_regions]
        assert kinds == [OrphanEndRegion, CompleteRegion, MovedContentRegion]

    def test_describe_is_one_indexed(self) -> None:
        region = CompleteRegion(start_line=0, end_line=2)

        assert region.describe() == "line 1-3: duplicate TOC block"
        assert region.covers(2)
        assert not region.covers(3)


class TestTags:
    """Tests for tag helpers."""

    def test_mark_pairing_flag(self) -> None:
        assert not MarkTag(line_index=0, raw_text="<!--toc-->").is_paired
        assert MarkTag(line_index=0, raw_text="<!--toc-->", paired_end_index=3).is_paired

    def test_result_success(self) -> None:
        path = Path("README.md")

        assert InjectionResult(status=InjectionStatus.UPDATED, path=path).success
        assert InjectionResult(status=InjectionStatus.UNCHANGED, path=path).success
        assert not InjectionResult(status=InjectionStatus.CANCELLED, path=path).success


class TestDocNode:
    """Tests for DocNode."""

    def test_label_falls_back_to_name(self) -> None:
        node = DocNode(name="a.md", path="a.md", kind=NodeKind.FILE, link_path="a.md")

        assert node.label == "a.md"
        assert not node.is_dir
