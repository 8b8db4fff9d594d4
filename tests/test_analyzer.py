"""Tests for document analysis: pairing, active mark and stale regions."""

from readme_toc.injector.analyzer import analyze_document, pair_tags
from readme_toc.injector.scanner import scan_tags
from readme_toc.models.tags import EndTag, MarkTag, StaleKind


def _analyze(lines: list[str]):
    marks, ends = scan_tags(lines)
    return analyze_document(lines, marks, ends)


class TestPairing:
    """Tests for pair_tags."""

    def test_each_mark_takes_nearest_unpaired_end_below(self) -> None:
        marks = [MarkTag(line_index=0, raw_text="<!--toc-->"), MarkTag(line_index=1, raw_text="<!--toc-->")]
        ends = [EndTag(line_index=2), EndTag(line_index=3)]

        paired_marks, paired_ends = pair_tags(marks, ends)

        assert [m.paired_end_index for m in paired_marks] == [2, 3]
        assert [e.paired_mark_index for e in paired_ends] == [0, 1]

    def test_end_above_mark_is_never_paired(self) -> None:
        marks = [MarkTag(line_index=5, raw_text="<!--toc-->")]
        ends = [EndTag(line_index=2)]

        paired_marks, paired_ends = pair_tags(marks, ends)

        assert paired_marks[0].paired_end_index is None
        assert paired_ends[0].paired_mark_index is None

    def test_inputs_are_not_mutated(self) -> None:
        marks = [MarkTag(line_index=0, raw_text="<!--toc-->")]
        ends = [EndTag(line_index=1)]

        pair_tags(marks, ends)

        assert marks[0].paired_end_index is None
        assert ends[0].paired_mark_index is None

    def test_no_end_is_paired_twice(self) -> None:
        marks = [MarkTag(line_index=i, raw_text="<!--toc-->") for i in (0, 1, 2)]
        ends = [EndTag(line_index=3)]

        paired_marks, _ = pair_tags(marks, ends)

        assert [m.paired_end_index for m in paired_marks] == [3, None, None]


class TestActiveMark:
    """Tests for active mark selection."""

    def test_no_marks_means_no_active_mark(self) -> None:
        analysis = _analyze(["content"])
        assert analysis.active_mark is None
        assert analysis.stale_regions == []

    def test_single_mark_is_active(self) -> None:
        analysis = _analyze(["intro", "<!--toc-->", "content"])
        assert analysis.active_mark is not None
        assert analysis.active_mark.line_index == 1

    def test_last_bare_mark_wins(self) -> None:
        lines = ["<!--toc-->", "- item", "<!--tocEnd:offset=1-->", "<!--toc-->"]

        analysis = _analyze(lines)

        assert analysis.active_mark is not None
        assert analysis.active_mark.line_index == 3

    def test_first_mark_wins_when_all_paired(self) -> None:
        """Scenario C: two paired blocks, the second becomes a complete stale region."""
        lines = [
            "<!--toc-->",
            "- item1",
            "<!--tocEnd:offset=1-->",
            "<!--toc-->",
            "- item2",
            "<!--tocEnd:offset=1-->",
        ]

        analysis = _analyze(lines)

        assert analysis.active_mark is not None
        assert analysis.active_mark.line_index == 0
        assert len(analysis.stale_regions) == 1
        region = analysis.stale_regions[0]
        assert region.kind is StaleKind.COMPLETE
        assert (region.start_line, region.end_line) == (3, 5)
        assert analysis.move_detected is False

    def test_earlier_bare_marks_are_left_alone(self) -> None:
        analysis = _analyze(["<!--toc-->", "text", "<!--toc-->"])

        assert analysis.active_mark is not None
        assert analysis.active_mark.line_index == 2
        assert analysis.stale_regions == []


class TestStaleRegions:
    """Tests for stale region detection."""

    def test_orphan_end_before_mark(self) -> None:
        """Scenario B."""
        lines = ["- old item", "<!--tocEnd:offset=1-->", "<!--toc-->"]

        analysis = _analyze(lines)

        assert analysis.active_mark is not None
        assert analysis.active_mark.line_index == 2
        assert len(analysis.stale_regions) == 1
        region = analysis.stale_regions[0]
        assert region.kind is StaleKind.ORPHAN_END
        assert (region.start_line, region.end_line) == (0, 1)
        assert analysis.move_detected is True

    def test_orphan_end_range_is_clamped_at_zero(self) -> None:
        analysis = _analyze(["- a", "<!--tocEnd:offset=9-->"])

        region = analysis.stale_regions[0]
        assert (region.start_line, region.end_line) == (0, 1)

    def test_forward_move_detected(self) -> None:
        """Scenario D."""
        lines = ["<!--toc-->", "new paragraph", "- old item", "<!--tocEnd:offset=1-->"]

        analysis = _analyze(lines)

        assert analysis.move_detected is True
        region = analysis.stale_regions[0]
        assert region.kind is StaleKind.MOVED_CONTENT
        assert (region.start_line, region.end_line) == (2, 3)

    def test_no_forward_move_when_distance_matches_offset(self) -> None:
        lines = ["<!--toc-->", "- a", "- b", "<!--tocEnd:offset=2-->"]

        analysis = _analyze(lines)

        assert analysis.stale_regions == []
        assert analysis.move_detected is False

    def test_zero_offset_disables_forward_move(self) -> None:
        lines = ["<!--toc-->", "- a", "- b", "<!--tocEnd-->"]

        analysis = _analyze(lines)

        assert analysis.stale_regions == []
        assert analysis.move_detected is False

    def test_regions_sorted_descending(self) -> None:
        lines = [
            "- stale",
            "<!--tocEnd:offset=1-->",
            "<!--toc-->",
            "- a",
            "<!--tocEnd:offset=1-->",
            "<!--toc-->",
            "- b",
            "<!--tocEnd:offset=1-->",
        ]

        analysis = _analyze(lines)

        starts = [r.start_line for r in analysis.stale_regions]
        assert starts == sorted(starts, reverse=True)
        assert {r.kind for r in analysis.stale_regions} == {StaleKind.ORPHAN_END, StaleKind.COMPLETE}

    def test_analysis_keeps_lines(self) -> None:
        lines = ["a", "<!--toc-->"]
        assert _analyze(lines).lines == lines
