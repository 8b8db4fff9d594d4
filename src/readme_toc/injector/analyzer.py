"""Pair marker tags, choose the active mark and find stale regions.

Active mark selection:

- no marks: none (the caller appends a fresh block)
- one mark: that mark
- several marks with at least one bare mark: the last bare mark, which is
  where the user most recently placed a new marker
- several marks, all paired: the first mark

Stale regions:

- orphan end: ``[end - offset, end]``, the range the end tag closed over when
  it was last written
- complete: every paired block other than the active one
- moved content: the active block holds more lines than its end tag recorded,
  so the old TOC sits just above the end tag at ``[end - offset, end]``
"""

from __future__ import annotations

from collections.abc import Sequence

from readme_toc.models.tags import (
    CompleteRegion,
    DocumentAnalysis,
    EndTag,
    MarkTag,
    MovedContentRegion,
    OrphanEndRegion,
    StaleKind,
    StaleRegion,
)


__all__ = ["analyze_document", "pair_tags", "select_active_mark"]


_KIND_RANK = {StaleKind.ORPHAN_END: 0, StaleKind.COMPLETE: 1, StaleKind.MOVED_CONTENT: 2}


def pair_tags(
    marks: Sequence[MarkTag], ends: Sequence[EndTag]
) -> tuple[list[MarkTag], list[EndTag]]:
    """Pair each mark with the earliest unpaired end strictly below it.

    Returns new tag objects; the inputs are left untouched.
    """
    paired_marks: list[MarkTag] = []
    end_partner: dict[int, int] = {}

    for mark in marks:
        partner = next(
            (
                end
                for end in ends
                if end.line_index > mark.line_index and end.line_index not in end_partner
            ),
            None,
        )
        if partner is None:
            paired_marks.append(mark.model_copy(update={"paired_end_index": None}))
            continue
        end_partner[partner.line_index] = mark.line_index
        paired_marks.append(mark.model_copy(update={"paired_end_index": partner.line_index}))

    paired_ends = [
        end.model_copy(update={"paired_mark_index": end_partner.get(end.line_index)})
        for end in ends
    ]
    return paired_marks, paired_ends


def select_active_mark(marks: Sequence[MarkTag]) -> MarkTag | None:
    """Pick the injection target among already paired marks."""
    if not marks:
        return None
    if len(marks) == 1:
        return marks[0]
    bare = [mark for mark in marks if not mark.is_paired]
    if bare:
        return bare[-1]
    return marks[0]


def _moved_content_region(active: MarkTag, ends_by_line: dict[int, EndTag]) -> StaleRegion | None:
    if active.paired_end_index is None:
        return None
    end = ends_by_line[active.paired_end_index]
    if end.offset <= 0:
        return None
    actual_distance = end.line_index - active.line_index - 1
    if actual_distance <= end.offset:
        return None
    return MovedContentRegion(start_line=end.line_index - end.offset, end_line=end.line_index)


def analyze_document(
    lines: Sequence[str], marks: Sequence[MarkTag], ends: Sequence[EndTag]
) -> DocumentAnalysis:
    """Build the analysis for one document read."""
    paired_marks, paired_ends = pair_tags(marks, ends)
    active = select_active_mark(paired_marks)

    regions: list[StaleRegion] = []
    move_detected = False

    for end in paired_ends:
        if end.is_paired:
            continue
        regions.append(
            OrphanEndRegion(start_line=max(0, end.line_index - end.offset), end_line=end.line_index)
        )
        move_detected = True

    for mark in paired_marks:
        if mark is active or mark.paired_end_index is None:
            continue
        regions.append(CompleteRegion(start_line=mark.line_index, end_line=mark.paired_end_index))

    if active is not None:
        moved = _moved_content_region(active, {end.line_index: end for end in paired_ends})
        if moved is not None:
            regions.append(moved)
            move_detected = True

    regions.sort(key=lambda r: (r.start_line, r.end_line, -_KIND_RANK[r.kind]), reverse=True)

    return DocumentAnalysis(
        lines=list(lines),
        marks=paired_marks,
        ends=paired_ends,
        active_mark=active,
        stale_regions=regions,
        move_detected=move_detected,
    )
