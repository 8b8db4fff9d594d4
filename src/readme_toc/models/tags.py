"""Pydantic models for TOC marker tags and document analysis."""

from enum import StrEnum
from pathlib import Path
from typing import Annotated, ClassVar, Literal

from pydantic import BaseModel, Field


__all__ = [
    "CleanupPreview",
    "CompleteRegion",
    "DocumentAnalysis",
    "EndTag",
    "InjectionResult",
    "InjectionStatus",
    "MarkTag",
    "MovedContentRegion",
    "OrphanEndRegion",
    "StaleKind",
    "StaleRegion",
]


class StaleKind(StrEnum):
    """Why a line range is considered obsolete."""

    ORPHAN_END = "orphan-end"
    COMPLETE = "complete"
    MOVED_CONTENT = "moved-content"


class MarkTag(BaseModel):
    """One `<!--toc-->` occurrence."""

    line_index: int = Field(ge=0, description="0-based line of the marker")
    raw_text: str = Field(description="Marker line with surrounding whitespace stripped")
    paired_end_index: int | None = Field(default=None, description="Line of the paired end tag")

    @property
    def is_paired(self) -> bool:
        return self.paired_end_index is not None


class EndTag(BaseModel):
    """One `<!--tocEnd-->` occurrence."""

    line_index: int = Field(ge=0, description="0-based line of the end tag")
    offset: int = Field(default=0, ge=0, description="Content lines written at last run")
    paired_mark_index: int | None = Field(default=None, description="Line of the paired mark")

    @property
    def is_paired(self) -> bool:
        return self.paired_mark_index is not None


class _Region(BaseModel):
    """Inclusive line range scheduled for removal."""

    label: ClassVar[str] = "stale region"

    start_line: int = Field(ge=0)
    end_line: int = Field(ge=0)

    def covers(self, index: int) -> bool:
        return self.start_line <= index <= self.end_line

    def describe(self) -> str:
        """Human form with 1-indexed inclusive lines."""
        return f"line {self.start_line + 1}-{self.end_line + 1}: {self.label}"


class OrphanEndRegion(_Region):
    """End tag left behind after its mark was deleted or moved up."""

    label: ClassVar[str] = "orphan end tag"
    kind: Literal[StaleKind.ORPHAN_END] = StaleKind.ORPHAN_END


class CompleteRegion(_Region):
    """A fully paired block that is not the active one."""

    label: ClassVar[str] = "duplicate TOC block"
    kind: Literal[StaleKind.COMPLETE] = StaleKind.COMPLETE


class MovedContentRegion(_Region):
    """Old TOC content stranded above the end tag after the mark moved."""

    label: ClassVar[str] = "moved TOC content"
    kind: Literal[StaleKind.MOVED_CONTENT] = StaleKind.MOVED_CONTENT


StaleRegion = Annotated[
    OrphanEndRegion | CompleteRegion | MovedContentRegion,
    Field(discriminator="kind"),
]


class DocumentAnalysis(BaseModel):
    """Everything derived from one read of the host document."""

    lines: list[str] = Field(default_factory=list)
    marks: list[MarkTag] = Field(default_factory=list)
    ends: list[EndTag] = Field(default_factory=list)
    active_mark: MarkTag | None = Field(default=None)
    stale_regions: list[StaleRegion] = Field(
        default_factory=list, description="Sorted by start_line, descending"
    )
    move_detected: bool = Field(default=False)


class CleanupPreview(BaseModel):
    """What would be discarded, shown before any write."""

    needs_cleanup: bool = Field(default=False)
    regions: list[StaleRegion] = Field(default_factory=list)
    summary: str = Field(default="")


class InjectionStatus(StrEnum):
    """Outcome of one injection run."""

    UPDATED = "updated"
    UNCHANGED = "unchanged"
    APPENDED = "appended"
    CANCELLED = "cancelled"


class InjectionResult(BaseModel):
    """Structured report returned by the orchestrator."""

    status: InjectionStatus
    path: Path
    changed: bool = Field(default=False, description="Whether the file was written")
    preview: CleanupPreview | None = Field(default=None)
    message: str = Field(default="")

    @property
    def success(self) -> bool:
        return self.status is not InjectionStatus.CANCELLED
