"""Pydantic models for the scanned documentation tree."""

from enum import StrEnum

from pydantic import BaseModel, Field


__all__ = ["DocNode", "NodeKind"]


class NodeKind(StrEnum):
    """Whether a tree node is a Markdown file or a directory."""

    FILE = "file"
    DIR = "dir"


class DocNode(BaseModel):
    """A file or directory in the docs tree."""

    name: str = Field(description="Path segment, extension included")
    path: str = Field(description="POSIX path relative to the scan root")
    kind: NodeKind
    link_path: str = Field(description="Link target relative to the host document")
    display_name: str | None = Field(default=None)
    title: str | None = Field(default=None, description="Front matter title or first H1")
    order: int | None = Field(default=None, description="Explicit ordering weight")
    children: list["DocNode"] = Field(default_factory=list)

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIR

    @property
    def label(self) -> str:
        return self.display_name or self.name
