"""Docs-tree collaborators: discovery, tree building, titles, sorting and rendering."""

from readme_toc.docs.discovery import discover_documents
from readme_toc.docs.render import render_markdown, sort_tree
from readme_toc.docs.sortkey import compare_sort_keys, extract_sort_key
from readme_toc.docs.titles import enrich_tree
from readme_toc.docs.tree import build_tree, link_prefix_for


__all__ = [
    "build_tree",
    "compare_sort_keys",
    "discover_documents",
    "enrich_tree",
    "extract_sort_key",
    "link_prefix_for",
    "render_markdown",
    "sort_tree",
]
