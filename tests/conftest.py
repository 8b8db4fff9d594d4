"""Pytest configuration and shared fixtures."""

import os
from collections.abc import Generator
from pathlib import Path

import pytest

from readme_toc.config import get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep developer env vars and the settings cache out of every test."""
    for key in list(os.environ):
        if key.startswith("README_TOC_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def docs_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A project directory with a small docs tree and a README holding a marker."""
    docs = tmp_path / "docs"
    (docs / "guide").mkdir(parents=True)
    (docs / "02_usage.md").write_text("# Usage\n\nHow to use it.\n", encoding="utf-8")
    (docs / "01_intro.md").write_text(
        "---\ntitle: Introduction\n---\n\n# Ignored H1\n", encoding="utf-8"
    )
    (docs / "guide" / "b.md").write_text("# Beta\n", encoding="utf-8")
    (docs / "guide" / "a.md").write_text("# Alpha\n", encoding="utf-8")
    (tmp_path / "README.md").write_text("# Project\n\n<!--toc-->\n\nFooter\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path
