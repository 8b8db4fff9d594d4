"""Tests for the end-to-end TOC pipeline."""

from pathlib import Path

import pytest

from readme_toc.config import Settings
from readme_toc.errors import NoDocumentsError
from readme_toc.models.tags import InjectionStatus
from readme_toc.runner import build_toc, preview_toc, run_toc


EXPECTED_TOC = (
    "- [Introduction](docs/01_intro.md)\n"
    "- [Usage](docs/02_usage.md)\n"
    "- guide\n"
    "  - [Alpha](docs/guide/a.md)\n"
    "  - [Beta](docs/guide/b.md)\n"
)


@pytest.fixture
def settings(docs_project: Path) -> Settings:
    return Settings(_env_file=None, cwd=docs_project)


class TestBuildToc:
    """Tests for build_toc."""

    @pytest.mark.asyncio
    async def test_renders_sorted_tree(self, settings: Settings) -> None:
        assert await build_toc(settings) == EXPECTED_TOC

    @pytest.mark.asyncio
    async def test_raises_when_no_documents(self, tmp_path: Path) -> None:
        (tmp_path / "docs").mkdir()
        settings = Settings(_env_file=None, cwd=tmp_path)

        with pytest.raises(NoDocumentsError):
            await build_toc(settings)

    @pytest.mark.asyncio
    async def test_scan_root_equal_to_readme_dir(self, docs_project: Path) -> None:
        settings = Settings(_env_file=None, cwd=docs_project, base_dir=Path("docs/guide"), readme_path=Path("docs/guide/README.md"))

        assert await build_toc(settings) == "- [Alpha](a.md)\n- [Beta](b.md)\n"


class TestRunToc:
    """Tests for run_toc and preview_toc."""

    @pytest.mark.asyncio
    async def test_writes_toc_into_readme(self, settings: Settings, docs_project: Path) -> None:
        result = await run_toc(settings)

        assert result.status is InjectionStatus.UPDATED
        text = (docs_project / "README.md").read_text(encoding="utf-8")
        assert text == (
            "# Project\n\n<!--toc-->\n" + EXPECTED_TOC + "<!--tocEnd:offset=5-->\n\nFooter\n"
        )

    @pytest.mark.asyncio
    async def test_rerun_is_unchanged(self, settings: Settings) -> None:
        await run_toc(settings)
        result = await run_toc(settings)

        assert result.status is InjectionStatus.UNCHANGED

    @pytest.mark.asyncio
    async def test_preview_does_not_write(self, settings: Settings, docs_project: Path) -> None:
        before = (docs_project / "README.md").read_text(encoding="utf-8")

        plan = await preview_toc(settings)

        assert plan.changed is True
        assert plan.appended is False
        assert (docs_project / "README.md").read_text(encoding="utf-8") == before
