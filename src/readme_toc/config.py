"""Configuration management using Pydantic settings."""

import functools
import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from readme_toc.errors import ConfigError


__all__ = ["CONFIG_FILE_NAME", "DEFAULT_IGNORE", "Settings", "get_settings"]

CONFIG_FILE_NAME = "toc.toml"

DEFAULT_IGNORE: tuple[str, ...] = (
    "**/node_modules/**",
    "**/.git/**",
    "**/dist/**",
    "**/images/**",
    "**/assets/**",
)


class Settings(BaseSettings):
    """Settings read from init kwargs, ``README_TOC_*`` env vars, ``.env`` and ``<cwd>/toc.toml``."""

    if TYPE_CHECKING:
        # Pydantic dynamically generates a rich `__init__` for settings models.
        def __init__(self, *, _env_file: Any | None = None, **values: Any) -> None: ...

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="README_TOC_",
        extra="ignore",
    )

    cwd: Path = Field(default=Path("."), description="Directory the other paths are relative to")
    base_dir: Path = Field(default=Path("docs"), description="Directory scanned for Markdown")
    readme_path: Path = Field(default=Path("README.md"), description="Host document for the TOC")
    max_depth: int = Field(default=3, ge=0, description="Deepest path level kept (0 = unlimited)")
    ignore: list[str] = Field(default_factory=list, description="Extra glob patterns to skip")
    heading: str = Field(default="Contents", description="Heading used when appending a new block")
    assume_yes: bool = Field(default=False, description="Apply stale-region cleanup without asking")
    log_dir: Path | None = Field(default=None, description="Write a log file here when set")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # toc.toml lives in the project directory, which `cwd` may move.
        cwd = init_settings.init_kwargs.get("cwd") or os.environ.get("README_TOC_CWD") or "."
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=Path(cwd) / CONFIG_FILE_NAME),
            file_secret_settings,
        )

    @property
    def scan_path(self) -> Path:
        """Absolute directory to scan."""
        return (self.cwd / self.base_dir).resolve()

    @property
    def host_path(self) -> Path:
        """Absolute path of the document receiving the TOC."""
        return (self.cwd / self.readme_path).resolve()

    @property
    def ignore_patterns(self) -> list[str]:
        """Built-in ignore globs followed by the user's."""
        return [*DEFAULT_IGNORE, *self.ignore]


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    try:
        return Settings()
    except (tomllib.TOMLDecodeError, ValidationError) as err:
        raise ConfigError(f"Invalid configuration: {err}") from err
