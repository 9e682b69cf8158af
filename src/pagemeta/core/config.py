"""Configuration management for pagemeta."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class SiteConfig:
    """Site-wide addressing configuration."""

    base_url: str = "http://localhost"
    default_language: str = "en"


@dataclass
class SummaryConfig:
    """Caps for derived text excerpts."""

    # Description metadata derived from body fields
    description_length: int = 160
    # Description column in the rule listing
    excerpt_length: int = 80


def _default_db_path() -> Path:
    """Get default database path."""
    cache_dir = Path(os.environ.get("XDG_CACHE_HOME", Path.home() / ".cache"))
    return cache_dir / "pagemeta" / "pagemeta.db"


@dataclass
class Config:
    """Main application configuration."""

    db_path: Path = field(default_factory=_default_db_path)
    site: SiteConfig = field(default_factory=SiteConfig)
    summary: SummaryConfig = field(default_factory=SummaryConfig)

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        config = cls()
        config._apply_env()
        return config

    @classmethod
    def from_file(cls, path: Path | str) -> "Config":
        """Load configuration from a TOML file, then apply env overrides.

        Args:
            path: Path to the TOML file.

        Returns:
            Config with file values and environment overrides applied.
        """
        with open(path, "rb") as f:
            data = tomllib.load(f)

        config = cls()
        config._apply_mapping(data)
        config._apply_env()
        return config

    @classmethod
    def from_env_or_file(cls, path: Path | str | None = None) -> "Config":
        """Load from an explicit path, $PAGEMETA_CONFIG, or the environment."""
        path = path or os.environ.get("PAGEMETA_CONFIG")
        if path:
            return cls.from_file(path)
        return cls.from_env()

    def _apply_mapping(self, data: dict[str, Any]) -> None:
        if db_path := data.get("db_path"):
            self.db_path = Path(db_path)

        site = data.get("site", {})
        if "base_url" in site:
            self.site.base_url = str(site["base_url"])
        if "default_language" in site:
            self.site.default_language = str(site["default_language"])

        summary = data.get("summary", {})
        if "description_length" in summary:
            self.summary.description_length = int(summary["description_length"])
        if "excerpt_length" in summary:
            self.summary.excerpt_length = int(summary["excerpt_length"])

    def _apply_env(self) -> None:
        if path := os.environ.get("PAGEMETA_DB_PATH"):
            self.db_path = Path(path)

        if url := os.environ.get("PAGEMETA_BASE_URL"):
            self.site.base_url = url

        if language := os.environ.get("PAGEMETA_LANGUAGE"):
            self.site.default_language = language
