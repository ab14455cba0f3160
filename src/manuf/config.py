"""Application configuration using Pydantic settings."""

from __future__ import annotations

import os
import sys
from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .matcher import MatchStrategy
from .urls import ALL_PUBLIC_LISTING_URLS, RAW_GITHUB_URL

CACHE_FILE_NAME = "manuf.csv"


def user_cache_dir() -> Path:
    """Per-user cache directory for the current platform."""
    if sys.platform == "win32":
        base = os.getenv("LOCALAPPDATA")
        if base:
            return Path(base)
        return Path.home() / "AppData" / "Local"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Caches"
    base = os.getenv("XDG_CACHE_HOME")
    if base:
        return Path(base)
    return Path.home() / ".cache"


def default_cache_path() -> Path:
    return user_cache_dir() / CACHE_FILE_NAME


class Settings(BaseSettings):
    """Runtime configuration.

    Every field can be overridden with a ``MANUF_`` prefixed environment
    variable (e.g. ``MANUF_CACHE_PATH``) or a ``.env`` file.
    """

    model_config = SettingsConfigDict(env_prefix="MANUF_", env_file=".env", extra="ignore")

    cache_path: Path = Field(default_factory=default_cache_path)
    max_age_days: float = 30.0
    timeout_seconds: float = 300.0  # whole refresh, all listings
    request_timeout_seconds: float = 60.0

    mirror_url: str = RAW_GITHUB_URL
    listing_urls: List[str] = Field(default_factory=lambda: list(ALL_PUBLIC_LISTING_URLS))

    user_agent: str = ""
    log_level: str = "WARNING"

    serve_stale_on_error: bool = False
    match_strategy: MatchStrategy = MatchStrategy.FIRST

    @property
    def max_age_seconds(self) -> float:
        return self.max_age_days * 24 * 60 * 60


@lru_cache()
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "default_cache_path", "get_settings", "user_cache_dir"]
