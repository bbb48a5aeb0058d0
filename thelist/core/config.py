"""
Configuration helpers for The List.

Routers, scripts and the store never read os.environ directly; they ask for
the Settings object instead.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    store_location: str
    log_level: str
    title: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        store_location=(os.getenv("THELIST_STORE") or "data/thelist.db").strip(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
        title=os.getenv("THELIST_TITLE", "The List"),
    )
