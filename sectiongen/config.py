# sectiongen/config.py
"""
sectiongen Configuration - Single source of truth via Pydantic Settings.

Resolution order: CLI flags > env vars (SECTIONGEN_*) > config file > defaults.

The registry base URL has no default.  The legacy ``HYDROGEN_UI_URL``
variable is honoured so existing shells keep working.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SectiongenConfig(BaseSettings):
    """Central configuration for sectiongen."""

    model_config = SettingsConfigDict(
        env_prefix="SECTIONGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Registry ---
    registry_url: Optional[str] = None
    # None disables the request timeout entirely.
    timeout: Optional[float] = None

    # --- Materializing ---
    max_workers: int = Field(default=8, ge=1)

    # --- Logging ---
    log_level: str = "WARNING"
    log_dir: Optional[Path] = None

    # --- Paths ---
    home_dir: Path = Field(default_factory=lambda: Path.home() / ".sectiongen")

    @property
    def resolved_log_dir(self) -> Path:
        return self.log_dir or self.home_dir / "logs"

    @model_validator(mode="after")
    def _resolve_registry_url(self) -> "SectiongenConfig":
        # Blank counts as unset; fall back to the legacy variable
        url = self.registry_url or ""
        if not url.strip():
            url = os.environ.get("HYDROGEN_UI_URL", "")
        self.registry_url = url.strip().rstrip("/") or None
        return self


@lru_cache(maxsize=1)
def get_config() -> SectiongenConfig:
    """Return the global config singleton."""
    return SectiongenConfig()
