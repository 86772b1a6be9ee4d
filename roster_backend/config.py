"""
Roster configuration — all environment variables in one place.

Read from environment at runtime.
"""

from __future__ import annotations

import os
from pathlib import Path


class Settings:
    """Application settings from environment variables."""

    # Static bundle
    PUBLIC_DIR: str = os.environ.get("PUBLIC_DIR", "public")

    # Saved team splits
    DATA_ROOT_DIR: str = os.environ.get("DATA_ROOT_DIR", "data")
    DATA_CURRENT_DIR: str = os.environ.get("DATA_CURRENT_DIR", "current")
    DATA_ARCHIVING_DIR: str = os.environ.get("DATA_ARCHIVING_DIR", "archiving")
    DATA_HISTORY_DIR: str = os.environ.get("DATA_HISTORY_DIR", "history")

    # Kernel
    HISTORY_LIMIT: int = int(os.environ.get("HISTORY_LIMIT", "50"))
    DEFAULT_STRATEGY: str = os.environ.get("DEFAULT_STRATEGY", "random")

    @property
    def data_root(self) -> Path:
        return Path(self.DATA_ROOT_DIR)

    @property
    def public_root(self) -> Path:
        return Path(self.PUBLIC_DIR)


# Singleton instance
settings = Settings()

if settings.HISTORY_LIMIT < 1:
    raise RuntimeError("HISTORY_LIMIT must be at least 1")
if settings.DEFAULT_STRATEGY not in {"random", "balanced", "sequential"}:
    raise RuntimeError(f"DEFAULT_STRATEGY must be random, balanced or sequential, got {settings.DEFAULT_STRATEGY!r}")
