"""Mini README: Centralised configuration for the expense tracker.

Structure:
    * ExpenseTrackerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Values are read from ``EXPENSE_TRACKER_*`` environment variables or a
    local ``.env`` file. The store path is only a default: the command line
    can point a single run at another file, and tests construct stores with
    explicit temporary paths instead of relying on these settings.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, validator
from pydantic_settings import BaseSettings

from .ledger import FeatureVariant


class ExpenseTrackerSettings(BaseSettings):
    """Runtime configuration for the expense tracker."""

    data_file: Path = Field(
        Path("expenses.dat"),
        description="Binary store file holding the persisted ledger.",
    )
    log_level: str = Field(
        "WARNING",
        description="Logging level name for diagnostics written to stderr.",
    )
    variant: FeatureVariant = Field(
        FeatureVariant.FULL,
        description=(
            "Feature set: 'full' enables range search and cost sorting, 'basic'"
            " limits search to exact names and keeps insertion order."
        ),
    )

    class Config:
        env_prefix = "EXPENSE_TRACKER_"
        env_file = ".env"
        case_sensitive = False

    @validator("data_file", pre=True)
    def _expand_path(cls, value: str | Path) -> Path:
        """Expand user directories; the file itself is created lazily on load."""

        return Path(value).expanduser()

    @validator("log_level")
    def _check_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache()
def get_settings() -> ExpenseTrackerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return ExpenseTrackerSettings()
