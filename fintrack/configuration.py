"""Mini README: Centralised configuration models and helpers for FinTrack.

Structure:
    * FinTrackSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to pick the storage backend, the data and export
    directories, and the dashboard host/port. Every field has a default, so
    the application runs unchanged when no ``FINTRACK_`` variables are set.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FinTrackSettings(BaseSettings):
    """Runtime configuration for the FinTrack ledger."""

    model_config = SettingsConfigDict(
        env_prefix="FINTRACK_",
        env_file=".env",
        case_sensitive=False,
    )

    log_level: str = Field(
        "INFO",
        description="Root logging level applied by the launcher.",
    )
    storage_backend: Literal["file", "memory"] = Field(
        "file",
        description="Key-value backend holding the serialised ledger.",
    )
    data_directory: Path = Field(
        Path("data"),
        description="Directory where the file backend keeps one file per storage key.",
        validate_default=True,
    )
    storage_quota_bytes: Optional[int] = Field(
        None,
        description="Optional byte quota for the in-memory backend, mimicking browser storage limits.",
        gt=0,
    )
    export_directory: Path = Field(
        Path("exports"),
        description="Directory receiving JSON exports written outside the web dashboard.",
        validate_default=True,
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface for the dashboard to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the dashboard exposes.",
        ge=1,
        le=65535,
    )

    @field_validator("data_directory", "export_directory", mode="before")
    @classmethod
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Expand user directories so ``~/fintrack`` style values work."""

        return Path(value).expanduser().resolve()


@lru_cache()
def get_settings() -> FinTrackSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return FinTrackSettings()
