"""Application settings loaded from environment variables and .env files."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from platformdirs import user_downloads_dir
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from brandkit.config.constants import Limits
from brandkit.exceptions import ConfigurationError


def _default_output_dir() -> Path:
    return Path(user_downloads_dir())


class Settings(BaseSettings):
    """Runtime configuration for validation, upload handling and export.

    Every field can be overridden with a ``BRANDKIT_``-prefixed environment
    variable, e.g. ``BRANDKIT_OUTPUT_DIR=~/exports``.
    """

    model_config = SettingsConfigDict(
        env_prefix="BRANDKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level for the brandkit logger"
    )
    output_dir: Path = Field(
        default_factory=_default_output_dir,
        description="Directory finished archives are saved to",
    )
    compression_level: int = Field(
        default=6, ge=0, le=9, description="Deflate level for archive entries"
    )
    overwrite_existing: bool = Field(
        default=False, description="Replace an existing archive with the same name"
    )
    upload_error_ttl_seconds: float = Field(
        default=Limits.UPLOAD_ERROR_TTL_SECONDS,
        gt=0,
        description="How long a rejected-upload message stays visible",
    )
    max_asset_bytes: int = Field(
        default=Limits.MAX_ASSET_BYTES, gt=0, description="Largest accepted upload"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Raises:
        ConfigurationError: If the environment holds invalid values.
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError("Invalid brandkit configuration", details=str(e)) from e


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
