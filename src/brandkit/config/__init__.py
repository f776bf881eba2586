"""Configuration and settings management."""

from brandkit.config.constants import ZIP_EPOCH, Limits
from brandkit.config.logging import get_logger, setup_logging
from brandkit.config.settings import Settings, clear_settings_cache, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "clear_settings_cache",
    "setup_logging",
    "get_logger",
    "Limits",
    "ZIP_EPOCH",
]
