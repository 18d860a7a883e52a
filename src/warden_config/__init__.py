"""Shared application configuration package."""

from .settings import (
    Settings,
    clear_settings_cache,
    configure_logging,
    get_config_dir,
    get_settings,
)

__all__ = [
    "Settings",
    "clear_settings_cache",
    "configure_logging",
    "get_config_dir",
    "get_settings",
]
