"""Shared application configuration package."""

from .settings import (
    ClientSettings,
    Settings,
    clear_settings_cache,
    get_client_settings,
    get_config_dir,
    get_settings,
)

__all__ = [
    "ClientSettings",
    "Settings",
    "clear_settings_cache",
    "get_client_settings",
    "get_config_dir",
    "get_settings",
]
