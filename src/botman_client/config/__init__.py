"""Configuration module."""

from .constants import (
    DEFAULT_SECTION,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
)
from .settings import Settings, clear_settings_cache, get_settings
from .sops_loader import (
    check_sops_installed,
    decrypt_sops_file,
    load_config,
    load_yaml_file,
)

__all__ = [
    # Defaults
    "DEFAULT_SECTION",
    "DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_USER_AGENT",
    # Settings
    "Settings",
    "get_settings",
    "clear_settings_cache",
    # Config loading
    "load_config",
    "load_yaml_file",
    "decrypt_sops_file",
    "check_sops_installed",
]
