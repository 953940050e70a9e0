"""
Client settings and configuration management.

Supports loading from:
1. SOPS-encrypted YAML files (botman.enc.yaml)
2. Plain YAML files
3. Environment variables (fallback)
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

import yaml

from .constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_SECTION,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
)

logger = logging.getLogger(__name__)


def _to_float(value: Any, default: float) -> float:
    """Safely parse a float, using default on error."""
    if value is None or value == "":
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _to_bool(value: Any, default: bool) -> bool:
    """Parse a bool from YAML or an environment string."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Connection settings for the Bot Manager API."""

    # EdgeGrid connection
    host: str = ""
    account_key: str = ""

    # HTTP client behaviour
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    user_agent: str = DEFAULT_USER_AGENT
    http_trace: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def base_url(self) -> str:
        """API base URL derived from the host."""
        if "://" in self.host:
            return self.host.rstrip("/")
        return f"https://{self.host.rstrip('/')}"

    def validate(self) -> list[str]:
        """Validate required settings are present. Returns list of errors."""
        errors = []

        if not self.host:
            errors.append("edgegrid.host is required")

        if self.timeout_seconds <= 0:
            errors.append(
                f"client.timeout_seconds must be > 0, got {self.timeout_seconds}"
            )

        if not self.user_agent:
            errors.append("client.user_agent must not be empty")

        level = self.log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            errors.append(f"client.log_level is not a valid level: {self.log_level}")

        return errors

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "edgegrid": {
                "host": self.host,
                "account_key": self.account_key,
            },
            "client": {
                "timeout_seconds": self.timeout_seconds,
                "user_agent": self.user_agent,
                "http_trace": self.http_trace,
                "log_level": self.log_level,
            },
        }

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> "Settings":
        """Create Settings from configuration dictionary (e.g., from SOPS)."""
        edgegrid = config.get("edgegrid") or {}
        client = config.get("client") or {}

        return cls(
            host=edgegrid.get("host", "") or "",
            account_key=edgegrid.get("account_key", "") or "",
            timeout_seconds=_to_float(
                client.get("timeout_seconds"), DEFAULT_TIMEOUT_SECONDS
            ),
            user_agent=client.get("user_agent") or DEFAULT_USER_AGENT,
            http_trace=_to_bool(client.get("http_trace"), False),
            log_level=client.get("log_level") or DEFAULT_LOG_LEVEL,
        )

    @classmethod
    def from_env(cls, section: str = DEFAULT_SECTION) -> "Settings":
        """
        Create Settings from environment variables.

        Reads AKAMAI_HOST, AKAMAI_ACCOUNT_KEY, AKAMAI_TIMEOUT,
        AKAMAI_USER_AGENT, AKAMAI_HTTP_TRACE and AKAMAI_LOG_LEVEL. A
        non-default section reads AKAMAI_{SECTION}_HOST etc. first and
        falls back to the unprefixed AKAMAI_ variables.
        """
        from .sops_loader import load_config

        return cls.from_dict(load_config(section=section))


# Default config file path
DEFAULT_CONFIG_PATH = Path("botman.enc.yaml")


@lru_cache
def get_settings(
    config_path: Optional[str] = None, section: str = DEFAULT_SECTION
) -> Settings:
    """
    Get cached settings instance.

    Loads from the config file if available, otherwise from env vars.

    Args:
        config_path: Optional path to a YAML or SOPS-encrypted config file
        section: Config section / environment prefix to read

    Returns:
        Settings instance
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    if path.exists():
        try:
            from .sops_loader import load_config

            config = load_config(path, section=section, fallback_to_env=False)
            return Settings.from_dict(config)
        except (OSError, RuntimeError, ValueError, yaml.YAMLError) as e:
            logger.warning(
                f"Failed to load config from {path}: {e}. "
                "Falling back to environment variables"
            )

    return Settings.from_env(section)


def clear_settings_cache() -> None:
    """Clear the cached settings (useful for testing)."""
    get_settings.cache_clear()

