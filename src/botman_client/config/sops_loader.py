"""
Configuration file loader.

Supports plain YAML files and SOPS-encrypted YAML files (``*.enc.yaml``).
"""

import os
import subprocess
from pathlib import Path
from typing import Any, Optional

import yaml

from .constants import DEFAULT_SECTION, ENV_PREFIX


def is_sops_file(file_path: Path) -> bool:
    """Check whether a path follows the encrypted config naming convention."""
    return file_path.name.endswith((".enc.yaml", ".enc.yml"))


def decrypt_sops_file(file_path: Path) -> dict[str, Any]:
    """
    Decrypt a SOPS-encrypted file and return parsed YAML.

    Args:
        file_path: Path to the encrypted file

    Returns:
        Decrypted configuration as dictionary

    Raises:
        FileNotFoundError: If file doesn't exist
        RuntimeError: If SOPS decryption fails
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Encrypted config file not found: {file_path}")

    try:
        result = subprocess.run(
            ["sops", "-d", str(file_path)],
            capture_output=True,
            text=True,
            check=True,
        )
        return yaml.safe_load(result.stdout) or {}
    except subprocess.CalledProcessError as e:
        raise RuntimeError(f"SOPS decryption failed: {e.stderr}") from e
    except FileNotFoundError:
        raise RuntimeError(
            "SOPS not installed. Install with: brew install sops (macOS) "
            "or download from https://github.com/getsops/sops/releases"
        )


def load_yaml_file(file_path: Path) -> dict[str, Any]:
    """
    Read a plain YAML config file.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If the document is not a mapping
    """
    with open(file_path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError(f"Config file {file_path} must contain a mapping")
    return config


def _env_section(section: str) -> dict[str, Any]:
    prefix = ENV_PREFIX
    if section != DEFAULT_SECTION:
        prefix = f"{ENV_PREFIX}_{section.upper()}"

    def lookup(key: str) -> Optional[str]:
        value = os.environ.get(f"{prefix}_{key}")
        if value is None and prefix != ENV_PREFIX:
            value = os.environ.get(f"{ENV_PREFIX}_{key}")
        return value

    edgegrid = {
        "host": lookup("HOST"),
        "account_key": lookup("ACCOUNT_KEY"),
    }
    client = {
        "timeout_seconds": lookup("TIMEOUT"),
        "user_agent": lookup("USER_AGENT"),
        "http_trace": lookup("HTTP_TRACE"),
        "log_level": lookup("LOG_LEVEL"),
    }
    return {
        "edgegrid": {k: v for k, v in edgegrid.items() if v is not None},
        "client": {k: v for k, v in client.items() if v is not None},
    }


def load_config(
    config_path: Optional[Path] = None,
    section: str = DEFAULT_SECTION,
    fallback_to_env: bool = True,
) -> dict[str, Any]:
    """
    Load configuration from a YAML file or environment variables.

    Priority:
    1. Config file (SOPS-encrypted or plain, if provided and exists)
    2. Environment variables (if fallback_to_env=True)

    Args:
        config_path: Path to the config file
        section: Top-level section of the file to read; also selects the
            ``AKAMAI_{SECTION}_*`` environment variables
        fallback_to_env: Whether to fall back to environment variables

    Returns:
        Configuration dictionary with ``edgegrid`` and ``client`` sections
    """
    if config_path and config_path.exists():
        if is_sops_file(config_path):
            config = decrypt_sops_file(config_path)
        else:
            config = load_yaml_file(config_path)

        # Multi-section files nest the settings under the section name
        if section in config and isinstance(config[section], dict):
            return config[section]
        return config

    if fallback_to_env:
        return _env_section(section)

    return {}


def check_sops_installed() -> bool:
    """Check if SOPS is installed and accessible."""
    try:
        subprocess.run(
            ["sops", "--version"],
            capture_output=True,
            check=True,
        )
        return True
    except (subprocess.CalledProcessError, FileNotFoundError):
        return False
