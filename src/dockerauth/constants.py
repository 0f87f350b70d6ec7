"""Constants for dockerauth.  Overrideable for testing."""

from pathlib import Path

__all__ = [
    "CONFIG_FILE_ENV_VAR",
    "CREDENTIALS_PATH",
    "ENV_PREFIX",
    "REDACTED",
    "ROOT_LOGGER",
]

ENV_PREFIX = "DOCKERAUTH_"
"""Prefix for environment variables governing dockerauth behavior."""

CONFIG_FILE_ENV_VAR = f"{ENV_PREFIX}CONFIG_FILE"
"""Name of environment variable specifying the YAML configuration file."""

CREDENTIALS_PATH = Path.home() / ".docker" / "config.json"
"""Default location of the Docker credential store."""

REDACTED = "<redacted>"
"""Replacement for passwords in command-line output."""

ROOT_LOGGER = "dockerauth"
"""Root logger name."""
