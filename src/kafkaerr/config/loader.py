"""Settings loader and singleton manager.

This module handles:
- Configuration file loading from TOML
- Thread-safe singleton pattern for the Settings instance
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path

import toml
from pydantic import ValidationError

from kafkaerr.config.settings import Settings
from kafkaerr.shared.constants import Application
from kafkaerr.shared.errors import (
    ConfigurationError,
    FaultCode,
    FaultContext,
)

logger = logging.getLogger(__name__)


class SettingsLoader:
    """Thread-safe singleton manager for Settings.

    Uses double-checked locking pattern to ensure thread-safety
    while minimizing lock overhead.
    """

    _instance: Settings | None = None
    _lock: threading.RLock = threading.RLock()

    def get_config(self) -> Settings:
        """Get the global settings instance, loading it if necessary."""
        if self._instance is None:
            with self._lock:
                if self._instance is None:
                    self._instance = load_settings()

        return self._instance

    def reload_config(self) -> Settings:
        """Reload the global settings instance from the environment and files."""
        with self._lock:
            self._instance = load_settings()

        return self._instance


def _default_config_paths() -> list[Path]:
    return [
        Path(f"{Application.NAME}.toml"),
        Path.home() / f".{Application.NAME}" / "config.toml",
    ]


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings from a TOML configuration file or the environment.

    Args:
        config_path: Optional path to a TOML file. If None, the path named by
            ``KAFKAERR_CONFIG`` is tried, then ``./kafkaerr.toml`` and
            ``~/.kafkaerr/config.toml``, then environment variables alone.

    Returns:
        Validated Settings instance

    Raises:
        ConfigurationError: If the file is missing or a value fails validation
    """
    explicit_path = config_path or os.environ.get(Application.CONFIG_ENV_VAR)

    try:
        if explicit_path:
            logger.debug("Loading settings from %s", explicit_path)
            return Settings.from_toml_file(explicit_path)

        for path in _default_config_paths():
            if path.exists():
                logger.debug("Loading settings from %s", path)
                return Settings.from_toml_file(path)

        return Settings()
    except FileNotFoundError as e:
        raise ConfigurationError(
            FaultCode.CONFIG_NOT_FOUND,
            str(e),
            FaultContext(operation="load_settings"),
        ) from e
    except toml.TomlDecodeError as e:
        raise ConfigurationError(
            FaultCode.CONFIG_INVALID,
            f"Malformed configuration file: {e}",
            FaultContext(operation="load_settings"),
        ) from e
    except ValidationError as e:
        raise ConfigurationError(
            FaultCode.CONFIG_INVALID,
            f"Invalid configuration: {e.error_count()} validation error(s)",
            FaultContext(
                operation="load_settings",
                additional_data={"errors": str(e)},
            ),
        ) from e


# Global loader instance
_loader = SettingsLoader()


def get_config() -> Settings:
    """Get the global settings instance (thread-safe)."""
    return _loader.get_config()


def reload_config() -> Settings:
    """Reload the global settings instance."""
    return _loader.reload_config()


__all__ = [
    "SettingsLoader",
    "get_config",
    "load_settings",
    "reload_config",
]
