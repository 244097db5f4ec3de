"""kafkaerr Configuration Module

Provides the Settings model and the loader functions used to obtain the
process-wide configuration.
"""

from __future__ import annotations

from .loader import get_config, load_settings, reload_config
from .settings import LegacySettings, LoggingSettings, Settings

__all__ = [
    "LegacySettings",
    "LoggingSettings",
    "Settings",
    "get_config",
    "load_settings",
    "reload_config",
]
