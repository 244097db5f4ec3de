"""Logging configuration constants."""

from typing import Final


class Logging:
    """Logging defaults."""

    DEFAULT_LEVEL: Final = "INFO"
    LEVELS: Final = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    TIME_FORMAT: Final = "[%H:%M:%S]"
