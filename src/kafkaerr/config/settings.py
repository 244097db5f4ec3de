"""kafkaerr Settings Configuration Model.

Settings are read from ``KAFKAERR_``-prefixed environment variables, with
``__`` separating nested sections (``KAFKAERR_LEGACY__ENCODING=latin-1``),
and may also be loaded from or saved to a TOML file.
"""

from __future__ import annotations

import codecs
import logging
from pathlib import Path

import toml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from kafkaerr.shared.constants import Legacy, Logging
from kafkaerr.shared.legacy import is_nul_free_encoding

logger = logging.getLogger(__name__)


class LoggingSettings(BaseModel):
    """Logging configuration.

    Controls the level, optional JSON log file and console output of the
    structured logger.
    """

    level: str = Field(default=Logging.DEFAULT_LEVEL, description="Logging level")
    file: str | None = Field(default=None, description="Optional JSON log file path")
    console_output: bool = Field(default=True, description="Enable console logging")
    rich_console: bool = Field(
        default=True,
        description="Use Rich console output instead of JSON lines on the console",
    )

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        level = value.upper()
        if level not in Logging.LEVELS:
            error_msg = f"level must be one of {', '.join(Logging.LEVELS)}, got {value!r}"
            raise ValueError(error_msg)
        return level


class LegacySettings(BaseModel):
    """Legacy (code, buffer) bridge configuration."""

    encoding: str = Field(
        default=Legacy.DEFAULT_ENCODING,
        description="Codec used to write messages into legacy buffers",
    )
    errors: str = Field(
        default=Legacy.DEFAULT_ERRORS,
        description="Codec error handler for unencodable characters",
    )
    default_errstr_size: int = Field(
        default=Legacy.DEFAULT_ERRSTR_SIZE,
        ge=1,
        description="Buffer size used when a caller does not provide one",
    )

    @field_validator("encoding")
    @classmethod
    def _validate_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            error_msg = f"unknown encoding: {value}"
            raise ValueError(error_msg) from e
        if not is_nul_free_encoding(value):
            error_msg = f"encoding {value} cannot produce NUL-terminated text"
            raise ValueError(error_msg)
        return value

    @field_validator("errors")
    @classmethod
    def _validate_errors(cls, value: str) -> str:
        try:
            codecs.lookup_error(value)
        except LookupError as e:
            error_msg = f"unknown codec error handler: {value}"
            raise ValueError(error_msg) from e
        return value


class Settings(BaseSettings):
    """Unified configuration for the error value package."""

    model_config = SettingsConfigDict(
        env_prefix="KAFKAERR_",
        env_nested_delimiter="__",
        env_ignore_empty=True,
        extra="ignore",
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    legacy: LegacySettings = Field(default_factory=LegacySettings)

    @classmethod
    def from_toml_file(cls, file_path: str | Path) -> Settings:
        """Load settings from TOML file. Unset keys fall back to the environment."""

        file_path = Path(file_path)
        if not file_path.exists():
            msg = f"Configuration file not found: {file_path}"
            raise FileNotFoundError(msg)

        raw_config = toml.load(file_path)
        return cls(**raw_config)

    def to_toml_file(self, file_path: str | Path) -> None:
        """Save settings to TOML file."""

        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        config_dict = self.model_dump(exclude_none=True)

        with open(file_path, "w", encoding="utf-8") as f:
            toml.dump(config_dict, f)
        logger.debug("Saved settings to %s", file_path)


__all__ = [
    "LegacySettings",
    "LoggingSettings",
    "Settings",
]
