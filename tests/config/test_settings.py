"""
Tests for kafkaerr configuration loading.
"""

import pytest
from pydantic import ValidationError

from kafkaerr.config import (
    LegacySettings,
    LoggingSettings,
    Settings,
    get_config,
    load_settings,
    reload_config,
)
from kafkaerr.shared.errors import ConfigurationError, FaultCode


class TestSettingsModels:
    """Test cases for the settings models."""

    def test_defaults(self):
        """Test default values."""
        settings = Settings()

        assert settings.logging.level == "INFO"
        assert settings.logging.file is None
        assert settings.legacy.encoding == "utf-8"
        assert settings.legacy.errors == "replace"
        assert settings.legacy.default_errstr_size == 512

    def test_level_normalized(self):
        """Test that log levels are upper-cased."""
        assert LoggingSettings(level="debug").level == "DEBUG"

    def test_invalid_level(self):
        """Test that unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            LoggingSettings(level="chatty")

    def test_invalid_encoding(self):
        """Test that unknown codecs are rejected."""
        with pytest.raises(ValidationError):
            LegacySettings(encoding="no-such-codec")

    @pytest.mark.parametrize("encoding", ["utf-16", "utf-16-le", "utf-32", "rot13"])
    def test_nul_embedding_encoding_rejected(self, encoding):
        """Test that codecs unusable for NUL-terminated text are rejected."""
        with pytest.raises(ValidationError, match="NUL"):
            LegacySettings(encoding=encoding)

    def test_ascii_compatible_encodings_accepted(self):
        """Test that single-byte and UTF-8 style codecs pass validation."""
        for encoding in ("utf-8", "latin-1", "ascii", "cp1252"):
            assert LegacySettings(encoding=encoding).encoding == encoding

    def test_invalid_error_handler(self):
        """Test that unknown codec error handlers are rejected."""
        with pytest.raises(ValidationError):
            LegacySettings(errors="shrug")

    def test_buffer_size_must_be_positive(self):
        """Test the default buffer size bound."""
        with pytest.raises(ValidationError):
            LegacySettings(default_errstr_size=0)

    def test_environment_overrides(self, monkeypatch):
        """Test nested environment variables."""
        monkeypatch.setenv("KAFKAERR_LEGACY__ENCODING", "latin-1")
        monkeypatch.setenv("KAFKAERR_LOGGING__LEVEL", "debug")

        settings = Settings()

        assert settings.legacy.encoding == "latin-1"
        assert settings.logging.level == "DEBUG"


class TestTomlFiles:
    """Test cases for TOML load and save."""

    def test_round_trip(self, tmp_path):
        """Test saving and loading a settings file."""
        path = tmp_path / "conf" / "kafkaerr.toml"
        Settings(legacy=LegacySettings(default_errstr_size=64)).to_toml_file(path)

        loaded = Settings.from_toml_file(path)

        assert loaded.legacy.default_errstr_size == 64

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            Settings.from_toml_file(tmp_path / "missing.toml")


class TestLoader:
    """Test cases for load_settings and the global instance."""

    def test_load_without_files(self):
        """Test that the environment alone yields defaults."""
        assert load_settings().legacy.encoding == "utf-8"

    def test_load_from_working_directory(self, tmp_path):
        """Test discovery of ./kafkaerr.toml."""
        (tmp_path / "kafkaerr.toml").write_text(
            '[legacy]\nencoding = "ascii"\n', encoding="utf-8"
        )
        assert load_settings().legacy.encoding == "ascii"

    def test_load_from_env_path(self, tmp_path, monkeypatch):
        """Test the KAFKAERR_CONFIG variable."""
        path = tmp_path / "custom.toml"
        path.write_text("[legacy]\ndefault_errstr_size = 32\n", encoding="utf-8")
        monkeypatch.setenv("KAFKAERR_CONFIG", str(path))

        assert load_settings().legacy.default_errstr_size == 32

    def test_missing_explicit_file(self, tmp_path):
        """Test that a missing explicit path is a configuration fault."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(tmp_path / "missing.toml")
        assert exc_info.value.code is FaultCode.CONFIG_NOT_FOUND

    def test_invalid_values(self, tmp_path):
        """Test that validation failures are configuration faults."""
        path = tmp_path / "bad.toml"
        path.write_text('[logging]\nlevel = "chatty"\n', encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(path)
        assert exc_info.value.code is FaultCode.CONFIG_INVALID

    def test_malformed_file(self, tmp_path):
        """Test that unparsable TOML is a configuration fault."""
        path = tmp_path / "broken.toml"
        path.write_text("[legacy\n", encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(path)
        assert exc_info.value.code is FaultCode.CONFIG_INVALID

    def test_global_instance_is_cached(self):
        """Test the singleton accessor."""
        assert get_config() is get_config()

    def test_reload_picks_up_changes(self, monkeypatch):
        """Test that reload_config rebuilds the instance."""
        before = get_config()
        monkeypatch.setenv("KAFKAERR_LEGACY__DEFAULT_ERRSTR_SIZE", "128")

        after = reload_config()

        assert after is not before
        assert after.legacy.default_errstr_size == 128
