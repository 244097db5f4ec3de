"""
Pytest configuration and shared fixtures for kafkaerr tests.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest

from kafkaerr.config import reload_config
from kafkaerr.shared.error_codes import ErrorCode
from kafkaerr.shared.errors import KafkaError, new


@pytest.fixture(autouse=True)
def isolated_config(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Generator[None, None, None]:
    """Run every test without KAFKAERR_ variables or config files in reach."""
    for key in list(os.environ):
        if key.startswith("KAFKAERR_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    reload_config()
    yield


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None, None, None]:
    """Drop handlers installed on the package logger by a test."""
    yield
    package_logger = logging.getLogger("kafkaerr")
    package_logger.handlers.clear()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def timed_out_error() -> Generator[KafkaError, None, None]:
    """A live error value with a formatted message.

    Destroyed after the test unless the test consumed it.
    """
    error = new(ErrorCode._TIMED_OUT, "retry %d of %d", 2, 5)
    yield error
    if not error.consumed:
        error.destroy()
