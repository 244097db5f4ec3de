"""
kafkaerr Constants Module

Centralized constants, one module per concern.
"""

from .cli import CLIDefaults
from .legacy import Legacy
from .logging import Logging
from .system import Application

__all__ = [
    "Application",
    "CLIDefaults",
    "Legacy",
    "Logging",
]
