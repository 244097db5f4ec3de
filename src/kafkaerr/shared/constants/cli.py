"""CLI constants."""

from typing import Final


class CLIDefaults:
    """CLI exit codes."""

    EXIT_SUCCESS: Final = 0
    EXIT_ERROR: Final = 1
    EXIT_USAGE: Final = 2
