"""
Legacy Bridge Constants

Defaults for writing error text into fixed-capacity, NUL-terminated buffers.
"""

from typing import Final


class Legacy:
    """Legacy (code, buffer) bridge defaults."""

    DEFAULT_ENCODING: Final = "utf-8"
    DEFAULT_ERRORS: Final = "replace"
    # Matches the errstr[512] buffers older call sites allocate
    DEFAULT_ERRSTR_SIZE: Final = 512
    NUL: Final = b"\0"
