"""Legacy (code, buffer) bridge.

Older call sites report failures as an error code plus a caller-supplied,
fixed-capacity, NUL-terminated byte buffer. ``to_legacy`` converts a
KafkaError into that convention and consumes it.
"""

from __future__ import annotations

import logging
from typing import Union

from kafkaerr.shared.constants import Legacy
from kafkaerr.shared.error_codes import Code
from kafkaerr.shared.errors import (
    FaultCode,
    FaultContext,
    KafkaError,
    LegacyBufferError,
)

logger = logging.getLogger(__name__)

# Anything exposing a writable byte buffer (bytearray, memoryview, array, mmap)
WritableBuffer = Union[bytearray, memoryview]

# ASCII text used to check that a codec never emits NUL bytes
_CODEC_SAMPLE = "Err-0?"


def _buffer_fault(message: str, size: int | None) -> LegacyBufferError:
    additional_data = {"errstr_size": size} if size is not None else None
    return LegacyBufferError(
        FaultCode.LEGACY_BUFFER_INVALID,
        message,
        FaultContext(operation="to_legacy", additional_data=additional_data),
    )


def is_nul_free_encoding(encoding: str) -> bool:
    """Return True if ``encoding`` is a text codec that never emits NUL for ASCII.

    UTF-16 and UTF-32 pad every character with zero bytes, which would end a
    legacy string early.
    """
    try:
        data = _CODEC_SAMPLE.encode(encoding)
    except LookupError:
        return False
    return Legacy.NUL not in data


def _writable_view(errstr: WritableBuffer | None, size: int | None) -> memoryview | None:
    if errstr is None:
        if size:
            raise _buffer_fault("errstr is None but errstr_size is non-zero", size)
        return None

    try:
        view = memoryview(errstr).cast("B")
    except TypeError as e:
        error_msg = (
            "errstr must be a contiguous buffer, "
            f"got {type(errstr).__name__}"
        )
        raise _buffer_fault(error_msg, size) from e

    if view.readonly:
        raise _buffer_fault("errstr is read-only", size)
    return view


def write_errstr(
    errstr: WritableBuffer | None,
    text: str,
    errstr_size: int | None = None,
    *,
    encoding: str | None = None,
    errors: str | None = None,
) -> int:
    """Write ``text`` into a legacy buffer as a NUL-terminated byte string.

    At most ``errstr_size - 1`` encoded bytes are written, followed by a NUL.
    Nothing is written when the size is 0. Truncation is byte-wise, so a
    multi-byte character may be cut.

    Args:
        errstr: Writable buffer, or None together with a size of 0
        text: Text to write
        errstr_size: Capacity to honour; defaults to the buffer length
        encoding: Codec; defaults to UTF-8
        errors: Codec error handler; defaults to ``replace``

    Returns:
        Number of text bytes written, excluding the NUL

    Raises:
        LegacyBufferError: If the buffer is not writable or smaller than
            ``errstr_size``, or if ``encoding`` would embed NUL bytes
    """
    encoding = encoding or Legacy.DEFAULT_ENCODING
    if not is_nul_free_encoding(encoding):
        raise _buffer_fault(
            f"encoding {encoding!r} cannot produce NUL-terminated text", errstr_size
        )

    view = _writable_view(errstr, errstr_size)
    size = errstr_size if errstr_size is not None else (view.nbytes if view else 0)

    if size < 0:
        raise _buffer_fault("errstr_size must not be negative", size)
    if view is not None and size > view.nbytes:
        raise _buffer_fault(
            f"errstr_size {size} exceeds buffer length {view.nbytes}", size
        )
    if size == 0 or view is None:
        return 0

    data = text.encode(encoding, errors or Legacy.DEFAULT_ERRORS)
    written = data[: size - 1]
    if len(written) < len(data):
        logger.debug(
            "Legacy error string truncated from %d to %d bytes",
            len(data),
            len(written),
            extra={"operation": "to_legacy"},
        )

    view[: len(written)] = written
    view[len(written)] = 0
    return len(written)


def to_legacy(
    error: KafkaError,
    errstr: WritableBuffer | None,
    errstr_size: int | None = None,
    *,
    encoding: str | None = None,
    errors: str | None = None,
) -> Code:
    """Convert an error value to the legacy (code, buffer) convention.

    The error's message (or its code's default description) is written into
    ``errstr`` as by ``write_errstr``. The error is consumed whether or not
    the write succeeds; it must not be used again. No configuration is read.

    Args:
        error: Live error value; consumed by this call
        errstr: Writable buffer receiving the NUL-terminated text
        errstr_size: Capacity to honour; defaults to the buffer length
        encoding: Codec; defaults to UTF-8
        errors: Codec error handler; defaults to ``replace``

    Returns:
        The error's code

    Raises:
        ErrorConsumedError: If ``error`` was already consumed
        LegacyBufferError: If the buffer cannot be written

    Example:
        >>> buf = bytearray(8)
        >>> to_legacy(new(ErrorCode._TIMED_OUT, "retry %d of %d", 2, 5), buf)
        <ErrorCode._TIMED_OUT: -185>
        >>> legacy_errstr(buf)
        'retry 2'
    """
    code = error.code
    text = error.message
    try:
        write_errstr(errstr, text, errstr_size, encoding=encoding, errors=errors)
    finally:
        error.destroy()
    return code


def legacy_errstr(
    errstr: WritableBuffer | bytes,
    *,
    encoding: str | None = None,
    errors: str | None = None,
) -> str:
    """Decode a NUL-terminated legacy buffer back to text."""
    raw = bytes(errstr).split(Legacy.NUL, 1)[0]
    return raw.decode(
        encoding or Legacy.DEFAULT_ENCODING, errors or Legacy.DEFAULT_ERRORS
    )


def new_errstr_buffer(size: int | None = None) -> bytearray:
    """Allocate a zeroed legacy buffer, 512 bytes unless ``size`` is given."""
    return bytearray(size if size is not None else Legacy.DEFAULT_ERRSTR_SIZE)


__all__ = [
    "is_nul_free_encoding",
    "legacy_errstr",
    "new_errstr_buffer",
    "to_legacy",
    "write_errstr",
]
