"""Kafka Error Value Module

This module defines the error value handed to callers when a client
operation fails, plus the faults the package raises about its own misuse.

An error value carries:
- A code from the ErrorCode domain (or a raw integer outside it)
- An optional detail message, rendered once at construction
- Two modifiers: fatal and transaction-abortable

Each value has a single owner and is consumed exactly once, either by
``destroy()`` or by the legacy bridge. Any use after that raises
ErrorConsumedError.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import TracebackType
from typing import Any, Union

from .error_codes import Code, ErrorCode, coerce_code
from .error_messages import describe
from .error_messages import name as code_name

logger = logging.getLogger(__name__)

# Type alias for primitive context values (str, int, float, bool only)
PrimitiveContextValue = Union[str, int, float, bool]


class FaultCode(str, Enum):
    """Codes for faults raised by this package about its own misuse."""

    ERROR_CONSUMED = "ERROR_CONSUMED"
    LEGACY_BUFFER_INVALID = "LEGACY_BUFFER_INVALID"
    CONFIG_INVALID = "CONFIG_INVALID"
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"


def _coerce_primitives(value: Any | None) -> dict[str, PrimitiveContextValue] | None:
    """Coerce additional_data values to primitives.

    Converts Enum values to their value. Raises TypeError for anything else.
    """
    if value is None:
        return None

    if not isinstance(value, dict):
        error_msg = f"additional_data must be dict, got {type(value).__name__}"
        raise TypeError(error_msg)

    coerced: dict[str, PrimitiveContextValue] = {}
    for key, val in value.items():
        if isinstance(val, (str, int, float, bool)):
            coerced[key] = val
        elif isinstance(val, Enum):
            coerced[key] = val.value
        else:
            error_msg = (
                f"Cannot coerce {type(val).__name__} to primitive type. "
                f"Only str, int, float, bool, Enum are allowed."
            )
            raise TypeError(error_msg)

    return coerced


@dataclass(frozen=True)
class FaultContext:
    """Context information attached to a fault.

    Attributes:
        operation: Operation name that detected the fault
        additional_data: Optional dict with primitive values only
    """

    operation: str | None = None
    additional_data: dict[str, PrimitiveContextValue] | None = None

    def __post_init__(self) -> None:
        if self.additional_data is not None:
            object.__setattr__(
                self, "additional_data", _coerce_primitives(self.additional_data)
            )

    def safe_dict(self) -> dict[str, Any]:
        """Export context as a dict; additional_data is never None."""
        return {
            "operation": self.operation,
            "additional_data": self.additional_data or {},
        }


class KafkaErrorFault(Exception):
    """Base class for faults raised by this package.

    Faults report misuse of the error value API itself (use after consume,
    unusable legacy buffers, bad configuration). They are ordinary Python
    exceptions and are never represented as KafkaError values.
    """

    def __init__(
        self,
        code: FaultCode,
        message: str,
        context: FaultContext | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.context = context or FaultContext()
        super().__init__(f"{code.value}: {message}")

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert fault to dictionary for logging."""
        return {
            "code": self.code.value,
            "message": self.message,
            "context": self.context.safe_dict(),
        }


class ErrorConsumedError(KafkaErrorFault):
    """Raised when an error value is used after it was consumed."""


class LegacyBufferError(KafkaErrorFault):
    """Raised when the legacy bridge is given an unusable buffer."""


class ConfigurationError(KafkaErrorFault):
    """Raised when settings cannot be loaded or fail validation."""


def _render_message(fmt: str | None, args: tuple[Any, ...]) -> str | None:
    """Render a printf-style template into the stored message.

    Returns None when there is no template or the rendered text is empty.
    The text is cut at the first NUL so that it always fits the legacy
    C-string convention.
    """
    if fmt is None:
        return None
    if not isinstance(fmt, str):
        error_msg = f"format must be str, got {type(fmt).__name__}"
        raise TypeError(error_msg)
    if not fmt:
        return None

    # A single mapping argument feeds %(name)s directives
    if len(args) == 1 and isinstance(args[0], Mapping):
        text = fmt % args[0]
    else:
        text = fmt % args

    text = text.partition("\0")[0]
    return text or None


class KafkaError:
    """Error value reported by client operations.

    Instances are immutable: the code, message and flags are fixed at
    construction. The value is consumed exactly once, by ``destroy()`` or
    by ``kafkaerr.shared.legacy.to_legacy()``. Using it as a context manager
    destroys it on exit unless it was already consumed inside the block.

    Example:
        >>> with new(ErrorCode._TIMED_OUT, "retry %d of %d", 2, 5) as error:
        ...     error.message
        'retry 2 of 5'
    """

    __slots__ = ("_code", "_message", "_fatal", "_txn_abortable", "_consumed")

    def __init__(
        self,
        code: Code,
        fmt: str | None = None,
        *args: Any,
        fatal: bool = False,
        txn_abortable: bool = False,
    ) -> None:
        """Initialize KafkaError.

        Args:
            code: ErrorCode member or raw integer
            fmt: Optional printf-style template for the detail message
            *args: Arguments substituted into ``fmt``
            fatal: Mark the error as unrecoverable for the client instance
            txn_abortable: Mark the error as requiring the current
                transaction to be aborted
        """
        object.__setattr__(self, "_code", coerce_code(code))
        object.__setattr__(self, "_message", _render_message(fmt, args))
        object.__setattr__(self, "_fatal", bool(fatal))
        object.__setattr__(self, "_txn_abortable", bool(txn_abortable))
        object.__setattr__(self, "_consumed", False)

    def __setattr__(self, key: str, value: Any) -> None:
        error_msg = f"{type(self).__name__} is immutable; cannot set {key!r}"
        raise AttributeError(error_msg)

    def __delattr__(self, key: str) -> None:
        error_msg = f"{type(self).__name__} is immutable; cannot delete {key!r}"
        raise AttributeError(error_msg)

    def _ensure_live(self, operation: str) -> None:
        if self._consumed:
            fault = ErrorConsumedError(
                FaultCode.ERROR_CONSUMED,
                f"Error value used after it was consumed ({operation})",
                FaultContext(
                    operation=operation,
                    additional_data={"error_code": int(self._code)},
                ),
            )
            logger.error(
                fault.message,
                extra={"error_code": fault.code.value, "context": fault.to_dict()},
            )
            raise fault

    @property
    def consumed(self) -> bool:
        """Whether the value was destroyed or converted to the legacy form."""
        return self._consumed

    @property
    def code(self) -> Code:
        """The error code."""
        self._ensure_live("code")
        return self._code

    @property
    def message(self) -> str:
        """The detail message, or the code's default description if none was set."""
        self._ensure_live("message")
        if self._message is not None:
            return self._message
        return describe(self._code)

    @property
    def name(self) -> str:
        """Symbolic name of the error code."""
        self._ensure_live("name")
        return code_name(self._code)

    def has_message(self) -> bool:
        """Whether an explicit detail message was set at construction."""
        self._ensure_live("has_message")
        return self._message is not None

    def is_fatal(self) -> bool:
        self._ensure_live("is_fatal")
        return self._fatal

    def is_txn_abortable(self) -> bool:
        self._ensure_live("is_txn_abortable")
        return self._txn_abortable

    def copy(self) -> KafkaError:
        """Return an independent, unconsumed value with the same fields."""
        self._ensure_live("copy")
        if self._message is None:
            return KafkaError(
                self._code, fatal=self._fatal, txn_abortable=self._txn_abortable
            )
        return KafkaError(
            self._code,
            "%s",
            self._message,
            fatal=self._fatal,
            txn_abortable=self._txn_abortable,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging."""
        self._ensure_live("to_dict")
        return {
            "code": int(self._code),
            "name": code_name(self._code),
            "message": self.message,
            "fatal": self._fatal,
            "txn_abortable": self._txn_abortable,
        }

    def destroy(self) -> None:
        """Release the value. It must not be used afterwards."""
        self._ensure_live("destroy")
        object.__setattr__(self, "_message", None)
        object.__setattr__(self, "_consumed", True)

    def __enter__(self) -> KafkaError:
        self._ensure_live("__enter__")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if not self._consumed:
            self.destroy()

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        if self._consumed:
            return f"<{type(self).__name__} consumed>"
        return (
            f"{type(self).__name__}(code={code_name(self._code)}, "
            f"message={self.message!r}, fatal={self._fatal}, "
            f"txn_abortable={self._txn_abortable})"
        )


# Constructors
def new_v(code: Code, fmt: str | None, args: tuple[Any, ...]) -> KafkaError:
    """Create an error value from a template and an already-collected argument tuple.

    For callers that take ``*args`` themselves and forward them unchanged.
    Produces exactly what ``new(code, fmt, *args)`` produces.
    """
    return KafkaError(code, fmt, *args)


def new(code: Code, fmt: str | None = None, *args: Any) -> KafkaError:
    """Create an error value with an optional printf-style detail message.

    Args:
        code: ErrorCode member or raw integer
        fmt: Optional template; None or "" leaves the message unset
        *args: Arguments substituted into ``fmt``

    Returns:
        A new KafkaError with both flags cleared

    Raises:
        TypeError, ValueError: If ``fmt`` does not match ``args``

    Example:
        >>> new(ErrorCode._STATE, "retry %d of %d", 2, 5).message
        'retry 2 of 5'
    """
    return new_v(code, fmt, args)


def new_fatal(code: Code, fmt: str | None = None, *args: Any) -> KafkaError:
    """Create an error value marked fatal for the owning client instance."""
    return KafkaError(code, fmt, *args, fatal=True)


def new_txn_requires_abort(
    code: Code, fmt: str | None = None, *args: Any
) -> KafkaError:
    """Create an error value that requires the current transaction to be aborted."""
    return KafkaError(code, fmt, *args, txn_abortable=True)


__all__ = [
    "ConfigurationError",
    "ErrorCode",
    "ErrorConsumedError",
    "FaultCode",
    "FaultContext",
    "KafkaError",
    "KafkaErrorFault",
    "LegacyBufferError",
    "new",
    "new_fatal",
    "new_txn_requires_abort",
    "new_v",
]
