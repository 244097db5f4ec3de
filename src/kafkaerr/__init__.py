"""kafkaerr - error values for a Kafka client library.

Public API:
- ErrorCode, describe, name: the error code domain and its descriptions
- KafkaError and its constructors new, new_v, new_fatal, new_txn_requires_abort
- to_legacy, legacy_errstr: bridge to the (code, buffer) convention
"""

from __future__ import annotations

from kafkaerr.shared.constants import Application
from kafkaerr.shared.error_codes import ErrorCode
from kafkaerr.shared.error_messages import describe, name
from kafkaerr.shared.errors import (
    ConfigurationError,
    ErrorConsumedError,
    KafkaError,
    KafkaErrorFault,
    LegacyBufferError,
    new,
    new_fatal,
    new_txn_requires_abort,
    new_v,
)
from kafkaerr.shared.legacy import legacy_errstr, to_legacy

__version__ = Application.VERSION

__all__ = [
    "ConfigurationError",
    "ErrorCode",
    "ErrorConsumedError",
    "KafkaError",
    "KafkaErrorFault",
    "LegacyBufferError",
    "__version__",
    "describe",
    "legacy_errstr",
    "name",
    "new",
    "new_fatal",
    "new_txn_requires_abort",
    "new_v",
    "to_legacy",
]
