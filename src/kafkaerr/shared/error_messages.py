"""Kafka error descriptions.

Default human-readable descriptions for every known error code. An error
value without an explicit message reports the description of its code.

The module follows these principles:
- One Source of Truth: All descriptions are centralized here
- Total lookups: Unknown codes still yield a printable name and description
"""

from __future__ import annotations

from typing import NamedTuple

from .error_codes import Code, ErrorCode, coerce_code

ERROR_DESCRIPTIONS: dict[ErrorCode, str] = {
    # Local (client) errors
    ErrorCode._BAD_MSG: "Local: Bad message format",
    ErrorCode._BAD_COMPRESSION: "Local: Invalid compressed data",
    ErrorCode._DESTROY: "Local: Broker handle destroyed",
    ErrorCode._FAIL: "Local: Communication failure with broker",
    ErrorCode._TRANSPORT: "Local: Broker transport failure",
    ErrorCode._CRIT_SYS_RESOURCE: "Local: Critical system resource failure",
    ErrorCode._RESOLVE: "Local: Host resolution failure",
    ErrorCode._MSG_TIMED_OUT: "Local: Message timed out",
    ErrorCode._PARTITION_EOF: "Broker: No more messages",
    ErrorCode._UNKNOWN_PARTITION: "Local: Unknown partition",
    ErrorCode._FS: "Local: File or filesystem error",
    ErrorCode._UNKNOWN_TOPIC: "Local: Unknown topic",
    ErrorCode._ALL_BROKERS_DOWN: "Local: All broker connections are down",
    ErrorCode._INVALID_ARG: "Local: Invalid argument or configuration",
    ErrorCode._TIMED_OUT: "Local: Timed out",
    ErrorCode._QUEUE_FULL: "Local: Queue full",
    ErrorCode._ISR_INSUFF: "Local: ISR count insufficient",
    ErrorCode._NODE_UPDATE: "Local: Broker node update",
    ErrorCode._SSL: "Local: SSL error",
    ErrorCode._WAIT_COORD: "Local: Waiting for coordinator",
    ErrorCode._UNKNOWN_GROUP: "Local: Unknown group",
    ErrorCode._IN_PROGRESS: "Local: Operation in progress",
    ErrorCode._PREV_IN_PROGRESS: "Local: Previous operation in progress",
    ErrorCode._EXISTING_SUBSCRIPTION: "Local: Existing subscription",
    ErrorCode._ASSIGN_PARTITIONS: "Local: Assign partitions",
    ErrorCode._REVOKE_PARTITIONS: "Local: Revoke partitions",
    ErrorCode._CONFLICT: "Local: Conflicting use",
    ErrorCode._STATE: "Local: Erroneous state",
    ErrorCode._UNKNOWN_PROTOCOL: "Local: Unknown protocol",
    ErrorCode._NOT_IMPLEMENTED: "Local: Not implemented",
    ErrorCode._AUTHENTICATION: "Local: Authentication failure",
    ErrorCode._NO_OFFSET: "Local: No offset stored",
    ErrorCode._OUTDATED: "Local: Outdated",
    ErrorCode._TIMED_OUT_QUEUE: "Local: Timed out in queue",
    ErrorCode._UNSUPPORTED_FEATURE: "Local: Required feature not supported by broker",
    ErrorCode._WAIT_CACHE: "Local: Awaiting cache update",
    ErrorCode._INTR: "Local: Operation interrupted",
    ErrorCode._KEY_SERIALIZATION: "Local: Key serialization error",
    ErrorCode._VALUE_SERIALIZATION: "Local: Value serialization error",
    ErrorCode._KEY_DESERIALIZATION: "Local: Key deserialization error",
    ErrorCode._VALUE_DESERIALIZATION: "Local: Value deserialization error",
    ErrorCode._PARTIAL: "Local: Partial response",
    ErrorCode._READ_ONLY: "Local: Read-only object",
    ErrorCode._NOENT: "Local: No such entry",
    ErrorCode._UNDERFLOW: "Local: Read underflow",
    ErrorCode._INVALID_TYPE: "Local: Invalid type",
    ErrorCode._RETRY: "Local: Retry operation",
    ErrorCode._PURGE_QUEUE: "Local: Purged in queue",
    ErrorCode._PURGE_INFLIGHT: "Local: Purged in flight",
    ErrorCode._FATAL: "Local: Fatal error",
    ErrorCode._INCONSISTENT: "Local: Inconsistent state",
    ErrorCode._GAPLESS_GUARANTEE: (
        "Local: Gap-less ordering would not be guaranteed if proceeding"
    ),
    ErrorCode._MAX_POLL_EXCEEDED: (
        "Local: Maximum application poll interval (max.poll.interval.ms) exceeded"
    ),
    ErrorCode._UNKNOWN_BROKER: "Local: Unknown broker",
    ErrorCode._NOT_CONFIGURED: "Local: Functionality not configured",
    ErrorCode._FENCED: "Local: This instance has been fenced by a newer instance",
    ErrorCode._APPLICATION: "Local: Application generated error",
    ErrorCode._ASSIGNMENT_LOST: "Local: Group partition assignment lost",
    ErrorCode._NOOP: "Local: No operation performed",
    ErrorCode._AUTO_OFFSET_RESET: "Local: No offset to automatically reset to",
    # Broker errors
    ErrorCode.UNKNOWN: "Unknown broker error",
    ErrorCode.NO_ERROR: "Success",
    ErrorCode.OFFSET_OUT_OF_RANGE: "Broker: Offset out of range",
    ErrorCode.INVALID_MSG: "Broker: Invalid message",
    ErrorCode.UNKNOWN_TOPIC_OR_PART: "Broker: Unknown topic or partition",
    ErrorCode.INVALID_MSG_SIZE: "Broker: Invalid message size",
    ErrorCode.LEADER_NOT_AVAILABLE: "Broker: Leader not available",
    ErrorCode.NOT_LEADER_FOR_PARTITION: "Broker: Not leader for partition",
    ErrorCode.REQUEST_TIMED_OUT: "Broker: Request timed out",
    ErrorCode.BROKER_NOT_AVAILABLE: "Broker: Broker not available",
    ErrorCode.REPLICA_NOT_AVAILABLE: "Broker: Replica not available",
    ErrorCode.MSG_SIZE_TOO_LARGE: "Broker: Message size too large",
    ErrorCode.STALE_CTRL_EPOCH: "Broker: StaleControllerEpochCode",
    ErrorCode.OFFSET_METADATA_TOO_LARGE: "Broker: Offset metadata string too large",
    ErrorCode.NETWORK_EXCEPTION: (
        "Broker: Broker disconnected before response received"
    ),
    ErrorCode.COORDINATOR_LOAD_IN_PROGRESS: "Broker: Coordinator load in progress",
    ErrorCode.COORDINATOR_NOT_AVAILABLE: "Broker: Coordinator not available",
    ErrorCode.NOT_COORDINATOR: "Broker: Not coordinator",
    ErrorCode.TOPIC_EXCEPTION: "Broker: Invalid topic",
    ErrorCode.RECORD_LIST_TOO_LARGE: (
        "Broker: Message batch larger than configured server segment size"
    ),
    ErrorCode.NOT_ENOUGH_REPLICAS: "Broker: Not enough in-sync replicas",
    ErrorCode.NOT_ENOUGH_REPLICAS_AFTER_APPEND: (
        "Broker: Message(s) written to insufficient number of in-sync replicas"
    ),
    ErrorCode.INVALID_REQUIRED_ACKS: "Broker: Invalid required acks value",
    ErrorCode.ILLEGAL_GENERATION: "Broker: Specified group generation id is not valid",
    ErrorCode.INCONSISTENT_GROUP_PROTOCOL: "Broker: Inconsistent group protocol",
    ErrorCode.INVALID_GROUP_ID: "Broker: Invalid group.id",
    ErrorCode.UNKNOWN_MEMBER_ID: "Broker: Unknown member",
    ErrorCode.INVALID_SESSION_TIMEOUT: "Broker: Invalid session timeout",
    ErrorCode.REBALANCE_IN_PROGRESS: "Broker: Group rebalance in progress",
    ErrorCode.INVALID_COMMIT_OFFSET_SIZE: (
        "Broker: Commit offset data size is not valid"
    ),
    ErrorCode.TOPIC_AUTHORIZATION_FAILED: "Broker: Topic authorization failed",
    ErrorCode.GROUP_AUTHORIZATION_FAILED: "Broker: Group authorization failed",
    ErrorCode.CLUSTER_AUTHORIZATION_FAILED: "Broker: Cluster authorization failed",
    ErrorCode.INVALID_TIMESTAMP: "Broker: Invalid timestamp",
    ErrorCode.UNSUPPORTED_SASL_MECHANISM: "Broker: Unsupported SASL mechanism",
    ErrorCode.ILLEGAL_SASL_STATE: "Broker: Request not valid in current SASL state",
    ErrorCode.UNSUPPORTED_VERSION: "Broker: API version not supported",
    ErrorCode.TOPIC_ALREADY_EXISTS: "Broker: Topic already exists",
    ErrorCode.INVALID_PARTITIONS: "Broker: Invalid number of partitions",
    ErrorCode.INVALID_REPLICATION_FACTOR: "Broker: Invalid replication factor",
    ErrorCode.INVALID_REPLICA_ASSIGNMENT: "Broker: Invalid replica assignment",
    ErrorCode.INVALID_CONFIG: "Broker: Configuration is invalid",
    ErrorCode.NOT_CONTROLLER: "Broker: Not controller for cluster",
    ErrorCode.INVALID_REQUEST: "Broker: Invalid request",
    ErrorCode.UNSUPPORTED_FOR_MESSAGE_FORMAT: (
        "Broker: Message format on broker does not support request"
    ),
    ErrorCode.POLICY_VIOLATION: "Broker: Policy violation",
    ErrorCode.OUT_OF_ORDER_SEQUENCE_NUMBER: (
        "Broker: Broker received an out of order sequence number"
    ),
    ErrorCode.DUPLICATE_SEQUENCE_NUMBER: (
        "Broker: Broker received a duplicate sequence number"
    ),
    ErrorCode.INVALID_PRODUCER_EPOCH: (
        "Broker: Producer attempted an operation with an old epoch"
    ),
    ErrorCode.INVALID_TXN_STATE: (
        "Broker: Producer attempted a transactional operation in an invalid state"
    ),
    ErrorCode.INVALID_PRODUCER_ID_MAPPING: (
        "Broker: Producer attempted to use a producer id which is not currently "
        "assigned to its transactional id"
    ),
    ErrorCode.INVALID_TRANSACTION_TIMEOUT: (
        "Broker: Transaction timeout is larger than the maximum value allowed by "
        "the broker's max.transaction.timeout.ms"
    ),
    ErrorCode.CONCURRENT_TRANSACTIONS: (
        "Broker: Producer attempted to update a transaction while another "
        "concurrent operation on the same transaction was ongoing"
    ),
    ErrorCode.TRANSACTION_COORDINATOR_FENCED: (
        "Broker: Indicates that the transaction coordinator sending a "
        "WriteTxnMarker is no longer the current coordinator for a given producer"
    ),
    ErrorCode.TRANSACTIONAL_ID_AUTHORIZATION_FAILED: (
        "Broker: Transactional Id authorization failed"
    ),
    ErrorCode.SECURITY_DISABLED: "Broker: Security features are disabled",
    ErrorCode.OPERATION_NOT_ATTEMPTED: "Broker: Operation not attempted",
    ErrorCode.KAFKA_STORAGE_ERROR: (
        "Broker: Disk error when trying to access log file on disk"
    ),
    ErrorCode.LOG_DIR_NOT_FOUND: (
        "Broker: The user-specified log directory is not found in the broker config"
    ),
    ErrorCode.SASL_AUTHENTICATION_FAILED: "Broker: SASL Authentication failed",
    ErrorCode.UNKNOWN_PRODUCER_ID: "Broker: Unknown Producer Id",
    ErrorCode.REASSIGNMENT_IN_PROGRESS: "Broker: Partition reassignment is in progress",
    ErrorCode.DELEGATION_TOKEN_AUTH_DISABLED: (
        "Broker: Delegation Token feature is not enabled"
    ),
    ErrorCode.DELEGATION_TOKEN_NOT_FOUND: (
        "Broker: Delegation Token is not found on server"
    ),
    ErrorCode.DELEGATION_TOKEN_OWNER_MISMATCH: (
        "Broker: Specified Principal is not valid Owner/Renewer"
    ),
    ErrorCode.DELEGATION_TOKEN_REQUEST_NOT_ALLOWED: (
        "Broker: Delegation Token requests are not allowed on this connection"
    ),
    ErrorCode.DELEGATION_TOKEN_AUTHORIZATION_FAILED: (
        "Broker: Delegation Token authorization failed"
    ),
    ErrorCode.DELEGATION_TOKEN_EXPIRED: "Broker: Delegation Token is expired",
    ErrorCode.INVALID_PRINCIPAL_TYPE: "Broker: Supplied principalType is not supported",
    ErrorCode.NON_EMPTY_GROUP: "Broker: The group is not empty",
    ErrorCode.GROUP_ID_NOT_FOUND: "Broker: The group id does not exist",
    ErrorCode.FETCH_SESSION_ID_NOT_FOUND: "Broker: The fetch session ID was not found",
    ErrorCode.INVALID_FETCH_SESSION_EPOCH: "Broker: The fetch session epoch is invalid",
    ErrorCode.LISTENER_NOT_FOUND: "Broker: No matching listener",
    ErrorCode.TOPIC_DELETION_DISABLED: "Broker: Topic deletion is disabled",
    ErrorCode.FENCED_LEADER_EPOCH: "Broker: Leader epoch is older than broker epoch",
    ErrorCode.UNKNOWN_LEADER_EPOCH: "Broker: Leader epoch is newer than broker epoch",
    ErrorCode.UNSUPPORTED_COMPRESSION_TYPE: "Broker: Unsupported compression type",
    ErrorCode.STALE_BROKER_EPOCH: "Broker: Broker epoch has changed",
    ErrorCode.OFFSET_NOT_AVAILABLE: "Broker: Leader high watermark is not caught up",
    ErrorCode.MEMBER_ID_REQUIRED: "Broker: Group member needs a valid member ID",
    ErrorCode.PREFERRED_LEADER_NOT_AVAILABLE: (
        "Broker: Preferred leader was not available"
    ),
    ErrorCode.GROUP_MAX_SIZE_REACHED: "Broker: Consumer group has reached maximum size",
    ErrorCode.FENCED_INSTANCE_ID: (
        "Broker: Static consumer fenced by other consumer with same "
        "group.instance.id"
    ),
}


class ErrorDescription(NamedTuple):
    """One row of the error description table."""

    code: ErrorCode
    name: str
    desc: str


def describe(code: Code) -> str:
    """Return the default description for an error code.

    Args:
        code: ErrorCode member or raw integer

    Returns:
        Description text. Codes outside the table yield ``"Err-<n>?"``.

    Example:
        >>> describe(ErrorCode._TIMED_OUT)
        'Local: Timed out'
        >>> describe(12345)
        'Err-12345?'
    """
    code = coerce_code(code)
    if isinstance(code, ErrorCode) and code in ERROR_DESCRIPTIONS:
        return ERROR_DESCRIPTIONS[code]
    return f"Err-{int(code)}?"


def name(code: Code) -> str:
    """Return the symbolic name of an error code.

    Codes outside the table yield ``"ERR_<n>?"``.
    """
    code = coerce_code(code)
    if isinstance(code, ErrorCode):
        return code.name
    return f"ERR_{code}?"


def get_error_descriptions() -> list[ErrorDescription]:
    """Return the full description table ordered by code."""
    return [
        ErrorDescription(code, code.name, ERROR_DESCRIPTIONS[code])
        for code in sorted(ERROR_DESCRIPTIONS)
    ]


def validate_error_messages() -> list[ErrorCode]:
    """Return the codes that have no description.

    An empty list means the table is complete.
    """
    return [code for code in ErrorCode if code not in ERROR_DESCRIPTIONS]
