"""Operation status enumeration."""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSIENT_ERROR: Retryable error (lost connection, lock timeout)
        PERMANENT_ERROR: Non-retryable error (constraint violation, bad data)
        CANCELLED: A lifecycle observer vetoed the operation
        NOT_FOUND: Record not found
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    CANCELLED = "cancelled"
    NOT_FOUND = "not_found"
