"""Operation status enumeration."""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for orchestration step results.

    Attributes:
        SUCCESS: Step completed successfully
        TRANSIENT_ERROR: Retryable error (network, timeout, rate limit)
        PERMANENT_ERROR: Non-retryable error (bad command, validation, forbidden)
        UNAUTHORIZED: Token missing or rejected
        NOT_FOUND: Issue or repository not found
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
