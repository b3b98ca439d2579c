"""Operation status enumeration.

Status codes attached to every directory call result so that adapters can
tell a missing member from a permission problem or a throttled request.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSIENT_ERROR: Retryable error (network, timeout, rate limit)
        PERMANENT_ERROR: Non-retryable error (validation, conflict, bad request)
        UNAUTHORIZED: Authentication or authorization failure
        NOT_FOUND: Group or member not found
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
