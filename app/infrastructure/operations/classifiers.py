"""Error classifiers for directory API exceptions.

Converts Google API client exceptions into standardized OperationResult
objects so the membership adapter can report the reason for a failed call
without inspecting HTTP responses itself.

Usage:
    from infrastructure.operations.classifiers import classify_http_error

    try:
        service.members().delete(groupKey=group_key, memberKey=email).execute()
    except Exception as exc:
        return classify_http_error(exc)
"""

from typing import Optional

from googleapiclient.errors import HttpError

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

DEFAULT_RETRY_AFTER = 60


def _status_code(exc: HttpError) -> Optional[int]:
    resp = getattr(exc, "resp", None)
    if not resp:
        return None
    try:
        return int(resp.status)
    except (TypeError, ValueError):
        return None


def _detail(exc: HttpError) -> str:
    reason = getattr(exc, "reason", None)
    if isinstance(reason, str) and reason:
        return reason
    return str(exc)


def _retry_after(exc: HttpError) -> int:
    resp = getattr(exc, "resp", None)
    if resp is None or not hasattr(resp, "get"):
        return DEFAULT_RETRY_AFTER
    header_value = resp.get("retry-after")
    if not header_value:
        return DEFAULT_RETRY_AFTER
    try:
        return int(header_value)
    except (ValueError, TypeError):
        return DEFAULT_RETRY_AFTER


def classify_http_error(exc: Exception) -> OperationResult:
    """Classify Google API HTTP errors into OperationResult.

    Status Code Mapping:
    - 429: Rate limiting → TRANSIENT_ERROR with retry_after
    - 401: Unauthenticated → UNAUTHORIZED
    - 403: Forbidden → UNAUTHORIZED (permission denied)
    - 404: Not found → NOT_FOUND (unknown group or member)
    - 409: Conflict → PERMANENT_ERROR (member already exists)
    - 5xx: Server error → TRANSIENT_ERROR
    - Other 4xx: → PERMANENT_ERROR

    Anything that is not an HttpError (socket errors, timeouts raised by the
    transport) is treated as a transient connection error.

    Args:
        exc: Exception raised while executing a Google API request

    Returns:
        OperationResult with status, message, error_code and retry_after
    """
    if not isinstance(exc, HttpError):
        return OperationResult.transient_error(
            f"Connection error: {type(exc).__name__}: {str(exc)}",
            error_code="CONNECTION_ERROR",
        )

    status_code = _status_code(exc)
    detail = _detail(exc)

    if status_code == 429:
        return OperationResult.error(
            OperationStatus.TRANSIENT_ERROR,
            f"Google API rate limited: {detail}",
            error_code="RATE_LIMITED",
            retry_after=_retry_after(exc),
        )

    if status_code == 401:
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED,
            f"Google API authentication failed: {detail}",
            error_code="UNAUTHORIZED",
        )

    if status_code == 403:
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED,
            f"Google API authorization denied: {detail}",
            error_code="FORBIDDEN",
        )

    if status_code == 404:
        return OperationResult.error(
            OperationStatus.NOT_FOUND,
            f"Google resource not found: {detail}",
            error_code="NOT_FOUND",
        )

    if status_code == 409:
        return OperationResult.permanent_error(
            f"Google resource already exists: {detail}",
            error_code="CONFLICT",
        )

    if status_code and 500 <= status_code < 600:
        return OperationResult.transient_error(
            f"Google API server error ({status_code}): {detail}",
            error_code="SERVER_ERROR",
        )

    if status_code and 400 <= status_code < 500:
        return OperationResult.permanent_error(
            f"Google API client error ({status_code}): {detail}",
            error_code="HTTP_ERROR",
        )

    return OperationResult.permanent_error(
        f"Google API error: {detail}",
        error_code="UNKNOWN_ERROR",
    )
