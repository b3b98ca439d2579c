"""Errors for the group_members module."""

from dataclasses import dataclass
from typing import Any, List


class IntegrationError(Exception):
    """Raised by the directory adapter when a Directory API call fails.

    Attributes:
        message: human-friendly message including the member, role or group
        response: the OperationResult returned by the directory client
    """

    def __init__(self, message: str, response: Any = None):
        super().__init__(message)
        self.response = response


class GroupMembersError(Exception):
    """Base error for membership lifecycle operations."""


class ReconciliationError(GroupMembersError):
    """The first add or remove call that failed during a role pass.

    The adapter error is chained as ``__cause__``. Calls after the failing one
    were not issued.
    """

    def __init__(
        self, operation: str, member: str, role: str, group_id: str, error: Exception
    ):
        self.operation = operation
        self.member = member
        self.role = role
        self.group_id = group_id
        self.error = error
        super().__init__(f"{operation} failed: {error}")


@dataclass
class RemovalFailure:
    """A member that could not be removed while deleting group memberships."""

    member: str
    role: str
    error: str


class DeleteMembersError(GroupMembersError):
    """Every removal that failed while deleting group memberships."""

    def __init__(self, group_id: str, failures: List[RemovalFailure]):
        self.group_id = group_id
        self.failures = failures
        details = "; ".join(
            f"{f.member} ({f.role}): {f.error}" for f in failures
        )
        super().__init__(
            f"Error deleting {len(failures)} member(s) from group {group_id}: {details}"
        )
