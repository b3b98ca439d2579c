"""Domain layer: errors and internal models."""

from modules.group_members.domain.errors import (
    DeleteMembersError,
    GroupMembersError,
    IntegrationError,
    ReconciliationError,
    RemovalFailure,
)
from modules.group_members.domain.models import GroupMembersState, MembershipChanges

__all__ = [
    "DeleteMembersError",
    "GroupMembersError",
    "IntegrationError",
    "ReconciliationError",
    "RemovalFailure",
    "GroupMembersState",
    "MembershipChanges",
]
