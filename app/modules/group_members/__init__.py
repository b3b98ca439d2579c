# modules/group_members/__init__.py
"""Group membership reconciliation module.

Keeps the membership of a Google Workspace group equal to a declared
desired state, one role partition (OWNER, MANAGER, MEMBER) at a time, using
the Directory API as the source of truth for current membership.

Example:
    from modules.group_members import (
        GroupMembersConfig,
        GroupMembersState,
        build_group_members_resource,
    )

    resource = build_group_members_resource()
    desired = GroupMembersConfig(
        group="eng@example.com",
        owners={"lead@example.com"},
        members={"dev1@example.com", "dev2@example.com"},
    )
    state = resource.create(GroupMembersState(), desired)
"""

from modules.group_members.adapter import DirectoryMembersAdapter, MembershipDirectory
from modules.group_members.domain import (
    DeleteMembersError,
    GroupMembersError,
    GroupMembersState,
    IntegrationError,
    MembershipChanges,
    ReconciliationError,
    RemovalFailure,
)
from modules.group_members.reconciliation import (
    plan_role_changes,
    reconcile_role_members,
)
from modules.group_members.resource import GroupMembersResource
from modules.group_members.roles import ROLE_FIELDS, Role, field_for_role
from modules.group_members.schemas import GroupMembersConfig


def build_group_members_resource() -> GroupMembersResource:
    """Wire settings, the Directory client and the adapter into a resource.

    Raises:
        ValueError: If Google Workspace credentials are not configured.
    """
    # Resolved at call time so the cached provider can be patched or reset
    from infrastructure.services import get_directory_client

    return GroupMembersResource(DirectoryMembersAdapter(get_directory_client()))


__all__ = [
    "DeleteMembersError",
    "DirectoryMembersAdapter",
    "GroupMembersConfig",
    "GroupMembersError",
    "GroupMembersResource",
    "GroupMembersState",
    "IntegrationError",
    "MembershipChanges",
    "MembershipDirectory",
    "ROLE_FIELDS",
    "ReconciliationError",
    "RemovalFailure",
    "Role",
    "build_group_members_resource",
    "field_for_role",
    "plan_role_changes",
    "reconcile_role_members",
]
