"""Group membership resource lifecycle.

Exposes create/read/update/delete for the membership of one group, as an
orchestrating framework invokes them. Create and update reconcile every role
in turn and stop at the first role that fails; read lists every role and
records what it saw; delete removes every recorded member.
"""

from typing import Dict, List

from infrastructure.logging import bind_operation_context, get_module_logger
from modules.group_members.adapter import MembershipDirectory
from modules.group_members.domain.errors import (
    DeleteMembersError,
    GroupMembersError,
    IntegrationError,
    ReconciliationError,
    RemovalFailure,
)
from modules.group_members.domain.models import GroupMembersState, MembershipChanges
from modules.group_members.reconciliation import (
    plan_role_changes,
    reconcile_role_members,
)
from modules.group_members.roles import ROLE_FIELDS, Role
from modules.group_members.schemas import GroupMembersConfig

logger = get_module_logger()


class GroupMembersResource:
    """Lifecycle operations for the membership of a directory group.

    Args:
        directory: Adapter used for every list/add/remove call
    """

    def __init__(self, directory: MembershipDirectory) -> None:
        self._directory = directory

    def create(
        self, state: GroupMembersState, desired: GroupMembersConfig
    ) -> GroupMembersState:
        """Reconcile every role of ``desired.group`` and read the result back.

        Raises:
            GroupMembersError: "Error adding members: ..." for the first role
                that could not be listed or converged. Later roles are not
                attempted and ``state`` is left untouched.
        """
        with bind_operation_context(group_id=desired.group, operation="create"):
            self._reconcile_roles(desired, "Error adding members")
            state.id = desired.group
            logger.info("group_members_created")
            return self._read(state)

    def read(self, state: GroupMembersState) -> GroupMembersState:
        """Refresh ``state.observed`` from the directory. No remote side effects.

        Raises:
            GroupMembersError: If ``state`` has no group id.
            IntegrationError: If listing any role fails.
        """
        with bind_operation_context(group_id=state.id, operation="read"):
            return self._read(state)

    def update(
        self, state: GroupMembersState, desired: GroupMembersConfig
    ) -> GroupMembersState:
        """Reconcile every role of ``desired.group`` and read the result back.

        Does not require ``create`` to have run first.

        Raises:
            GroupMembersError: "Error updating memberships: ..." for the first
                role that could not be listed or converged.
        """
        logger.debug("updating_group_members", group_id=desired.group)
        with bind_operation_context(group_id=desired.group, operation="update"):
            self._reconcile_roles(desired, "Error updating memberships")
            state.id = desired.group
            return self._read(state)

    def delete(self, state: GroupMembersState) -> None:
        """Remove every member recorded in ``state.observed`` from the group.

        Every removal is attempted. ``state`` is cleared afterwards whatever
        the outcome.

        Raises:
            DeleteMembersError: Listing every removal that failed.
        """
        group_id = state.id
        logger.debug("deleting_group_members", group_id=group_id)
        with bind_operation_context(group_id=group_id, operation="delete"):
            failures: List[RemovalFailure] = []
            if state.observed is not None:
                for role in ROLE_FIELDS:
                    for member in sorted(state.observed.members_for(role)):
                        try:
                            self._directory.remove_member(member, group_id)
                        except IntegrationError as e:
                            logger.warning(
                                "group_member_delete_failed",
                                member=member,
                                role=role.value,
                                error=str(e),
                            )
                            failures.append(RemovalFailure(member, role.value, str(e)))

            state.clear()

            if failures:
                raise DeleteMembersError(group_id, failures)
            logger.info("group_members_deleted")

    def plan(self, desired: GroupMembersConfig) -> Dict[Role, MembershipChanges]:
        """Return the changes create/update would apply, without applying them.

        Raises:
            IntegrationError: If listing any role fails.
        """
        with bind_operation_context(group_id=desired.group, operation="plan"):
            return {
                role: plan_role_changes(
                    desired.members_for(role),
                    self._directory.list_members(desired.group, role),
                )
                for role in ROLE_FIELDS
            }

    def _reconcile_roles(self, desired: GroupMembersConfig, error_prefix: str) -> None:
        for role in ROLE_FIELDS:
            try:
                actual = self._directory.list_members(desired.group, role)
                reconcile_role_members(
                    self._directory,
                    desired.group,
                    role,
                    desired.members_for(role),
                    actual,
                )
            except (IntegrationError, ReconciliationError) as e:
                logger.error(
                    "group_members_reconciliation_failed",
                    role=role.value,
                    error=str(e),
                )
                raise GroupMembersError(f"{error_prefix}: {e}") from e

    def _read(self, state: GroupMembersState) -> GroupMembersState:
        if not state.id:
            raise GroupMembersError("Cannot read group members without a group id")
        members_by_role = {
            role: self._directory.list_members(state.id, role) for role in ROLE_FIELDS
        }
        state.observed = GroupMembersConfig.from_observed(state.id, members_by_role)
        logger.debug(
            "group_members_read",
            **{ROLE_FIELDS[r]: len(m) for r, m in members_by_role.items()},
        )
        return state
