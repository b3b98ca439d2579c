"""Per-role membership reconciliation.

For one (group, role) partition, compare the desired member set with the set
listed from the directory and issue the removals and additions that make them
equal. Removals go first so a member changing role is detached before any new
assignment is attempted.

The first failing call aborts the pass: later removals and all pending
additions are left unprocessed. There is no rollback and no retry.
"""

from typing import AbstractSet

from infrastructure.logging import get_module_logger
from modules.group_members.adapter import MembershipDirectory
from modules.group_members.domain.errors import IntegrationError, ReconciliationError
from modules.group_members.domain.models import MembershipChanges
from modules.group_members.roles import Role

logger = get_module_logger()


def plan_role_changes(
    desired: AbstractSet[str], actual: AbstractSet[str]
) -> MembershipChanges:
    """Compute the removals and additions converging ``actual`` to ``desired``."""
    return MembershipChanges(
        to_remove=tuple(sorted(actual - desired)),
        to_add=tuple(sorted(desired - actual)),
        unchanged=tuple(sorted(actual & desired)),
    )


def reconcile_role_members(
    directory: MembershipDirectory,
    group_id: str,
    role: Role,
    desired: AbstractSet[str],
    actual: AbstractSet[str],
) -> MembershipChanges:
    """Drive one role of ``group_id`` from ``actual`` to ``desired``.

    Args:
        directory: Adapter issuing the remove/add calls
        group_id: Group being reconciled
        role: Role partition being reconciled
        desired: Members that should hold ``role``
        actual: Members currently holding ``role``, freshly listed

    Returns:
        The changes that were applied.

    Raises:
        ReconciliationError: On the first failed call, wrapping the adapter
            error with the operation, member, role and group.
    """
    role = Role(role)
    changes = plan_role_changes(set(desired), set(actual))

    if changes.is_empty:
        logger.debug(
            "role_members_in_sync",
            group_id=group_id,
            role=role.value,
            members=len(changes.unchanged),
        )
        return changes

    logger.info(
        "reconciling_role_members",
        group_id=group_id,
        role=role.value,
        to_remove=len(changes.to_remove),
        to_add=len(changes.to_add),
    )

    for member in changes.to_remove:
        try:
            directory.remove_member(member, group_id)
        except IntegrationError as e:
            logger.error(
                "role_member_removal_failed",
                group_id=group_id,
                role=role.value,
                member=member,
                error=str(e),
            )
            raise ReconciliationError(
                "remove_member", member, role.value, group_id, e
            ) from e

    for member in changes.to_add:
        try:
            directory.add_member(member, group_id, role)
        except IntegrationError as e:
            logger.error(
                "role_member_addition_failed",
                group_id=group_id,
                role=role.value,
                member=member,
                error=str(e),
            )
            raise ReconciliationError("add_member", member, role.value, group_id, e) from e

    logger.info(
        "role_members_reconciled",
        group_id=group_id,
        role=role.value,
        removed=len(changes.to_remove),
        added=len(changes.to_add),
    )
    return changes
