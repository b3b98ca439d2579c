"""Directory adapter for membership reconciliation.

Wraps the Google Workspace DirectoryClient with the three calls the
reconciler needs and turns failed OperationResults into IntegrationError.
"""

from typing import Protocol, Set, Union

from infrastructure.clients.google_workspace import DirectoryClient
from infrastructure.logging import get_module_logger
from modules.group_members.domain.errors import IntegrationError
from modules.group_members.roles import Role

logger = get_module_logger()


class MembershipDirectory(Protocol):
    """Calls the reconciler issues against the directory.

    Every call is blocking and may raise IntegrationError.
    """

    def list_members(self, group_id: str, role: Role) -> Set[str]:
        """Return the members of ``group_id`` holding exactly ``role``."""

    def add_member(self, member_id: str, group_id: str, role: Role) -> None:
        """Insert ``member_id`` into ``group_id`` with ``role``."""

    def remove_member(self, member_id: str, group_id: str) -> None:
        """Remove ``member_id`` from ``group_id`` whatever its role."""


class DirectoryMembersAdapter:
    """MembershipDirectory backed by the Google Workspace Directory API.

    Args:
        client: DirectoryClient holding credentials and delegation
    """

    def __init__(self, client: DirectoryClient) -> None:
        self._client = client

    def list_members(self, group_id: str, role: Union[Role, str]) -> Set[str]:
        """Return the emails of members of ``group_id`` holding exactly ``role``.

        The ``roles`` listing parameter is only a hint: each returned record's
        role is checked again before it is included.

        Raises:
            IntegrationError: If the listing call fails.
        """
        role = Role(role)
        resp = self._client.list_members(group_id, roles=role.value)
        if not resp.is_success:
            raise IntegrationError(
                f"Error listing {role.value} members of group {group_id}: {resp.message}",
                response=resp,
            )

        members: Set[str] = set()
        skipped = 0
        for record in resp.data or []:
            if not isinstance(record, dict) or record.get("role") != role.value:
                skipped += 1
                continue
            email = record.get("email")
            if email:
                members.add(email)

        if skipped:
            logger.debug(
                "members_filtered_by_role",
                group_id=group_id,
                role=role.value,
                skipped=skipped,
            )
        return members

    def add_member(self, member_id: str, group_id: str, role: Union[Role, str]) -> None:
        """Insert ``member_id`` into ``group_id`` with ``role``.

        Inserting a member that already belongs to the group is an error.

        Raises:
            IntegrationError: With the member and role in the message.
        """
        role = Role(role)
        resp = self._client.add_member(
            group_id, {"email": member_id, "role": role.value}
        )
        if not resp.is_success:
            raise IntegrationError(
                f"Error creating group member {member_id} with role {role.value}: "
                f"{resp.message}",
                response=resp,
            )
        created = resp.data if isinstance(resp.data, dict) else {}
        logger.info(
            "group_member_created",
            group_id=group_id,
            member=created.get("email", member_id),
            role=role.value,
        )

    def remove_member(self, member_id: str, group_id: str) -> None:
        """Remove ``member_id`` from ``group_id``.

        Raises:
            IntegrationError: With the member and group in the message, e.g.
                when the member is not found or permission is denied.
        """
        resp = self._client.remove_member(group_id, member_id)
        if not resp.is_success:
            raise IntegrationError(
                f"Error deleting group member {member_id} from group {group_id}: "
                f"{resp.message}",
                response=resp,
            )
        logger.info("group_member_deleted", group_id=group_id, member=member_id)
