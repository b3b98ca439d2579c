"""Shared fixtures for group_members tests."""

from typing import Dict, List, Optional, Set, Tuple
from unittest.mock import MagicMock

import pytest

from infrastructure.operations import OperationResult
from modules.group_members.domain.errors import IntegrationError
from modules.group_members.roles import Role


class FakeDirectory:
    """In-memory MembershipDirectory that records every call.

    ``fail_on`` holds ``(operation, member)`` pairs whose calls raise
    IntegrationError; ``fail_list_roles`` holds roles whose listing fails.
    """

    def __init__(self, groups: Optional[Dict[str, Dict[Role, Set[str]]]] = None):
        self.groups: Dict[str, Dict[Role, Set[str]]] = {}
        for group_id, by_role in (groups or {}).items():
            self.groups[group_id] = {role: set(by_role.get(role, set())) for role in Role}
        self.calls: List[Tuple] = []
        self.fail_on: Set[Tuple[str, str]] = set()
        self.fail_list_roles: Set[Role] = set()

    def _group(self, group_id: str) -> Dict[Role, Set[str]]:
        return self.groups.setdefault(group_id, {role: set() for role in Role})

    def members(self, group_id: str, role: Role) -> Set[str]:
        return set(self._group(group_id)[role])

    def list_members(self, group_id: str, role: Role) -> Set[str]:
        self.calls.append(("list", group_id, Role(role)))
        if Role(role) in self.fail_list_roles:
            raise IntegrationError(
                f"Error listing {Role(role).value} members of group {group_id}: boom"
            )
        return self.members(group_id, Role(role))

    def add_member(self, member_id: str, group_id: str, role: Role) -> None:
        self.calls.append(("add", member_id, group_id, Role(role)))
        if ("add", member_id) in self.fail_on:
            raise IntegrationError(
                f"Error creating group member {member_id} with role {Role(role).value}: boom"
            )
        group = self._group(group_id)
        if any(member_id in members for members in group.values()):
            raise IntegrationError(
                f"Error creating group member {member_id} with role "
                f"{Role(role).value}: Member already exists."
            )
        group[Role(role)].add(member_id)

    def remove_member(self, member_id: str, group_id: str) -> None:
        self.calls.append(("remove", member_id, group_id))
        if ("remove", member_id) in self.fail_on:
            raise IntegrationError(
                f"Error deleting group member {member_id} from group {group_id}: boom"
            )
        group = self._group(group_id)
        for members in group.values():
            if member_id in members:
                members.discard(member_id)
                return
        raise IntegrationError(
            f"Error deleting group member {member_id} from group {group_id}: "
            "Resource Not Found"
        )

    def mutating_calls(self) -> List[Tuple]:
        return [c for c in self.calls if c[0] in ("add", "remove")]


@pytest.fixture
def fake_directory():
    """Factory for FakeDirectory instances seeded with group memberships."""

    def _factory(groups=None):
        return FakeDirectory(groups)

    return _factory


@pytest.fixture
def mock_directory_client():
    """Mock DirectoryClient returning successful results by default."""
    client = MagicMock()
    client.list_members.return_value = OperationResult.success(data=[])
    client.add_member.return_value = OperationResult.success(data={})
    client.remove_member.return_value = OperationResult.success(data=None)
    return client
