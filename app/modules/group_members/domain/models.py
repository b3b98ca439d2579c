"""Internal data models for group membership reconciliation.

Lightweight dataclasses (not Pydantic): the persisted resource state as an
orchestrating framework stores it, and the per-role change set computed by the
reconciler.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from modules.group_members.schemas import GroupMembersConfig


@dataclass
class GroupMembersState:
    """Persisted state of a group membership resource.

    Attributes:
        id: The group identifier; empty when the resource does not exist.
        observed: Membership last read back from the directory, by role.
    """

    id: str = ""
    observed: Optional[GroupMembersConfig] = None

    @property
    def exists(self) -> bool:
        return bool(self.id)

    def clear(self) -> None:
        self.id = ""
        self.observed = None


@dataclass(frozen=True)
class MembershipChanges:
    """Calls needed to converge one role partition.

    Attributes:
        to_remove: Members present remotely but not desired, sorted.
        to_add: Members desired but not present remotely, sorted.
        unchanged: Members present in both sets, sorted.
    """

    to_remove: Tuple[str, ...] = field(default_factory=tuple)
    to_add: Tuple[str, ...] = field(default_factory=tuple)
    unchanged: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.to_remove and not self.to_add
