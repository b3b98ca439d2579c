"""Role registry for group membership reconciliation.

Maps each directory role to the desired-state field holding that role's
member set. The mapping is read-only and built once at import.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union


class Role(str, Enum):
    """Directory roles a member can hold in a group."""

    OWNER = "OWNER"
    MANAGER = "MANAGER"
    MEMBER = "MEMBER"


ROLE_FIELDS: Mapping[Role, str] = MappingProxyType(
    {
        Role.OWNER: "owners",
        Role.MANAGER: "managers",
        Role.MEMBER: "members",
    }
)


def field_for_role(role: Union[Role, str]) -> str:
    """Return the desired-state field name for a role.

    Raises:
        KeyError: If the role is not a supported directory role.
    """
    try:
        return ROLE_FIELDS[Role(role)]
    except ValueError:
        raise KeyError(role) from None
