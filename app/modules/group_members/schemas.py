"""Desired-state schema for group memberships.

``GroupMembersConfig`` is the typed bundle handed to the reconciler: one set
of member identifiers per role, validated where configuration is loaded so
the core only ever sees clean ``set[str]`` values.
"""

from typing import Annotated, Dict, Mapping, Set

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from modules.group_members.roles import ROLE_FIELDS, Role, field_for_role


class GroupMembersConfig(BaseModel):
    """Desired (or observed) membership of one group, partitioned by role.

    Identifiers are stripped of surrounding whitespace; blank identifiers are
    rejected. A member may be declared under one role only, since the
    directory holds a single role per member and group.
    """

    model_config = ConfigDict(frozen=True)

    group: Annotated[
        str,
        Field(
            ...,
            min_length=1,
            description="Target group key",
            json_schema_extra={"example": "eng@example.com"},
        ),
    ]
    owners: Set[str] = Field(default_factory=set, description="OWNER members")
    managers: Set[str] = Field(default_factory=set, description="MANAGER members")
    members: Set[str] = Field(default_factory=set, description="MEMBER members")

    @field_validator("group", mode="before")
    @classmethod
    def _strip_group(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("owners", "managers", "members", mode="before")
    @classmethod
    def _normalize_members(cls, v):
        if v is None:
            return set()
        if isinstance(v, str):
            raise ValueError("expected a collection of member identifiers")
        normalized = set()
        for item in v:
            if not isinstance(item, str):
                raise ValueError(f"member identifier must be a string: {item!r}")
            stripped = item.strip()
            if not stripped:
                raise ValueError("member identifier must not be blank")
            normalized.add(stripped)
        return normalized

    @model_validator(mode="after")
    def _check_single_role(self):
        seen: Dict[str, str] = {}
        duplicates = []
        for role, field_name in ROLE_FIELDS.items():
            for member in getattr(self, field_name):
                if member in seen:
                    duplicates.append(f"{member} ({seen[member]}, {role.value})")
                else:
                    seen[member] = role.value
        if duplicates:
            raise ValueError(
                "members declared under more than one role: "
                + ", ".join(sorted(duplicates))
            )
        return self

    def members_for(self, role: Role) -> Set[str]:
        """Return a copy of the member set declared for ``role``."""
        return set(getattr(self, field_for_role(role)))

    def as_role_members(self) -> Dict[Role, Set[str]]:
        """Return the member sets keyed by role."""
        return {role: self.members_for(role) for role in ROLE_FIELDS}

    @classmethod
    def from_observed(
        cls, group: str, members_by_role: Mapping[Role, Set[str]]
    ) -> "GroupMembersConfig":
        """Build a config from member sets read back from the directory.

        Observed state is recorded as reported and is not re-validated.
        """
        fields = {
            field_name: set(members_by_role.get(role, set()))
            for role, field_name in ROLE_FIELDS.items()
        }
        return cls.model_construct(group=group, **fields)
