"""Feature module settings."""

from infrastructure.configuration.features.group_members import (
    GroupMembersFeatureSettings,
)

__all__ = ["GroupMembersFeatureSettings"]
