"""External integration settings."""

from infrastructure.configuration.integrations.google import GoogleWorkspaceSettings

__all__ = ["GoogleWorkspaceSettings"]
