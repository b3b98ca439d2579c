"""Infrastructure configuration module - public API.

Centralized configuration management using Pydantic BaseSettings with
domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    GoogleWorkspaceSettings: Google Workspace integration settings
    GroupMembersFeatureSettings: Membership reconciliation settings

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()
    if settings.is_production:
        ...
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.integrations import GoogleWorkspaceSettings
from infrastructure.configuration.features import GroupMembersFeatureSettings

__all__ = ["Settings", "GoogleWorkspaceSettings", "GroupMembersFeatureSettings"]
