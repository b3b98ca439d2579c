"""Group membership reconciler configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.integrations import GoogleWorkspaceSettings
from infrastructure.configuration.features import GroupMembersFeatureSettings


class Settings(BaseSettings):
    """Configuration settings - main aggregator.

    Aggregates the domain-specific settings into a single configuration
    object:

    - **Integrations**: Google Workspace credentials and delegation
    - **Features**: group membership reconciliation call behaviour

    Environment Variables:
        PREFIX: Environment prefix; empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Git commit SHA for deployment tracking

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        admin = settings.google_workspace.GOOGLE_DELEGATED_ADMIN_EMAIL
        page_size = settings.group_members.page_size
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    google_workspace: GoogleWorkspaceSettings
    group_members: GroupMembersFeatureSettings

    @property
    def is_production(self) -> bool:
        """True if PREFIX is empty (production)."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings, instantiating any sub-settings not overridden.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "google_workspace": GoogleWorkspaceSettings,
            "group_members": GroupMembersFeatureSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
