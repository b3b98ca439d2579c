"""Google Workspace integration settings."""

from pydantic import Field, field_validator

from infrastructure.configuration.base import IntegrationSettings


class GoogleWorkspaceSettings(IntegrationSettings):
    """Google Workspace configuration settings.

    Environment Variables:
        GOOGLE_DELEGATED_ADMIN_EMAIL: Admin email impersonated through
            domain-wide delegation for Directory API calls
        GCP_SERVICE_ACCOUNT_KEY_FILE: Service account JSON key content

    Example:
        ```python
        from infrastructure.services import get_settings

        admin_email = get_settings().google_workspace.GOOGLE_DELEGATED_ADMIN_EMAIL
        ```
    """

    GOOGLE_DELEGATED_ADMIN_EMAIL: str = Field(
        default="", alias="GOOGLE_DELEGATED_ADMIN_EMAIL"
    )
    GCP_SERVICE_ACCOUNT_KEY_FILE: str = Field(
        default="", alias="GCP_SERVICE_ACCOUNT_KEY_FILE"
    )

    @field_validator("GCP_SERVICE_ACCOUNT_KEY_FILE", mode="before")
    @classmethod
    def _strip_quotes(cls, v):
        """Drop the outer quotes some secret stores keep around JSON values."""
        if not isinstance(v, str):
            return v
        s = v.strip()
        if (s.startswith("'") and s.endswith("'")) or (
            s.startswith('"') and s.endswith('"')
        ):
            s = s[1:-1]
        return s

    @property
    def is_configured(self) -> bool:
        """True when both the key and the delegated admin are set."""
        return bool(
            self.GCP_SERVICE_ACCOUNT_KEY_FILE and self.GOOGLE_DELEGATED_ADMIN_EMAIL
        )
