"""
Factory functions for application-scoped infrastructure services.

Provides cached singleton providers for settings and the Google Workspace
Directory client.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.clients.google_workspace import DirectoryClient, SessionProvider

DIRECTORY_MEMBER_SCOPES = [
    "https://www.googleapis.com/auth/admin.directory.group.member",
]


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.
    Tests that change the environment should call ``get_settings.cache_clear()``.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_directory_client() -> DirectoryClient:
    """Provider for the Google Workspace Directory client.

    Builds a SessionProvider from the service account key and delegated admin
    configured in ``settings.google_workspace``, and applies the membership
    retry and paging settings from ``settings.group_members``.

    Returns:
        DirectoryClient: Cached client sharing one SessionProvider.

    Raises:
        ValueError: If Google Workspace credentials are not configured.
    """
    settings = get_settings()
    google_settings = settings.google_workspace
    if not google_settings.is_configured:
        raise ValueError(
            "GCP_SERVICE_ACCOUNT_KEY_FILE and GOOGLE_DELEGATED_ADMIN_EMAIL must be set"
        )

    session_provider = SessionProvider(
        credentials_json=google_settings.GCP_SERVICE_ACCOUNT_KEY_FILE,
        default_delegated_email=google_settings.GOOGLE_DELEGATED_ADMIN_EMAIL,
        default_scopes=DIRECTORY_MEMBER_SCOPES,
    )
    return DirectoryClient(
        session_provider=session_provider,
        list_max_retries=settings.group_members.list_max_retries,
        write_max_retries=settings.group_members.write_max_retries,
        page_size=settings.group_members.page_size,
    )
