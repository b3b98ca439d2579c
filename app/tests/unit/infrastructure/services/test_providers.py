"""
Unit tests for infrastructure service providers.

Tests cover:
- get_settings() caching behavior
- get_directory_client() wiring and configuration checks
"""

import pytest
from unittest.mock import patch

from infrastructure.clients.google_workspace import DirectoryClient
from infrastructure.configuration import Settings
from infrastructure.services.providers import (
    DIRECTORY_MEMBER_SCOPES,
    get_directory_client,
    get_settings,
)


@pytest.fixture
def google_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GOOGLE_DELEGATED_ADMIN_EMAIL", "admin@example.com")
    monkeypatch.setenv("GCP_SERVICE_ACCOUNT_KEY_FILE", '{"type": "service_account"}')
    monkeypatch.setenv("GROUP_MEMBERS_LIST_MAX_RETRIES", "2")
    monkeypatch.setenv("GROUP_MEMBERS_PAGE_SIZE", "100")


@pytest.mark.unit
class TestGetSettings:
    """Tests for get_settings() provider function."""

    def test_get_settings_returns_settings_instance(self):
        assert isinstance(get_settings(), Settings)

    def test_get_settings_returns_cached_instance(self):
        assert get_settings() is get_settings()

    def test_get_settings_cache_can_be_cleared(self):
        instance1 = get_settings()
        get_settings.cache_clear()
        assert get_settings() is not instance1


@pytest.mark.unit
class TestGetDirectoryClient:
    """Tests for get_directory_client() provider function."""

    def test_requires_credentials(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("GOOGLE_DELEGATED_ADMIN_EMAIL", raising=False)
        monkeypatch.delenv("GCP_SERVICE_ACCOUNT_KEY_FILE", raising=False)

        with pytest.raises(ValueError, match="must be set"):
            get_directory_client()

    @patch("infrastructure.services.providers.SessionProvider")
    def test_builds_client_from_settings(self, mock_session_provider, google_env):
        client = get_directory_client()

        assert isinstance(client, DirectoryClient)
        mock_session_provider.assert_called_once_with(
            credentials_json='{"type": "service_account"}',
            default_delegated_email="admin@example.com",
            default_scopes=DIRECTORY_MEMBER_SCOPES,
        )
        assert client._list_max_retries == 2
        assert client._write_max_retries == 0
        assert client._page_size == 100

    @patch("infrastructure.services.providers.SessionProvider")
    def test_client_is_cached(self, mock_session_provider, google_env):
        assert get_directory_client() is get_directory_client()
        mock_session_provider.assert_called_once()
