"""Google Workspace clients for the infrastructure layer.

Public API:
- SessionProvider: service account credentials and API discovery
- DirectoryClient: group membership operations (list, insert, delete)

Usage:
    from infrastructure.services import get_directory_client

    result = get_directory_client().list_members("eng@example.com", roles="OWNER")
    if result.is_success:
        owners = result.data
"""

from infrastructure.clients.google_workspace.directory import DirectoryClient
from infrastructure.clients.google_workspace.session_provider import SessionProvider

__all__ = [
    "DirectoryClient",
    "SessionProvider",
]
