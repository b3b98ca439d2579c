"""Directory client for Google Workspace group membership operations.

Provides access to the Directory API ``members`` resource with consistent
error handling and OperationResult return types.
"""

from typing import Any, Optional

import structlog

from infrastructure.clients.google_workspace.executor import execute_google_api_call
from infrastructure.clients.google_workspace.session_provider import SessionProvider
from infrastructure.operations.result import OperationResult

logger = structlog.get_logger()

MEMBER_READONLY_SCOPE = (
    "https://www.googleapis.com/auth/admin.directory.group.member.readonly"
)
MEMBER_SCOPE = "https://www.googleapis.com/auth/admin.directory.group.member"


class DirectoryClient:
    """Client for Google Workspace Directory API membership operations.

    All methods return OperationResult. Listing calls are retried on rate
    limiting and server errors; insert and delete calls use their own retry
    budget, which defaults to none.

    Args:
        session_provider: SessionProvider for authentication
        list_max_retries: Retries for members.list calls
        write_max_retries: Retries for members.insert/delete calls
        page_size: maxResults per members.list page
    """

    def __init__(
        self,
        session_provider: SessionProvider,
        list_max_retries: Optional[int] = None,
        write_max_retries: int = 0,
        page_size: int = 200,
    ) -> None:
        self._session_provider = session_provider
        self._list_max_retries = list_max_retries
        self._write_max_retries = write_max_retries
        self._page_size = page_size
        self._logger = logger.bind(component="directory_client")

    def _service(self, scope: str, delegated_email: Optional[str]) -> Any:
        return self._session_provider.get_service(
            "admin",
            "directory_v1",
            scopes=[scope],
            delegated_user_email=delegated_email,
        )

    def list_members(
        self,
        group_key: str,
        roles: Optional[str] = None,
        delegated_email: Optional[str] = None,
    ) -> OperationResult:
        """List all members of a group with automatic pagination.

        Args:
            group_key: Group's email or unique ID
            roles: Optional comma separated role filter (OWNER, MANAGER, MEMBER).
                Google treats it as a query hint.
            delegated_email: Email for domain-wide delegation

        Returns:
            OperationResult with the list of member resources in data field
        """
        self._logger.debug("listing_members", group_key=group_key, roles=roles)

        kwargs: dict[str, Any] = {"maxResults": self._page_size}
        if roles:
            kwargs["roles"] = roles

        def api_call() -> list[dict[str, Any]]:
            service = self._service(MEMBER_READONLY_SCOPE, delegated_email)

            all_members: list[dict[str, Any]] = []
            request = service.members().list(groupKey=group_key, **kwargs)

            while request is not None:
                response = request.execute()
                all_members.extend(response.get("members", []))
                request = service.members().list_next(request, response)

            return all_members

        return execute_google_api_call(
            "list_members", api_call, max_retries=self._list_max_retries
        )

    def add_member(
        self,
        group_key: str,
        body: dict[str, Any],
        delegated_email: Optional[str] = None,
    ) -> OperationResult:
        """Insert a member into a group.

        Args:
            group_key: Group's email or unique ID
            body: Member resource body (must include email, role)
            delegated_email: Email for domain-wide delegation

        Returns:
            OperationResult with the created member resource in data field
        """
        self._logger.info(
            "adding_member",
            group_key=group_key,
            member_email=body.get("email"),
            role=body.get("role"),
        )

        def api_call() -> dict[str, Any]:
            service = self._service(MEMBER_SCOPE, delegated_email)
            request = service.members().insert(groupKey=group_key, body=body)
            return request.execute()

        return execute_google_api_call(
            "add_member", api_call, max_retries=self._write_max_retries
        )

    def remove_member(
        self,
        group_key: str,
        member_key: str,
        delegated_email: Optional[str] = None,
    ) -> OperationResult:
        """Remove a member from a group, whatever its role.

        Args:
            group_key: Group's email or unique ID
            member_key: Member's email or unique ID
            delegated_email: Email for domain-wide delegation

        Returns:
            OperationResult with success status (no data)
        """
        self._logger.info("removing_member", group_key=group_key, member_key=member_key)

        def api_call() -> None:
            service = self._service(MEMBER_SCOPE, delegated_email)
            request = service.members().delete(groupKey=group_key, memberKey=member_key)
            request.execute()
            return None

        return execute_google_api_call(
            "remove_member", api_call, max_retries=self._write_max_retries
        )
