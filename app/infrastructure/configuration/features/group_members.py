"""Group membership reconciliation feature settings."""

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class GroupMembersFeatureSettings(FeatureSettings):
    """Configuration for directory calls issued while reconciling memberships.

    Environment Variables:
        GROUP_MEMBERS_LIST_MAX_RETRIES: Transport retries for member listings
            on rate limiting or server errors
        GROUP_MEMBERS_WRITE_MAX_RETRIES: Transport retries for member
            insert/delete calls
        GROUP_MEMBERS_PAGE_SIZE: maxResults per members.list page (1-200)

    Inserts are not idempotent on the Directory API: a retried insert whose
    first attempt actually landed fails with a conflict. Keep
    GROUP_MEMBERS_WRITE_MAX_RETRIES at 0 unless the transport is known to fail
    before the request reaches Google.

    Example:
        ```python
        from infrastructure.services import get_settings

        retries = get_settings().group_members.list_max_retries
        ```
    """

    list_max_retries: int = Field(
        default=3,
        ge=0,
        alias="GROUP_MEMBERS_LIST_MAX_RETRIES",
        description="Transport retries for members.list calls",
    )
    write_max_retries: int = Field(
        default=0,
        ge=0,
        alias="GROUP_MEMBERS_WRITE_MAX_RETRIES",
        description="Transport retries for members.insert/delete calls",
    )
    page_size: int = Field(
        default=200,
        ge=1,
        le=200,
        alias="GROUP_MEMBERS_PAGE_SIZE",
        description="maxResults per members.list page",
    )
