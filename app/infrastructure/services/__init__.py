"""
Application-scoped services.

Provider functions returning cached infrastructure singletons.
"""

from infrastructure.services.providers import (
    get_settings,
    get_directory_client,
)

__all__ = [
    "get_settings",
    "get_directory_client",
]
