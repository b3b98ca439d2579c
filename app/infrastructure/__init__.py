"""Infrastructure modules for the group membership reconciler.

Centralized infrastructure components:
- configuration: Settings management (Settings, GoogleWorkspaceSettings)
- clients: Google Workspace Directory client
- logging: Structured logging (get_module_logger, bind_operation_context)
- operations: Operation results and error classification
- services: Cached providers (get_settings, get_directory_client)
"""

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
