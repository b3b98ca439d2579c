"""Operation context binding for structured logging.

Binds operation-scoped context (correlation id, group id, lifecycle
operation) so every log entry emitted while reconciling a group carries it.

Usage:
    from infrastructure.logging import bind_operation_context

    with bind_operation_context(group_id="eng@example.com", operation="update"):
        logger.info("reconciling_role")
"""

import uuid
from contextlib import contextmanager
from typing import Optional, Any, Generator
import structlog


@contextmanager
def bind_operation_context(
    correlation_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind context to all logs within the block.

    Args:
        correlation_id: Unique operation identifier. Defaults to the
            correlation id already bound by an enclosing block, else a new one.
        **extra_context: Additional key-value pairs to include in logs.
            None values are skipped.

    Yields:
        None - context is bound to structlog's context vars. On exit every key
        is restored to the value it had before the block.
    """
    context: dict[str, Any] = {
        "correlation_id": correlation_id or get_correlation_id() or str(uuid.uuid4())
    }
    context.update({k: v for k, v in extra_context.items() if v is not None})

    tokens = structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.reset_contextvars(**tokens)


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context."""
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("correlation_id")


def clear_operation_context() -> None:
    """Clear all operation-scoped context from the logging context."""
    structlog.contextvars.clear_contextvars()
