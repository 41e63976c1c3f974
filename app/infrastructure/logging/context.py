"""Run context binding for structured logging.

Binds issue-scoped metadata to every log entry emitted while an approval
command is processed.

Usage:
    from infrastructure.logging import bind_issue_context

    with bind_issue_context(repository="org/repo", issue_number=12):
        logger.info("processing_command")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Optional, Any, Generator
import structlog


@contextmanager
def bind_issue_context(
    correlation_id: Optional[str] = None,
    repository: Optional[str] = None,
    issue_number: Optional[int] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind issue-scoped context to all logs within the context manager.

    Args:
        correlation_id: Unique run identifier. Auto-generated if not provided.
        repository: "owner/name" of the repository the event came from.
        issue_number: Number of the issue the command was posted on.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is bound to structlog's context vars.
    """
    context: dict[str, Any] = {}
    context["correlation_id"] = correlation_id or str(uuid.uuid4())

    if repository is not None:
        context["repository"] = repository

    if issue_number is not None:
        context["issue_number"] = issue_number

    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context."""
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("correlation_id")
