"""Structured logging infrastructure.

Centralized logging configuration and utilities using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - bind_issue_context(): Context manager for issue-scoped logging
    - get_correlation_id(): Get current correlation ID from context

Processors:
    - add_app_info(): Processor to add app name/version
    - mask_sensitive_data(): Processor to redact tokens and encoded messages
    - obscure_email_addresses(): Processor to hide address local parts
    - truncate_command_text(): Processor to shorten logged comment bodies

Example:
    from infrastructure.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("module_initialized")
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)

from infrastructure.logging.context import (
    bind_issue_context,
    get_correlation_id,
)

from infrastructure.logging.formatters import (
    add_app_info,
    mask_sensitive_data,
    obscure_email_addresses,
    truncate_command_text,
    SENSITIVE_PATTERNS,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_issue_context",
    "get_correlation_id",
    "add_app_info",
    "mask_sensitive_data",
    "obscure_email_addresses",
    "truncate_command_text",
    "SENSITIVE_PATTERNS",
]
