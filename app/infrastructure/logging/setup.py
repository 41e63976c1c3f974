"""Structlog configuration and logger setup.

A run of the action is a single short process, so logging is configured once
in ``main`` and written to stderr of the workflow step: human-readable when
PREFIX is set (local or test repositories), JSON otherwise.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("event_name", key="value")

Dependencies:
    - infrastructure.configuration.Settings
"""

import inspect
import logging
import sys
from typing import Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger

from infrastructure.configuration import Settings
from infrastructure.configuration import settings as default_settings
from infrastructure.logging.formatters import (
    add_app_info,
    mask_sensitive_data,
    obscure_email_addresses,
    truncate_command_text,
)

APP_NAME = "approval-mailer"

# Above CRITICAL, so nothing is emitted
SILENT = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def _build_processors(app_version: str, prod_mode: bool) -> List[Any]:
    """Processor chain for a run: context, callsite, redaction, rendering.

    Redaction runs before rendering so neither renderer sees raw tokens,
    addresses or full comment bodies.
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if prod_mode
        else structlog.dev.ConsoleRenderer()
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        add_app_info(APP_NAME, app_version),
        mask_sensitive_data(),
        obscure_email_addresses(),
        truncate_command_text(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


def _apply(processors: List[Any], level: int) -> BoundLogger:
    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=True)
    return structlog.stdlib.get_logger()


def configure_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging for an approval run.

    Configures structlog with:
    - Context variable merging (correlation id, repository, issue number)
    - File/line/function callsite context
    - Masking of token-like keys and approver addresses
    - Truncation of long comment bodies
    - Test environment detection for log suppression

    Args:
        settings: Settings to read defaults from. Defaults to the singleton.
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
        is_production: Optional override for production mode. Controls
            JSON vs console output.

    Returns:
        Configured logger instance
    """
    settings = settings or default_settings

    if _is_test_environment():
        logging.root.setLevel(SILENT)
        return _apply(
            [
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            SILENT,
        )

    prod_mode = is_production if is_production is not None else settings.is_production
    effective_log_level = log_level or settings.LOG_LEVEL

    return _apply(
        _build_processors(settings.GIT_SHA, prod_mode),
        getattr(logging, effective_log_level.upper(), logging.INFO),
    )


# Module-level logger (auto-configured on import)
logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    Binds ``component`` (last dotted part) and ``module_path`` (full module
    name) of the caller.

    Example:
        # In modules/approvals/service.py
        logger = get_module_logger()
        # context: {"component": "service", "module_path": "modules.approvals.service"}
    """
    current_frame = inspect.currentframe()
    frame = current_frame.f_back if current_frame is not None else None
    module = inspect.getmodule(frame) if frame is not None else None

    if module is None:
        return logger.bind(component="unknown")

    return logger.bind(
        component=module.__name__.rsplit(".", 1)[-1],
        module_path=module.__name__,
    )
