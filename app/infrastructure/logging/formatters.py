"""Structlog processors for approval run logs.

Run logs end up in public workflow output, so besides tagging entries with
the app version these processors keep secrets, personal addresses and whole
comment bodies out of them.

Usage:
    from infrastructure.logging.formatters import (
        add_app_info,
        mask_sensitive_data,
        obscure_email_addresses,
        truncate_command_text,
    )

Dependencies:
    - structlog processors
"""

from typing import Any

EventDict = dict[str, Any]


def add_app_info(app_name: str, app_version: str = "unknown"):
    """Create a processor that tags log entries with the app name and version."""

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict["app_name"] = app_name
        event_dict["app_version"] = app_version
        return event_dict

    return processor


# Key fragments whose values are never written to the log
SENSITIVE_PATTERNS = frozenset(
    {
        "token",
        "authorization",
        "bearer",
        "secret",
        "password",
        "raw_message",
    }
)


def mask_sensitive_data(
    mask_value: str = "***REDACTED***",
    additional_patterns: frozenset[str] | None = None,
):
    """Create a processor that replaces the values of sensitive keys.

    A key is sensitive when it contains one of the patterns, compared
    case-insensitively, so ``INPUT_GITHUB_TOKEN`` and ``Authorization`` are
    both caught. ``None`` values are left alone.

    Args:
        mask_value: Replacement for sensitive values.
        additional_patterns: Extra key fragments to treat as sensitive.

    Returns:
        A structlog processor function.
    """
    patterns = SENSITIVE_PATTERNS | (additional_patterns or frozenset())

    def is_sensitive(key: str) -> bool:
        key_lower = key.lower()
        return any(pattern in key_lower for pattern in patterns)

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        return {
            key: mask_value if value is not None and is_sensitive(key) else value
            for key, value in event_dict.items()
        }

    return processor


def _obscure_address(address: str) -> str:
    local, at, domain = address.partition("@")
    if not at or not local:
        return address
    return f"{local[0]}***@{domain}"


def obscure_email_addresses(suffixes: tuple[str, ...] = ("_email", "sender")):
    """Create a processor that hides the local part of logged addresses.

    Values of keys ending with one of ``suffixes`` are rewritten from
    ``jane.doe@example.com`` to ``j***@example.com``, which keeps the domain
    for troubleshooting.
    """

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        for key, value in event_dict.items():
            if isinstance(value, str) and key.endswith(suffixes):
                event_dict[key] = _obscure_address(value)
        return event_dict

    return processor


def truncate_command_text(max_length: int = 200, keys: tuple[str, ...] = ("command",)):
    """Create a processor that shortens logged comment text.

    An issue comment may hold far more than the command line; only the first
    ``max_length`` characters of the listed keys are kept.
    """

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        for key in keys:
            value = event_dict.get(key)
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = (
                    f"{value[:max_length]}...[truncated, {len(value)} chars total]"
                )
        return event_dict

    return processor
