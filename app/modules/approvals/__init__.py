"""Approval command module.

Parses ``/approve`` issue comments into access requests and emails the
approver.
"""

from modules.approvals.command import parse_approval, parse_command
from modules.approvals.exceptions import (
    EmptyCommandError,
    EmptyFlagValueError,
    MalformedCommandError,
    MissingFlagError,
    NotEnoughArgumentsError,
    ParseError,
    UnsupportedCommandError,
)
from modules.approvals.models import ApprovalRequest

__all__ = [
    "ApprovalRequest",
    "parse_approval",
    "parse_command",
    "ParseError",
    "EmptyCommandError",
    "UnsupportedCommandError",
    "NotEnoughArgumentsError",
    "MissingFlagError",
    "EmptyFlagValueError",
    "MalformedCommandError",
]
