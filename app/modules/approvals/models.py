"""Approval request models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ApprovalRequest:
    """A parsed ``/approve`` command.

    Only built by a successful parse, so all three fields are non-empty.

    Attributes:
        approver_email: Address of the PM/COR who approves the access.
        user_name: Display name of the person requesting access.
        user_email: Address of the person requesting access.
    """

    approver_email: str
    user_name: str
    user_email: str
