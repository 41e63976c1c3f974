"""Mail channels for composed approval emails.

A channel receives the composed email and is responsible for getting it to
the approver. SMTP or Gmail delivery is not done here: the shipped channel
publishes the encoded message as step outputs so a later workflow step can
deliver it.
"""

import uuid
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict

from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult
from modules.approvals.message import ApprovalEmail
from modules.approvals.models import ApprovalRequest

logger = get_module_logger()


def format_step_output(name: str, value: str) -> str:
    """Format one step output record.

    Multiline values use the delimiter form so a newline in a quoted name
    cannot start a new record.
    """
    if "\n" not in value and "\r" not in value:
        return f"{name}={value}\n"
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


class MailChannel(ABC):
    """Abstract base class for mail channels.

    Implementations must report failures as OperationResult values with an
    error status rather than raising.
    """

    @property
    @abstractmethod
    def channel_name(self) -> str:
        """Channel identifier used in logs."""
        pass

    @abstractmethod
    def send(self, email: ApprovalEmail, request: ApprovalRequest) -> OperationResult:
        """Hand the composed email over for delivery.

        Args:
            email: The composed access request email.
            request: The approval command it was composed from.

        Returns:
            OperationResult, SUCCESS once the channel has accepted the email.
        """
        pass


class StepOutputChannel(MailChannel):
    """Publishes the email as GitHub Actions step outputs.

    Appends ``name=value`` lines to the file named by ``GITHUB_OUTPUT``:
    ``raw_message`` (base64url MIME), ``approver_email``, ``user_name`` and
    ``user_email``.
    """

    def __init__(self, output_path: str):
        self.output_path = output_path

    @property
    def channel_name(self) -> str:
        return "step_output"

    def send(self, email: ApprovalEmail, request: ApprovalRequest) -> OperationResult:
        if not self.output_path:
            return OperationResult.permanent_error(
                "GITHUB_OUTPUT is not set",
                error_code="MISSING_OUTPUT_PATH",
            )

        try:
            raw_message = email.to_raw()
        except ValueError as e:
            logger.error("email_render_failed", error=str(e))
            return OperationResult.permanent_error(
                f"Unable to render email: {str(e)}",
                error_code="EMAIL_RENDER_FAILED",
            )

        outputs: Dict[str, str] = {
            "raw_message": raw_message,
            "approver_email": request.approver_email,
            "user_name": request.user_name,
            "user_email": request.user_email,
        }

        try:
            with Path(self.output_path).open("a", encoding="utf-8") as output:
                for name, value in outputs.items():
                    output.write(format_step_output(name, value))
        except OSError as e:
            logger.error(
                "step_output_write_failed",
                output_path=self.output_path,
                error=str(e),
            )
            return OperationResult.permanent_error(
                f"Unable to write step outputs: {str(e)}",
                error_code="OUTPUT_WRITE_FAILED",
            )

        logger.info(
            "approval_email_published",
            channel=self.channel_name,
            approver_email=request.approver_email,
        )
        return OperationResult.success(data=outputs, message="Email handed off")
