"""Result type for the steps of an approval run.

Sending the email, commenting and labelling each return an OperationResult
instead of raising, so the workflow can stop at the first failed step and
post its message back on the issue.
"""

from typing import Optional, Any
from dataclasses import dataclass

from infrastructure.operations.status import OperationStatus


@dataclass(frozen=True)
class OperationResult:
    """Outcome of one step of an approval run.

    Attributes:
        status: OperationStatus -- outcome category
        message: str -- human-readable outcome, posted on the issue on failure
        data: Optional[Any] -- step payload (API response, ApprovalRequest)
        error_code: Optional[str] -- UPPERCASE machine code on failure
        retry_after: Optional[int] -- seconds to wait when rate-limited
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None
    retry_after: Optional[int] = None

    @property
    def is_success(self) -> bool:
        return self.status == OperationStatus.SUCCESS

    @property
    def is_retryable(self) -> bool:
        """True when rerunning the workflow may succeed without changes."""
        return self.status == OperationStatus.TRANSIENT_ERROR

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        retry_after: Optional[int] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Create a failed result with an explicit status."""
        return cls(
            status=status,
            message=message,
            data=data,
            error_code=error_code,
            retry_after=retry_after,
        )

    @classmethod
    def transient_error(
        cls,
        message: str,
        error_code: Optional[str] = None,
        retry_after: Optional[int] = None,
    ) -> "OperationResult":
        """Failure worth rerunning: timeouts, rate limits, 5xx."""
        return cls.error(
            OperationStatus.TRANSIENT_ERROR, message, error_code, retry_after
        )

    @classmethod
    def permanent_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Failure that needs a changed command, input or permission."""
        return cls.error(OperationStatus.PERMANENT_ERROR, message, error_code)
