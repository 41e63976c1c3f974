"""Access request email composition.

Builds the plain-text "User Access Request" email sent to the approver and
renders it in the base64url "raw" form mail APIs expect. Delivery is left to
a mail channel.
"""

import base64
from dataclasses import dataclass
from email.utils import formataddr
from email.message import EmailMessage
from typing import Optional

from infrastructure.configuration import ActionSettings
from modules.approvals.exceptions import InvalidAddressError, TemplateError
from modules.approvals.models import ApprovalRequest

SKIP_CC_MARKER = "skip"


@dataclass(frozen=True)
class ApprovalEmail:
    """An access request email ready to hand to a mail channel."""

    from_name: str
    from_email: str
    to_name: str
    to_email: str
    subject: str
    body: str
    cc_email: Optional[str] = None

    def to_mime(self) -> EmailMessage:
        """Render the email as a MIME message."""
        message = EmailMessage()
        message["From"] = formataddr((self.from_name, self.from_email))
        message["To"] = formataddr((self.to_name, self.to_email))
        if self.cc_email:
            message["Cc"] = self.cc_email
        message["Subject"] = self.subject
        message.set_content(self.body, charset="utf-8")
        return message

    def to_raw(self) -> str:
        """Render the email base64url-encoded for mail APIs."""
        return base64.urlsafe_b64encode(self.to_mime().as_bytes()).decode("utf-8")


def render_body(template: str, request: ApprovalRequest, issue_url: str) -> str:
    """Fill the body template's three %s slots.

    Raises:
        TemplateError: If the template does not take exactly three values.
    """
    try:
        return template % (request.user_name, request.user_email, issue_url)
    except (TypeError, ValueError) as e:
        raise TemplateError(
            f"email template must hold three %s placeholders: {str(e)}"
        ) from e


def compose_approval_email(
    request: ApprovalRequest,
    action: ActionSettings,
    issue_url: str,
    command: str,
) -> ApprovalEmail:
    """Compose the access request email for a parsed command.

    The sender is CC'd so the requesting team keeps a copy, unless the
    command text contains "skip".

    Args:
        request: The parsed approval command.
        action: Action inputs (sender, template, subject, display names).
        issue_url: URL of the issue the request was made on.
        command: Raw command text, checked for the "skip" marker.

    Returns:
        ApprovalEmail addressed to the approver.

    Raises:
        TemplateError: If the body template is unusable.
        InvalidAddressError: If an address or name cannot be put in a
            header (non-ASCII address, CR or LF).
    """
    cc_email = None
    if SKIP_CC_MARKER not in command:
        cc_email = action.INPUT_FROM

    email = ApprovalEmail(
        from_name=action.INPUT_FROM_NAME,
        from_email=action.INPUT_FROM,
        to_name=action.INPUT_TO_NAME,
        to_email=request.approver_email,
        subject=action.INPUT_SUBJECT,
        body=render_body(action.INPUT_TEMPLATE, request, issue_url),
        cc_email=cc_email or None,
    )

    try:
        email.to_mime()
    except ValueError as e:
        raise InvalidAddressError(f"invalid email header: {str(e)}") from e

    return email
