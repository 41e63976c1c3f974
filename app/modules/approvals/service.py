"""Approval workflow.

Runs an ``/approve`` comment end to end: parse the command, compose the
access request email, hand it to the mail channel, then report back on the
issue. Any failure is posted on the issue as "Failed to send email: ..."
and returned as an error OperationResult.
"""

from infrastructure.configuration import ActionSettings
from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult
from infrastructure.parsing import CommandError
from integrations.github import GitHubIssuesClient
from models.github import IssueEvent
from modules.approvals.channels import MailChannel
from modules.approvals.command import parse_command
from modules.approvals.exceptions import ComposeError
from modules.approvals.message import compose_approval_email

logger = get_module_logger()

SUCCESS_COMMENT = "Successfully sent approval email"
FAILURE_COMMENT = "Failed to send email: {reason}"


class ApprovalWorkflow:
    """Turns approval commands into access request emails.

    Args:
        channel: Mail channel the composed email is handed to.
        issues: Client for the repository the command was posted in.
        action: Action inputs (sender, template, label).

    Example:
        workflow = ApprovalWorkflow(channel, issues, settings.action)
        result = workflow.run(event, settings.action.INPUT_COMMAND)
        if not result.is_success:
            sys.exit(1)
    """

    def __init__(
        self,
        channel: MailChannel,
        issues: GitHubIssuesClient,
        action: ActionSettings,
    ):
        self.channel = channel
        self.issues = issues
        self.action = action

    def run(self, event: IssueEvent, command: str) -> OperationResult:
        """Process one approval command.

        Args:
            event: The issue_comment event that triggered the run.
            command: The comment text holding the command.

        Returns:
            OperationResult with the ApprovalRequest in data on success.
        """
        issue_number = event.issue.number

        logger.info("parsing_command", command=command)
        try:
            request = parse_command(command)
        except CommandError as e:
            return self._fail(
                issue_number,
                f"unable to parse command [{command}]: {e}",
                e.code,
            )
        logger.info("command_parsed", approver_email=request.approver_email)

        try:
            email = compose_approval_email(
                request, self.action, event.issue.url, command
            )
        except ComposeError as e:
            return self._fail(issue_number, str(e), e.code)

        if email.cc_email is None:
            logger.info("skipping_cc", sender=self.action.INPUT_FROM)

        sent = self.channel.send(email, request)
        if not sent.is_success:
            return self._fail(
                issue_number,
                f"Unable to send email: {sent.message}",
                sent.error_code,
            )

        logger.info("approval_email_sent", channel=self.channel.channel_name)

        commented = self.issues.create_comment(issue_number, SUCCESS_COMMENT)
        if not commented.is_success:
            return commented

        labeled = self.issues.add_labels(issue_number, [self.action.INPUT_LABEL])
        if not labeled.is_success:
            return labeled

        return OperationResult.success(data=request, message=SUCCESS_COMMENT)

    def _fail(
        self, issue_number: int, reason: str, error_code: str | None
    ) -> OperationResult:
        logger.error("approval_failed", reason=reason, error_code=error_code)

        notice = self.issues.create_comment(
            issue_number, FAILURE_COMMENT.format(reason=reason)
        )
        if not notice.is_success:
            logger.error("failure_notice_failed", error=notice.message)

        return OperationResult.permanent_error(reason, error_code=error_code)
