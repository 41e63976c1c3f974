import sys

from pydantic import ValidationError

from infrastructure.configuration import settings
from infrastructure.logging import (
    bind_issue_context,
    configure_logging,
    get_module_logger,
)
from integrations.github import GitHubIssuesClient
from models.github import load_event
from modules.approvals.channels import StepOutputChannel
from modules.approvals.service import ApprovalWorkflow

logger = get_module_logger()


def main() -> int:
    """Run the approval action for the triggering issue comment."""
    configure_logging()
    logger.info("application_startup", git_sha=settings.GIT_SHA)

    logger.info("reading_event_payload", path=settings.github.GITHUB_EVENT_PATH)
    try:
        event = load_event(settings.github.GITHUB_EVENT_PATH)
        owner = event.owner
    except (OSError, ValueError, ValidationError) as e:
        logger.error("event_payload_invalid", error=str(e))
        return 1

    command = settings.action.INPUT_COMMAND
    if not command and event.comment is not None:
        command = event.comment.body

    with bind_issue_context(
        repository=event.full_name, issue_number=event.issue.number
    ):
        try:
            issues = GitHubIssuesClient(
                settings.github.INPUT_GITHUB_TOKEN,
                owner=owner,
                repo=event.repository.name,
                api_url=settings.github.GITHUB_API_URL,
            )
        except ValueError as e:
            logger.error("github_client_init_failed", error=str(e))
            return 1

        workflow = ApprovalWorkflow(
            channel=StepOutputChannel(settings.github.GITHUB_OUTPUT),
            issues=issues,
            action=settings.action,
        )
        result = workflow.run(event, command)

        if not result.is_success:
            logger.error(
                "approval_action_failed",
                error=result.message,
                error_code=result.error_code,
                retryable=result.is_retryable,
            )
            return 1

    logger.info("approval_action_completed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
