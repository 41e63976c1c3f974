"""GitHub issues client.

Posts comments and adds labels on the issue an approval command came from.
All methods return OperationResult objects so the workflow can report
failures without handling ``requests`` exceptions itself.
"""

from typing import Any, Dict, List, Optional

import requests

from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult, classify_http_error

logger = get_module_logger()

REQUEST_TIMEOUT = 60
GITHUB_ACCEPT = "application/vnd.github+json"
GITHUB_API_VERSION = "2022-11-28"


def create_authorization_headers(token: Optional[str]) -> Dict[str, str]:
    """Build the request headers for the GitHub REST API."""
    if not token:
        error = "INPUT_GITHUB_TOKEN is missing"
        logger.error("authorization_header_creation_failed", error=error)
        raise ValueError(error)

    return {
        "Authorization": f"Bearer {token}",
        "Accept": GITHUB_ACCEPT,
        "X-GitHub-Api-Version": GITHUB_API_VERSION,
    }


class GitHubIssuesClient:
    """Issue comment and label calls for a single repository.

    Example:
        client = GitHubIssuesClient(token, owner="cds-snc", repo="access")
        result = client.create_comment(12, "Successfully sent approval email")
        if not result.is_success:
            logger.error("comment_failed", error=result.message)
    """

    def __init__(
        self,
        token: Optional[str],
        owner: str,
        repo: str,
        api_url: str = "https://api.github.com",
    ):
        self.owner = owner
        self.repo = repo
        self.api_url = api_url.rstrip("/")
        self._headers = create_authorization_headers(token)

    def _issue_url(self, issue_number: int, resource: str) -> str:
        return (
            f"{self.api_url}/repos/{self.owner}/{self.repo}"
            f"/issues/{issue_number}/{resource}"
        )

    def _post(self, url: str, payload: Dict[str, Any]) -> OperationResult:
        try:
            response = requests.post(
                url, json=payload, headers=self._headers, timeout=REQUEST_TIMEOUT
            )
            response.raise_for_status()
        except requests.RequestException as e:
            result = classify_http_error(e)
            logger.error(
                "github_request_failed",
                url=url,
                error=result.message,
                error_code=result.error_code,
            )
            return result

        try:
            data = response.json()
        except requests.JSONDecodeError:
            logger.warning("github_response_not_json", url=url)
            data = None

        return OperationResult.success(data=data)

    def create_comment(self, issue_number: int, body: str) -> OperationResult:
        """Post a comment on an issue.

        Args:
            issue_number: Number of the issue to comment on.
            body: Markdown body of the comment.

        Returns:
            OperationResult with the created comment in data on success.
        """
        result = self._post(self._issue_url(issue_number, "comments"), {"body": body})
        if result.is_success:
            logger.info("issue_comment_created", issue_number=issue_number)
        return result

    def add_labels(self, issue_number: int, labels: List[str]) -> OperationResult:
        """Add labels to an issue, keeping the ones already present.

        Returns:
            OperationResult with the issue's labels in data on success.
        """
        result = self._post(self._issue_url(issue_number, "labels"), {"labels": labels})
        if result.is_success:
            logger.info("issue_labels_added", issue_number=issue_number, labels=labels)
        return result
