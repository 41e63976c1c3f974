import json
from unittest.mock import MagicMock

import pytest

from infrastructure.configuration import ActionSettings
from infrastructure.operations import OperationResult
from integrations.github import GitHubIssuesClient
from models.github import IssueEvent
from modules.approvals.models import ApprovalRequest

from tests.fixtures.approvals import APPROVE_COMMAND, ISSUE_URL


@pytest.fixture
def event_payload():
    return {
        "action": "created",
        "issue": {
            "number": 42,
            "url": ISSUE_URL,
            "title": "Access for Jane",
        },
        "comment": {"id": 1, "body": APPROVE_COMMAND},
        "organization": {"login": "cds-snc", "id": 1},
        "repository": {
            "name": "access-requests",
            "owner": {"login": "cds-snc"},
        },
        "sender": {"login": "octocat"},
    }


@pytest.fixture
def issue_event(event_payload):
    return IssueEvent.model_validate(event_payload)


@pytest.fixture
def event_file(tmp_path, event_payload):
    path = tmp_path / "event.json"
    path.write_text(json.dumps(event_payload), encoding="utf-8")
    return path


@pytest.fixture
def action_settings(monkeypatch):
    """ActionSettings built from a clean, known environment."""
    monkeypatch.setenv("INPUT_COMMAND", APPROVE_COMMAND)
    monkeypatch.setenv("INPUT_FROM", "access@example.com")
    monkeypatch.setenv(
        "INPUT_TEMPLATE", "Name: %s\nEmail: %s\nIssue: %s\n"
    )
    for name in ("INPUT_SUBJECT", "INPUT_FROM_NAME", "INPUT_TO_NAME", "INPUT_LABEL"):
        monkeypatch.delenv(name, raising=False)
    return ActionSettings()


@pytest.fixture
def approval_request():
    return ApprovalRequest(
        approver_email="pm@example.com",
        user_name="Jane Doe",
        user_email="jane@example.com",
    )


@pytest.fixture
def mock_issues():
    """GitHubIssuesClient double whose calls all succeed."""
    issues = MagicMock(spec=GitHubIssuesClient)
    issues.create_comment.return_value = OperationResult.success(data={"id": 1})
    issues.add_labels.return_value = OperationResult.success(data=[])
    return issues
