"""GitHub event payload models."""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class Account(BaseModel):
    login: str

    model_config = ConfigDict(extra="ignore")


class Issue(BaseModel):
    number: int
    url: str

    model_config = ConfigDict(extra="ignore")


class Repository(BaseModel):
    name: str
    owner: Account | None = None

    model_config = ConfigDict(extra="ignore")


class Comment(BaseModel):
    body: str = ""

    model_config = ConfigDict(extra="ignore")


class IssueEvent(BaseModel):
    """
    IssueEvent is the part of an ``issue_comment`` event the action reads.

    - issue: The issue the comment was posted on (number and API URL).
    - organization: The owning organization, absent for user-owned repositories.
    - repository: The repository, including its owner.
    - comment: The triggering comment, holding the command.
    """

    issue: Issue
    repository: Repository
    organization: Account | None = None
    comment: Comment | None = None

    model_config = ConfigDict(extra="ignore")

    @property
    def owner(self) -> str:
        """Login of the account owning the repository."""
        if self.organization is not None:
            return self.organization.login
        if self.repository.owner is not None:
            return self.repository.owner.login
        raise ValueError("event payload has no organization or repository owner")

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repository.name}"


def load_event(path: str) -> IssueEvent:
    """Read and validate the event payload file.

    Raises:
        OSError: If the file cannot be read.
        pydantic.ValidationError: If the payload is not an issue event.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return IssueEvent.model_validate(data)
