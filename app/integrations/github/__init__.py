"""GitHub integration."""

from integrations.github.client import GitHubIssuesClient

__all__ = ["GitHubIssuesClient"]
