"""GitHub integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class GitHubSettings(IntegrationSettings):
    """GitHub API and runner configuration.

    Environment Variables:
        INPUT_GITHUB_TOKEN: Token used for the issues API
        GITHUB_API_URL: REST API base URL
        GITHUB_EVENT_PATH: Path of the triggering event payload
        GITHUB_OUTPUT: Path of the step output file

    Example:
        ```python
        from infrastructure.configuration import settings

        api_url = settings.github.GITHUB_API_URL
        ```
    """

    INPUT_GITHUB_TOKEN: str | None = Field(default=None, alias="INPUT_GITHUB_TOKEN")
    GITHUB_API_URL: str = Field(default="https://api.github.com", alias="GITHUB_API_URL")
    GITHUB_EVENT_PATH: str = Field(default="", alias="GITHUB_EVENT_PATH")
    GITHUB_OUTPUT: str = Field(default="", alias="GITHUB_OUTPUT")
