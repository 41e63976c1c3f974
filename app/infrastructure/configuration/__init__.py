"""Infrastructure configuration module - public API.

Centralized configuration management using Pydantic BaseSettings with
domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    ActionSettings: Approval action inputs
    GitHubSettings: GitHub API and runner configuration

Example:
    ```python
    from infrastructure.configuration import settings

    command = settings.action.INPUT_COMMAND
    api_url = settings.github.GITHUB_API_URL
    ```
"""

from infrastructure.configuration.action import ActionSettings
from infrastructure.configuration.github import GitHubSettings
from infrastructure.configuration.settings import Settings, settings

__all__ = ["settings", "Settings", "ActionSettings", "GitHubSettings"]
