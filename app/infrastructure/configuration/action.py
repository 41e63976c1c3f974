"""Approval action input settings."""

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class ActionSettings(FeatureSettings):
    """Inputs of the approval action.

    GitHub exposes each action input as an ``INPUT_<NAME>`` environment
    variable, so these are read straight from the environment.

    Environment Variables:
        INPUT_COMMAND: Comment body holding the approval command
        INPUT_FROM: Sender address, also CC'd unless the command contains "skip"
        INPUT_TEMPLATE: Body template with three %s slots
            (user name, user email, issue URL)
        INPUT_SUBJECT: Email subject line
        INPUT_FROM_NAME: Display name of the sender
        INPUT_TO_NAME: Display name of the approver
        INPUT_LABEL: Label added to the issue once the email is sent

    Example:
        ```python
        from infrastructure.configuration import settings

        command = settings.action.INPUT_COMMAND
        sender = settings.action.INPUT_FROM
        ```
    """

    INPUT_COMMAND: str = Field(default="", alias="INPUT_COMMAND")
    INPUT_FROM: str = Field(default="", alias="INPUT_FROM")
    INPUT_TEMPLATE: str = Field(
        default=(
            "Please approve access for %s (%s).\n\n"
            "Request details: %s\n"
        ),
        alias="INPUT_TEMPLATE",
    )
    INPUT_SUBJECT: str = Field(default="User Access Request", alias="INPUT_SUBJECT")
    INPUT_FROM_NAME: str = Field(default="GitHub", alias="INPUT_FROM_NAME")
    INPUT_TO_NAME: str = Field(default="PM/COR", alias="INPUT_TO_NAME")
    INPUT_LABEL: str = Field(default="email-sent", alias="INPUT_LABEL")
