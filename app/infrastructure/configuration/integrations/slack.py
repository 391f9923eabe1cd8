"""Slack integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class SlackSettings(IntegrationSettings):
    """Slack API and request signing configuration.

    Environment Variables:
        SLACK_SIGNING_SECRET: Signing secret used to verify inbound requests (required)
        SLACK_BOT_TOKEN: Bot token (xoxb-*) used for Web API calls (required)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        signing_secret = settings.slack.SIGNING_SECRET
        bot_token = settings.slack.BOT_TOKEN
        ```
    """

    SIGNING_SECRET: str = Field(alias="SLACK_SIGNING_SECRET", min_length=1)
    BOT_TOKEN: str = Field(alias="SLACK_BOT_TOKEN", min_length=1)
