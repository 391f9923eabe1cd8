"""Observability settings.

Kept out of the required-credential path so logging can be configured at
import time, before the Slack credentials are validated.
"""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ObservabilitySettings(InfrastructureSettings):
    """Logging and deployment tracking configuration.

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        PREFIX: Environment prefix; any non-empty value means non-production
            (console rendering instead of JSON)
        GIT_SHA: Git commit SHA of the deployed build
    """

    LOG_LEVEL: str = Field(default="INFO", alias="LOG_LEVEL")
    PREFIX: str = Field(default="", alias="PREFIX")
    GIT_SHA: str = Field(default="Unknown", alias="GIT_SHA")

    @property
    def is_production(self) -> bool:
        return not bool(self.PREFIX)
