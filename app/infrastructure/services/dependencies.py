"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated
from fastapi import Depends
from infrastructure.configuration import Settings
from modules.gateway import SlackGateway
from infrastructure.services.providers import (
    get_settings,
    get_slack_gateway,
)

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Gateway answering the Slack endpoint
SlackGatewayDep = Annotated[SlackGateway, Depends(get_slack_gateway)]


__all__ = [
    "SettingsDep",
    "SlackGatewayDep",
]
