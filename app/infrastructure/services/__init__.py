"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    SlackGatewayDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_slack_client,
    get_document_store,
    get_mapping_repository,
    get_request_verifier,
    get_doxy_commands,
    get_slack_gateway,
    reset_providers,
)

__all__ = [
    "SettingsDep",
    "SlackGatewayDep",
    "get_settings",
    "get_slack_client",
    "get_document_store",
    "get_mapping_repository",
    "get_request_verifier",
    "get_doxy_commands",
    "get_slack_gateway",
    "reset_providers",
]
