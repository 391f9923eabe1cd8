"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for the service's
collaborators. Each provider is cached with ``functools.lru_cache`` so one
instance exists per process; tests call ``reset_providers()`` to start over.
"""

from functools import lru_cache

from slack_sdk import WebClient

from infrastructure.configuration import Settings, load_settings
from infrastructure.notifications import DirectMessageChannel
from infrastructure.persistence import JsonDocumentStore, WriteQueue, resolve_data_dir
from infrastructure.security import SlackRequestVerifier
from integrations.slack.responses import ResponseUrlResponder
from modules.doxy.commands import DoxyCommands
from modules.doxy.mappings import MappingRepository
from modules.gateway import SlackGateway


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    This is the single source of truth for settings across the entire application.
    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/version")
        def get_version(settings: SettingsDep):
            return {"version": settings.observability.GIT_SHA}

    Returns:
        Settings: Cached settings instance loaded from environment.

    Raises:
        ConfigurationError: If a required environment variable is missing.
    """
    return load_settings()


@lru_cache
def get_slack_client() -> WebClient:
    """Slack Web API client authenticated with the bot token."""
    return WebClient(token=get_settings().slack.BOT_TOKEN)


@lru_cache
def get_document_store() -> JsonDocumentStore:
    """
    Get the store holding the user room mapping document.

    The data directory is resolved on first use; the store owns its own
    write queue, so every write in the process goes through one FIFO.

    Raises:
        StoreError: If no usable data directory exists.
    """
    storage = get_settings().storage
    data_dir = resolve_data_dir(
        storage.DATA_DIR, storage.DEFAULT_DATA_DIR, storage.FALLBACK_DATA_DIR
    )
    return JsonDocumentStore(data_dir / storage.USERS_FILE, queue=WriteQueue())


@lru_cache
def get_mapping_repository() -> MappingRepository:
    return MappingRepository(
        get_document_store(), allowed_domain=get_settings().doxy.ALLOWED_DOMAIN
    )


@lru_cache
def get_request_verifier() -> SlackRequestVerifier:
    return SlackRequestVerifier(signing_secret=get_settings().slack.SIGNING_SECRET)


@lru_cache
def get_doxy_commands() -> DoxyCommands:
    client = get_slack_client()
    return DoxyCommands(
        repository=get_mapping_repository(),
        channel=DirectMessageChannel(client),
        client=client,
        settings=get_settings().doxy,
    )


@lru_cache
def get_slack_gateway() -> SlackGateway:
    """
    Get the gateway that answers every delivery on the Slack endpoint.

    Returns:
        SlackGateway: Wired with the request verifier, the Doxy.me command
        handlers and a response_url responder.
    """
    return SlackGateway(
        verifier=get_request_verifier(),
        commands=get_doxy_commands(),
        responder=ResponseUrlResponder(),
        app_name=get_settings().APP_NAME,
    )


def reset_providers() -> None:
    """Drop every cached instance, including the resolved data directory."""
    for provider in (
        get_settings,
        get_slack_client,
        get_document_store,
        get_mapping_repository,
        get_request_verifier,
        get_doxy_commands,
        get_slack_gateway,
        resolve_data_dir,
    ):
        provider.cache_clear()
