"""Doxy.me Slack Calling configuration settings - main aggregator."""

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

# Integration settings
from infrastructure.configuration.integrations import SlackSettings

# Feature settings
from infrastructure.configuration.features import DoxySettings

# Infrastructure settings
from infrastructure.configuration.infrastructure import (
    ObservabilitySettings,
    ServerSettings,
    StorageSettings,
)
from infrastructure.configuration.errors import ConfigurationError


class Settings(BaseSettings):
    """Application settings - main aggregator.

    Aggregates the domain-specific settings into a single configuration object:

    - **Integrations**: Slack signing secret and bot token
    - **Features**: Doxy.me slash command names and allowed room domain
    - **Infrastructure**: HTTP server, logging, deployment tracking and storage location

    Environment Variables:
        APP_NAME: Name reported by the liveness endpoint

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        secret = settings.slack.SIGNING_SECRET
        if settings.is_production:
            ...
        ```
    """

    APP_NAME: str = "doxyme-slack-calling"

    # Integration settings
    slack: SlackSettings

    # Feature settings
    doxy: DoxySettings

    # Infrastructure settings
    observability: ObservabilitySettings
    server: ServerSettings
    storage: StorageSettings

    @property
    def is_production(self) -> bool:
        """True when PREFIX is empty."""
        return self.observability.is_production

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            # Integrations
            "slack": SlackSettings,
            # Features
            "doxy": DoxySettings,
            # Infrastructure
            "observability": ObservabilitySettings,
            "server": ServerSettings,
            "storage": StorageSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


def load_settings(**overrides) -> Settings:
    """Build Settings, failing fast with a descriptive error.

    Missing required environment variables are reported by name so a
    misconfigured deployment fails at startup instead of on the first
    Slack request.

    Raises:
        ConfigurationError: If a required value is absent or a value is invalid.
    """
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        missing = [
            ".".join(str(part) for part in error["loc"])
            for error in exc.errors()
            if error["type"] in ("missing", "string_too_short")
        ]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variable: {', '.join(missing)}"
            ) from exc
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc
