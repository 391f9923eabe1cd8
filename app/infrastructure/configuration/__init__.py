"""Infrastructure configuration module - public API.

Centralized configuration management using Pydantic BaseSettings with
domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    load_settings: Build Settings or raise ConfigurationError
    ConfigurationError: Raised for missing/invalid configuration
    ObservabilitySettings: Logging settings, usable before Slack credentials exist

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    signing_secret = settings.slack.SIGNING_SECRET
    port = settings.server.PORT
    ```
"""

from infrastructure.configuration.errors import ConfigurationError
from infrastructure.configuration.infrastructure.observability import ObservabilitySettings
from infrastructure.configuration.settings import Settings, load_settings

__all__ = ["Settings", "load_settings", "ConfigurationError", "ObservabilitySettings"]
