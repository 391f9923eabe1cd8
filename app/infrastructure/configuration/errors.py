"""Configuration errors."""


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid at startup."""
