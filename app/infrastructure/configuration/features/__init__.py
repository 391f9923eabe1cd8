"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.doxy import DoxySettings

__all__ = [
    "DoxySettings",
]
