"""Doxy.me calling feature settings."""

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class DoxySettings(FeatureSettings):
    """Slash command names and the allowed room domain.

    Environment Variables:
        DOXY_SETUP_COMMAND: Command that links a room (default: /doxy-setup)
        DOXY_INVITE_COMMAND: Command that sends invites (default: /doxyme)
        DOXY_ALLOWED_DOMAIN: Host suffix a room URL must belong to (default: doxy.me)
    """

    SETUP_COMMAND: str = Field(default="/doxy-setup", alias="DOXY_SETUP_COMMAND")
    INVITE_COMMAND: str = Field(default="/doxyme", alias="DOXY_INVITE_COMMAND")
    ALLOWED_DOMAIN: str = Field(default="doxy.me", alias="DOXY_ALLOWED_DOMAIN")
