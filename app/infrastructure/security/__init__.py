"""Inbound request authentication.

Exports:
    SlackRequestVerifier: Verifies Slack's v0 request signatures
    REPLAY_WINDOW_SECONDS: Maximum accepted clock skew for a request timestamp
"""

from infrastructure.security.slack_signature import (
    REPLAY_WINDOW_SECONDS,
    SlackRequestVerifier,
)

__all__ = [
    "REPLAY_WINDOW_SECONDS",
    "SlackRequestVerifier",
]
