"""Inbound Slack gateway.

Everything Slack sends arrives on one endpoint. The gateway classifies each
delivery, authenticates it, acknowledges within Slack's three second timeout
and schedules the slow work as background tasks.
"""

from modules.gateway.classifier import InboundKind, InboundRequest, classify_request
from modules.gateway.dispatcher import GatewayResult, SlackGateway
from modules.gateway.lifecycle import (
    CallEnded,
    CallStarted,
    LifecycleEvent,
    OtherEvent,
    normalize_event,
)

__all__ = [
    "InboundKind",
    "InboundRequest",
    "classify_request",
    "GatewayResult",
    "SlackGateway",
    "LifecycleEvent",
    "CallStarted",
    "CallEnded",
    "OtherEvent",
    "normalize_event",
]
