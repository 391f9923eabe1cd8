"""Classification of inbound Slack deliveries.

Classification is pure: it only looks at the method, the content type and
the body. Authentication happens afterwards in the dispatcher, except for
health checks and the Events API ``url_verification`` handshake, which Slack
sends before the app is trusted.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from integrations.slack.commands import parse_command_body


class InboundKind(Enum):
    HEALTH_CHECK = "health_check"
    URL_VERIFICATION = "url_verification"
    EVENT_CALLBACK = "event_callback"
    JSON_OTHER = "json_other"
    SLASH_COMMAND = "slash_command"
    FORM_OTHER = "form_other"


@dataclass(frozen=True)
class InboundRequest:
    """A raw delivery as received on the wire.

    Header names are lower-cased. ``body`` holds the exact bytes Slack sent;
    those same bytes are verified and then parsed.
    """

    method: str
    body: bytes = b""
    headers: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_parts(
        cls, method: str, headers: Mapping[str, str], body: bytes
    ) -> "InboundRequest":
        return cls(
            method=method.upper(),
            body=body or b"",
            headers={key.lower(): value for key, value in headers.items()},
        )

    @property
    def content_type(self) -> str:
        return self.headers.get("content-type", "")


def parse_json_body(body: bytes) -> Optional[Dict[str, Any]]:
    """Parse a JSON object body; None when malformed or not an object."""
    try:
        payload = json.loads(body)
    except (ValueError, UnicodeDecodeError):
        return None
    return payload if isinstance(payload, dict) else None


def is_json(content_type: str) -> bool:
    return "application/json" in content_type.lower()


def classify_request(method: str, content_type: str, body: bytes) -> InboundKind:
    """Decide which kind of delivery a request is.

    Args:
        method: HTTP method.
        content_type: Value of the Content-Type header (may be empty).
        body: Raw request body.

    Returns:
        InboundKind: Malformed JSON is ``JSON_OTHER``; any body that is not
        JSON is treated as form-encoded.
    """
    method = method.upper()
    if method in ("GET", "HEAD") or (method != "POST" and not body):
        return InboundKind.HEALTH_CHECK

    if is_json(content_type):
        payload = parse_json_body(body) or {}
        payload_type = payload.get("type")
        if payload_type == "url_verification":
            return InboundKind.URL_VERIFICATION
        if payload_type == "event_callback":
            return InboundKind.EVENT_CALLBACK
        return InboundKind.JSON_OTHER

    if parse_command_body(body).get("command"):
        return InboundKind.SLASH_COMMAND
    return InboundKind.FORM_OTHER
