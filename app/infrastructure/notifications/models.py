"""Notification models.

Features define message content; channels handle delivery. Uses Pydantic
BaseModel for input validation.
"""

from typing import Optional, List, Dict, Any
from enum import Enum
from pydantic import BaseModel, Field, field_validator


class NotificationStatus(Enum):
    """Outcome of one delivery attempt to one recipient."""

    SENT = "sent"
    FAILED = "failed"


class Recipient(BaseModel):
    """A Slack user to notify.

    Attributes:
        slack_user_id: Slack user id (``U…`` or ``W…``)
    """

    slack_user_id: str = Field(..., min_length=1)


class Notification(BaseModel):
    """Message fanned out to each recipient as a direct message.

    Attributes:
        text: Plain-text body, also the fallback shown in notifications
        blocks: Optional Block Kit blocks rendered instead of ``text``
        recipients: Recipients, one delivery attempt each (minimum 1)
        metadata: Context included in logs (caller id, command)

    Example:
        notification = Notification(
            text="Alice is inviting you to a Doxy.me call: https://doxy.me/alice",
            blocks=invite_blocks,
            recipients=[Recipient(slack_user_id="U123")],
        )
    """

    text: str
    blocks: Optional[List[Dict[str, Any]]] = None
    recipients: List[Recipient] = Field(..., min_length=1)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Ensure text is not empty."""
        if not v or not v.strip():
            raise ValueError("Notification text cannot be empty")
        return v


class NotificationResult(BaseModel):
    """Result of a delivery attempt to one recipient.

    Attributes:
        recipient: Who the attempt was for
        channel: Channel name used (``"direct_message"``)
        status: SENT or FAILED
        message: Human-readable result message
        error_code: Slack error string for failures
        external_id: Slack message ``ts`` for successful sends
        retry_after: Seconds to wait before retrying, when rate limited
    """

    recipient: Recipient
    channel: str
    status: NotificationStatus
    message: str
    error_code: Optional[str] = None
    external_id: Optional[str] = None
    retry_after: Optional[int] = None

    @property
    def is_success(self) -> bool:
        """Check if delivery was successful."""
        return self.status == NotificationStatus.SENT
