"""Doxy.me feature models."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a ``Z`` suffix."""
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class UserRoomMapping(BaseModel):
    """A Slack user's linked Doxy.me room.

    Persisted under the user id as ``{"doxyUrl": ..., "updatedAt": ...}``.

    Attributes:
        user_id: Slack user id, the document key
        room_url: Canonical room URL
        updated_at: When the mapping was last written (UTC)
    """

    model_config = ConfigDict(populate_by_name=True)

    user_id: str
    room_url: str = Field(alias="doxyUrl")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    def to_document(self) -> Dict[str, Any]:
        """Return the persisted form of this mapping."""
        document: Dict[str, Any] = {"doxyUrl": self.room_url}
        if self.updated_at is not None:
            document["updatedAt"] = format_timestamp(self.updated_at)
        return document

    @classmethod
    def from_document(cls, user_id: str, value: Dict[str, Any]) -> "UserRoomMapping":
        return cls.model_validate({**value, "user_id": user_id})
