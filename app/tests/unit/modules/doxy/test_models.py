"""Unit tests for modules.doxy.models module."""

from datetime import datetime, timezone

import pytest

from modules.doxy.models import UserRoomMapping, format_timestamp


@pytest.mark.unit
class TestUserRoomMapping:
    def test_to_document_uses_persisted_field_names(self):
        mapping = UserRoomMapping(
            user_id="U1",
            room_url="https://doxy.me/alice",
            updated_at=datetime(2024, 5, 1, 12, 30, 0, 123000, tzinfo=timezone.utc),
        )

        assert mapping.to_document() == {
            "doxyUrl": "https://doxy.me/alice",
            "updatedAt": "2024-05-01T12:30:00.123Z",
        }

    def test_from_document(self):
        mapping = UserRoomMapping.from_document(
            "U1", {"doxyUrl": "https://doxy.me/alice", "updatedAt": "2024-05-01T12:30:00.123Z"}
        )

        assert mapping.user_id == "U1"
        assert mapping.room_url == "https://doxy.me/alice"
        assert mapping.updated_at == datetime(
            2024, 5, 1, 12, 30, 0, 123000, tzinfo=timezone.utc
        )

    def test_from_document_without_timestamp(self):
        mapping = UserRoomMapping.from_document("U1", {"doxyUrl": "https://doxy.me/a"})

        assert mapping.updated_at is None
        assert mapping.to_document() == {"doxyUrl": "https://doxy.me/a"}


@pytest.mark.unit
def test_format_timestamp_converts_to_utc():
    value = datetime.fromisoformat("2024-05-01T14:30:00+02:00")

    assert format_timestamp(value) == "2024-05-01T12:30:00.000Z"
