"""User to room mapping repository.

Reads and writes ``UserRoomMapping`` records in the shared mapping document.
Writes go through the document store's write queue, so concurrent ``set``
calls for the same user land in arrival order and the last one wins.
"""

from typing import Any, Optional

from pydantic import ValidationError

from infrastructure.logging import get_module_logger
from infrastructure.persistence import JsonDocumentStore
from modules.doxy.models import UserRoomMapping, utc_now
from modules.doxy.urls import DEFAULT_ALLOWED_DOMAIN, normalize_room_url

logger = get_module_logger()


class MappingRepository:
    """Per-user Doxy.me room mappings.

    Args:
        store: Document store holding ``{user_id: {"doxyUrl", "updatedAt"}}``.
        allowed_domain: Domain every stored room URL must belong to.
    """

    def __init__(
        self, store: JsonDocumentStore, allowed_domain: str = DEFAULT_ALLOWED_DOMAIN
    ):
        self._store = store
        self._allowed_domain = allowed_domain

    async def get(self, user_id: str) -> Optional[UserRoomMapping]:
        """Return the user's mapping, or None if they have not linked a room.

        Raises:
            StoreError: If the mapping document cannot be read.
        """
        value = await self._store.get(user_id)
        return self._to_mapping(user_id, value)

    async def set(self, user_id: str, room_url: str) -> UserRoomMapping:
        """Link ``room_url`` to the user, replacing any previous room.

        Args:
            user_id: Slack user id.
            room_url: A canonical URL as returned by ``normalize_room_url``.

        Raises:
            ValueError: If ``room_url`` is not a canonical room URL.
            StoreError: If the document cannot be written.
        """
        if not user_id:
            raise ValueError("user_id is required")
        if normalize_room_url(room_url, self._allowed_domain) != room_url:
            raise ValueError(f"Not a canonical room URL: {room_url}")

        def build(_current: Any) -> dict:
            return UserRoomMapping(
                user_id=user_id, room_url=room_url, updated_at=utc_now()
            ).to_document()

        value = await self._store.update(user_id, build)
        logger.info("room_mapping_saved", slack_user_id=user_id, room_url=room_url)
        return UserRoomMapping.from_document(user_id, value)

    @staticmethod
    def _to_mapping(user_id: str, value: Any) -> Optional[UserRoomMapping]:
        if not isinstance(value, dict) or not value.get("doxyUrl"):
            return None
        try:
            return UserRoomMapping.from_document(user_id, value)
        except ValidationError as e:
            logger.warning(
                "room_mapping_invalid", slack_user_id=user_id, error=str(e)
            )
            return None
