"""Unit tests for integrations.slack.responses module.

Tests cover:
- SlackResponse serialization
- post_to_response_url success and swallowed failures
- ResponseUrlResponder async front
"""

from unittest.mock import MagicMock

import pytest

from integrations.slack.responses import (
    ResponseUrlResponder,
    SlackResponse,
    post_to_response_url,
)

RESPONSE_URL = "https://hooks.slack.com/commands/T1/1/abc"


def _client_factory(status_code=200, body="ok", error=None):
    client = MagicMock()
    if error is not None:
        client.send_dict.side_effect = error
    else:
        client.send_dict.return_value = MagicMock(status_code=status_code, body=body)
    factory = MagicMock(return_value=client)
    return factory, client


@pytest.mark.unit
class TestSlackResponse:
    def test_ephemeral_payload_omits_blocks(self):
        assert SlackResponse.ephemeral("hi").to_payload() == {
            "response_type": "ephemeral",
            "text": "hi",
        }

    def test_in_channel_payload_omits_text(self):
        blocks = [{"type": "section", "text": {"type": "mrkdwn", "text": "x"}}]

        assert SlackResponse.in_channel(blocks).to_payload() == {
            "response_type": "in_channel",
            "blocks": blocks,
        }

    def test_invalid_response_type_rejected(self):
        with pytest.raises(ValueError):
            SlackResponse(response_type="broadcast", text="x")


@pytest.mark.unit
class TestPostToResponseUrl:
    def test_success(self):
        factory, client = _client_factory(status_code=200)
        payload = {"response_type": "ephemeral", "text": "done"}

        assert post_to_response_url(RESPONSE_URL, payload, factory) is True
        factory.assert_called_once_with(RESPONSE_URL)
        client.send_dict.assert_called_once_with(payload)

    def test_non_2xx_is_swallowed(self):
        factory, _ = _client_factory(status_code=404, body="expired_url")

        assert post_to_response_url(RESPONSE_URL, {"text": "x"}, factory) is False

    def test_transport_error_is_swallowed(self):
        factory, _ = _client_factory(error=ConnectionError("refused"))

        assert post_to_response_url(RESPONSE_URL, {"text": "x"}, factory) is False


@pytest.mark.unit
class TestResponseUrlResponder:
    @pytest.mark.asyncio
    async def test_posts_in_worker_thread(self):
        factory, client = _client_factory(status_code=200)
        responder = ResponseUrlResponder(client_factory=factory)

        assert await responder(RESPONSE_URL, {"text": "x"}) is True
        client.send_dict.assert_called_once_with({"text": "x"})

    @pytest.mark.asyncio
    async def test_failure_returns_false(self):
        factory, _ = _client_factory(status_code=500)

        assert await ResponseUrlResponder(factory)(RESPONSE_URL, {"text": "x"}) is False
