"""Unit tests for modules.gateway.dispatcher module.

Tests cover:
- Unauthenticated answers (health check, url_verification)
- 401 on bad signatures for JSON and form deliveries
- Acknowledgement before any handler work, with deferred tasks
- Deferred delivery of command results to response_url
- Failures in background tasks never propagating
"""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from integrations.slack.responses import SlackResponse
from modules.gateway import InboundRequest, SlackGateway

JSON = {"content-type": "application/json"}
FORM = {"content-type": "application/x-www-form-urlencoded"}


@pytest.fixture
def verifier():
    verifier = MagicMock()
    verifier.is_valid_request.return_value = True
    return verifier


@pytest.fixture
def commands():
    commands = MagicMock()
    commands.handles.side_effect = lambda name: name in ("/doxy-setup", "/doxyme")
    commands.handle = AsyncMock(return_value=SlackResponse.ephemeral("done"))
    return commands


@pytest.fixture
def responder():
    return AsyncMock(return_value=True)


@pytest.fixture
def gateway(verifier, commands, responder):
    return SlackGateway(verifier, commands, responder, app_name="doxyme-slack-calling")


def _post(headers, body: bytes) -> InboundRequest:
    return InboundRequest.from_parts("POST", headers, body)


@pytest.mark.unit
class TestUnauthenticatedAnswers:
    def test_health_check(self, gateway, verifier):
        result = gateway.handle(InboundRequest.from_parts("GET", {}, b""))

        assert result.status_code == 200
        assert result.body == {"ok": True, "app": "doxyme-slack-calling"}
        assert result.tasks == []
        verifier.is_valid_request.assert_not_called()

    def test_url_verification_skips_signature(self, gateway, verifier):
        verifier.is_valid_request.return_value = False
        body = json.dumps({"type": "url_verification", "challenge": "3eZbrw1a"})

        result = gateway.handle(_post(JSON, body.encode()))

        assert result.status_code == 200
        assert result.body == {"challenge": "3eZbrw1a"}
        verifier.is_valid_request.assert_not_called()


@pytest.mark.unit
class TestAuthentication:
    @pytest.mark.parametrize(
        "headers, body",
        [
            (JSON, b'{"type": "event_callback", "event": {}}'),
            (JSON, b"{malformed"),
            (FORM, b"command=%2Fdoxyme&text="),
            (FORM, b"anything=else"),
        ],
    )
    def test_bad_signature_is_401(self, gateway, verifier, commands, headers, body):
        verifier.is_valid_request.return_value = False

        result = gateway.handle(_post(headers, body))

        assert result.status_code == 401
        assert result.body == {"error": "Invalid signature"}
        assert result.tasks == []
        commands.handle.assert_not_called()

    def test_verifies_the_raw_body(self, gateway, verifier):
        body = b"command=%2Fdoxyme&text=%3C%40U2%3E"
        headers = {**FORM, "X-Slack-Signature": "v0=abc"}

        gateway.handle(_post(headers, body))

        verified_body, verified_headers = verifier.is_valid_request.call_args.args
        assert verified_body == body
        assert verified_headers["x-slack-signature"] == "v0=abc"


@pytest.mark.unit
class TestCommands:
    @pytest.mark.asyncio
    async def test_known_command_acknowledged_then_delivered(
        self, gateway, commands, responder
    ):
        body = (
            b"command=%2Fdoxyme&text=&user_id=U1&trigger_id=T.1"
            b"&response_url=https%3A%2F%2Fhooks.slack.com%2Fcommands%2FX"
        )

        result = gateway.handle(_post(FORM, body))

        assert result.status_code == 200
        assert result.body == {"response_type": "ephemeral", "text": "⏳ Working..."}
        commands.handle.assert_not_called()
        assert len(result.tasks) == 1

        await result.run_tasks()

        command = commands.handle.call_args.args[0]
        assert command["command"] == "/doxyme"
        assert command["user_id"] == "U1"
        responder.assert_awaited_once_with(
            "https://hooks.slack.com/commands/X",
            {"response_type": "ephemeral", "text": "done"},
        )

    def test_unknown_command_is_acknowledged_without_work(self, gateway):
        result = gateway.handle(_post(FORM, b"command=%2Fweather&text="))

        assert result.status_code == 200
        assert result.body == {"ok": True}
        assert result.tasks == []

    def test_form_without_command(self, gateway):
        result = gateway.handle(_post(FORM, b"payload=%7B%7D"))

        assert result.body == {"ok": True}
        assert result.tasks == []

    @pytest.mark.asyncio
    async def test_missing_response_url_is_skipped(self, gateway, responder):
        result = gateway.handle(_post(FORM, b"command=%2Fdoxyme&text="))

        await result.run_tasks()

        responder.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_handler_crash_delivers_generic_error(
        self, gateway, commands, responder
    ):
        commands.handle.side_effect = RuntimeError("boom")
        body = b"command=%2Fdoxyme&text=&response_url=https%3A%2F%2Fhooks.example%2F1"

        result = gateway.handle(_post(FORM, body))
        await result.run_tasks()

        responder.assert_awaited_once_with(
            "https://hooks.example/1",
            {
                "response_type": "ephemeral",
                "text": "Something went wrong. Please try again.",
            },
        )

    @pytest.mark.asyncio
    async def test_responder_crash_is_swallowed(self, gateway, responder):
        responder.side_effect = ConnectionError("refused")
        body = b"command=%2Fdoxyme&text=&response_url=https%3A%2F%2Fhooks.example%2F1"

        result = gateway.handle(_post(FORM, body))

        await result.run_tasks()


@pytest.mark.unit
class TestEvents:
    @pytest.mark.asyncio
    async def test_event_callback_acknowledged_and_processed(self, gateway):
        envelope = {
            "type": "event_callback",
            "event_id": "Ev1",
            "event": {"type": "call_started", "user": "U1"},
        }

        result = gateway.handle(_post(JSON, json.dumps(envelope).encode()))

        assert result.status_code == 200
        assert result.body == {"ok": True}
        assert len(result.tasks) == 1
        await result.run_tasks()

    def test_other_json_is_acknowledged(self, gateway):
        result = gateway.handle(_post(JSON, b'{"type": "app_rate_limited"}'))

        assert result.status_code == 200
        assert result.body == {"ok": True}
        assert result.tasks == []

    def test_malformed_json_with_valid_signature_is_acknowledged(self, gateway):
        result = gateway.handle(_post(JSON, b"{malformed"))

        assert result.status_code == 200
        assert result.body == {"ok": True}

    @pytest.mark.asyncio
    async def test_event_processing_errors_are_swallowed(self, gateway, monkeypatch):
        def explode(envelope):
            raise RuntimeError("bad event")

        monkeypatch.setattr("modules.gateway.dispatcher.log_lifecycle_event", explode)
        body = json.dumps({"type": "event_callback", "event": {}}).encode()

        result = gateway.handle(_post(JSON, body))

        await result.run_tasks()
