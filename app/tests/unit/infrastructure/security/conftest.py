"""Fixtures for Slack signature verification tests."""

import pytest

from infrastructure.security import SlackRequestVerifier

NOW = 1_700_000_000


class FixedClock:
    """Clock stand-in returning a settable time."""

    def __init__(self, now: int = NOW):
        self.current = now

    def now(self) -> float:
        return self.current


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def verifier(signing_secret, clock) -> SlackRequestVerifier:
    return SlackRequestVerifier(signing_secret, clock=clock)


@pytest.fixture
def signed(verifier):
    """Return ``(timestamp, signature)`` for a body signed at ``timestamp``."""

    def _signed(body: bytes, timestamp: int = NOW):
        ts = str(timestamp)
        return ts, verifier.generate_signature(ts, body)

    return _signed
