"""Slack request signature verification.

Slack signs every delivery with ``X-Slack-Signature: v0=<hex>``, an
HMAC-SHA256 keyed by the app's signing secret over
``v0:{X-Slack-Request-Timestamp}:{raw body}``. The computation and the
constant-time comparison come from ``slack_sdk.signature``; this module adds
the input guards that keep malformed headers from raising, and logs why a
request was rejected.
"""

from typing import Mapping, Optional, Union

from slack_sdk.signature import Clock, SignatureVerifier

from infrastructure.logging import get_module_logger

logger = get_module_logger()

# A skew of exactly this many seconds is still accepted, in either direction
REPLAY_WINDOW_SECONDS = 300

TIMESTAMP_HEADER = "x-slack-request-timestamp"
SIGNATURE_HEADER = "x-slack-signature"


class SlackRequestVerifier:
    """Decides whether a raw request body was signed by Slack and is fresh.

    ``is_valid`` returns a boolean for every input; it never raises on
    malformed headers or bodies.

    Args:
        signing_secret: The Slack app's signing secret.
        clock: Time source, injectable for tests.

    Example:
        verifier = SlackRequestVerifier(settings.slack.SIGNING_SECRET)
        if not verifier.is_valid_request(raw_body, request.headers):
            return JSONResponse({"error": "Invalid signature"}, status_code=401)
    """

    def __init__(self, signing_secret: str, clock: Optional[Clock] = None):
        self._clock = clock or Clock()
        self._verifier = SignatureVerifier(
            signing_secret=signing_secret, clock=self._clock
        )

    def generate_signature(self, timestamp: str, body: Union[bytes, str]) -> str:
        """Compute the ``v0=`` signature Slack would send for this body."""
        signature = self._verifier.generate_signature(timestamp=timestamp, body=body)
        if signature is None:
            raise ValueError("timestamp is required")
        return signature

    def is_valid(
        self,
        body: Union[bytes, str],
        timestamp: Optional[str],
        signature: Optional[str],
    ) -> bool:
        """Verify a signature against the exact bytes received.

        Args:
            body: Raw request body, before any parsing.
            timestamp: Value of ``X-Slack-Request-Timestamp``.
            signature: Value of ``X-Slack-Signature``.

        Returns:
            True only if both headers are present, the timestamp is within
            ``REPLAY_WINDOW_SECONDS`` of now and the signature matches.
        """
        if not timestamp or not signature:
            return self._reject("missing_headers")

        try:
            issued_at = int(timestamp)
        except ValueError:
            return self._reject("malformed_timestamp")

        skew = abs(self._clock.now() - issued_at)
        if skew > REPLAY_WINDOW_SECONDS:
            return self._reject("stale_timestamp", skew_seconds=int(skew))

        # compare_digest only accepts ASCII str
        if not signature.isascii():
            return self._reject("malformed_signature")

        if isinstance(body, bytes):
            try:
                body = body.decode("utf-8")
            except UnicodeDecodeError:
                return self._reject("undecodable_body")

        if not self._verifier.is_valid(
            body=body, timestamp=timestamp, signature=signature
        ):
            return self._reject("signature_mismatch")
        return True

    def is_valid_request(
        self, body: Union[bytes, str], headers: Mapping[str, str]
    ) -> bool:
        """Verify using the Slack headers, looked up case-insensitively."""
        normalized = {key.lower(): value for key, value in headers.items()}
        return self.is_valid(
            body=body,
            timestamp=normalized.get(TIMESTAMP_HEADER),
            signature=normalized.get(SIGNATURE_HEADER),
        )

    @staticmethod
    def _reject(reason: str, **context) -> bool:
        logger.warning("signature_rejected", reason=reason, **context)
        return False
