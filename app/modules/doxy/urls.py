"""Doxy.me room URL validation."""

from typing import Optional
from urllib.parse import urlsplit, urlunsplit

DEFAULT_ALLOWED_DOMAIN = "doxy.me"


def _unwrap_slack_link(text: str) -> str:
    # Slack may escape links in command text as <url> or <url|label>
    if text.startswith("<") and text.endswith(">"):
        return text[1:-1].split("|", 1)[0]
    return text


def normalize_room_url(
    text: Optional[str], allowed_domain: str = DEFAULT_ALLOWED_DOMAIN
) -> Optional[str]:
    """Turn user input into a canonical Doxy.me room URL.

    A scheme-less input is treated as ``https``. The host must be the
    allowed domain or one of its subdomains.

    Args:
        text: Raw command text, e.g. ``"doxy.me/alice"``.
        allowed_domain: Domain the room must live on.

    Returns:
        The canonical URL, e.g. ``"https://doxy.me/alice"``, or None when the
        input is not a valid room URL.

    Examples:
        >>> normalize_room_url("doxy.me/alice")
        'https://doxy.me/alice'
        >>> normalize_room_url("https://evil.com/alice") is None
        True
    """
    if not text:
        return None

    candidate = _unwrap_slack_link(text.strip())
    if not candidate or any(ch.isspace() for ch in candidate):
        return None

    lowered = candidate.lower()
    if not (lowered.startswith("http://") or lowered.startswith("https://")):
        candidate = f"https://{candidate}"

    parts = urlsplit(candidate)
    try:
        hostname = parts.hostname
        port = parts.port
    except ValueError:
        return None

    if parts.scheme not in ("http", "https") or not hostname:
        return None
    if parts.username is not None or parts.password is not None:
        return None

    domain = allowed_domain.lower()
    if hostname != domain and not hostname.endswith(f".{domain}"):
        return None

    netloc = hostname if port is None else f"{hostname}:{port}"
    return urlunsplit(
        (parts.scheme, netloc, parts.path or "/", parts.query, parts.fragment)
    )
