"""Slack Commands utilities functions"""

import re
from typing import Dict, List, Optional, Union
from urllib.parse import parse_qs

# Slack escapes mentions as <@U12345> or <@U12345|name>
USER_MENTION_REGEX = re.compile(r"<@([UW][A-Z0-9]+)(?:\|[^>]*)?>")


def parse_command_body(body: Union[bytes, str]) -> Dict[str, str]:
    """
    Parses a form-encoded slash command body into a flat dictionary.

    Blank values are kept (``text=`` is an empty command text, not a missing
    one). When a key repeats, the first value wins.

    Args:
        body (bytes | str): The raw ``application/x-www-form-urlencoded`` body.
    Returns:
        Dict[str, str]: The command parameters.
    """
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    parsed = parse_qs(body, keep_blank_values=True)
    return {key: values[0] for key, values in parsed.items()}


def extract_user_mentions(text: Optional[str]) -> List[str]:
    """
    Extracts mentioned Slack user ids from command text, in order of
    appearance and without duplicates.

    Args:
        text (str): The command text, e.g. ``"<@U123|alice> and <@U456>"``.
    Returns:
        List[str]: The user ids, e.g. ``["U123", "U456"]``.
    """
    if not text:
        return []
    seen: List[str] = []
    for user_id in USER_MENTION_REGEX.findall(text):
        if user_id not in seen:
            seen.append(user_id)
    return seen
