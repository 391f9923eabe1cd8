"""Slack User Modules.

This module contains the user related functionality for the Slack integration.
"""

from slack_sdk import WebClient

from infrastructure.logging import get_module_logger

DEFAULT_DISPLAY_NAME = "Someone"

logger = get_module_logger()


def get_display_name(
    client: WebClient, user_id: str, default: str = DEFAULT_DISPLAY_NAME
) -> str:
    """Return the name a user shows in Slack.

    Prefers the profile's ``display_name``, then ``real_name``. Any lookup
    failure is logged and ``default`` is returned; a missing name never
    blocks sending an invite.

    Args:
        client (WebClient): The Slack client instance.
        user_id (str): The Slack user id.
        default (str, optional): Fallback name. Defaults to "Someone".

    Returns:
        str: The display name or the default.
    """
    try:
        info = client.users_info(user=user_id)
    except Exception as e:
        logger.warning("user_info_lookup_failed", slack_user_id=user_id, error=str(e))
        return default

    if not info.get("ok"):
        logger.warning(
            "user_info_lookup_failed", slack_user_id=user_id, error=info.get("error")
        )
        return default

    user = info.get("user") or {}
    profile = user.get("profile") or {}
    return profile.get("display_name") or profile.get("real_name") or default
