"""User-facing texts and Block Kit payloads for the Doxy.me commands."""

from typing import Dict, List, Sequence

from integrations.slack.blocks import (
    create_actions_block,
    create_link_button,
    create_section_block,
)

EXAMPLE_ROOM_URL = "https://doxy.me/yourroom"
JOIN_BUTTON_TEXT = "🔗 Join Doxy.me Call"

GENERIC_ERROR_TEXT = "Something went wrong. Please try again."
SAVE_FAILED_TEXT = "Something went wrong saving your URL. Please try again."
NO_INVITES_TEXT = "No invites sent."


def usage_text(setup_command: str) -> str:
    return (
        "Please provide a valid Doxy.me room URL.\n"
        f"Usage: `{setup_command} {EXAMPLE_ROOM_URL}`"
    )


def room_linked_text(room_url: str, invite_command: str) -> str:
    return (
        f"✅ Your Doxy.me room has been linked: {room_url}\n"
        f"Use `{invite_command} @someone` to invite people to your room."
    )


def room_not_linked_text(setup_command: str) -> str:
    return (
        "You haven't set up your Doxy.me room yet.\n"
        f"Run `{setup_command} {EXAMPLE_ROOM_URL}` first."
    )


def channel_call_blocks(caller_id: str, room_url: str) -> List[Dict]:
    """Blocks posted in the channel when the invite names nobody."""
    return [
        create_section_block(f"📹 *<@{caller_id}> is starting a Doxy.me call*"),
        create_actions_block(
            [create_link_button(JOIN_BUTTON_TEXT, room_url, style="primary")]
        ),
    ]


def invite_text(caller_name: str, room_url: str) -> str:
    """Plain-text fallback of the direct message invite."""
    return f"{caller_name} is inviting you to a Doxy.me call: {room_url}"


def invite_blocks(caller_name: str, room_url: str) -> List[Dict]:
    return [
        create_section_block(
            f"📹 *{caller_name}* is inviting you to a Doxy.me call"
        ),
        create_actions_block(
            [create_link_button(JOIN_BUTTON_TEXT, room_url, style="primary")]
        ),
    ]


def invite_summary_text(sent: Sequence[str], failed: Sequence[str]) -> str:
    """Summarize a fan-out for the caller.

    Args:
        sent: User ids that received the invite.
        failed: User ids that could not be messaged.
    """
    if not sent and not failed:
        return NO_INVITES_TEXT

    lines = []
    if sent:
        mentions = ", ".join(f"<@{user_id}>" for user_id in sent)
        lines.append(f"✅ Doxy.me call invite sent to {mentions}")
    if failed:
        mentions = ", ".join(f"<@{user_id}>" for user_id in failed)
        lines.append(
            f"⚠️ Couldn't DM: {mentions} (they may need to add the Doxy.me app first)"
        )
    return "\n".join(lines)
