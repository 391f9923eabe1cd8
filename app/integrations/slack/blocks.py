"""Slack Block Kit builders for the messages this app sends."""

from typing import Dict, List, Optional


def create_section_block(text: str, text_type: str = "mrkdwn") -> Dict:
    """
    Create a section block with the given text.

    Args:
        text: The text content for the section
        text_type: The text type, either 'mrkdwn' or 'plain_text'

    Returns:
        Dict: A valid Slack section block
    """
    return {"type": "section", "text": {"type": text_type, "text": text}}


def create_link_button(text: str, url: str, style: Optional[str] = None) -> Dict:
    """
    Create a button element that opens ``url`` when clicked.

    Args:
        text: Plain-text button label (emoji allowed)
        url: The link to open
        style: Optional Block Kit style ('primary' or 'danger')

    Returns:
        Dict: A Slack button element
    """
    button = {
        "type": "button",
        "text": {"type": "plain_text", "text": text, "emoji": True},
        "url": url,
    }
    if style:
        button["style"] = style
    return button


def create_actions_block(elements: List[Dict]) -> Dict:
    """
    Create an actions block holding interactive elements.

    Args:
        elements: Buttons or other interactive elements

    Returns:
        Dict: A valid Slack actions block
    """
    return {"type": "actions", "elements": elements}
