from typing import Any

from src.integrations.slack.schemas import SlackMessage
from src.webhooks.models import Sponsorship, SponsorshipTierChanged

ATTRIBUTION_TEXT = "Relayed by *sponsors-relay* from GitHub Sponsors"

_MRKDWN_ESCAPES = {"&": "&amp;", "<": "&lt;", ">": "&gt;"}


def escape_mrkdwn(value: str) -> str:
    """Escape the control characters Slack reserves in mrkdwn text."""
    return "".join(_MRKDWN_ESCAPES.get(char, char) for char in value)


def _sponsor_line(sponsorship: Sponsorship) -> str:
    sponsor = sponsorship.sponsor
    sponsorable = sponsorship.sponsorable
    return (
        f"*<{sponsor.html_url}|{sponsor.login}>* is *{escape_mrkdwn(sponsorship.tier.name)}*"
        f" (${sponsorship.tier.monthly_price_in_dollars}.00/month) sponsor"
        f" of *<{sponsorable.html_url}|{sponsorable.login}>*"
    )


def _strike(line: str) -> str:
    return f"~{line}~"


def _section_with_avatar(markdown: str, sponsorship: Sponsorship) -> dict[str, Any]:
    return {
        "type": "section",
        "text": {"type": "mrkdwn", "text": markdown},
        "accessory": {
            "type": "image",
            "image_url": sponsorship.sponsor.avatar_url,
            "alt_text": sponsorship.sponsor.login,
        },
    }


def sponsor_section(sponsorship: Sponsorship) -> dict[str, Any]:
    """Section naming sponsor, tier and sponsored account, with the sponsor avatar."""
    return _section_with_avatar(_sponsor_line(sponsorship), sponsorship)


def struck_sponsor_section(sponsorship: Sponsorship) -> dict[str, Any]:
    """Same as sponsor_section, struck through to mark a superseded sponsorship."""
    return _section_with_avatar(_strike(_sponsor_line(sponsorship)), sponsorship)


def changed_sponsor_section(event: SponsorshipTierChanged) -> dict[str, Any]:
    """
    Two-line section for a tier change.

    The first line is the sponsorship at its previous tier, struck through;
    the second is the sponsorship at its current tier.
    """
    current = event.sponsorship
    previous = current.model_copy(update={"tier": event.changes.tier.previous})
    markdown = f"{_strike(_sponsor_line(previous))}\n{_sponsor_line(current)}"
    return _section_with_avatar(markdown, current)


def header_section(markdown: str) -> dict[str, Any]:
    return {"type": "section", "text": {"type": "mrkdwn", "text": markdown}}


def divider() -> dict[str, Any]:
    return {"type": "divider"}


def attribution_context() -> dict[str, Any]:
    """Footer identifying the relay; closes every message."""
    return {"type": "context", "elements": [{"type": "mrkdwn", "text": ATTRIBUTION_TEXT}]}


def compose_message(
    text: str,
    header: str,
    content: dict[str, Any],
    username: str | None = None,
    icon_url: str | None = None,
) -> SlackMessage:
    """Assemble header, divider, content and attribution into a SlackMessage."""
    sender: dict[str, str] = {}
    if username:
        sender["username"] = username
    if icon_url:
        sender["icon_url"] = icon_url

    return SlackMessage(
        text=text,
        blocks=[header_section(header), divider(), content, attribution_context()],
        **sender,
    )
