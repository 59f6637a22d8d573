from collections.abc import Callable
from typing import Any

import structlog

from src.core.context import RelayContext
from src.core.models import EventType, WebhookResponse
from src.event_processors.base import BaseEventProcessor
from src.integrations.slack import SlackMessage, SlackWebhookClient
from src.presentation.slack_formatter import (
    changed_sponsor_section,
    compose_message,
    sponsor_section,
    struck_sponsor_section,
)
from src.presentation.templates import MESSAGE_TEMPLATES, MessageKind
from src.webhooks.models import (
    SponsorshipCancelled,
    SponsorshipCreated,
    SponsorshipEvent,
    SponsorshipTierChanged,
)

logger = structlog.get_logger()

CELEBRATE_EMOJI = ":tada:"
SAD_EMOJI = ":cry:"


def is_upgrade(event: SponsorshipTierChanged) -> bool:
    """A tier change is an upgrade only if the new monthly price is strictly higher."""
    previous_price = event.changes.tier.previous.monthly_price_in_dollars
    current_price = event.sponsorship.tier.monthly_price_in_dollars
    return current_price > previous_price


class SponsorshipProcessor(BaseEventProcessor[SponsorshipEvent]):
    """
    Turns a decoded sponsorship event into a Slack message and delivers it.

    Only created, cancelled and tier_changed produce a message; every other
    action is acknowledged without contacting Slack.
    """

    def __init__(self, slack_client: SlackWebhookClient, username: str | None = None, icon_url: str | None = None):
        self.slack_client = slack_client
        self.username = username
        self.icon_url = icon_url

    @classmethod
    def from_context(cls, context: RelayContext) -> "SponsorshipProcessor":
        client = SlackWebhookClient(context.slack_webhook_url, timeout=context.slack_timeout_seconds)
        return cls(client, username=context.slack_username, icon_url=context.slack_icon_url)

    def get_event_type(self) -> EventType:
        return EventType.SPONSORSHIP

    def select(self, event: SponsorshipEvent) -> tuple[MessageKind, str, Callable[[Any], dict[str, Any]]] | None:
        """Pick the message kind, emoji and content builder for an event."""
        if isinstance(event, SponsorshipCreated):
            return MessageKind.CREATED, CELEBRATE_EMOJI, lambda e: sponsor_section(e.sponsorship)
        if isinstance(event, SponsorshipCancelled):
            return MessageKind.CANCELLED, SAD_EMOJI, lambda e: struck_sponsor_section(e.sponsorship)
        if isinstance(event, SponsorshipTierChanged):
            if is_upgrade(event):
                return MessageKind.UPGRADED, CELEBRATE_EMOJI, changed_sponsor_section
            return MessageKind.DOWNGRADED, SAD_EMOJI, changed_sponsor_section
        return None

    def build_message(self, event: SponsorshipEvent) -> SlackMessage | None:
        """Render the Slack message for an event, or None if the action is not announced."""
        selection = self.select(event)
        if selection is None:
            return None

        kind, emoji, build_content = selection
        mapping = {
            "sponsor": event.sponsorship.sponsor.login,
            "sponsored": event.sponsorship.sponsorable.login,
            "emoji": emoji,
        }
        text, header = MESSAGE_TEMPLATES[kind].render(mapping)
        return compose_message(
            text,
            header,
            build_content(event),
            username=self.username,
            icon_url=self.icon_url,
        )

    async def process(self, event: SponsorshipEvent) -> WebhookResponse:
        log = logger.bind(
            action=event.action,
            sponsor=event.sponsorship.sponsor.login,
            sponsored=event.sponsorship.sponsorable.login,
        )

        message = self.build_message(event)
        if message is None:
            log.info("sponsorship_action_ignored")
            return WebhookResponse(
                status="ignored",
                detail=f"Sponsorship action '{event.action}' is not announced",
                event_type=EventType.SPONSORSHIP,
            )

        await self.slack_client.send(message)
        log.info("sponsorship_announced", text=message.text)
        return WebhookResponse(
            status="ok",
            detail=f"Sponsorship '{event.action}' relayed to Slack",
            event_type=EventType.SPONSORSHIP,
        )
