from unittest.mock import AsyncMock

import pytest

from src.core.context import RelayContext
from src.core.models import EventType, WebhookEvent, WebhookResponse
from src.main import build_dispatcher
from src.webhooks.dispatcher import WebhookDispatcher
from src.webhooks.handlers.base import EventHandler
from src.webhooks.handlers.ping import PingEventHandler
from src.webhooks.handlers.sponsorship import SponsorshipEventHandler


@pytest.fixture
def handler() -> AsyncMock:
    mock_handler = AsyncMock(spec=EventHandler)
    mock_handler.handle.return_value = WebhookResponse(status="ok", event_type=EventType.SPONSORSHIP)
    return mock_handler


class TestWebhookDispatcher:
    @pytest.mark.asyncio
    async def test_routes_to_registered_handler(self, handler: AsyncMock) -> None:
        dispatcher = WebhookDispatcher()
        dispatcher.register_handler(EventType.SPONSORSHIP, handler)
        event = WebhookEvent(EventType.SPONSORSHIP, {"action": "created"})

        result = await dispatcher.dispatch(event)

        assert result.status == "ok"
        handler.handle.assert_awaited_once_with(event)

    @pytest.mark.asyncio
    async def test_missing_handler_is_skipped(self) -> None:
        result = await WebhookDispatcher().dispatch(WebhookEvent(EventType.PING, {}))

        assert result.status == "skipped"
        assert result.event_type == EventType.PING

    @pytest.mark.asyncio
    async def test_handler_errors_propagate(self, handler: AsyncMock) -> None:
        handler.handle.side_effect = RuntimeError("slack is down")
        dispatcher = WebhookDispatcher()
        dispatcher.register_handler(EventType.SPONSORSHIP, handler)

        with pytest.raises(RuntimeError, match="slack is down"):
            await dispatcher.dispatch(WebhookEvent(EventType.SPONSORSHIP, {"action": "created"}))

    @pytest.mark.asyncio
    async def test_later_registration_overrides(self, handler: AsyncMock) -> None:
        dispatcher = WebhookDispatcher()
        dispatcher.register_handler(EventType.PING, PingEventHandler())
        dispatcher.register_handler(EventType.PING, handler)

        await dispatcher.dispatch(WebhookEvent(EventType.PING, {}))

        handler.handle.assert_awaited_once()


class TestWebhookEvent:
    def test_properties(self) -> None:
        event = WebhookEvent(
            EventType.SPONSORSHIP, {"action": "cancelled", "sender": {"login": "octocat"}}, delivery_id="abc"
        )

        assert event.action == "cancelled"
        assert event.sender_login == "octocat"
        assert event.delivery_id == "abc"

    def test_missing_fields_default(self) -> None:
        event = WebhookEvent(EventType.PING, {})

        assert event.action is None
        assert event.sender_login == ""

    @pytest.mark.parametrize("sender", [None, "alice", ["alice"], {"id": 1}, {"login": None}])
    def test_unusable_sender_has_empty_login(self, sender: object) -> None:
        event = WebhookEvent(EventType.SPONSORSHIP, {"action": "created", "sender": sender})

        assert event.sender_login == ""


class TestBuildDispatcher:
    def test_registers_sponsorship_processor_and_ping(self, relay_context: RelayContext) -> None:
        dispatcher = build_dispatcher(relay_context)

        sponsorship_handler = dispatcher._handlers[EventType.SPONSORSHIP]
        assert isinstance(sponsorship_handler, SponsorshipEventHandler)
        assert sponsorship_handler.processor.get_event_type() == EventType.SPONSORSHIP
        assert sponsorship_handler.processor.slack_client.webhook_url == relay_context.slack_webhook_url
        assert isinstance(dispatcher._handlers[EventType.PING], PingEventHandler)


class TestEventHandlers:
    @pytest.mark.asyncio
    async def test_ping_answers_pong(self) -> None:
        result = await PingEventHandler().handle(WebhookEvent(EventType.PING, {"zen": "Design for failure."}))

        assert result.status == "ok"
        assert result.detail == "pong"
        assert result.event_type == EventType.PING
