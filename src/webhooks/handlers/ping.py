import structlog

from src.core.models import EventType, WebhookEvent, WebhookResponse
from src.webhooks.handlers.base import EventHandler

logger = structlog.get_logger()


class PingEventHandler(EventHandler):
    """Answers the ping GitHub sends when a webhook is first configured."""

    async def handle(self, event: WebhookEvent) -> WebhookResponse:
        logger.info("ping_received", hook_id=event.payload.get("hook_id"), zen=event.payload.get("zen"))
        return WebhookResponse(status="ok", detail="pong", event_type=EventType.PING)
