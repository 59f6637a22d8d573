import structlog

from src.core.models import EventType, WebhookEvent, WebhookResponse
from src.event_processors.sponsorship import SponsorshipProcessor
from src.webhooks.handlers.base import EventHandler
from src.webhooks.models import decode_sponsorship_event

logger = structlog.get_logger()


class SponsorshipEventHandler(EventHandler):
    """Thin handler for sponsorship webhook events—delegates to the sponsorship processor."""

    def __init__(self, processor: SponsorshipProcessor):
        self.processor = processor

    async def handle(self, event: WebhookEvent) -> WebhookResponse:
        """
        Decodes the payload into its typed variant and hands it to the processor.

        Raises:
            SponsorshipDecodeError: If a known action carries a malformed payload.
        """
        log = logger.bind(event_type="sponsorship", action=event.action, delivery_id=event.delivery_id)

        sponsorship_event = decode_sponsorship_event(event.payload)
        if sponsorship_event is None:
            log.info("sponsorship_action_unrecognized")
            return WebhookResponse(
                status="ignored",
                detail=f"Sponsorship action '{event.action}' is not recognized",
                event_type=EventType.SPONSORSHIP,
            )

        log.info("sponsorship_handler_invoked")
        return await self.processor.process(sponsorship_event)
