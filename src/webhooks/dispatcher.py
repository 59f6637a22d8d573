import structlog

from src.core.models import EventType, WebhookEvent, WebhookResponse
from src.webhooks.handlers.base import EventHandler

logger = structlog.get_logger()


class WebhookDispatcher:
    """
    Dispatches webhook events to registered EventHandler instances.
    """

    def __init__(self):
        # Maps an EventType to an instance of an EventHandler class
        self._handlers: dict[EventType, EventHandler] = {}

    def register_handler(self, event_type: EventType, handler: EventHandler):
        """
        Registers a handler instance for a specific event type.

        Args:
            event_type: The EventType to handle (e.g., EventType.SPONSORSHIP).
            handler: An instance of a class that implements the EventHandler interface.
        """
        if event_type in self._handlers:
            logger.warning("handler_overridden", event_type=event_type.value)
        self._handlers[event_type] = handler
        logger.info("handler_registered", event_type=event_type.value, handler=handler.__class__.__name__)

    async def dispatch(self, event: WebhookEvent) -> WebhookResponse:
        """
        Looks up and executes the .handle() method of the appropriate handler
        for the given event.

        Handler errors are logged and re-raised so the caller can report a
        failed delivery upstream.

        Args:
            event: The WebhookEvent to be dispatched.

        Returns:
            The WebhookResponse produced by the handler.
        """
        handler_instance = self._handlers.get(event.event_type)

        if not handler_instance:
            logger.warning("handler_missing", event_type=event.event_type.value)
            return WebhookResponse(
                status="skipped",
                detail=f"No handler for event type {event.event_type.name}",
                event_type=event.event_type,
            )

        handler_name = handler_instance.__class__.__name__
        logger.info("event_dispatched", event_type=event.event_type.value, handler=handler_name)
        try:
            return await handler_instance.handle(event)
        except Exception as e:
            logger.error("handler_failed", event_type=event.event_type.value, handler=handler_name, error=str(e))
            raise
