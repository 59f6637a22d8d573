from abc import ABC, abstractmethod

from src.core.models import WebhookEvent, WebhookResponse


class EventHandler(ABC):
    """
    Abstract base class for webhook event handlers.

    Handlers stay thin and delegate rendering and delivery to event_processors.
    """

    @abstractmethod
    async def handle(self, event: WebhookEvent) -> WebhookResponse:
        """
        Process a verified webhook event.

        Raises whatever the processor raises; the dispatcher logs and re-raises it.
        """
        pass
