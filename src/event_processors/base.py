from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from src.core.models import EventType, WebhookResponse

EventT = TypeVar("EventT")


class BaseEventProcessor(ABC, Generic[EventT]):
    """
    Base class for event processors.

    A processor receives an already decoded, typed event and owns everything
    after decoding: rendering, delivery, and the WebhookResponse it reports.
    """

    @abstractmethod
    async def process(self, event: EventT) -> WebhookResponse:
        """Process a decoded event."""
        raise NotImplementedError("Subclasses must implement process")

    @abstractmethod
    def get_event_type(self) -> EventType:
        """Get the event type this processor handles."""
        raise NotImplementedError("Subclasses must implement get_event_type")
