from src.event_processors.base import BaseEventProcessor
from src.event_processors.sponsorship import SponsorshipProcessor

__all__ = ["BaseEventProcessor", "SponsorshipProcessor"]
