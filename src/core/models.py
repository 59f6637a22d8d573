from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class EventType(Enum):
    """Supported GitHub event types."""

    SPONSORSHIP = "sponsorship"
    PING = "ping"


class WebhookEvent:
    """
    A representation of an incoming webhook event, before its payload has
    been decoded into one of the typed sponsorship variants.
    """

    def __init__(self, event_type: EventType, payload: dict[str, Any], delivery_id: str | None = None):
        self.event_type = event_type
        self.payload = payload
        self.delivery_id = delivery_id
        sender = payload.get("sender")
        self.sender: dict[str, Any] = sender if isinstance(sender, dict) else {}

    @property
    def action(self) -> str | None:
        """The action tag of the event (e.g., 'created')."""
        return self.payload.get("action")

    @property
    def sender_login(self) -> str:
        """The GitHub username of the user who triggered the event."""
        login = self.sender.get("login")
        return login if isinstance(login, str) else ""


class WebhookResponse(BaseModel):
    """Standardized response model for all webhook handlers."""

    status: str = Field(..., description="Processing status: ok, ignored, error")
    detail: str | None = Field(None, description="Additional context or error message")
    event_type: EventType | None = Field(None, description="Normalized GitHub event type")
