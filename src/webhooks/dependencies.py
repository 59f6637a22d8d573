from fastapi import HTTPException, Request, status

from src.core.context import RelayContext
from src.webhooks.dispatcher import WebhookDispatcher

# --- Relay Dependencies ---  # Both live on app.state; tests install their own.


def get_relay_context(request: Request) -> RelayContext:
    """Returns the RelayContext the application was started with."""
    context = getattr(request.app.state, "relay_context", None)
    if context is None:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Relay is not configured.")
    return context


def get_dispatcher(request: Request) -> WebhookDispatcher:
    """Returns the WebhookDispatcher registered for this application."""
    dispatcher = getattr(request.app.state, "dispatcher", None)
    if dispatcher is None:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Relay is not configured.")
    return dispatcher
