import structlog
from fastapi import APIRouter, Depends, HTTPException, Request

from src.core.errors import SlackDeliveryError, SponsorshipDecodeError
from src.core.models import EventType, WebhookEvent, WebhookResponse
from src.webhooks.auth import verify_github_signature
from src.webhooks.dependencies import get_dispatcher
from src.webhooks.dispatcher import WebhookDispatcher

logger = structlog.get_logger()
router = APIRouter()


def _resolve_event_type(event_name: str | None) -> EventType:
    """Map the X-GitHub-Event header to a supported EventType."""
    if not event_name:
        raise HTTPException(status_code=400, detail="Missing X-GitHub-Event header")

    try:
        return EventType(event_name)
    except ValueError as e:
        logger.warning("webhook_event_unsupported", event_name=event_name)
        raise HTTPException(status_code=400, detail=f"Event type '{event_name}' is not supported.") from e


@router.post("/github", summary="Endpoint for GitHub sponsorship webhooks", response_model=WebhookResponse)
async def github_webhook_endpoint(
    request: Request,
    is_verified: bool = Depends(verify_github_signature),
    dispatcher_instance: WebhookDispatcher = Depends(get_dispatcher),
) -> WebhookResponse:
    """
    Receives sponsorship events from a GitHub webhook.

    - The signature dependency rejects the request before anything else runs.
    - The event header must name a sponsorship (or ping) event.
    - The event is dispatched and the Slack delivery awaited before replying.
    """
    event_type = _resolve_event_type(request.headers.get("X-GitHub-Event"))

    try:
        payload = await request.json()
    except ValueError as e:
        raise HTTPException(status_code=400, detail="Request body is not valid JSON.") from e
    if not isinstance(payload, dict):
        raise HTTPException(status_code=400, detail="Request body must be a JSON object.")

    event = WebhookEvent(event_type=event_type, payload=payload, delivery_id=request.headers.get("X-GitHub-Delivery"))
    logger.info(
        "webhook_validated",
        event_type=event_type.value,
        action=event.action,
        delivery_id=event.delivery_id,
        sender=event.sender_login,
    )

    try:
        return await dispatcher_instance.dispatch(event)
    except SponsorshipDecodeError as e:
        logger.warning("webhook_payload_invalid", action=e.action, errors=len(e.errors))
        raise HTTPException(status_code=400, detail="Invalid sponsorship payload.") from e
    except SlackDeliveryError as e:
        raise HTTPException(status_code=502, detail=f"Slack delivery failed: {e}") from e
