import httpx
import structlog

from src.core.errors import SlackDeliveryError
from src.core.utils.logging import log_operation
from src.integrations.slack.schemas import SlackMessage

logger = structlog.get_logger()


class SlackWebhookClient:
    """
    Posts messages to a Slack incoming webhook.

    Each send opens its own short-lived HTTP client; there is no retry, the
    caller decides what a failed delivery means.
    """

    def __init__(self, webhook_url: str, timeout: float | None = None):
        self.webhook_url = webhook_url
        self.timeout = httpx.Timeout(timeout) if timeout is not None else httpx.Timeout(5.0)

    async def send(self, message: SlackMessage) -> None:
        """
        Deliver a composed message.

        Raises:
            SlackDeliveryError: On network failure or a non-2xx response.
        """
        async with log_operation("slack_delivery", blocks=len(message.blocks)):
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                try:
                    response = await client.post(self.webhook_url, json=message.model_dump())
                    response.raise_for_status()
                except httpx.HTTPStatusError as e:
                    logger.error(
                        "slack_webhook_rejected",
                        status=e.response.status_code,
                        response_body=e.response.text,
                    )
                    raise SlackDeliveryError(
                        f"Slack webhook returned {e.response.status_code}",
                        status_code=e.response.status_code,
                        response_body=e.response.text,
                    ) from e
                except httpx.HTTPError as e:
                    logger.error("slack_webhook_unreachable", error=str(e))
                    raise SlackDeliveryError(f"Slack webhook request failed: {e}") from e

        logger.info("slack_message_sent", text=message.text)
