from src.integrations.slack.client import SlackWebhookClient
from src.integrations.slack.schemas import SlackMessage

__all__ = ["SlackMessage", "SlackWebhookClient"]
