"""
Relay context shared by the inbound adapter and the sponsorship processor.

Built once by the application entry point and passed by reference; nothing
else reads configuration directly at request time.
"""

from dataclasses import dataclass

from src.core.config import Config
from src.core.config.slack_config import DEFAULT_ICON_URL, DEFAULT_USERNAME


@dataclass(frozen=True)
class RelayContext:
    """Immutable startup configuration for one relay process."""

    slack_webhook_url: str
    github_secret: str
    slack_username: str = DEFAULT_USERNAME
    slack_icon_url: str = DEFAULT_ICON_URL
    slack_timeout_seconds: float | None = None

    @classmethod
    def from_config(cls, config: Config) -> "RelayContext":
        """Validate the loaded configuration and build a context from it."""
        config.validate()
        return cls(
            slack_webhook_url=config.slack.webhook_url,
            github_secret=config.github.webhook_secret,
            slack_username=config.slack.username,
            slack_icon_url=config.slack.icon_url,
            slack_timeout_seconds=config.slack.timeout_seconds,
        )
