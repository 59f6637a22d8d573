"""
Slack incoming-webhook configuration.
"""

from dataclasses import dataclass

DEFAULT_USERNAME = "GitHub Sponsor"
DEFAULT_ICON_URL = "https://github.githubassets.com/images/modules/site/sponsors/logo-mona.svg"


@dataclass
class SlackConfig:
    """Slack configuration."""

    webhook_url: str
    username: str = DEFAULT_USERNAME
    icon_url: str = DEFAULT_ICON_URL
    timeout_seconds: float | None = None
