from typing import Any

from pydantic import BaseModel, Field

from src.core.config.slack_config import DEFAULT_ICON_URL, DEFAULT_USERNAME


class SlackMessage(BaseModel):
    """Body posted to a Slack incoming webhook."""

    username: str = DEFAULT_USERNAME
    icon_url: str = DEFAULT_ICON_URL
    text: str = Field(..., description="Plain-text fallback shown in notifications")
    blocks: list[dict[str, Any]] = Field(default_factory=list, description="Block Kit layout blocks")
