"""
Main configuration class that composes all configs.
"""

import os

from dotenv import load_dotenv

from src.core.config.github_config import GitHubConfig
from src.core.config.logging_config import LoggingConfig
from src.core.config.slack_config import DEFAULT_ICON_URL, DEFAULT_USERNAME, SlackConfig

# Load environment variables from a .env file
load_dotenv()


class Config:
    """Main configuration class."""

    def __init__(self) -> None:
        self.github = GitHubConfig(
            webhook_secret=os.getenv("WEBHOOK_SECRET_GITHUB", ""),
        )

        timeout = os.getenv("SLACK_TIMEOUT_SECONDS")
        timeout_seconds = None
        self._invalid_timeout = None
        if timeout:
            try:
                timeout_seconds = float(timeout)
            except ValueError:
                self._invalid_timeout = timeout

        self.slack = SlackConfig(
            webhook_url=os.getenv("SLACK_WEBHOOK_URL", ""),
            username=os.getenv("SLACK_USERNAME", DEFAULT_USERNAME),
            icon_url=os.getenv("SLACK_ICON_URL", DEFAULT_ICON_URL),
            timeout_seconds=timeout_seconds,
        )

        self.logging = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO"),
            format=os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            file_path=os.getenv("LOG_FILE_PATH"),
        )

        # Deployment environment label, included in startup logs
        self.environment = os.getenv("ENVIRONMENT", "development")

    def validate(self) -> bool:
        """Validate configuration."""
        errors = []

        if not self.github.webhook_secret:
            errors.append("WEBHOOK_SECRET_GITHUB is required")

        if not self.slack.webhook_url:
            errors.append("SLACK_WEBHOOK_URL is required")

        if self._invalid_timeout is not None:
            errors.append(f"SLACK_TIMEOUT_SECONDS must be a number, got '{self._invalid_timeout}'")

        if self.slack.timeout_seconds is not None and self.slack.timeout_seconds <= 0:
            errors.append("SLACK_TIMEOUT_SECONDS must be positive")

        if errors:
            raise ValueError(f"Configuration errors: {', '.join(errors)}")

        return True


# Global config instance
config = Config()
