"""
Configuration package - unified access point.

Exposes the composed Config, its section dataclasses and the global config
instance loaded from the environment.
"""

from src.core.config.github_config import GitHubConfig
from src.core.config.logging_config import LoggingConfig
from src.core.config.settings import Config, config
from src.core.config.slack_config import SlackConfig

__all__ = [
    "Config",
    "GitHubConfig",
    "LoggingConfig",
    "SlackConfig",
    "config",
]
