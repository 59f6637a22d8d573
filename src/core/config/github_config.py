"""
GitHub configuration.
"""

from dataclasses import dataclass


@dataclass
class GitHubConfig:
    """GitHub configuration."""

    webhook_secret: str
