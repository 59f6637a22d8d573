"""
Core error classes for the sponsors relay.
"""

from typing import Any


class SponsorshipDecodeError(Exception):
    """Raised when a sponsorship payload does not match the shape of its action."""

    def __init__(self, action: str, errors: list[dict[str, Any]]) -> None:
        self.action = action
        self.errors = errors
        super().__init__(f"Invalid '{action}' sponsorship payload: {errors}")


class TemplateRenderError(Exception):
    """Raised when a message template references a placeholder that was not supplied."""

    pass


class SlackDeliveryError(Exception):
    """Raised when the Slack incoming webhook cannot be reached or rejects a message."""

    def __init__(self, message: str, status_code: int | None = None, response_body: str | None = None) -> None:
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(message)
