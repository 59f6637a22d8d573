"""
Message templates for sponsorship notifications.

Each message kind has a plain-text template (used as the Slack notification
fallback) and an mrkdwn template (used in the header block). Both are
rendered from the same substitution mapping.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from src.core.errors import TemplateRenderError


class MessageKind(str, Enum):
    """Kinds of sponsorship notifications that can be sent."""

    CREATED = "created"
    CANCELLED = "cancelled"
    UPGRADED = "upgraded"
    DOWNGRADED = "downgraded"


@dataclass(frozen=True)
class MessageTemplate:
    """A template string with `{name}` or `{0}` placeholders."""

    text: str

    def render(self, *args: Any, **kwargs: Any) -> str:
        """
        Substitute placeholders by position or by name.

        Raises:
            TemplateRenderError: If a placeholder has no matching value.
        """
        try:
            return self.text.format(*args, **kwargs)
        except KeyError as e:
            raise TemplateRenderError(f"Missing value for placeholder {e} in template {self.text!r}") from e
        except IndexError as e:
            raise TemplateRenderError(f"Missing positional value in template {self.text!r}") from e


@dataclass(frozen=True)
class TemplateSet:
    """Plain-text and mrkdwn variants of one message kind."""

    text: MessageTemplate
    mrkdwn: MessageTemplate

    def render(self, mapping: Mapping[str, Any]) -> tuple[str, str]:
        """Render both variants from one mapping; returns (text, mrkdwn)."""
        return self.text.render(**mapping), self.mrkdwn.render(**mapping)


TEXT_TEMPLATES: dict[MessageKind, MessageTemplate] = {
    MessageKind.CREATED: MessageTemplate("{sponsor} is a new sponsor of {sponsored}!"),
    MessageKind.CANCELLED: MessageTemplate("{sponsor} is no longer a sponsor of {sponsored}..."),
    MessageKind.UPGRADED: MessageTemplate("{sponsor} upgraded their sponsorship of {sponsored}!"),
    MessageKind.DOWNGRADED: MessageTemplate("{sponsor} downgraded their sponsorship of {sponsored}..."),
}

MRKDWN_TEMPLATES: dict[MessageKind, MessageTemplate] = {
    MessageKind.CREATED: MessageTemplate("{emoji} *{sponsor}* is a new sponsor of *{sponsored}*!"),
    MessageKind.CANCELLED: MessageTemplate("{emoji} *{sponsor}* is no longer a sponsor of *{sponsored}*..."),
    MessageKind.UPGRADED: MessageTemplate("{emoji} *{sponsor}* upgraded their sponsorship of *{sponsored}*!"),
    MessageKind.DOWNGRADED: MessageTemplate("{emoji} *{sponsor}* downgraded their sponsorship of *{sponsored}*..."),
}

MESSAGE_TEMPLATES: dict[MessageKind, TemplateSet] = {
    kind: TemplateSet(text=TEXT_TEMPLATES[kind], mrkdwn=MRKDWN_TEMPLATES[kind]) for kind in MessageKind
}
