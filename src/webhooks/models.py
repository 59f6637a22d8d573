from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from src.core.errors import SponsorshipDecodeError

SPONSORSHIP_ACTIONS = frozenset(
    {
        "created",
        "cancelled",
        "edited",
        "tier_changed",
        "pending_tier_change",
        "pending_cancellation",
    }
)


class WebhookSender(BaseModel):
    """GitHub webhook sender metadata."""

    login: str = Field(..., description="GitHub username of the event actor")
    id: int | None = Field(None, description="GitHub user ID")
    type: str | None = Field(None, description="Actor type: User, Organization, etc.")


class SponsorAccount(BaseModel):
    """The user or organization paying for the sponsorship."""

    login: str = Field(..., description="GitHub login of the sponsor")
    html_url: str = Field(..., description="Public profile URL")
    avatar_url: str = Field(..., description="Avatar image URL")


class SponsorableAccount(BaseModel):
    """The user or organization receiving the sponsorship."""

    login: str = Field(..., description="GitHub login of the sponsored account")
    html_url: str = Field(..., description="Public profile URL")


class SponsorshipTier(BaseModel):
    """A named sponsorship pricing level."""

    name: str = Field(..., description="Display name of the tier")
    monthly_price_in_dollars: int = Field(..., description="Monthly price in whole dollars")
    monthly_price_in_cents: int | None = Field(None, description="Monthly price in cents")
    description: str | None = Field(None, description="Tier description in markdown")
    is_one_time: bool = Field(default=False, description="Whether the tier is a one-time payment")


class Sponsorship(BaseModel):
    """Payload common to every sponsorship event variant."""

    sponsor: SponsorAccount
    sponsorable: SponsorableAccount
    tier: SponsorshipTier
    privacy_level: str | None = Field(None, description="public or private")
    created_at: str | None = Field(None, description="ISO-8601 creation timestamp")


class TierChange(BaseModel):
    """Previous tier of a sponsorship whose tier has changed."""

    model_config = ConfigDict(populate_by_name=True)

    previous: SponsorshipTier = Field(..., alias="from")


class TierChanges(BaseModel):
    tier: TierChange


class PrivacyLevelChange(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    previous: str = Field(..., alias="from")


class PrivacyLevelChanges(BaseModel):
    privacy_level: PrivacyLevelChange


class _SponsorshipEventBase(BaseModel):
    sponsorship: Sponsorship
    sender: WebhookSender | None = None


class SponsorshipCreated(_SponsorshipEventBase):
    action: Literal["created"]


class SponsorshipCancelled(_SponsorshipEventBase):
    action: Literal["cancelled"]


class SponsorshipEdited(_SponsorshipEventBase):
    action: Literal["edited"]
    changes: PrivacyLevelChanges


class SponsorshipTierChanged(_SponsorshipEventBase):
    action: Literal["tier_changed"]
    changes: TierChanges


class SponsorshipPendingTierChange(_SponsorshipEventBase):
    action: Literal["pending_tier_change"]
    changes: TierChanges
    effective_date: str


class SponsorshipPendingCancellation(_SponsorshipEventBase):
    action: Literal["pending_cancellation"]
    effective_date: str


SponsorshipEvent = Annotated[
    SponsorshipCreated
    | SponsorshipCancelled
    | SponsorshipEdited
    | SponsorshipTierChanged
    | SponsorshipPendingTierChange
    | SponsorshipPendingCancellation,
    Field(discriminator="action"),
]

_sponsorship_event_adapter: TypeAdapter[SponsorshipEvent] = TypeAdapter(SponsorshipEvent)


def decode_sponsorship_event(payload: dict[str, Any]) -> SponsorshipEvent | None:
    """
    Decode a raw sponsorship webhook body into its typed variant.

    Returns None for action tags outside the known set. Raises
    SponsorshipDecodeError when a known action carries the wrong shape.
    """
    action = payload.get("action")
    if not isinstance(action, str) or action not in SPONSORSHIP_ACTIONS:
        return None

    try:
        return _sponsorship_event_adapter.validate_python(payload)
    except ValidationError as e:
        raise SponsorshipDecodeError(action, e.errors(include_url=False)) from e
