"""
Sponsorship webhook bodies shaped like the ones GitHub sends.
"""

import copy
from typing import Any

SLACK_WEBHOOK_URL = "https://hooks.slack.test/services/T000/B000/XXXX"
GITHUB_SECRET = "It's a Secret to Everybody"

_SPONSORSHIP: dict[str, Any] = {
    "node_id": "MDE4OlNwb25zb3JzaGlwMQ==",
    "created_at": "2019-12-20T19:24:46+00:00",
    "privacy_level": "public",
    "sponsorable": {"login": "bob", "html_url": "https://github.com/bob"},
    "sponsor": {
        "login": "alice",
        "html_url": "https://github.com/alice",
        "avatar_url": "https://x/a.png",
    },
    "tier": {
        "node_id": "MDEyOlNwb25zb3JzVGllcjE=",
        "name": "Gold",
        "description": "The gold tier",
        "monthly_price_in_cents": 1000,
        "monthly_price_in_dollars": 10,
    },
}

_SENDER: dict[str, Any] = {"login": "alice", "id": 1, "type": "User"}


def make_tier(name: str, dollars: int) -> dict[str, Any]:
    return {"name": name, "monthly_price_in_dollars": dollars, "monthly_price_in_cents": dollars * 100}


def make_payload(action: str, **extra: Any) -> dict[str, Any]:
    """Build a sponsorship webhook body for the given action."""
    payload: dict[str, Any] = {
        "action": action,
        "sponsorship": copy.deepcopy(_SPONSORSHIP),
        "sender": dict(_SENDER),
    }
    payload.update(extra)
    return payload


def make_tier_changed_payload(previous_dollars: int, current_dollars: int) -> dict[str, Any]:
    payload = make_payload(
        "tier_changed",
        changes={"tier": {"from": make_tier(f"${previous_dollars} a month", previous_dollars)}},
    )
    payload["sponsorship"]["tier"] = make_tier(f"${current_dollars} a month", current_dollars)
    return payload
