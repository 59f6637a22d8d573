"""
Pytest configuration: shared relay context and sponsorship payloads.
"""

from typing import Any

import pytest

from src.core.context import RelayContext
from tests.payloads import GITHUB_SECRET, SLACK_WEBHOOK_URL, make_payload, make_tier


@pytest.fixture
def relay_context() -> RelayContext:
    return RelayContext(slack_webhook_url=SLACK_WEBHOOK_URL, github_secret=GITHUB_SECRET)


@pytest.fixture
def created_payload() -> dict[str, Any]:
    return make_payload("created")


@pytest.fixture
def cancelled_payload() -> dict[str, Any]:
    return make_payload("cancelled")


@pytest.fixture
def edited_payload() -> dict[str, Any]:
    return make_payload("edited", changes={"privacy_level": {"from": "private"}})


@pytest.fixture
def pending_cancellation_payload() -> dict[str, Any]:
    return make_payload("pending_cancellation", effective_date="2019-12-30T00:00:00+00:00")


@pytest.fixture
def pending_tier_change_payload() -> dict[str, Any]:
    return make_payload(
        "pending_tier_change",
        changes={"tier": {"from": make_tier("$20 a month", 20)}},
        effective_date="2019-12-30T00:00:00+00:00",
    )
