"""
Reply gate tests — pure code, fixed clocks, no I/O.
"""

from datetime import datetime

import pytest

from lana.domain.intent import CATEGORIES, URGENCIES, MessageIntent
from lana.domain.reply_gate import (
    HostAutoReplySettings,
    business_hour,
    denial_reason,
    is_business_hours,
    should_auto_reply,
)

SETTINGS = HostAutoReplySettings(
    auto_reply_enabled=True,
    business_hours_start="09:00",
    business_hours_end="21:00",
)
DISABLED = HostAutoReplySettings(
    auto_reply_enabled=False,
    business_hours_start="09:00",
    business_hours_end="21:00",
)


def _at(hour: int, minute: int = 0) -> datetime:
    return datetime(2026, 4, 2, hour, minute)


def _intent(category: str, urgency: str = "low") -> MessageIntent:
    return MessageIntent(
        category=category, urgency=urgency,
        requires_host_attention=False, summary="test",
    )


ALL_INTENTS = [_intent(c, u) for c in CATEGORIES for u in URGENCIES]


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


def test_question_during_business_hours_replies():
    assert should_auto_reply(_intent("question"), SETTINGS, _at(14)) is True


def test_request_after_hours_gets_acknowledgment():
    assert should_auto_reply(_intent("request"), SETTINGS, _at(23)) is True


def test_high_urgency_complaint_never_replies():
    assert should_auto_reply(_intent("complaint", "high"), SETTINGS, _at(14)) is False


@pytest.mark.parametrize("hour", [0, 8, 9, 14, 20, 21, 23])
def test_disabled_never_replies(hour):
    for intent in ALL_INTENTS:
        assert should_auto_reply(intent, DISABLED, _at(hour)) is False


# ---------------------------------------------------------------------------
# Escalation always wins
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("hour", [3, 10, 22])
def test_high_urgency_never_replies(hour):
    for category in CATEGORIES:
        assert should_auto_reply(_intent(category, "high"), SETTINGS, _at(hour)) is False


@pytest.mark.parametrize("hour", [3, 10, 22])
def test_complaint_never_replies(hour):
    for urgency in URGENCIES:
        assert should_auto_reply(_intent("complaint", urgency), SETTINGS, _at(hour)) is False


# ---------------------------------------------------------------------------
# Business hours
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("category", ["question", "greeting", "information"])
def test_routine_messages_reply_in_hours(category):
    assert should_auto_reply(_intent(category, "medium"), SETTINGS, _at(10)) is True


@pytest.mark.parametrize("category", ["question", "greeting", "information"])
def test_routine_messages_wait_after_hours(category):
    assert should_auto_reply(_intent(category), SETTINGS, _at(22)) is False


def test_request_in_hours_goes_to_host():
    assert should_auto_reply(_intent("request"), SETTINGS, _at(12)) is False


@pytest.mark.parametrize("hour", range(24))
def test_other_never_replies(hour):
    assert should_auto_reply(_intent("other"), SETTINGS, _at(hour)) is False


def test_interval_is_half_open():
    assert is_business_hours(SETTINGS, _at(9, 0)) is True
    assert is_business_hours(SETTINGS, _at(8, 59)) is False
    assert is_business_hours(SETTINGS, _at(20, 59)) is True
    assert is_business_hours(SETTINGS, _at(21, 0)) is False


def test_minutes_are_ignored():
    settings = HostAutoReplySettings(
        auto_reply_enabled=True, business_hours_start="09:45", business_hours_end="17:30",
    )
    assert is_business_hours(settings, _at(9, 5)) is True
    assert is_business_hours(settings, _at(17, 20)) is False


def test_window_across_midnight_is_never_business_hours():
    night = HostAutoReplySettings(
        auto_reply_enabled=True, business_hours_start="22:00", business_hours_end="06:00",
    )
    for hour in range(24):
        assert is_business_hours(night, _at(hour)) is False


def test_defaults_to_local_clock():
    # Only checks that the call works without an explicit clock.
    assert should_auto_reply(_intent("other"), SETTINGS) is False


# ---------------------------------------------------------------------------
# Settings validation and denial reasons
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("value", ["9", "25:00", "09:75", "nine", ""])
def test_malformed_hours_rejected(value):
    with pytest.raises(ValueError):
        HostAutoReplySettings(auto_reply_enabled=True, business_hours_start=value)


def test_negative_delay_rejected():
    with pytest.raises(ValueError):
        HostAutoReplySettings(auto_reply_enabled=True, response_delay_minutes=-1)


def test_business_hour_parses_single_digit():
    assert business_hour("7:30") == 7
    assert business_hour("23:59") == 23


def test_denial_reasons():
    assert denial_reason(_intent("question"), None) == "disabled"
    assert denial_reason(_intent("question"), DISABLED) == "disabled"
    assert denial_reason(_intent("complaint"), SETTINGS) == "escalated"
    assert denial_reason(_intent("question", "high"), SETTINGS) == "escalated"
    assert denial_reason(_intent("other"), SETTINGS) == "outside_policy"
