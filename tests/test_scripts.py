"""
Command-line scripts: argument handling against in-memory stores and simulators.
"""

import pytest

from lana.adapters.simulator_guest_message import SimulatorGuestMessageGenerator
from lana.adapters.simulator_insights import (
    SimulatorActivityRecommender,
    SimulatorSentimentAnalyzer,
)
from lana.adapters.sqlite_store import SqliteAutoReplyStore
from lana.domain.insights import ActivityRecommender
from scripts.host_settings import set_settings, show_history
from scripts.insights import run


@pytest.fixture
def store():
    s = SqliteAutoReplyStore(":memory:")
    yield s
    s.close()


# ---------------------------------------------------------------------------
# host_settings.py
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_set_settings_rejects_non_numeric_delay(store, capsys):
    await set_settings(store, "host-1", ["on", "09:00", "21:00", "soon"])

    assert "Invalid settings: DELAY must be a whole number" in capsys.readouterr().out
    assert await store.get_settings("host-1") is None


@pytest.mark.asyncio
async def test_set_settings_saves_valid_values(store, capsys):
    await set_settings(store, "host-1", ["on", "08:00", "20:00", "5"])

    settings = await store.get_settings("host-1")
    assert settings.auto_reply_enabled is True
    assert settings.response_delay_minutes == 5
    assert "updated" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_show_history_rejects_non_numeric_limit(store, capsys):
    await show_history(store, "thread-1", "ten")

    assert "Invalid limit: LIMIT must be a whole number" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# insights.py
# ---------------------------------------------------------------------------


async def _run(*args, recommender=None):
    return await run(
        list(args),
        SimulatorSentimentAnalyzer(),
        recommender or SimulatorActivityRecommender(),
        SimulatorGuestMessageGenerator(),
    )


@pytest.mark.asyncio
async def test_insights_sentiment(capsys):
    assert await _run("sentiment", "The loft was amazing, thank you!") == 0
    assert capsys.readouterr().out.startswith("positive (confidence")


@pytest.mark.asyncio
async def test_insights_activities(capsys):
    assert await _run("activities", "Lisbon", "food lovers") == 0
    out = capsys.readouterr().out
    assert "1. Attraction in Lisbon  [attraction]" in out
    assert "food lovers" in out


@pytest.mark.asyncio
async def test_insights_activities_none_available(capsys):
    class NothingNearby(ActivityRecommender):
        async def recommend(self, location, guest_preferences=None):
            return []

    assert await _run("activities", "Nowhere", recommender=NothingNearby()) == 1
    assert "No recommendations available." in capsys.readouterr().out


@pytest.mark.asyncio
async def test_insights_guest_message(capsys):
    assert await _run("message", "Sophie", "family", "welcome", "friendly", "two kids") == 0
    out = capsys.readouterr().out
    assert out.startswith("Hi Sophie,")
    assert "two kids" in out


@pytest.mark.asyncio
async def test_insights_guest_message_error(capsys):
    assert await _run("message", " ", "family", "welcome", "friendly") == 1
    assert capsys.readouterr().out.startswith("ERROR:")


@pytest.mark.asyncio
async def test_insights_usage(capsys):
    assert await _run("weather") == 2
    assert "Usage" in capsys.readouterr().out
