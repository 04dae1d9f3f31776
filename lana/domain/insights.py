"""
Guest insight ports — sentiment analysis and local activity ideas.

Two more single-shot AI operations the host dashboard uses next to
auto-reply.  Sentiment failures are raised (the dashboard shows the
error); activity recommendation failures degrade to an empty list.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Literal

Sentiment = Literal["positive", "negative", "neutral"]
SENTIMENTS: tuple[str, ...] = ("positive", "negative", "neutral")

RECOMMENDATION_COUNT = 6


class InsightError(RuntimeError):
    """An insight could not be computed."""


@dataclass(frozen=True)
class SentimentResult:
    sentiment: Sentiment
    confidence: float        # 0.0–1.0, clamped


@dataclass(frozen=True)
class ActivityRecommendation:
    title: str
    description: str         # 2–3 sentences
    category: str            # e.g. "dining", "outdoor", "culture"


def clamp_confidence(value) -> float:
    return max(0.0, min(1.0, float(value)))


class SentimentAnalyzer(ABC):
    """Port: tell whether a guest message reads positive, negative, or neutral."""

    @abstractmethod
    async def analyze(self, message: str) -> SentimentResult:
        """Return the sentiment, or raise InsightError."""
        ...


class ActivityRecommender(ABC):
    """Port: suggest things to do near the property."""

    @abstractmethod
    async def recommend(
        self, location: str, guest_preferences: str | None = None
    ) -> list[ActivityRecommendation]:
        """Return up to RECOMMENDATION_COUNT ideas; empty list on failure."""
        ...
