"""
Simulator adapters for SentimentAnalyzer and ActivityRecommender.

Deterministic keyword/template-based implementations for tests — no LLM calls.
"""

import re

from lana.domain.insights import (
    RECOMMENDATION_COUNT,
    ActivityRecommendation,
    ActivityRecommender,
    SentimentAnalyzer,
    SentimentResult,
)

_POSITIVE = [
    r"\bgreat\b", r"\bamazing\b", r"\blove(d)?\b", r"\bperfect\b", r"\bwonderful\b",
    r"\bclean\b", r"\bbeautiful\b", r"\bthank(s| you)\b", r"\bexcellent\b",
]
_NEGATIVE = [
    r"\bdirty\b", r"\bbroken\b", r"\bterrible\b", r"\bawful\b", r"\bdisappointed\b",
    r"\bnot\s+working\b", r"\bnois(e|y)\b", r"\bworst\b", r"\bunacceptable\b",
]

_CATEGORIES = ["attraction", "dining", "outdoor", "culture", "hidden gem", "nightlife"]


def _count(text: str, patterns: list[str]) -> int:
    lower = text.lower()
    return sum(1 for p in patterns if re.search(p, lower))


class SimulatorSentimentAnalyzer(SentimentAnalyzer):

    async def analyze(self, message: str) -> SentimentResult:
        pos = _count(message, _POSITIVE)
        neg = _count(message, _NEGATIVE)
        if pos > neg:
            return SentimentResult(sentiment="positive", confidence=min(1.0, 0.6 + 0.1 * pos))
        if neg > pos:
            return SentimentResult(sentiment="negative", confidence=min(1.0, 0.6 + 0.1 * neg))
        return SentimentResult(sentiment="neutral", confidence=0.5)


class SimulatorActivityRecommender(ActivityRecommender):

    async def recommend(
        self, location: str, guest_preferences: str | None = None
    ) -> list[ActivityRecommendation]:
        if not location.strip():
            return []
        suffix = f" Picked with {guest_preferences} in mind." if guest_preferences else ""
        return [
            ActivityRecommendation(
                title=f"{category.title()} in {location}",
                description=f"A local favourite {category} spot in {location}.{suffix}",
                category=category,
            )
            for category in _CATEGORIES[:RECOMMENDATION_COUNT]
        ]
