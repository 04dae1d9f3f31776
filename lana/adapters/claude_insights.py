"""
Claude-powered adapters for SentimentAnalyzer and ActivityRecommender.
"""

import json
import logging

import anthropic

from lana.adapters.claude_client import (
    DEFAULT_MODEL,
    UnexpectedResponseError,
    create_client,
    describe_api_error,
    first_text_block,
)
from lana.domain.insights import (
    RECOMMENDATION_COUNT,
    SENTIMENTS,
    ActivityRecommendation,
    ActivityRecommender,
    InsightError,
    SentimentAnalyzer,
    SentimentResult,
    clamp_confidence,
)
from lana.domain.intent import strip_code_fences
from lana.prompts import load_prompt, render_prompt

log = logging.getLogger(__name__)


class ClaudeSentimentAnalyzer(SentimentAnalyzer):

    max_tokens = 1024

    def __init__(self, api_key: str | None = None, model: str = DEFAULT_MODEL, client=None):
        self._client = client or create_client(api_key)
        self._model = model
        self._system = load_prompt("sentiment")

    async def analyze(self, message: str) -> SentimentResult:
        try:
            response = await self._client.messages.create(
                model=self._model,
                max_tokens=self.max_tokens,
                system=self._system,
                messages=[{"role": "user", "content": message}],
            )
            data = json.loads(strip_code_fences(first_text_block(response)))
        except anthropic.APIError as exc:
            raise InsightError(f"Failed to analyze sentiment: {describe_api_error(exc)}") from exc
        except (UnexpectedResponseError, json.JSONDecodeError) as exc:
            raise InsightError(f"Failed to analyze sentiment: {exc}") from exc

        if not isinstance(data, dict):
            raise InsightError("Failed to analyze sentiment: expected a JSON object")
        sentiment = str(data.get("sentiment", "")).lower()
        if sentiment not in SENTIMENTS:
            raise InsightError(f"Failed to analyze sentiment: unknown sentiment {sentiment!r}")
        try:
            confidence = clamp_confidence(data.get("confidence"))
        except (TypeError, ValueError) as exc:
            raise InsightError(f"Failed to analyze sentiment: bad confidence: {exc}") from exc

        return SentimentResult(sentiment=sentiment, confidence=confidence)


class ClaudeActivityRecommender(ActivityRecommender):

    max_tokens = 2000

    def __init__(self, api_key: str | None = None, model: str = DEFAULT_MODEL, client=None):
        self._client = client or create_client(api_key)
        self._model = model

    async def recommend(
        self, location: str, guest_preferences: str | None = None
    ) -> list[ActivityRecommendation]:
        prompt = render_prompt(
            "activities",
            count=str(RECOMMENDATION_COUNT),
            location=location,
            preferences=f"Guest preferences: {guest_preferences}" if guest_preferences else "",
        )
        try:
            response = await self._client.messages.create(
                model=self._model,
                max_tokens=self.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
            data = json.loads(strip_code_fences(first_text_block(response)))
        except (anthropic.APIError, UnexpectedResponseError, json.JSONDecodeError) as exc:
            log.warning("activity recommendations for %s failed: %s", location, exc)
            return []

        if not isinstance(data, list):
            log.warning("activity recommendations for %s: expected a JSON array", location)
            return []

        # malformed entries are skipped
        return [
            ActivityRecommendation(
                title=item["title"],
                description=item.get("description", ""),
                category=item.get("category", "other"),
            )
            for item in data
            if isinstance(item, dict) and item.get("title")
        ]
