#!/usr/bin/env python3
"""
Guest insights CLI — sentiment, local activity ideas, and ready-made messages.

Usage (from project root):
    python scripts/insights.py sentiment "guest message text"
    python scripts/insights.py activities "Lisbon, Portugal" ["guest preferences"]
    python scripts/insights.py message GUEST_NAME GUEST_TYPE STAGE TONE ["special context"]

    STAGE is one of welcome, checkin, midstay, checkout, problem.

Needs ANTHROPIC_API_KEY (or CLAUDE_API_KEY). Set LANA_SIMULATE=1 to use the
offline simulators instead.
"""

import asyncio
import os
import sys
import textwrap

# Allow running as `python scripts/insights.py` from project root.
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from lana.domain.guest_message import GuestMessageError, GuestMessageGenerator, GuestMessageRequest
from lana.domain.insights import ActivityRecommender, InsightError, SentimentAnalyzer


def _wrap(text: str, width: int = 72, indent: str = "    ") -> str:
    return textwrap.fill(text, width=width, initial_indent=indent, subsequent_indent=indent)


def build_adapters() -> tuple[SentimentAnalyzer, ActivityRecommender, GuestMessageGenerator]:
    if os.environ.get("LANA_SIMULATE"):
        from lana.adapters.simulator_guest_message import SimulatorGuestMessageGenerator
        from lana.adapters.simulator_insights import (
            SimulatorActivityRecommender,
            SimulatorSentimentAnalyzer,
        )

        return (
            SimulatorSentimentAnalyzer(),
            SimulatorActivityRecommender(),
            SimulatorGuestMessageGenerator(),
        )

    from lana.adapters.claude_client import DEFAULT_MODEL, create_client
    from lana.adapters.claude_guest_message import ClaudeGuestMessageGenerator
    from lana.adapters.claude_insights import ClaudeActivityRecommender, ClaudeSentimentAnalyzer

    client = create_client()
    model = os.environ.get("LANA_MODEL", DEFAULT_MODEL)
    return (
        ClaudeSentimentAnalyzer(model=model, client=client),
        ClaudeActivityRecommender(model=model, client=client),
        ClaudeGuestMessageGenerator(model=model, client=client),
    )


async def run(
    args: list[str],
    sentiment: SentimentAnalyzer,
    recommender: ActivityRecommender,
    messages: GuestMessageGenerator,
) -> int:
    if len(args) >= 2 and args[0] == "sentiment":
        try:
            result = await sentiment.analyze(args[1])
        except InsightError as exc:
            print(f"ERROR: {exc}")
            return 1
        print(f"{result.sentiment} (confidence {result.confidence:.2f})")
        return 0

    if len(args) >= 2 and args[0] == "activities":
        ideas = await recommender.recommend(args[1], args[2] if len(args) > 2 else None)
        if not ideas:
            print("No recommendations available.")
            return 1
        for i, idea in enumerate(ideas, 1):
            print(f"{i}. {idea.title}  [{idea.category}]")
            print(_wrap(idea.description))
        return 0

    if len(args) >= 5 and args[0] == "message":
        request = GuestMessageRequest(
            guest_name=args[1],
            guest_type=args[2],
            communication_stage=args[3],
            tone=args[4],
            special_context=args[5] if len(args) > 5 else None,
        )
        try:
            print(await messages.generate(request))
        except GuestMessageError as exc:
            print(f"ERROR: {exc}")
            return 1
        return 0

    print(__doc__)
    return 2


if __name__ == "__main__":
    sys.exit(asyncio.run(run(sys.argv[1:], *build_adapters())))
