"""
IntentClassifier port — understands what the guest message is about.

AI is used here: the classifier reads a guest message and returns
structured data.  The reply gate then operates on that data.

When classification is uncertain the answer is always "a human should
look at this", never a silent auto-reply.
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Literal

Category = Literal["question", "request", "complaint", "information", "greeting", "other"]
Urgency = Literal["low", "medium", "high"]

CATEGORIES: tuple[str, ...] = (
    "question", "request", "complaint", "information", "greeting", "other",
)
URGENCIES: tuple[str, ...] = ("low", "medium", "high")

SUMMARY_FALLBACK_CHARS = 100


@dataclass(frozen=True)
class MessageIntent:
    """Structured output of intent classification — no raw text, only data."""
    category: Category
    urgency: Urgency
    requires_host_attention: bool
    summary: str                  # one-sentence summary of the guest message


class IntentParseError(ValueError):
    """The classifier response could not be read as a JSON object."""


def fallback_intent(message: str) -> MessageIntent:
    """Conservative intent used whenever classification fails."""
    return MessageIntent(
        category="other",
        urgency="medium",
        requires_host_attention=True,
        summary=message[:SUMMARY_FALLBACK_CHARS],
    )


def strip_code_fences(raw: str) -> str:
    """Remove a markdown code fence if the model wrapped its JSON in one."""
    raw = raw.strip()
    if raw.startswith("```"):
        raw = raw.split("```")[1]
        if raw.startswith("json"):
            raw = raw[4:]
    return raw.strip()


def parse_intent(raw_text: str, message: str) -> MessageIntent:
    """
    Read the classifier's JSON answer into a MessageIntent.

    Each field falls back independently: an unknown category becomes
    "other", an unknown urgency becomes "medium", a missing summary is
    replaced by the start of the guest message.

    Raises IntentParseError when the text is not a JSON object at all.
    """
    try:
        data = json.loads(strip_code_fences(raw_text))
    except json.JSONDecodeError as exc:
        raise IntentParseError(f"classifier returned invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise IntentParseError(
            f"classifier returned {type(data).__name__}, expected a JSON object"
        )

    category = data.get("category")
    if category not in CATEGORIES:
        category = "other"
    urgency = data.get("urgency")
    if urgency not in URGENCIES:
        urgency = "medium"
    summary = data.get("summary")
    if not isinstance(summary, str) or not summary.strip():
        summary = message[:SUMMARY_FALLBACK_CHARS]

    return MessageIntent(
        category=category,
        urgency=urgency,
        requires_host_attention=bool(data.get("requiresHostAttention", False)),
        summary=summary,
    )


class IntentClassifier(ABC):
    """
    Port: classify a guest message into a structured intent.

    Implementations may use an LLM (ClaudeIntentClassifier) or
    deterministic keyword matching (SimulatorIntentClassifier).
    Both must satisfy the same contract, including: never raise because
    the upstream model failed — return fallback_intent() instead.
    """

    @abstractmethod
    async def classify(self, message: str) -> MessageIntent:
        """Classify a single guest message."""
        ...
