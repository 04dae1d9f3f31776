"""
SimulatorIntentClassifier — deterministic keyword-based classifier for tests.

No LLM calls, no network. Recognises the most common English phrases
seen in Airbnb guest threads.
"""

import re

from lana.domain.intent import IntentClassifier, MessageIntent

_HIGH_URGENCY_KEYWORDS = [
    r"\bemergency\b", r"\burgent(ly)?\b", r"\basap\b", r"\bimmediately\b",
    r"\bfire\b", r"\bflood(ing|ed)?\b", r"\bgas\b", r"\bsmoke\b",
    r"\blocked\s+out\b", r"\bcan'?t\s+get\s+in\b",
    r"\bno\s+(hot\s+)?water\b", r"\bno\s+(heat|heating|power|electricity)\b",
    r"\bpolice\b", r"\binjur(ed|y)\b",
]

_COMPLAINT_KEYWORDS = [
    r"\bbroken\b", r"\bnot\s+working\b", r"\bdoesn'?t\s+work\b", r"\bdirty\b",
    r"\bdisappointed\b", r"\bcomplain\w*\b", r"\bunacceptable\b",
    r"\bleak(ing|s)?\b", r"\bsmells?\b", r"\bnois(e|y)\b", r"\bbugs?\b",
    r"\bcockroach\w*\b", r"\bthere('s|\s+is)\s+(a|an)\s+(problem|issue)\b",
]

_QUESTION_OPENERS = re.compile(
    r"^\s*(hi|hello|hey)?[\s,!]*(what|where|when|how|which|who|is\s+there|are\s+there|"
    r"do\s+you|does|is\s+the|are\s+the)\b",
    re.IGNORECASE,
)

_REQUEST_KEYWORDS = [
    r"\bcan\s+(we|i|you)\b", r"\bcould\s+(we|i|you)\b", r"\bmay\s+(we|i)\b",
    r"\bwould\s+it\s+be\s+possible\b", r"\bplease\b", r"\bwe\s+need\b",
    r"\bearly\s+check.?in\b", r"\blate\s+check.?out\b",
]

_INFORMATION_KEYWORDS = [
    r"\bwe('ll|\s+will)\s+(arrive|be\s+arriving|be\s+there|land)\b",
    r"\bjust\s+(letting|to\s+let)\s+you\s+know\b", r"\bfyi\b",
    r"\bour\s+flight\b", r"\bwe\s+(have\s+)?(arrived|checked\s+out|left)\b",
]

_GREETING_KEYWORDS = [
    r"\bhi\b", r"\bhello\b", r"\bhey\b", r"\bthanks?\b", r"\bthank\s+you\b",
    r"\bgood\s+(morning|afternoon|evening)\b",
]


def _match_any(text: str, patterns: list[str]) -> bool:
    lower = text.lower()
    return any(re.search(p, lower) for p in patterns)


def _categorize(message: str) -> str:
    if _match_any(message, _COMPLAINT_KEYWORDS):
        return "complaint"
    if _QUESTION_OPENERS.search(message):
        return "question"
    if _match_any(message, _REQUEST_KEYWORDS):
        return "request"
    if "?" in message:
        return "question"
    if _match_any(message, _INFORMATION_KEYWORDS):
        return "information"
    if _match_any(message, _GREETING_KEYWORDS):
        return "greeting"
    return "other"


class SimulatorIntentClassifier(IntentClassifier):
    """
    Keyword-based intent classifier for tests.
    Anything it cannot place is "other", which the gate never auto-replies to.
    """

    async def classify(self, message: str) -> MessageIntent:
        category = _categorize(message)

        if _match_any(message, _HIGH_URGENCY_KEYWORDS):
            urgency = "high"
        elif category in ("complaint", "request"):
            urgency = "medium"
        else:
            urgency = "low"

        return MessageIntent(
            category=category,
            urgency=urgency,
            requires_host_attention=(
                urgency == "high" or category in ("complaint", "other")
            ),
            summary=message.strip()[:100],
        )
