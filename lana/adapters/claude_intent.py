"""
ClaudeIntentClassifier — uses Claude API to classify guest messages.

System prompt is the source of truth for classification rules.
The prompt returns JSON that maps directly to MessageIntent.

Fails soft: an API error, a non-text answer, or unreadable JSON all
return fallback_intent(), which routes the message to the host.
"""

import logging

import anthropic

from lana.adapters.claude_client import (
    DEFAULT_MODEL,
    UnexpectedResponseError,
    create_client,
    first_text_block,
)
from lana.domain.intent import (
    IntentClassifier,
    IntentParseError,
    MessageIntent,
    fallback_intent,
    parse_intent,
)
from lana.prompts import load_prompt

log = logging.getLogger(__name__)


class ClaudeIntentClassifier(IntentClassifier):
    """Intent classifier backed by Claude. No retries: one call, then fallback."""

    max_tokens = 500

    def __init__(self, api_key: str | None = None, model: str = DEFAULT_MODEL, client=None):
        self._client = client or create_client(api_key)
        self._model = model
        self._system = load_prompt("intent_classifier")

    async def classify(self, message: str) -> MessageIntent:
        try:
            response = await self._client.messages.create(
                model=self._model,
                max_tokens=self.max_tokens,
                system=self._system,
                messages=[{"role": "user", "content": f'Guest message: "{message}"'}],
            )
            return parse_intent(first_text_block(response), message)
        except (anthropic.APIError, UnexpectedResponseError, IntentParseError) as exc:
            log.warning("intent classification failed, using fallback: %s", exc)
            return fallback_intent(message)
