"""
ClaudeGuestMessageGenerator — writes host-requested guest messages with Claude.
"""

import logging

import anthropic

from lana.adapters.claude_client import (
    DEFAULT_MODEL,
    UnexpectedResponseError,
    create_client,
    describe_api_error,
    first_text_block,
)
from lana.domain.guest_message import (
    GuestMessageError,
    GuestMessageGenerator,
    GuestMessageRequest,
)
from lana.prompts import load_prompt, render_prompt

log = logging.getLogger(__name__)


def build_user_prompt(request: GuestMessageRequest) -> str:
    return render_prompt(
        "guest_message_user",
        stage=request.communication_stage,
        guest_name=request.guest_name,
        guest_type=request.guest_type,
        tone=request.tone,
        special_context=(
            f"Additional context: {request.special_context}" if request.special_context else ""
        ),
    )


class ClaudeGuestMessageGenerator(GuestMessageGenerator):

    max_tokens = 1024

    def __init__(self, api_key: str | None = None, model: str = DEFAULT_MODEL, client=None):
        self._client = client or create_client(api_key)
        self._model = model
        self._system = load_prompt("guest_message_system")

    async def generate(self, request: GuestMessageRequest) -> str:
        try:
            response = await self._client.messages.create(
                model=self._model,
                max_tokens=self.max_tokens,
                system=self._system,
                messages=[{"role": "user", "content": build_user_prompt(request)}],
            )
            return first_text_block(response)
        except UnexpectedResponseError as exc:
            log.error("%s message for %s: %s", request.communication_stage, request.guest_name, exc)
            raise GuestMessageError(f"Failed to generate message: {exc}") from exc
        except anthropic.APIError as exc:
            log.error("%s message for %s: API error: %s",
                      request.communication_stage, request.guest_name, exc)
            raise GuestMessageError(
                f"Failed to generate message: {describe_api_error(exc)}"
            ) from exc
