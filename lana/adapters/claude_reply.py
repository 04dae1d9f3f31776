"""
ClaudeReplyGenerator — writes the guest auto-reply with Claude.

Fails hard: any error is raised as ReplyGenerationError.
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
from lana.domain.reply import AutoReplyContext, ReplyGenerationError, ReplyGenerator
from lana.prompts import render_prompt

log = logging.getLogger(__name__)


def build_system_prompt(context: AutoReplyContext) -> str:
    lines = []
    if context.property_name:
        lines.append(f"Property: {context.property_name}")
    if context.check_in_date:
        lines.append(f"Check-in: {context.check_in_date}")
    if context.check_out_date:
        lines.append(f"Check-out: {context.check_out_date}")
    signature = (
        f"{context.host_name}, the host" if context.host_name
        else "the host or property manager"
    )
    return render_prompt(
        "auto_reply_system",
        signature=signature,
        property_context="\n".join(lines) or "(no property details provided)",
    )


def build_messages(context: AutoReplyContext) -> list[dict]:
    """Prior turns in chronological order, then the guest message as the last user turn."""
    messages = [
        {"role": turn.role, "content": turn.content}
        for turn in context.conversation_history
    ]
    messages.append({"role": "user", "content": context.guest_message})
    return messages


class ClaudeReplyGenerator(ReplyGenerator):

    max_tokens = 1000

    def __init__(self, api_key: str | None = None, model: str = DEFAULT_MODEL, client=None):
        self._client = client or create_client(api_key)
        self._model = model

    async def generate(self, context: AutoReplyContext) -> str:
        try:
            response = await self._client.messages.create(
                model=self._model,
                max_tokens=self.max_tokens,
                system=build_system_prompt(context),
                messages=build_messages(context),
            )
            return first_text_block(response)
        except UnexpectedResponseError as exc:
            log.error("auto-reply for %s: unexpected response: %s", context.guest_name, exc)
            raise ReplyGenerationError(f"Failed to generate auto-reply: {exc}") from exc
        except anthropic.APIError as exc:
            log.error("auto-reply for %s: API error: %s", context.guest_name, exc)
            raise ReplyGenerationError(
                f"Failed to generate auto-reply: {describe_api_error(exc)}"
            ) from exc
