"""
Auto-reply decision pipeline.

Wires together all ports following the principle:
  AI → data → code → AI

Flow:
  1. AI: classify guest intent → MessageIntent (never fails, falls back,
     also when the call outlives classify_timeout)
  2. Code: load host settings, gate the auto-reply
  3. AI: generate the reply (may fail — then the host answers)
  4. Code: send the reply, record both turns in the thread history

Whenever the pipeline does not reply, the message is left for the host.
"""

import asyncio
import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Callable, Literal

from lana.adapters.ports import ConversationHistoryStore, HostSettingsStore
from lana.communication.ports import MessageSender, OutgoingReply
from lana.domain.intent import IntentClassifier, MessageIntent, fallback_intent
from lana.domain.reply import (
    AutoReplyContext,
    ConversationTurn,
    ReplyGenerationError,
    ReplyGenerator,
)
from lana.domain.reply_gate import denial_reason, should_auto_reply

log = logging.getLogger(__name__)


@dataclass
class PipelineConfig:
    classifier: IntentClassifier
    generator: ReplyGenerator
    settings: HostSettingsStore
    history: ConversationHistoryStore
    sender: MessageSender
    reply_timeout: float | None = 30.0   # seconds; None waits forever
    classify_timeout: float | None = 30.0
    history_limit: int = 10              # prior turns passed to the generator
    clock: Callable[[], datetime] = datetime.now


@dataclass
class PipelineResult:
    action: Literal[
        "auto_replied",       # reply generated and sent
        "deferred_to_host",   # gate said no — the host answers
        "generation_failed",  # gate said yes but no reply could be generated
    ]
    intent: MessageIntent
    details: str = ""
    reply: str = ""
    tracking_id: str = ""


class AutoReplyPipeline:
    """
    Stateless pipeline step: process one guest message.

    Concurrent calls share nothing but the injected ports.
    """

    def __init__(self, config: PipelineConfig):
        self._cfg = config

    async def process_message(
        self,
        host_id: str,
        thread_id: str,
        context: AutoReplyContext,
    ) -> PipelineResult:
        """Classify, gate, and (maybe) answer a guest message."""

        log.debug("host=%s thread=%s message=%.60r", host_id, thread_id, context.guest_message)

        # Step 1: AI classifies intent
        try:
            intent = await asyncio.wait_for(
                self._cfg.classifier.classify(context.guest_message),
                timeout=self._cfg.classify_timeout,
            )
        except asyncio.TimeoutError:
            log.warning(
                "host=%s thread=%s classification timed out after %ss, using fallback",
                host_id, thread_id, self._cfg.classify_timeout,
            )
            intent = fallback_intent(context.guest_message)
        log.info(
            "host=%s thread=%s classified → category=%s urgency=%s attention=%s",
            host_id, thread_id, intent.category, intent.urgency,
            intent.requires_host_attention,
        )

        # Step 2: code decides
        settings = await self._cfg.settings.get_settings(host_id)
        if settings is None or not should_auto_reply(intent, settings, self._cfg.clock()):
            reason = denial_reason(intent, settings)
            await self._record(thread_id, "user", context.guest_message)
            log.info("host=%s thread=%s deferred to host: %s", host_id, thread_id, reason)
            return PipelineResult(action="deferred_to_host", intent=intent, details=reason)

        if not context.conversation_history:
            prior = await self._cfg.history.get_history(thread_id, self._cfg.history_limit)
            context = replace(context, conversation_history=prior)
        await self._record(thread_id, "user", context.guest_message)

        # Step 3: AI writes the reply
        try:
            body = await asyncio.wait_for(
                self._cfg.generator.generate(context), timeout=self._cfg.reply_timeout
            )
        except asyncio.TimeoutError:
            log.error(
                "host=%s thread=%s reply generation timed out after %ss, routing to host",
                host_id, thread_id, self._cfg.reply_timeout,
            )
            return PipelineResult(
                action="generation_failed", intent=intent,
                details=f"timed out after {self._cfg.reply_timeout}s",
            )
        except ReplyGenerationError as exc:
            log.error("host=%s thread=%s %s, routing to host", host_id, thread_id, exc)
            return PipelineResult(action="generation_failed", intent=intent, details=str(exc))

        # Step 4: send and remember
        tracking_id = await self._cfg.sender.send(
            OutgoingReply(
                host_id=host_id,
                thread_id=thread_id,
                guest_name=context.guest_name,
                body=body,
                delay_minutes=settings.response_delay_minutes,
            )
        )
        await self._record(thread_id, "assistant", body)

        log.info("host=%s thread=%s auto-replied id=%s: %.60s", host_id, thread_id, tracking_id, body)
        return PipelineResult(
            action="auto_replied",
            intent=intent,
            details=intent.category,
            reply=body,
            tracking_id=tracking_id,
        )

    async def _record(self, thread_id: str, role: str, content: str) -> None:
        await self._cfg.history.append_turn(thread_id, ConversationTurn(role=role, content=content))
