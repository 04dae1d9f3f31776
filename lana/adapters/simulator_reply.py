"""
SimulatorReplyGenerator — template-based replies for tests. No LLM calls.
"""

import asyncio

from lana.domain.reply import AutoReplyContext, ReplyGenerationError, ReplyGenerator


class SimulatorReplyGenerator(ReplyGenerator):
    """
    Deterministic reply generator.

    fail=True makes every call raise ReplyGenerationError; delay (seconds)
    holds each call open, for exercising caller timeouts.
    """

    def __init__(self, fail: bool = False, delay: float = 0.0):
        self._fail = fail
        self._delay = delay
        self.calls: list[AutoReplyContext] = []

    async def generate(self, context: AutoReplyContext) -> str:
        self.calls.append(context)
        if self._delay:
            await asyncio.sleep(self._delay)
        if self._fail:
            raise ReplyGenerationError("Failed to generate auto-reply: simulated failure")

        where = f" at {context.property_name}" if context.property_name else ""
        lines = [f"Hi {context.guest_name},", ""]
        lines.append(
            f"Thanks for your message! We're glad to help with your stay{where}."
        )
        if context.check_in_date:
            lines.append(f"We have you checking in on {context.check_in_date}.")
        lines.append("We'll follow up shortly if anything else is needed.")
        lines += ["", f"Best regards,\n{context.host_name or 'Your host'}"]
        return "\n".join(lines)
