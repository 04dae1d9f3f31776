"""
ReplyGenerator port — writes the guest-facing auto-reply.

Unlike classification, generation fails hard: there is no safe default
reply, so any failure is raised to the caller as ReplyGenerationError.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Literal


@dataclass(frozen=True)
class ConversationTurn:
    """One prior message in a guest thread."""
    role: Literal["user", "assistant"]   # user = guest, assistant = host / Lana
    content: str


@dataclass
class AutoReplyContext:
    """Everything the generator needs to answer a guest message."""
    guest_name: str
    guest_message: str
    property_name: str | None = None
    check_in_date: str | None = None      # ISO: "2026-03-05"
    check_out_date: str | None = None     # ISO: "2026-03-07"
    conversation_history: list[ConversationTurn] = field(default_factory=list)
    host_name: str | None = None


class ReplyGenerationError(RuntimeError):
    """The reply could not be generated. No fallback text is ever produced."""


class ReplyGenerator(ABC):
    """
    Port: compose the reply text for a guest message.

    The generator only produces text; sending it is someone else's job.
    """

    @abstractmethod
    async def generate(self, context: AutoReplyContext) -> str:
        """Return the reply body, or raise ReplyGenerationError."""
        ...
