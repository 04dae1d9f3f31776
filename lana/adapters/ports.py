from abc import ABC, abstractmethod

from lana.domain.reply import ConversationTurn
from lana.domain.reply_gate import HostAutoReplySettings


class HostSettingsStore(ABC):
    """
    Port: where a host's auto-reply configuration lives.

    The pipeline only reads settings; saving exists for onboarding
    and local tooling.
    """

    @abstractmethod
    async def get_settings(self, host_id: str) -> HostAutoReplySettings | None:
        """Return the host's settings, or None if the host never configured them."""
        ...

    @abstractmethod
    async def save_settings(self, host_id: str, settings: HostAutoReplySettings) -> None:
        """Create or replace the host's settings."""
        ...


class ConversationHistoryStore(ABC):
    """
    Port: prior turns of a guest thread.

    Turns are returned oldest first, the order the reply generator
    expects them in.
    """

    @abstractmethod
    async def get_history(
        self, thread_id: str, limit: int | None = None
    ) -> list[ConversationTurn]:
        """Return the thread's turns, oldest first. limit keeps the most recent ones."""
        ...

    @abstractmethod
    async def append_turn(self, thread_id: str, turn: ConversationTurn) -> None:
        """Add a turn at the end of the thread."""
        ...
