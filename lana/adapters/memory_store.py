"""In-memory adapters for HostSettingsStore and ConversationHistoryStore — for tests and local development."""

from lana.adapters.ports import ConversationHistoryStore, HostSettingsStore
from lana.domain.reply import ConversationTurn
from lana.domain.reply_gate import HostAutoReplySettings


class InMemoryHostSettingsStore(HostSettingsStore):

    def __init__(self, settings: dict[str, HostAutoReplySettings] | None = None):
        self._settings: dict[str, HostAutoReplySettings] = dict(settings or {})

    async def get_settings(self, host_id: str) -> HostAutoReplySettings | None:
        return self._settings.get(host_id)

    async def save_settings(self, host_id: str, settings: HostAutoReplySettings) -> None:
        self._settings[host_id] = settings


class InMemoryConversationHistory(ConversationHistoryStore):

    def __init__(self):
        self._threads: dict[str, list[ConversationTurn]] = {}

    async def get_history(
        self, thread_id: str, limit: int | None = None
    ) -> list[ConversationTurn]:
        turns = self._threads.get(thread_id, [])
        if limit is not None:
            turns = turns[-limit:] if limit > 0 else []
        return list(turns)

    async def append_turn(self, thread_id: str, turn: ConversationTurn) -> None:
        self._threads.setdefault(thread_id, []).append(turn)
