"""
SQLite adapter for HostSettingsStore and ConversationHistoryStore.

Use ":memory:" for tests, a file path for production.
"""

import sqlite3
from datetime import datetime, timezone

from lana.adapters.ports import ConversationHistoryStore, HostSettingsStore
from lana.domain.reply import ConversationTurn
from lana.domain.reply_gate import HostAutoReplySettings

_SCHEMA = """
CREATE TABLE IF NOT EXISTS host_settings (
    host_id     TEXT PRIMARY KEY,
    auto_reply_enabled INTEGER NOT NULL DEFAULT 0,
    business_hours_start TEXT NOT NULL DEFAULT '09:00',
    business_hours_end   TEXT NOT NULL DEFAULT '21:00',
    response_delay_minutes INTEGER NOT NULL DEFAULT 0,
    updated_at  TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS conversation_turns (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    thread_id   TEXT NOT NULL,
    role        TEXT NOT NULL CHECK (role IN ('user', 'assistant')),
    content     TEXT NOT NULL,
    created_at  TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_turns_thread ON conversation_turns (thread_id, id);
"""


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class SqliteAutoReplyStore(HostSettingsStore, ConversationHistoryStore):

    def __init__(self, db_path: str = "lana.db"):
        self._conn = sqlite3.connect(db_path)
        self._conn.row_factory = sqlite3.Row
        self._conn.executescript(_SCHEMA)

    # -- host settings -------------------------------------------------------

    async def get_settings(self, host_id: str) -> HostAutoReplySettings | None:
        row = self._conn.execute(
            "SELECT * FROM host_settings WHERE host_id = ?", (host_id,)
        ).fetchone()
        if not row:
            return None
        return HostAutoReplySettings(
            auto_reply_enabled=bool(row["auto_reply_enabled"]),
            business_hours_start=row["business_hours_start"],
            business_hours_end=row["business_hours_end"],
            response_delay_minutes=row["response_delay_minutes"],
        )

    async def save_settings(self, host_id: str, settings: HostAutoReplySettings) -> None:
        self._conn.execute(
            "INSERT INTO host_settings"
            " (host_id, auto_reply_enabled, business_hours_start, business_hours_end,"
            "  response_delay_minutes, updated_at)"
            " VALUES (?, ?, ?, ?, ?, ?)"
            " ON CONFLICT(host_id) DO UPDATE SET"
            "  auto_reply_enabled = excluded.auto_reply_enabled,"
            "  business_hours_start = excluded.business_hours_start,"
            "  business_hours_end = excluded.business_hours_end,"
            "  response_delay_minutes = excluded.response_delay_minutes,"
            "  updated_at = excluded.updated_at",
            (host_id, int(settings.auto_reply_enabled), settings.business_hours_start,
             settings.business_hours_end, settings.response_delay_minutes, _now()),
        )
        self._conn.commit()

    # -- conversation history ------------------------------------------------

    async def get_history(
        self, thread_id: str, limit: int | None = None
    ) -> list[ConversationTurn]:
        if limit is None:
            rows = self._conn.execute(
                "SELECT role, content FROM conversation_turns"
                " WHERE thread_id = ? ORDER BY id",
                (thread_id,),
            ).fetchall()
        else:
            # newest N, then back to chronological order
            rows = self._conn.execute(
                "SELECT role, content FROM ("
                "  SELECT id, role, content FROM conversation_turns"
                "  WHERE thread_id = ? ORDER BY id DESC LIMIT ?"
                ") ORDER BY id",
                (thread_id, max(limit, 0)),
            ).fetchall()
        return [ConversationTurn(role=r["role"], content=r["content"]) for r in rows]

    async def append_turn(self, thread_id: str, turn: ConversationTurn) -> None:
        self._conn.execute(
            "INSERT INTO conversation_turns (thread_id, role, content, created_at)"
            " VALUES (?, ?, ?, ?)",
            (thread_id, turn.role, turn.content, _now()),
        )
        self._conn.commit()

    def close(self) -> None:
        self._conn.close()
