#!/usr/bin/env python3
"""
Host settings CLI — show and change a host's auto-reply configuration.

Usage (from project root):
    python scripts/host_settings.py show HOST_ID
    python scripts/host_settings.py set HOST_ID on|off [START END [DELAY]]
    python scripts/host_settings.py history THREAD_ID [LIMIT]

    START / END are HH:MM, DELAY is minutes.
"""

import asyncio
import os
import sys
import textwrap

# Allow running as `python scripts/host_settings.py` from project root.
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from lana.adapters.sqlite_store import SqliteAutoReplyStore
from lana.domain.reply_gate import HostAutoReplySettings

DB_PATH = os.environ.get("DB_PATH", "data/lana.db")


def _wrap(text: str, width: int = 72, indent: str = "    ") -> str:
    return textwrap.fill(text, width=width, initial_indent=indent, subsequent_indent=indent)


def _parse_int(value: str, name: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be a whole number, got {value!r}") from None


async def show_settings(store: SqliteAutoReplyStore, host_id: str) -> None:
    settings = await store.get_settings(host_id)
    if settings is None:
        print(f"Host {host_id!r} has no settings (auto-reply off).")
        return
    print(f"\n{'=' * 60}")
    print(f"  Host: {host_id}")
    print(f"  Auto-reply: {'on' if settings.auto_reply_enabled else 'off'}")
    print(f"  Business hours: {settings.business_hours_start} - {settings.business_hours_end}")
    print(f"  Response delay: {settings.response_delay_minutes} min")
    print(f"{'=' * 60}\n")


async def set_settings(store: SqliteAutoReplyStore, host_id: str, args: list[str]) -> None:
    if not args or args[0] not in ("on", "off"):
        print("Expected 'on' or 'off'.")
        return
    current = await store.get_settings(host_id)
    start = args[1] if len(args) > 1 else (current.business_hours_start if current else "09:00")
    end = args[2] if len(args) > 2 else (current.business_hours_end if current else "21:00")
    try:
        delay = (
            _parse_int(args[3], "DELAY") if len(args) > 3
            else (current.response_delay_minutes if current else 0)
        )
        settings = HostAutoReplySettings(
            auto_reply_enabled=args[0] == "on",
            business_hours_start=start,
            business_hours_end=end,
            response_delay_minutes=delay,
        )
    except ValueError as exc:
        print(f"Invalid settings: {exc}")
        return
    await store.save_settings(host_id, settings)
    print(f"Host {host_id!r} updated.")
    await show_settings(store, host_id)


async def show_history(store: SqliteAutoReplyStore, thread_id: str, limit: str | None) -> None:
    try:
        turns = await store.get_history(thread_id, _parse_int(limit, "LIMIT") if limit else None)
    except ValueError as exc:
        print(f"Invalid limit: {exc}")
        return
    if not turns:
        print("No messages in this thread.")
        return
    for turn in turns:
        who = "GUEST" if turn.role == "user" else "HOST"
        print(f"{who}:")
        print(_wrap(turn.content))
        print()


async def main() -> None:
    os.makedirs(os.path.dirname(DB_PATH) or ".", exist_ok=True)
    store = SqliteAutoReplyStore(DB_PATH)
    args = sys.argv[1:]

    if len(args) >= 2 and args[0] == "show":
        await show_settings(store, args[1])
    elif len(args) >= 3 and args[0] == "set":
        await set_settings(store, args[1], args[2:])
    elif len(args) >= 2 and args[0] == "history":
        await show_history(store, args[1], args[2] if len(args) > 2 else None)
    else:
        print(__doc__)


if __name__ == "__main__":
    asyncio.run(main())
