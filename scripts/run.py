"""
Local runner for the Lana auto-reply pipeline.

Answers one guest message: classify, gate against the host's settings,
and (if allowed) generate and send the reply.

Usage:
    source .env && python scripts/run.py HOST_ID THREAD_ID "Guest Name" "message text"

Environment variables (all optional unless noted):
    ANTHROPIC_API_KEY   - Anthropic/Claude API key (required; CLAUDE_API_KEY also accepted)
    LANA_MODEL          - model override (default: claude-sonnet-4-20250514)
    DB_PATH             - SQLite database path (default: data/lana.db)
    REPLY_TIMEOUT       - seconds allowed for reply generation (default: 30, 0 = no limit)
    LANA_SEND_CHANNEL   - "console" or "http" (default: console)
    PROPERTY_NAME, CHECK_IN_DATE, CHECK_OUT_DATE, HOST_NAME - optional reply context

    # HTTP sender (only when LANA_SEND_CHANNEL=http)
    LANA_MESSAGING_URL, LANA_MESSAGING_TOKEN, LANA_MESSAGING_TIMEOUT
"""

import asyncio
import logging
import os
import sys

# Make sure project root is on sys.path when run as a script
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lana.adapters.claude_client import DEFAULT_MODEL, create_client
from lana.adapters.claude_intent import ClaudeIntentClassifier
from lana.adapters.claude_reply import ClaudeReplyGenerator
from lana.adapters.sqlite_store import SqliteAutoReplyStore
from lana.communication.factory import create_message_sender
from lana.domain.reply import AutoReplyContext
from lana.pipeline import AutoReplyPipeline, PipelineConfig

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-7s  %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
log = logging.getLogger(__name__)


def _require_env(*names: str) -> str:
    for name in names:
        value = os.environ.get(name)
        if value:
            return value
    print(f"ERROR: environment variable {names[0]!r} is not set.", file=sys.stderr)
    sys.exit(1)


def build_pipeline() -> AutoReplyPipeline:
    client = create_client(_require_env("ANTHROPIC_API_KEY", "CLAUDE_API_KEY"))
    model = os.environ.get("LANA_MODEL", DEFAULT_MODEL)
    db_path = os.environ.get("DB_PATH", "data/lana.db")
    if os.path.dirname(db_path):
        os.makedirs(os.path.dirname(db_path), exist_ok=True)
    timeout = float(os.environ.get("REPLY_TIMEOUT", "30"))
    classify_timeout = float(os.environ.get("CLASSIFY_TIMEOUT", "30"))

    store = SqliteAutoReplyStore(db_path=db_path)
    config = PipelineConfig(
        classifier=ClaudeIntentClassifier(model=model, client=client),
        generator=ClaudeReplyGenerator(model=model, client=client),
        settings=store,
        history=store,
        sender=create_message_sender(),
        reply_timeout=timeout or None,
        classify_timeout=classify_timeout or None,
    )
    return AutoReplyPipeline(config)


async def main(argv: list[str]) -> int:
    if len(argv) != 4:
        print(__doc__)
        return 2
    host_id, thread_id, guest_name, message = argv

    context = AutoReplyContext(
        guest_name=guest_name,
        guest_message=message,
        property_name=os.environ.get("PROPERTY_NAME"),
        check_in_date=os.environ.get("CHECK_IN_DATE"),
        check_out_date=os.environ.get("CHECK_OUT_DATE"),
        host_name=os.environ.get("HOST_NAME"),
    )
    result = await build_pipeline().process_message(host_id, thread_id, context)

    log.info(
        "%s (%s/%s): %s",
        result.action, result.intent.category, result.intent.urgency,
        result.details or result.intent.summary,
    )
    return 0 if result.action != "generation_failed" else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main(sys.argv[1:])))
