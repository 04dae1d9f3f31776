"""
Shared plumbing for the Claude-backed adapters.

Every adapter sends one request and reads the first content block, which
must be text.  Anything else is an UnexpectedResponseError; each adapter
decides whether that degrades to a fallback or is raised.
"""

import os

import anthropic

DEFAULT_MODEL = "claude-sonnet-4-20250514"


class UnexpectedResponseError(ValueError):
    """The model answered with something other than a text block."""


def resolve_api_key(api_key: str | None = None) -> str:
    key = api_key or os.environ.get("ANTHROPIC_API_KEY") or os.environ.get("CLAUDE_API_KEY")
    if not key:
        raise RuntimeError("ANTHROPIC_API_KEY or CLAUDE_API_KEY environment variable is not set")
    return key


def create_client(api_key: str | None = None) -> anthropic.AsyncAnthropic:
    """One client handle can be shared by every adapter; it holds no per-call state."""
    return anthropic.AsyncAnthropic(api_key=resolve_api_key(api_key))


def first_text_block(response) -> str:
    content = getattr(response, "content", None)
    if not content:
        raise UnexpectedResponseError("response has no content blocks")
    block = content[0]
    block_type = getattr(block, "type", None)
    if block_type != "text":
        raise UnexpectedResponseError(f"expected a text block, got {block_type!r}")
    return block.text


def describe_api_error(exc: Exception) -> str:
    if isinstance(exc, anthropic.AuthenticationError):
        return "Claude API authentication failed. Check ANTHROPIC_API_KEY."
    return str(exc) or type(exc).__name__
