"""Load prompt files from this directory."""

from pathlib import Path

_DIR = Path(__file__).parent


def load_prompt(name: str) -> str:
    """Load a prompt by name (without extension). Returns the text stripped."""
    return (_DIR / f"{name}.txt").read_text(encoding="utf-8").strip()


def render_prompt(name: str, **values: str) -> str:
    """Load a prompt and fill its {placeholders}."""
    return load_prompt(name).format(**values)
