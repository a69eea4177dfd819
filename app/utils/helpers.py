"""
Common utility functions and helpers.
"""
from typing import Any, Optional
import json
import math
import re


def or_na(value: Optional[Any]) -> str:
    """
    Render an optional field for a prompt.

    Args:
        value: Field value (may be None or empty)

    Returns:
        The value as text, or "N/A" when missing
    """
    if value is None or value == "":
        return "N/A"
    return str(value)


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with halves going up (52.5 -> 53).

    Python's round() uses banker's rounding, which would give 52.
    """
    return int(math.floor(value + 0.5))


def compact_json(value: Any) -> str:
    """Serialise without whitespace between tokens: '{"other":"x"}'."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def strip_code_fences(text: str) -> str:
    """Remove ```json / ``` delimiters that LLMs often wrap output in."""
    text = re.sub(r"```(?:json)?", "", text, flags=re.IGNORECASE)
    return text.strip()


def safe_filename(name: str) -> str:
    """Reduce an uploaded filename to a safe basename."""
    name = name.replace("\\", "/").rsplit("/", 1)[-1]
    name = re.sub(r"[^\w.\-]", "_", name)
    return name or "upload"


def truncate_text(text: str, max_length: int = 200, suffix: str = "...") -> str:
    """
    Truncate text to maximum length.

    Args:
        text: Text to truncate
        max_length: Maximum length
        suffix: Suffix to add if truncated

    Returns:
        Truncated text
    """
    if len(text) <= max_length:
        return text
    return text[:max_length - len(suffix)] + suffix
