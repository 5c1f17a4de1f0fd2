# xgen_pptx2text/core/functions/utils.py
"""
Common utility module for text output limits
"""
from typing import Any, Optional

DEFAULT_MAX_CHARS = 50_000
MAX_OUTPUT_CHARS = 200_000
TRUNCATION_SUFFIX = "\n\n[... truncated, use max_chars to read more ...]"


def clamp_max_chars(
    value: Optional[Any],
    default: int = DEFAULT_MAX_CHARS,
    ceiling: int = MAX_OUTPUT_CHARS,
) -> int:
    """
    Resolve the effective output character cap.

    Anything that is not a positive integer (None, strings, floats, bools,
    zero or negatives) falls back to ``default``. Values above ``ceiling``
    are clamped to it.

    Args:
        value: Requested cap as received from the caller
        default: Cap used when nothing usable was requested
        ceiling: Hard upper bound

    Returns:
        Effective character cap
    """
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return min(default, ceiling)
    return min(value, ceiling)


def truncate_text(text: str, max_chars: int, suffix: str = TRUNCATION_SUFFIX) -> str:
    """
    Cut text to at most ``max_chars`` characters.

    Python strings index by code point, so the cut never splits a
    multi-byte character. The suffix is appended only when text was removed.
    """
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + suffix


__all__ = [
    "DEFAULT_MAX_CHARS",
    "MAX_OUTPUT_CHARS",
    "TRUNCATION_SUFFIX",
    "clamp_max_chars",
    "truncate_text",
]
