"""Readable labels for keys that have no translation."""

import re

_SEPARATORS = re.compile(r"[_\-\s]+")


def humanize_key(segment: str) -> str:
    """Turn a key segment into a display label.

    Underscores and dashes become spaces and the first character is
    upper-cased, e.g. "user_name" -> "User name".

    Args:
        segment: Last segment of a dotted key.

    Returns:
        Human-readable label.
    """
    words = _SEPARATORS.sub(" ", segment).strip()
    if not words:
        return segment
    return words[0].upper() + words[1:]
