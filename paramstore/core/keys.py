"""
Dotted key parsing.

A dotted key such as ``"system.audio.volume"`` names a path from the
document root through nested objects down to a string leaf. Keys are
split once into an immutable tuple of segments; the caller's string is
never modified.
"""

from __future__ import annotations

from typing import Any

from paramstore.core.errors import InvalidArgumentError

SEPARATOR = "."


def split_key(key: Any) -> tuple[str, ...]:
    """
    Split a dotted key into its segments.

    Args:
        key: Dotted key, e.g. "system.audio.volume" or "volume"

    Returns:
        Tuple of non-empty segment names, in root-to-leaf order

    Raises:
        InvalidArgumentError: If key is not a non-empty string or
            contains an empty segment
    """
    if not isinstance(key, str):
        raise InvalidArgumentError(f"Key must be a string, got {type(key).__name__}")
    if not key:
        raise InvalidArgumentError("Key must not be empty")

    segments = tuple(key.split(SEPARATOR))
    if any(segment == "" for segment in segments):
        raise InvalidArgumentError(f"Key has an empty segment: {key!r}")
    return segments


def join_key(segments: tuple[str, ...]) -> str:
    """Join segments back into a dotted key."""
    return SEPARATOR.join(segments)
