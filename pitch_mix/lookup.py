# /// script
# requires-python = ">=3.12"
# dependencies = []
# ///
"""Optional-path lookups into MLB Stats API JSON documents.

The feed is deeply nested and any level may be missing, ``null``, or the
wrong type.  These helpers walk a path and return ``None`` instead of
raising, so extraction code reads as an ordered list of paths with a
final fallback.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

KeyPath = tuple[str, ...]


def dig(document: Any, *keys: str) -> Any | None:
    """Return the value at ``document[k1][k2]...``, or ``None`` if any step is missing.

    A step that lands on something other than a mapping also yields
    ``None``.
    """
    current = document
    for key in keys:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
        if current is None:
            return None
    return current


def first_str(document: Any, *paths: KeyPath, default: str | None = None) -> str | None:
    """Return the first string found along *paths*, tried left to right.

    Args:
        document: The JSON document to search.
        *paths: Key paths, e.g. ``("details", "type", "description")``.
        default: Returned when no path holds a string.
    """
    for path in paths:
        value = dig(document, *path)
        if isinstance(value, str):
            return value
    return default
