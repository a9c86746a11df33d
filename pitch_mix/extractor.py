# /// script
# requires-python = ">=3.12"
# dependencies = []
# ///
"""Pitch event detection and raw label extraction for ``playEvents`` entries."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pitch_mix.lookup import first_str

UNKNOWN_LABEL = "unknown"

# Where a pitch event's label may live, most specific first.
LABEL_PATHS: tuple[tuple[str, ...], ...] = (
    ("details", "type", "description"),
    ("details", "description"),
)


def is_pitch_event(event: Any) -> bool:
    """Return True if *event* is an actual pitch.

    An explicit boolean ``isPitch`` flag wins.  Without one, the presence
    of ``pitchData`` marks a pitch.  Pickoffs, mound visits and
    substitutions carry neither.
    """
    if not isinstance(event, Mapping):
        return False
    flag = event.get("isPitch")
    if isinstance(flag, bool):
        return flag
    return "pitchData" in event


def extract_raw_label(event: Any) -> str:
    """Return the pitch type label of *event*, or ``"unknown"``."""
    return first_str(event, *LABEL_PATHS, default=UNKNOWN_LABEL)
