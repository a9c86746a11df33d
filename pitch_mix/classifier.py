# /// script
# requires-python = ">=3.12"
# dependencies = []
# ///
"""Pitch label classification.

Maps the raw pitch label found on a play event -- a Statcast code such as
``"FF"`` or a description such as ``"Four-Seam Fastball"`` -- to a
canonical ``(name, category)`` pair.  Rules are tried in order and the
first match wins:

1. Empty label -> ``("unknown", "unknown")``.
2. Exact pitch code (case-insensitive).  Codes carry no separate
   category, so the category is the pitch name.
3. Keyword contained in the lowercased label, each rule naming a coarse
   category ("heater", "breaking ball", "offspeed", "other").
4. Anything else passes through unchanged as both name and category, so
   unfamiliar pitches still show up in the report.
"""

from __future__ import annotations

from typing import NamedTuple

UNKNOWN = "unknown"

HEATER = "heater"
BREAKING_BALL = "breaking ball"
OFFSPEED = "offspeed"
OTHER = "other"


class CanonicalPitch(NamedTuple):
    name: str
    category: str


# Exact codes, matched against the uppercased label.
PITCH_CODES: tuple[tuple[str, str], ...] = (
    ("FF", "fastball"),
    ("FA", "fastball"),
    ("FT", "fastball"),
    ("FF/FT", "fastball"),
    ("SI", "sinker"),
    ("SL", "slider"),
    ("CU", "curveball"),
    ("KC", "curveball"),
    ("CH", "changeup"),
    ("FC", "cutter"),
    ("FS", "splitter"),
    ("IN", "intentional"),
)

# Substring rules, matched against the lowercased label.  Order matters:
# "knuckle curve" must be tried before "curve".
KEYWORD_RULES: tuple[tuple[str, CanonicalPitch], ...] = (
    ("fast", CanonicalPitch("fastball", HEATER)),
    ("slider", CanonicalPitch("slider", BREAKING_BALL)),
    ("knuckle curve", CanonicalPitch("knuckle curve", BREAKING_BALL)),
    ("curve", CanonicalPitch("curveball", BREAKING_BALL)),
    ("change", CanonicalPitch("changeup", OFFSPEED)),
    ("sinker", CanonicalPitch("sinker", HEATER)),
    ("cutter", CanonicalPitch("cutter", HEATER)),
    ("splitter", CanonicalPitch("splitter", OFFSPEED)),
    ("sweeper", CanonicalPitch("sweeper", BREAKING_BALL)),
    ("knuckleball", CanonicalPitch("knuckleball", OTHER)),
)


def _match_code(label: str) -> CanonicalPitch | None:
    code = label.upper()
    for key, name in PITCH_CODES:
        if code == key:
            return CanonicalPitch(name, name)
    return None


def _match_keyword(label: str) -> CanonicalPitch | None:
    low = label.lower()
    for keyword, pitch in KEYWORD_RULES:
        if keyword in low:
            return pitch
    return None


def classify(raw_label: str) -> CanonicalPitch:
    """Classify a raw pitch label into a canonical ``(name, category)`` pair.

    Never raises; a non-string label is treated as empty.

    Examples::

        >>> classify("FF")
        CanonicalPitch(name='fastball', category='fastball')
        >>> classify("Knuckle Curve")
        CanonicalPitch(name='knuckle curve', category='breaking ball')
        >>> classify("Eephus")
        CanonicalPitch(name='Eephus', category='Eephus')
    """
    label = raw_label.strip() if isinstance(raw_label, str) else ""
    if not label:
        return CanonicalPitch(UNKNOWN, UNKNOWN)

    pitch = _match_code(label) or _match_keyword(label)
    if pitch is not None:
        return pitch

    return CanonicalPitch(label, label)
