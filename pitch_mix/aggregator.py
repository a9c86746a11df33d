# /// script
# requires-python = ">=3.12"
# dependencies = []
# ///
"""Per-pitcher pitch counts from MLB Stats API play-by-play.

Walks ``liveData.plays.allPlays``, classifies every pitch event and
counts it under ``table[pitcher][category][pitch_name]``.  Malformed plays
or events are skipped one at a time; they never abort the walk.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pitch_mix.classifier import classify
from pitch_mix.extractor import extract_raw_label, is_pitch_event
from pitch_mix.lookup import dig, first_str

logger = logging.getLogger(__name__)

UNKNOWN_PITCHER = "Unknown pitcher"

PLAYS_PATH = ("liveData", "plays", "allPlays")

AggregationTable = dict[str, dict[str, dict[str, int]]]


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class FeedShapeError(Exception):
    """Raised when a game feed lacks the structure needed to summarize it."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)


# ---------------------------------------------------------------------------
# Feed access
# ---------------------------------------------------------------------------

def extract_plays(feed: Any) -> list[Any]:
    """Return the play list at ``liveData.plays.allPlays``.

    An empty list is a valid game with no plays yet.

    Raises:
        FeedShapeError: If the path is missing or is not a list.
    """
    plays = dig(feed, *PLAYS_PATH)
    field = ".".join(PLAYS_PATH)
    if plays is None:
        raise FeedShapeError(f"Game feed has no {field}", field=field)
    if not isinstance(plays, list):
        raise FeedShapeError(
            f"Expected a list at {field}, got {type(plays).__name__}",
            field=field,
        )
    return plays


def pitcher_name(play: Any) -> str:
    """Return the pitcher's display name for *play*."""
    name = first_str(play, ("matchup", "pitcher", "fullName"))
    if not name or not name.strip():
        return UNKNOWN_PITCHER
    return name


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------

def _play_events(play: Any, index: int) -> list[Any]:
    if not isinstance(play, Mapping):
        logger.debug("Skipping play %d: not an object", index)
        return []
    events = play.get("playEvents")
    if events is None:
        return []
    if not isinstance(events, list):
        logger.debug("Skipping play %d: playEvents is %s",
                     index, type(events).__name__)
        return []
    return events


def aggregate(plays: Iterable[Any]) -> AggregationTable:
    """Count pitch types per pitcher across *plays*.

    Args:
        plays: Play dicts, as found in ``liveData.plays.allPlays``.

    Returns:
        Nested dict ``pitcher -> category -> pitch name -> count``.  Only
        pitches actually seen create entries, so every count is at least 1.
    """
    table: AggregationTable = {}

    for index, play in enumerate(plays):
        events = _play_events(play, index)
        if not events:
            continue
        pitcher = pitcher_name(play)

        for event in events:
            if not is_pitch_event(event):
                continue
            name, category = classify(extract_raw_label(event))
            by_name = table.setdefault(pitcher, {}).setdefault(category, {})
            by_name[name] = by_name.get(name, 0) + 1

    logger.debug("Aggregated pitches for %d pitcher(s)", len(table))
    return table


def pitcher_total(table: AggregationTable, pitcher: str) -> int:
    """Return the total pitch count for *pitcher* (0 if absent)."""
    return sum(
        count
        for by_name in table.get(pitcher, {}).values()
        for count in by_name.values()
    )


# ---------------------------------------------------------------------------
# Team association
# ---------------------------------------------------------------------------

def pitcher_teams(
    plays: Iterable[Any],
    game_data: Mapping[str, Any] | None = None,
) -> dict[str, str]:
    """Map each pitcher's name to the name of their team.

    Uses ``matchup.pitcher.team.name`` when the play carries it.  Otherwise
    the fielding side is derived from the half inning (top = home team
    fielding) and looked up in ``gameData.teams``.  Pitchers whose team
    cannot be resolved are left out.
    """
    teams: dict[str, str] = {}

    for play in plays:
        if not isinstance(play, Mapping):
            continue
        pitcher = pitcher_name(play)
        if pitcher in teams:
            continue

        team = first_str(play, ("matchup", "pitcher", "team", "name"))
        if team is None and game_data is not None:
            is_top = dig(play, "about", "isTopInning")
            if isinstance(is_top, bool):
                side = "home" if is_top else "away"
                team = first_str(game_data, ("teams", side, "name"))

        if team:
            teams[pitcher] = team

    return teams
