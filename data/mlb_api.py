# /// script
# requires-python = ">=3.12"
# dependencies = []
# ///
"""Client for the MLB Stats API (statsapi.mlb.com).

Fetches the live game feed for a single game and resolves a game's
``gamePk`` from a schedule date plus optional home/away team-name filters.
All functions return plain Python dicts/lists parsed from the API's JSON
responses.  Every request is a single attempt; callers decide what to do
with a failure.

Usage::

    from data.mlb_api import find_game_pk, get_live_game_feed

    game_pk = find_game_pk("2025-06-01", home="Cubs")
    feed = get_live_game_feed(game_pk)
"""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.request
from typing import Any

import config

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class MLBApiError(Exception):
    """Base exception for MLB Stats API errors."""

    def __init__(self, message: str, status_code: int | None = None,
                 url: str | None = None):
        self.status_code = status_code
        self.url = url
        super().__init__(message)


class MLBApiNotFoundError(MLBApiError):
    """Raised when a resource is not found (404)."""


class MLBApiConnectionError(MLBApiError):
    """Raised when a connection to the API cannot be established."""


class MLBApiTimeoutError(MLBApiError):
    """Raised when a request to the API times out."""


class GameNotFoundError(ValueError):
    """Raised when no scheduled game matches a date and team filters."""

    def __init__(self, date: str, home: str | None = None,
                 away: str | None = None):
        self.date = date
        self.home = home
        self.away = away
        super().__init__(
            f"no matching game found for date {date} and filters "
            f"home={home!r} away={away!r}"
        )


# ---------------------------------------------------------------------------
# Low-level HTTP helpers
# ---------------------------------------------------------------------------

def _fetch_json(url: str, timeout: float | None = None) -> dict[str, Any]:
    """Fetch JSON from *url* in a single attempt.

    Args:
        url: Full URL to fetch.
        timeout: Request timeout in seconds.  Defaults to the configured
            timeout (see :func:`config.get_timeout`).

    Returns:
        Parsed JSON response as a dict.

    Raises:
        MLBApiNotFoundError: If the server returns 404.
        MLBApiTimeoutError: If the request times out.
        MLBApiConnectionError: If the server is unreachable.
        MLBApiError: For other HTTP errors or an undecodable body.
    """
    if timeout is None:
        timeout = config.get_timeout()

    req = urllib.request.Request(url)
    req.add_header("Accept", "application/json")
    req.add_header("User-Agent", config.get_user_agent())

    logger.debug("GET %s", url)
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            data = resp.read()
    except urllib.error.HTTPError as exc:
        if exc.code == 404:
            raise MLBApiNotFoundError(
                f"Resource not found: {url}",
                status_code=404,
                url=url,
            ) from exc
        raise MLBApiError(
            f"HTTP {exc.code} from {url}",
            status_code=exc.code,
            url=url,
        ) from exc
    except urllib.error.URLError as exc:
        if isinstance(exc.reason, TimeoutError):
            raise MLBApiTimeoutError(
                f"Request timed out: {url}", url=url
            ) from exc
        raise MLBApiConnectionError(
            f"Connection failed: {exc.reason}", url=url
        ) from exc
    except TimeoutError as exc:
        raise MLBApiTimeoutError(f"Request timed out: {url}", url=url) from exc
    except OSError as exc:
        raise MLBApiConnectionError(
            f"Connection error: {exc}", url=url
        ) from exc

    try:
        return json.loads(data)
    except ValueError as exc:
        raise MLBApiError(f"Invalid JSON from {url}", url=url) from exc


def _build_url(version: str, path: str,
               params: dict[str, Any] | None = None) -> str:
    """Build a full MLB Stats API URL.

    Args:
        version: API version (e.g. ``"v1"`` or ``"v1.1"``).
        path: Resource path (e.g. ``"game/813026/feed/live"``).
        params: Optional query parameters; ``None`` values are dropped.

    Returns:
        The full URL string.
    """
    url = f"{config.get_base_url()}/{version}/{path}"
    if params:
        filtered = {k: v for k, v in params.items() if v is not None}
        if filtered:
            query = "&".join(f"{k}={v}" for k, v in filtered.items())
            url = f"{url}?{query}"
    return url


# ---------------------------------------------------------------------------
# Live game feed
# ---------------------------------------------------------------------------

def get_live_game_feed(
    game_pk: int,
    fields: str | None = None,
) -> dict[str, Any]:
    """Fetch the live game feed for a game.

    The feed carries the full play-by-play under
    ``liveData.plays.allPlays`` along with game metadata in ``gameData``.

    Args:
        game_pk: The unique game identifier (gamePk).
        fields: Optional comma-separated field filter to reduce response
            size (e.g. ``"gameData,liveData.plays"``).

    Returns:
        The game feed response dict.

    Raises:
        MLBApiNotFoundError: If the game does not exist.
        MLBApiError: On other API errors.
    """
    params = {"fields": fields} if fields else None
    url = _build_url("v1.1", f"game/{game_pk}/feed/live", params)
    logger.info("Fetching game feed for gamePk=%s", game_pk)
    return _fetch_json(url)


# ---------------------------------------------------------------------------
# Schedule
# ---------------------------------------------------------------------------

def get_schedule_by_date(
    date: str,
    sport_id: int = 1,
) -> list[dict[str, Any]]:
    """Fetch the game schedule for a given date.

    Args:
        date: Date string in ``YYYY-MM-DD`` format.
        sport_id: Sport ID (``1`` for MLB).

    Returns:
        A flat list of game dicts from all matching dates.  Each game
        dict contains ``gamePk``, ``status`` and ``teams`` (with ``away``
        and ``home``), among others.

    Raises:
        MLBApiError: On API errors.
    """
    url = _build_url("v1", "schedule", {"sportId": sport_id, "date": date})
    data = _fetch_json(url)

    games: list[dict[str, Any]] = []
    for date_entry in data.get("dates") or []:
        games.extend(date_entry.get("games") or [])
    return games


def _team_name(game: dict[str, Any], side: str) -> str:
    team = game.get("teams", {}).get(side, {}).get("team", {})
    name = team.get("name")
    return name.lower() if isinstance(name, str) else ""


def _matches(name: str, team_filter: str | None) -> bool:
    if team_filter is None:
        return True
    return team_filter.strip().lower() in name


def find_game_pk(
    date: str,
    home: str | None = None,
    away: str | None = None,
) -> int:
    """Find the gamePk of the first game on *date* matching the filters.

    Team filters are case-insensitive substrings of the full team name
    (``"cubs"`` matches ``"Chicago Cubs"``).  A missing filter matches
    any team.

    Args:
        date: Date string in ``YYYY-MM-DD`` format.
        home: Optional home-team name filter.
        away: Optional away-team name filter.

    Returns:
        The gamePk of the first matching game.

    Raises:
        GameNotFoundError: If no game on that date matches.
        MLBApiError: On API errors.
    """
    for game in get_schedule_by_date(date):
        if not _matches(_team_name(game, "home"), home):
            continue
        if not _matches(_team_name(game, "away"), away):
            continue
        game_pk = game.get("gamePk")
        if isinstance(game_pk, int) and not isinstance(game_pk, bool):
            logger.info("Resolved %s (home=%r away=%r) to gamePk=%d",
                        date, home, away, game_pk)
            return game_pk

    raise GameNotFoundError(date, home, away)
