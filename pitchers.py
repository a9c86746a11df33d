# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Summarize pitch types per pitcher for a single MLB game.

Usage::

    # By game identifier
    uv run pitchers.py --game-pk 813026

    # Look the game up by date and team names (substring match)
    uv run pitchers.py --date 2025-06-01 --home Cubs --away Cardinals

    # From a saved feed, as JSON
    uv run pitchers.py --feed-file feed.json --json
"""

from __future__ import annotations

import argparse
import datetime
import json
import logging
import sys
from pathlib import Path
from typing import Any

from data.mlb_api import MLBApiError, find_game_pk, get_live_game_feed
from pitch_mix.aggregator import (
    FeedShapeError,
    aggregate,
    extract_plays,
    pitcher_teams,
)
from pitch_mix.report import build_report, render_report

logger = logging.getLogger("pitchers")


def _iso_date(value: str) -> str:
    try:
        datetime.date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid date {value!r} (format YYYY-MM-DD)"
        ) from None
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Summarize pitch types per pitcher for a single MLB game."
    )
    parser.add_argument(
        "--game-pk", type=int, default=None,
        help="Game primary key (gamePk) from the MLB API. "
             "If provided, date/team args are ignored.",
    )
    parser.add_argument(
        "--date", type=_iso_date, default=None,
        help="Date of the game YYYY-MM-DD (used to look up the game "
             "when --game-pk is not given)",
    )
    parser.add_argument(
        "--home", type=str, default=None,
        help="Home team name (substring match) for selecting the game on the date",
    )
    parser.add_argument(
        "--away", type=str, default=None,
        help="Away team name (substring match) for selecting the game on the date",
    )
    parser.add_argument(
        "--feed-file", type=Path, default=None, metavar="PATH",
        help="Read a saved game feed JSON instead of fetching one.",
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print the report as JSON.",
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Enable debug logging.",
    )
    return parser


def load_feed(args: argparse.Namespace) -> tuple[dict[str, Any], int | None]:
    """Return the game feed and its gamePk (if known) for the parsed args."""
    if args.feed_file is not None:
        with open(args.feed_file) as f:
            feed = json.load(f)
        game_pk = feed.get("gamePk") if isinstance(feed, dict) else None
        return feed, game_pk if isinstance(game_pk, int) else None

    game_pk = args.game_pk
    if game_pk is None:
        game_pk = find_game_pk(args.date, home=args.home, away=args.away)
    return get_live_game_feed(game_pk), game_pk


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.game_pk is None and args.feed_file is None and args.date is None:
        parser.error(
            "--date is required if --game-pk is not supplied (format YYYY-MM-DD)"
        )

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        feed, game_pk = load_feed(args)
        plays = extract_plays(feed)
    except (MLBApiError, ValueError, OSError, FeedShapeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    table = aggregate(plays)
    game_data = feed.get("gameData") if isinstance(feed.get("gameData"), dict) else None
    report = build_report(
        table,
        teams=pitcher_teams(plays, game_data),
        game_pk=game_pk,
    )
    logger.debug("Summarized %d pitch(es) for %d pitcher(s)",
                 report.total_pitches, len(report.pitchers))

    if args.json:
        print(json.dumps(report.model_dump(), indent=2))
    else:
        print()
        for line in render_report(report):
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
