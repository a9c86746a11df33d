# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Pitch mix report: ordering and console formatting.

Ordering rules:

- Pitchers ascending by name.
- Categories in the preferred order ("heater", "breaking ball",
  "offspeed"), then any others ascending.
- Pitch names within a category by descending count, ties ascending by
  name.

Example output::

    Jane Doe      ( 4)
      heater        ( 3)
        fastball      3
      breaking ball ( 1)
        slider        1

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from models import (
    CategoryBreakdown,
    PitcherBreakdown,
    PitchMixReport,
    PitchTypeCount,
)
from pitch_mix.aggregator import AggregationTable, aggregate
from pitch_mix.classifier import BREAKING_BALL, HEATER, OFFSPEED

PREFERRED_CATEGORIES: tuple[str, ...] = (HEATER, BREAKING_BALL, OFFSPEED)


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------

def order_categories(categories: Iterable[str]) -> list[str]:
    """Preferred categories first (if present), then the rest ascending."""
    present = set(categories)
    preferred = [c for c in PREFERRED_CATEGORIES if c in present]
    others = sorted(present.difference(PREFERRED_CATEGORIES))
    return preferred + others


def order_pitches(counts: Mapping[str, int]) -> list[tuple[str, int]]:
    """Sort ``(name, count)`` pairs by descending count, then name."""
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))


# ---------------------------------------------------------------------------
# Structured report
# ---------------------------------------------------------------------------

def build_report(
    table: AggregationTable,
    teams: Mapping[str, str] | None = None,
    game_pk: int | None = None,
) -> PitchMixReport:
    """Build the ordered :class:`PitchMixReport` for an aggregation table.

    Args:
        table: ``pitcher -> category -> pitch name -> count``.
        teams: Optional ``pitcher -> team name`` mapping.
        game_pk: Optional game identifier to record on the report.
    """
    teams = teams or {}
    pitchers: list[PitcherBreakdown] = []

    for pitcher in sorted(table):
        by_category = table[pitcher]
        categories = []
        for category in order_categories(by_category):
            pitches = [
                PitchTypeCount(name=name, count=count)
                for name, count in order_pitches(by_category[category])
            ]
            if not pitches:
                continue
            categories.append(CategoryBreakdown(
                category=category,
                total=sum(p.count for p in pitches),
                pitches=pitches,
            ))
        if not categories:
            continue
        pitchers.append(PitcherBreakdown(
            name=pitcher,
            team=teams.get(pitcher, ""),
            total=sum(c.total for c in categories),
            categories=categories,
        ))

    return PitchMixReport(
        game_pk=game_pk,
        total_pitches=sum(p.total for p in pitchers),
        pitchers=pitchers,
    )


# ---------------------------------------------------------------------------
# Text rendering
# ---------------------------------------------------------------------------

def render_report(report: PitchMixReport) -> list[str]:
    """Format a report as console lines, one blank line after each pitcher."""
    lines: list[str] = []
    for pitcher in report.pitchers:
        lines.append(f"{pitcher.name:<13} ({pitcher.total:>2})")
        for category in pitcher.categories:
            lines.append(f"  {category.category:<13} ({category.total:>2})")
            for pitch in category.pitches:
                lines.append(f"    {pitch.name:<12} {pitch.count:>2}")
        lines.append("")
    return lines


def render(table: AggregationTable) -> list[str]:
    """Render an aggregation table as ordered console lines."""
    return render_report(build_report(table))


def summarize(plays: Iterable[Any]) -> str:
    """Aggregate *plays* and render the report as a single string."""
    return "\n".join(render(aggregate(plays)))
