# /// script
# requires-python = ">=3.12"
# dependencies = ["pytest>=7.0", "pydantic>=2.0"]
# ///
"""Tests for the report_renderer feature.

Validates pitch_mix/report.py:
  1. Pitchers are listed alphabetically with their total pitch count
  2. Preferred categories come first, remaining categories alphabetically
  3. Pitch names sort by descending count, ties by name
  4. Line formatting for pitcher, category and pitch lines
  5. Structured PitchMixReport model
  6. summarize() runs aggregate-then-render over raw plays
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest
from pydantic import ValidationError

from models import PitchMixReport, PitchTypeCount
from pitch_mix.report import (
    PREFERRED_CATEGORIES,
    build_report,
    order_categories,
    order_pitches,
    render,
    render_report,
    summarize,
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def two_pitcher_table():
    """One pitcher with 3 fastballs + 1 slider, another with 2 curveballs."""
    return {
        "Zack Wheeler": {
            "breaking ball": {"slider": 1},
            "heater": {"fastball": 3},
        },
        "Aaron Nola": {
            "breaking ball": {"curveball": 2},
        },
    }


def _pitcher_lines(lines):
    return [line for line in lines if line and not line.startswith(" ")]


# ===========================================================================
# Step 1: Pitcher order and totals
# ===========================================================================

class TestStep1Pitchers:
    def test_alphabetical(self, two_pitcher_table):
        lines = render(two_pitcher_table)
        headers = _pitcher_lines(lines)
        assert headers[0].startswith("Aaron Nola")
        assert headers[1].startswith("Zack Wheeler")

    def test_totals(self, two_pitcher_table):
        headers = _pitcher_lines(render(two_pitcher_table))
        assert headers == [
            f"{'Aaron Nola':<13} ( 2)",
            f"{'Zack Wheeler':<13} ( 4)",
        ]

    def test_single_fastball(self):
        lines = render({"Jane Doe": {"fastball": {"fastball": 1}}})
        assert lines == [
            "Jane Doe      ( 1)",
            "  fastball      ( 1)",
            "    fastball      1",
            "",
        ]

    def test_empty_table(self):
        assert render({}) == []

    def test_deterministic(self, two_pitcher_table):
        assert render(two_pitcher_table) == render(dict(reversed(two_pitcher_table.items())))


# ===========================================================================
# Step 2: Category order
# ===========================================================================

class TestStep2Categories:
    def test_preferred_order_constant(self):
        assert PREFERRED_CATEGORIES == ("heater", "breaking ball", "offspeed")

    def test_preferred_first_then_alphabetical(self):
        ordered = order_categories(
            ["other", "offspeed", "fastball", "heater", "Ball", "breaking ball"]
        )
        assert ordered == ["heater", "breaking ball", "offspeed", "Ball", "fastball", "other"]

    def test_only_present_categories(self):
        assert order_categories(["offspeed", "changeup"]) == ["offspeed", "changeup"]

    def test_heater_before_breaking_ball(self, two_pitcher_table):
        lines = render(two_pitcher_table)
        wheeler = lines.index(f"{'Zack Wheeler':<13} ( 4)")
        block = lines[wheeler:]
        heater = block.index(f"  {'heater':<13} ( 3)")
        breaking = block.index(f"  {'breaking ball':<13} ( 1)")
        assert heater < breaking


# ===========================================================================
# Step 3: Pitch order
# ===========================================================================

class TestStep3Pitches:
    def test_descending_count(self):
        assert order_pitches({"sinker": 1, "fastball": 5, "cutter": 3}) == [
            ("fastball", 5), ("cutter", 3), ("sinker", 1),
        ]

    def test_ties_by_name(self):
        assert order_pitches({"sinker": 2, "cutter": 2, "fastball": 2}) == [
            ("cutter", 2), ("fastball", 2), ("sinker", 2),
        ]

    def test_rendered_within_category(self):
        lines = render({"A": {"heater": {"sinker": 2, "fastball": 7, "cutter": 2}}})
        assert lines[2:5] == [
            f"    {'fastball':<12}  7",
            f"    {'cutter':<12}  2",
            f"    {'sinker':<12}  2",
        ]


# ===========================================================================
# Step 4: Formatting
# ===========================================================================

class TestStep4Formatting:
    def test_full_block(self, two_pitcher_table):
        assert render(two_pitcher_table) == [
            "Aaron Nola    ( 2)",
            "  breaking ball ( 2)",
            "    curveball     2",
            "",
            "Zack Wheeler  ( 4)",
            "  heater        ( 3)",
            "    fastball      3",
            "  breaking ball ( 1)",
            "    slider        1",
            "",
        ]

    def test_wide_counts_not_truncated(self):
        lines = render({"A": {"heater": {"fastball": 104}}})
        assert lines[0] == "A             (104)"
        assert lines[2] == "    fastball     104"

    def test_long_names_not_truncated(self):
        name = "Christopher Longname-Smith"
        lines = render({name: {"heater": {"fastball": 1}}})
        assert lines[0] == f"{name} ( 1)"


# ===========================================================================
# Step 5: Structured report
# ===========================================================================

class TestStep5BuildReport:
    def test_structure(self, two_pitcher_table):
        report = build_report(two_pitcher_table, game_pk=813026)
        assert isinstance(report, PitchMixReport)
        assert report.game_pk == 813026
        assert report.total_pitches == 6
        assert [p.name for p in report.pitchers] == ["Aaron Nola", "Zack Wheeler"]

        wheeler = report.pitchers[1]
        assert wheeler.total == 4
        assert [c.category for c in wheeler.categories] == ["heater", "breaking ball"]
        assert [c.total for c in wheeler.categories] == [3, 1]
        assert wheeler.categories[0].pitches == [PitchTypeCount(name="fastball", count=3)]

    def test_teams_attached(self, two_pitcher_table):
        report = build_report(two_pitcher_table, teams={"Aaron Nola": "Philadelphia Phillies"})
        assert report.pitchers[0].team == "Philadelphia Phillies"
        assert report.pitchers[1].team == ""

    def test_render_report_matches_render(self, two_pitcher_table):
        assert render_report(build_report(two_pitcher_table)) == render(two_pitcher_table)

    def test_model_dump_is_json_ready(self, two_pitcher_table):
        data = build_report(two_pitcher_table).model_dump()
        assert data["pitchers"][0]["categories"][0]["pitches"][0] == {
            "name": "curveball", "count": 2,
        }

    def test_zero_count_rejected(self):
        with pytest.raises(ValidationError):
            PitchTypeCount(name="fastball", count=0)


# ===========================================================================
# Step 6: summarize
# ===========================================================================

class TestStep6Summarize:
    def test_aggregate_then_render(self):
        plays = [{
            "matchup": {"pitcher": {"fullName": "Jane Doe"}},
            "playEvents": [
                {"isPitch": True, "details": {"type": {"code": "FF", "description": "FF"}}},
                {"isPitch": False, "details": {"description": "Pickoff Attempt 1B"}},
            ],
        }]
        assert summarize(plays) == "\n".join([
            "Jane Doe      ( 1)",
            "  fastball      ( 1)",
            "    fastball      1",
            "",
        ])

    def test_no_plays(self):
        assert summarize([]) == ""
