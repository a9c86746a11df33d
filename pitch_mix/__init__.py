# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Pitch mix summary -- classify and count pitch types per pitcher for one game."""

from pitch_mix.classifier import CanonicalPitch, classify
from pitch_mix.extractor import extract_raw_label, is_pitch_event
from pitch_mix.aggregator import (
    AggregationTable,
    FeedShapeError,
    aggregate,
    extract_plays,
    pitcher_teams,
)
from pitch_mix.report import build_report, render, render_report, summarize

__all__ = [
    "AggregationTable",
    "CanonicalPitch",
    "FeedShapeError",
    "aggregate",
    "build_report",
    "classify",
    "extract_plays",
    "extract_raw_label",
    "is_pitch_event",
    "pitcher_teams",
    "render",
    "render_report",
    "summarize",
]
