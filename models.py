# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Data models for the pitch mix report."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Report models
# ---------------------------------------------------------------------------

class PitchTypeCount(BaseModel):
    """How many times one pitch type was thrown."""
    name: str = Field(min_length=1)
    count: int = Field(ge=1)


class CategoryBreakdown(BaseModel):
    """Pitch types within one category, most-thrown first."""
    category: str = Field(min_length=1)
    total: int = Field(ge=1)
    pitches: list[PitchTypeCount] = Field(default_factory=list)


class PitcherBreakdown(BaseModel):
    """One pitcher's pitch mix, categories in display order."""
    name: str
    team: str = ""
    total: int = Field(ge=1)
    categories: list[CategoryBreakdown] = Field(default_factory=list)


class PitchMixReport(BaseModel):
    """Pitch mix for every pitcher in a game, pitchers sorted by name."""
    game_pk: Optional[int] = None
    total_pitches: int = Field(ge=0, default=0)
    pitchers: list[PitcherBreakdown] = Field(default_factory=list)
