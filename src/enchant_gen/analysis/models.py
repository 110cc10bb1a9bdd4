"""Pydantic v2 models for selection statistics.

These hold the structured output of a sampling batch: per-effect pick
metrics and whole-batch summary numbers.  All serialise to/from JSON.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class EffectMetrics(BaseModel):
    """How often one effect was picked across a batch of rolls."""

    effect_id: str
    times_picked: int
    """Runs in which this effect was among the picks."""
    pick_rate: float
    """times_picked / total runs."""
    mean_level: float
    """Average granted level among runs that picked the effect."""
    level_counts: dict[int, int] = Field(default_factory=dict)
    """Granted level -> number of runs."""


class SelectionSummary(BaseModel):
    """Aggregate statistics for a batch of rolls."""

    total_runs: int
    empty_runs: int
    """Runs that produced no effects."""
    empty_rate: float
    mean_picks: float
    """Average number of effects per run."""
    max_picks: int
    picks_histogram: dict[int, int] = Field(default_factory=dict)
    """Number of picks -> number of runs."""
