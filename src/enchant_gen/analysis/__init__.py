"""Selection analysis: batch sampling, distribution metrics and reports."""

from enchant_gen.analysis.metrics import (
    compute_effect_metrics,
    compute_summary,
    find_conflicting_outcomes,
)
from enchant_gen.analysis.models import EffectMetrics, SelectionSummary
from enchant_gen.analysis.report import generate_text_report
from enchant_gen.analysis.sampler import SelectionOutcome, sample_selections

__all__ = [
    "EffectMetrics",
    "SelectionOutcome",
    "SelectionSummary",
    "compute_effect_metrics",
    "compute_summary",
    "find_conflicting_outcomes",
    "generate_text_report",
    "sample_selections",
]
