"""Pure metric functions over sampled selection outcomes.

All functions take a list of SelectionOutcome and return structured
metrics.  No side effects, no I/O.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from itertools import combinations
from typing import TYPE_CHECKING

from enchant_gen.analysis.models import EffectMetrics, SelectionSummary

if TYPE_CHECKING:
    from enchant_gen.analysis.sampler import SelectionOutcome
    from enchant_gen.engine.catalog import EffectCatalog


def compute_summary(outcomes: list[SelectionOutcome]) -> SelectionSummary:
    """Aggregate pick counts across a batch."""
    total = len(outcomes)
    if total == 0:
        return SelectionSummary(
            total_runs=0, empty_runs=0, empty_rate=0.0, mean_picks=0.0, max_picks=0,
        )

    sizes = [len(o.picks) for o in outcomes]
    empty = sum(1 for s in sizes if s == 0)

    return SelectionSummary(
        total_runs=total,
        empty_runs=empty,
        empty_rate=empty / total,
        mean_picks=sum(sizes) / total,
        max_picks=max(sizes),
        picks_histogram=dict(sorted(Counter(sizes).items())),
    )


def compute_effect_metrics(outcomes: list[SelectionOutcome]) -> list[EffectMetrics]:
    """Per-effect pick rate and level distribution, sorted by effect id."""
    total = len(outcomes)
    if total == 0:
        return []

    level_counts: dict[str, Counter[int]] = defaultdict(Counter)
    for outcome in outcomes:
        for effect_id, level in outcome.picks:
            level_counts[effect_id][level] += 1

    results: list[EffectMetrics] = []
    for effect_id in sorted(level_counts):
        counts = level_counts[effect_id]
        picked = sum(counts.values())
        results.append(
            EffectMetrics(
                effect_id=effect_id,
                times_picked=picked,
                pick_rate=picked / total,
                mean_level=sum(level * n for level, n in counts.items()) / picked,
                level_counts=dict(sorted(counts.items())),
            )
        )
    return results


def find_conflicting_outcomes(
    outcomes: list[SelectionOutcome],
    catalog: EffectCatalog,
) -> list[SelectionOutcome]:
    """Outcomes containing two picks that conflict with each other.

    Ids missing from *catalog* are only checked for duplicates.
    """
    bad: list[SelectionOutcome] = []
    for outcome in outcomes:
        for a, b in combinations(outcome.effect_ids, 2):
            if a == b:
                bad.append(outcome)
                break
            rec_a = catalog.get_effect(a)
            rec_b = catalog.get_effect(b)
            if rec_a is not None and rec_b is not None and rec_a.conflicts_with(rec_b):
                bad.append(outcome)
                break
    return bad
