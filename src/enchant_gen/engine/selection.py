"""Effect selection -- candidate generation, level randomization and picking.

The three stages can be used separately or through
:class:`~enchant_gen.engine.enchanter.Enchanter`:

1. :func:`generate_candidates` lists, for every eligible record, the highest
   effect level whose range contains the requested power.
2. :func:`randomize_level` turns a requested level into the effective level
   actually rolled against, using the item's base potency.
3. :func:`select` draws one candidate by weight, then keeps drawing while a
   d50 roll stays at or under a halving level, dropping every candidate that
   conflicts with the latest pick before each draw.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Sequence

from enchant_gen.engine.catalog import EffectCatalog

if TYPE_CHECKING:
    from enchant_gen.engine.predicates import ForcePredicate, IncludePredicate
    from enchant_gen.engine.rng import SelectionRNG
    from enchant_gen.ir.effects import EffectRecord
    from enchant_gen.ir.items import ItemKind

logger = logging.getLogger(__name__)

# Continue-roll die: another pick happens while random_int(0, 49) <= level.
_CONTINUE_DIE_MAX = 49
# Maximum relative perturbation of the effective level (+/- 15%).
_PERTURBATION = 0.15


@dataclass(frozen=True)
class WeightedCandidate:
    """An effect record paired with one concrete level it could be granted at."""

    record: EffectRecord
    level: int

    @property
    def id(self) -> str:
        return self.record.id

    @property
    def weight(self) -> int:
        return self.record.weight


class LevelStrategy(str, Enum):
    """How the base-potency bonus is drawn in :func:`randomize_level`."""

    TWO_DRAWS = "TWO_DRAWS"
    """``1 + U[0, p//4] + U[0, p//4]`` -- peaked toward the middle."""

    SINGLE_DRAW = "SINGLE_DRAW"
    """``1 + U[0, 2*(p//4) + 1]`` -- flat over a slightly wider range."""


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


# ---------------------------------------------------------------------------
# Candidate generation
# ---------------------------------------------------------------------------

def generate_candidates(
    item: ItemKind,
    level: int,
    catalog: EffectCatalog | Iterable[EffectRecord],
    include: IncludePredicate,
    force: ForcePredicate,
) -> list[WeightedCandidate]:
    """List every effect that *level* could grant on *item*.

    Parameters
    ----------
    item:
        The target item kind.
    level:
        Power to match against each record's level ranges.
    catalog:
        An :class:`EffectCatalog` or any iterable of records.
    include:
        Records for which this returns False are skipped.
    force:
        When this returns True for *item*, category checks are skipped.

    Returns
    -------
    list[WeightedCandidate]
        At most one candidate per record, at the highest matching effect
        level, in catalog order.  Empty when *level* is below 1.
    """
    if level < 1:
        return []

    records = catalog.effects() if isinstance(catalog, EffectCatalog) else tuple(catalog)
    skip_category = force(item)

    candidates: list[WeightedCandidate] = []
    for record in records:
        if not include(record):
            continue
        if not skip_category and not record.category.matches(item):
            continue
        for effect_level in range(record.max_level, 0, -1):
            if record.accepts(effect_level, level):
                candidates.append(WeightedCandidate(record, effect_level))
                break

    logger.debug(
        "%d candidate(s) for %s at level %d", len(candidates), item.id, level,
    )
    return candidates


# ---------------------------------------------------------------------------
# Effective level
# ---------------------------------------------------------------------------

def randomize_level(
    level: int,
    base_potency: int,
    rng: SelectionRNG,
    strategy: LevelStrategy = LevelStrategy.TWO_DRAWS,
) -> int:
    """Return the effective level rolled for a requested *level*.

    Adds one plus a potency-dependent bonus, scales the result by a factor
    in ``(0.85, 1.15)`` drawn as the sum of two uniforms (so values near
    1.0 are most likely), rounds half-up and floors at 1.
    """
    quarter = base_potency // 4
    if strategy is LevelStrategy.SINGLE_DRAW:
        level += 1 + rng.random_int(0, quarter * 2 + 1)
    else:
        level += 1 + rng.random_int(0, quarter) + rng.random_int(0, quarter)

    multiplier = (rng.random_float() + rng.random_float() - 1) * _PERTURBATION
    return max(round_half_up(level + level * multiplier), 1)


# ---------------------------------------------------------------------------
# Picking
# ---------------------------------------------------------------------------

def pick_weighted(
    candidates: Sequence[WeightedCandidate],
    value: float,
) -> WeightedCandidate | None:
    """Walk *candidates*, subtracting weights from *value*.

    Returns the first candidate that drives *value* below zero, or ``None``
    if *value* was not smaller than the summed weights.
    """
    for candidate in candidates:
        value -= candidate.weight
        if value < 0:
            return candidate
    return None


def select(
    candidates: Sequence[WeightedCandidate],
    level: int,
    rng: SelectionRNG,
) -> list[WeightedCandidate]:
    """Pick a conflict-free subset of *candidates*.

    The first pick is unconditional.  Each further round continues while
    ``rng.random_int(0, 49) <= level``; it drops every remaining candidate
    that conflicts with the most recent pick, draws again by weight, and
    halves *level*.  *candidates* is not modified.

    Returns
    -------
    list[WeightedCandidate]
        Picks in the order they were drawn.  Empty, without consuming any
        random values, when *candidates* is empty.
    """
    if not candidates:
        return []

    remaining = list(candidates)
    total = sum(c.weight for c in remaining)

    first = pick_weighted(remaining, rng.random_float() * total)
    if first is None:
        logger.debug("First weighted draw missed (total=%s)", total)
        return []
    picks = [first]
    remaining.remove(first)
    total -= first.weight

    while rng.random_int(0, _CONTINUE_DIE_MAX) <= level:
        last = picks[-1].record
        kept: list[WeightedCandidate] = []
        for candidate in remaining:
            if last.conflicts_with(candidate.record):
                total -= candidate.weight
            else:
                kept.append(candidate)
        remaining = kept
        if not remaining:
            break

        picked = pick_weighted(remaining, rng.random_float() * total)
        if picked is not None:
            picks.append(picked)
            remaining.remove(picked)
            total -= picked.weight
        else:
            logger.debug("Weighted draw missed (total=%s), continuing", total)
        level //= 2

    return picks
