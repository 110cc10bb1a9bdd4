"""Batch sampling -- roll the same request many times under consecutive seeds."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from enchant_gen.engine.predicates import discoverable_and_not_treasure, never_force
from enchant_gen.engine.rng import SelectionRNG

if TYPE_CHECKING:
    from enchant_gen.engine.enchanter import Enchanter
    from enchant_gen.engine.predicates import ForcePredicate, IncludePredicate
    from enchant_gen.ir.items import ItemKind


@dataclass
class SelectionOutcome:
    """Result of one sampled roll.

    Attributes
    ----------
    seed:
        Seed of the run's parent RNG.
    picks:
        ``(effect id, level)`` pairs in draw order.
    """

    seed: int
    picks: list[tuple[str, int]] = field(default_factory=list)

    @property
    def effect_ids(self) -> list[str]:
        return [effect_id for effect_id, _ in self.picks]


def sample_selections(
    enchanter: Enchanter,
    item: ItemKind,
    levels: int,
    n_runs: int,
    base_seed: int = 42,
    include: IncludePredicate = discoverable_and_not_treasure,
    force: ForcePredicate = never_force,
) -> list[SelectionOutcome]:
    """Roll *levels* on *item* ``n_runs`` times.

    Run ``i`` uses ``SelectionRNG(base_seed + i).fork("enchant")`` so a
    batch is reproducible and any single run can be replayed from its seed.
    """
    outcomes: list[SelectionOutcome] = []
    for seed in range(base_seed, base_seed + n_runs):
        rng = SelectionRNG(seed).fork("enchant")
        picks = enchanter.effects_with_levels(item, levels, rng, include, force)
        outcomes.append(
            SelectionOutcome(seed=seed, picks=[(p.id, p.level) for p in picks])
        )
    return outcomes
