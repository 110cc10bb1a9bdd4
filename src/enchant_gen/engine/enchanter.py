"""Enchanter -- the convenience entry point tying catalog and selection together."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from enchant_gen.engine.catalog import EffectCatalog
from enchant_gen.engine.predicates import discoverable_and_not_treasure, never_force
from enchant_gen.engine.selection import (
    LevelStrategy,
    WeightedCandidate,
    generate_candidates,
    randomize_level,
    select,
)

if TYPE_CHECKING:
    from enchant_gen.engine.predicates import ForcePredicate, IncludePredicate
    from enchant_gen.engine.rng import SelectionRNG
    from enchant_gen.ir.items import ItemKind

logger = logging.getLogger(__name__)


class Enchanter:
    """Rolls effects for items against an :class:`EffectCatalog`.

    This does not model an enchanting table or an anvil; it answers "which
    effects, at which levels, would *levels* worth of power put on this
    item?"  Applying the answer to a real item is up to the caller.

    Parameters
    ----------
    catalog:
        Catalog to draw records and base potency from.  Defaults to a new
        catalog backed by the shared default tables.
    strategy:
        How the base-potency bonus of the effective level is drawn.

    Usage::

        enchanter = Enchanter()
        sword = get_item("minecraft:diamond_sword")
        effects = enchanter.enchant(sword, 30, SelectionRNG(seed=1))
        # {"minecraft:sharpness": 4, "minecraft:unbreaking": 3}
    """

    def __init__(
        self,
        catalog: EffectCatalog | None = None,
        strategy: LevelStrategy = LevelStrategy.TWO_DRAWS,
    ) -> None:
        self.catalog = catalog if catalog is not None else EffectCatalog()
        self.strategy = strategy

    def weighted_effects(
        self,
        item: ItemKind,
        level: int,
        include: IncludePredicate = discoverable_and_not_treasure,
        force: ForcePredicate = never_force,
    ) -> list[WeightedCandidate]:
        """Every effect *level* could grant on *item*, without randomization."""
        return generate_candidates(item, level, self.catalog, include, force)

    def effects_with_levels(
        self,
        item: ItemKind,
        levels: int,
        rng: SelectionRNG,
        include: IncludePredicate = discoverable_and_not_treasure,
        force: ForcePredicate = never_force,
    ) -> list[WeightedCandidate]:
        """Randomize *levels* for *item*, then pick a conflict-free effect set.

        Parameters
        ----------
        item:
            The item to roll effects for.
        levels:
            Requested power.  Values of 0 or less produce no effects.
        rng:
            Caller-owned random source.
        include:
            Which records to consider.  Use
            :func:`~enchant_gen.engine.predicates.discoverable` to allow
            treasure effects.
        force:
            Which items skip the category check.  Use
            :func:`~enchant_gen.engine.predicates.always_add_if_book` for
            book-style carriers.

        Returns
        -------
        list[WeightedCandidate]
            Picks in draw order.
        """
        if levels <= 0:
            return []

        potency = self.catalog.base_potency(item)
        effective = randomize_level(levels, potency, rng, self.strategy)
        candidates = self.weighted_effects(item, effective, include, force)
        picks = select(candidates, effective, rng)

        logger.debug(
            "Rolled %s: requested=%d potency=%d effective=%d picks=%s",
            item.id, levels, potency, effective,
            [(p.id, p.level) for p in picks],
        )
        return picks

    def enchant(
        self,
        item: ItemKind,
        levels: int,
        rng: SelectionRNG,
        include: IncludePredicate = discoverable_and_not_treasure,
        force: ForcePredicate = never_force,
    ) -> dict[str, int]:
        """Like :meth:`effects_with_levels`, as an ``effect id -> level`` map."""
        return as_effect_map(self.effects_with_levels(item, levels, rng, include, force))


def as_effect_map(picks: list[WeightedCandidate]) -> dict[str, int]:
    """Convert picks into the ``effect id -> level`` form hosts store."""
    return {pick.id: pick.level for pick in picks}
