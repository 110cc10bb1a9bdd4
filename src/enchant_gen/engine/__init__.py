"""Selection engine: catalog, random source, predicates and the picking loop."""

from enchant_gen.engine.catalog import CatalogSettings, DefaultPolicy, EffectCatalog
from enchant_gen.engine.enchanter import Enchanter, as_effect_map
from enchant_gen.engine.predicates import (
    always_add_if_book,
    any_effect,
    discoverable,
    discoverable_and_not_treasure,
    never_force,
)
from enchant_gen.engine.rng import SelectionRNG
from enchant_gen.engine.selection import (
    LevelStrategy,
    WeightedCandidate,
    generate_candidates,
    pick_weighted,
    randomize_level,
    round_half_up,
    select,
)

__all__ = [
    # catalog
    "CatalogSettings",
    "DefaultPolicy",
    "EffectCatalog",
    # enchanter
    "Enchanter",
    "as_effect_map",
    # predicates
    "always_add_if_book",
    "any_effect",
    "discoverable",
    "discoverable_and_not_treasure",
    "never_force",
    # rng
    "SelectionRNG",
    # selection
    "LevelStrategy",
    "WeightedCandidate",
    "generate_candidates",
    "pick_weighted",
    "randomize_level",
    "round_half_up",
    "select",
]
