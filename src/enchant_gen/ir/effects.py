"""Effect records -- the weighted, category-bound definitions the engine picks from."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from .categories import Category
from .range_functions import AddToMin, RangeFunction


class EffectRecord(BaseModel):
    """Complete definition of one selectable effect.

    Records are immutable once built.  Two records refer to the same effect
    when their ``id`` values are equal; conflict checks and catalog lookups
    only ever compare ids.
    """

    model_config = {"frozen": True}

    id: str
    """Unique namespaced identifier (e.g. 'minecraft:sharpness')."""

    weight: int = Field(gt=0)
    """Relative likelihood of being picked among the eligible candidates."""

    category: Category
    """Which item kinds this effect may land on."""

    min_bound: RangeFunction
    """Lowest power that still grants a given effect level."""

    max_bound: RangeFunction
    """Highest power that still grants a given effect level."""

    incompatible: frozenset[str] = frozenset()
    """Ids this effect cannot share an item with.

    Only one side of a pair needs to list the other.
    """

    max_level: int = Field(default=1, ge=1)
    """Highest effect level that can be rolled."""

    treasure_only: bool = False
    """Treasure effects are excluded from ordinary table rolls."""

    discoverable: bool = True
    """Non-discoverable effects never come from random rolls by default."""

    @field_validator("min_bound")
    @classmethod
    def _min_bound_not_self_referencing(cls, v: RangeFunction) -> RangeFunction:
        if isinstance(v, AddToMin):
            raise ValueError("min_bound cannot be add_to_min; it would reference itself")
        return v

    def minimum_level(self, level: int) -> int:
        """Lowest power accepted for effect level *level*."""
        return self.min_bound(self, level)

    def maximum_level(self, level: int) -> int:
        """Highest power accepted for effect level *level*."""
        return self.max_bound(self, level)

    def accepts(self, level: int, power: int) -> bool:
        """True if *power* falls in this effect's inclusive range for *level*."""
        return self.minimum_level(level) <= power <= self.maximum_level(level)

    def conflicts_with(self, other: EffectRecord) -> bool:
        """True if the two effects cannot be applied together.

        An effect always conflicts with itself, and the relation holds when
        either side lists the other as incompatible.
        """
        if self.id == other.id:
            return True
        return other.id in self.incompatible or self.id in other.incompatible
