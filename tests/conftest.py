"""Shared fixtures and helpers for enchant_gen tests."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from enchant_gen.defaults import get_item
from enchant_gen.engine.catalog import CatalogSettings, EffectCatalog
from enchant_gen.ir import Category, EffectRecord, ItemKind, ItemType, constant


class ScriptedRNG:
    """RNG double that replays fixed values and checks requested bounds.

    ``ints`` entries are either plain values or ``(low, high, value)``
    tuples; the tuple form asserts the bounds the engine asked for.
    Running out of scripted values fails the test.
    """

    def __init__(self, floats: list[float] | None = None, ints: list[Any] | None = None) -> None:
        self.floats = list(floats or [])
        self.ints = list(ints or [])
        self.int_calls: list[tuple[int, int]] = []
        self.float_calls = 0

    def random_int(self, low: int, high: int) -> int:
        self.int_calls.append((low, high))
        assert self.ints, f"Unscripted random_int({low}, {high})"
        entry = self.ints.pop(0)
        if isinstance(entry, tuple):
            exp_low, exp_high, entry = entry
            assert (low, high) == (exp_low, exp_high)
        assert low <= entry <= high
        return entry

    def random_float(self) -> float:
        self.float_calls += 1
        assert self.floats, "Unscripted random_float()"
        return self.floats.pop(0)

    @property
    def exhausted(self) -> bool:
        return not self.floats and not self.ints


@pytest.fixture
def scripted_rng() -> type[ScriptedRNG]:
    return ScriptedRNG


@pytest.fixture
def make_record() -> Callable[..., EffectRecord]:
    """Factory for small records: wide constant bounds, weight 1, category ALL."""

    def _make(effect_id: str, **overrides: Any) -> EffectRecord:
        fields: dict[str, Any] = {
            "id": effect_id,
            "weight": 1,
            "category": Category.ALL,
            "min_bound": constant(1),
            "max_bound": constant(100),
            "max_level": 1,
        }
        fields.update(overrides)
        return EffectRecord(**fields)

    return _make


@pytest.fixture
def empty_catalog() -> EffectCatalog:
    """Catalog with neither default table."""
    return EffectCatalog(
        CatalogSettings(use_default_effects=False, use_default_potency=False)
    )


@pytest.fixture
def diamond_sword() -> ItemKind:
    item = get_item("minecraft:diamond_sword")
    assert item is not None
    return item


@pytest.fixture
def book() -> ItemKind:
    item = get_item("minecraft:book")
    assert item is not None
    return item


@pytest.fixture
def stick() -> ItemKind:
    """An item no category accepts and no potency entry covers."""
    return ItemKind(id="minecraft:stick", kind=ItemType.OTHER)
