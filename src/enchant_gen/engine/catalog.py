"""Effect catalog -- stores and serves effect records and base-potency values.

Each catalog owns its two tables, so separate users of the engine cannot
disturb each other's data.  Depending on :class:`CatalogSettings`, a table
either starts as a private copy of the shared defaults (``EAGER``) or keeps
reading the defaults until the first write promotes it to a private copy
(``LAZY``).

Usage::

    catalog = EffectCatalog()
    catalog.get_effect("minecraft:sharpness")
    catalog.remove_effect("minecraft:mending")
    catalog.base_potency(item)
"""

from __future__ import annotations

import logging
import threading
from contextlib import nullcontext
from enum import Enum
from typing import TYPE_CHECKING, ContextManager, Mapping

from pydantic import BaseModel

from enchant_gen.defaults import DEFAULT_BASE_POTENCY, DEFAULT_EFFECTS

if TYPE_CHECKING:
    from enchant_gen.ir.catalog_data import CatalogData
    from enchant_gen.ir.effects import EffectRecord
    from enchant_gen.ir.items import ItemKind

logger = logging.getLogger(__name__)


class DefaultPolicy(str, Enum):
    """When a catalog takes its own copy of the default tables."""

    LAZY = "LAZY"
    """Read the shared defaults until the first write, then copy."""

    EAGER = "EAGER"
    """Copy the defaults into owned tables at construction."""


class CatalogSettings(BaseModel):
    """Construction-time knobs for :class:`EffectCatalog`."""

    model_config = {"frozen": True}

    thread_safe: bool = False
    """Guard both tables with a re-entrant lock."""

    use_default_effects: bool = True
    """Seed the effect table from :data:`~enchant_gen.defaults.DEFAULT_EFFECTS`."""

    use_default_potency: bool = True
    """Seed the potency table from :data:`~enchant_gen.defaults.DEFAULT_BASE_POTENCY`."""

    default_policy: DefaultPolicy = DefaultPolicy.LAZY


class EffectCatalog:
    """Effect id -> :class:`EffectRecord` and item id -> base potency.

    Parameters
    ----------
    settings:
        Catalog configuration.  Defaults to :class:`CatalogSettings()`.
    """

    def __init__(self, settings: CatalogSettings | None = None) -> None:
        self.settings = settings or CatalogSettings()
        self._lock: ContextManager = (
            threading.RLock() if self.settings.thread_safe else nullcontext()
        )
        self._effects: dict[str, EffectRecord] | None = None
        self._potency: dict[str, int] | None = None

        if self.settings.default_policy is DefaultPolicy.EAGER:
            self._promote_effects()
            self._promote_potency()

    # ------------------------------------------------------------------
    # Promotion
    # ------------------------------------------------------------------

    @property
    def effects_owned(self) -> bool:
        """True once the effect table is a private copy."""
        return self._effects is not None

    @property
    def potency_owned(self) -> bool:
        """True once the potency table is a private copy."""
        return self._potency is not None

    def _promote_effects(self) -> dict[str, EffectRecord]:
        self._effects = {}
        if self.settings.use_default_effects:
            self._effects.update(DEFAULT_EFFECTS)
        logger.debug("Effect table promoted (%d records)", len(self._effects))
        return self._effects

    def _promote_potency(self) -> dict[str, int]:
        self._potency = {}
        if self.settings.use_default_potency:
            self._potency.update(DEFAULT_BASE_POTENCY)
        logger.debug("Potency table promoted (%d entries)", len(self._potency))
        return self._potency

    def _effects_view(self) -> Mapping[str, EffectRecord]:
        if self._effects is not None:
            return self._effects
        if self.settings.use_default_effects:
            return DEFAULT_EFFECTS
        return {}

    def _potency_view(self) -> Mapping[str, int]:
        if self._potency is not None:
            return self._potency
        if self.settings.use_default_potency:
            return DEFAULT_BASE_POTENCY
        return {}

    # ------------------------------------------------------------------
    # Effect records
    # ------------------------------------------------------------------

    def put_effect(self, record: EffectRecord) -> None:
        """Register *record* under its id, replacing any existing entry."""
        with self._lock:
            effects = self._effects if self._effects is not None else self._promote_effects()
            effects[record.id] = record

    def get_effect(self, effect_id: str) -> EffectRecord | None:
        """Return the record registered under *effect_id*, or ``None``."""
        with self._lock:
            return self._effects_view().get(effect_id)

    def remove_effect(self, effect_id: str) -> None:
        """Remove *effect_id*.  Removing an unknown id is a no-op."""
        with self._lock:
            if self._effects is None:
                # Nothing to shadow: the id is not visible through the defaults
                if not self.settings.use_default_effects or effect_id not in DEFAULT_EFFECTS:
                    return
                self._promote_effects()
            self._effects.pop(effect_id, None)

    def effect_ids(self) -> tuple[str, ...]:
        """Snapshot of all registered effect ids."""
        with self._lock:
            return tuple(self._effects_view().keys())

    def effects(self) -> tuple[EffectRecord, ...]:
        """Snapshot of all registered records, in table order."""
        with self._lock:
            return tuple(self._effects_view().values())

    # ------------------------------------------------------------------
    # Base potency
    # ------------------------------------------------------------------

    def put_potency(self, item_id: str, value: int) -> None:
        """Set the base potency of *item_id*.

        Raises
        ------
        ValueError
            If *value* is not positive.
        """
        if value <= 0:
            raise ValueError(f"Base potency must be positive, got {value} for {item_id!r}")
        with self._lock:
            if self._potency is None:
                # Writing the value the defaults already hold changes nothing
                if self.settings.use_default_potency and DEFAULT_BASE_POTENCY.get(item_id) == value:
                    return
                self._promote_potency()
            self._potency[item_id] = value

    def get_potency(self, item_id: str) -> int | None:
        """Return the stored base potency of *item_id*, or ``None``."""
        with self._lock:
            return self._potency_view().get(item_id)

    def remove_potency(self, item_id: str) -> None:
        """Remove *item_id* from the potency table."""
        with self._lock:
            if self._potency is None:
                if not self.settings.use_default_potency or item_id not in DEFAULT_BASE_POTENCY:
                    return
                self._promote_potency()
            self._potency.pop(item_id, None)

    def base_potency(self, item: ItemKind) -> int:
        """Base potency of *item*; items without an entry have potency 0."""
        value = self.get_potency(item.id)
        return 0 if value is None else value

    # ------------------------------------------------------------------
    # Bulk loading
    # ------------------------------------------------------------------

    def load(self, data: CatalogData) -> None:
        """Register every effect and potency entry from a :class:`CatalogData`.

        Entries with an existing key are replaced.  ``data.items`` is not
        stored: item kinds belong to the caller.
        """
        with self._lock:
            for record in data.effects:
                self.put_effect(record)
            for item_id, value in data.base_potency.items():
                self.put_potency(item_id, value)
        logger.debug(
            "Loaded %d effects and %d potency entries",
            len(data.effects), len(data.base_potency),
        )

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        with self._lock:
            return len(self._effects_view())

    def __contains__(self, effect_id: object) -> bool:
        with self._lock:
            return effect_id in self._effects_view()

    def __repr__(self) -> str:
        return (
            f"EffectCatalog(effects={len(self)}, effects_owned={self.effects_owned}, "
            f"potency_owned={self.potency_owned})"
        )
