"""Shared default tables -- effects, base potency and item kinds.

The tables are read from the JSON files in ``enchant_gen/data/`` once, when
this module is first imported, and exposed as read-only mappings.  Catalogs
fall back to them (see :class:`~enchant_gen.engine.catalog.EffectCatalog`);
nothing else mutates or reloads them.
"""

from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from enchant_gen.ir.catalog_data import CatalogData
from enchant_gen.ir.effects import EffectRecord
from enchant_gen.ir.items import ItemKind

_DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_EFFECTS_PATH = _DATA_DIR / "effects.json"
DEFAULT_POTENCY_PATH = _DATA_DIR / "base_potency.json"
DEFAULT_ITEMS_PATH = _DATA_DIR / "items.json"


def _read_entries(path: Path) -> list[dict[str, Any]]:
    """Read a JSON list, dropping ``_section`` organisational markers."""
    with open(path) as f:
        raw: list[dict[str, Any]] = json.load(f)
    return [entry for entry in raw if "_section" not in entry]


def load_catalog_data(
    effects_path: str | Path = DEFAULT_EFFECTS_PATH,
    potency_path: str | Path = DEFAULT_POTENCY_PATH,
    items_path: str | Path = DEFAULT_ITEMS_PATH,
) -> CatalogData:
    """Load and validate a full catalog table from three JSON files.

    Parameters
    ----------
    effects_path:
        JSON list of effect records.
    potency_path:
        JSON object mapping item id to base potency.
    items_path:
        JSON list of item kinds.
    """
    with open(potency_path) as f:
        potency: dict[str, int] = json.load(f)

    return CatalogData.model_validate(
        {
            "effects": _read_entries(Path(effects_path)),
            "base_potency": potency,
            "items": _read_entries(Path(items_path)),
        }
    )


_DEFAULT_DATA = load_catalog_data()

DEFAULT_EFFECTS: Mapping[str, EffectRecord] = MappingProxyType(
    {record.id: record for record in _DEFAULT_DATA.effects}
)
DEFAULT_BASE_POTENCY: Mapping[str, int] = MappingProxyType(dict(_DEFAULT_DATA.base_potency))
DEFAULT_ITEMS: Mapping[str, ItemKind] = MappingProxyType(
    {item.id: item for item in _DEFAULT_DATA.items}
)


def get_item(item_id: str) -> ItemKind | None:
    """Return the default :class:`ItemKind` for *item_id*, or ``None``."""
    return DEFAULT_ITEMS.get(item_id)
