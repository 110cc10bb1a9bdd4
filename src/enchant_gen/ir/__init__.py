"""Schema for effect catalogs.

Effect records, their range functions, item descriptors and category rules
are Pydantic models (or plain enums) that serialise cleanly to/from JSON.
:class:`CatalogData` is the top-level container loaded by the default tables
and by :meth:`EffectCatalog.load <enchant_gen.engine.catalog.EffectCatalog.load>`.
"""

from .catalog_data import CatalogData
from .categories import Category, can_apply, is_breakable, is_wearable
from .effects import EffectRecord
from .items import EquipmentSlot, ItemKind, ItemType
from .range_functions import (
    AddToDefault,
    AddToMin,
    Adjusted,
    Basic,
    Constant,
    Multiply,
    RangeFunction,
    add_to_default,
    add_to_min,
    adjusted,
    basic,
    constant,
    multiply,
)

__all__ = [
    # catalog_data
    "CatalogData",
    # categories
    "Category",
    "can_apply",
    "is_breakable",
    "is_wearable",
    # effects
    "EffectRecord",
    # items
    "EquipmentSlot",
    "ItemKind",
    "ItemType",
    # range_functions
    "AddToDefault",
    "AddToMin",
    "Adjusted",
    "Basic",
    "Constant",
    "Multiply",
    "RangeFunction",
    "add_to_default",
    "add_to_min",
    "adjusted",
    "basic",
    "constant",
    "multiply",
]
