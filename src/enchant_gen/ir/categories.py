"""Effect categories -- which item kinds an effect may be applied to.

Each :class:`Category` maps to a pure classification rule over an
:class:`~enchant_gen.ir.items.ItemKind`.  Axes are tools here, not weapons:
the rules describe what an enchanting roll may produce, not what an anvil
would accept.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from .items import EquipmentSlot, ItemKind, ItemType

_TOOL_TYPES = frozenset({ItemType.PICKAXE, ItemType.AXE, ItemType.SHOVEL, ItemType.HOE})
_WEARABLE_TYPES = frozenset({ItemType.ARMOR, ItemType.SKULL, ItemType.ELYTRA})


class Category(str, Enum):
    """Slot/category an effect belongs to."""

    ARMOR = "ARMOR"
    ARMOR_HEAD = "ARMOR_HEAD"
    ARMOR_CHEST = "ARMOR_CHEST"
    ARMOR_LEGS = "ARMOR_LEGS"
    ARMOR_FEET = "ARMOR_FEET"
    WEAPON = "WEAPON"
    TOOL = "TOOL"
    BOW = "BOW"
    CROSSBOW = "CROSSBOW"
    TRIDENT = "TRIDENT"
    FISHING_ROD = "FISHING_ROD"
    BREAKABLE = "BREAKABLE"
    WEARABLE = "WEARABLE"
    ALL = "ALL"
    """Anything breakable or wearable."""

    def matches(self, item: ItemKind) -> bool:
        """Return True if *item* qualifies for this category."""
        return _RULES[self](item)


def is_breakable(item: ItemKind) -> bool:
    return item.max_damage != 0


def is_wearable(item: ItemKind) -> bool:
    return item.kind in _WEARABLE_TYPES


def _slot_rule(slot: EquipmentSlot) -> Callable[[ItemKind], bool]:
    return lambda item: item.equipment_slot == slot


def _type_rule(item_type: ItemType) -> Callable[[ItemKind], bool]:
    return lambda item: item.kind == item_type


_RULES: dict[Category, Callable[[ItemKind], bool]] = {
    Category.ARMOR: _type_rule(ItemType.ARMOR),
    Category.ARMOR_HEAD: _slot_rule(EquipmentSlot.HEAD),
    Category.ARMOR_CHEST: _slot_rule(EquipmentSlot.CHEST),
    Category.ARMOR_LEGS: _slot_rule(EquipmentSlot.LEGS),
    Category.ARMOR_FEET: _slot_rule(EquipmentSlot.FEET),
    Category.WEAPON: _type_rule(ItemType.SWORD),
    Category.TOOL: lambda item: item.kind in _TOOL_TYPES,
    Category.BOW: _type_rule(ItemType.BOW),
    Category.CROSSBOW: _type_rule(ItemType.CROSSBOW),
    Category.TRIDENT: _type_rule(ItemType.TRIDENT),
    Category.FISHING_ROD: _type_rule(ItemType.FISHING_ROD),
    Category.BREAKABLE: is_breakable,
    Category.WEARABLE: is_wearable,
    Category.ALL: lambda item: is_breakable(item) or is_wearable(item),
}


def can_apply(category: Category, item: ItemKind) -> bool:
    """Functional form of :meth:`Category.matches`."""
    return category.matches(item)
