"""Ready-made predicates for the selection entry points.

*Include* predicates decide whether an effect record is considered at all.
*Force* predicates decide whether a target skips the category check and
accepts any effect (a blank book is the usual example).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from enchant_gen.ir.items import ItemType

if TYPE_CHECKING:
    from enchant_gen.ir.effects import EffectRecord
    from enchant_gen.ir.items import ItemKind

IncludePredicate = Callable[["EffectRecord"], bool]
ForcePredicate = Callable[["ItemKind"], bool]


def any_effect(record: EffectRecord) -> bool:
    """Consider every record."""
    return True


def discoverable(record: EffectRecord) -> bool:
    """Treasure and non-treasure effects, as long as they can be discovered.

    Matches what loot chests can roll.
    """
    return record.discoverable


def discoverable_and_not_treasure(record: EffectRecord) -> bool:
    """Discoverable, non-treasure effects only -- what an enchanting table rolls."""
    return record.discoverable and not record.treasure_only


def never_force(item: ItemKind) -> bool:
    """Always apply the category check."""
    return False


def always_add_if_book(item: ItemKind) -> bool:
    """Let books accept every effect regardless of category.

    Converting the book into an enchanted book afterwards is up to the host.
    """
    return item.kind == ItemType.BOOK
