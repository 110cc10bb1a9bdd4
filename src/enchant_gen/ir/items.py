"""Item descriptors -- the classification metadata the engine reads from a target."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class ItemType(str, Enum):
    """Broad item family used by the category rules."""

    SWORD = "SWORD"
    PICKAXE = "PICKAXE"
    AXE = "AXE"
    SHOVEL = "SHOVEL"
    HOE = "HOE"
    BOW = "BOW"
    CROSSBOW = "CROSSBOW"
    TRIDENT = "TRIDENT"
    FISHING_ROD = "FISHING_ROD"
    ARMOR = "ARMOR"
    SKULL = "SKULL"
    """Heads, skulls and carved pumpkins -- wearable, but not armor."""
    ELYTRA = "ELYTRA"
    BOOK = "BOOK"
    OTHER = "OTHER"


class EquipmentSlot(str, Enum):
    """Body slot an item is worn in, when it is worn at all."""

    HEAD = "HEAD"
    CHEST = "CHEST"
    LEGS = "LEGS"
    FEET = "FEET"


class ItemKind(BaseModel):
    """Static description of an item kind (e.g. ``minecraft:iron_sword``).

    Only the attributes the category rules and the base-potency lookup need
    are modelled; everything else about an item belongs to the host.
    """

    model_config = {"frozen": True}

    id: str
    """Namespaced identifier, also the base-potency lookup key."""

    kind: ItemType

    equipment_slot: EquipmentSlot | None = None
    """Slot the item is worn in, or ``None`` for held items."""

    max_damage: int = Field(default=0, ge=0)
    """Durability.  ``0`` means the item cannot break."""
