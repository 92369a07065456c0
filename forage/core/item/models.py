"""Item and player domain models (no DB dependency)"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ItemCategory(str, Enum):
    TOOL = "Tool"
    MATERIAL = "Material"
    PLACEABLE = "Placeable"
    ARMOR = "Armor"
    CONSUMABLE = "Consumable"
    AMMUNITION = "Ammunition"
    WEAPON = "Weapon"
    RANGED_WEAPON = "RangedWeapon"

    @property
    def is_consumable(self) -> bool:
        return self is ItemCategory.CONSUMABLE


@dataclass(frozen=True)
class ItemDefinition:
    """Shared item type metadata. Read-only, loaded from seed_items.json."""

    item_def_id: int
    name: str  # display name, also the effect lookup key
    category: ItemCategory
    description: str = ""
    stackable: bool = True


@dataclass
class InventoryItem:
    """A stack of one item type owned by one player."""

    instance_id: int
    owner_identity: str
    item_def_id: int
    quantity: int  # >= 0


@dataclass
class ActorVitals:
    """Player life-support stats, each within [0, MAX_STAT_VALUE]."""

    owner_identity: str
    health: float
    hunger: float
    thirst: float


@dataclass(frozen=True)
class RangedWeaponStats:
    """Static ballistics record keyed by item name."""

    item_name: str  # e.g. "Hunting Bow"
    weapon_range: float  # world units
    projectile_speed: float  # world units / sec
    accuracy: float  # 0.0 (wild) ~ 1.0 (perfect)
    reload_time_secs: float
