"""Item domain core - plain Python, no database access"""

from .effects import EffectCatalog, EffectDefinition
from .errors import (
    ActorNotFound,
    ConsumeError,
    ConsumeErrorKind,
    DefinitionNotFound,
    ItemNotFound,
    NotConsumable,
    NotOwner,
)
from .models import (
    ActorVitals,
    InventoryItem,
    ItemCategory,
    ItemDefinition,
    RangedWeaponStats,
)
from .registry import DefinitionRegistry
from .vitals import MAX_STAT_VALUE, apply_effect, clamp_stat

__all__ = [
    "ActorNotFound",
    "ActorVitals",
    "ConsumeError",
    "ConsumeErrorKind",
    "DefinitionNotFound",
    "DefinitionRegistry",
    "EffectCatalog",
    "EffectDefinition",
    "InventoryItem",
    "ItemCategory",
    "ItemDefinition",
    "ItemNotFound",
    "MAX_STAT_VALUE",
    "NotConsumable",
    "NotOwner",
    "RangedWeaponStats",
    "apply_effect",
    "clamp_stat",
]
