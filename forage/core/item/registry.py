"""Item definition store - JSON seed load + dynamic registration"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from .models import ItemCategory, ItemDefinition, RangedWeaponStats

logger = logging.getLogger(__name__)


class DefinitionRegistry:
    """
    Item definitions by id, with a secondary index by name.
    Seeded from seed_items.json at startup.
    """

    def __init__(self) -> None:
        self._definitions: dict[int, ItemDefinition] = {}
        self._by_name: dict[str, ItemDefinition] = {}

    def load_from_json(self, path: str | Path) -> int:
        """Load seed_items.json. Returns the number of definitions loaded.

        category is matched against ItemCategory values ("Consumable", ...).
        Rows with a missing field or unknown category are logged and skipped.
        """
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            raw_list: list[dict] = json.load(f)

        count = 0
        for raw in raw_list:
            try:
                definition = ItemDefinition(
                    item_def_id=int(raw["item_def_id"]),
                    name=raw["name"],
                    category=ItemCategory(raw["category"]),
                    description=raw.get("description", ""),
                    stackable=bool(raw.get("stackable", True)),
                )
                self.register(definition)
                count += 1
            except (KeyError, ValueError) as e:
                logger.warning(
                    "Failed to load definition: %s - %s", raw.get("name", "?"), e
                )

        logger.info("Loaded %d item definitions from %s", count, path)
        return count

    def register(self, definition: ItemDefinition) -> None:
        if definition.item_def_id in self._definitions:
            logger.warning(
                "Overwriting existing definition: %d (%s)",
                definition.item_def_id,
                definition.name,
            )
            old = self._definitions[definition.item_def_id]
            self._by_name.pop(old.name, None)
        self._definitions[definition.item_def_id] = definition
        self._by_name[definition.name] = definition

    def get(self, item_def_id: int) -> Optional[ItemDefinition]:
        return self._definitions.get(item_def_id)

    def get_by_name(self, name: str) -> Optional[ItemDefinition]:
        return self._by_name.get(name)

    def get_all(self) -> list[ItemDefinition]:
        return list(self._definitions.values())

    def count(self) -> int:
        return len(self._definitions)


def load_weapon_stats(path: str | Path) -> list[RangedWeaponStats]:
    """Read seed_weapons.json into RangedWeaponStats records."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        raw_list: list[dict] = json.load(f)

    records = []
    for raw in raw_list:
        try:
            records.append(
                RangedWeaponStats(
                    item_name=raw["item_name"],
                    weapon_range=float(raw["weapon_range"]),
                    projectile_speed=float(raw["projectile_speed"]),
                    accuracy=min(1.0, max(0.0, float(raw["accuracy"]))),
                    reload_time_secs=float(raw["reload_time_secs"]),
                )
            )
        except (KeyError, ValueError) as e:
            logger.warning(
                "Failed to load weapon stats: %s - %s", raw.get("item_name", "?"), e
            )
    logger.info("Loaded %d weapon stat records from %s", len(records), path)
    return records
