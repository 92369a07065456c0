"""Consumable effects - item name -> stat deltas"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EffectDefinition:
    health_delta: float = 0.0
    hunger_delta: float = 0.0
    thirst_delta: float = 0.0


MUSHROOM_EFFECT = EffectDefinition(health_delta=5.0, hunger_delta=10.0, thirst_delta=5.0)
# 3x the health of a mushroom, more filling and more quenching
CORN_EFFECT = EffectDefinition(health_delta=15.0, hunger_delta=25.0, thirst_delta=10.0)

BUILTIN_EFFECTS: dict[str, EffectDefinition] = {
    "Mushroom": MUSHROOM_EFFECT,
    "Corn": CORN_EFFECT,
}


class EffectCatalog:
    """
    Effect lookup keyed by the item definition's display name.
    Matching is exact: "corn" and " Corn" are not "Corn".
    """

    def __init__(self, effects: dict[str, EffectDefinition] | None = None) -> None:
        self._effects: dict[str, EffectDefinition] = dict(effects or {})

    @classmethod
    def default(cls) -> EffectCatalog:
        """Catalog with the built-in Mushroom and Corn effects."""
        return cls(BUILTIN_EFFECTS)

    def lookup(self, item_name: str) -> Optional[EffectDefinition]:
        """None when the item has no registered effect (not an error)."""
        return self._effects.get(item_name)

    def register(self, item_name: str, effect: EffectDefinition) -> None:
        if item_name in self._effects:
            logger.warning("Overwriting existing effect: %s", item_name)
        self._effects[item_name] = effect

    def load_from_json(self, path: str | Path) -> int:
        """Load seed_effects.json. Returns the number of effects loaded.

        Format: [{"item_name": "Berries", "health": 2, "hunger": 5, "thirst": 3}, ...]
        Missing deltas default to 0. Malformed rows are skipped.
        """
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            raw_list: list[dict] = json.load(f)

        count = 0
        for raw in raw_list:
            try:
                effect = EffectDefinition(
                    health_delta=float(raw.get("health", 0.0)),
                    hunger_delta=float(raw.get("hunger", 0.0)),
                    thirst_delta=float(raw.get("thirst", 0.0)),
                )
                self.register(raw["item_name"], effect)
                count += 1
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(
                    "Failed to load effect: %s - %s", raw.get("item_name", "?"), e
                )

        logger.info("Loaded %d effects from %s", count, path)
        return count

    def names(self) -> list[str]:
        return sorted(self._effects)

    def __len__(self) -> int:
        return len(self._effects)
