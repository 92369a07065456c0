"""Consumption Service - eat/drink an inventory item and apply its effect

Reads the stack, its definition and the player's vitals through a
ConsumptionStore, validates, then writes inside a single store
transaction. Any validation failure raises before the first write.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from forage.core.event_bus import EventBus, GameEvent
from forage.core.event_types import EventTypes
from forage.core.item.effects import EffectCatalog
from forage.core.item.errors import (
    ActorNotFound,
    ConsumeError,
    ConsumeErrorKind,
    DefinitionNotFound,
    ItemNotFound,
    NotConsumable,
    NotOwner,
)
from forage.core.item.models import ActorVitals
from forage.core.item.vitals import apply_effect
from forage.core.logging import get_logger
from forage.db.store import ConsumptionStore

logger = get_logger(__name__)

SOURCE = "consumption_service"


@dataclass(frozen=True)
class ConsumeOutcome:
    instance_id: int
    item_name: str
    remaining_quantity: int
    depleted: bool
    stats_changed: bool
    vitals_before: ActorVitals
    vitals_after: ActorVitals


@dataclass(frozen=True)
class ConsumeResult:
    """Boundary result: ok, or a failure kind with its message."""

    ok: bool
    outcome: Optional[ConsumeOutcome] = None
    kind: Optional[ConsumeErrorKind] = None
    error: Optional[str] = None


class ConsumptionService:
    def __init__(
        self,
        store: ConsumptionStore,
        catalog: EffectCatalog,
        event_bus: EventBus | None = None,
    ):
        self._store = store
        self._catalog = catalog
        self._bus = event_bus

    def consume(self, requester_identity: str, item_instance_id: int) -> ConsumeOutcome:
        """Consume one unit of an item stack owned by the requester.

        Raises ConsumeError (ItemNotFound, NotOwner, DefinitionNotFound,
        NotConsumable, ActorNotFound). Nothing is written in that case.

        Items without a registered effect are still consumed; vitals
        are left as they were.
        """
        logger.info(
            "[ConsumeItem] Player %s attempting to consume item instance %d",
            requester_identity,
            item_instance_id,
        )

        with self._store.transaction() as store:
            item = store.find_instance(item_instance_id)
            if item is None:
                logger.warning("[ConsumeItem] Item instance %d not found", item_instance_id)
                raise ItemNotFound(item_instance_id)

            if item.owner_identity != requester_identity:
                logger.warning(
                    "[ConsumeItem] Player %s tried to consume instance %d owned by %s",
                    requester_identity,
                    item_instance_id,
                    item.owner_identity,
                )
                raise NotOwner()

            definition = store.find_definition(item.item_def_id)
            if definition is None:
                logger.error(
                    "[ConsumeItem] Instance %d references missing definition %d",
                    item_instance_id,
                    item.item_def_id,
                )
                raise DefinitionNotFound(item.item_def_id)

            if not definition.category.is_consumable:
                logger.warning(
                    "[ConsumeItem] Item '%s' (%s) is not consumable",
                    definition.name,
                    definition.category.value,
                )
                raise NotConsumable(definition.name)

            vitals = store.find_vitals(requester_identity)
            if vitals is None:
                logger.warning("[ConsumeItem] No vitals record for player %s", requester_identity)
                raise ActorNotFound()

            # --- all checks passed; compute then write ---

            effect = self._catalog.lookup(definition.name)
            if effect is not None:
                new_vitals = apply_effect(vitals, effect)
                stats_changed = True
                logger.info(
                    "[ConsumeItem] Player %s consumed %s. Stats: "
                    "H %.1f->%.1f, Hu %.1f->%.1f, T %.1f->%.1f",
                    requester_identity,
                    definition.name,
                    vitals.health,
                    new_vitals.health,
                    vitals.hunger,
                    new_vitals.hunger,
                    vitals.thirst,
                    new_vitals.thirst,
                )
            else:
                new_vitals = vitals
                stats_changed = False
                logger.warning(
                    "[ConsumeItem] Consumed item '%s' has no defined effect.",
                    definition.name,
                )

            remaining = item.quantity - 1
            depleted = remaining <= 0
            if depleted:
                logger.debug(
                    "[ConsumeItem] Item instance %d stack depleted, deleting.",
                    item_instance_id,
                )
                store.delete_instance(item_instance_id)
                remaining = 0
            else:
                logger.debug(
                    "[ConsumeItem] Item instance %d quantity reduced to %d.",
                    item_instance_id,
                    remaining,
                )
                store.update_instance(replace(item, quantity=remaining))

            if stats_changed:
                store.update_vitals(new_vitals)

        outcome = ConsumeOutcome(
            instance_id=item_instance_id,
            item_name=definition.name,
            remaining_quantity=remaining,
            depleted=depleted,
            stats_changed=stats_changed,
            vitals_before=vitals,
            vitals_after=new_vitals,
        )
        self._publish(requester_identity, outcome)
        return outcome

    def _publish(self, owner_identity: str, outcome: ConsumeOutcome) -> None:
        """Post-commit notifications."""
        if self._bus is None:
            return

        self._bus.emit(
            GameEvent(
                event_type=EventTypes.ITEM_CONSUMED,
                data={
                    "instance_id": outcome.instance_id,
                    "item_name": outcome.item_name,
                    "owner_identity": owner_identity,
                    "remaining_quantity": outcome.remaining_quantity,
                    "stats_changed": outcome.stats_changed,
                },
                source=SOURCE,
            )
        )
        if outcome.depleted:
            self._bus.emit(
                GameEvent(
                    event_type=EventTypes.ITEM_DEPLETED,
                    data={
                        "instance_id": outcome.instance_id,
                        "owner_identity": owner_identity,
                    },
                    source=SOURCE,
                )
            )
        if outcome.stats_changed:
            after = outcome.vitals_after
            self._bus.emit(
                GameEvent(
                    event_type=EventTypes.VITALS_CHANGED,
                    data={
                        "owner_identity": owner_identity,
                        "health": after.health,
                        "hunger": after.hunger,
                        "thirst": after.thirst,
                    },
                    source=SOURCE,
                )
            )


def consume_item(
    service: ConsumptionService, caller_identity: str, item_instance_id: int
) -> ConsumeResult:
    """Entry point for dispatch layers: failures come back as values.

    Storage faults (lost connection, constraint violations) are not
    ConsumeErrors and still propagate.
    """
    try:
        outcome = service.consume(caller_identity, item_instance_id)
    except ConsumeError as e:
        return ConsumeResult(ok=False, kind=e.kind, error=e.message)
    return ConsumeResult(ok=True, outcome=outcome)
