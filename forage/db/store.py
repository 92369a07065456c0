"""Keyed access to inventory, definitions and vitals inside one transaction.

ConsumptionService only talks to the ConsumptionStore protocol:
- SqlAlchemyStore  - Session-backed, used by the API
- InMemoryStore    - dict-backed, used by tests and embedding
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from dataclasses import replace
from typing import Optional, Protocol

from sqlalchemy.orm import Session

from forage.core.item.models import (
    ActorVitals,
    InventoryItem,
    ItemCategory,
    ItemDefinition,
    RangedWeaponStats,
)
from forage.core.logging import get_logger
from forage.db.models import (
    InventoryItemModel,
    ItemDefinitionModel,
    PlayerModel,
    RangedWeaponStatsModel,
)

logger = get_logger(__name__)

# SQL integer columns are signed 64-bit; larger u64 ids cannot be stored
MAX_SQL_ID = 2**63 - 1


class ConsumptionStore(Protocol):
    def transaction(self) -> AbstractContextManager: ...

    def find_instance(self, instance_id: int) -> Optional[InventoryItem]: ...

    def find_definition(self, item_def_id: int) -> Optional[ItemDefinition]: ...

    def find_vitals(self, identity: str) -> Optional[ActorVitals]: ...

    def update_instance(self, item: InventoryItem) -> None: ...

    def delete_instance(self, instance_id: int) -> None: ...

    def update_vitals(self, vitals: ActorVitals) -> None: ...


class SqlAlchemyStore:
    """ConsumptionStore over an SQLAlchemy Session.

    Instance and vitals rows are read with SELECT ... FOR UPDATE, so a
    concurrent consume of the same stack waits until this one commits.
    SQLite has no row locks; its engine must go through
    use_immediate_transactions() so the whole transaction holds the
    database write lock from the first read.
    """

    def __init__(self, db: Session):
        self._db = db

    @contextmanager
    def transaction(self) -> Iterator[SqlAlchemyStore]:
        """Commit on normal exit, roll back if the block raises."""
        try:
            yield self
            self._db.commit()
        except Exception:
            self._db.rollback()
            logger.debug("Transaction rolled back")
            raise

    # === reads ===

    def find_instance(self, instance_id: int) -> Optional[InventoryItem]:
        if not 0 <= instance_id <= MAX_SQL_ID:
            return None
        orm = (
            self._db.query(InventoryItemModel)
            .filter(InventoryItemModel.instance_id == instance_id)
            .with_for_update()
            .first()
        )
        return self._instance_to_core(orm) if orm else None

    def find_definition(self, item_def_id: int) -> Optional[ItemDefinition]:
        orm = self._db.get(ItemDefinitionModel, item_def_id)
        return self._definition_to_core(orm) if orm else None

    def find_vitals(self, identity: str) -> Optional[ActorVitals]:
        orm = (
            self._db.query(PlayerModel)
            .filter(PlayerModel.identity == identity)
            .with_for_update()
            .first()
        )
        return self._vitals_to_core(orm) if orm else None

    def list_instances(self, owner_identity: str) -> list[InventoryItem]:
        rows = (
            self._db.query(InventoryItemModel)
            .filter(InventoryItemModel.owner_identity == owner_identity)
            .order_by(InventoryItemModel.instance_id)
            .all()
        )
        return [self._instance_to_core(r) for r in rows]

    def find_weapon_stats(self, item_name: str) -> Optional[RangedWeaponStats]:
        orm = self._db.get(RangedWeaponStatsModel, item_name)
        if orm is None:
            return None
        return RangedWeaponStats(
            item_name=orm.item_name,
            weapon_range=orm.weapon_range,
            projectile_speed=orm.projectile_speed,
            accuracy=orm.accuracy,
            reload_time_secs=orm.reload_time_secs,
        )

    # === writes ===

    def update_instance(self, item: InventoryItem) -> None:
        orm = self._db.get(InventoryItemModel, item.instance_id)
        if orm is None:
            raise LookupError(f"Inventory item {item.instance_id} vanished mid-transaction")
        orm.owner_identity = item.owner_identity
        orm.item_def_id = item.item_def_id
        orm.quantity = item.quantity

    def delete_instance(self, instance_id: int) -> None:
        self._db.query(InventoryItemModel).filter(
            InventoryItemModel.instance_id == instance_id
        ).delete()

    def update_vitals(self, vitals: ActorVitals) -> None:
        orm = self._db.get(PlayerModel, vitals.owner_identity)
        if orm is None:
            raise LookupError(f"Player {vitals.owner_identity} vanished mid-transaction")
        orm.health = vitals.health
        orm.hunger = vitals.hunger
        orm.thirst = vitals.thirst

    # === seeding ===

    def add_definition(self, definition: ItemDefinition) -> bool:
        """Insert if absent. Returns True when a row was added."""
        if self._db.get(ItemDefinitionModel, definition.item_def_id) is not None:
            return False
        self._db.add(
            ItemDefinitionModel(
                item_def_id=definition.item_def_id,
                name=definition.name,
                category=definition.category.value,
                description=definition.description,
                stackable=definition.stackable,
            )
        )
        return True

    def add_instance(self, item: InventoryItem) -> None:
        self._db.add(
            InventoryItemModel(
                instance_id=item.instance_id,
                owner_identity=item.owner_identity,
                item_def_id=item.item_def_id,
                quantity=item.quantity,
            )
        )

    def add_vitals(self, vitals: ActorVitals, username: str = "") -> None:
        self._db.add(
            PlayerModel(
                identity=vitals.owner_identity,
                username=username,
                health=vitals.health,
                hunger=vitals.hunger,
                thirst=vitals.thirst,
            )
        )

    def add_weapon_stats(self, stats: RangedWeaponStats) -> bool:
        if self._db.get(RangedWeaponStatsModel, stats.item_name) is not None:
            return False
        self._db.add(
            RangedWeaponStatsModel(
                item_name=stats.item_name,
                weapon_range=stats.weapon_range,
                projectile_speed=stats.projectile_speed,
                accuracy=stats.accuracy,
                reload_time_secs=stats.reload_time_secs,
            )
        )
        return True

    # === ORM -> Core ===

    def _instance_to_core(self, orm: InventoryItemModel) -> InventoryItem:
        return InventoryItem(
            instance_id=orm.instance_id,
            owner_identity=orm.owner_identity,
            item_def_id=orm.item_def_id,
            quantity=orm.quantity,
        )

    def _definition_to_core(self, orm: ItemDefinitionModel) -> ItemDefinition:
        return ItemDefinition(
            item_def_id=orm.item_def_id,
            name=orm.name,
            category=ItemCategory(orm.category),
            description=orm.description or "",
            stackable=orm.stackable,
        )

    def _vitals_to_core(self, orm: PlayerModel) -> ActorVitals:
        return ActorVitals(
            owner_identity=orm.identity,
            health=orm.health,
            hunger=orm.hunger,
            thirst=orm.thirst,
        )


class InMemoryStore:
    """Dict-backed ConsumptionStore.

    transaction() holds one re-entrant lock for the whole block and
    restores a snapshot if the block raises, so other threads never
    observe a half-applied consume. Records are copied on the way in
    and out; callers cannot mutate stored state directly.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._instances: dict[int, InventoryItem] = {}
        self._definitions: dict[int, ItemDefinition] = {}
        self._vitals: dict[str, ActorVitals] = {}

    @contextmanager
    def transaction(self) -> Iterator[InMemoryStore]:
        with self._lock:
            snapshot = (dict(self._instances), dict(self._vitals))
            try:
                yield self
            except Exception:
                self._instances, self._vitals = snapshot
                raise

    def find_instance(self, instance_id: int) -> Optional[InventoryItem]:
        item = self._instances.get(instance_id)
        return replace(item) if item else None

    def find_definition(self, item_def_id: int) -> Optional[ItemDefinition]:
        with self._lock:
            return self._definitions.get(item_def_id)

    def find_vitals(self, identity: str) -> Optional[ActorVitals]:
        vitals = self._vitals.get(identity)
        return replace(vitals) if vitals else None

    def list_instances(self, owner_identity: str) -> list[InventoryItem]:
        return [
            replace(item)
            for _, item in sorted(self._instances.items())
            if item.owner_identity == owner_identity
        ]

    def update_instance(self, item: InventoryItem) -> None:
        if item.instance_id not in self._instances:
            raise LookupError(f"Inventory item {item.instance_id} vanished mid-transaction")
        self._instances[item.instance_id] = replace(item)

    def delete_instance(self, instance_id: int) -> None:
        self._instances.pop(instance_id, None)

    def update_vitals(self, vitals: ActorVitals) -> None:
        if vitals.owner_identity not in self._vitals:
            raise LookupError(f"Player {vitals.owner_identity} vanished mid-transaction")
        self._vitals[vitals.owner_identity] = replace(vitals)

    def add_definition(self, definition: ItemDefinition) -> bool:
        with self._lock:
            if definition.item_def_id in self._definitions:
                return False
            self._definitions[definition.item_def_id] = definition
            return True

    def add_instance(self, item: InventoryItem) -> None:
        with self._lock:
            self._instances[item.instance_id] = replace(item)

    def add_vitals(self, vitals: ActorVitals, username: str = "") -> None:
        with self._lock:
            self._vitals[vitals.owner_identity] = replace(vitals)
