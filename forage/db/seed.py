"""Reference data sync: seed JSON -> DB. Runs at server start."""

from pathlib import Path

from forage.core.item.models import ActorVitals, InventoryItem
from forage.core.item.registry import DefinitionRegistry, load_weapon_stats
from forage.core.logging import get_logger
from forage.db.store import SqlAlchemyStore

logger = get_logger(__name__)

DEMO_PLAYER = "demo_player"


def sync_reference_data(
    store: SqlAlchemyStore, registry: DefinitionRegistry, data_dir: str | Path
) -> int:
    """Insert missing item definitions and weapon stats.
    Existing rows are left alone. Returns the number of rows added.
    """
    count = 0
    with store.transaction():
        for definition in registry.get_all():
            if store.add_definition(definition):
                count += 1
        for stats in load_weapon_stats(Path(data_dir) / "seed_weapons.json"):
            if store.add_weapon_stats(stats):
                count += 1
    logger.info("Synced %d reference rows to DB", count)
    return count


def seed_demo_player(store: SqlAlchemyStore, registry: DefinitionRegistry) -> None:
    """A hungry player with a few food stacks, for local play-testing."""
    with store.transaction():
        if store.find_vitals(DEMO_PLAYER) is not None:
            return
        store.add_vitals(
            ActorVitals(owner_identity=DEMO_PLAYER, health=80.0, hunger=40.0, thirst=50.0),
            username="Demo",
        )
        for instance_id, (name, quantity) in enumerate(
            [("Mushroom", 5), ("Corn", 2), ("Pumpkin", 1), ("Wooden Spear", 1)],
            start=1,
        ):
            definition = registry.get_by_name(name)
            if definition is None:
                continue
            store.add_instance(
                InventoryItem(
                    instance_id=instance_id,
                    owner_identity=DEMO_PLAYER,
                    item_def_id=definition.item_def_id,
                    quantity=quantity,
                )
            )
        logger.info("Seeded demo player %s", DEMO_PLAYER)
