"""Reference data sync + demo player seeding"""

from forage.core.item.registry import DefinitionRegistry
from forage.db.seed import DEMO_PLAYER, seed_demo_player, sync_reference_data
from forage.db.store import SqlAlchemyStore
from forage.main import DEFAULT_DATA_DIR


def test_sync_is_idempotent(sql_store: SqlAlchemyStore, registry: DefinitionRegistry) -> None:
    # sql_store fixture already synced once
    assert sync_reference_data(sql_store, registry, DEFAULT_DATA_DIR) == 0
    assert sql_store.find_definition(8).name == "Corn"
    assert sql_store.find_weapon_stats("Hunting Bow") is not None


def test_demo_player(sql_store: SqlAlchemyStore, registry: DefinitionRegistry) -> None:
    seed_demo_player(sql_store, registry)
    seed_demo_player(sql_store, registry)

    vitals = sql_store.find_vitals(DEMO_PLAYER)
    assert (vitals.health, vitals.hunger, vitals.thirst) == (80.0, 40.0, 50.0)
    stacks = sql_store.list_instances(DEMO_PLAYER)
    assert [(s.item_def_id, s.quantity) for s in stacks] == [(7, 5), (8, 2), (12, 1), (10, 1)]


def test_demo_player_leaves_no_open_transaction(
    sql_store: SqlAlchemyStore, registry: DefinitionRegistry, db_session
) -> None:
    seed_demo_player(sql_store, registry)
    assert not db_session.in_transaction()
    # existing player: the lookup must not leave the write lock held either
    seed_demo_player(sql_store, registry)
    assert not db_session.in_transaction()
