"""Item consumption API tests (TestClient + in-memory SQLite)"""

import pytest
from fastapi.testclient import TestClient

from forage.core.item.models import ActorVitals, InventoryItem
from forage.db.store import SqlAlchemyStore


@pytest.fixture()
def seeded(client: TestClient, sql_store: SqlAlchemyStore) -> TestClient:
    """alice: mushrooms x3, corn x1, spear; bob: mushrooms x2"""
    with sql_store.transaction():
        sql_store.add_vitals(ActorVitals("alice", 90.0, 50.0, 50.0), username="Alice")
        sql_store.add_vitals(ActorVitals("bob", 20.0, 20.0, 20.0), username="Bob")
        sql_store.add_instance(InventoryItem(1, "alice", 7, 3))
        sql_store.add_instance(InventoryItem(2, "alice", 8, 1))
        sql_store.add_instance(InventoryItem(3, "alice", 10, 1))
        sql_store.add_instance(InventoryItem(4, "bob", 7, 2))
    return client


def _consume(client: TestClient, instance_id, player: str = "alice"):
    return client.post(f"/items/{instance_id}/consume", json={"player_identity": player})


class TestConsumeEndpoint:
    def test_success(self, seeded: TestClient) -> None:
        response = _consume(seeded, 1)
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["item_name"] == "Mushroom"
        assert data["remaining_quantity"] == 2
        assert data["depleted"] is False
        assert data["vitals"] == {
            "player_identity": "alice",
            "health": 95.0,
            "hunger": 60.0,
            "thirst": 55.0,
        }

    def test_depletion_removes_from_inventory(self, seeded: TestClient) -> None:
        assert _consume(seeded, 2).json()["depleted"] is True
        items = seeded.get("/players/alice/inventory").json()["items"]
        assert [i["instance_id"] for i in items] == [1, 3]

    def test_not_found(self, seeded: TestClient) -> None:
        response = _consume(seeded, 999)
        assert response.status_code == 404
        assert response.json()["detail"] == "Item instance 999 not found."

    def test_not_owner(self, seeded: TestClient) -> None:
        response = _consume(seeded, 4)
        assert response.status_code == 403
        assert seeded.get("/players/bob/inventory").json()["items"][0]["quantity"] == 2
        assert seeded.get("/players/alice/vitals").json()["health"] == 90.0

    def test_not_consumable(self, seeded: TestClient) -> None:
        response = _consume(seeded, 3)
        assert response.status_code == 409
        assert response.json()["detail"] == "Item 'Wooden Spear' is not consumable."

    def test_actor_not_found(self, seeded: TestClient, sql_store: SqlAlchemyStore) -> None:
        with sql_store.transaction():
            sql_store.add_instance(InventoryItem(5, "carol", 7, 1))
        response = _consume(seeded, 5, player="carol")
        assert response.status_code == 404
        assert response.json()["detail"] == "Player not found to apply consumable effects."

    def test_definition_not_found(self, seeded: TestClient, sql_store: SqlAlchemyStore) -> None:
        with sql_store.transaction():
            sql_store.add_instance(InventoryItem(6, "alice", 999, 1))
        response = _consume(seeded, 6)
        assert response.status_code == 500

    @pytest.mark.parametrize("instance_id", [-1, 2**64])
    def test_id_outside_u64_rejected(self, seeded: TestClient, instance_id: int) -> None:
        assert _consume(seeded, instance_id).status_code == 422

    def test_max_u64_is_valid_but_missing(self, seeded: TestClient) -> None:
        assert _consume(seeded, 2**64 - 1).status_code == 404

    def test_missing_identity_rejected(self, seeded: TestClient) -> None:
        response = seeded.post("/items/1/consume", json={})
        assert response.status_code == 422


class TestReadEndpoints:
    def test_vitals(self, seeded: TestClient) -> None:
        data = seeded.get("/players/bob/vitals").json()
        assert data == {"player_identity": "bob", "health": 20.0, "hunger": 20.0, "thirst": 20.0}

    def test_vitals_unknown_player(self, seeded: TestClient) -> None:
        assert seeded.get("/players/nobody/vitals").status_code == 404

    def test_inventory_empty(self, seeded: TestClient) -> None:
        data = seeded.get("/players/nobody/inventory").json()
        assert data == {"player_identity": "nobody", "items": []}

    def test_weapon_stats(self, seeded: TestClient) -> None:
        data = seeded.get("/weapons/Hunting Bow").json()
        assert data["accuracy"] == 0.85
        assert data["reload_time_secs"] == 1.5

    def test_weapon_stats_missing(self, seeded: TestClient) -> None:
        assert seeded.get("/weapons/Wooden Spear").status_code == 404
