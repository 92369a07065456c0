"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from forage.core.event_bus import EventBus
from forage.core.item.effects import EffectCatalog
from forage.core.item.registry import DefinitionRegistry
from forage.db.database import get_db, use_immediate_transactions
from forage.db.models import Base
from forage.db.seed import sync_reference_data
from forage.db.store import SqlAlchemyStore
from forage.main import DEFAULT_DATA_DIR, app

SEED_ITEMS_PATH = DEFAULT_DATA_DIR / "seed_items.json"

# foreign keys stay off (SQLite default) so tests can plant dangling item_def_ids
TEST_ENGINE = use_immediate_transactions(
    create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
)
TestSession = sessionmaker(bind=TEST_ENGINE, autocommit=False, autoflush=False)


@pytest.fixture()
def db_session() -> Session:
    """Fresh schema per test on a shared in-memory connection."""
    Base.metadata.create_all(TEST_ENGINE)
    session = TestSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(TEST_ENGINE)


@pytest.fixture()
def registry() -> DefinitionRegistry:
    reg = DefinitionRegistry()
    reg.load_from_json(SEED_ITEMS_PATH)
    return reg


@pytest.fixture()
def sql_store(db_session: Session, registry: DefinitionRegistry) -> SqlAlchemyStore:
    """SqlAlchemyStore with item definitions and weapon stats synced."""
    store = SqlAlchemyStore(db_session)
    sync_reference_data(store, registry, DEFAULT_DATA_DIR)
    return store


@pytest.fixture()
def client(sql_store: SqlAlchemyStore, db_session: Session) -> TestClient:
    """FastAPI TestClient wired to the in-memory database."""

    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    app.state.effect_catalog = EffectCatalog.default()
    app.state.event_bus = EventBus()
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
