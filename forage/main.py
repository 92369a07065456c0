"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from fastapi import FastAPI

from forage.api.health import router as health_router
from forage.api.items import router as items_router
from forage.config import settings
from forage.core.event_bus import EventBus
from forage.core.item.effects import EffectCatalog
from forage.core.item.registry import DefinitionRegistry
from forage.core.logging import get_logger, setup_logging
from forage.db.database import SessionLocal, engine as db_engine
from forage.db.models import Base
from forage.db.seed import seed_demo_player, sync_reference_data
from forage.db.store import SqlAlchemyStore

setup_logging(settings.LOG_LEVEL, sql_echo=settings.DEBUG)
logger = get_logger(__name__)

DEFAULT_DATA_DIR = Path(__file__).parent / "data"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    data_dir = Path(settings.SEED_DATA_DIR or DEFAULT_DATA_DIR)

    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=db_engine)

    registry = DefinitionRegistry()
    registry.load_from_json(data_dir / "seed_items.json")

    catalog = EffectCatalog.default()
    catalog.load_from_json(data_dir / "seed_effects.json")

    db_session = SessionLocal()
    try:
        store = SqlAlchemyStore(db_session)
        sync_reference_data(store, registry, data_dir)
        if settings.SEED_DEMO_PLAYERS:
            seed_demo_player(store, registry)
    finally:
        db_session.close()

    app.state.effect_catalog = catalog
    app.state.event_bus = EventBus()
    logger.info(
        "forage ready: %d item definitions, %d effects", registry.count(), len(catalog)
    )

    yield

    logger.info("Shutting down...")
    app.state.event_bus.clear()


app = FastAPI(title="forage", lifespan=lifespan)

app.include_router(health_router)
app.include_router(items_router)
