"""Inventory and player endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Path, Request
from sqlalchemy.orm import Session

from forage.api.schemas import (
    ConsumeRequest,
    ConsumeResponse,
    ErrorResponse,
    InventoryResponse,
    InventoryStack,
    VitalsInfo,
    WeaponStatsInfo,
)
from forage.core.event_bus import EventBus
from forage.core.item.effects import EffectCatalog
from forage.core.item.errors import ConsumeErrorKind
from forage.core.logging import get_logger
from forage.db.database import get_db
from forage.db.store import SqlAlchemyStore
from forage.services.consumption_service import ConsumptionService, consume_item

logger = get_logger(__name__)

router = APIRouter(tags=["items"])

U64_MAX = 2**64 - 1

ERROR_STATUS = {
    ConsumeErrorKind.ITEM_NOT_FOUND: 404,
    ConsumeErrorKind.NOT_OWNER: 403,
    ConsumeErrorKind.DEFINITION_NOT_FOUND: 500,
    ConsumeErrorKind.NOT_CONSUMABLE: 409,
    ConsumeErrorKind.ACTOR_NOT_FOUND: 404,
}


def get_store(db: Session = Depends(get_db)) -> SqlAlchemyStore:
    """Request-scoped store over the request's DB session"""
    return SqlAlchemyStore(db)


def get_consumption_service(
    request: Request, store: SqlAlchemyStore = Depends(get_store)
) -> ConsumptionService:
    """ConsumptionService bound to the request's store (dependency injection)"""
    catalog: EffectCatalog = request.app.state.effect_catalog
    bus: EventBus | None = getattr(request.app.state, "event_bus", None)
    return ConsumptionService(store, catalog, bus)


@router.post(
    "/items/{instance_id}/consume",
    response_model=ConsumeResponse,
    responses={
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
def consume(
    body: ConsumeRequest,
    instance_id: int = Path(..., ge=0, le=U64_MAX),
    service: ConsumptionService = Depends(get_consumption_service),
) -> ConsumeResponse:
    """Consume one unit of the stack and apply its effect to the owner."""
    result = consume_item(service, body.player_identity, instance_id)
    if not result.ok:
        raise HTTPException(status_code=ERROR_STATUS[result.kind], detail=result.error)

    outcome = result.outcome
    after = outcome.vitals_after
    return ConsumeResponse(
        instance_id=outcome.instance_id,
        item_name=outcome.item_name,
        remaining_quantity=outcome.remaining_quantity,
        depleted=outcome.depleted,
        stats_changed=outcome.stats_changed,
        vitals=VitalsInfo(
            player_identity=after.owner_identity,
            health=after.health,
            hunger=after.hunger,
            thirst=after.thirst,
        ),
    )


@router.get("/players/{identity}/vitals", response_model=VitalsInfo)
def get_vitals(identity: str, store: SqlAlchemyStore = Depends(get_store)) -> VitalsInfo:
    vitals = store.find_vitals(identity)
    if vitals is None:
        raise HTTPException(status_code=404, detail=f"Player {identity} not found")
    return VitalsInfo(
        player_identity=vitals.owner_identity,
        health=vitals.health,
        hunger=vitals.hunger,
        thirst=vitals.thirst,
    )


@router.get("/players/{identity}/inventory", response_model=InventoryResponse)
def get_inventory(
    identity: str, store: SqlAlchemyStore = Depends(get_store)
) -> InventoryResponse:
    items = [
        InventoryStack(
            instance_id=item.instance_id,
            item_def_id=item.item_def_id,
            quantity=item.quantity,
        )
        for item in store.list_instances(identity)
    ]
    return InventoryResponse(player_identity=identity, items=items)


@router.get("/weapons/{item_name}", response_model=WeaponStatsInfo)
def get_weapon_stats(
    item_name: str, store: SqlAlchemyStore = Depends(get_store)
) -> WeaponStatsInfo:
    stats = store.find_weapon_stats(item_name)
    if stats is None:
        raise HTTPException(status_code=404, detail=f"No weapon stats for '{item_name}'")
    return WeaponStatsInfo(
        item_name=stats.item_name,
        weapon_range=stats.weapon_range,
        projectile_speed=stats.projectile_speed,
        accuracy=stats.accuracy,
        reload_time_secs=stats.reload_time_secs,
    )
