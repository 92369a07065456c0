"""API request/response schemas."""

from pydantic import BaseModel, Field


# === Request Schemas ===


class ConsumeRequest(BaseModel):
    """Consume one unit of an item stack"""

    player_identity: str = Field(..., min_length=1, description="Requesting player identity")


# === Response Schemas ===


class VitalsInfo(BaseModel):
    player_identity: str
    health: float
    hunger: float
    thirst: float


class ConsumeResponse(BaseModel):
    """Result of a successful consume"""

    success: bool = True
    instance_id: int
    item_name: str
    remaining_quantity: int
    depleted: bool
    stats_changed: bool
    vitals: VitalsInfo


class InventoryStack(BaseModel):
    instance_id: int
    item_def_id: int
    quantity: int


class InventoryResponse(BaseModel):
    player_identity: str
    items: list[InventoryStack] = []


class WeaponStatsInfo(BaseModel):
    item_name: str
    weapon_range: float
    projectile_speed: float
    accuracy: float = Field(..., ge=0.0, le=1.0)
    reload_time_secs: float


class ErrorResponse(BaseModel):
    """Error body"""

    detail: str
