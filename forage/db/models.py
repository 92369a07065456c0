"""SQLAlchemy declarative models for items, inventory and player vitals."""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all database models."""


class ItemDefinitionModel(Base):
    """ORM model for item definitions (read-only reference data)."""

    __tablename__ = "item_definitions"

    item_def_id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    category: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str] = mapped_column(Text, default="")
    stackable: Mapped[bool] = mapped_column(Boolean, default=True)


class InventoryItemModel(Base):
    """ORM model for item stacks held by players."""

    __tablename__ = "inventory_items"

    instance_id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    owner_identity: Mapped[str] = mapped_column(String, nullable=False)
    item_def_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("item_definitions.item_def_id"), nullable=False
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_inventory_quantity_nonneg"),
        Index("idx_inventory_owner", "owner_identity"),
    )


class PlayerModel(Base):
    """ORM model for player vitals."""

    __tablename__ = "players"

    identity: Mapped[str] = mapped_column(String, primary_key=True)
    username: Mapped[str] = mapped_column(String, default="")
    health: Mapped[float] = mapped_column(Float, nullable=False, default=100.0)
    hunger: Mapped[float] = mapped_column(Float, nullable=False, default=100.0)
    thirst: Mapped[float] = mapped_column(Float, nullable=False, default=100.0)

    __table_args__ = (
        CheckConstraint("health >= 0 AND health <= 100", name="ck_players_health"),
        CheckConstraint("hunger >= 0 AND hunger <= 100", name="ck_players_hunger"),
        CheckConstraint("thirst >= 0 AND thirst <= 100", name="ck_players_thirst"),
    )


class RangedWeaponStatsModel(Base):
    """ORM model for ranged weapon ballistics, keyed by item name."""

    __tablename__ = "ranged_weapon_stats"

    item_name: Mapped[str] = mapped_column(String, primary_key=True)
    weapon_range: Mapped[float] = mapped_column(Float, nullable=False)
    projectile_speed: Mapped[float] = mapped_column(Float, nullable=False)
    accuracy: Mapped[float] = mapped_column(Float, nullable=False)
    reload_time_secs: Mapped[float] = mapped_column(Float, nullable=False)

    __table_args__ = (
        CheckConstraint("accuracy >= 0 AND accuracy <= 1", name="ck_weapon_accuracy"),
    )
