"""Stat clamping and effect application"""

import pytest

from forage.core.item.effects import EffectDefinition
from forage.core.item.models import ActorVitals, ItemCategory
from forage.core.item.vitals import MAX_STAT_VALUE, apply_effect, clamp_stat


class TestClampStat:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (50.0, 50.0),
            (0.0, 0.0),
            (100.0, 100.0),
            (113.0, 100.0),
            (-7.5, 0.0),
            (99.9, 99.9),
        ],
    )
    def test_clamp(self, value: float, expected: float) -> None:
        assert clamp_stat(value) == expected

    def test_max_is_100(self) -> None:
        assert MAX_STAT_VALUE == 100.0


class TestApplyEffect:
    def test_within_bounds(self) -> None:
        before = ActorVitals("p1", health=90.0, hunger=50.0, thirst=50.0)
        after = apply_effect(before, EffectDefinition(5.0, 10.0, 5.0))
        assert (after.health, after.hunger, after.thirst) == (95.0, 60.0, 55.0)

    def test_each_stat_clamped_independently(self) -> None:
        before = ActorVitals("p1", health=98.0, hunger=40.0, thirst=99.0)
        after = apply_effect(before, EffectDefinition(15.0, 25.0, 10.0))
        assert after.health == 100.0
        assert after.hunger == 65.0
        assert after.thirst == 100.0

    def test_negative_delta_floors_at_zero(self) -> None:
        before = ActorVitals("p1", health=3.0, hunger=10.0, thirst=0.0)
        after = apply_effect(before, EffectDefinition(-5.0, -2.0, -1.0))
        assert (after.health, after.hunger, after.thirst) == (0.0, 8.0, 0.0)

    def test_input_not_mutated(self) -> None:
        before = ActorVitals("p1", health=10.0, hunger=10.0, thirst=10.0)
        after = apply_effect(before, EffectDefinition(1.0, 1.0, 1.0))
        assert before.health == 10.0
        assert after is not before
        assert after.owner_identity == "p1"


class TestItemCategory:
    def test_only_consumable_is_consumable(self) -> None:
        consumable = [c for c in ItemCategory if c.is_consumable]
        assert consumable == [ItemCategory.CONSUMABLE]

    def test_value_round_trip(self) -> None:
        assert ItemCategory("RangedWeapon") is ItemCategory.RANGED_WEAPON
