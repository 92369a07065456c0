"""Vital stat bounds"""

from dataclasses import replace

from .effects import EffectDefinition
from .models import ActorVitals

MIN_STAT_VALUE = 0.0
MAX_STAT_VALUE = 100.0  # health, hunger, thirst


def clamp_stat(value: float) -> float:
    """Bound a stat into [MIN_STAT_VALUE, MAX_STAT_VALUE]."""
    return max(MIN_STAT_VALUE, min(MAX_STAT_VALUE, value))


def apply_effect(vitals: ActorVitals, effect: EffectDefinition) -> ActorVitals:
    """Return a new record with each delta added and clamped independently.

    The input record is left untouched.
    """
    return replace(
        vitals,
        health=clamp_stat(vitals.health + effect.health_delta),
        hunger=clamp_stat(vitals.hunger + effect.hunger_delta),
        thirst=clamp_stat(vitals.thirst + effect.thirst_delta),
    )
