"""
Environment decay model.

Drifts aquarium-wide water quality and temperature for a catch-up pass and
derives the environment factor consumed by the lifecycle engine. Applied
exactly once per pass, before any per-fish processing, so env_factor stays
fixed for the whole pass.
"""

from .data_types import Aquarium, DecayRates
from .constants import (
    BASE_HUNGER_RATE,
    BASE_WATER_RATE,
    BASE_TEMP_RATE,
    MAX_DECAY_PER_PASS,
    STAT_MIN,
    STAT_MAX,
)


def compute_decay(days: float, maintenance_rate: float) -> DecayRates:
    """
    Compute per-pass decay amounts.

    Args:
        days: Elapsed days for this pass
        maintenance_rate: Aquarium type multiplier (1.0 = standard)

    Returns:
        DecayRates with hunger, water_quality and temperature decreases,
        each capped at the full stat range
    """
    scale = days * maintenance_rate
    return DecayRates(
        hunger=min(MAX_DECAY_PER_PASS, BASE_HUNGER_RATE * scale),
        water_quality=min(MAX_DECAY_PER_PASS, BASE_WATER_RATE * scale),
        temperature=min(MAX_DECAY_PER_PASS, BASE_TEMP_RATE * scale),
    )


def environment_factor(aquarium: Aquarium) -> float:
    """
    Combined [0, 1] environment multiplier.

    1.0 = ideal conditions, 0.0 = water quality or temperature fully depleted.
    """
    water = min(STAT_MAX, max(STAT_MIN, aquarium.water_quality)) / STAT_MAX
    temperature = min(STAT_MAX, max(STAT_MIN, aquarium.temperature)) / STAT_MAX
    return water * temperature


def apply_environment_decay(aquarium: Aquarium, rates: DecayRates) -> float:
    """
    Apply water quality and temperature drift in place.

    Returns:
        env_factor computed from the updated stats
    """
    aquarium.water_quality = max(STAT_MIN, aquarium.water_quality - rates.water_quality)
    aquarium.temperature = max(STAT_MIN, aquarium.temperature - rates.temperature)
    return environment_factor(aquarium)
