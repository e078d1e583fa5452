"""
Breeding matcher.

Finds an eligible same-species mate for a breeding candidate and builds the
offspring. Mate search is first-match over the aquarium's fish list, so list
order decides which mate is chosen when several qualify.
"""

import math
from datetime import datetime
from typing import Optional

from .data_types import Aquarium, AquariumFish, GrowthStage
from .constants import (
    BREEDING_COOLDOWN,
    BREEDING_MIN_HAPPINESS,
    BREEDING_MIN_HUNGER,
    OFFSPRING_HUNGER,
    OFFSPRING_HAPPINESS,
    OFFSPRING_VALUE_FRACTION,
)


def cooldown_elapsed(fish: AquariumFish, now: datetime) -> bool:
    """True if the fish never bred or bred more than BREEDING_COOLDOWN ago"""
    return fish.last_bred is None or (now - fish.last_bred) > BREEDING_COOLDOWN


def is_breeding_ready(fish: AquariumFish, now: datetime) -> bool:
    """Adult, happy, fed, and off cooldown"""
    return (
        fish.is_adult
        and fish.happiness > BREEDING_MIN_HAPPINESS
        and fish.hunger > BREEDING_MIN_HUNGER
        and cooldown_elapsed(fish, now)
    )


def find_mate(candidate: AquariumFish, aquarium: Aquarium, now: datetime) -> Optional[AquariumFish]:
    """
    Find the first eligible mate for candidate.

    Eligible: a different individual (by identity) of the same species that
    is breeding-ready at this moment.

    Returns:
        Mate fish, or None if nobody qualifies
    """
    for potential_mate in aquarium.fish:
        if potential_mate is candidate:
            continue
        if potential_mate.name != candidate.name:
            continue
        if is_breeding_ready(potential_mate, now):
            return potential_mate
    return None


def make_offspring(parent: AquariumFish) -> AquariumFish:
    """
    Create a Baby fish inheriting species, size, rarity and base value.

    Babies are worth a tenth of the parent's current value (floored).
    """
    return AquariumFish(
        name=parent.name,
        rarity=parent.rarity,
        size=parent.size,
        base_value=parent.base_value,
        value=int(math.floor(parent.value * OFFSPRING_VALUE_FRACTION)),
        hunger=OFFSPRING_HUNGER,
        happiness=OFFSPRING_HAPPINESS,
        growth=GrowthStage.BABY,
        last_bred=None,
    )
