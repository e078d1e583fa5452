"""
Mortality evaluator.

A fish that is both starving and miserable has a DEATH_CHANCE_PER_DAY chance
of dying per elapsed day. Healthier fish never roll.
"""

from .rng import RandomSource, does_event_happen
from .constants import DEATH_MAX_HUNGER, DEATH_MAX_HAPPINESS, DEATH_CHANCE_PER_DAY


def is_neglected(hunger: float, happiness: float) -> bool:
    return hunger < DEATH_MAX_HUNGER and happiness < DEATH_MAX_HAPPINESS


def should_die(hunger: float, happiness: float, elapsed_days: float, rng: RandomSource) -> bool:
    """
    Probabilistic death check.

    The rng is only consumed when the neglect gate passes.
    """
    if not is_neglected(hunger, happiness):
        return False
    return does_event_happen(rng, DEATH_CHANCE_PER_DAY * elapsed_days)
