"""
Fish lifecycle engine.

Evaluates every fish once per catch-up pass, in a fixed order:

    hunger decay -> happiness decay -> growth -> breeding -> mortality

Later phases see the values written by earlier ones (breeding sees decayed
hunger, mortality sees hunger after the breeding cost).

Population changes are deferred. The pass iterates over a snapshot of the
fish list; offspring go to a pending list and deaths to an index list. Both
are merged after the loop: offspring appended while capacity allows, then
dead fish removed in descending index order.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from .data_types import (
    Aquarium, AquariumFish, AquariumTypeConfig, DecayRates,
    GrowthStage, GrowthTransition, ValuationTable,
)
from .breeding import cooldown_elapsed, find_mate, make_offspring
from .mortality import should_die
from .rng import RandomSource, does_event_happen
from .valuation import resolve_base_value, value_of
from .constants import (
    BASE_HAPPY_RATE,
    STARVING_THRESHOLD,
    STARVING_HAPPY_MULTIPLIER,
    GROWTH_BASE,
    GROWTH_MIN_HUNGER,
    BREEDING_MIN_HAPPINESS,
    BREEDING_MIN_HUNGER,
    BREEDING_HUNGER_COST,
    STAT_MIN,
    STAT_MAX,
)

logger = logging.getLogger(__name__)


@dataclass
class PassOutcome:
    """Population changes and growth transitions produced by one pass"""
    born: List[AquariumFish] = field(default_factory=list)
    died: List[AquariumFish] = field(default_factory=list)
    growth: List[GrowthTransition] = field(default_factory=list)


def happiness_decrease(days: float, env_factor: float, hunger: float) -> float:
    """
    Happiness lost over a pass.

    Poor environment doubles the base rate at worst (env_factor 0), starvation
    doubles it again; the penalties multiply.
    """
    starving = STARVING_HAPPY_MULTIPLIER if hunger < STARVING_THRESHOLD else 1.0
    return BASE_HAPPY_RATE * days * (2.0 - env_factor) * starving


class FishLifecycleEngine:
    """
    Single catch-up pass over an aquarium's fish.

    Construct one per pass; run() mutates the aquarium in place.
    """

    def __init__(
        self,
        aquarium: Aquarium,
        now: datetime,
        days: float,
        rates: DecayRates,
        env_factor: float,
        type_config: AquariumTypeConfig,
        rng: RandomSource,
        valuation: Optional[ValuationTable] = None
    ):
        self.aquarium = aquarium
        self.now = now
        self.days = days
        self.rates = rates
        self.env_factor = env_factor
        self.type_config = type_config
        self.rng = rng
        self.valuation = valuation

        self.outcome = PassOutcome()
        self._dead_indices: List[int] = []

    @property
    def capacity(self) -> int:
        return min(self.aquarium.capacity, self.type_config.capacity)

    def run(self) -> PassOutcome:
        if not self.aquarium.fish:
            return self.outcome

        snapshot = list(self.aquarium.fish)
        for index, fish in enumerate(snapshot):
            self._decay_hunger(fish)
            self._decay_happiness(fish)
            self._check_growth(fish)
            self._check_breeding(fish)
            self._check_mortality(index, fish)

        self._merge_offspring()
        self._remove_dead()
        return self.outcome

    # ------------------------------------------------------------------
    # Per-fish phases
    # ------------------------------------------------------------------

    def _decay_hunger(self, fish: AquariumFish):
        fish.hunger = min(STAT_MAX, max(STAT_MIN, fish.hunger - self.rates.hunger))

    def _decay_happiness(self, fish: AquariumFish):
        decrease = happiness_decrease(self.days, self.env_factor, fish.hunger)
        fish.happiness = min(STAT_MAX, max(STAT_MIN, fish.happiness - decrease))

    def _check_growth(self, fish: AquariumFish):
        if fish.is_adult:
            return
        if fish.hunger <= GROWTH_MIN_HUNGER:
            return

        chance = GROWTH_BASE * self.days * (fish.happiness / STAT_MAX)
        if not does_event_happen(self.rng, chance):
            return

        previous = fish.growth
        fish.growth = previous.next_stage()
        self.outcome.growth.append(GrowthTransition(
            fish_name=fish.display_name,
            from_stage=previous,
            to_stage=fish.growth
        ))
        logger.info("%s grew from %s to %s", fish.display_name,
                    previous.value, fish.growth.value)

        if fish.growth is GrowthStage.ADULT:
            base_value = resolve_base_value(fish, self.valuation)
            fish.base_value = base_value
            fish.value = value_of(base_value, fish.size, fish.rarity, self.valuation)

    def _check_breeding(self, fish: AquariumFish):
        if not fish.is_adult:
            return
        if fish.happiness <= BREEDING_MIN_HAPPINESS or fish.hunger <= BREEDING_MIN_HUNGER:
            return
        if not cooldown_elapsed(fish, self.now):
            return
        # Pending births count against capacity so late successes are rejected
        if len(self.aquarium.fish) + len(self.outcome.born) >= self.capacity:
            return
        if not does_event_happen(self.rng, self.type_config.breeding_chance * self.days):
            return

        mate = find_mate(fish, self.aquarium, self.now)
        if mate is None:
            return

        baby = make_offspring(fish)
        self.outcome.born.append(baby)

        fish.last_bred = self.now
        mate.last_bred = self.now
        fish.hunger = max(STAT_MIN, fish.hunger - BREEDING_HUNGER_COST)
        mate.hunger = max(STAT_MIN, mate.hunger - BREEDING_HUNGER_COST)
        logger.info("%s bred with %s", fish.display_name, mate.display_name)

    def _check_mortality(self, index: int, fish: AquariumFish):
        if should_die(fish.hunger, fish.happiness, self.days, self.rng):
            self._dead_indices.append(index)

    # ------------------------------------------------------------------
    # Post-pass merge
    # ------------------------------------------------------------------

    def _merge_offspring(self):
        accepted = []
        for baby in self.outcome.born:
            if len(self.aquarium.fish) >= self.capacity:
                break
            self.aquarium.fish.append(baby)
            accepted.append(baby)
        self.outcome.born = accepted

    def _remove_dead(self):
        for index in sorted(self._dead_indices, reverse=True):
            fish = self.aquarium.fish.pop(index)
            self.outcome.died.append(fish)
            logger.info("%s died of neglect", fish.display_name)
        # Report in original list order
        self.outcome.died.reverse()


def run_lifecycle_pass(
    aquarium: Aquarium,
    now: datetime,
    days: float,
    rates: DecayRates,
    env_factor: float,
    type_config: AquariumTypeConfig,
    rng: RandomSource,
    valuation: Optional[ValuationTable] = None
) -> PassOutcome:
    """Run one lifecycle pass (see FishLifecycleEngine)"""
    engine = FishLifecycleEngine(
        aquarium=aquarium,
        now=now,
        days=days,
        rates=rates,
        env_factor=env_factor,
        type_config=type_config,
        rng=rng,
        valuation=valuation
    )
    return engine.run()
