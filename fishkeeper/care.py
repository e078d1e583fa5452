"""
Player care actions and boundary normalization.

Feeding, cleaning, temperature adjustment, decorations, and moving fish in
and out of an aquarium. Each action mutates the aquarium in place and raises
a CareError subclass when it cannot apply; callers run a catch-up pass
(maintenance.apply_maintenance) before acting so actions land on current
stats.

fish_from_inventory is the single place where loosely-shaped inventory
records (bare species names, partial dicts) become AquariumFish.
"""

from datetime import datetime
from typing import Any, Dict, Optional, Union

from .data_types import (
    Aquarium, AquariumFish, AquariumTypeConfig, Catalog, DecorationConfig, GrowthStage,
)
from .rng import RandomSource, random_rarity, random_size
from .valuation import round_half_up, value_of
from .constants import (
    STAT_MAX,
    TRANSFER_HUNGER,
    TRANSFER_HAPPINESS,
    CARE_HAPPINESS_BOOST,
    FISH_NAME_MAX_LENGTH,
    STATUS_GOOD,
    STATUS_FAIR,
    STATUS_POOR,
)


class CareError(Exception):
    """Base class for rejected care actions"""
    pass


class AquariumFullError(CareError):
    pass


class FishNotFoundError(CareError):
    pass


class DecorationError(CareError):
    pass


class FishNameError(CareError):
    pass


class NothingToDoError(CareError):
    """The action would not change anything (already fed, already clean, ...)"""
    pass


def _boost_happiness(aquarium: Aquarium, amount: float):
    for fish in aquarium.fish:
        fish.happiness = min(STAT_MAX, fish.happiness + amount)


# ============================================================================
# Setup
# ============================================================================

def setup_aquarium(owner_id: str, type_config: AquariumTypeConfig, now: datetime) -> Aquarium:
    """Create an empty aquarium at optimal water quality and temperature"""
    return Aquarium(
        owner_id=str(owner_id),
        type_name=type_config.name,
        capacity=type_config.capacity,
        water_quality=STAT_MAX,
        temperature=STAT_MAX,
        last_maintenance=now,
    )


# ============================================================================
# Tank Care
# ============================================================================

def feed_fish(aquarium: Aquarium) -> int:
    """
    Feed every hungry fish to full and give it a happiness boost.

    Returns:
        Number of fish fed

    Raises:
        FishNotFoundError: aquarium is empty
        NothingToDoError: no fish is hungry
    """
    if not aquarium.fish:
        raise FishNotFoundError("Aquarium has no fish to feed")

    fed = 0
    for fish in aquarium.fish:
        if fish.hunger < STAT_MAX:
            fish.hunger = STAT_MAX
            fish.happiness = min(STAT_MAX, fish.happiness + CARE_HAPPINESS_BOOST)
            fed += 1

    if fed == 0:
        raise NothingToDoError("Fish aren't hungry right now")
    return fed


def clean_water(aquarium: Aquarium):
    """Restore water quality to 100 and boost every fish's happiness"""
    if aquarium.water_quality >= STAT_MAX:
        raise NothingToDoError("Water is already clean")
    aquarium.water_quality = STAT_MAX
    _boost_happiness(aquarium, CARE_HAPPINESS_BOOST)


def adjust_temperature(aquarium: Aquarium):
    """Restore temperature to optimal and boost every fish's happiness"""
    if aquarium.temperature >= STAT_MAX:
        raise NothingToDoError("Temperature is already optimal")
    aquarium.temperature = STAT_MAX
    _boost_happiness(aquarium, CARE_HAPPINESS_BOOST)


def add_decoration(aquarium: Aquarium, decoration: DecorationConfig):
    """Install a decoration; each decoration can be installed once"""
    if decoration.name in aquarium.decorations:
        raise DecorationError(f"{decoration.name} is already installed")
    aquarium.decorations.append(decoration.name)
    _boost_happiness(aquarium, decoration.happiness_bonus)


# ============================================================================
# Fish Transfer
# ============================================================================

def fish_from_inventory(
    item: Union[str, Dict[str, Any]],
    catalog: Catalog,
    rng: RandomSource
) -> AquariumFish:
    """
    Normalize an inventory fish record into an AquariumFish.

    A bare species name gets a rolled size and rarity and a value derived
    from the species entry. A dict keeps its attributes; missing size,
    rarity, or base value are filled the same way.

    Raises:
        FishNotFoundError: unknown species for a name-only record
    """
    if isinstance(item, str):
        item = {'name': item}

    name = item['name']
    species = catalog.species.get(name)

    size = item.get('size')
    rarity = item.get('rarity')
    base_value = item.get('base_value')

    if size is None or rarity is None or (base_value is None and item.get('value') is None):
        if species is None:
            raise FishNotFoundError(f"Unknown species: {name}")
        if size is None:
            size = random_size(rng)
        if rarity is None:
            rarity = random_rarity(rng, species.difficulty)
        if base_value is None:
            base_value = species.value

    value = item.get('value')
    if value is None:
        value = value_of(base_value, size, rarity, catalog.valuation)

    return AquariumFish(
        name=name,
        custom_name=item.get('custom_name'),
        rarity=rarity,
        size=size,
        base_value=base_value,
        value=int(value),
        growth=GrowthStage(item.get('growth') or GrowthStage.ADULT.value),
    )


def add_fish(aquarium: Aquarium, fish: AquariumFish) -> int:
    """
    Move a fish into the aquarium, resetting its care state.

    Returns:
        Index of the fish in the aquarium

    Raises:
        AquariumFullError: aquarium is at capacity
    """
    if aquarium.is_full:
        raise AquariumFullError(f"Aquarium can only hold {aquarium.capacity} fish")

    fish.hunger = TRANSFER_HUNGER
    fish.happiness = TRANSFER_HAPPINESS
    fish.last_bred = None
    aquarium.fish.append(fish)
    return len(aquarium.fish) - 1


def _fish_at(aquarium: Aquarium, index: int) -> AquariumFish:
    if index < 0 or index >= len(aquarium.fish):
        raise FishNotFoundError(f"No fish at position {index}")
    return aquarium.fish[index]


def remove_fish(aquarium: Aquarium, index: int) -> AquariumFish:
    """Take a fish out of the aquarium and return it (for the inventory)"""
    _fish_at(aquarium, index)
    return aquarium.fish.pop(index)


def rename_fish(aquarium: Aquarium, index: int, custom_name: Optional[str]) -> AquariumFish:
    """
    Give a fish a custom name (surrounding whitespace is trimmed).

    Raises:
        FishNotFoundError: bad index
        NothingToDoError: blank name; the fish keeps its current name
        FishNameError: name longer than FISH_NAME_MAX_LENGTH
    """
    fish = _fish_at(aquarium, index)
    cleaned = custom_name.strip() if custom_name else ''
    if not cleaned:
        raise NothingToDoError("No name given; the fish keeps its current name")
    if len(cleaned) > FISH_NAME_MAX_LENGTH:
        raise FishNameError(f"Fish names can be at most {FISH_NAME_MAX_LENGTH} characters")
    fish.custom_name = cleaned
    return fish


# ============================================================================
# Status
# ============================================================================

def average_hunger(aquarium: Aquarium) -> int:
    if not aquarium.fish:
        return int(STAT_MAX)
    return round_half_up(sum(f.hunger for f in aquarium.fish) / len(aquarium.fish))


def average_happiness(aquarium: Aquarium) -> int:
    if not aquarium.fish:
        return int(STAT_MAX)
    return round_half_up(sum(f.happiness for f in aquarium.fish) / len(aquarium.fish))


def status_level(value: float) -> str:
    """Coarse status bucket for rendering: good, fair, poor, or critical"""
    if value >= STATUS_GOOD:
        return 'good'
    if value >= STATUS_FAIR:
        return 'fair'
    if value >= STATUS_POOR:
        return 'poor'
    return 'critical'
