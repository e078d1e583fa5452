"""
Fish valuation.

Value = base_value * size multiplier * rarity multiplier, rounded half up to
an integer. The multiplier tables come from the catalog (valuation.yaml); the
defaults below mirror the shipped data pack so the engine can run without a
loaded catalog.
"""

import math
from typing import Optional

from .data_types import AquariumFish, ValuationTable


DEFAULT_SIZE_MULTIPLIERS = {
    'Tiny': 0.5,
    'Small': 0.8,
    'Medium': 1.0,
    'Large': 1.5,
    'Huge': 2.5,
}

DEFAULT_RARITY_MULTIPLIERS = {
    'Common': 1.0,
    'Uncommon': 1.5,
    'Rare': 2.5,
    'Epic': 4.0,
    'Legendary': 10.0,
}


def default_valuation() -> ValuationTable:
    return ValuationTable(
        size_multipliers=dict(DEFAULT_SIZE_MULTIPLIERS),
        rarity_multipliers=dict(DEFAULT_RARITY_MULTIPLIERS),
    )


def round_half_up(value: float) -> int:
    """Round to nearest integer, halves away from zero for positive values"""
    return int(math.floor(value + 0.5))


def value_of(base_value: float, size: str, rarity: str,
             table: Optional[ValuationTable] = None) -> int:
    """
    Compute fish value from base value and size/rarity classes.

    Unknown size or rarity classes use a 1.0 multiplier.
    """
    table = table or default_valuation()
    return round_half_up(
        base_value * table.size_multiplier(size) * table.rarity_multiplier(rarity)
    )


def resolve_base_value(fish: AquariumFish, table: Optional[ValuationTable] = None) -> float:
    """
    Base value of a fish, deriving it from current value when missing.

    Records written before base_value was tracked only carry the multiplied
    value, so the multipliers are divided back out.
    """
    if fish.base_value is not None:
        return fish.base_value
    table = table or default_valuation()
    divisor = table.size_multiplier(fish.size) * table.rarity_multiplier(fish.rarity)
    if divisor <= 0:
        return float(fish.value)
    return fish.value / divisor
