"""
Inline test helpers: fish/aquarium builders and a scripted random source.

Scripted draws make roll outcomes explicit; draws counts every random() call
so tests can assert which rolls were attempted.
"""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from fishkeeper.data_types import Aquarium, AquariumFish, AquariumTypeConfig, GrowthStage

DATA_ROOT = Path(__file__).parent.parent.parent / "data"
SCHEMA_DIR = DATA_ROOT / "schemas"

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)

ALWAYS = 0.0        # Every roll with positive probability succeeds
NEVER = 0.999999    # Every roll with probability <= 0.999999 fails


class ScriptedRandom:
    """Random source returning scripted values, then a default forever"""

    def __init__(self, values=(), default=NEVER):
        self._values = list(values)
        self._default = default
        self.draws = 0

    def random(self) -> float:
        self.draws += 1
        if self._values:
            return self._values.pop(0)
        return self._default

    def integers(self, low: int, high: int) -> int:
        return low


def make_fish(name='Goldfish', hunger=100.0, happiness=80.0, growth=GrowthStage.ADULT,
              value=30, base_value=10.0, size='Medium', rarity='Common', last_bred=None,
              custom_name=None) -> AquariumFish:
    return AquariumFish(
        name=name,
        rarity=rarity,
        size=size,
        value=value,
        base_value=base_value,
        hunger=hunger,
        happiness=happiness,
        growth=growth,
        last_bred=last_bred,
        custom_name=custom_name,
    )


def make_aquarium(fish=None, days_ago=1.0, capacity=10, water_quality=100.0,
                  temperature=100.0, type_name='Test Aquarium') -> Aquarium:
    return Aquarium(
        owner_id='owner-1',
        type_name=type_name,
        capacity=capacity,
        water_quality=water_quality,
        temperature=temperature,
        fish=list(fish or []),
        last_maintenance=NOW - timedelta(days=days_ago),
    )


def make_config(capacity=10, maintenance_rate=1.0, breeding_chance=0.05,
                name='Test Aquarium') -> AquariumTypeConfig:
    return AquariumTypeConfig(
        name=name,
        capacity=capacity,
        maintenance_rate=maintenance_rate,
        breeding_chance=breeding_chance,
    )
