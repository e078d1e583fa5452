"""
Data types for aquariums, fish, catalog entries, and maintenance results.

Catalog dataclasses are populated by loader.py from YAML files. Aquarium and
AquariumFish are the runtime records mutated by the catch-up engine and
serialized by store.py.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from functools import total_ordering
from typing import List, Dict, Optional, Any

from .constants import (
    DEFAULT_MAINTENANCE_RATE,
    DEFAULT_BREEDING_CHANCE,
    DEFAULT_DECORATION_BONUS,
    TRANSFER_HUNGER,
    TRANSFER_HAPPINESS,
)


# ============================================================================
# Growth Stages
# ============================================================================

@total_ordering
class GrowthStage(Enum):
    """Ordinal fish age class (Baby < Juvenile < Adult)"""
    BABY = "Baby"
    JUVENILE = "Juvenile"
    ADULT = "Adult"

    @property
    def ordinal(self) -> int:
        return _STAGE_ORDER.index(self)

    def next_stage(self) -> 'GrowthStage':
        """Following stage; Adult is terminal"""
        index = self.ordinal
        if index >= len(_STAGE_ORDER) - 1:
            return self
        return _STAGE_ORDER[index + 1]

    def __lt__(self, other: 'GrowthStage') -> bool:
        if not isinstance(other, GrowthStage):
            return NotImplemented
        return self.ordinal < other.ordinal


_STAGE_ORDER = [GrowthStage.BABY, GrowthStage.JUVENILE, GrowthStage.ADULT]


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)


def _format_timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


# ============================================================================
# Catalog Definitions
# ============================================================================

@dataclass
class AquariumTypeConfig:
    """Static aquarium type entry (capacity and decay/breeding tuning)"""
    name: str
    capacity: int
    maintenance_rate: float = DEFAULT_MAINTENANCE_RATE  # 1.0 = standard deterioration
    breeding_chance: float = DEFAULT_BREEDING_CHANCE  # Per happy adult per day
    price: int = 0
    description: Optional[str] = None


@dataclass
class DecorationConfig:
    """Decoration entry with its one-off happiness bonus"""
    name: str
    happiness_bonus: float = DEFAULT_DECORATION_BONUS
    price: int = 0
    description: Optional[str] = None


@dataclass
class FishSpecies:
    """Species entry used to normalize name-only inventory fish"""
    name: str
    difficulty: int
    value: float


@dataclass
class ValuationTable:
    """Size and rarity value multipliers"""
    size_multipliers: Dict[str, float]
    rarity_multipliers: Dict[str, float]

    def size_multiplier(self, size: Optional[str]) -> float:
        return self.size_multipliers.get(size, 1.0)

    def rarity_multiplier(self, rarity: Optional[str]) -> float:
        return self.rarity_multipliers.get(rarity, 1.0)


@dataclass
class Catalog:
    """Complete static catalog loaded from the data pack"""
    aquarium_types: Dict[str, AquariumTypeConfig]
    decorations: Dict[str, DecorationConfig]
    species: Dict[str, FishSpecies]
    valuation: ValuationTable


# ============================================================================
# Runtime Records
# ============================================================================

@dataclass
class AquariumFish:
    """
    A single fish living in an aquarium.

    Attributes:
        name: Species name (breeding matches on this)
        rarity: Rarity class (e.g., "Common", "Legendary")
        size: Size class (e.g., "Tiny", "Huge")
        value: Current monetary value
        base_value: Value before size/rarity multipliers (None = derive from value)
        hunger: 0-100, 100 = fully fed
        happiness: 0-100
        growth: Current growth stage
        last_bred: Time of the last successful breeding, None if never
        custom_name: Optional player-given name
    """
    name: str
    rarity: str
    size: str
    value: int
    base_value: Optional[float] = None
    hunger: float = TRANSFER_HUNGER
    happiness: float = TRANSFER_HAPPINESS
    growth: GrowthStage = GrowthStage.ADULT
    last_bred: Optional[datetime] = None
    custom_name: Optional[str] = None

    @property
    def display_name(self) -> str:
        if self.custom_name:
            return f"{self.name} ({self.custom_name})"
        return self.name

    @property
    def is_adult(self) -> bool:
        return self.growth is GrowthStage.ADULT

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'custom_name': self.custom_name,
            'rarity': self.rarity,
            'size': self.size,
            'base_value': self.base_value,
            'value': self.value,
            'hunger': float(self.hunger),
            'happiness': float(self.happiness),
            'growth': self.growth.value,
            'last_bred': _format_timestamp(self.last_bred),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AquariumFish':
        """
        Deserialize fish from dict, filling gaps with transfer defaults.

        Older records may lack hunger, happiness, or growth entirely.
        """
        hunger = data.get('hunger')
        happiness = data.get('happiness')
        return cls(
            name=data['name'],
            custom_name=data.get('custom_name'),
            rarity=data.get('rarity', 'Common'),
            size=data.get('size', 'Medium'),
            base_value=data.get('base_value'),
            value=int(data.get('value', 0)),
            hunger=float(hunger) if hunger is not None else TRANSFER_HUNGER,
            happiness=float(happiness) if happiness is not None else TRANSFER_HAPPINESS,
            growth=GrowthStage(data.get('growth') or GrowthStage.ADULT.value),
            last_bred=_parse_timestamp(data.get('last_bred')),
        )


@dataclass
class Aquarium:
    """
    A player-owned aquarium.

    Invariant: len(fish) <= capacity; water_quality and temperature in [0, 100].
    """
    owner_id: str
    type_name: str
    capacity: int
    last_maintenance: datetime
    water_quality: float = 100.0
    temperature: float = 100.0
    decorations: List[str] = field(default_factory=list)
    fish: List[AquariumFish] = field(default_factory=list)

    @property
    def is_full(self) -> bool:
        return len(self.fish) >= self.capacity

    def to_dict(self) -> Dict[str, Any]:
        return {
            'owner_id': self.owner_id,
            'type_name': self.type_name,
            'capacity': self.capacity,
            'water_quality': float(self.water_quality),
            'temperature': float(self.temperature),
            'decorations': list(self.decorations),
            'fish': [fish.to_dict() for fish in self.fish],
            'last_maintenance': _format_timestamp(self.last_maintenance),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Aquarium':
        return cls(
            owner_id=str(data['owner_id']),
            type_name=data['type_name'],
            capacity=int(data['capacity']),
            water_quality=float(data.get('water_quality', 100.0)),
            temperature=float(data.get('temperature', 100.0)),
            decorations=list(data.get('decorations', [])),
            fish=[AquariumFish.from_dict(f) for f in data.get('fish', [])],
            last_maintenance=_parse_timestamp(data['last_maintenance']),
        )


# ============================================================================
# Maintenance Results
# ============================================================================

@dataclass
class DecayRates:
    """Per-pass decay amounts shared by the environment and every fish"""
    hunger: float
    water_quality: float
    temperature: float


@dataclass
class GrowthTransition:
    """One fish advancing a growth stage during a pass"""
    fish_name: str
    from_stage: GrowthStage
    to_stage: GrowthStage

    def to_dict(self) -> Dict[str, str]:
        return {
            'fish_name': self.fish_name,
            'from_stage': self.from_stage.value,
            'to_stage': self.to_stage.value,
        }


@dataclass
class MaintenanceSummary:
    """Effects of one catch-up pass, for the caller to render"""
    elapsed_days: float = 0.0
    born: List[str] = field(default_factory=list)
    died: List[str] = field(default_factory=list)
    growth: List[GrowthTransition] = field(default_factory=list)
    water_quality_lost: float = 0.0
    temperature_lost: float = 0.0

    @property
    def born_count(self) -> int:
        return len(self.born)

    @property
    def died_count(self) -> int:
        return len(self.died)

    @property
    def is_empty(self) -> bool:
        return (
            self.elapsed_days == 0.0
            and not self.born
            and not self.died
            and not self.growth
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'elapsed_days': float(self.elapsed_days),
            'born': list(self.born),
            'died': list(self.died),
            'growth': [t.to_dict() for t in self.growth],
            'water_quality_lost': float(self.water_quality_lost),
            'temperature_lost': float(self.temperature_lost),
        }
