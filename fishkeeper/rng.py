"""
Deterministic RNG utilities for the aquarium engine.

Uses SHA256 hashing to derive stable seeds from hierarchical components
(owner_id, aquarium type, pass timestamp, ...). Randomness comes from
numpy.random.Generator(PCG64), which satisfies the RandomSource contract the
engine consumes: random() for a uniform float in [0, 1) and integers() for
range sampling.
"""

import hashlib
import numpy as np
from typing import Any, Protocol


class RandomSource(Protocol):
    """Minimal random source consumed by the engine"""

    def random(self) -> float:
        ...

    def integers(self, low: int, high: int) -> int:
        ...


def make_seed(*components: Any) -> int:
    """
    Generate deterministic 64-bit seed from hierarchical components.

    Args:
        *components: Seed components (owner_id, type_name, timestamp, etc.)

    Returns:
        64-bit integer seed for numpy RNG

    Example:
        seed = make_seed(owner_id, aquarium.type_name, now.isoformat())
    """
    hash_input = ":".join(str(c) for c in components)

    hash_bytes = hashlib.sha256(hash_input.encode('utf-8')).digest()
    seed = int.from_bytes(hash_bytes[:8], byteorder='big')

    return seed


def make_rng(*components: Any) -> np.random.Generator:
    """Create a PCG64 generator seeded from components (see make_seed)"""
    return np.random.Generator(np.random.PCG64(make_seed(*components)))


def does_event_happen(rng: RandomSource, probability: float) -> bool:
    """
    Roll a single event.

    Probabilities above 1.0 always succeed and those at or below 0.0 never
    do, but a value is still drawn so the rng sequence depends only on which
    rolls were attempted.
    """
    return float(rng.random()) < probability


# ============================================================================
# Fish Attribute Rolls (name-only inventory normalization)
# ============================================================================

# (upper bound of roll, class), evaluated in order
_SIZE_TABLE = [
    (0.1, 'Tiny'),
    (0.3, 'Small'),
    (0.7, 'Medium'),
    (0.9, 'Large'),
]
_SIZE_FALLBACK = 'Huge'

_RARITY_TABLE = [
    (0.5, 'Common'),
    (0.8, 'Uncommon'),
    (0.95, 'Rare'),
    (0.99, 'Epic'),
]
_RARITY_FALLBACK = 'Legendary'

# Harder species skew rarer, capped at +0.3
_RARITY_DIFFICULTY_STEP = 0.03
_RARITY_DIFFICULTY_CAP = 0.3


def random_size(rng: RandomSource) -> str:
    """Roll a size class (10% Tiny, 20% Small, 40% Medium, 20% Large, 10% Huge)"""
    roll = float(rng.random())
    for bound, size in _SIZE_TABLE:
        if roll < bound:
            return size
    return _SIZE_FALLBACK


def random_rarity(rng: RandomSource, difficulty: float = 0.0) -> str:
    """
    Roll a rarity class, shifted toward rarer results for harder species.

    Args:
        rng: Random source
        difficulty: Species difficulty level (higher = rarer on average)

    Returns:
        Rarity class name
    """
    bonus = min(_RARITY_DIFFICULTY_CAP, difficulty * _RARITY_DIFFICULTY_STEP)
    roll = float(rng.random()) - bonus
    for bound, rarity in _RARITY_TABLE:
        if roll < bound:
            return rarity
    return _RARITY_FALLBACK
