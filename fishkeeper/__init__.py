"""
Fishkeeper Aquarium Ecosystem

A lazily-evaluated aquarium simulation for a chat-platform fishing game.
Fish age, water drifts, fish breed and neglected fish die, all computed as a
single catch-up pass whenever the owner looks at their tank.

Architecture: the engine is a pure function of (aquarium, now, type config,
rng). Loading, saving and rendering belong to the caller.
"""

__version__ = "0.1.0"

from .data_types import (
    Aquarium,
    AquariumFish,
    AquariumTypeConfig,
    GrowthStage,
    MaintenanceSummary,
)
from .maintenance import apply_maintenance, catch_up

__all__ = [
    "Aquarium",
    "AquariumFish",
    "AquariumTypeConfig",
    "GrowthStage",
    "MaintenanceSummary",
    "apply_maintenance",
    "catch_up",
]
