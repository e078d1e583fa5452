"""
Central configuration constants for the aquarium catch-up engine.

Defines rates, thresholds, and default values used across multiple modules.
Rates are expressed per simulated day; stats live on a 0-100 scale.
"""

from datetime import timedelta

# ============================================================================
# Clock
# ============================================================================

SECONDS_PER_DAY = 24 * 60 * 60

# Catch-up passes shorter than this are skipped entirely (1 hour)
MIN_CATCH_UP = timedelta(hours=1)
MIN_CATCH_UP_DAYS = MIN_CATCH_UP.total_seconds() / SECONDS_PER_DAY


# ============================================================================
# Stat Bounds
# ============================================================================

STAT_MIN = 0.0
STAT_MAX = 100.0


# ============================================================================
# Environment Decay (per day, scaled by aquarium maintenance_rate)
# ============================================================================

BASE_HUNGER_RATE = 15.0
BASE_WATER_RATE = 20.0
BASE_TEMP_RATE = 10.0

# Single-pass decay never exceeds the full stat range
MAX_DECAY_PER_PASS = 100.0


# ============================================================================
# Fish Lifecycle
# ============================================================================

BASE_HAPPY_RATE = 10.0  # Per day under ideal conditions

STARVING_THRESHOLD = 30.0      # Below this hunger, happiness decays twice as fast
STARVING_HAPPY_MULTIPLIER = 2.0

GROWTH_BASE = 0.2              # Chance per day, scaled by happiness/100
GROWTH_MIN_HUNGER = 50.0       # Strictly greater than, no growth while starving


# ============================================================================
# Breeding
# ============================================================================

BREEDING_COOLDOWN = timedelta(days=3)
BREEDING_MIN_HAPPINESS = 70.0  # Strictly greater than
BREEDING_MIN_HUNGER = 50.0     # Strictly greater than
BREEDING_HUNGER_COST = 20.0    # Deducted from both parents

OFFSPRING_HUNGER = 70.0
OFFSPRING_HAPPINESS = 90.0
OFFSPRING_VALUE_FRACTION = 0.1


# ============================================================================
# Mortality
# ============================================================================

DEATH_MAX_HUNGER = 10.0        # Strictly less than
DEATH_MAX_HAPPINESS = 10.0     # Strictly less than
DEATH_CHANCE_PER_DAY = 0.2


# ============================================================================
# Aquarium Type Defaults (used when the catalog omits a field)
# ============================================================================

DEFAULT_MAINTENANCE_RATE = 1.0
DEFAULT_BREEDING_CHANCE = 0.05


# ============================================================================
# Care Actions
# ============================================================================

TRANSFER_HUNGER = 100.0
TRANSFER_HAPPINESS = 80.0

CARE_HAPPINESS_BOOST = 10.0        # Feeding, cleaning, temperature adjustment
DEFAULT_DECORATION_BONUS = 5.0
FISH_NAME_MAX_LENGTH = 20

# Status thresholds for rendering (value >= threshold)
STATUS_GOOD = 80.0
STATUS_FAIR = 50.0
STATUS_POOR = 30.0


# ============================================================================
# Data Locations
# ============================================================================

DATA_ROOT_ENV = 'FISHKEEPER_DATA_ROOT'
