"""
Ecosystem clock.

Converts wall-clock gaps between observations into elapsed simulated days and
decides whether a catch-up pass is due. There is no background timer: an
aquarium is Fresh until enough time has passed, then Stale until the next
pass stamps last_maintenance.
"""

from datetime import datetime
from enum import Enum

from .constants import SECONDS_PER_DAY, MIN_CATCH_UP_DAYS


class MaintenanceState(Enum):
    FRESH = "fresh"
    STALE = "stale"


def elapsed_days(last_maintenance: datetime, now: datetime) -> float:
    """
    Elapsed time as a real number of days.

    Negative when now precedes last_maintenance (clock skew between shards).
    """
    return (now - last_maintenance).total_seconds() / SECONDS_PER_DAY


def is_stale(last_maintenance: datetime, now: datetime) -> bool:
    """True when at least the minimum catch-up resolution (1 hour) has passed"""
    return elapsed_days(last_maintenance, now) >= MIN_CATCH_UP_DAYS


def maintenance_state(last_maintenance: datetime, now: datetime) -> MaintenanceState:
    if is_stale(last_maintenance, now):
        return MaintenanceState.STALE
    return MaintenanceState.FRESH
