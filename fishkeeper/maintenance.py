"""
Maintenance orchestrator.

Single entry point for catch-up passes. Sequences the environment decay model
and the fish lifecycle engine, stamps last_maintenance, and summarizes what
happened for the caller to render.

Every mutation is derived from (stored state, now); there is no scheduler.
The caller loads the aquarium, calls apply_maintenance, and saves it.
"""

import logging
from datetime import datetime
from typing import Optional, Tuple

from .clock import MaintenanceState, elapsed_days, is_stale
from .clock import maintenance_state as _clock_state
from .data_types import (
    Aquarium, AquariumTypeConfig, Catalog, MaintenanceSummary, ValuationTable,
)
from .environment import apply_environment_decay, compute_decay
from .lifecycle import run_lifecycle_pass
from .loader import resolve_type_config
from .rng import RandomSource

logger = logging.getLogger(__name__)


def maintenance_state(aquarium: Aquarium, now: datetime) -> MaintenanceState:
    """Fresh if a pass would be skipped, Stale if one is due"""
    return _clock_state(aquarium.last_maintenance, now)


def apply_maintenance(
    aquarium: Aquarium,
    now: datetime,
    type_config: AquariumTypeConfig,
    rng: RandomSource,
    valuation: Optional[ValuationTable] = None
) -> Tuple[Aquarium, MaintenanceSummary]:
    """
    Apply all effects elapsed since the aquarium's last maintenance.

    Args:
        aquarium: Aquarium to update (mutated in place)
        now: Current time; must be comparable with aquarium.last_maintenance
        type_config: Resolved config for aquarium.type_name
        rng: Random source; consumed only by rolls whose gates pass
        valuation: Value multiplier tables (defaults to the shipped tables)

    Returns:
        (aquarium, summary). When less than an hour has elapsed the aquarium
        is returned untouched with an empty summary and last_maintenance is
        not re-stamped.
    """
    assert aquarium is not None, "apply_maintenance requires an aquarium"
    assert type_config is not None, "apply_maintenance requires a resolved type config"

    if not is_stale(aquarium.last_maintenance, now):
        return aquarium, MaintenanceSummary()

    days = elapsed_days(aquarium.last_maintenance, now)
    rates = compute_decay(days, type_config.maintenance_rate)

    water_before = aquarium.water_quality
    temperature_before = aquarium.temperature
    env_factor = apply_environment_decay(aquarium, rates)

    outcome = run_lifecycle_pass(
        aquarium=aquarium,
        now=now,
        days=days,
        rates=rates,
        env_factor=env_factor,
        type_config=type_config,
        rng=rng,
        valuation=valuation
    )

    aquarium.last_maintenance = now

    summary = MaintenanceSummary(
        elapsed_days=days,
        born=[fish.display_name for fish in outcome.born],
        died=[fish.display_name for fish in outcome.died],
        growth=outcome.growth,
        water_quality_lost=water_before - aquarium.water_quality,
        temperature_lost=temperature_before - aquarium.temperature,
    )

    logger.debug(
        "Maintenance for %s (%s): %.3f days, env_factor=%.3f, "
        "fish=%d, born=%d, died=%d, grew=%d",
        aquarium.owner_id, aquarium.type_name, days, env_factor,
        len(aquarium.fish), summary.born_count, summary.died_count,
        len(summary.growth)
    )

    return aquarium, summary


def catch_up(
    aquarium: Aquarium,
    now: datetime,
    catalog: Catalog,
    rng: RandomSource
) -> Tuple[Aquarium, MaintenanceSummary]:
    """
    Resolve the aquarium's type from the catalog, then apply maintenance.

    Raises:
        UnknownAquariumTypeError: aquarium.type_name is not in the catalog
    """
    type_config = resolve_type_config(catalog, aquarium.type_name)
    return apply_maintenance(aquarium, now, type_config, rng, catalog.valuation)
