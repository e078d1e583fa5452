"""
Simulate an owner's absence and print the catch-up result.

Loads an aquarium from a store directory (or builds a demo tank), pretends
--days have passed since its last maintenance, runs one catch-up pass with a
seeded PCG64 generator, and prints the summary and resulting fish table.

Examples:
    python scripts/simulate_absence.py --days 2
    python scripts/simulate_absence.py --store ./aquariums --owner 1234 --days 7 --save
"""

import argparse
import json
import logging
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

from fishkeeper.care import add_fish, fish_from_inventory, setup_aquarium, status_level
from fishkeeper.loader import DataLoadError, load_catalog, resolve_type_config
from fishkeeper.maintenance import apply_maintenance
from fishkeeper.rng import make_rng
from fishkeeper.store import AquariumStore, StoreError

DEMO_FISH = ['Goldfish', 'Goldfish', 'Carp', 'Carp', 'Tuna']


def build_demo_aquarium(catalog, type_name: str, now: datetime, seed: int):
    """Demo tank with a few pairs so breeding can happen"""
    type_config = resolve_type_config(catalog, type_name)
    aquarium = setup_aquarium("demo", type_config, now)
    rng = make_rng(seed, "demo-fish")
    for name in DEMO_FISH[:type_config.capacity]:
        add_fish(aquarium, fish_from_inventory(name, catalog, rng))
    return aquarium


def print_report(aquarium, summary):
    print(f"Elapsed: {summary.elapsed_days:.2f} days")
    print(f"Water quality: {aquarium.water_quality:5.1f} ({status_level(aquarium.water_quality)})"
          f"  -{summary.water_quality_lost:.1f}")
    print(f"Temperature:   {aquarium.temperature:5.1f} ({status_level(aquarium.temperature)})"
          f"  -{summary.temperature_lost:.1f}")
    print(f"Born ({summary.born_count}): {', '.join(summary.born) or '-'}")
    print(f"Died ({summary.died_count}): {', '.join(summary.died) or '-'}")
    for transition in summary.growth:
        print(f"Grew: {transition.fish_name} {transition.from_stage.value} -> {transition.to_stage.value}")

    print()
    print(f"{'Fish':<24} {'Stage':<9} {'Hunger':>7} {'Happy':>7} {'Value':>6}")
    for fish in aquarium.fish:
        print(f"{fish.display_name:<24} {fish.growth.value:<9} "
              f"{fish.hunger:7.1f} {fish.happiness:7.1f} {fish.value:6d}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument('--days', type=float, default=1.0, help='Days since last maintenance')
    parser.add_argument('--seed', type=int, default=42, help='RNG seed')
    parser.add_argument('--data-root', type=Path, default=None, help='Catalog data directory')
    parser.add_argument('--schemas', type=Path, default=None, help='JSON schema directory')
    parser.add_argument('--store', type=Path, default=None, help='Aquarium store directory')
    parser.add_argument('--owner', default=None, help='Owner id to load from the store')
    parser.add_argument('--type', dest='type_name', default='Standard Aquarium',
                        help='Aquarium type for the demo tank')
    parser.add_argument('--save', action='store_true', help='Write the result back to the store')
    parser.add_argument('--json', action='store_true', help='Print the summary as JSON')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    try:
        catalog = load_catalog(args.data_root, args.schemas)
    except DataLoadError as e:
        print(f"[FAIL] {e}", file=sys.stderr)
        return 1

    now = datetime.now(timezone.utc)
    store = AquariumStore(args.store) if args.store else None

    if store and args.owner:
        try:
            aquarium = store.load(args.owner)
        except StoreError as e:
            print(f"[FAIL] {e}", file=sys.stderr)
            return 1
        if aquarium is None:
            print(f"[FAIL] No aquarium stored for owner {args.owner}", file=sys.stderr)
            return 1
        aquarium.last_maintenance = now - timedelta(days=args.days)
    else:
        aquarium = build_demo_aquarium(catalog, args.type_name,
                                       now - timedelta(days=args.days), args.seed)

    type_config = resolve_type_config(catalog, aquarium.type_name)
    rng = make_rng(args.seed, aquarium.owner_id, "catch-up")
    aquarium, summary = apply_maintenance(aquarium, now, type_config, rng, catalog.valuation)

    if args.json:
        print(json.dumps({'summary': summary.to_dict(), 'aquarium': aquarium.to_dict()}, indent=2))
    else:
        print_report(aquarium, summary)

    if store and args.save:
        store.save(aquarium)
        print(f"[OK] Saved aquarium for {aquarium.owner_id}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
