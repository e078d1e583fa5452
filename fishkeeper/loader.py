"""
YAML catalog loader with schema validation.

Loads aquarium types, decorations, fish species, and valuation tables from
YAML files and validates them against JSON schemas.
"""

import logging
import os
import yaml
import json
from pathlib import Path
from typing import Dict, Optional
import jsonschema

from .data_types import (
    AquariumTypeConfig, DecorationConfig, FishSpecies, ValuationTable, Catalog,
)
from .constants import DATA_ROOT_ENV

logger = logging.getLogger(__name__)


class DataLoadError(Exception):
    """Raised when data loading or validation fails"""
    pass


class UnknownAquariumTypeError(DataLoadError):
    """Raised when an aquarium type name is not in the catalog"""

    def __init__(self, type_name: str):
        super().__init__(f"Unknown aquarium type: {type_name!r}")
        self.type_name = type_name


def default_data_root() -> Path:
    """Data directory: $FISHKEEPER_DATA_ROOT, else <project root>/data"""
    override = os.getenv(DATA_ROOT_ENV)
    if override:
        return Path(override)
    return Path(__file__).resolve().parent.parent / "data"


def load_yaml(file_path: Path) -> dict:
    """Load YAML file and return parsed dict"""
    if not file_path.exists():
        raise DataLoadError(f"File not found: {file_path}")

    try:
        with open(file_path, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise DataLoadError(f"YAML parse error in {file_path}: {e}")

    if not isinstance(data, dict):
        raise DataLoadError(f"Expected a mapping at top level of {file_path}")
    logger.debug("Loaded %s", file_path)
    return data


def validate_against_schema(data: dict, schema_path: Path, data_path: Path):
    """Validate data dict against JSON schema"""
    if not schema_path.exists():
        raise DataLoadError(f"Schema not found: {schema_path}")

    try:
        with open(schema_path, 'r') as f:
            schema = json.load(f)
        jsonschema.validate(instance=data, schema=schema)
    except jsonschema.ValidationError as e:
        raise DataLoadError(f"Validation error in {data_path}: {e.message}")
    except json.JSONDecodeError as e:
        raise DataLoadError(f"Invalid JSON schema {schema_path}: {e}")


def _load_validated(file_path: Path, schema_dir: Optional[Path], schema_name: str) -> dict:
    data = load_yaml(file_path)
    if schema_dir:
        validate_against_schema(data, schema_dir / schema_name, file_path)
    return data


def load_aquarium_types(file_path: Path, schema_dir: Optional[Path] = None) -> Dict[str, AquariumTypeConfig]:
    """Load aquarium type definitions from YAML, keyed by name"""
    data = _load_validated(file_path, schema_dir, "aquariums.schema.json")

    types = {}
    for entry in data['aquariums']:
        config = AquariumTypeConfig(**entry)
        if config.capacity < 0:
            raise DataLoadError(f"Negative capacity for {config.name} in {file_path}")
        types[config.name] = config

    return types


def load_decorations(file_path: Path, schema_dir: Optional[Path] = None) -> Dict[str, DecorationConfig]:
    """Load decoration definitions from YAML, keyed by name"""
    data = _load_validated(file_path, schema_dir, "decorations.schema.json")

    return {
        entry['name']: DecorationConfig(**entry)
        for entry in data['decorations']
    }


def load_species(file_path: Path, schema_dir: Optional[Path] = None) -> Dict[str, FishSpecies]:
    """Load fish species from YAML, keyed by name"""
    data = _load_validated(file_path, schema_dir, "fish.schema.json")

    return {
        entry['name']: FishSpecies(**entry)
        for entry in data['fish']
    }


def load_valuation(file_path: Path, schema_dir: Optional[Path] = None) -> ValuationTable:
    """Load size and rarity value multipliers from YAML"""
    data = _load_validated(file_path, schema_dir, "valuation.schema.json")

    return ValuationTable(
        size_multipliers={k: float(v) for k, v in data['size_multipliers'].items()},
        rarity_multipliers={k: float(v) for k, v in data['rarity_multipliers'].items()},
    )


def load_catalog(data_root: Optional[Path] = None, schema_dir: Optional[Path] = None) -> Catalog:
    """Load the complete catalog from a data directory

    Expects <data_root>/catalog/{aquariums,decorations,fish,valuation}.yaml.
    """
    data_root = Path(data_root) if data_root is not None else default_data_root()
    catalog_dir = data_root / "catalog"

    catalog = Catalog(
        aquarium_types=load_aquarium_types(catalog_dir / "aquariums.yaml", schema_dir),
        decorations=load_decorations(catalog_dir / "decorations.yaml", schema_dir),
        species=load_species(catalog_dir / "fish.yaml", schema_dir),
        valuation=load_valuation(catalog_dir / "valuation.yaml", schema_dir),
    )

    logger.info(
        "Catalog loaded from %s: %d aquarium types, %d decorations, %d species",
        data_root, len(catalog.aquarium_types), len(catalog.decorations),
        len(catalog.species)
    )
    return catalog


def resolve_type_config(catalog: Catalog, type_name: str) -> AquariumTypeConfig:
    """Look up an aquarium type; must be called before running the engine"""
    try:
        return catalog.aquarium_types[type_name]
    except KeyError:
        raise UnknownAquariumTypeError(type_name) from None
