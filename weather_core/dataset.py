"""Static weather dataset loading.

The dataset is a YAML or JSON document keyed by lower-case city name:

    cities:
      paris: {city: Paris, temp: 18.5, condition: Cloudy, humidity: 72}

Datasets are treated as data, loaded once and never mutated afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from .domains.weather import WeatherRecord

_LOGGER = logging.getLogger(__name__)


class DatasetLoadError(Exception):
    """Error loading a weather dataset file."""

    pass


def _load_yaml(path: Path) -> Any:
    """Load YAML (or JSON) file with error handling."""
    if not path.exists():
        raise DatasetLoadError(f"File not found: {path}")
    try:
        with path.open(encoding="utf-8") as f:
            return yaml.safe_load(f)
    except (yaml.YAMLError, UnicodeDecodeError) as err:
        raise DatasetLoadError(f"Failed to parse weather data: {err}") from err
    except OSError as err:
        raise DatasetLoadError(f"Failed to read weather data: {err}") from err


def parse_dataset(data: Any) -> Mapping[str, WeatherRecord]:
    """Build a read-only dataset index from a parsed document.

    Args:
        data: Parsed document with a "cities" mapping.

    Returns:
        Read-only mapping of trimmed, lower-cased city key to WeatherRecord.

    Raises:
        DatasetLoadError: If the document or one of its records is malformed.
    """
    cities = data.get("cities") if isinstance(data, dict) else None
    if not isinstance(cities, dict):
        raise DatasetLoadError("Weather data must contain a 'cities' mapping")

    index: dict[str, WeatherRecord] = {}
    for key, raw in cities.items():
        try:
            record = WeatherRecord.from_dict(raw)
        except ValueError as err:
            raise DatasetLoadError(f"Invalid weather record {key!r}: {err}") from err
        normalized = str(key).strip().lower()
        if normalized in index:
            raise DatasetLoadError(
                f"Duplicate city key after normalization: {key!r}"
            )
        index[normalized] = record
    return MappingProxyType(index)


def load_dataset(path: Path | str) -> Mapping[str, WeatherRecord]:
    """Load a weather dataset from file.

    Raises:
        DatasetLoadError: If the file is missing or malformed.
    """
    path = Path(path)
    dataset = parse_dataset(_load_yaml(path))
    _LOGGER.info("Loaded weather data for %d cities from %s", len(dataset), path)
    return dataset
