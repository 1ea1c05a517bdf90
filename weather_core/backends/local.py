"""Weather backend answering from an in-memory dataset."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from ..domains.weather import WeatherRecord
from ..envelope import ResultEnvelope, fail, ok
from .base import WeatherBackend

_LOGGER = logging.getLogger(__name__)


class LocalWeatherBackend(WeatherBackend):
    """Look up weather records by lower-cased city name.

    The dataset is read-only after construction, so one instance can serve
    any number of concurrent calls.
    """

    def __init__(self, dataset: Mapping[str, WeatherRecord]) -> None:
        if isinstance(dataset, MappingProxyType):
            self._dataset = dataset
        else:
            self._dataset = MappingProxyType(dict(dataset))

    @property
    def cities(self) -> tuple[str, ...]:
        """Dataset keys in sorted order."""
        return tuple(sorted(self._dataset))

    async def _fetch(self, city: str) -> ResultEnvelope[WeatherRecord]:
        key = city.lower()
        record = self._dataset.get(key)
        if record is None:
            _LOGGER.debug("No local weather data for %s", key)
            return fail(f'Weather data for "{key}" not found.')
        return ok(record)
