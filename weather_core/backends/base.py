"""Backend contract shared by every weather data source."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Final

from ..domains.weather import WeatherRecord
from ..envelope import ResultEnvelope, fail

CITY_REQUIRED: Final = "City name is required"


class WeatherBackend(ABC):
    """Abstract interface for weather data sources.

    The retry orchestrator is written against this interface only, so a
    remote service and a local dataset are interchangeable.

    Subclasses implement _fetch(); fetch_by_city() performs the shared input
    validation first so no backend ever does I/O for a blank city.
    """

    async def fetch_by_city(self, city: str) -> ResultEnvelope[WeatherRecord]:
        """Fetch current weather for a city in a single attempt.

        Args:
            city: City name; surrounding whitespace is ignored.

        Returns:
            Success envelope with the WeatherRecord, or a failure envelope
            describing why the lookup failed. Never raises for fetch errors.
        """
        if not city or not city.strip():
            return fail(CITY_REQUIRED)
        return await self._fetch(city.strip())

    @abstractmethod
    async def _fetch(self, city: str) -> ResultEnvelope[WeatherRecord]:
        """Look up a non-blank, trimmed city name.

        Args:
            city: Trimmed city name.

        Returns:
            Result envelope for the lookup.
        """
        ...
