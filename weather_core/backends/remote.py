"""Weather backend querying the weather API over HTTP."""

from __future__ import annotations

import logging
from typing import Final

from ..domains.weather import WeatherRecord
from ..envelope import ResultEnvelope, fail, ok
from ..errors import WeatherClientError
from ..http import WeatherHttpClient
from .base import WeatherBackend

_LOGGER = logging.getLogger(__name__)

WEATHER_PATH: Final = "/api/weather"
GENERIC_ERROR: Final = "An unexpected error occurred"


class RemoteWeatherBackend(WeatherBackend):
    """Fetch weather from GET <origin>/api/weather?city=<city>.

    City casing is passed through unchanged; the API decides how to match it.
    Transport failures are reported as failure envelopes carrying the API's
    own error message when the response body has one.
    """

    def __init__(self, client: WeatherHttpClient) -> None:
        self._client = client

    async def _fetch(self, city: str) -> ResultEnvelope[WeatherRecord]:
        try:
            payload = await self._client.get_json(WEATHER_PATH, params={"city": city})
        except WeatherClientError as err:
            _LOGGER.debug("Weather request for %s failed: %s", city, err)
            return fail(str(err) or GENERIC_ERROR)

        try:
            record = WeatherRecord.from_dict(payload)
        except ValueError as err:
            _LOGGER.debug("Malformed weather payload for %s: %s", city, err)
            return fail(f"Malformed response body: {err}")
        return ok(record)
