"""Weather API application serving a local dataset.

Routes:
    GET /health           -> {"status": "ok"}
    GET /api/weather?city -> weather record, 400 without a city, 404 if unknown

A blank-after-trim city is a lookup miss (404), not a missing parameter.

This is the endpoint RemoteWeatherBackend talks to.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Final

from aiohttp import web

from .backends.local import LocalWeatherBackend
from .domains.weather import WeatherRecord

_LOGGER = logging.getLogger(__name__)

BACKEND_KEY: Final = web.AppKey("backend", LocalWeatherBackend)


async def health_handler(request: web.Request) -> web.Response:
    """Report service health."""
    return web.json_response({"status": "ok"})


async def weather_handler(request: web.Request) -> web.Response:
    """Return weather data for the city query parameter."""
    city = request.query.get("city", "")
    if not city:
        return web.json_response({"error": "city parameter is required"}, status=400)

    result = await request.app[BACKEND_KEY].fetch_by_city(city)
    if not result.success or result.data is None:
        _LOGGER.debug("Weather lookup failed: %s", result.error)
        return web.json_response({"error": "city not found"}, status=404)
    return web.json_response(result.data.to_dict())


def create_app(dataset: Mapping[str, WeatherRecord]) -> web.Application:
    """Create the weather API application over a loaded dataset."""
    app = web.Application()
    app[BACKEND_KEY] = LocalWeatherBackend(dataset)
    app.router.add_get("/health", health_handler)
    app.router.add_get("/api/weather", weather_handler)
    return app
