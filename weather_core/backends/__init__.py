"""Interchangeable weather data sources."""

from .base import CITY_REQUIRED, WeatherBackend
from .local import LocalWeatherBackend
from .remote import RemoteWeatherBackend

__all__ = [
    "CITY_REQUIRED",
    "LocalWeatherBackend",
    "RemoteWeatherBackend",
    "WeatherBackend",
]
