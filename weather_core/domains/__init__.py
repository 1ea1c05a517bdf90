"""Domain-specific data structures."""

from .weather import WeatherRecord

__all__ = [
    "WeatherRecord",
]
