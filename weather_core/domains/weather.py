"""Weather domain data structures.

A WeatherRecord is the point-in-time observation every backend returns. The
wire shape matches the weather API body and the local dataset entries:

    {"city": "Paris", "temp": 18.5, "condition": "Cloudy", "humidity": 72}
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

_WIRE_KEYS = ("city", "temp", "condition", "humidity")


@dataclass(frozen=True, slots=True)
class WeatherRecord:
    """A single weather observation for a city.

    Attributes:
        city: City name as stored by the data source.
        temperature: Current temperature, same unit across backends.
        condition: Short condition summary (e.g., "Sunny").
        humidity: Relative humidity percentage (0-100, not enforced).
    """

    city: str
    temperature: float
    condition: str
    humidity: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for wire format."""
        return {
            "city": self.city,
            "temp": self.temperature,
            "condition": self.condition,
            "humidity": self.humidity,
        }

    @classmethod
    def from_dict(cls, data: Any) -> WeatherRecord:
        """Create a WeatherRecord from its wire format.

        Args:
            data: Mapping with city, temp, condition and humidity keys.

        Returns:
            Parsed WeatherRecord.

        Raises:
            ValueError: If data is not a mapping or a field is missing or
                has the wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError(
                f"Weather record must be an object, got {type(data).__name__}"
            )

        missing = [key for key in _WIRE_KEYS if key not in data]
        if missing:
            raise ValueError(f"Weather record missing fields: {', '.join(missing)}")

        city = data["city"]
        condition = data["condition"]
        if not isinstance(city, str) or not isinstance(condition, str):
            raise ValueError("Weather record city and condition must be strings")

        return cls(
            city=city,
            temperature=_as_number("temp", data["temp"]),
            condition=condition,
            humidity=_as_number("humidity", data["humidity"]),
        )


def _as_number(name: str, value: Any) -> float:
    # bool is an int subclass but never a valid reading
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Weather record field {name!r} must be numeric")
    return value
