"""Pytest configuration and fixtures for weather_core tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from weather_core.domains.weather import WeatherRecord


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock aiohttp ClientSession."""
    import aiohttp

    return MagicMock(spec=aiohttp.ClientSession)


@pytest.fixture
def paris() -> WeatherRecord:
    return WeatherRecord(city="Paris", temperature=18.5, condition="Cloudy", humidity=72)


@pytest.fixture
def dataset(paris: WeatherRecord) -> dict[str, WeatherRecord]:
    """Small in-memory dataset keyed by lower-case city name."""
    return {
        "paris": paris,
        "london": WeatherRecord(
            city="London", temperature=14.0, condition="Rainy", humidity=88
        ),
        "new york": WeatherRecord(
            city="New York", temperature=22.0, condition="Sunny", humidity=55
        ),
    }


def create_mock_response(
    status: int = 200,
    json_data: Any = None,
    json_side_effect: BaseException | None = None,
) -> AsyncMock:
    """Create a configured mock response.

    Args:
        status: HTTP status code
        json_data: Data to return from json() call
        json_side_effect: Exception to raise from json() call

    Returns:
        Configured AsyncMock response
    """
    response = AsyncMock()
    response.status = status

    if json_data is not None:
        response.json.return_value = json_data
    if json_side_effect is not None:
        response.json.side_effect = json_side_effect

    response.__aenter__.return_value = response
    response.__aexit__.return_value = None

    return response
