"""Transport error types for weather API interactions.

Each error carries one human-readable message: the API's own "error" field
when the response body has one, otherwise a description of the timeout,
connection failure or bad status. RemoteWeatherBackend reports str(err)
verbatim in its failure envelope.
"""

from __future__ import annotations


class WeatherClientError(Exception):
    """Base error for weather API client failures."""


class WeatherTimeout(WeatherClientError):
    """Timeout while waiting for the weather API."""


class WeatherConnectionError(WeatherClientError):
    """Network connection to the weather API failed."""


class WeatherResponseError(WeatherClientError):
    """Non-2xx or undecodable HTTP response from the weather API."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status
