"""HTTP client for the weather API."""

from __future__ import annotations

import logging
from typing import Any, Final

import aiohttp

from .errors import (
    WeatherConnectionError,
    WeatherResponseError,
    WeatherTimeout,
)

_LOGGER = logging.getLogger(__name__)

DEFAULT_TIMEOUT: Final = 10.0

_JSON_HEADERS: Final = {"Content-Type": "application/json"}


class WeatherHttpClient:
    """HTTP client wrapper for weather API endpoints.

    Every failure (timeout, connection error, non-2xx status, undecodable
    body) is raised as a WeatherClientError subclass whose message is the
    single human-readable description of what went wrong.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        origin: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._session = session
        self._origin = origin.rstrip("/")
        self._timeout = timeout

    @property
    def origin(self) -> str:
        return self._origin

    def _url(self, path: str) -> str:
        return f"{self._origin}{path}"

    async def get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Send a GET request and return the decoded JSON body."""
        url = self._url(path)
        _LOGGER.debug("GET %s params=%s", url, params)
        try:
            async with self._session.get(
                url,
                params=params,
                headers=_JSON_HEADERS,
                timeout=aiohttp.ClientTimeout(total=self._timeout),
            ) as resp:
                return await self._read_body(resp)
        except TimeoutError as err:
            raise WeatherTimeout(f"Request timed out after {self._timeout}s") from err
        except aiohttp.ClientError as err:
            raise WeatherConnectionError(_describe(err)) from err

    async def post_json(self, path: str, payload: Any = None) -> Any:
        """Send a POST request with a JSON body and return the decoded JSON body."""
        url = self._url(path)
        _LOGGER.debug("POST %s", url)
        try:
            async with self._session.post(
                url,
                json=payload,
                headers=_JSON_HEADERS,
                timeout=aiohttp.ClientTimeout(total=self._timeout),
            ) as resp:
                return await self._read_body(resp)
        except TimeoutError as err:
            raise WeatherTimeout(f"Request timed out after {self._timeout}s") from err
        except aiohttp.ClientError as err:
            raise WeatherConnectionError(_describe(err)) from err

    async def _read_body(self, resp: aiohttp.ClientResponse) -> Any:
        """Decode a response body, raising WeatherResponseError on failure.

        Args:
            resp: Response inside its context manager.

        Returns:
            Decoded JSON body of a 2xx response.

        Raises:
            WeatherResponseError: For non-2xx status or an undecodable 2xx body.
        """
        if not 200 <= resp.status < 300:
            message = await _error_field(resp)
            raise WeatherResponseError(
                resp.status,
                message or f"Request failed with status code {resp.status}",
            )
        try:
            return await resp.json()
        except (aiohttp.ContentTypeError, ValueError) as err:
            raise WeatherResponseError(resp.status, "Malformed response body") from err


async def _error_field(resp: aiohttp.ClientResponse) -> str | None:
    """Extract the structured error message from an error response body."""
    try:
        data = await resp.json()
    except (aiohttp.ContentTypeError, ValueError):
        return None
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, str) and error:
            return error
    return None


def _describe(err: aiohttp.ClientError) -> str:
    detail = str(err)
    return f"Request failed: {detail}" if detail else "Network Error"
