"""Explicit construction of the configured weather backend."""

from __future__ import annotations

import aiohttp

from .backends import LocalWeatherBackend, RemoteWeatherBackend, WeatherBackend
from .config import BackendKind, ConfigLoadError, WeatherSettings
from .dataset import load_dataset
from .http import WeatherHttpClient


def create_backend(
    settings: WeatherSettings,
    *,
    session: aiohttp.ClientSession | None = None,
) -> WeatherBackend:
    """Create the backend selected by settings.

    Args:
        settings: Resolved settings.
        session: HTTP session owned by the caller; required for the remote
            backend.

    Returns:
        A new backend instance. Nothing is cached between calls.

    Raises:
        ConfigLoadError: If the backend's requirements are not met.
        DatasetLoadError: If the local dataset cannot be loaded.
    """
    if settings.backend is BackendKind.LOCAL:
        if settings.dataset_path is None:
            raise ConfigLoadError("Local backend requires dataset_path")
        return LocalWeatherBackend(load_dataset(settings.dataset_path))

    if session is None:
        raise ConfigLoadError("Remote backend requires an aiohttp session")
    client = WeatherHttpClient(
        session,
        settings.api_origin,
        timeout=settings.request_timeout,
    )
    return RemoteWeatherBackend(client)
