"""Resilient weather lookups over interchangeable backends."""

__version__ = "0.1.0"

from .backends import (
    CITY_REQUIRED,
    LocalWeatherBackend,
    RemoteWeatherBackend,
    WeatherBackend,
)
from .config import BackendKind, ConfigLoadError, WeatherSettings, load_settings
from .dataset import DatasetLoadError, load_dataset
from .domains import WeatherRecord
from .envelope import ResultEnvelope, fail, ok
from .errors import (
    WeatherClientError,
    WeatherConnectionError,
    WeatherResponseError,
    WeatherTimeout,
)
from .factory import create_backend
from .http import WeatherHttpClient
from .retry import RetryContext, backoff_delay, fetch_with_retry
from .server import create_app

__all__ = [
    "CITY_REQUIRED",
    "BackendKind",
    "ConfigLoadError",
    "DatasetLoadError",
    "LocalWeatherBackend",
    "RemoteWeatherBackend",
    "ResultEnvelope",
    "RetryContext",
    "WeatherBackend",
    "WeatherClientError",
    "WeatherConnectionError",
    "WeatherHttpClient",
    "WeatherRecord",
    "WeatherResponseError",
    "WeatherSettings",
    "WeatherTimeout",
    "__version__",
    "backoff_delay",
    "create_app",
    "create_backend",
    "fail",
    "fetch_with_retry",
    "load_dataset",
    "load_settings",
    "ok",
]
