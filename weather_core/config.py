"""Settings loading for weather backends.

Settings live in a YAML file with optional "weather" and "server" sections:

    weather:
      backend: remote          # or "local"
      api_origin: http://localhost:8080
      request_timeout: 10
      max_attempts: 3
      delay_unit: 1.0
      dataset_path: weather_data.json
    server:
      port: 8080

Missing keys fall back to the WeatherSettings defaults.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from .http import DEFAULT_TIMEOUT
from .retry import DEFAULT_MAX_ATTEMPTS


class BackendKind(Enum):
    """Which weather data source to use."""

    REMOTE = "remote"
    LOCAL = "local"


@dataclass(frozen=True)
class WeatherSettings:
    """Resolved weather settings.

    Attributes:
        backend: Data source to construct.
        api_origin: Base origin of the weather API (remote backend).
        request_timeout: Total HTTP timeout in seconds.
        max_attempts: Attempts per fetch_with_retry() call.
        delay_unit: Seconds per backoff time unit.
        dataset_path: Dataset file for the local backend.
        server_port: Port for the weather API application.
    """

    backend: BackendKind = BackendKind.REMOTE
    api_origin: str = "http://localhost:8080"
    request_timeout: float = DEFAULT_TIMEOUT
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    delay_unit: float = 1.0
    dataset_path: Path | None = None
    server_port: int = 8080


class ConfigLoadError(Exception):
    """Error loading or validating a settings file."""

    pass


def _positive(name: str, value: Any, kind: type) -> Any:
    # bool is an int subclass; YAML "true" is never a valid count or duration
    if isinstance(value, bool):
        raise ConfigLoadError(f"Invalid {name}: {value!r}")
    if kind is int and isinstance(value, float) and not value.is_integer():
        raise ConfigLoadError(f"{name} must be a whole number, got {value!r}")
    try:
        parsed = kind(value)
    except (TypeError, ValueError) as err:
        raise ConfigLoadError(f"Invalid {name}: {value!r}") from err
    if parsed <= 0:
        raise ConfigLoadError(f"{name} must be positive, got {value!r}")
    return parsed


def parse_settings(
    data: dict[str, Any], *, base_dir: Path | None = None
) -> WeatherSettings:
    """Build WeatherSettings from a parsed settings document.

    Args:
        data: Parsed YAML document.
        base_dir: Directory that relative dataset paths resolve against.

    Returns:
        Validated settings.

    Raises:
        ConfigLoadError: If a value is invalid.
    """
    weather = data.get("weather") or {}
    server = data.get("server") or {}
    if not isinstance(weather, dict) or not isinstance(server, dict):
        raise ConfigLoadError("'weather' and 'server' sections must be mappings")

    defaults = WeatherSettings()

    backend_str = weather.get("backend", defaults.backend.value)
    try:
        backend = BackendKind(backend_str)
    except ValueError as err:
        raise ConfigLoadError(f"Unknown backend: {backend_str!r}") from err

    dataset_path = None
    if raw_path := weather.get("dataset_path"):
        dataset_path = Path(raw_path)
        if base_dir is not None and not dataset_path.is_absolute():
            dataset_path = base_dir / dataset_path

    return WeatherSettings(
        backend=backend,
        api_origin=str(weather.get("api_origin", defaults.api_origin)),
        request_timeout=_positive(
            "request_timeout",
            weather.get("request_timeout", defaults.request_timeout),
            float,
        ),
        max_attempts=_positive(
            "max_attempts", weather.get("max_attempts", defaults.max_attempts), int
        ),
        delay_unit=_positive(
            "delay_unit", weather.get("delay_unit", defaults.delay_unit), float
        ),
        dataset_path=dataset_path,
        server_port=_positive(
            "server.port", server.get("port", defaults.server_port), int
        ),
    )


def load_settings(path: Path | str) -> WeatherSettings:
    """Load settings from a YAML file.

    Relative dataset paths are resolved against the settings file's directory.

    Raises:
        ConfigLoadError: If the file is missing, unparsable or invalid.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigLoadError(f"File not found: {path}")
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (yaml.YAMLError, UnicodeDecodeError) as err:
        raise ConfigLoadError(f"Failed to parse config: {err}") from err
    except OSError as err:
        raise ConfigLoadError(f"Failed to read config: {err}") from err
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Config must be a mapping: {path}")
    return parse_settings(data, base_dir=path.parent)
