"""Tests for settings loading and backend construction."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from weather_core import (
    BackendKind,
    ConfigLoadError,
    LocalWeatherBackend,
    RemoteWeatherBackend,
    WeatherSettings,
    create_backend,
    load_settings,
)
from weather_core.config import parse_settings
from weather_core.dataset import DatasetLoadError


class TestLoadSettings:
    """Settings file parsing."""

    def test_defaults(self) -> None:
        settings = parse_settings({})

        assert settings == WeatherSettings()
        assert settings.backend is BackendKind.REMOTE
        assert settings.api_origin == "http://localhost:8080"
        assert settings.request_timeout == 10.0
        assert settings.max_attempts == 3
        assert settings.delay_unit == 1.0
        assert settings.dataset_path is None
        assert settings.server_port == 8080

    def test_full_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text(
            "weather:\n"
            "  backend: local\n"
            "  api_origin: http://weather.test\n"
            "  request_timeout: 5\n"
            "  max_attempts: 4\n"
            "  delay_unit: 0.5\n"
            "  dataset_path: data/weather_data.json\n"
            "server:\n"
            "  port: 9090\n",
            encoding="utf-8",
        )

        settings = load_settings(path)

        assert settings.backend is BackendKind.LOCAL
        assert settings.api_origin == "http://weather.test"
        assert settings.request_timeout == 5.0
        assert settings.max_attempts == 4
        assert settings.delay_unit == 0.5
        assert settings.dataset_path == tmp_path / "data" / "weather_data.json"
        assert settings.server_port == 9090

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")

        assert load_settings(path) == WeatherSettings()

    def test_absolute_dataset_path_kept(self, tmp_path: Path) -> None:
        absolute = tmp_path / "elsewhere.json"
        settings = parse_settings(
            {"weather": {"dataset_path": str(absolute)}}, base_dir=Path("/ignored")
        )
        assert settings.dataset_path == absolute

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError, match="File not found"):
            load_settings(tmp_path / "nope.yaml")

    def test_unparsable_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("weather: {backend: [", encoding="utf-8")

        with pytest.raises(ConfigLoadError, match="Failed to parse config"):
            load_settings(path)

    def test_invalid_utf8_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_bytes(b"weather:\n  api_origin: http://\xff\n")

        with pytest.raises(ConfigLoadError, match="Failed to parse config"):
            load_settings(path)

    def test_directory_path(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError, match="Failed to read config"):
            load_settings(tmp_path)

    def test_non_mapping_document(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")

        with pytest.raises(ConfigLoadError, match="must be a mapping"):
            load_settings(path)

    def test_unknown_backend(self) -> None:
        with pytest.raises(ConfigLoadError, match="Unknown backend: 'carrier-pigeon'"):
            parse_settings({"weather": {"backend": "carrier-pigeon"}})

    @pytest.mark.parametrize(
        "weather",
        [
            {"max_attempts": 0},
            {"max_attempts": "many"},
            {"request_timeout": -1},
            {"delay_unit": 0},
            {"max_attempts": 2.9},
            {"max_attempts": True},
            {"request_timeout": True},
        ],
    )
    def test_invalid_numbers(self, weather: dict[str, object]) -> None:
        with pytest.raises(ConfigLoadError):
            parse_settings({"weather": weather})

    def test_fractional_count_rejected(self) -> None:
        with pytest.raises(
            ConfigLoadError, match="max_attempts must be a whole number"
        ):
            parse_settings({"weather": {"max_attempts": 2.9}})

    def test_boolean_count_rejected(self) -> None:
        with pytest.raises(ConfigLoadError, match="Invalid max_attempts: True"):
            parse_settings({"weather": {"max_attempts": True}})

    def test_integral_float_count_accepted(self) -> None:
        assert parse_settings({"weather": {"max_attempts": 4.0}}).max_attempts == 4

    def test_invalid_port(self) -> None:
        with pytest.raises(ConfigLoadError, match="server.port"):
            parse_settings({"server": {"port": 0}})


class TestCreateBackend:
    """Explicit backend construction from settings."""

    def test_remote_backend(self, mock_session: MagicMock) -> None:
        backend = create_backend(WeatherSettings(), session=mock_session)
        assert isinstance(backend, RemoteWeatherBackend)

    def test_remote_requires_session(self) -> None:
        with pytest.raises(ConfigLoadError, match="requires an aiohttp session"):
            create_backend(WeatherSettings())

    def test_local_backend(self, tmp_path: Path) -> None:
        path = tmp_path / "weather_data.json"
        path.write_text(
            json.dumps(
                {
                    "cities": {
                        "paris": {
                            "city": "Paris",
                            "temp": 18.5,
                            "condition": "Cloudy",
                            "humidity": 72,
                        }
                    }
                }
            ),
            encoding="utf-8",
        )

        backend = create_backend(
            WeatherSettings(backend=BackendKind.LOCAL, dataset_path=path)
        )

        assert isinstance(backend, LocalWeatherBackend)
        assert backend.cities == ("paris",)

    def test_local_requires_dataset_path(self) -> None:
        with pytest.raises(ConfigLoadError, match="requires dataset_path"):
            create_backend(WeatherSettings(backend=BackendKind.LOCAL))

    def test_local_missing_dataset(self, tmp_path: Path) -> None:
        settings = WeatherSettings(
            backend=BackendKind.LOCAL, dataset_path=tmp_path / "missing.json"
        )
        with pytest.raises(DatasetLoadError):
            create_backend(settings)

    def test_each_call_builds_new_backend(self, mock_session: MagicMock) -> None:
        settings = WeatherSettings()
        first = create_backend(settings, session=mock_session)
        second = create_backend(settings, session=mock_session)
        assert first is not second
