"""Tests for scenario configuration."""

import json

import pytest
import yaml

from air_transmission.config import (
    ScenarioConfig,
    WeatherConfig,
    load_scenario,
    validate_scenario,
)
from air_transmission.weather import WeatherType


@pytest.fixture
def rain_scenario():
    return {
        "name": "heavy_rain",
        "description": "Laser in heavy rain",
        "band": "laser",
        "weather": {
            "type": "rain",
            "temperature": 25,
            "relative_humidity": 90,
            "visibility": 2.5,
            "precipitation": 25,
        },
        "path": {"distances_km": [0.5, 1.0, 2.0]},
        "turbulence": {"enabled": True, "beam_height_m": 20.0},
    }


class TestScenarioConfig:
    """Tests for ScenarioConfig construction."""

    def test_defaults(self):
        """A default scenario is valid clear-weather laser."""
        config = ScenarioConfig()
        assert config.band == "laser"
        assert config.weather.type == "clear"
        assert config.path.distances_km == [0.1, 0.5, 1.0, 5.0, 10.0]
        assert config.smoke.concentration_g_m3 == 0.0
        assert not config.turbulence.enabled
        assert not config.designator.enabled
        assert config.validate() == []

    def test_from_dict(self, rain_scenario):
        """Sections override defaults; missing sections keep them."""
        config = ScenarioConfig.from_dict(rain_scenario)
        assert config.name == "heavy_rain"
        assert config.weather.precipitation == 25
        assert config.path.distances_km == [0.5, 1.0, 2.0]
        assert config.turbulence.enabled
        assert config.turbulence.beam_height_m == 20.0
        assert config.turbulence.wind_speed_ms == 5.0
        assert config.smoke.thickness_m == 0.0

    def test_weather_to_condition(self):
        """Weather settings build a validated condition."""
        condition = WeatherConfig(type="fog", visibility=0.5).to_condition()
        assert condition.type is WeatherType.FOG
        assert condition.visibility == 0.5

    def test_unknown_section_key(self):
        """Unknown keys in a section are rejected."""
        with pytest.raises(TypeError):
            ScenarioConfig.from_dict({"weather": {"wind": 3}})


class TestSerialization:
    """Tests for JSON and YAML files."""

    def test_json_round_trip(self, tmp_path, rain_scenario):
        """Saving and loading JSON preserves the scenario."""
        config = ScenarioConfig.from_dict(rain_scenario)
        path = tmp_path / "scenario.json"
        config.to_json(path)

        assert json.loads(path.read_text())["weather"]["type"] == "rain"
        assert load_scenario(path) == config

    def test_yaml_round_trip(self, tmp_path, rain_scenario):
        """Saving and loading YAML preserves the scenario."""
        config = ScenarioConfig.from_dict(rain_scenario)
        path = tmp_path / "scenario.yaml"
        config.to_yaml(path)

        assert yaml.safe_load(path.read_text())["band"] == "laser"
        assert load_scenario(path) == config

    def test_yaml_file(self, tmp_path):
        """Hand-written YAML loads with defaults filled in."""
        path = tmp_path / "fog.yml"
        path.write_text(
            "name: fog_ir\n"
            "band: infrared\n"
            "weather:\n"
            "  type: fog\n"
            "  visibility: 0.5\n"
        )
        config = load_scenario(path)
        assert config.band == "infrared"
        assert config.weather.visibility == 0.5
        assert config.weather.relative_humidity == 60.0

    def test_empty_yaml(self, tmp_path):
        """An empty YAML file gives the default scenario."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_scenario(path) == ScenarioConfig()

    def test_missing_file(self, tmp_path):
        """Missing files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_scenario(tmp_path / "missing.yaml")

    def test_unsupported_format(self, tmp_path):
        """Only YAML and JSON are supported."""
        path = tmp_path / "scenario.toml"
        path.write_text("band = 'laser'")
        with pytest.raises(ValueError, match="Unsupported file format"):
            load_scenario(path)


class TestValidation:
    """Tests for scenario validation."""

    def test_valid(self, rain_scenario):
        """A complete scenario validates cleanly."""
        assert validate_scenario(ScenarioConfig.from_dict(rain_scenario)) == []

    def test_unknown_band(self):
        """Unknown bands are reported."""
        errors = ScenarioConfig(band="x-ray").validate()
        assert any("band" in e for e in errors)

    def test_invalid_weather(self):
        """Weather errors are reported rather than raised."""
        config = ScenarioConfig.from_dict({"weather": {"visibility": -1}})
        errors = config.validate()
        assert any("visibility" in e for e in errors)

    def test_unknown_weather_type(self):
        """Unknown weather types are reported."""
        config = ScenarioConfig.from_dict({"weather": {"type": "hail"}})
        assert any("hail" in e for e in config.validate())

    def test_distances(self):
        """Distances must be present and non-negative."""
        assert ScenarioConfig.from_dict({"path": {"distances_km": []}}).validate()
        errors = ScenarioConfig.from_dict({"path": {"distances_km": [1.0, -2.0]}}).validate()
        assert any("non-negative" in e for e in errors)

    def test_smoke(self):
        """Negative smoke settings are reported."""
        config = ScenarioConfig.from_dict({"smoke": {"concentration_g_m3": -0.1}})
        assert any("smoke" in e for e in config.validate())

    def test_designator_checked_only_when_enabled(self):
        """Designator settings are validated only when enabled."""
        disabled = ScenarioConfig.from_dict({"designator": {"pulse_width_ns": 0}})
        enabled = ScenarioConfig.from_dict({"designator": {"enabled": True, "pulse_width_ns": 0}})
        assert disabled.validate() == []
        assert any("pulse width" in e for e in enabled.validate())
