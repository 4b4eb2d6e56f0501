"""Tests for the command-line interface."""

import pytest
import yaml

from air_transmission.cli import build_parser, config_from_args, main, scenario_transmittances
from air_transmission.config import ScenarioConfig


class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        """Defaults describe clear weather for the laser band."""
        config = config_from_args(build_parser().parse_args([]))
        assert config.band == "laser"
        assert config.weather.type == "clear"
        assert config.weather.visibility == 10.0
        assert config.path.distances_km == [0.1, 0.5, 1.0, 5.0, 10.0]

    def test_inline_scenario(self):
        """Inline options map onto the scenario."""
        args = build_parser().parse_args([
            "--band", "millimeter_wave", "--weather", "rain", "--precipitation", "25",
            "--visibility", "2.5", "-d", "1", "2", "--smoke-concentration", "0.1",
            "--smoke-thickness", "10",
        ])
        config = config_from_args(args)
        assert config.band == "millimeter_wave"
        assert config.weather.precipitation == 25.0
        assert config.path.distances_km == [1.0, 2.0]
        assert config.smoke.thickness_m == 10.0

    def test_invalid_band_choice(self):
        """argparse rejects unknown bands."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--band", "x-ray"])


class TestScenarioEvaluation:
    """Tests for scenario evaluation."""

    def test_transmittances_decrease(self):
        """Scenario results decrease along the path."""
        results = scenario_transmittances(ScenarioConfig())
        values = [t for _, t in results]
        assert [d for d, _ in results] == [0.1, 0.5, 1.0, 5.0, 10.0]
        assert all(b < a for a, b in zip(values, values[1:]))

    def test_smoke_applied(self):
        """Smoke lowers every result."""
        plain = scenario_transmittances(ScenarioConfig())
        smoky = scenario_transmittances(
            ScenarioConfig.from_dict({"smoke": {"concentration_g_m3": 0.5, "thickness_m": 15.0}})
        )
        for (_, a), (_, b) in zip(plain, smoky):
            assert b < a

    def test_turbulence_applied(self):
        """Turbulence lowers laser results by at most 30%."""
        plain = scenario_transmittances(ScenarioConfig())
        turbulent = scenario_transmittances(ScenarioConfig.from_dict({"turbulence": {"enabled": True}}))
        for (_, a), (_, b) in zip(plain, turbulent):
            assert 0.7 * a <= b <= a


class TestMain:
    """Tests for the main entry point."""

    def test_survey(self, capsys):
        """The survey prints every band."""
        assert main(["--survey"]) == 0
        out = capsys.readouterr().out
        for band in ("laser", "infrared", "millimeter_wave", "ultraviolet"):
            assert f"[{band}]" in out
        assert "heavy rain" in out

    def test_inline(self, capsys):
        """An inline scenario prints one line per distance."""
        assert main(["--band", "infrared", "-d", "0.1", "1"]) == 0
        out = capsys.readouterr().out
        assert "Band: infrared" in out
        assert out.count("transmittance:") == 2

    def test_config_file_with_designator(self, tmp_path, capsys):
        """Scenario files run and print the designator budget."""
        path = tmp_path / "designator.yaml"
        path.write_text(yaml.safe_dump({
            "name": "designator",
            "band": "laser",
            "weather": {"type": "fog", "visibility": 0.8},
            "path": {"distances_km": [1.0]},
            "designator": {"enabled": True},
        }))
        assert main(["--config", str(path)]) == 0
        out = capsys.readouterr().out
        assert "Scenario: designator" in out
        assert "received power" in out

    def test_invalid_scenario(self, capsys):
        """Validation errors exit with status 1."""
        assert main(["--visibility", "-1"]) == 1
        assert "visibility" in capsys.readouterr().err

    def test_missing_config(self, tmp_path):
        """A missing configuration file exits with status 1."""
        assert main(["--config", str(tmp_path / "missing.yaml")]) == 1
