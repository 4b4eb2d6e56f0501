"""
Scenario configuration data structures.

A scenario names the wave band, the weather along the path, the path
lengths to evaluate and the optional smoke, turbulence and designator
settings. Scenarios load from dictionaries, JSON or YAML files.

Example YAML:
    name: heavy_rain_laser
    band: laser
    weather:
      type: rain
      temperature: 25
      relative_humidity: 90
      visibility: 2.5
      precipitation: 25
    path:
      distances_km: [0.1, 0.5, 1, 5, 10]
    turbulence:
      enabled: true
"""

import json
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from air_transmission.calculator import Band
from air_transmission.utils.constants import DEFAULT_CO2_PPM
from air_transmission.weather.conditions import (
    WeatherCondition,
    WeatherType,
    WeatherValidationError,
)


@dataclass
class WeatherConfig:
    """Weather settings.

    Attributes:
        type: Weather type (clear, rain, snow, fog, dust)
        temperature: Air temperature [°C]
        relative_humidity: Relative humidity [%]
        visibility: Visibility [km]
        precipitation: Precipitation rate [mm/h], rain and snow only
        co2_concentration: CO2 concentration [ppm]
    """
    type: str = "clear"
    temperature: float = 25.0
    relative_humidity: float = 60.0
    visibility: float = 10.0
    precipitation: Optional[float] = None
    co2_concentration: float = DEFAULT_CO2_PPM

    def to_condition(self) -> WeatherCondition:
        """Build the validated WeatherCondition."""
        return WeatherCondition(
            type=self.type,
            temperature=self.temperature,
            relative_humidity=self.relative_humidity,
            visibility=self.visibility,
            precipitation=self.precipitation,
            co2_concentration=self.co2_concentration,
        )


@dataclass
class PathConfig:
    """Propagation path settings.

    Attributes:
        distances_km: Path lengths to evaluate [km]
    """
    distances_km: List[float] = field(default_factory=lambda: [0.1, 0.5, 1.0, 5.0, 10.0])


@dataclass
class SmokeConfig:
    """Smoke screen on the path.

    Attributes:
        concentration_g_m3: Smoke concentration [g/m³]; 0 disables the screen
        thickness_m: Screen thickness along the path [m]
    """
    concentration_g_m3: float = 0.0
    thickness_m: float = 0.0


@dataclass
class TurbulenceConfig:
    """Turbulence settings (laser band only).

    Attributes:
        enabled: Apply turbulence losses
        beam_height_m: Mean beam height [m]
        wind_speed_ms: Wind speed [m/s]
    """
    enabled: bool = False
    beam_height_m: float = 10.0
    wind_speed_ms: float = 5.0


@dataclass
class DesignatorConfig:
    """Laser designator power budget (double path).

    Attributes:
        enabled: Compute the received power
        laser_energy_j: Pulse energy [J]
        pulse_width_ns: Pulse width [ns]
        target_reflectivity: Target reflectivity (0-1)
        receiver_distance_km: Target-to-receiver distance [km]
        receiver_area_m2: Receiving aperture [m²]
    """
    enabled: bool = False
    laser_energy_j: float = 0.130
    pulse_width_ns: float = 15.0
    target_reflectivity: float = 0.2
    receiver_distance_km: float = 1.0
    receiver_area_m2: float = 0.001


@dataclass
class ScenarioConfig:
    """Complete transmittance scenario."""

    name: str = "unnamed_scenario"
    description: str = ""
    band: str = "laser"

    weather: WeatherConfig = field(default_factory=WeatherConfig)
    path: PathConfig = field(default_factory=PathConfig)
    smoke: SmokeConfig = field(default_factory=SmokeConfig)
    turbulence: TurbulenceConfig = field(default_factory=TurbulenceConfig)
    designator: DesignatorConfig = field(default_factory=DesignatorConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScenarioConfig":
        """Create a ScenarioConfig from a dictionary.

        Args:
            data: Configuration dictionary; missing sections use defaults

        Returns:
            ScenarioConfig instance
        """
        config = cls(
            name=data.get("name", "unnamed_scenario"),
            description=data.get("description", ""),
            band=data.get("band", "laser"),
        )

        if "weather" in data:
            config.weather = WeatherConfig(**data["weather"])
        if "path" in data:
            config.path = PathConfig(**data["path"])
        if "smoke" in data:
            config.smoke = SmokeConfig(**data["smoke"])
        if "turbulence" in data:
            config.turbulence = TurbulenceConfig(**data["turbulence"])
        if "designator" in data:
            config.designator = DesignatorConfig(**data["designator"])

        return config

    @classmethod
    def from_json(cls, json_path: Union[str, Path]) -> "ScenarioConfig":
        """Load a scenario from a JSON file."""
        with open(json_path, 'r') as f:
            return cls.from_dict(json.load(f))

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "ScenarioConfig":
        """Load a scenario from a YAML file."""
        with open(yaml_path, 'r') as f:
            return cls.from_dict(yaml.safe_load(f) or {})

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return asdict(self)

    def to_json(self, json_path: Union[str, Path], indent: int = 2) -> None:
        """Save configuration to a JSON file."""
        with open(json_path, 'w') as f:
            json.dump(self.to_dict(), f, indent=indent)

    def to_yaml(self, yaml_path: Union[str, Path]) -> None:
        """Save configuration to a YAML file."""
        with open(yaml_path, 'w') as f:
            yaml.safe_dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def validate(self) -> List[str]:
        """Validate configuration parameters.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        try:
            Band.parse(self.band)
        except ValueError as e:
            errors.append(str(e))

        try:
            WeatherType.parse(self.weather.type)
            self.weather.to_condition()
        except WeatherValidationError as e:
            errors.append(f"Invalid weather: {e}")

        if not self.path.distances_km:
            errors.append("at least one distance is required")
        elif any(d < 0 for d in self.path.distances_km):
            errors.append("distances must be non-negative")

        if self.smoke.concentration_g_m3 < 0 or self.smoke.thickness_m < 0:
            errors.append("smoke concentration and thickness must be non-negative")

        if self.turbulence.enabled:
            if self.turbulence.beam_height_m < 0:
                errors.append("beam height must be non-negative")
            if self.turbulence.wind_speed_ms < 0:
                errors.append("wind speed must be non-negative")

        if self.designator.enabled:
            if self.designator.pulse_width_ns <= 0:
                errors.append("pulse width must be positive")
            if self.designator.receiver_distance_km <= 0:
                errors.append("receiver distance must be positive")
            if self.designator.receiver_area_m2 <= 0:
                errors.append("receiver area must be positive")
            if not 0 <= self.designator.target_reflectivity <= 1:
                errors.append("target reflectivity must be between 0 and 1")

        return errors


def load_scenario(path: Union[str, Path]) -> ScenarioConfig:
    """
    Load a scenario from a YAML or JSON file.

    Parameters
    ----------
    path : str or Path
        Path to configuration file (.yaml, .yml, or .json)

    Returns
    -------
    config : ScenarioConfig
        Loaded scenario (not yet validated)

    Raises
    ------
    FileNotFoundError
        If configuration file doesn't exist
    ValueError
        If file format is not supported
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    suffix = path.suffix.lower()
    if suffix in ('.yaml', '.yml'):
        return ScenarioConfig.from_yaml(path)
    if suffix == '.json':
        return ScenarioConfig.from_json(path)
    raise ValueError(f"Unsupported file format: {suffix}. Use .yaml, .yml, or .json")


def validate_scenario(config: ScenarioConfig) -> List[str]:
    """Validate a scenario and return the list of issues (empty if valid)."""
    return config.validate()
