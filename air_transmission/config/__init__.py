"""
Scenario configuration.

This module provides:
- ScenarioConfig: Data class for a transmittance scenario
- load_scenario: Loading from JSON or YAML files
- validate_scenario: Validation returning a list of issues
"""

from air_transmission.config.settings import (
    WeatherConfig,
    PathConfig,
    SmokeConfig,
    TurbulenceConfig,
    DesignatorConfig,
    ScenarioConfig,
    load_scenario,
    validate_scenario,
)

__all__ = [
    "WeatherConfig",
    "PathConfig",
    "SmokeConfig",
    "TurbulenceConfig",
    "DesignatorConfig",
    "ScenarioConfig",
    "load_scenario",
    "validate_scenario",
]
