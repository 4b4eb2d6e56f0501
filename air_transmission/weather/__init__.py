"""
Weather Conditions
==================

Weather input for the transmittance models and the atmospheric state
derived from it.

Usage
-----
>>> from air_transmission.weather import WeatherCondition, WeatherType
>>> weather = WeatherCondition(WeatherType.CLEAR, temperature=25,
...                            relative_humidity=60, visibility=10)
>>> weather.describe()
'weather: clear, temperature: 25°C, relative humidity: 60%, visibility: 10km, precipitation: 0mm/h'
"""

from air_transmission.weather.conditions import (
    WeatherType,
    WeatherCondition,
    WeatherValidationError,
)
from air_transmission.weather.state import AtmosphericState

__all__ = [
    "WeatherType",
    "WeatherCondition",
    "WeatherValidationError",
    "AtmosphericState",
]
