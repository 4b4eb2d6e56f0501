"""
Common interface of the wave-band transmittance models.

Each band model derives an AtmosphericState once from its weather
condition, supplies its own precipitation coefficient tables and
implements its own combination of attenuation terms.
"""

import math
from abc import ABC, abstractmethod

from air_transmission.attenuation.common import (
    PowerLawCoefficients,
    rain_attenuation,
    snow_attenuation,
    dust_attenuation,
    visibility_factor,
)
from air_transmission.weather.conditions import WeatherCondition
from air_transmission.weather.state import AtmosphericState


def check_distance(distance_km: float) -> float:
    """Validate a path length in km and return it as a float."""
    distance_km = float(distance_km)
    if not math.isfinite(distance_km) or distance_km < 0:
        raise ValueError(f"distance must be a non-negative finite value in km, got {distance_km}")
    return distance_km


def clip_transmittance(value: float) -> float:
    """Clip a transmittance to [0, 1]."""
    return max(0.0, min(1.0, float(value)))


class TransmittanceModel(ABC):
    """Base class for wave-band transmittance models.

    Attributes:
        weather: Weather condition the model was built from
        state: Atmospheric state derived from ``weather``
        wavelength: Principal wavelength of the band (class constant)
        band: Short band name (class constant)
    """

    band: str = ""
    wavelength: float = 0.0

    def __init__(self, weather: WeatherCondition):
        self._weather = weather
        self._state = AtmosphericState.from_weather(weather)

    @property
    def weather(self) -> WeatherCondition:
        """Weather condition the model was built from."""
        return self._weather

    @property
    def state(self) -> AtmosphericState:
        """Derived atmospheric state."""
        return self._state

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._weather.describe()})"

    @abstractmethod
    def calculate_transmittance(self, distance_km: float) -> float:
        """Transmittance over a horizontal path.

        Args:
            distance_km: Path length in km

        Returns:
            Transmittance in [0, 1]
        """

    @abstractmethod
    def rain_coefficients(self, wavelength: float) -> PowerLawCoefficients:
        """Rain power-law coefficients at ``wavelength``."""

    @abstractmethod
    def snow_coefficients(self, wavelength: float) -> PowerLawCoefficients:
        """Snow power-law coefficients at ``wavelength``."""

    def rain_attenuation(self, path_length_km: float, wavelength: float) -> float:
        return rain_attenuation(self._state, path_length_km, self.rain_coefficients(wavelength))

    def snow_attenuation(self, path_length_km: float, wavelength: float) -> float:
        return snow_attenuation(self._state, path_length_km, self.snow_coefficients(wavelength))

    def dust_attenuation(self, path_length_km: float) -> float:
        return dust_attenuation(self._state, path_length_km)

    def visibility_factor(self) -> float:
        return visibility_factor(self._state)
