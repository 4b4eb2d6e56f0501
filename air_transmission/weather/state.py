"""
Atmospheric state derived from a weather condition.

The state is computed once when a band model is constructed and is
immutable afterwards, so a model instance can be shared freely.
"""

from dataclasses import dataclass

from air_transmission.attenuation.common import aerosol_density
from air_transmission.utils.constants import CELSIUS_TO_KELVIN, STANDARD_PRESSURE_HPA
from air_transmission.weather.conditions import WeatherCondition, WeatherType


@dataclass(frozen=True)
class AtmosphericState:
    """
    Atmospheric quantities used by the band models.

    Attributes
    ----------
    temperature : float
        Air temperature in Kelvin
    pressure : float
        Air pressure in hPa (fixed at standard sea level)
    humidity : float
        Relative humidity in percent
    visibility : float
        Meteorological visibility in km
    aerosol_density : float
        Aerosol number density in particles/cm³
    is_raining, is_foggy, is_dusty, is_snowing : bool
        Weather flags; at most one is set
    rain_rate : float
        Rain rate in mm/h (0 unless raining)
    snow_rate : float
        Snowfall rate in mm/h water equivalent (0 unless snowing)
    co2_concentration : float
        CO2 concentration in ppm
    """
    temperature: float
    pressure: float
    humidity: float
    visibility: float
    aerosol_density: float
    is_raining: bool
    is_foggy: bool
    is_dusty: bool
    is_snowing: bool
    rain_rate: float
    snow_rate: float
    co2_concentration: float

    @classmethod
    def from_weather(cls, weather: WeatherCondition) -> "AtmosphericState":
        """Derive the atmospheric state from a weather condition."""
        precipitation = weather.precipitation if weather.precipitation is not None else 0.0
        is_raining = weather.type is WeatherType.RAIN
        is_snowing = weather.type is WeatherType.SNOW

        return cls(
            temperature=weather.temperature + CELSIUS_TO_KELVIN,
            pressure=STANDARD_PRESSURE_HPA,
            humidity=weather.relative_humidity,
            visibility=weather.visibility,
            aerosol_density=aerosol_density(weather.visibility),
            is_raining=is_raining,
            is_foggy=weather.type is WeatherType.FOG,
            is_dusty=weather.type is WeatherType.DUST,
            is_snowing=is_snowing,
            rain_rate=precipitation if is_raining else 0.0,
            snow_rate=precipitation if is_snowing else 0.0,
            co2_concentration=weather.co2_concentration,
        )

    @property
    def temperature_celsius(self) -> float:
        """Air temperature in °C."""
        return self.temperature - CELSIUS_TO_KELVIN
