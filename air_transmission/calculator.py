"""
Transmittance calculator.

Convenience entry points that build the band model for a weather
condition, apply an optional smoke screen and log the result.
"""

import logging
from enum import Enum
from typing import Union

from air_transmission.attenuation.common import smoke_screen_transmittance
from air_transmission.bands import (
    TransmittanceModel,
    LaserTransmittanceModel,
    InfraredTransmittanceModel,
    MillimeterWaveTransmittanceModel,
    UltravioletTransmittanceModel,
)
from air_transmission.weather.conditions import WeatherCondition

logger = logging.getLogger(__name__)


class Band(Enum):
    """Wave bands with a transmittance model."""

    LASER = "laser"
    INFRARED = "infrared"
    MILLIMETER_WAVE = "millimeter_wave"
    ULTRAVIOLET = "ultraviolet"

    @classmethod
    def parse(cls, value: Union["Band", str]) -> "Band":
        """Coerce a Band, its name or value (any case; '-' allowed for '_')."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip().lower().replace("-", "_")
            for member in cls:
                if text in (member.value, member.name.lower()):
                    return member
        raise ValueError(
            f"Unknown band: {value!r} (expected one of: {', '.join(b.value for b in cls)})"
        )


MODELS = {
    Band.LASER: LaserTransmittanceModel,
    Band.INFRARED: InfraredTransmittanceModel,
    Band.MILLIMETER_WAVE: MillimeterWaveTransmittanceModel,
    Band.ULTRAVIOLET: UltravioletTransmittanceModel,
}


def create_model(band: Union[Band, str], weather: WeatherCondition) -> TransmittanceModel:
    """Build the transmittance model for a band."""
    return MODELS[Band.parse(band)](weather)


def calc_transmittance(band: Union[Band, str], weather: WeatherCondition, distance_km: float,
                       smoke_concentration: float = 0.0, smoke_thickness_m: float = 0.0) -> float:
    """
    Transmittance of a band, optionally through a smoke screen.

    Parameters
    ----------
    band : Band or str
        Wave band
    weather : WeatherCondition
        Weather along the path
    distance_km : float
        Path length in km
    smoke_concentration : float, optional
        Smoke concentration in g/m³ (default: no smoke)
    smoke_thickness_m : float, optional
        Smoke screen thickness in m (default: no smoke)

    Returns
    -------
    transmittance : float
        Value in [0, 1]
    """
    model = create_model(band, weather)
    logger.debug(f"{model.band}: {weather.describe()}")

    transmittance = model.calculate_transmittance(distance_km)
    transmittance *= smoke_screen_transmittance(smoke_concentration, smoke_thickness_m)

    logger.info(f"{model.band} transmittance over {distance_km} km: {transmittance:.4%}")
    return transmittance


def calc_laser(weather: WeatherCondition, distance_km: float) -> float:
    """Laser transmittance."""
    return calc_transmittance(Band.LASER, weather, distance_km)


def calc_laser_with_smoke(weather: WeatherCondition, distance_km: float,
                          smoke_concentration: float = 0.0, smoke_thickness_m: float = 0.0) -> float:
    """Laser transmittance through a smoke screen."""
    model = LaserTransmittanceModel(weather)
    return model.calculate_transmittance_with_smoke(distance_km, smoke_concentration, smoke_thickness_m)


def calc_laser_with_turbulence(weather: WeatherCondition, distance_km: float) -> float:
    """Laser transmittance including turbulence losses."""
    model = LaserTransmittanceModel(weather)
    transmittance = model.calculate_transmittance_with_turbulence(distance_km)
    logger.info(f"laser transmittance with turbulence over {distance_km} km: {transmittance:.4%}")
    return transmittance


def calc_ir(weather: WeatherCondition, distance_km: float,
            smoke_concentration: float = 0.0, smoke_thickness_m: float = 0.0) -> float:
    """Infrared transmittance, optionally through a smoke screen."""
    return calc_transmittance(Band.INFRARED, weather, distance_km,
                              smoke_concentration, smoke_thickness_m)


def calc_millimeter_wave(weather: WeatherCondition, distance_km: float,
                         smoke_concentration: float = 0.0, smoke_thickness_m: float = 0.0) -> float:
    """Millimeter-wave transmittance, optionally through a smoke screen."""
    return calc_transmittance(Band.MILLIMETER_WAVE, weather, distance_km,
                              smoke_concentration, smoke_thickness_m)


def calc_uv(weather: WeatherCondition, distance_km: float,
            smoke_concentration: float = 0.0, smoke_thickness_m: float = 0.0) -> float:
    """Ultraviolet transmittance, optionally through a smoke screen."""
    return calc_transmittance(Band.ULTRAVIOLET, weather, distance_km,
                              smoke_concentration, smoke_thickness_m)
