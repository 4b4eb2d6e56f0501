"""
air_transmission: Atmospheric transmittance for sensor power budgets.

Estimates the fraction of laser, infrared, millimeter-wave and
ultraviolet energy that survives a horizontal atmospheric path under a
given weather condition.

Modules
-------
weather
    Weather conditions and the atmospheric state derived from them
attenuation
    Shared attenuation mechanisms (rain, snow, dust, fog, visibility,
    aerosol, water vapour, smoke) and spectral banding
bands
    Laser, infrared, millimeter-wave and ultraviolet transmittance models
turbulence
    Cn2 estimate, scintillation, beam wander and turbulence diagnostics
calculator
    Convenience entry points per band, with optional smoke screens
radiometry
    Received power for double- and single-path power budgets
config
    Scenario configuration from dict, JSON or YAML

All path lengths passed to the band models are in kilometres.
"""

__version__ = "0.1.0"
__author__ = "air_transmission Contributors"

from air_transmission.weather import (
    WeatherType,
    WeatherCondition,
    WeatherValidationError,
    AtmosphericState,
)
from air_transmission.attenuation import smoke_screen_transmittance
from air_transmission.bands import (
    TransmittanceModel,
    LaserTransmittanceModel,
    InfraredTransmittanceModel,
    MillimeterWaveTransmittanceModel,
    UltravioletTransmittanceModel,
)
from air_transmission.calculator import (
    Band,
    create_model,
    calc_transmittance,
    calc_laser,
    calc_laser_with_smoke,
    calc_laser_with_turbulence,
    calc_ir,
    calc_millimeter_wave,
    calc_uv,
)

__all__ = [
    "__version__",
    "WeatherType",
    "WeatherCondition",
    "WeatherValidationError",
    "AtmosphericState",
    "smoke_screen_transmittance",
    "TransmittanceModel",
    "LaserTransmittanceModel",
    "InfraredTransmittanceModel",
    "MillimeterWaveTransmittanceModel",
    "UltravioletTransmittanceModel",
    "Band",
    "create_model",
    "calc_transmittance",
    "calc_laser",
    "calc_laser_with_smoke",
    "calc_laser_with_turbulence",
    "calc_ir",
    "calc_millimeter_wave",
    "calc_uv",
]
