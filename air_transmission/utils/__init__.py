"""
Utility constants shared by the transmittance models.

Constants
---------
STANDARD_PRESSURE_HPA : float
    Standard sea-level pressure (hPa)
STANDARD_TEMPERATURE : float
    Standard sea-level temperature (K)
STANDARD_VISIBILITY_KM : float
    Clear-air reference visibility (km)
STANDARD_AEROSOL_DENSITY : float
    Aerosol number density at standard visibility (particles/cm³)
STANDARD_TRANSMITTANCE : float
    Per-kilometre transmittance of the standard clear atmosphere
KOSCHMIEDER_CONSTANT : float
    Visibility-to-extinction constant (3.91)
"""

from air_transmission.utils.constants import (
    STANDARD_PRESSURE_HPA,
    STANDARD_TEMPERATURE,
    REFERENCE_TEMPERATURE,
    CELSIUS_TO_KELVIN,
    ABSOLUTE_ZERO_CELSIUS,
    STANDARD_VISIBILITY_KM,
    STANDARD_AEROSOL_DENSITY,
    MIN_AEROSOL_VISIBILITY_KM,
    KOSCHMIEDER_CONSTANT,
    VISIBILITY_REFERENCE_WAVELENGTH_UM,
    STANDARD_TRANSMITTANCE,
    DEFAULT_CO2_PPM,
    LASER_WAVELENGTH_UM,
    INFRARED_WAVELENGTH_UM,
    MILLIMETER_WAVE_WAVELENGTH_MM,
    ULTRAVIOLET_WAVELENGTH_UM,
    LASER_WAVE_NUMBER,
)

__all__ = [
    "STANDARD_PRESSURE_HPA",
    "STANDARD_TEMPERATURE",
    "REFERENCE_TEMPERATURE",
    "CELSIUS_TO_KELVIN",
    "ABSOLUTE_ZERO_CELSIUS",
    "STANDARD_VISIBILITY_KM",
    "STANDARD_AEROSOL_DENSITY",
    "MIN_AEROSOL_VISIBILITY_KM",
    "KOSCHMIEDER_CONSTANT",
    "VISIBILITY_REFERENCE_WAVELENGTH_UM",
    "STANDARD_TRANSMITTANCE",
    "DEFAULT_CO2_PPM",
    "LASER_WAVELENGTH_UM",
    "INFRARED_WAVELENGTH_UM",
    "MILLIMETER_WAVE_WAVELENGTH_MM",
    "ULTRAVIOLET_WAVELENGTH_UM",
    "LASER_WAVE_NUMBER",
]
