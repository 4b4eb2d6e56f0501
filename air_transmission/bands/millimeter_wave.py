"""
Millimeter-wave transmittance model (3.19 mm, 94 GHz).

Four clear-air terms (molecular scattering, aerosol scattering, water
vapour and oxygen absorption) give a specific attenuation in km^-1 that
is multiplied by the path length; rain, snow and fog losses are added
before exponentiation.
"""

import logging

import numpy as np

from air_transmission.attenuation.common import PowerLawCoefficients, water_vapor_density
from air_transmission.bands.base import TransmittanceModel, check_distance, clip_transmittance
from air_transmission.utils.constants import (
    MILLIMETER_WAVE_WAVELENGTH_MM,
    STANDARD_PRESSURE_HPA,
    STANDARD_TEMPERATURE,
    STANDARD_AEROSOL_DENSITY,
    REFERENCE_TEMPERATURE,
)

logger = logging.getLogger(__name__)

# Magnus denominator used for the vapour density at 94 GHz [°C]
MAGNUS_B_MILLIMETER = 237.3

# Liquid water content of dense fog at zero visibility [g/m³]
FOG_LIQUID_WATER_MAX = 0.05

RAIN_COEFFICIENTS = PowerLawCoefficients(k=0.926, alpha=0.9551)
SNOW_COEFFICIENTS = PowerLawCoefficients(k=0.997, alpha=1.064)


class MillimeterWaveTransmittanceModel(TransmittanceModel):
    """Transmittance of 94 GHz radiation along a horizontal path."""

    band = "millimeter_wave"
    wavelength = MILLIMETER_WAVE_WAVELENGTH_MM

    def rain_coefficients(self, wavelength):
        return RAIN_COEFFICIENTS

    def snow_coefficients(self, wavelength):
        return SNOW_COEFFICIENTS

    def calculate_transmittance(self, distance_km: float) -> float:
        distance_km = check_distance(distance_km)

        specific = self.clear_air_attenuation()
        rain = self.rain_attenuation(distance_km, self.wavelength)
        snow = self.snow_attenuation(distance_km, self.wavelength)
        fog = self.fog_attenuation(distance_km)

        total = specific * distance_km + rain + snow + fog

        logger.debug(
            f"Millimeter wave {distance_km} km: clear air={specific:.5f} km^-1, "
            f"rain={rain:.4f}, snow={snow:.4f}, fog={fog:.5f}"
        )

        return clip_transmittance(np.exp(-total))

    def clear_air_attenuation(self) -> float:
        """Sum of the clear-air specific attenuation terms [km^-1]."""
        return (self.molecular_scattering() + self.aerosol_scattering()
                + self.water_vapor_absorption() + self.oxygen_absorption())

    def molecular_scattering(self) -> float:
        state = self.state
        return 0.0015 * (state.pressure / STANDARD_PRESSURE_HPA) * \
            (STANDARD_TEMPERATURE / state.temperature) * (self.wavelength / 3.0) ** -4

    def aerosol_scattering(self) -> float:
        beta = 0.0434 * (self.state.aerosol_density / STANDARD_AEROSOL_DENSITY)
        return beta * (self.wavelength / 3.0) ** -1.2

    def water_vapor_absorption(self) -> float:
        state = self.state
        rho = water_vapor_density(state, magnus_b=MAGNUS_B_MILLIMETER)
        pressure_factor = np.sqrt(state.pressure / STANDARD_PRESSURE_HPA)
        return 0.05 * rho * (self.wavelength / 100.0) * \
            (state.temperature / REFERENCE_TEMPERATURE) * pressure_factor

    def oxygen_absorption(self) -> float:
        state = self.state
        gamma = 0.01 * (self.wavelength / 60.0) * (state.temperature / REFERENCE_TEMPERATURE)
        return gamma * (state.pressure / STANDARD_PRESSURE_HPA)

    def fog_liquid_water_density(self) -> float:
        """Liquid water content estimated from visibility [g/m³], 0 outside fog."""
        if not self.state.is_foggy:
            return 0.0
        # Clamped at 0: above 10 km visibility the linear estimate turns negative
        return max(0.0, FOG_LIQUID_WATER_MAX * (1 - self.state.visibility / 10.0))

    def fog_attenuation(self, distance_km: float) -> float:
        specific = 0.4 * self.wavelength * self.fog_liquid_water_density() / 1000.0
        return specific * distance_km
