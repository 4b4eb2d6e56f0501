"""
Broadband ultraviolet transmittance model (0.2-0.4 µm).

Same spectral banding as the infrared model, over the UV band. Rayleigh
scattering dominates, with O2 absorption below 250 nm and the ozone
Hartley band below 300 nm. Weather losses are evaluated at 308 nm.
"""

import logging

import numpy as np

from air_transmission.attenuation.common import PowerLawCoefficients, fog_extinction
from air_transmission.attenuation.spectral import (
    DEFAULT_SPECTRAL_BANDS,
    spectral_grid,
    weighted_band_attenuation,
)
from air_transmission.bands.base import TransmittanceModel, check_distance, clip_transmittance
from air_transmission.utils.constants import (
    ULTRAVIOLET_WAVELENGTH_UM,
    STANDARD_PRESSURE_HPA,
    STANDARD_TEMPERATURE,
    STANDARD_AEROSOL_DENSITY,
    KOSCHMIEDER_CONSTANT,
    VISIBILITY_REFERENCE_WAVELENGTH_UM,
)

logger = logging.getLogger(__name__)

MIN_WAVELENGTH_UM = 0.2
MAX_WAVELENGTH_UM = 0.4

RAIN_COEFFICIENTS = PowerLawCoefficients(k=0.4715, alpha=0.6296)
SNOW_COEFFICIENTS = PowerLawCoefficients(k=0.5225, alpha=0.7937)


class UltravioletTransmittanceModel(TransmittanceModel):
    """Transmittance of ultraviolet radiation along a horizontal path."""

    band = "ultraviolet"
    wavelength = ULTRAVIOLET_WAVELENGTH_UM

    def rain_coefficients(self, wavelength):
        return RAIN_COEFFICIENTS

    def snow_coefficients(self, wavelength):
        return SNOW_COEFFICIENTS

    def calculate_transmittance(self, distance_km: float) -> float:
        distance_km = check_distance(distance_km)

        total_attenuation = self.spectral_attenuation()
        base_transmittance = np.exp(-total_attenuation * distance_km)
        weather_effect = self.weather_effect(distance_km)

        logger.debug(
            f"Ultraviolet {distance_km} km: spectral attenuation={total_attenuation:.4f} km^-1, "
            f"base={base_transmittance:.6f}, weather={weather_effect:.6f}"
        )

        return clip_transmittance(base_transmittance * weather_effect)

    def spectral_attenuation(self, n_bands: int = DEFAULT_SPECTRAL_BANDS) -> float:
        """Weighted attenuation summed over the 0.2-0.4 µm sub-bands [km^-1]."""
        wavelengths = spectral_grid(MIN_WAVELENGTH_UM, MAX_WAVELENGTH_UM, n_bands)
        return weighted_band_attenuation(wavelengths, self.band_attenuation, spectral_weight)

    def band_attenuation(self, wavelength):
        return (self.rayleigh_scattering(wavelength)
                + self.mie_scattering(wavelength)
                + self.molecular_absorption(wavelength))

    def rayleigh_scattering(self, wavelength):
        state = self.state
        return 0.008735 * np.power(wavelength, -4.08) * \
            (state.pressure / STANDARD_PRESSURE_HPA) * (STANDARD_TEMPERATURE / state.temperature)

    def mie_scattering(self, wavelength):
        state = self.state
        beta = KOSCHMIEDER_CONSTANT / state.visibility
        alpha = 1.2 * np.power(np.asarray(wavelength) / VISIBILITY_REFERENCE_WAVELENGTH_UM, -1.3)
        return beta * alpha * (state.aerosol_density / STANDARD_AEROSOL_DENSITY)

    def molecular_absorption(self, wavelength):
        wavelength = np.asarray(wavelength, dtype=float)
        o2 = np.where(wavelength < 0.25, 0.5, 0.1)
        o3 = np.where((wavelength >= 0.2) & (wavelength <= 0.3), 0.8, 0.2)
        return o2 + o3

    def weather_effect(self, distance_km: float) -> float:
        rain = self.rain_attenuation(distance_km, self.wavelength) * 0.8
        snow = self.snow_attenuation(distance_km, self.wavelength) * 0.8
        fog = self.fog_attenuation(distance_km) * 0.6
        dust = self.dust_attenuation(distance_km) * 0.6
        return float(np.exp(-(rain + snow + fog + dust)))

    def fog_attenuation(self, distance_km: float) -> float:
        if not self.state.is_foggy:
            return 0.0
        return fog_extinction(self.state.visibility, self.wavelength) * distance_km * 0.2


def spectral_weight(wavelength):
    """Weight of a sample: 1.0 in 280-320 nm, 0.6 in (320, 380] nm, 0.3 elsewhere."""
    wavelength = np.asarray(wavelength, dtype=float)
    return np.where(
        (wavelength >= 0.28) & (wavelength <= 0.32), 1.0,
        np.where((wavelength > 0.32) & (wavelength <= 0.38), 0.6, 0.3),
    )
