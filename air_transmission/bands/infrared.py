"""
Broadband infrared transmittance model (3-12 µm).

The clear-air attenuation is integrated over 100 sub-bands covering the
3-5 µm (MWIR) and 8-12 µm (LWIR) windows. Each sample combines Rayleigh
and Mie scattering with water-vapour and CO2 absorption, weighted by the
band's spectral weight. Weather losses are evaluated at the principal
10 µm wavelength and applied as a separate exponential factor.
"""

import logging

import numpy as np

from air_transmission.attenuation.common import (
    PowerLawCoefficients,
    NO_ATTENUATION,
    fog_extinction,
    water_vapor_density,
)
from air_transmission.attenuation.spectral import (
    DEFAULT_SPECTRAL_BANDS,
    spectral_grid,
    weighted_band_attenuation,
)
from air_transmission.bands.base import TransmittanceModel, check_distance, clip_transmittance
from air_transmission.utils.constants import (
    INFRARED_WAVELENGTH_UM,
    STANDARD_PRESSURE_HPA,
    STANDARD_TEMPERATURE,
    STANDARD_AEROSOL_DENSITY,
    KOSCHMIEDER_CONSTANT,
    VISIBILITY_REFERENCE_WAVELENGTH_UM,
)

logger = logging.getLogger(__name__)

MIN_WAVELENGTH_UM = 3.0
MAX_WAVELENGTH_UM = 12.0

# Reference CO2 concentration of the absorption coefficients [ppm]
CO2_REFERENCE_PPM = 400.0

LWIR_RAIN_COEFFICIENTS = PowerLawCoefficients(k=0.187, alpha=0.784)
MWIR_RAIN_COEFFICIENTS = PowerLawCoefficients(k=0.2656, alpha=0.7978)
SNOW_COEFFICIENTS = PowerLawCoefficients(k=0.365, alpha=0.88)


class InfraredTransmittanceModel(TransmittanceModel):
    """Transmittance of thermal infrared radiation along a horizontal path."""

    band = "infrared"
    wavelength = INFRARED_WAVELENGTH_UM

    def rain_coefficients(self, wavelength):
        if 8 <= wavelength <= 12:
            return LWIR_RAIN_COEFFICIENTS
        if 3 <= wavelength <= 5:
            return MWIR_RAIN_COEFFICIENTS
        return NO_ATTENUATION

    def snow_coefficients(self, wavelength):
        return SNOW_COEFFICIENTS

    def calculate_transmittance(self, distance_km: float) -> float:
        distance_km = check_distance(distance_km)

        total_attenuation = self.spectral_attenuation()
        base_transmittance = np.exp(-total_attenuation * distance_km)
        weather_effect = self.weather_effect(distance_km)

        logger.debug(
            f"Infrared {distance_km} km: spectral attenuation={total_attenuation:.4f} km^-1, "
            f"base={base_transmittance:.6f}, weather={weather_effect:.6f}"
        )

        return clip_transmittance(base_transmittance * weather_effect)

    def spectral_attenuation(self, n_bands: int = DEFAULT_SPECTRAL_BANDS) -> float:
        """Weighted attenuation summed over the 3-12 µm sub-bands [km^-1]."""
        wavelengths = spectral_grid(MIN_WAVELENGTH_UM, MAX_WAVELENGTH_UM, n_bands)
        return weighted_band_attenuation(wavelengths, self.band_attenuation, spectral_weight)

    def band_attenuation(self, wavelength):
        """
        Attenuation coefficient at a sample wavelength.

        Parameters
        ----------
        wavelength : float or ndarray
            Wavelength in µm

        Returns
        -------
        attenuation : float or ndarray
            Rayleigh + Mie + molecular absorption, in km^-1
        """
        return (self.rayleigh_scattering(wavelength)
                + self.mie_scattering(wavelength)
                + self.molecular_absorption(wavelength))

    def rayleigh_scattering(self, wavelength):
        state = self.state
        return 0.02735 * np.power(wavelength, -4.08) * \
            (state.pressure / STANDARD_PRESSURE_HPA) * (STANDARD_TEMPERATURE / state.temperature)

    def mie_scattering(self, wavelength):
        state = self.state
        beta = KOSCHMIEDER_CONSTANT / state.visibility
        alpha = 1.2 * np.power(np.asarray(wavelength) / VISIBILITY_REFERENCE_WAVELENGTH_UM, -1.3)
        return beta * alpha * (state.aerosol_density / STANDARD_AEROSOL_DENSITY) * 3.5

    def molecular_absorption(self, wavelength):
        return self.water_vapor_absorption(wavelength) + self.co2_absorption(wavelength)

    def water_vapor_absorption(self, wavelength):
        """Water vapour absorption; strongest in the 6.3 µm band."""
        wavelength = np.asarray(wavelength, dtype=float)
        density = water_vapor_density(self.state)

        coefficient = np.where(
            (wavelength >= 5.5) & (wavelength <= 7.5), 2.4,
            np.where((wavelength >= 2.5) & (wavelength <= 3.5), 1.8, 0.6),
        )
        return coefficient * density

    def co2_absorption(self, wavelength):
        """CO2 absorption; strongest in the 4.3 µm and 15 µm bands."""
        wavelength = np.asarray(wavelength, dtype=float)
        scale = self.state.co2_concentration / CO2_REFERENCE_PPM

        coefficient = np.where(
            (wavelength >= 4.2) & (wavelength <= 4.4), 1.2,
            np.where((wavelength >= 14.0) & (wavelength <= 16.0), 1.0, 0.16),
        )
        return coefficient * scale

    def weather_effect(self, distance_km: float) -> float:
        rain = self.rain_attenuation(distance_km, self.wavelength) * 1.2
        snow = self.snow_attenuation(distance_km, self.wavelength) * 1.2
        fog = self.fog_attenuation(distance_km) * 1.5
        dust = self.dust_attenuation(distance_km) * 1.5
        return float(np.exp(-2.0 * (rain + snow + fog + dust)))

    def fog_attenuation(self, distance_km: float) -> float:
        if not self.state.is_foggy:
            return 0.0
        return fog_extinction(self.state.visibility, self.wavelength) * distance_km


def spectral_weight(wavelength):
    """Weight of a sample: 0.8 in 3-5 µm, 0.6 in 8-12 µm, 0.2 elsewhere."""
    wavelength = np.asarray(wavelength, dtype=float)
    return np.where(
        (wavelength >= 3.0) & (wavelength <= 5.0), 0.8,
        np.where((wavelength >= 8.0) & (wavelength <= 12.0), 0.6, 0.2),
    )
