"""
Laser transmittance model (1.06 µm Nd:YAG).

The clear-air loss follows a power law of the standard atmospheric
transmittance scaled by molecular, aerosol and visibility factors:

    T = 0.975^(F * L) * exp(-(A_rain + A_snow + A_fog + A_dust))

with F = 1.2 * molecular * aerosol * visibility factor and L in km.
"""

import logging

import numpy as np

from air_transmission.attenuation.common import (
    PowerLawCoefficients,
    NO_ATTENUATION,
    fog_extinction,
    smoke_screen_transmittance,
)
from air_transmission.bands.base import TransmittanceModel, check_distance, clip_transmittance
from air_transmission.turbulence.cn2_profiles import hufnagel_valley_cn2
from air_transmission.turbulence.propagation import turbulence_effect
from air_transmission.utils.constants import (
    LASER_WAVELENGTH_UM,
    STANDARD_PRESSURE_HPA,
    STANDARD_TEMPERATURE,
    STANDARD_TRANSMITTANCE,
    KOSCHMIEDER_CONSTANT,
    VISIBILITY_REFERENCE_WAVELENGTH_UM,
)

logger = logging.getLogger(__name__)

# CO2 laser line, kept in the snow table for lookups at 10.6 µm
CO2_LASER_WAVELENGTH_UM = 10.6

# Assumed mean beam height and wind speed for the turbulence estimate
DEFAULT_BEAM_HEIGHT_M = 10.0
DEFAULT_WIND_SPEED_MS = 5.0

# Share of the transmittance that is immune to turbulence
TURBULENCE_FLOOR = 0.7

RAIN_COEFFICIENTS = PowerLawCoefficients(k=0.25, alpha=0.659)

# Snow coefficients by wavelength; the model itself only evaluates 1.06 µm
SNOW_COEFFICIENTS = {
    LASER_WAVELENGTH_UM: PowerLawCoefficients(k=0.56, alpha=0.57),
    CO2_LASER_WAVELENGTH_UM: PowerLawCoefficients(k=0.8, alpha=0.75),
}


class LaserTransmittanceModel(TransmittanceModel):
    """Transmittance of a 1.06 µm laser beam along a horizontal path.

    Example:
        >>> weather = WeatherCondition(WeatherType.CLEAR, 20, 45, 10)
        >>> LaserTransmittanceModel(weather).calculate_transmittance(1.0)  # doctest: +ELLIPSIS
        0.95...
    """

    band = "laser"
    wavelength = LASER_WAVELENGTH_UM

    def rain_coefficients(self, wavelength):
        return RAIN_COEFFICIENTS

    def snow_coefficients(self, wavelength):
        return SNOW_COEFFICIENTS.get(wavelength, NO_ATTENUATION)

    def calculate_transmittance(self, distance_km: float) -> float:
        distance_km = check_distance(distance_km)

        attenuation_factor = self.attenuation_factor()
        rain = self.rain_attenuation(distance_km, self.wavelength)
        snow = self.snow_attenuation(distance_km, self.wavelength)
        fog = self.fog_attenuation(distance_km)
        dust = self.dust_attenuation(distance_km)

        transmittance = STANDARD_TRANSMITTANCE ** (attenuation_factor * distance_km) * \
            np.exp(-(rain + snow + fog + dust))

        logger.debug(
            f"Laser {distance_km} km: factor={attenuation_factor:.4f}, rain={rain:.4f}, "
            f"snow={snow:.4f}, fog={fog:.4f}, dust={dust:.4f}, T={transmittance:.6f}"
        )

        return clip_transmittance(transmittance)

    def calculate_transmittance_with_turbulence(self, distance_km: float,
                                                beam_height_m: float = DEFAULT_BEAM_HEIGHT_M,
                                                wind_speed_ms: float = DEFAULT_WIND_SPEED_MS) -> float:
        """
        Transmittance including turbulence losses.

        Parameters
        ----------
        distance_km : float
            Path length in km
        beam_height_m : float, optional
            Mean beam height above ground in meters (default: 10 m)
        wind_speed_ms : float, optional
            Wind speed in m/s (default: 5 m/s)

        Returns
        -------
        transmittance : float
            T * (0.7 + 0.3 * effect), always within [0.7 * T, T]
        """
        transmittance = self.calculate_transmittance(distance_km)

        cn2 = hufnagel_valley_cn2(beam_height_m, wind_speed_ms)
        effect = turbulence_effect(distance_km * 1000.0, beam_height_m, wind_speed_ms, cn2)

        return transmittance * (TURBULENCE_FLOOR + (1 - TURBULENCE_FLOOR) * effect)

    def calculate_transmittance_with_smoke(self, distance_km: float,
                                           smoke_concentration: float,
                                           smoke_thickness_m: float) -> float:
        """Transmittance through the atmosphere and a smoke screen on the path."""
        transmittance = self.calculate_transmittance(distance_km)
        return transmittance * smoke_screen_transmittance(smoke_concentration, smoke_thickness_m)

    def molecular_factor(self) -> float:
        """Molecular scattering factor, 15% above the density ratio."""
        state = self.state
        return (state.pressure / STANDARD_PRESSURE_HPA) * \
            (STANDARD_TEMPERATURE / state.temperature) * 1.15

    def aerosol_exponent(self) -> float:
        """Kruse size-distribution exponent q for the current visibility."""
        vis = self.state.visibility
        if vis > 50:
            return 1.6
        if vis > 6:
            return 1.3
        return 0.585 * max(vis, 1.0) ** (1.0 / 3.0)

    def aerosol_factor(self) -> float:
        """Aerosol scattering factor, floored at 1."""
        state = self.state
        q = self.aerosol_exponent()

        factor = KOSCHMIEDER_CONSTANT / state.visibility * \
            (self.wavelength / VISIBILITY_REFERENCE_WAVELENGTH_UM) ** (-q) * 1.1

        if state.visibility < 5:
            factor *= 1 + (5 - state.visibility) / 5
        if state.is_dusty:
            factor *= 1.3

        return max(1.0, factor)

    def attenuation_factor(self) -> float:
        """Combined clear-air attenuation factor F."""
        return self.molecular_factor() * self.aerosol_factor() * self.visibility_factor() * 1.2

    def fog_attenuation(self, distance_km: float) -> float:
        if not self.state.is_foggy:
            return 0.0
        return fog_extinction(self.state.visibility, self.wavelength) * distance_km * 1.2
