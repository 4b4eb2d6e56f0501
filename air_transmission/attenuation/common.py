"""
Attenuation mechanisms shared by all wave bands.

Every function here is pure: the atmospheric state is passed in
explicitly and nothing is cached. Band models supply their own
precipitation coefficients and combine the terms with their own policy.

Theory
------
Precipitation uses the empirical power law

    A = K * R^alpha * L

where R is the precipitation rate (mm/h) and L the path length (km).
Visibility-based extinction uses Koschmieder's relation

    beta = 3.91 / V

with V the meteorological visibility (km), scaled to other wavelengths
with the Kim/Kruse size-distribution exponent q.

References
----------
- ITU-R P.838-3 (2005). Specific attenuation model for rain for use in
  prediction methods.
- Kim, I.I., McArthur, B. & Korevaar, E. (2001). Comparison of laser beam
  propagation at 785 nm and 1550 nm in fog and haze for optical wireless
  communications. Proc. SPIE 4214.
- Alduchov, O.A. & Eskridge, R.E. (1996). Improved Magnus form
  approximation of saturation vapor pressure. J. Appl. Meteor., 35.
"""

import logging
from dataclasses import dataclass

import numpy as np

from air_transmission.utils.constants import (
    STANDARD_VISIBILITY_KM,
    STANDARD_AEROSOL_DENSITY,
    MIN_AEROSOL_VISIBILITY_KM,
    KOSCHMIEDER_CONSTANT,
    VISIBILITY_REFERENCE_WAVELENGTH_UM,
    MAGNUS_E0_HPA,
    MAGNUS_A,
    MAGNUS_B,
    VAPOR_DENSITY_FACTOR,
    CELSIUS_TO_KELVIN,
)

logger = logging.getLogger(__name__)

# Extra extinction of airborne dust relative to the visibility estimate
DUST_FACTOR = 1.5

# Mass extinction coefficient of a generic smoke screen [m²/g]
SMOKE_EXTINCTION_COEFFICIENT = 0.5


@dataclass(frozen=True)
class PowerLawCoefficients:
    """Coefficients of the precipitation power law A = K * R^alpha.

    Attributes:
        k: Multiplicative coefficient K
        alpha: Rate exponent alpha
    """
    k: float
    alpha: float


# Coefficients for wavelengths a band has no table entry for
NO_ATTENUATION = PowerLawCoefficients(k=0.0, alpha=0.0)


def aerosol_density(visibility_km):
    """
    Estimate aerosol number density from visibility.

    Parameters
    ----------
    visibility_km : float
        Meteorological visibility in km

    Returns
    -------
    density : float
        Aerosol number density in particles/cm³

    Notes
    -----
    density = 100 * (23 / max(V, 0.1))^0.75

    The 0.1 km floor keeps the scaling finite for very low visibility.
    """
    return STANDARD_AEROSOL_DENSITY * (
        STANDARD_VISIBILITY_KM / max(visibility_km, MIN_AEROSOL_VISIBILITY_KM)
    ) ** 0.75


def rain_attenuation(state, path_length_km, coefficients):
    """
    Rain attenuation along a path.

    Parameters
    ----------
    state : AtmosphericState
        Derived atmospheric state
    path_length_km : float
        Path length in km
    coefficients : PowerLawCoefficients
        Band-specific K and alpha for the wavelength of interest

    Returns
    -------
    attenuation : float
        Optical depth contribution of rain (0 when it is not raining)
    """
    if not state.is_raining or state.rain_rate <= 0:
        return 0.0

    specific = coefficients.k * state.rain_rate ** coefficients.alpha
    return specific * path_length_km


def snow_attenuation(state, path_length_km, coefficients):
    """
    Snow attenuation along a path.

    Same power law as rain, driven by the snowfall rate (water
    equivalent, mm/h). Returns 0 when it is not snowing.
    """
    if not state.is_snowing or state.snow_rate <= 0:
        return 0.0

    specific = coefficients.k * state.snow_rate ** coefficients.alpha
    return specific * path_length_km


def dust_attenuation(state, path_length_km):
    """Dust attenuation: (3.91 / V) * 1.5 * L, or 0 outside dust storms."""
    if not state.is_dusty:
        return 0.0

    beta = (KOSCHMIEDER_CONSTANT / state.visibility) * DUST_FACTOR
    return beta * path_length_km


def visibility_factor(state):
    """
    Visibility scaling of the clear-air attenuation.

    Parameters
    ----------
    state : AtmosphericState
        Derived atmospheric state

    Returns
    -------
    factor : float
        1 at or above the standard 23 km visibility, growing as
        (23/V)^0.25 for 5 < V < 23 and (23/V)^0.4 for V <= 5;
        reduced by 10% in dust
    """
    vis = state.visibility
    if vis >= STANDARD_VISIBILITY_KM:
        factor = 1.0
    elif vis > 5:
        factor = (STANDARD_VISIBILITY_KM / vis) ** 0.25
    else:
        factor = (STANDARD_VISIBILITY_KM / vis) ** 0.4

    if state.is_dusty:
        factor *= 0.9

    return factor


def fog_size_exponent(visibility_km):
    """Kim/Kruse exponent q = 0.585 * V^(1/3) used for fog extinction."""
    return 0.585 * visibility_km ** (1.0 / 3.0)


def fog_extinction(visibility_km, wavelength_um):
    """
    Fog extinction coefficient at a given wavelength.

    Parameters
    ----------
    visibility_km : float
        Meteorological visibility in km
    wavelength_um : float
        Wavelength in micrometers

    Returns
    -------
    beta : float
        Extinction coefficient in km^-1

    Notes
    -----
    beta = (3.91 / V) * (wavelength / 0.55)^(-q),  q = 0.585 * V^(1/3)

    Callers scale beta by their own band factor and path length.
    """
    q = fog_size_exponent(visibility_km)
    return (KOSCHMIEDER_CONSTANT / visibility_km) * \
        (wavelength_um / VISIBILITY_REFERENCE_WAVELENGTH_UM) ** (-q)


def water_vapor_density(state, magnus_b=MAGNUS_B):
    """
    Water vapour density from temperature and relative humidity.

    Parameters
    ----------
    state : AtmosphericState
        Derived atmospheric state (temperature in K, humidity in %)
    magnus_b : float, optional
        Magnus denominator coefficient in °C (default: 237.7)

    Returns
    -------
    rho : float
        Water vapour density in g/m³ (model units)

    Notes
    -----
    Saturation vapour pressure (Magnus):

        e_s = 6.112 * exp(17.27 * T_C / (b + T_C))   [hPa]

    Actual vapour pressure e = RH/100 * e_s, and

        rho = e * 2.16679 / T_K
    """
    t_celsius = state.temperature - CELSIUS_TO_KELVIN
    saturation_pressure = MAGNUS_E0_HPA * np.exp(
        MAGNUS_A * t_celsius / (magnus_b + t_celsius)
    )
    vapor_pressure = (state.humidity / 100.0) * saturation_pressure
    return float(vapor_pressure * VAPOR_DENSITY_FACTOR / state.temperature)


def smoke_screen_transmittance(concentration_g_m3, thickness_m):
    """
    Transmittance through a smoke screen (Beer-Lambert law).

    Parameters
    ----------
    concentration_g_m3 : float
        Smoke mass concentration in g/m³
    thickness_m : float
        Smoke screen thickness along the path in m

    Returns
    -------
    transmittance : float
        Value in (0, 1]; exactly 1 when either argument is <= 0

    Notes
    -----
    T = exp(-0.5 * c * t), with a fixed mass extinction coefficient
    of 0.5 m²/g.

    Examples
    --------
    >>> smoke_screen_transmittance(0.5, 15)  # doctest: +ELLIPSIS
    0.023...
    """
    if concentration_g_m3 <= 0 or thickness_m <= 0:
        return 1.0

    transmittance = float(np.exp(
        -SMOKE_EXTINCTION_COEFFICIENT * concentration_g_m3 * thickness_m
    ))

    logger.debug(
        f"Smoke screen: concentration={concentration_g_m3:.2f} g/m³, "
        f"thickness={thickness_m:.2f} m, transmittance={transmittance:.4f}"
    )

    return transmittance
