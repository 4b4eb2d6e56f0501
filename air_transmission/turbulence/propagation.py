"""
Laser beam propagation through atmospheric turbulence.

This module provides the turbulence parameters used to degrade laser
transmittance on horizontal paths:

- Fried parameter (r0): Atmospheric coherence diameter
- Scintillation index: Intensity fluctuation variance
- Beam wander: Random beam displacement
- Coherence length, angle of arrival and isoplanatic angle diagnostics

All functions assume a constant Cn2 along the path (horizontal
propagation) and, unless a wave number is passed, the 1.06 µm laser
wavelength.

References
----------
- Andrews, L.C. & Phillips, R.L. (2005). Laser Beam Propagation through
  Random Media. SPIE Press.
- Fried, D.L. (1966). Optical resolution through a randomly inhomogeneous
  medium for very long and very short exposures. JOSA, 56(10), 1372-1379.
"""

import logging

import numpy as np

from air_transmission.utils.constants import LASER_WAVE_NUMBER

logger = logging.getLogger(__name__)

# Share of the composite turbulence loss applied to the beam
TURBULENCE_SCALING_FACTOR = 0.8


def fried_parameter(cn2, path_length_m, wave_number=LASER_WAVE_NUMBER):
    """
    Fried parameter for a horizontal path of constant Cn2.

    Parameters
    ----------
    cn2 : float or array_like
        Refractive index structure constant in m^(-2/3)
    path_length_m : float or array_like
        Path length in meters
    wave_number : float, optional
        Optical wave number 2*pi/lambda in rad/m (default: 1.06 µm)

    Returns
    -------
    r0 : float or ndarray
        Fried parameter in meters (inf for a zero-length path)

    Notes
    -----
        r0 = (0.423 * k^2 * Cn2 * L)^(-3/5)
    """
    k = wave_number
    L = np.asarray(path_length_m, dtype=float)
    with np.errstate(divide="ignore"):
        r0 = (0.423 * k**2 * cn2 * L)**(-3/5)
    return _scalar_or_array(r0)


def scintillation_index(cn2, path_length_m, wave_number=LASER_WAVE_NUMBER):
    """
    Scintillation index (plane-wave Rytov variance).

    Parameters
    ----------
    cn2 : float or array_like
        Refractive index structure constant in m^(-2/3)
    path_length_m : float or array_like
        Path length in meters
    wave_number : float, optional
        Optical wave number in rad/m (default: 1.06 µm)

    Returns
    -------
    sigma_i2 : float or ndarray
        Scintillation index (dimensionless)

    Notes
    -----
        sigma_I^2 = 1.23 * Cn2 * k^(7/6) * L^(11/6)

    Weak fluctuations: sigma_I^2 < 0.3. No saturation correction is applied.
    """
    k = wave_number
    L = path_length_m
    return 1.23 * cn2 * k**(7/6) * L**(11/6)


def beam_wander(cn2, path_length_m, height_m):
    """
    Beam wander of a beam at height h.

    Parameters
    ----------
    cn2 : float or array_like
        Refractive index structure constant in m^(-2/3)
    path_length_m : float or array_like
        Path length in meters
    height_m : float or array_like
        Beam height above ground in meters

    Returns
    -------
    bw : float or ndarray
        Beam wander in radians

    Notes
    -----
        bw = 2.87 * (Cn2 * L * h^(5/3))^(1/3)
    """
    return 2.87 * (cn2 * path_length_m * np.power(height_m, 5/3))**(1/3)


def coherence_length(cn2, path_length_m, wave_number=LASER_WAVE_NUMBER):
    """
    Spherical-wave coherence length.

    Notes
    -----
        rho0 = (1.46 * k^2 * Cn2 * L)^(-3/5)

    Infinite for a zero-length path.
    """
    k = wave_number
    L = np.asarray(path_length_m, dtype=float)
    with np.errstate(divide="ignore"):
        rho0 = (1.46 * k**2 * cn2 * L)**(-3/5)
    return _scalar_or_array(rho0)


def angle_of_arrival(cn2, path_length_m, aperture_diameter_m):
    """
    Angle-of-arrival fluctuation for a receiving aperture.

    Parameters
    ----------
    cn2 : float or array_like
        Refractive index structure constant in m^(-2/3)
    path_length_m : float or array_like
        Path length in meters
    aperture_diameter_m : float
        Receiver aperture diameter in meters

    Returns
    -------
    alpha : float or ndarray
        Angle of arrival in radians

    Notes
    -----
        alpha = 2.91 * (Cn2 * L / D^(1/3))^0.6
    """
    if np.any(np.asarray(aperture_diameter_m) <= 0):
        raise ValueError("aperture_diameter_m must be positive")
    return 2.91 * (cn2 * path_length_m / aperture_diameter_m**(1/3))**0.6


def isoplanatic_angle(cn2, path_length_m, wave_number=LASER_WAVE_NUMBER):
    """
    Isoplanatic angle for a horizontal path.

    Notes
    -----
        theta0 = 0.314 * (Cn2 * k^2 * L)^(-3/5)

    Infinite for a zero-length path.
    """
    k = wave_number
    L = np.asarray(path_length_m, dtype=float)
    with np.errstate(divide="ignore"):
        theta0 = 0.314 * (cn2 * k**2 * L)**(-3/5)
    return _scalar_or_array(theta0)


def turbulence_effect(path_length_m, height_m, wind_speed_ms, cn2):
    """
    Composite turbulence multiplier for laser transmittance.

    Parameters
    ----------
    path_length_m : float or array_like
        Path length in meters
    height_m : float
        Beam height above ground in meters
    wind_speed_ms : float
        Wind speed in m/s (carried by the Cn2 estimate; kept for logging)
    cn2 : float
        Refractive index structure constant in m^(-2/3)

    Returns
    -------
    effect : float or ndarray
        Value in [0.2, 1], where 1 means no turbulence loss

    Notes
    -----
    The composite loss combines scintillation and beam wander:

        e = exp(-sigma_I^2) * (1 - exp(-r0 / bw))

    and is scaled so that at most 80% of the beam is lost:

        effect = 1 - 0.8 * (1 - e)

    A zero-length path returns 1.

    Examples
    --------
    >>> from air_transmission.turbulence import hufnagel_valley_cn2
    >>> cn2 = hufnagel_valley_cn2(10, 5)
    >>> effect = turbulence_effect(1000, 10, 5, cn2)
    """
    L = np.asarray(path_length_m, dtype=float)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        r0 = fried_parameter(cn2, L)
        sigma_i2 = scintillation_index(cn2, L)
        bw = beam_wander(cn2, L, height_m)

        composite = np.exp(-sigma_i2) * (1 - np.exp(-np.divide(r0, bw)))
        effect = 1 - TURBULENCE_SCALING_FACTOR * (1 - composite)

    effect = np.where(L > 0, effect, 1.0)

    logger.debug(
        f"Turbulence: L={path_length_m} m, h={height_m} m, wind={wind_speed_ms} m/s, "
        f"Cn2={cn2:.3e}, effect={effect}"
    )

    return _scalar_or_array(effect)


def _scalar_or_array(value):
    """Plain float for scalar results, ndarray otherwise."""
    if np.ndim(value) == 0:
        return float(value)
    return np.asarray(value)
