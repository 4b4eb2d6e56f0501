"""
Cn2 (refractive index structure constant) near the ground.

Typical Cn2 values:
- Strong turbulence (near surface, midday): 10^-13 m^(-2/3)
- Moderate turbulence: 10^-15 m^(-2/3)
- Weak turbulence (high altitude): 10^-17 m^(-2/3)

References
----------
- Hufnagel, R.E. (1974). Variations of atmospheric turbulence.
- Valley, G.C. (1980). Isoplanatic degradation of tilt correction.
"""

import numpy as np

# Tropopause term amplitude, one order above the published HV value
HV_TROPOPAUSE_AMPLITUDE = 1.7e-13

# Free-atmosphere term amplitude
HV_FREE_ATMOSPHERE_AMPLITUDE = 2.7e-15


def hufnagel_valley_cn2(height_m, wind_speed_ms):
    """
    Modified Hufnagel-Valley Cn2 model for low-altitude laser paths.

    Parameters
    ----------
    height_m : float or array_like
        Beam height above ground in meters
    wind_speed_ms : float
        Wind speed in m/s

    Returns
    -------
    cn2 : float or ndarray
        Refractive index structure constant in m^(-2/3)

    Notes
    -----
    The formula is:

        Cn2(h) = 1.7e-13 * (W/27)^2 * (10^-5 * h)^10 * exp(-h/1000)
               + 2.7e-15 * exp(-h/1500)

    Both amplitudes are raised by an order of magnitude over the HV 5/7
    profile to represent the strong turbulence of near-ground paths. No
    separate boundary-layer term is included.

    Examples
    --------
    >>> cn2 = hufnagel_valley_cn2(10, 5)  # 10 m beam, 5 m/s wind
    >>> print(f"Cn2 = {cn2:.2e} m^(-2/3)")
    Cn2 = 2.68e-15 m^(-2/3)
    """
    h = np.asarray(height_m, dtype=float)

    # Tropopause/jet stream term
    term1 = HV_TROPOPAUSE_AMPLITUDE * (wind_speed_ms / 27.0)**2 * \
        (1e-5 * h)**10 * np.exp(-h / 1000.0)

    # Free atmosphere term
    term2 = HV_FREE_ATMOSPHERE_AMPLITUDE * np.exp(-h / 1500.0)

    cn2 = term1 + term2
    if cn2.ndim == 0:
        return float(cn2)
    return cn2
