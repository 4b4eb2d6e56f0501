"""
Spectral banding for broadband transmittance.

A band [lambda_min, lambda_max] is split into N equal sub-bands and each
sub-band is represented by its lower edge. The band attenuation is the
weighted sum of the per-sample attenuation coefficients. The sum is not
multiplied by the sub-band width: the spectral weights already carry the
band's normalisation.
"""

import numpy as np

# Number of sub-bands used by the broadband models
DEFAULT_SPECTRAL_BANDS = 100


def spectral_grid(wavelength_min, wavelength_max, n_bands=DEFAULT_SPECTRAL_BANDS):
    """
    Sample wavelengths for spectral banding.

    Parameters
    ----------
    wavelength_min : float
        Lower band edge
    wavelength_max : float
        Upper band edge (excluded)
    n_bands : int, optional
        Number of sub-bands (default: 100)

    Returns
    -------
    wavelengths : ndarray
        Lower edge of each sub-band, lambda_i = min + i * step
    """
    if n_bands < 1:
        raise ValueError(f"n_bands must be at least 1, got {n_bands}")
    if wavelength_max <= wavelength_min:
        raise ValueError("wavelength_max must be greater than wavelength_min")

    step = (wavelength_max - wavelength_min) / n_bands
    return wavelength_min + np.arange(n_bands) * step


def weighted_band_attenuation(wavelengths, attenuation, weights):
    """
    Weighted sum of per-sample attenuation coefficients.

    Parameters
    ----------
    wavelengths : ndarray
        Sample wavelengths from spectral_grid()
    attenuation : callable
        attenuation(wavelengths) -> ndarray of coefficients in km^-1
    weights : callable
        weights(wavelengths) -> ndarray of spectral weights

    Returns
    -------
    total : float
        sum_i attenuation(lambda_i) * weight(lambda_i), in km^-1
    """
    wavelengths = np.asarray(wavelengths, dtype=float)
    return float(np.sum(attenuation(wavelengths) * weights(wavelengths)))
