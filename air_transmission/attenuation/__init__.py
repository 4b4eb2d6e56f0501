"""
Attenuation Mechanisms
======================

Shared, band-independent attenuation formulas and the spectral banding
scheme used by the broadband (infrared and ultraviolet) models.

Mechanisms
----------
- Rain and snow (empirical K * R^alpha power law)
- Dust (visibility-based extinction)
- Visibility scaling of clear-air attenuation
- Aerosol density from visibility
- Fog extinction (Kim/Kruse wavelength scaling)
- Water vapour density (Magnus formula)
- Smoke screens (Beer-Lambert law)
"""

from air_transmission.attenuation.common import (
    PowerLawCoefficients,
    NO_ATTENUATION,
    aerosol_density,
    rain_attenuation,
    snow_attenuation,
    dust_attenuation,
    visibility_factor,
    fog_size_exponent,
    fog_extinction,
    water_vapor_density,
    smoke_screen_transmittance,
)
from air_transmission.attenuation.spectral import (
    DEFAULT_SPECTRAL_BANDS,
    spectral_grid,
    weighted_band_attenuation,
)

__all__ = [
    "PowerLawCoefficients",
    "NO_ATTENUATION",
    "aerosol_density",
    "rain_attenuation",
    "snow_attenuation",
    "dust_attenuation",
    "visibility_factor",
    "fog_size_exponent",
    "fog_extinction",
    "water_vapor_density",
    "smoke_screen_transmittance",
    "DEFAULT_SPECTRAL_BANDS",
    "spectral_grid",
    "weighted_band_attenuation",
]
