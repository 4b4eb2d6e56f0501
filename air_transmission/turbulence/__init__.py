"""
Atmospheric Turbulence Module
=============================

Optical turbulence effects on near-ground laser paths:

- Modified Hufnagel-Valley Cn2 estimate from beam height and wind speed
- Fried parameter, scintillation index and beam wander
- Composite turbulence multiplier used by the laser model
- Coherence length, angle of arrival and isoplanatic angle diagnostics

Key Parameters
--------------
Cn2 : Refractive index structure constant (m^(-2/3))
    Characterizes the strength of optical turbulence
r0 : Fried parameter (m)
    Atmospheric coherence diameter - larger = less turbulence
sigma_I^2 : Scintillation index (dimensionless)
    Normalized variance of intensity fluctuations
theta0 : Isoplanatic angle (rad)
    Angular extent over which the wavefront distortion is correlated

References
----------
- Andrews, L.C. & Phillips, R.L. (2005). Laser Beam Propagation through
  Random Media. SPIE Press.
- Hufnagel, R.E. (1974). Variations of atmospheric turbulence. OSA
  Topical Meeting on Optical Propagation through Turbulence.
"""

from air_transmission.turbulence.cn2_profiles import hufnagel_valley_cn2
from air_transmission.turbulence.propagation import (
    TURBULENCE_SCALING_FACTOR,
    fried_parameter,
    scintillation_index,
    beam_wander,
    coherence_length,
    angle_of_arrival,
    isoplanatic_angle,
    turbulence_effect,
)

__all__ = [
    "hufnagel_valley_cn2",
    "TURBULENCE_SCALING_FACTOR",
    "fried_parameter",
    "scintillation_index",
    "beam_wander",
    "coherence_length",
    "angle_of_arrival",
    "isoplanatic_angle",
    "turbulence_effect",
]
