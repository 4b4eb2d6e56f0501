"""
Physical constants and reference values for transmittance calculations.

Units follow the conventions used by the band models: pressure in hPa,
temperature in Kelvin, visibility and path length in km, wavelengths in
micrometers (millimeters for the millimeter-wave band).
"""

import numpy as np

# =============================================================================
# Reference Atmosphere
# =============================================================================

# Standard sea-level pressure [hPa]
STANDARD_PRESSURE_HPA = 1013.25

# Standard sea-level temperature [K] (15°C)
STANDARD_TEMPERATURE = 288.15

# Reference temperature for absorption line strengths [K] (20°C)
REFERENCE_TEMPERATURE = 293.15

# Offset between Celsius and Kelvin
CELSIUS_TO_KELVIN = 273.15

# Absolute zero [°C]
ABSOLUTE_ZERO_CELSIUS = -273.15

# =============================================================================
# Visibility and Aerosol Reference Values
# =============================================================================

# Standard (clear-air) meteorological visibility [km]
STANDARD_VISIBILITY_KM = 23.0

# Aerosol number density at standard visibility [particles/cm³]
STANDARD_AEROSOL_DENSITY = 100.0

# Lower bound on visibility used in the aerosol density scaling [km]
MIN_AEROSOL_VISIBILITY_KM = 0.1

# Koschmieder constant: extinction [km^-1] = 3.91 / visibility [km]
# (2% contrast threshold)
KOSCHMIEDER_CONSTANT = 3.91

# Wavelength at which meteorological visibility is defined [µm]
VISIBILITY_REFERENCE_WAVELENGTH_UM = 0.55

# Per-unit-distance transmittance of the standard clear atmosphere
STANDARD_TRANSMITTANCE = 0.975

# Default atmospheric CO2 concentration [ppm]
DEFAULT_CO2_PPM = 415.0

# =============================================================================
# Water Vapour (Magnus formula)
# =============================================================================

# Saturation vapour pressure at 0°C [hPa]
MAGNUS_E0_HPA = 6.112

# Magnus coefficient a (over water)
MAGNUS_A = 17.27

# Magnus coefficient b [°C]
MAGNUS_B = 237.7

# Conversion e[hPa] / T[K] -> vapour density [g/m³] as used by the models
VAPOR_DENSITY_FACTOR = 2.16679

# =============================================================================
# Wave Bands
# =============================================================================

# Nd:YAG laser wavelength [µm]
LASER_WAVELENGTH_UM = 1.06

# Principal infrared wavelength [µm]
INFRARED_WAVELENGTH_UM = 10.0

# 94 GHz millimeter-wave wavelength [mm]
MILLIMETER_WAVE_WAVELENGTH_MM = 3.19

# Principal ultraviolet wavelength [µm] (XeCl excimer line)
ULTRAVIOLET_WAVELENGTH_UM = 0.308

# Wave number of the 1.06 µm laser [rad/m]
LASER_WAVE_NUMBER = 2 * np.pi / 1.06e-6
