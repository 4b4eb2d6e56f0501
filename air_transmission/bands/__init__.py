"""
Wave-Band Transmittance Models
==============================

One model per wave band, each built from a WeatherCondition and
exposing ``calculate_transmittance(distance_km)``.

Models
------
LaserTransmittanceModel
    1.06 µm laser; power law of the standard transmittance, with
    turbulence and smoke-screen variants
InfraredTransmittanceModel
    3-12 µm broadband, 100-sample spectral banding
MillimeterWaveTransmittanceModel
    3.19 mm (94 GHz), sum of specific attenuations
UltravioletTransmittanceModel
    0.2-0.4 µm broadband, 100-sample spectral banding
"""

from air_transmission.bands.base import TransmittanceModel, check_distance, clip_transmittance
from air_transmission.bands.laser import LaserTransmittanceModel
from air_transmission.bands.infrared import InfraredTransmittanceModel
from air_transmission.bands.millimeter_wave import MillimeterWaveTransmittanceModel
from air_transmission.bands.ultraviolet import UltravioletTransmittanceModel

__all__ = [
    "TransmittanceModel",
    "check_distance",
    "clip_transmittance",
    "LaserTransmittanceModel",
    "InfraredTransmittanceModel",
    "MillimeterWaveTransmittanceModel",
    "UltravioletTransmittanceModel",
]
