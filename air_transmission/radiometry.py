"""
Received power for sensor power-budget calculations.

Two budgets are supported:

- Double path: a pulsed laser designator illuminates a Lambertian target
  and a seeker receives the reflected pulse.
- Single path: a seeker receives radiation emitted by the target.

The receiving aperture defaults to 10 cm² (0.001 m²). Receiver distance
enters the solid angle A / R² in the unit it is given in.
"""

import logging
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)

# Seeker receiving aperture [m²] (10 cm²)
DEFAULT_RECEIVER_AREA_M2 = 0.001


@dataclass
class ReceivedPowerBudget:
    """Intermediate and final values of a double-path power budget.

    Attributes:
        peak_power_w: Designator peak power [W]
        reflected_intensity_w_sr: Lambertian reflected intensity [W/sr]
        solid_angle_sr: Solid angle of the receiver seen from the target [sr]
        transmittance: Path transmittance used
        received_energy_j: Energy collected per pulse [J]
        received_power_w: Mean power over the pulse [W]
    """
    peak_power_w: float
    reflected_intensity_w_sr: float
    solid_angle_sr: float
    transmittance: float
    received_energy_j: float
    received_power_w: float


def _require_positive(**values):
    for name, value in values.items():
        if not value > 0:
            raise ValueError(f"{name} must be positive, got {value}")


def received_radiation(transmittance, laser_energy_j, pulse_width_ns,
                       target_distance_km, receiver_distance_km, target_reflectivity,
                       receiver_area_m2=DEFAULT_RECEIVER_AREA_M2):
    """
    Power received by a seeker from a laser-designated target.

    Parameters
    ----------
    transmittance : float
        Path transmittance (designator -> target -> receiver)
    laser_energy_j : float
        Pulse energy in J
    pulse_width_ns : float
        Pulse width in ns
    target_distance_km : float
        Designator-to-target distance in km (logged for the budget)
    receiver_distance_km : float
        Target-to-receiver distance in km
    target_reflectivity : float
        Target reflectivity (0-1)
    receiver_area_m2 : float, optional
        Receiving aperture in m² (default: 0.001)

    Returns
    -------
    budget : ReceivedPowerBudget
        Budget with the received power in ``received_power_w``

    Notes
    -----
        P_peak = E / tau
        I_refl = P_peak * rho / pi          (Lambertian target)
        Omega  = A / R^2
        E_rx   = I_refl * T * Omega * tau
    """
    _require_positive(pulse_width_ns=pulse_width_ns, receiver_distance_km=receiver_distance_km,
                      receiver_area_m2=receiver_area_m2)

    pulse_width_s = pulse_width_ns * 1e-9
    peak_power = laser_energy_j / pulse_width_s
    reflected_intensity = peak_power * target_reflectivity / np.pi
    solid_angle = receiver_area_m2 / receiver_distance_km**2
    received_energy = reflected_intensity * transmittance * solid_angle * pulse_width_s
    received_power = received_energy / pulse_width_s

    logger.info(
        f"Designator budget: E={laser_energy_j:.2f} J, tau={pulse_width_ns} ns, "
        f"P_peak={peak_power:.2e} W, target at {target_distance_km} km, "
        f"I_refl={reflected_intensity:.2e} W/sr, receiver at {receiver_distance_km} km, "
        f"T={transmittance:.4f}, E_rx={received_energy:.2e} J, P_rx={received_power:.2e} W"
    )

    return ReceivedPowerBudget(
        peak_power_w=peak_power,
        reflected_intensity_w_sr=reflected_intensity,
        solid_angle_sr=solid_angle,
        transmittance=transmittance,
        received_energy_j=received_energy,
        received_power_w=received_power,
    )


def received_radiation_single_path(transmittance, target_radiation_w_sr, receiver_distance_km,
                                   receiver_area_m2=DEFAULT_RECEIVER_AREA_M2):
    """Power received from a target of radiant intensity I: I * T * A / R²."""
    _require_positive(receiver_distance_km=receiver_distance_km, receiver_area_m2=receiver_area_m2)

    solid_angle = receiver_area_m2 / receiver_distance_km**2
    received_power = target_radiation_w_sr * transmittance * solid_angle

    logger.info(
        f"Single path budget: I={target_radiation_w_sr} W/sr, receiver at "
        f"{receiver_distance_km} km, T={transmittance:.4f}, P_rx={received_power:.2e} W"
    )
    return received_power
