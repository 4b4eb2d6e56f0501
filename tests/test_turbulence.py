"""Tests for turbulence estimates and propagation diagnostics."""

import numpy as np
import pytest

from air_transmission.turbulence import (
    hufnagel_valley_cn2,
    fried_parameter,
    scintillation_index,
    beam_wander,
    coherence_length,
    angle_of_arrival,
    isoplanatic_angle,
    turbulence_effect,
)
from air_transmission.utils.constants import LASER_WAVE_NUMBER


@pytest.fixture
def cn2():
    return hufnagel_valley_cn2(10.0, 5.0)


class TestCn2Profile:
    """Tests for the modified Hufnagel-Valley profile."""

    def test_near_ground_value(self, cn2):
        """At 10 m the free-atmosphere term dominates."""
        assert isinstance(cn2, float)
        assert np.isclose(cn2, 2.7e-15 * np.exp(-10.0 / 1500.0), rtol=1e-6)

    def test_decreases_with_height(self):
        """Turbulence weakens with height near the ground."""
        assert hufnagel_valley_cn2(1000.0, 5.0) < hufnagel_valley_cn2(10.0, 5.0)

    def test_array_input(self):
        """Height arrays give an array profile."""
        heights = np.array([0.0, 10.0, 100.0, 1000.0])
        profile = hufnagel_valley_cn2(heights, 5.0)
        assert profile.shape == heights.shape
        assert np.all(profile > 0)

    def test_wind_raises_high_altitude_term(self):
        """Wind only matters through the high-altitude term."""
        calm = hufnagel_valley_cn2(10000.0, 5.0)
        windy = hufnagel_valley_cn2(10000.0, 30.0)
        assert windy > calm


class TestPropagationParameters:
    """Tests for the individual turbulence parameters."""

    def test_fried_parameter(self, cn2):
        """r0 = (0.423 k^2 Cn2 L)^(-3/5)."""
        expected = (0.423 * LASER_WAVE_NUMBER**2 * cn2 * 1000.0) ** (-0.6)
        assert np.isclose(fried_parameter(cn2, 1000.0), expected)

    def test_fried_parameter_decreases_with_distance(self, cn2):
        """Longer paths have a smaller coherence diameter."""
        assert fried_parameter(cn2, 5000.0) < fried_parameter(cn2, 1000.0)

    def test_scintillation_index(self, cn2):
        """sigma_I^2 = 1.23 Cn2 k^(7/6) L^(11/6), weak at 1 km."""
        sigma = scintillation_index(cn2, 1000.0)
        assert np.isclose(sigma, 1.23 * cn2 * LASER_WAVE_NUMBER**(7 / 6) * 1000.0**(11 / 6))
        assert 0 < sigma < 0.3

    def test_beam_wander_grows(self, cn2):
        """Beam wander grows with distance and height."""
        assert beam_wander(cn2, 5000.0, 10.0) > beam_wander(cn2, 1000.0, 10.0) > 0
        assert beam_wander(cn2, 1000.0, 20.0) > beam_wander(cn2, 1000.0, 10.0)

    def test_coherence_length_below_fried(self, cn2):
        """Spherical-wave coherence length is smaller than r0."""
        assert coherence_length(cn2, 1000.0) < fried_parameter(cn2, 1000.0)

    def test_angle_of_arrival(self, cn2):
        """Larger apertures average out the angle of arrival."""
        small = angle_of_arrival(cn2, 1000.0, 0.05)
        large = angle_of_arrival(cn2, 1000.0, 0.5)
        assert large < small

    @pytest.mark.parametrize("diameter", [0.0, -0.1])
    def test_angle_of_arrival_invalid_aperture(self, cn2, diameter):
        """Non-positive apertures are rejected."""
        with pytest.raises(ValueError, match="aperture"):
            angle_of_arrival(cn2, 1000.0, diameter)

    def test_isoplanatic_angle(self, cn2):
        """theta0 = 0.314 (Cn2 k^2 L)^(-3/5)."""
        expected = 0.314 * (cn2 * LASER_WAVE_NUMBER**2 * 1000.0) ** (-0.6)
        assert np.isclose(isoplanatic_angle(cn2, 1000.0), expected)

    @pytest.mark.parametrize("diagnostic", [fried_parameter, coherence_length, isoplanatic_angle])
    def test_zero_path_is_infinite(self, cn2, diagnostic):
        """A zero-length path gives an unbounded scalar instead of an error."""
        value = diagnostic(cn2, 0.0)
        assert isinstance(value, float)
        assert np.isinf(value)

    @pytest.mark.parametrize("diagnostic", [fried_parameter, coherence_length, isoplanatic_angle])
    def test_path_array(self, cn2, diagnostic):
        """Path arrays give element-wise values, infinite at zero."""
        values = diagnostic(cn2, np.array([0.0, 1000.0, 5000.0]))
        assert isinstance(values, np.ndarray)
        assert np.isinf(values[0])
        assert np.isclose(values[1], diagnostic(cn2, 1000.0))
        assert values[2] < values[1]


class TestTurbulenceEffect:
    """Tests for the composite turbulence multiplier."""

    @pytest.mark.parametrize("path_length", [100.0, 1000.0, 5000.0, 10000.0, 50000.0])
    def test_bounds(self, cn2, path_length):
        """The effect stays within [0.2, 1]."""
        effect = turbulence_effect(path_length, 10.0, 5.0, cn2)
        assert 0.2 - 1e-12 <= effect <= 1.0

    def test_zero_path(self, cn2):
        """No turbulence loss on a zero-length path."""
        assert turbulence_effect(0.0, 10.0, 5.0, cn2) == 1.0

    def test_one_kilometre(self, cn2):
        """At 1 km scintillation dominates: effect = 1 - 0.8 (1 - exp(-sigma_I^2))."""
        sigma = scintillation_index(cn2, 1000.0)
        effect = turbulence_effect(1000.0, 10.0, 5.0, cn2)
        assert np.isclose(effect, 1 - 0.8 * (1 - np.exp(-sigma)), rtol=1e-6)

    def test_decreases_with_distance(self, cn2):
        """Longer paths lose more to turbulence."""
        effects = turbulence_effect(np.array([100.0, 1000.0, 10000.0]), 10.0, 5.0, cn2)
        assert np.all(np.diff(effects) < 0)

    def test_array_with_zero(self, cn2):
        """Zero entries in a path array map to 1."""
        effects = turbulence_effect(np.array([0.0, 1000.0]), 10.0, 5.0, cn2)
        assert effects[0] == 1.0
        assert effects[1] < 1.0
