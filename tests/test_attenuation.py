"""Tests for shared attenuation mechanisms and spectral banding."""

import numpy as np
import pytest

from air_transmission.attenuation import (
    PowerLawCoefficients,
    NO_ATTENUATION,
    aerosol_density,
    rain_attenuation,
    snow_attenuation,
    dust_attenuation,
    visibility_factor,
    fog_extinction,
    water_vapor_density,
    smoke_screen_transmittance,
    spectral_grid,
    weighted_band_attenuation,
)
from air_transmission.weather import WeatherType, WeatherCondition, AtmosphericState


def state_for(weather_type=WeatherType.CLEAR, visibility=10.0, precipitation=None,
              temperature=20.0, humidity=45.0):
    weather = WeatherCondition(weather_type, temperature, humidity, visibility, precipitation)
    return AtmosphericState.from_weather(weather)


class TestPrecipitation:
    """Tests for rain and snow power laws."""

    def test_rain_power_law(self):
        """Rain attenuation is K * R^alpha * L."""
        coefficients = PowerLawCoefficients(k=0.25, alpha=0.659)
        state = state_for(WeatherType.RAIN, visibility=2.5, precipitation=25.0)
        result = rain_attenuation(state, 2.0, coefficients)
        assert np.isclose(result, 0.25 * 25.0**0.659 * 2.0)

    def test_rain_zero_when_not_raining(self):
        """No rain attenuation in other weather types."""
        coefficients = PowerLawCoefficients(k=0.25, alpha=0.659)
        for weather_type in (WeatherType.CLEAR, WeatherType.SNOW, WeatherType.FOG):
            state = state_for(weather_type, precipitation=10.0)
            assert rain_attenuation(state, 1.0, coefficients) == 0.0

    def test_rain_zero_without_rate(self):
        """Rain with no precipitation rate does not attenuate."""
        state = state_for(WeatherType.RAIN)
        assert rain_attenuation(state, 1.0, PowerLawCoefficients(0.25, 0.659)) == 0.0

    def test_rain_increases_with_rate(self):
        """Heavier rain attenuates more."""
        coefficients = PowerLawCoefficients(k=0.926, alpha=0.9551)
        light = rain_attenuation(state_for(WeatherType.RAIN, 5.0, 2.5), 1.0, coefficients)
        heavy = rain_attenuation(state_for(WeatherType.RAIN, 5.0, 25.0), 1.0, coefficients)
        assert heavy > light > 0

    def test_snow_power_law(self):
        """Snow attenuation is K * S^alpha * L."""
        coefficients = PowerLawCoefficients(k=0.365, alpha=0.88)
        state = state_for(WeatherType.SNOW, visibility=1.0, precipitation=5.0, temperature=-5.0)
        assert np.isclose(snow_attenuation(state, 1.5, coefficients), 0.365 * 5.0**0.88 * 1.5)

    def test_unknown_wavelength_coefficients(self):
        """Zero coefficients give zero attenuation."""
        state = state_for(WeatherType.SNOW, precipitation=5.0)
        assert snow_attenuation(state, 1.0, NO_ATTENUATION) == 0.0


class TestDustAndVisibility:
    """Tests for dust attenuation and the visibility factor."""

    def test_dust_attenuation(self):
        """Dust attenuation is (3.91 / V) * 1.5 * L."""
        state = state_for(WeatherType.DUST, visibility=0.5)
        assert np.isclose(dust_attenuation(state, 2.0), 3.91 / 0.5 * 1.5 * 2.0)

    def test_no_dust_in_clear_weather(self):
        """Dust attenuation is zero outside dust storms."""
        assert dust_attenuation(state_for(), 2.0) == 0.0

    @pytest.mark.parametrize("visibility,expected", [
        (23.0, 1.0),
        (50.0, 1.0),
        (10.0, (23 / 10) ** 0.25),
        (5.0, (23 / 5) ** 0.4),
        (1.0, 23.0 ** 0.4),
    ])
    def test_visibility_factor_branches(self, visibility, expected):
        """Visibility factor branches at 23 km and 5 km."""
        assert np.isclose(visibility_factor(state_for(visibility=visibility)), expected)

    def test_visibility_factor_dust(self):
        """Dust reduces the visibility factor by 10%."""
        clear = visibility_factor(state_for(visibility=1.0))
        dust = visibility_factor(state_for(WeatherType.DUST, visibility=1.0))
        assert np.isclose(dust, 0.9 * clear)

    def test_aerosol_density_decreases_with_visibility(self):
        """Clearer air holds fewer aerosols."""
        assert aerosol_density(5.0) > aerosol_density(23.0) > aerosol_density(50.0)


class TestFogAndWaterVapor:
    """Tests for fog extinction and water vapour density."""

    def test_fog_extinction_at_reference_wavelength(self):
        """At 0.55 um fog extinction reduces to Koschmieder 3.91 / V."""
        assert np.isclose(fog_extinction(1.0, 0.55), 3.91)

    def test_fog_extinction_wavelength_dependence(self):
        """Longer wavelengths are less attenuated by fog."""
        assert fog_extinction(1.0, 10.0) < fog_extinction(1.0, 1.06) < fog_extinction(1.0, 0.3)

    def test_water_vapor_density(self):
        """Water vapour density follows the Magnus formula."""
        state = state_for(temperature=20.0, humidity=50.0)
        e_s = 6.112 * np.exp(17.27 * 20.0 / (237.7 + 20.0))
        expected = 0.5 * e_s * 2.16679 / 293.15
        assert np.isclose(water_vapor_density(state), expected)

    def test_water_vapor_density_dry(self):
        """Dry air carries no water vapour."""
        assert water_vapor_density(state_for(humidity=0.0)) == 0.0

    def test_water_vapor_density_increases_with_humidity(self):
        """More humidity means more water vapour."""
        assert water_vapor_density(state_for(humidity=90.0)) > water_vapor_density(state_for(humidity=30.0))


class TestSmokeScreen:
    """Tests for smoke screen transmittance."""

    def test_beer_lambert(self):
        """Smoke transmittance is exp(-0.5 * c * t)."""
        assert smoke_screen_transmittance(0.5, 15.0) == np.exp(-0.5 * 0.5 * 15.0)

    @pytest.mark.parametrize("concentration,thickness", [
        (0.0, 15.0),
        (0.5, 0.0),
        (-1.0, 15.0),
        (0.5, -3.0),
    ])
    def test_no_smoke_is_transparent(self, concentration, thickness):
        """Non-positive concentration or thickness gives exactly 1."""
        assert smoke_screen_transmittance(concentration, thickness) == 1.0

    def test_smoke_in_unit_interval(self):
        """Smoke transmittance lies in (0, 1)."""
        for concentration in (0.01, 0.1, 1.0):
            value = smoke_screen_transmittance(concentration, 10.0)
            assert 0.0 < value < 1.0

    def test_smoke_decreases_with_thickness(self):
        """Thicker screens transmit less."""
        thin = smoke_screen_transmittance(0.2, 5.0)
        thick = smoke_screen_transmittance(0.2, 20.0)
        assert thick < thin


class TestSpectralBanding:
    """Tests for spectral sampling and weighted band attenuation."""

    def test_grid_lower_edges(self):
        """Samples are the lower edge of each sub-band."""
        grid = spectral_grid(3.0, 12.0, 100)
        assert len(grid) == 100
        assert np.isclose(grid[0], 3.0)
        assert np.isclose(grid[1] - grid[0], 0.09)
        assert grid[-1] < 12.0

    def test_grid_invalid_inputs(self):
        """Empty or inverted bands are rejected."""
        with pytest.raises(ValueError, match="n_bands"):
            spectral_grid(3.0, 12.0, 0)
        with pytest.raises(ValueError, match="greater"):
            spectral_grid(12.0, 3.0)

    def test_weighted_sum(self):
        """Band attenuation is the weighted sum without width scaling."""
        grid = spectral_grid(0.2, 0.4, 10)
        total = weighted_band_attenuation(grid, lambda wl: np.full_like(wl, 2.0),
                                          lambda wl: np.full_like(wl, 0.5))
        assert np.isclose(total, 10.0)
