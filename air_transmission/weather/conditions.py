"""
Weather conditions for a transmittance scenario.

A WeatherCondition is built once per scenario, validated on construction
and never mutated afterwards. The band models derive their atmospheric
state from it.
"""

import math
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Optional, Union

from air_transmission.utils.constants import ABSOLUTE_ZERO_CELSIUS, DEFAULT_CO2_PPM


class WeatherValidationError(ValueError):
    """Raised when a weather condition is physically meaningless."""
    pass


class WeatherType(Enum):
    """Prevailing weather along the propagation path."""

    CLEAR = "clear"
    RAIN = "rain"
    SNOW = "snow"
    FOG = "fog"
    DUST = "dust"

    @classmethod
    def parse(cls, value: Union["WeatherType", str]) -> "WeatherType":
        """Coerce an enum member, name or value (any case) to a WeatherType."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip().lower()
            for member in cls:
                if text in (member.value, member.name.lower()):
                    return member
        valid = ", ".join(m.value for m in cls)
        raise WeatherValidationError(
            f"Unknown weather type: {value!r} (expected one of: {valid})"
        )


@dataclass(frozen=True)
class WeatherCondition:
    """Ambient conditions along a horizontal propagation path.

    Attributes:
        type: Prevailing weather type
        temperature: Air temperature [°C]
        relative_humidity: Relative humidity [%], 0-100
        visibility: Meteorological visibility [km], > 0
        precipitation: Precipitation rate [mm/h]; only used for rain and snow
        co2_concentration: CO2 concentration [ppm]

    Example:
        >>> weather = WeatherCondition(WeatherType.RAIN, temperature=15,
        ...                            relative_humidity=90, visibility=2.5,
        ...                            precipitation=25)
    """
    type: WeatherType
    temperature: float
    relative_humidity: float
    visibility: float
    precipitation: Optional[float] = None
    co2_concentration: float = DEFAULT_CO2_PPM

    def __post_init__(self):
        # Frozen dataclass: coerce through object.__setattr__
        object.__setattr__(self, "type", WeatherType.parse(self.type))

        errors = self.validate()
        if errors:
            raise WeatherValidationError("; ".join(errors))

    def validate(self) -> list:
        """Validate the condition.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not math.isfinite(self.visibility) or self.visibility <= 0:
            errors.append(f"visibility must be positive, got {self.visibility} km")

        if not 0 <= self.relative_humidity <= 100:
            errors.append(
                f"relative humidity must be between 0 and 100%, got {self.relative_humidity}"
            )

        if not self.temperature > ABSOLUTE_ZERO_CELSIUS:
            errors.append(
                f"temperature must be above absolute zero, got {self.temperature} °C"
            )

        if self.precipitation is not None and not self.precipitation >= 0:
            errors.append(
                f"precipitation must be non-negative, got {self.precipitation} mm/h"
            )

        if not self.co2_concentration >= 0:
            errors.append(
                f"CO2 concentration must be non-negative, got {self.co2_concentration} ppm"
            )

        return errors

    def describe(self) -> str:
        """One-line summary of the condition, for logs and reports."""
        precipitation = self.precipitation if self.precipitation is not None else 0
        return (
            f"weather: {self.type.value}, temperature: {self.temperature}°C, "
            f"relative humidity: {self.relative_humidity}%, "
            f"visibility: {self.visibility}km, precipitation: {precipitation}mm/h"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary (weather type as its string value)."""
        data = asdict(self)
        data["type"] = self.type.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WeatherCondition":
        """Create a WeatherCondition from a dictionary.

        Args:
            data: Mapping with ``type``, ``temperature``, ``relative_humidity``
                and ``visibility`` keys, and optional ``precipitation`` and
                ``co2_concentration``

        Returns:
            Validated WeatherCondition
        """
        return cls(
            type=data.get("type", "clear"),
            temperature=data["temperature"],
            relative_humidity=data["relative_humidity"],
            visibility=data["visibility"],
            precipitation=data.get("precipitation"),
            co2_concentration=data.get("co2_concentration", DEFAULT_CO2_PPM),
        )
