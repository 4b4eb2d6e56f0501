"""
Command-line interface for air_transmission.

Provides CLI commands for:
- Evaluating a scenario from a configuration file or CLI arguments
- Surveying all bands under a reference set of weather conditions
"""

import argparse
import logging
import sys

from air_transmission import __version__
from air_transmission.attenuation.common import smoke_screen_transmittance
from air_transmission.bands import LaserTransmittanceModel
from air_transmission.calculator import Band, create_model
from air_transmission.config import ScenarioConfig, load_scenario
from air_transmission.radiometry import received_radiation
from air_transmission.weather import WeatherCondition, WeatherType

SURVEY_DISTANCES_KM = [0.1, 0.5, 1.0, 5.0, 10.0]

# (label, type, temperature, humidity, visibility, precipitation)
SURVEY_WEATHER = [
    ("clear", WeatherType.CLEAR, 25.0, 50.0, 10.0, None),
    ("light rain", WeatherType.RAIN, 25.0, 60.0, 5.0, 2.5),
    ("heavy rain", WeatherType.RAIN, 25.0, 90.0, 2.5, 25.0),
    ("fog", WeatherType.FOG, 25.0, 70.0, 1.0, None),
    ("dust", WeatherType.DUST, 25.0, 50.0, 0.5, None),
    ("snow", WeatherType.SNOW, -5.0, 80.0, 1.0, 5.0),
]


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def scenario_transmittances(config: ScenarioConfig) -> list:
    """Evaluate a scenario at each of its distances.

    Returns:
        List of (distance_km, transmittance) tuples
    """
    weather = config.weather.to_condition()
    band = Band.parse(config.band)
    model = create_model(band, weather)
    smoke = smoke_screen_transmittance(config.smoke.concentration_g_m3, config.smoke.thickness_m)

    results = []
    for distance in config.path.distances_km:
        if config.turbulence.enabled and isinstance(model, LaserTransmittanceModel):
            transmittance = model.calculate_transmittance_with_turbulence(
                distance,
                beam_height_m=config.turbulence.beam_height_m,
                wind_speed_ms=config.turbulence.wind_speed_ms,
            )
        else:
            transmittance = model.calculate_transmittance(distance)
        results.append((distance, transmittance * smoke))

    return results


def run_scenario(config: ScenarioConfig) -> int:
    """Evaluate and print a scenario."""
    errors = config.validate()
    if errors:
        for error in errors:
            print(f"Error: {error}", file=sys.stderr)
        return 1

    weather = config.weather.to_condition()
    results = scenario_transmittances(config)

    print(f"\nScenario: {config.name}")
    if config.description:
        print(f"  {config.description}")
    print(f"  Band: {Band.parse(config.band).value}")
    print(f"  {weather.describe()}")
    if config.turbulence.enabled and Band.parse(config.band) is not Band.LASER:
        print("  Note: turbulence is only modelled for the laser band")
    for distance, transmittance in results:
        print(f"  distance: {distance:g} km, transmittance: {transmittance:.2%}")

    if config.designator.enabled:
        designator = config.designator
        print("\nDesignator power budget:")
        for distance, transmittance in results:
            budget = received_radiation(
                transmittance,
                designator.laser_energy_j,
                designator.pulse_width_ns,
                distance,
                designator.receiver_distance_km,
                designator.target_reflectivity,
                receiver_area_m2=designator.receiver_area_m2,
            )
            print(f"  target at {distance:g} km: received power {budget.received_power_w:.2e} W")

    return 0


def run_survey() -> int:
    """Print every band under the reference weather set."""
    for band in Band:
        print(f"\n[{band.value}]")
        for label, weather_type, temperature, humidity, visibility, precipitation in SURVEY_WEATHER:
            weather = WeatherCondition(weather_type, temperature, humidity, visibility, precipitation)
            model = create_model(band, weather)
            values = ", ".join(
                f"{d:g} km: {model.calculate_transmittance(d):.2%}" for d in SURVEY_DISTANCES_KM
            )
            print(f"  {label:<10s} {values}")
    return 0


def config_from_args(args: argparse.Namespace) -> ScenarioConfig:
    """Build a scenario from command-line arguments."""
    data = {
        "name": "command_line",
        "band": args.band,
        "weather": {
            "type": args.weather,
            "temperature": args.temperature,
            "relative_humidity": args.humidity,
            "visibility": args.visibility,
            "precipitation": args.precipitation,
            "co2_concentration": args.co2,
        },
        "smoke": {
            "concentration_g_m3": args.smoke_concentration,
            "thickness_m": args.smoke_thickness,
        },
        "turbulence": {"enabled": args.turbulence},
    }
    if args.distances:
        data["path"] = {"distances_km": args.distances}
    return ScenarioConfig.from_dict(data)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="air-transmission",
        description="Atmospheric transmittance of laser, infrared, millimeter-wave and UV radiation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Evaluate a scenario file
    air-transmission --config scenario.yaml

    # Laser in heavy rain with turbulence
    air-transmission --band laser --weather rain --humidity 90 --visibility 2.5 \\
        --precipitation 25 --turbulence

    # All bands under the reference weather set
    air-transmission --survey
        """,
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")
    parser.add_argument("--version", action="version", version=f"air-transmission {__version__}")
    parser.add_argument("-c", "--config", type=str, help="Path to YAML or JSON scenario file")
    parser.add_argument("--survey", action="store_true",
                        help="Survey all bands under reference weather conditions")

    parser.add_argument("-b", "--band", type=str, default="laser",
                        choices=[b.value for b in Band], help="Wave band")
    parser.add_argument("-w", "--weather", type=str, default="clear",
                        choices=[t.value for t in WeatherType], help="Weather type")
    parser.add_argument("--temperature", type=float, default=25.0, help="Temperature [°C]")
    parser.add_argument("--humidity", type=float, default=60.0, help="Relative humidity [%%]")
    parser.add_argument("--visibility", type=float, default=10.0, help="Visibility [km]")
    parser.add_argument("--precipitation", type=float, help="Precipitation rate [mm/h]")
    parser.add_argument("--co2", type=float, default=415.0, help="CO2 concentration [ppm]")
    parser.add_argument("-d", "--distances", type=float, nargs="+", help="Path lengths [km]")
    parser.add_argument("--smoke-concentration", type=float, default=0.0,
                        help="Smoke concentration [g/m³]")
    parser.add_argument("--smoke-thickness", type=float, default=0.0,
                        help="Smoke screen thickness [m]")
    parser.add_argument("--turbulence", action="store_true",
                        help="Include turbulence losses (laser only)")

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        if args.survey:
            return run_survey()
        if args.config:
            config = load_scenario(args.config)
        else:
            config = config_from_args(args)
        return run_scenario(config)
    except Exception as e:
        logging.exception(f"Transmittance calculation failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
