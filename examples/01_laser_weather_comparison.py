#!/usr/bin/env python3
"""
Laser Transmittance Under Different Weather
===========================================

This example compares the 1.06 um laser transmittance along a
horizontal path in clear air, rain, fog, dust and snow, and shows how
much a smoke screen and near-ground turbulence take away on top.

Usage:
    python 01_laser_weather_comparison.py
    python 01_laser_weather_comparison.py --max-distance 5
    python 01_laser_weather_comparison.py --smoke 0.2 --smoke-thickness 10

Output:
    - Console: Transmittance table per weather condition
    - Graph: laser_weather_comparison.png
"""

import argparse
import sys

import numpy as np

try:
    from air_transmission import WeatherCondition, WeatherType, LaserTransmittanceModel
    from air_transmission.attenuation import smoke_screen_transmittance
except ImportError:
    print("Error: air_transmission package not found.")
    print("Please install it first: pip install -e . (from the project root)")
    sys.exit(1)


CONDITIONS = [
    ("Clear", WeatherCondition(WeatherType.CLEAR, 25, 50, 10)),
    ("Light rain", WeatherCondition(WeatherType.RAIN, 25, 60, 5, precipitation=2.5)),
    ("Heavy rain", WeatherCondition(WeatherType.RAIN, 25, 90, 2.5, precipitation=25)),
    ("Fog", WeatherCondition(WeatherType.FOG, 25, 70, 1)),
    ("Dust", WeatherCondition(WeatherType.DUST, 25, 50, 0.5)),
    ("Snow", WeatherCondition(WeatherType.SNOW, -5, 80, 1, precipitation=5)),
]


def parse_args():
    parser = argparse.ArgumentParser(
        description="Compare laser transmittance under different weather",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                              # Default settings
  %(prog)s --max-distance 5             # Paths up to 5 km
  %(prog)s --smoke 0.2 --smoke-thickness 10   # Add a smoke screen
        """
    )
    parser.add_argument(
        "--max-distance", type=float, default=10.0,
        help="Longest path in km (default: 10)"
    )
    parser.add_argument(
        "--smoke", type=float, default=0.0,
        help="Smoke concentration in g/m^3 (default: 0 = none)"
    )
    parser.add_argument(
        "--smoke-thickness", type=float, default=0.0,
        help="Smoke screen thickness in m (default: 0)"
    )
    parser.add_argument(
        "--no-plot", action="store_true",
        help="Disable plotting"
    )
    parser.add_argument(
        "--output", type=str, default="laser_weather_comparison.png",
        help="Output filename for the plot"
    )
    return parser.parse_args()


def main():
    args = parse_args()

    print("=" * 70)
    print("LASER TRANSMITTANCE UNDER DIFFERENT WEATHER")
    print("=" * 70)

    smoke = smoke_screen_transmittance(args.smoke, args.smoke_thickness)
    print(f"\nSmoke screen transmittance: {smoke:.4f}")

    distances = np.linspace(0.0, args.max_distance, 101)
    table_distances = [0.1, 0.5, 1.0, 5.0, 10.0]
    table_distances = [d for d in table_distances if d <= args.max_distance]

    print("\n" + "-" * 70)
    header = "Weather".ljust(12) + "".join(f"{d:>10g} km" for d in table_distances)
    print(header)
    print("-" * 70)

    curves = {}
    for label, weather in CONDITIONS:
        model = LaserTransmittanceModel(weather)
        curves[label] = np.array([model.calculate_transmittance(d) for d in distances]) * smoke
        row = "".join(f"{model.calculate_transmittance(d) * smoke:>13.2%}" for d in table_distances)
        print(label.ljust(12) + row)

    # Turbulence only matters for the clear, long paths
    clear = LaserTransmittanceModel(CONDITIONS[0][1])
    turbulent = np.array([clear.calculate_transmittance_with_turbulence(d) for d in distances]) * smoke

    print("\n" + "-" * 70)
    print("TURBULENCE (clear air, 10 m beam height, 5 m/s wind)")
    print("-" * 70)
    for d in table_distances:
        plain = clear.calculate_transmittance(d)
        with_turbulence = clear.calculate_transmittance_with_turbulence(d)
        print(f"  {d:5g} km: {plain:.2%} -> {with_turbulence:.2%}")

    if not args.no_plot:
        try:
            import matplotlib
            matplotlib.use('Agg')
            import matplotlib.pyplot as plt

            fig, ax = plt.subplots(figsize=(10, 6))
            for label, values in curves.items():
                ax.plot(distances, values, linewidth=2, label=label)
            ax.plot(distances, turbulent, 'k--', linewidth=1, label='Clear + turbulence')
            ax.set_xlabel('Distance (km)')
            ax.set_ylabel('Transmittance')
            ax.set_title('1.06 um Laser Transmittance')
            ax.set_ylim(0, 1.05)
            ax.grid(True, alpha=0.3)
            ax.legend()

            plt.tight_layout()
            plt.savefig(args.output, dpi=150, bbox_inches='tight')
            print(f"\nPlot saved to: {args.output}")

        except ImportError:
            print("\nNote: matplotlib not available, skipping plot generation")


if __name__ == "__main__":
    main()
