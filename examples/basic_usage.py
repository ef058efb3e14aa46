"""Simple example of using the Cold Plunge MCP tools directly."""

import json
import sys
import os

# Add the parent directory to the path so we can import tools
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tools.cooling_energy import calculate_ice_requirement
from tools.maintenance_load import calculate_maintenance_load
from tools.body_displacement import calculate_body_displacement


def main():
    """Run basic usage examples."""

    # Example 1: Ice for a first fill
    print("Example 1: Ice Requirement")
    result = json.loads(calculate_ice_requirement(
        volume="100 gallon",
        start_temperature="68 degF",  # Automatically converts to 20 °C
        target_temperature="50 degF",
    ))
    print(f"Energy to remove: {result['energy_kwh']:.2f} kWh")
    print(f"Ice needed: {result['ice_kg']:.1f} kg ({result['ice_lb']:.1f} lb, {result['ice_volume_l']:.1f} L)")
    print()

    # Example 2: Can a 1/4 ton chiller hold temperature?
    print("Example 2: Maintenance Load")
    result = json.loads(calculate_maintenance_load(
        volume="100 gallon",
        insulation_quality="poor",
        ambient_temperature=30,
        water_temperature=5,
        chiller_tonnage="0.25",
    ))
    print(f"Passive heat gain: {result['heat_gain_w']:.0f} W")
    print(f"Chiller duty cycle: {result['duty_percent']:.1f}%")
    if result["chiller_undersized"]:
        print("Chiller is undersized for this tub")
    print()

    # Example 3: Leave room for the bather
    print("Example 3: Body Displacement")
    result = json.loads(calculate_body_displacement(body_weight="180 lb", immersion_fraction=0.75))
    print(f"Displaced water: {result['displacement_l']:.1f} L ({result['displacement_gal']:.1f} gal)")
    print()


if __name__ == "__main__":
    main()
