"""Unit conversion utilities using Pint for the Cold Plunge MCP server.

This module parses user-supplied quantities such as ``"100 gallon"``,
``"50 degF"`` or ``"180 lb"`` into the units the physics tools work in
(liters, degrees Celsius, kilograms). The regression arithmetic itself uses
the fixed factors in ``utils.constants``; Pint is only used at the input edge.
"""

from pint import UnitRegistry
import logging
from typing import Union, Optional

from utils.constants import CONSTANTS, PlungeConstants

logger = logging.getLogger("cold-plunge-mcp.units")

# Initialize unit registry
ureg = UnitRegistry()

# Chiller capacities are quoted as "BTU/hr" on spec sheets
ureg.define("BTU_per_hour = Btu/hour = BTUH")


def convert_units(value: float, from_unit: str, to_unit: str) -> float:
    """Convert between units using Pint.

    Args:
        value: Numerical value to convert
        from_unit: Source unit string (e.g., 'degF', 'gallon', 'lb')
        to_unit: Target unit string (e.g., 'degC', 'liter', 'kg')

    Returns:
        Converted value as float

    Raises:
        ValueError: If conversion fails
    """
    try:
        quantity = ureg.Quantity(value, from_unit)
        converted = quantity.to(to_unit)
        return float(converted.magnitude)
    except Exception as e:
        logger.error(f"Unit conversion failed: {e}")
        raise ValueError(f"Cannot convert {value} {from_unit} to {to_unit}: {e}")


# Temperature conversions
def fahrenheit_to_celsius(temp_f: float) -> float:
    """Convert temperature from Fahrenheit to Celsius."""
    return convert_units(temp_f, "degF", "degC")


def celsius_to_fahrenheit(temp_c: float) -> float:
    """Convert temperature from Celsius to Fahrenheit."""
    return convert_units(temp_c, "degC", "degF")


def delta_fahrenheit_to_celsius(delta_f: float) -> float:
    """Convert a temperature difference from °F to °C."""
    return convert_units(delta_f, "delta_degF", "delta_degC")


# Volume and mass inputs
def _is_unit(unit: str, name: str) -> bool:
    try:
        return ureg.Unit(unit) == ureg.Unit(name)
    except Exception:
        return False


def _parse_with_factor(
    value_str: Union[str, float, int],
    si_unit: str,
    imperial_unit: str,
    factor: float,
    param_type: str,
) -> float:
    """Parse a quantity, converting the imperial unit with a fixed factor.

    Numbers are taken as already in si_unit. Strings in imperial_unit, or bare
    numeric strings, are multiplied by factor so they match the regression
    arithmetic exactly. Any other unit goes through Pint.
    """
    if isinstance(value_str, (int, float)):
        return float(value_str)

    parts = value_str.strip().split(maxsplit=1)
    if len(parts) != 2 or _is_unit(parts[1], imperial_unit):
        try:
            value = float(parts[0])
        except (ValueError, IndexError):
            raise ValueError(f"Could not parse '{value_str}' as a numeric value")
        if len(parts) == 1:
            logger.info(f"Assuming {imperial_unit} for {param_type} value {value}")
        return value * factor

    return parse_and_convert(value_str, si_unit, param_type)


def parse_volume_l(value_str: Union[str, float, int], constants: PlungeConstants = CONSTANTS) -> float:
    """Parse a tub volume to liters; gallons use the fixed gal_to_l factor."""
    return _parse_with_factor(value_str, "liter", "gallon", constants.gal_to_l, "volume")


def parse_mass_kg(value_str: Union[str, float, int], constants: PlungeConstants = CONSTANTS) -> float:
    """Parse a body mass to kilograms; pounds use the fixed lb_to_kg factor."""
    return _parse_with_factor(value_str, "kilogram", "pound", constants.lb_to_kg, "mass")


# Power conversions
def btu_per_hr_to_watts(power_btu_hr: float) -> float:
    """Convert power from BTU/hr to watts."""
    return convert_units(power_btu_hr, "BTUH", "watt")


def watts_to_btu_per_hr(power_w: float) -> float:
    """Convert power from watts to BTU/hr."""
    return convert_units(power_w, "watt", "BTUH")


# Utility function to parse and convert user input
def parse_and_convert(
    value_str: Union[str, float, int],
    target_unit: str,
    param_type: Optional[str] = None,
) -> float:
    """Parse a value with optional unit and convert to target unit.

    Args:
        value_str: String that may contain value and unit (e.g., "68 degF", "100 gallon", "50")
        target_unit: Target unit to convert to
        param_type: Optional parameter type hint ('temperature', 'volume', 'mass', 'temperature_difference')

    Returns:
        Converted value in target units

    Examples:
        >>> parse_and_convert("50 degF", "degC")
        10.0...
        >>> parse_and_convert("100", "liter", param_type="volume")  # Assumes gallons
        378.54...
    """
    # Numeric values are assumed to be in target units already
    if isinstance(value_str, (int, float)):
        return float(value_str)

    parts = value_str.strip().split(maxsplit=1)

    if len(parts) == 2:
        try:
            value = float(parts[0])
        except ValueError:
            raise ValueError(f"Could not parse '{value_str}' as a numeric value")
        return convert_units(value, parts[1], target_unit)

    try:
        value = float(value_str.strip())
    except ValueError:
        raise ValueError(f"Could not parse '{value_str}' as a numeric value")

    # Bare numbers in strings take the customary imperial unit when a hint is given
    if param_type:
        default_units = {
            "temperature": "degF",
            "temperature_difference": "delta_degF",
            "volume": "gallon",
            "mass": "pound",
        }

        if param_type in default_units:
            from_unit = default_units[param_type]
            logger.info(f"Assuming {from_unit} for {param_type} value {value}")
            return convert_units(value, from_unit, target_unit)

    return value


if __name__ == "__main__":
    print("Testing unit conversions:")
    print(f"50°F = {fahrenheit_to_celsius(50):.2f} °C")
    print(f"100 gal = {parse_volume_l('100 gallon'):.3f} L")
    print(f"180 lb = {parse_mass_kg('180 lb'):.2f} kg")
    print(f"2800 BTU/hr = {btu_per_hr_to_watts(2800):.1f} W")

    print("\nTesting parse_and_convert:")
    print(f"'68 degF' -> {parse_and_convert('68 degF', 'degC'):.2f} °C")
    print(f"'100 gal' -> {parse_and_convert('100 gal', 'liter'):.2f} L")
    print(f"'50' (temp) -> {parse_and_convert('50', 'degC', 'temperature'):.2f} °C")
