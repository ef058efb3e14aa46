"""
Body displacement tool.

Volume of water a bather pushes up when sitting in the tub, used to leave
enough freeboard when filling.
"""

import json
import logging
from typing import Optional, Union

from utils.constants import CONSTANTS
from utils.unit_converter import parse_mass_kg
from utils.validation import require_fraction, require_positive

logger = logging.getLogger("cold-plunge-mcp.body_displacement")


def body_displacement_l(
    weight_kg: float,
    immersion_fraction: float,
    body_density: float = CONSTANTS.body_density_avg,
) -> float:
    """Displaced volume in liters, (weight / density) * immersed fraction."""
    return (weight_kg / body_density) * immersion_fraction


def calculate_body_displacement(
    body_weight: Union[str, float],
    immersion_fraction: float = 0.75,
    body_density: Optional[float] = None,
) -> str:
    """Calculates the water volume displaced by a bather.

    Args:
        body_weight: Body mass in kg, or a string with units (e.g. '180 lb')
        immersion_fraction: Fraction of the body under water, in (0, 1]
        body_density: Average body density in kg/L (defaults to 0.985)

    A numeric body_weight is read as kg; a string without a unit is read as
    pounds, so '180' is 180 lb.

    Returns:
        JSON string with displaced volume in liters and gallons
    """
    try:
        weight_kg = parse_mass_kg(body_weight)
        fraction = float(immersion_fraction)
        density = CONSTANTS.body_density_avg if body_density is None else float(body_density)

        require_positive(weight_kg, "body_weight")
        require_fraction(fraction, "immersion_fraction")
        require_positive(density, "body_density")

        displaced_l = body_displacement_l(weight_kg, fraction, density)
        logger.info(f"Body displacement for {weight_kg:.1f} kg at {fraction:.0%}: {displaced_l:.1f} L")

        return json.dumps({
            "body_weight_kg": weight_kg,
            "body_density_kg_l": density,
            "immersion_fraction": fraction,
            "displacement_l": displaced_l,
            "displacement_gal": displaced_l / CONSTANTS.gal_to_l,
        })

    except ValueError as e:
        logger.warning(f"Invalid input to calculate_body_displacement: {e}")
        return json.dumps({"error": str(e)})
    except Exception as e:
        logger.error(f"Unexpected error in calculate_body_displacement: {e}", exc_info=True)
        return json.dumps({"error": f"An unexpected error occurred: {str(e)}"})
