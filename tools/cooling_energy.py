"""
Cooling energy and ice requirement tool for cold plunge tubs.

This module provides the sensible-heat energy needed to pull a volume of
water down to a target temperature, and the mass and volume of ice that
absorbs that energy by melting and then warming to the target.
"""

import json
import logging
import math
from dataclasses import asdict, dataclass
from typing import Union

from utils.constants import CONSTANTS, PlungeConstants
from utils.unit_converter import parse_and_convert, parse_volume_l
from utils.validation import ValidationError, require_finite, require_positive

logger = logging.getLogger("cold-plunge-mcp.cooling_energy")


@dataclass(frozen=True)
class IceRequirement:
    energy_j: float
    energy_per_kg_ice: float
    ice_kg: float
    ice_lb: float
    ice_volume_l: float


def gallons_to_liters(gallons: float, constants: PlungeConstants = CONSTANTS) -> float:
    return gallons * constants.gal_to_l


def liters_to_gallons(liters: float, constants: PlungeConstants = CONSTANTS) -> float:
    return liters / constants.gal_to_l


def pounds_to_kg(pounds: float, constants: PlungeConstants = CONSTANTS) -> float:
    return pounds * constants.lb_to_kg


def kg_to_pounds(kg: float, constants: PlungeConstants = CONSTANTS) -> float:
    return kg / constants.lb_to_kg


def cooling_energy_j(
    volume_l: float,
    start_c: float,
    target_c: float,
    constants: PlungeConstants = CONSTANTS,
) -> float:
    """Sensible heat removed cooling the water, Q = V * rho * Cp * ΔT (J)."""
    return volume_l * constants.density_water * constants.specific_heat_water * (start_c - target_c)


def ice_energy_per_kg(target_c: float, constants: PlungeConstants = CONSTANTS) -> float:
    """Energy one kg of ice absorbs melting at 0 °C and warming to target_c (J/kg)."""
    return constants.latent_heat_fusion_ice + constants.specific_heat_water * target_c


def ice_requirement(
    volume_l: float,
    start_c: float,
    target_c: float,
    constants: PlungeConstants = CONSTANTS,
) -> IceRequirement:
    """Ice needed to bring volume_l of water from start_c down to target_c.

    Args:
        volume_l: Water volume in liters
        start_c: Starting water temperature in °C
        target_c: Target water temperature in °C
        constants: Constants bundle to compute with

    Returns:
        IceRequirement with energy, ice mass (kg and lb) and ice volume (L)
    """
    energy_j = cooling_energy_j(volume_l, start_c, target_c, constants)
    energy_per_kg = ice_energy_per_kg(target_c, constants)
    ice_kg = energy_j / energy_per_kg
    return IceRequirement(
        energy_j=energy_j,
        energy_per_kg_ice=energy_per_kg,
        ice_kg=ice_kg,
        ice_lb=kg_to_pounds(ice_kg, constants),
        ice_volume_l=ice_kg / constants.density_ice,
    )


def calculate_ice_requirement(
    volume: Union[str, float],
    start_temperature: Union[str, float],
    target_temperature: Union[str, float],
) -> str:
    """Calculates the cooling energy and ice needed for a cold plunge.

    Args:
        volume: Water volume in liters, or a string with units (e.g. '100 gallon')
        start_temperature: Starting water temperature in °C, or e.g. '68 degF'
        target_temperature: Target water temperature in °C (0 °C or above), or e.g. '50 degF'

    Numbers are read as liters and °C. Strings without a unit are read as
    imperial: '100' is 100 gallons and '50' is 50 °F.

    Returns:
        JSON string with cooling energy, ice mass and ice volume
    """
    try:
        volume_l = parse_volume_l(volume)
        start_c = parse_and_convert(start_temperature, "degC", "temperature")
        target_c = parse_and_convert(target_temperature, "degC", "temperature")

        require_positive(volume_l, "volume")
        require_finite(start_c, "start_temperature")
        require_finite(target_c, "target_temperature")
        if start_c <= target_c:
            raise ValidationError(
                f"start_temperature ({start_c} °C) must be above target_temperature ({target_c} °C)"
            )
        # Allow rounding noise from "32 degF"
        if target_c < 0 and not math.isclose(target_c, 0.0, abs_tol=1e-9):
            raise ValidationError(
                f"target_temperature ({target_c} °C) must be at or above 0 °C; the melt model assumes liquid water"
            )

        logger.info(f"Ice requirement for {volume_l:.1f} L, {start_c} -> {target_c} °C")
        req = ice_requirement(volume_l, start_c, target_c)

        result = {
            "volume_l": volume_l,
            "start_temperature_c": start_c,
            "target_temperature_c": target_c,
            "temperature_drop_c": start_c - target_c,
            **asdict(req),
            "energy_kwh": req.energy_j / 3.6e6,
            "calculation_formula": "Q = V * rho * Cp * ΔT; m_ice = Q / (L_f + Cp * T_target)",
        }
        return json.dumps(result)

    except ValueError as e:
        logger.warning(f"Invalid input to calculate_ice_requirement: {e}")
        return json.dumps({"error": str(e)})
    except Exception as e:
        logger.error(f"Unexpected error in calculate_ice_requirement: {e}", exc_info=True)
        return json.dumps({"error": f"An unexpected error occurred: {str(e)}"})
