"""
Maintenance load tool for insulated cold plunge tubs.

Estimates the passive heat a tub picks up from its surroundings and the share
of a chiller's rated capacity needed to hold the water at temperature.

Primary use cases:
- Sizing a chiller against a tub's insulation quality and ambient conditions
- Spotting undersized chillers (duty cycle above 100 %)
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from typing import Union

from utils.constants import (
    CONSTANTS,
    PlungeConstants,
    SA_BREAKPOINT_L,
    SA_LARGE_TUB_BASE,
    SA_LARGE_TUB_SLOPE,
    SA_SMALL_TUB_BASE,
    SA_SMALL_TUB_SLOPE,
)
from utils.unit_converter import parse_and_convert, parse_volume_l
from utils.validation import require_non_negative, require_positive

logger = logging.getLogger("cold-plunge-mcp.maintenance_load")


@dataclass(frozen=True)
class MaintenanceLoad:
    surface_area_m2: float
    u_value: float
    heat_gain_w: float
    chiller_capacity_w: float
    duty_percent: float
    chiller_undersized: bool


def estimate_surface_area_m2(volume_l: float) -> float:
    """Estimate wetted plus exposed tub surface area from water volume.

    Piecewise linear fit over typical tub shapes: small tubs below 300 L and
    larger tubs above. The two branches meet within about 0.01 m² at 300 L.
    """
    if volume_l < SA_BREAKPOINT_L:
        return SA_SMALL_TUB_BASE + SA_SMALL_TUB_SLOPE * volume_l
    return SA_LARGE_TUB_BASE + SA_LARGE_TUB_SLOPE * volume_l


def passive_heat_gain_w(u_value: float, area_m2: float, delta_t: float) -> float:
    """Q = U * A * ΔT (W)."""
    return u_value * area_m2 * delta_t


def chiller_capacity_w(tonnage: Union[str, float], constants: PlungeConstants = CONSTANTS) -> float:
    return constants.get_chiller(tonnage).btu_per_hr * constants.btu_hr_to_w


def maintenance_load(
    volume_l: float,
    insulation: str,
    delta_t: float,
    chiller_tonnage: Union[str, float],
    constants: PlungeConstants = CONSTANTS,
) -> MaintenanceLoad:
    """Passive heat gain of a tub and the chiller duty cycle needed to offset it.

    Args:
        volume_l: Water volume in liters
        insulation: Insulation quality tier ('poor', 'decent', 'good')
        delta_t: Ambient minus water temperature in K (or °C difference)
        chiller_tonnage: Nominal chiller size label or number (e.g. '0.25')
        constants: Constants bundle to compute with

    Returns:
        MaintenanceLoad; a duty cycle above 100 % means the chiller cannot keep up
    """
    area = estimate_surface_area_m2(volume_l)
    u = constants.get_u_value(insulation)
    heat_gain = passive_heat_gain_w(u, area, delta_t)
    capacity = chiller_capacity_w(chiller_tonnage, constants)
    duty = (heat_gain / capacity) * 100
    return MaintenanceLoad(
        surface_area_m2=area,
        u_value=u,
        heat_gain_w=heat_gain,
        chiller_capacity_w=capacity,
        duty_percent=duty,
        chiller_undersized=duty > 100.0,
    )


def calculate_maintenance_load(
    volume: Union[str, float],
    insulation_quality: str,
    ambient_temperature: Union[str, float],
    water_temperature: Union[str, float],
    chiller_tonnage: Union[str, float] = "0.25",
) -> str:
    """Calculates passive heat gain and chiller duty cycle for a cold plunge tub.

    Args:
        volume: Water volume in liters, or a string with units (e.g. '100 gallon')
        insulation_quality: 'poor', 'decent' or 'good'
        ambient_temperature: Ambient air temperature in °C, or e.g. '86 degF'
        water_temperature: Held water temperature in °C, or e.g. '41 degF'
        chiller_tonnage: Nominal chiller size ('0.1', '0.25', '0.5', '1.0')

    Numbers are read as liters and °C. Strings without a unit are read as
    imperial: '100' is 100 gallons and '86' is 86 °F.

    Returns:
        JSON string with heat gain, chiller capacity and duty cycle
    """
    try:
        volume_l = parse_volume_l(volume)
        ambient_c = parse_and_convert(ambient_temperature, "degC", "temperature")
        water_c = parse_and_convert(water_temperature, "degC", "temperature")

        require_positive(volume_l, "volume")
        delta_t = ambient_c - water_c
        require_non_negative(delta_t, "ambient_temperature - water_temperature")

        logger.info(
            f"Maintenance load for {volume_l:.1f} L, insulation={insulation_quality}, "
            f"ΔT={delta_t:.1f} K, chiller={chiller_tonnage} t"
        )
        load = maintenance_load(volume_l, insulation_quality, delta_t, chiller_tonnage)
        if load.chiller_undersized:
            logger.warning(f"Chiller {chiller_tonnage} t undersized: duty cycle {load.duty_percent:.1f}%")

        result = {
            "volume_l": volume_l,
            "insulation_quality": insulation_quality,
            "temperature_difference_k": delta_t,
            "chiller_tonnage": str(chiller_tonnage),
            **asdict(load),
            "heat_gain_btu_hr": load.heat_gain_w / CONSTANTS.btu_hr_to_w,
            "calculation_formula": "Q = U * A * ΔT; duty = Q / capacity * 100",
        }
        return json.dumps(result)

    except ValueError as e:
        logger.warning(f"Invalid input to calculate_maintenance_load: {e}")
        return json.dumps({"error": str(e)})
    except KeyError as e:
        logger.warning(f"Unknown option in calculate_maintenance_load: {e.args[0]}")
        return json.dumps({"error": e.args[0]})
    except Exception as e:
        logger.error(f"Unexpected error in calculate_maintenance_load: {e}", exc_info=True)
        return json.dumps({"error": f"An unexpected error occurred: {str(e)}"})
