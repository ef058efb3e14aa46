"""
Numeric regression checks for the cold plunge physics model.

Each check runs one scenario through the physics tools and compares every
output against a reference value computed once with the same physics. A
mismatch raises ToleranceExceeded straight out of ``run_all``; nothing after
the failing assertion runs.

Importing this module runs nothing. Use ``run_physics_checks.py`` (or the
``cold-plunge-checks`` console script) to execute the suite.
"""

import logging
from typing import Callable, Dict, List, Sequence, Tuple

from tools.body_displacement import body_displacement_l
from tools.cooling_energy import gallons_to_liters, ice_requirement, pounds_to_kg
from tools.maintenance_load import maintenance_load
from utils.constants import CONSTANTS, PlungeConstants
from utils.tolerance import approx_equal

logger = logging.getLogger("cold-plunge-mcp.physics_checks")

CheckResult = Dict[str, float]


def check_unit_conversions(constants: PlungeConstants = CONSTANTS) -> CheckResult:
    liters = gallons_to_liters(100, constants)
    approx_equal(liters, 378.541, 1e-6, "gal→L")
    kg = pounds_to_kg(100, constants)
    approx_equal(kg, 45.3592, 1e-4, "lb→kg")
    return {"liters": liters, "kg": kg}


def check_ice_mass_scenario(constants: PlungeConstants = CONSTANTS) -> CheckResult:
    # 100 gal, 20 -> 10 °C, target in the typical recovery range
    volume_l = gallons_to_liters(100, constants)
    req = ice_requirement(volume_l, 20, 10, constants)

    approx_equal(req.energy_j, 15826799.21, 1e-6, "ice: energyJ")
    approx_equal(req.energy_per_kg_ice, 375310.0, 1e-6, "ice: energyPerKgIce")
    approx_equal(req.ice_kg, 42.16993741173963, 1e-6, "ice: kg")
    approx_equal(req.ice_lb, 92.96887381554266, 1e-6, "ice: lb")
    return {
        "energy_j": req.energy_j,
        "energy_per_kg_ice": req.energy_per_kg_ice,
        "ice_kg": req.ice_kg,
        "ice_lb": req.ice_lb,
    }


def check_maintenance_load(constants: PlungeConstants = CONSTANTS) -> CheckResult:
    # 100 gal tub, poor insulation, ambient 30 °C held at 5 °C, 0.25 t chiller
    volume_l = gallons_to_liters(100, constants)
    load = maintenance_load(volume_l, "poor", 25, "0.25", constants)

    approx_equal(load.surface_area_m2, 4.848, 1e-2, "maint: SA estimate")
    approx_equal(load.heat_gain_w, 1212.0, 2.0, "maint: passive heat gain W")
    approx_equal(load.duty_percent, 147.7, 1.0, "maint: duty cycle %")
    return {
        "surface_area_m2": load.surface_area_m2,
        "heat_gain_w": load.heat_gain_w,
        "duty_percent": load.duty_percent,
    }


def check_body_displacement(constants: PlungeConstants = CONSTANTS) -> CheckResult:
    # 80 kg bather, average composition, 75 % immersed
    body_vol_l = body_displacement_l(80, 0.75, constants.body_density_avg)
    approx_equal(body_vol_l, 60.91370558375635, 1e-6, "body displacement L")
    return {"body_volume_l": body_vol_l}


def check_ice_large_delta(constants: PlungeConstants = CONSTANTS) -> CheckResult:
    # 150 gal, 25 -> 5 °C
    volume_l = gallons_to_liters(150, constants)
    req = ice_requirement(volume_l, 25, 5, constants)

    approx_equal(req.energy_j, 47480397.63, 1e-6, "ice-large: energyJ")
    approx_equal(req.energy_per_kg_ice, 354405, 1e-6, "ice-large: energyPerKgIce")
    approx_equal(req.ice_kg, 133.97214381851273, 1e-6, "ice-large: kg")
    approx_equal(req.ice_lb, 295.3582598866663, 1e-6, "ice-large: lb")
    approx_equal(req.ice_volume_l, 146.0983029645722, 1e-6, "ice-large: volume L")
    return {
        "energy_j": req.energy_j,
        "energy_per_kg_ice": req.energy_per_kg_ice,
        "ice_kg": req.ice_kg,
        "ice_lb": req.ice_lb,
        "ice_volume_l": req.ice_volume_l,
    }


def check_ice_mild_delta(constants: PlungeConstants = CONSTANTS) -> CheckResult:
    # 40 gal, 15 -> 10 °C
    volume_l = gallons_to_liters(40, constants)
    req = ice_requirement(volume_l, 15, 10, constants)

    approx_equal(req.energy_j, 3165359.842, 1e-6, "ice-mild: energyJ")
    approx_equal(req.energy_per_kg_ice, 375310.0, 1e-6, "ice-mild: energyPerKgIce")
    approx_equal(req.ice_kg, 8.433987482347927, 1e-6, "ice-mild: kg")
    approx_equal(req.ice_lb, 18.593774763108534, 1e-6, "ice-mild: lb")
    return {
        "energy_j": req.energy_j,
        "energy_per_kg_ice": req.energy_per_kg_ice,
        "ice_kg": req.ice_kg,
        "ice_lb": req.ice_lb,
    }


PHYSICS_CHECKS: List[Tuple[str, Callable[[], CheckResult]]] = [
    ("unit conversions", check_unit_conversions),
    ("ice mass", check_ice_mass_scenario),
    ("maintenance load", check_maintenance_load),
    ("body displacement", check_body_displacement),
    ("ice large delta", check_ice_large_delta),
    ("ice mild delta", check_ice_mild_delta),
]


def run_all(checks: Sequence[Tuple[str, Callable[[], CheckResult]]] = PHYSICS_CHECKS) -> None:
    """Run each check in order, stopping at the first ToleranceExceeded."""
    for name, check in checks:
        logger.debug(f"Running physics check '{name}'")
        check()
        print(f"✓ {name} passed")

    print("All physics tests passed.")
