"""
Constants used across the Cold Plunge MCP server.

This module defines the physical properties, unit conversion factors and the
equipment lookup tables used by every calculation. The values are collected
once into the frozen ``CONSTANTS`` structure, which the tools receive as an
argument rather than reading module globals.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Union

# Water and ice properties
SPECIFIC_HEAT_WATER = 4181.0        # J/(kg·°C)
LATENT_HEAT_FUSION_ICE = 333500.0   # J/kg
DENSITY_WATER = 1.0                 # kg/L
DENSITY_ICE = 0.917                 # kg/L

# Conversion factors
GAL_to_L = 3.78541                  # US gallon to liter
LB_to_KG = 0.453592                 # pound to kilogram
BTU_HR_to_W = 0.29307107            # BTU/hr to watt

# Average human body density for an average composition band, kg/L
BODY_DENSITY_AVG = 0.985

# Piecewise linear fit of tub surface area (m²) against water volume (L)
SA_BREAKPOINT_L = 300.0
SA_SMALL_TUB_BASE = 1.8
SA_SMALL_TUB_SLOPE = 0.0085
SA_LARGE_TUB_BASE = 2.5
SA_LARGE_TUB_SLOPE = 0.0062


@dataclass(frozen=True)
class ChillerSpec:
    btu_per_hr: float
    watts: float


# Nominal tonnage label -> rated cooling capacity and electrical draw
CHILLERS = MappingProxyType({
    "0.1": ChillerSpec(btu_per_hr=1000, watts=190),
    "0.25": ChillerSpec(btu_per_hr=2800, watts=460),
    "0.5": ChillerSpec(btu_per_hr=3400, watts=520),
    "1.0": ChillerSpec(btu_per_hr=8000, watts=1100),
})

# Simplified tub wall U-values by insulation quality, W/(m²·K)
U_VALUES = MappingProxyType({
    "poor": 10.0,
    "decent": 3.5,
    "good": 0.8,
})


@dataclass(frozen=True)
class PlungeConstants:
    """Read-only bundle of every constant the physics tools depend on."""

    specific_heat_water: float = SPECIFIC_HEAT_WATER
    latent_heat_fusion_ice: float = LATENT_HEAT_FUSION_ICE
    density_water: float = DENSITY_WATER
    density_ice: float = DENSITY_ICE
    gal_to_l: float = GAL_to_L
    lb_to_kg: float = LB_to_KG
    btu_hr_to_w: float = BTU_HR_to_W
    body_density_avg: float = BODY_DENSITY_AVG
    chillers: Mapping[str, ChillerSpec] = field(default_factory=lambda: CHILLERS)
    u_values: Mapping[str, float] = field(default_factory=lambda: U_VALUES)

    def get_chiller(self, tonnage: Union[str, float]) -> ChillerSpec:
        """Look up a chiller by nominal tonnage label ("0.25", "1") or number (0.25, 1)."""
        try:
            label = str(float(tonnage))
        except (TypeError, ValueError):
            label = str(tonnage)
        try:
            return self.chillers[label]
        except KeyError:
            raise KeyError(
                f"Unknown chiller tonnage '{tonnage}'. Available: {', '.join(self.chillers)}"
            ) from None

    def get_u_value(self, quality: str) -> float:
        """Look up the U-value for an insulation tier (poor/decent/good)."""
        key = (quality or "").strip().lower()
        try:
            return self.u_values[key]
        except KeyError:
            raise KeyError(
                f"Unknown insulation quality '{quality}'. Available: {', '.join(self.u_values)}"
            ) from None


CONSTANTS = PlungeConstants()
