"""
MCP Server for cold plunge / ice bath calculations with unit-aware inputs.

Exposes the same physics the regression checks cover, without the
assertions, so a front end can ask for ice quantities, chiller duty cycles
and body displacement.
"""

import logging
from mcp.server.fastmcp import FastMCP

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger("cold-plunge-mcp")

# Initialize the MCP server
mcp = FastMCP("cold-plunge-calculator")

from tools.cooling_energy import calculate_ice_requirement
from tools.maintenance_load import calculate_maintenance_load
from tools.body_displacement import calculate_body_displacement
from utils.constants import CONSTANTS

TOOLS = [
    calculate_ice_requirement,
    calculate_maintenance_load,
    calculate_body_displacement,
]

for tool in TOOLS:
    mcp.tool()(tool)
    logger.info(f"Registered {tool.__name__}")


def log_server_capabilities():
    """Log server capabilities and unit support."""
    logger.info("=" * 60)
    logger.info("COLD PLUNGE MCP SERVER STARTING")
    logger.info("=" * 60)
    logger.info("  Numeric inputs are SI: liters, °C, kg")
    logger.info("  Strings with units are converted:")
    logger.info('    volume="100 gallon"')
    logger.info('    start_temperature="68 degF"')
    logger.info('    body_weight="180 lb"')
    logger.info(f"  Chiller sizes (tons): {', '.join(CONSTANTS.chillers)}")
    logger.info(f"  Insulation tiers: {', '.join(CONSTANTS.u_values)}")
    logger.info("=" * 60)
    logger.info(f"Server registered {len(TOOLS)} tools successfully")
    logger.info("=" * 60)


if __name__ == "__main__":
    log_server_capabilities()

    # Start the server
    mcp.run()
