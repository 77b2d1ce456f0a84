"""
MCP Server for Darcy friction factor calculations.

This server exposes a library of published friction factor correlations
(Swamee-Jain, Colebrook, Haaland, Chen, Zigrang-Sylvester, Goudar-Sonnad,
Serghides, Wood) with input validation, correlation comparison and Reynolds
number sweeps.
"""

import logging
from mcp.server.fastmcp import FastMCP

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger("friction-mcp")

# Initialize the MCP server
mcp = FastMCP("friction-factor-calculator")

# Import omnitools
from omnitools.friction_factor import friction_factor
from omnitools.help_resources import help_resources

# Register omnitools with MCP
mcp.tool()(friction_factor)
mcp.tool()(help_resources)

from correlations import list_correlations


def main():
    logger.info("Starting Friction Factor MCP server...")
    logger.info("Registered correlations (%d): %s", len(list_correlations()), ", ".join(list_correlations()))

    # Log which omnitools are registered
    logger.info("Registered omnitools:")
    logger.info("  - friction_factor: Calculate, list, compare and sweep friction factor correlations")
    logger.info("  - help_resources: Correlation details, pipe materials, flow regimes and error kinds")

    # Start the server
    mcp.run()


if __name__ == "__main__":
    main()
