"""
Constants used across the Friction Factor MCP server.

This module defines flow regime thresholds, solver settings and defaults used throughout the server.
"""

# Flow regime thresholds (Reynolds number)
LAMINAR_OVERRIDE_RE = 4000.0   # Below this every correlation returns 64/Re
LAMINAR_UPPER_RE = 2300.0      # Upper bound of the laminar regime (informational)
TURBULENT_LOWER_RE = 4000.0    # Lower bound of the turbulent regime (informational)
LAMINAR_COEFFICIENT = 64.0     # Hagen-Poiseuille: f = 64 / Re

# Colebrook fixed-point solver
COLEBROOK_INITIAL_GUESS = 0.02      # Typical fully turbulent friction factor
COLEBROOK_TOLERANCE = 1e-10         # Absolute change between iterations
COLEBROOK_MAX_ITERATIONS = 100

# Default values for tool calculations
DEFAULT_CORRELATION = "colebrook"
DEFAULT_ROUGHNESS = 1.5e-5     # Default pipe roughness, m (smooth commercial steel)

# Parameter sweep defaults
SWEEP_DEFAULT_POINTS = 50
SWEEP_MAX_POINTS = 10000
SWEEP_SPACINGS = ("log", "linear")
