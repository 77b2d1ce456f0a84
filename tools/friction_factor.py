"""
Friction factor calculation tool.

This module provides tools to calculate the Darcy friction factor with a selectable
correlation and to list the correlations that are available.
"""

import logging
from typing import Optional

from correlations import (
    CORRELATION_INFO, calculate, classify_flow_regime, list_correlations
)
from utils.constants import DEFAULT_CORRELATION
from utils.helpers import resolve_relative_roughness
from utils.json_helpers import safe_json_dumps

# Configure logging
logger = logging.getLogger("friction-mcp.friction_factor")


def calculate_friction_factor(
    correlation: str = DEFAULT_CORRELATION,  # Registered correlation name
    relative_roughness: Optional[float] = None,  # e/D, dimensionless
    reynolds_number: Optional[float] = None,  # Re, dimensionless

    # --- Roughness resolution inputs ---
    pipe_roughness: Optional[float] = None,  # Absolute roughness in m
    pipe_diameter: Optional[float] = None,   # Inner diameter in m
    material: Optional[str] = None           # Pipe material for roughness lookup
) -> str:
    """Calculate the Darcy friction factor using the selected correlation.

    Args:
        correlation: Correlation name (swameeJain, colebrook, haaland, chen,
            zigrangSylvester, goudarSonnad, serghides, wood)
        relative_roughness: Relative roughness e/D
        reynolds_number: Reynolds number
        pipe_roughness: Absolute roughness in m (used with pipe_diameter)
        pipe_diameter: Inner diameter in m (used with pipe_roughness or material)
        material: Pipe material name for roughness lookup (e.g., "Steel")

    Returns:
        JSON string with value, error and info, plus the resolved inputs
    """
    try:
        local_relative_roughness, results_log = resolve_relative_roughness(
            relative_roughness=relative_roughness,
            pipe_roughness=pipe_roughness,
            pipe_diameter=pipe_diameter,
            material=material,
        )

        # Unresolved e/D is passed through so the dispatcher reports it uniformly
        outcome = calculate(correlation, local_relative_roughness, reynolds_number)

        result = {
            **outcome.to_dict(),
            "correlation": correlation,
            "relative_roughness": local_relative_roughness,
            "reynolds_number": reynolds_number,
            "inputs_resolved": results_log,
        }

        if outcome.ok:
            result["flow_regime"] = classify_flow_regime(reynolds_number)
            result["correlation_name"] = CORRELATION_INFO[correlation].display_name
        else:
            result["error_kind"] = outcome.error_kind.value

        return safe_json_dumps(result)

    except Exception as e:
        logger.error(f"Error in calculate_friction_factor: {e}", exc_info=True)
        return safe_json_dumps({
            "value": None,
            "error": f"Calculation error: {str(e)}",
            "info": None
        })


def list_available_correlations(include_details: bool = False) -> str:
    """List the registered friction factor correlations.

    Args:
        include_details: Also return year, form, validity ranges and accuracy

    Returns:
        JSON string with the correlation names in registration order
    """
    try:
        names = list_correlations()
        result = {
            "correlations": names,
            "count": len(names),
        }
        if include_details:
            result["details"] = [CORRELATION_INFO[name].as_dict() for name in names]
        return safe_json_dumps(result)

    except Exception as e:
        logger.error(f"Error in list_available_correlations: {e}", exc_info=True)
        return safe_json_dumps({"error": f"Calculation error: {str(e)}"})
