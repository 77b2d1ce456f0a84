"""Help resources omnitool - lists available correlations, materials, flow regimes and error kinds."""

import json
import logging
from typing import Literal, Optional

from fluids.friction import _roughness

from correlations import CORRELATION_INFO, ErrorKind, list_correlations
from utils.constants import (
    COLEBROOK_INITIAL_GUESS, COLEBROOK_MAX_ITERATIONS, COLEBROOK_TOLERANCE,
    LAMINAR_OVERRIDE_RE, LAMINAR_UPPER_RE, TURBULENT_LOWER_RE
)

logger = logging.getLogger("friction-mcp.help_resources")


FLOW_REGIMES = [
    {
        "name": "laminar",
        "reynolds_range": [0, LAMINAR_UPPER_RE],
        "description": f"Laminar flow (Re < {LAMINAR_UPPER_RE:g})",
    },
    {
        "name": "transitional",
        "reynolds_range": [LAMINAR_UPPER_RE, TURBULENT_LOWER_RE],
        "description": f"Transitional flow ({LAMINAR_UPPER_RE:g} <= Re < {TURBULENT_LOWER_RE:g})",
    },
    {
        "name": "turbulent",
        "reynolds_range": [TURBULENT_LOWER_RE, None],
        "description": f"Turbulent flow (Re >= {TURBULENT_LOWER_RE:g})",
    },
]

ERROR_KINDS = {
    ErrorKind.UNKNOWN_CORRELATION.value: "Correlation name is not registered. Use one of the listed names.",
    ErrorKind.INVALID_INPUT.value: "e/D or Re is not a finite number.",
    ErrorKind.NEGATIVE_ROUGHNESS.value: "e/D must be >= 0.",
    ErrorKind.NON_POSITIVE_REYNOLDS.value: "Re must be > 0.",
    ErrorKind.CALCULATION_FAILED.value: "Correlation returned a non-physical value; "
                                        "inputs are likely outside its valid range. Try another correlation.",
    ErrorKind.CALCULATION_ERROR.value: "Numerical error while evaluating the correlation "
                                       "(e.g. logarithm of a non-positive number).",
}


def get_available_materials() -> list:
    """Get list of available pipe materials for roughness lookup."""
    return [
        {"name": name, "roughness_m": roughness, "roughness_mm": roughness * 1000}
        for name, roughness in sorted(_roughness.items())
    ]


def help_resources(
    resource_type: Literal["correlations", "materials", "regimes", "errors", "all"] = "all",
    correlation: Optional[str] = None,
) -> str:
    """
    List available resources for friction factor calculations.

    Provides:
    - Correlations with year, form, validity ranges and accuracy
    - Pipe materials with roughness values (for e/D from diameter)
    - Flow regime thresholds and the laminar override
    - Error kinds returned by the calculations

    Args:
        resource_type: Type of resources to list
            - "correlations": All registered correlations
            - "materials": Pipe materials with roughness values
            - "regimes": Flow regime classification thresholds
            - "errors": Error kinds and what to do about them
            - "all": All resources (summary)
        correlation: Optional correlation name to show a single entry

    Returns:
        JSON string with requested resource information

    Examples:
        List all correlations:
        >>> help_resources(resource_type="correlations")

        Details for one correlation:
        >>> help_resources(resource_type="correlations", correlation="haaland")
    """
    result = {}

    if resource_type == "correlations" or resource_type == "all":
        if correlation:
            if correlation in CORRELATION_INFO:
                result["correlations"] = [CORRELATION_INFO[correlation].as_dict()]
            else:
                result["correlations"] = {
                    "error": f"Unknown correlation: {correlation}",
                    "available_correlations": list_correlations(),
                }
        else:
            result["correlations"] = [CORRELATION_INFO[name].as_dict() for name in list_correlations()]

    if resource_type == "materials" or resource_type == "all":
        materials = get_available_materials()
        if resource_type == "all":
            result["materials"] = {
                "count": len(materials),
                "note": "Use resource_type='materials' for full list with roughness values",
                "common_materials": [
                    {"name": "Carbon steel, bare", "roughness_mm": 0.046},
                    {"name": "Stainless steel, polished", "roughness_mm": 0.015},
                    {"name": "PVC plastic", "roughness_mm": 0.0015},
                    {"name": "Cast iron", "roughness_mm": 0.26},
                ],
            }
        else:
            result["materials"] = materials

    if resource_type == "regimes" or resource_type == "all":
        result["regimes"] = {
            "classification": FLOW_REGIMES,
            "laminar_override_re": LAMINAR_OVERRIDE_RE,
            "note": f"Every correlation returns 64/Re below Re = {LAMINAR_OVERRIDE_RE:g}, "
                    "including the transitional range. The regime label is informational only.",
        }

    if resource_type == "errors" or resource_type == "all":
        result["errors"] = ERROR_KINDS

    if resource_type == "all":
        result["notes"] = {
            "colebrook": f"Fixed-point iteration from f = {COLEBROOK_INITIAL_GUESS}, tolerance "
                         f"{COLEBROOK_TOLERANCE:g}, at most {COLEBROOK_MAX_ITERATIONS} iterations. "
                         "Non-convergence returns the last estimate, not an error.",
            "validity_ranges": "Validity ranges are published guidance and are not enforced.",
            "relative_roughness": "Provide relative_roughness directly, or pipe_diameter (m) with "
                                  "pipe_roughness (m) or material.",
        }

    return json.dumps(result, indent=2)
