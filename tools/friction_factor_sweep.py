"""
Friction factor sweep tool.

Evaluates one correlation across a range of Reynolds numbers at fixed relative
roughness, i.e. one curve of a Moody diagram.
"""

import logging
from typing import Literal, Optional

import numpy as np

from correlations import calculate, classify_flow_regime
from utils.constants import (
    DEFAULT_CORRELATION, SWEEP_DEFAULT_POINTS, SWEEP_MAX_POINTS, SWEEP_SPACINGS
)
from utils.json_helpers import is_valid_number, safe_json_dumps

# Configure logging
logger = logging.getLogger("friction-mcp.friction_factor_sweep")


def reynolds_points(start: float, stop: float, n: int, spacing: str = "log") -> np.ndarray:
    """Reynolds numbers for a sweep.

    Raises:
        ValueError: If the range or spacing is not usable
    """
    if spacing not in SWEEP_SPACINGS:
        raise ValueError(f"Invalid spacing: {spacing}. Must be one of {', '.join(SWEEP_SPACINGS)}")
    if not (is_valid_number(start) and is_valid_number(stop)):
        raise ValueError("re_start and re_stop must be finite numbers")
    if isinstance(n, bool) or not isinstance(n, int) or n < 2 or n > SWEEP_MAX_POINTS:
        raise ValueError(f"n must be an integer between 2 and {SWEEP_MAX_POINTS}")

    if spacing == "log":
        if start <= 0 or stop <= 0:
            raise ValueError("re_start and re_stop must be positive for log spacing")
        return np.logspace(np.log10(start), np.log10(stop), n)
    return np.linspace(start, stop, n)


def friction_factor_sweep(
    correlation: str = DEFAULT_CORRELATION,
    relative_roughness: Optional[float] = None,
    re_start: Optional[float] = None,
    re_stop: Optional[float] = None,
    n: int = SWEEP_DEFAULT_POINTS,
    spacing: Literal["log", "linear"] = "log"
) -> str:
    """Parameter sweep of the friction factor over Reynolds number.

    Args:
        correlation: Correlation name
        relative_roughness: Relative roughness e/D held constant over the sweep
        re_start: First Reynolds number
        re_stop: Last Reynolds number
        n: Number of points in sweep
        spacing: "log" (default, as on a Moody diagram) or "linear"

    Returns:
        JSON string with sweep results as list of dictionaries
    """
    if re_start is None or re_stop is None:
        return safe_json_dumps({"error": "re_start and re_stop are required for a sweep"})

    try:
        sweep_values = reynolds_points(re_start, re_stop, n, spacing)
    except ValueError as e:
        return safe_json_dumps({"error": str(e)})

    try:
        results = []
        for value in sweep_values:
            re = float(value)
            outcome = calculate(correlation, relative_roughness, re)
            if outcome.ok:
                row = {
                    "reynolds_number": re,
                    "friction_factor": outcome.value,
                    "flow_regime": classify_flow_regime(re),
                }
            else:
                row = {
                    "reynolds_number": re,
                    "error": outcome.error,
                    "error_kind": outcome.error_kind.value,
                }
            results.append(row)

        successful = [r for r in results if "error" not in r]
        if not successful:
            logger.warning(f"Sweep of '{correlation}' produced no successful points")

        return safe_json_dumps({
            "correlation": correlation,
            "relative_roughness": relative_roughness,
            "sweep_variable": "reynolds_number",
            "sweep_range": {"start": re_start, "stop": re_stop, "n": n, "spacing": spacing},
            "results": results,
            "summary": {
                "total_points": len(results),
                "successful_points": len(successful),
                "failed_points": len(results) - len(successful),
                "min_friction_factor": min((r["friction_factor"] for r in successful), default=None),
                "max_friction_factor": max((r["friction_factor"] for r in successful), default=None),
            }
        })

    except Exception as e:
        logger.error(f"Error in friction_factor_sweep: {e}", exc_info=True)
        return safe_json_dumps({"error": f"Calculation error: {str(e)}"})
