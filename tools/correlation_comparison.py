"""
Correlation comparison tool.

Evaluates several friction factor correlations for the same flow and reports how far
each one lands from the exact Colebrook solution.
"""

import logging
from typing import List, Optional

import fluids.friction

from correlations import (
    CORRELATION_INFO, CORRELATIONS, ErrorKind, calculate, colebrook_solve,
    describe_flow_regime, list_correlations
)
from utils.constants import LAMINAR_COEFFICIENT, LAMINAR_OVERRIDE_RE
from utils.json_helpers import safe_json_dumps

# Configure logging
logger = logging.getLogger("friction-mcp.correlation_comparison")

INPUT_ERRORS = (
    ErrorKind.INVALID_INPUT,
    ErrorKind.NEGATIVE_ROUGHNESS,
    ErrorKind.NON_POSITIVE_REYNOLDS,
)


def reference_friction_factor(relative_roughness: float, reynolds_number: float) -> tuple:
    """Reference value the correlations are measured against.

    Below the laminar override every correlation returns 64/Re, so that is the
    reference there; otherwise the explicit Lambert-W Colebrook solution from fluids.

    Returns:
        Tuple of (reference value or None, method description)
    """
    if reynolds_number < LAMINAR_OVERRIDE_RE:
        return LAMINAR_COEFFICIENT / reynolds_number, "Laminar (64/Re)"
    try:
        return float(fluids.friction.Colebrook(Re=reynolds_number, eD=relative_roughness)), \
            "Colebrook (exact, fluids)"
    except Exception as e:
        logger.warning(f"Exact Colebrook reference failed (e/D={relative_roughness}, Re={reynolds_number}): {e}")
        return None, "Unavailable"


def compare_correlations(
    relative_roughness: Optional[float] = None,
    reynolds_number: Optional[float] = None,
    correlations: Optional[List[str]] = None
) -> str:
    """Compare friction factor correlations for one (e/D, Re) point.

    Args:
        relative_roughness: Relative roughness e/D
        reynolds_number: Reynolds number
        correlations: Correlation names to include (default: all registered)

    Returns:
        JSON string with per-correlation values, deviation from the reference
        and a summary
    """
    try:
        names = list_correlations() if not correlations else list(correlations)
        unknown = [name for name in names if name not in CORRELATIONS]
        if unknown:
            return safe_json_dumps({
                "error": f"Unknown correlations: {', '.join(map(str, unknown))}",
                "available_correlations": list_correlations()
            })

        outcomes = {name: calculate(name, relative_roughness, reynolds_number) for name in names}

        # Input problems are identical for every correlation; report them once
        first = outcomes[names[0]]
        if not first.ok and first.error_kind in INPUT_ERRORS:
            return safe_json_dumps({
                "error": first.error,
                "error_kind": first.error_kind.value
            })

        reference, reference_method = reference_friction_factor(relative_roughness, reynolds_number)

        results = []
        for name in names:
            outcome = outcomes[name]
            row = {
                "correlation": name,
                "display_name": CORRELATION_INFO[name].display_name,
                "value": outcome.value,
                "error": outcome.error,
                "in_validity_range": CORRELATION_INFO[name].in_validity_range(
                    relative_roughness, reynolds_number
                ),
            }
            if outcome.ok:
                if reference:
                    row["deviation_pct"] = round((outcome.value - reference) / reference * 100.0, 4)
            else:
                row["error_kind"] = outcome.error_kind.value
            results.append(row)

        ranked = sorted(
            (r for r in results if r.get("deviation_pct") is not None),
            key=lambda r: abs(r["deviation_pct"])
        )

        # Solver diagnostics only where the dispatcher already evaluated Colebrook cleanly
        iterations, converged = None, None
        colebrook_outcome = outcomes.get("colebrook") or calculate("colebrook", relative_roughness, reynolds_number)
        if colebrook_outcome.ok:
            solution = colebrook_solve(relative_roughness, reynolds_number)
            iterations, converged = solution.iterations, solution.converged

        return safe_json_dumps({
            "relative_roughness": relative_roughness,
            "reynolds_number": reynolds_number,
            "info": describe_flow_regime(reynolds_number),
            "reference": {"method": reference_method, "value": reference},
            "colebrook_iterations": iterations,
            "colebrook_converged": converged,
            "results": results,
            "summary": {
                "total": len(results),
                "successful": len([r for r in results if r["error"] is None]),
                "failed": len([r for r in results if r["error"] is not None]),
                "closest_to_reference": ranked[0]["correlation"] if ranked else None,
                "farthest_from_reference": ranked[-1]["correlation"] if ranked else None,
            }
        })

    except Exception as e:
        logger.error(f"Error in compare_correlations: {e}", exc_info=True)
        return safe_json_dumps({"error": f"Calculation error: {str(e)}"})
