"""
Unified friction factor calculations: single point, listing, comparison and sweeps.
"""

from typing import Optional, Literal, List
import inspect
from tools.friction_factor import calculate_friction_factor, list_available_correlations
from tools.correlation_comparison import compare_correlations
from tools.friction_factor_sweep import friction_factor_sweep


def friction_factor(
    mode: Literal["calculate", "list", "compare", "sweep"] = "calculate",

    # Common parameters
    correlation: Optional[str] = None,
    relative_roughness: Optional[float] = None,
    reynolds_number: Optional[float] = None,

    # Roughness resolution (calculate)
    pipe_roughness: Optional[float] = None,
    pipe_diameter: Optional[float] = None,
    material: Optional[str] = None,

    # Listing
    include_details: Optional[bool] = None,

    # Comparison
    correlations: Optional[List[str]] = None,

    # Sweep
    re_start: Optional[float] = None,
    re_stop: Optional[float] = None,
    n: Optional[int] = None,
    spacing: Optional[Literal["log", "linear"]] = None,
) -> str:
    """
    Unified Darcy friction factor calculations.

    This omnitool consolidates the friction factor tools:
    - mode='calculate': Friction factor from one correlation with validation
    - mode='list': Available correlation names (optionally with details)
    - mode='compare': All (or selected) correlations against exact Colebrook
    - mode='sweep': One correlation over a range of Reynolds numbers

    Args:
        mode: "calculate", "list", "compare" or "sweep"

        Common parameters:
            correlation: Correlation name (default "colebrook")
            relative_roughness: Relative roughness e/D
            reynolds_number: Reynolds number

        Calculate parameters:
            pipe_roughness: Absolute roughness in m (with pipe_diameter)
            pipe_diameter: Inner diameter in m
            material: Pipe material for roughness lookup

        List parameters:
            include_details: Include year, form, validity ranges and accuracy

        Compare parameters:
            correlations: Subset of correlation names to compare

        Sweep parameters:
            re_start: First Reynolds number
            re_stop: Last Reynolds number
            n: Number of points
            spacing: "log" or "linear"

    Returns:
        JSON string with calculation results

    Examples:
        Single calculation:
        >>> friction_factor(mode="calculate", correlation="swameeJain",
        ...                 relative_roughness=0.0002, reynolds_number=50000)

        Moody curve:
        >>> friction_factor(mode="sweep", correlation="colebrook",
        ...                 relative_roughness=0.001, re_start=4000, re_stop=1e8, n=40)
    """
    # Collect all local variables
    params = locals().copy()
    params.pop("mode")

    # Select the appropriate function based on mode
    if mode == "calculate":
        fn = calculate_friction_factor
    elif mode == "list":
        fn = list_available_correlations
    elif mode == "compare":
        fn = compare_correlations
    elif mode == "sweep":
        fn = friction_factor_sweep
    else:
        return f'{{"error": "Invalid mode: {mode}. Must be \'calculate\', \'list\', \'compare\' or \'sweep\'"}}'

    # Filter parameters to only those accepted by the target function
    sig = inspect.signature(fn)
    allowed = set(sig.parameters.keys())
    forwarded = {k: v for k, v in params.items() if k in allowed and v is not None}

    return fn(**forwarded)
