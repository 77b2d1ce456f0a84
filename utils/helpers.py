"""
Helper functions for Friction Factor MCP server.

This module provides shared input resolution used by multiple tools in the server.
"""

import logging
from typing import List, Optional, Tuple

from fluids.friction import _roughness

from utils.constants import DEFAULT_ROUGHNESS

logger = logging.getLogger("friction-mcp.helpers")


def get_pipe_roughness(material: str = None, pipe_roughness: float = None) -> tuple:
    """Get absolute pipe roughness based on material or default.

    Args:
        material: Optional pipe material name (case-insensitive, fluids database)
        pipe_roughness: Optional explicit roughness value in m

    Returns:
        Tuple of (roughness value in m, source description)
    """
    if pipe_roughness is not None:
        return pipe_roughness, "Provided"

    if material is not None:
        mat_lower = {k.lower(): k for k in _roughness.keys()}
        if material.lower() in mat_lower:
            actual_key = mat_lower[material.lower()]
            return _roughness[actual_key], f"Material Lookup '{actual_key}'"
        logger.warning(f"Material '{material}' not found, using default roughness {DEFAULT_ROUGHNESS}")
        return DEFAULT_ROUGHNESS, f"Default (Material '{material}' Not Found)"

    return DEFAULT_ROUGHNESS, "Default"


def resolve_relative_roughness(
    relative_roughness: Optional[float] = None,
    pipe_roughness: Optional[float] = None,
    pipe_diameter: Optional[float] = None,
    material: Optional[str] = None,
) -> Tuple[Optional[float], List[str]]:
    """Work out e/D from whatever the caller supplied.

    Priority: explicit relative roughness, then absolute roughness (given or
    looked up by material) over the inner diameter. Both lengths are in m.

    Returns:
        Tuple of (relative roughness or None if it cannot be resolved, log of steps)
    """
    log = []

    if relative_roughness is not None:
        log.append("Used provided relative_roughness.")
        return relative_roughness, log

    if pipe_diameter is None:
        log.append(
            "Missing required input: relative_roughness OR pipe_diameter "
            "(with pipe_roughness or material)."
        )
        return None, log

    if pipe_diameter <= 0:
        log.append(f"pipe_diameter must be positive, got {pipe_diameter}.")
        return None, log

    roughness, source = get_pipe_roughness(material=material, pipe_roughness=pipe_roughness)
    log.append(f"Absolute roughness {roughness} m from {source}.")
    log.append(f"Relative roughness computed as roughness / pipe_diameter ({pipe_diameter} m).")
    return roughness / pipe_diameter, log
