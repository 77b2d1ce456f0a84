"""
Tools package for Friction Factor MCP server.

This package contains the individual calculation tools that the omnitools dispatch to.
"""

from .friction_factor import calculate_friction_factor, list_available_correlations
from .correlation_comparison import compare_correlations
from .friction_factor_sweep import friction_factor_sweep

__all__ = [
    'calculate_friction_factor',
    'list_available_correlations',
    'compare_correlations',
    'friction_factor_sweep',
]
