"""
Darcy friction factor correlations.

The correlation library, its registry and the validating dispatcher.
"""

from .darcy import (
    ColebrookSolution, chen, colebrook, colebrook_solve, goudar_sonnad, haaland,
    serghides, swamee_jain, wood, zigrang_sylvester
)
from .catalog import (
    CORRELATIONS, CORRELATION_INFO, CorrelationInfo, get_correlation,
    get_correlation_info, list_correlations
)
from .dispatch import (
    CalculationResult, ErrorKind, calculate, classify_flow_regime,
    describe_flow_regime
)

__all__ = [
    # Correlations
    'swamee_jain',
    'colebrook',
    'colebrook_solve',
    'ColebrookSolution',
    'haaland',
    'chen',
    'zigrang_sylvester',
    'goudar_sonnad',
    'serghides',
    'wood',

    # Registry
    'CORRELATIONS',
    'CORRELATION_INFO',
    'CorrelationInfo',
    'get_correlation',
    'get_correlation_info',
    'list_correlations',

    # Dispatcher
    'calculate',
    'CalculationResult',
    'ErrorKind',
    'classify_flow_regime',
    'describe_flow_regime',
]
