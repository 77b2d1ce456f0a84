"""
Validating dispatcher for the friction factor correlations.

calculate() picks a correlation by name, validates the inputs, runs the
correlation and packages the outcome as a CalculationResult. Failures are
returned as values; nothing raised by a correlation escapes this module.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from correlations.catalog import CORRELATIONS, CORRELATION_INFO
from utils.constants import LAMINAR_UPPER_RE, TURBULENT_LOWER_RE
from utils.json_helpers import is_positive_real, is_valid_number

logger = logging.getLogger("friction-mcp.dispatch")


class ErrorKind(str, Enum):
    UNKNOWN_CORRELATION = "UnknownCorrelation"
    INVALID_INPUT = "InvalidInput"
    NEGATIVE_ROUGHNESS = "NegativeRoughness"
    NON_POSITIVE_REYNOLDS = "NonPositiveReynolds"
    CALCULATION_FAILED = "CalculationFailed"
    CALCULATION_ERROR = "CalculationError"


@dataclass(frozen=True)
class CalculationResult:
    """Outcome of a friction factor calculation.

    Holds either a value with its flow regime info, or an error kind with a
    message. Use the success/failure constructors rather than building one
    by hand.
    """
    value: Optional[float] = None
    info: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: float, info: str) -> "CalculationResult":
        return cls(value=value, info=info)

    @classmethod
    def failure(cls, error_kind: ErrorKind, error: str) -> "CalculationResult":
        return cls(error_kind=error_kind, error=error)

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "error": self.error, "info": self.info}


def classify_flow_regime(reynolds_number: float) -> str:
    """Classify the flow regime from the Reynolds number alone.

    Returns:
        "laminar" (Re < 2300), "transitional" (2300 <= Re < 4000) or "turbulent"
    """
    if reynolds_number < LAMINAR_UPPER_RE:
        return "laminar"
    elif reynolds_number < TURBULENT_LOWER_RE:
        return "transitional"
    return "turbulent"


_REGIME_DESCRIPTIONS = {
    "laminar": "Laminar flow (Re < 2300)",
    "transitional": "Transitional flow (2300 < Re < 4000)",
    "turbulent": "Turbulent flow (Re > 4000)",
}


def describe_flow_regime(reynolds_number: float) -> str:
    """Human-readable regime description for display alongside a result.

    This is informational: the correlations switch to 64/Re below Re = 4000
    regardless of what is reported here.
    """
    return _REGIME_DESCRIPTIONS[classify_flow_regime(reynolds_number)]


def calculate(correlation_name: str, relative_roughness: Any, reynolds_number: Any) -> CalculationResult:
    """Calculate the Darcy friction factor with the named correlation.

    Checks run in order and the first failure wins: known correlation name,
    numeric inputs, non-negative e/D, positive Re.

    Args:
        correlation_name: Registered correlation name (see list_correlations)
        relative_roughness: Relative roughness e/D
        reynolds_number: Reynolds number

    Returns:
        CalculationResult with either value and info, or error_kind and error
    """
    correlation = CORRELATIONS.get(correlation_name) if isinstance(correlation_name, str) else None
    if correlation is None:
        return CalculationResult.failure(
            ErrorKind.UNKNOWN_CORRELATION, f"Correlation '{correlation_name}' not found"
        )

    if not (is_valid_number(relative_roughness) and is_valid_number(reynolds_number)):
        return CalculationResult.failure(
            ErrorKind.INVALID_INPUT, "Invalid input: e/D and Re must be numbers"
        )

    if relative_roughness < 0:
        return CalculationResult.failure(ErrorKind.NEGATIVE_ROUGHNESS, "e/D must be non-negative")

    if reynolds_number <= 0:
        return CalculationResult.failure(
            ErrorKind.NON_POSITIVE_REYNOLDS, "Reynolds number must be positive"
        )

    info = CORRELATION_INFO[correlation_name]
    if not info.in_validity_range(relative_roughness, reynolds_number):
        logger.debug(
            "%s used outside its documented range (e/D=%g, Re=%g)",
            info.display_name, relative_roughness, reynolds_number
        )

    try:
        f = correlation(relative_roughness, reynolds_number)
    except Exception as e:
        logger.error(f"Error evaluating correlation '{correlation_name}': {e}", exc_info=True)
        return CalculationResult.failure(ErrorKind.CALCULATION_ERROR, f"Calculation error: {e}")

    if not is_positive_real(f):
        return CalculationResult.failure(
            ErrorKind.CALCULATION_FAILED, "Calculation failed - check input ranges"
        )

    return CalculationResult.success(float(f), describe_flow_regime(reynolds_number))
