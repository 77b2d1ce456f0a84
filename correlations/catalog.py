"""
Registry of the available friction factor correlations.

Correlations are registered once, in a fixed order, under the names used by the
dispatcher and the MCP tools. Both mappings are read-only views so that the
registry can be shared freely between concurrent callers.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from correlations.darcy import (
    chen, colebrook, goudar_sonnad, haaland, serghides, swamee_jain, wood,
    zigrang_sylvester
)

Correlation = Callable[[float, float], float]


@dataclass(frozen=True)
class CorrelationInfo:
    """Reference card for a correlation.

    Validity ranges are the published ones and are informational only;
    ``None`` means the source gives no limit.
    """
    name: str
    display_name: str
    year: int
    form: str
    description: str
    function: Correlation = field(repr=False, compare=False)
    reynolds_range: Optional[Tuple[float, float]] = None
    relative_roughness_range: Optional[Tuple[float, float]] = None
    accuracy: Optional[str] = None

    def in_validity_range(self, relative_roughness: float, reynolds_number: float) -> bool:
        if self.reynolds_range is not None:
            re_min, re_max = self.reynolds_range
            if not re_min < reynolds_number < re_max:
                return False
        if self.relative_roughness_range is not None:
            rr_min, rr_max = self.relative_roughness_range
            if not rr_min < relative_roughness < rr_max:
                return False
        return True

    def as_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "display_name": self.display_name,
            "year": self.year,
            "form": self.form,
            "description": self.description,
            "reynolds_range": list(self.reynolds_range) if self.reynolds_range else None,
            "relative_roughness_range": (
                list(self.relative_roughness_range) if self.relative_roughness_range else None
            ),
            "accuracy": self.accuracy,
        }


_CATALOG = (
    CorrelationInfo(
        name="swameeJain",
        display_name="Swamee-Jain",
        year=1976,
        form="explicit",
        description="Single-log explicit approximation to Colebrook.",
        function=swamee_jain,
        reynolds_range=(5000.0, 1e8),
        relative_roughness_range=(1e-6, 1e-2),
        accuracy="±1%",
    ),
    CorrelationInfo(
        name="colebrook",
        display_name="Colebrook-White",
        year=1939,
        form="implicit",
        description="Implicit equation solved by fixed-point iteration. "
                    "Most accurate but computationally intensive.",
        function=colebrook,
        accuracy="Reference standard",
    ),
    CorrelationInfo(
        name="haaland",
        display_name="Haaland",
        year=1983,
        form="explicit",
        description="Explicit approximation to Colebrook.",
        function=haaland,
        reynolds_range=(4000.0, 1e8),
        relative_roughness_range=(1e-6, 5e-2),
        accuracy="±1.5%",
    ),
    CorrelationInfo(
        name="chen",
        display_name="Chen",
        year=1979,
        form="explicit",
        description="Nested-logarithm explicit approximation with high accuracy.",
        function=chen,
        reynolds_range=(4000.0, 4e8),
        relative_roughness_range=(1e-7, 5e-2),
    ),
    CorrelationInfo(
        name="zigrangSylvester",
        display_name="Zigrang-Sylvester",
        year=1982,
        form="multi-step explicit",
        description="Two-step explicit approximation.",
        function=zigrang_sylvester,
        reynolds_range=(4000.0, 1e8),
        relative_roughness_range=(4e-5, 5e-2),
    ),
    CorrelationInfo(
        name="goudarSonnad",
        display_name="Goudar-Sonnad",
        year=2008,
        form="explicit",
        description="Closed-form asymptotic expansion.",
        function=goudar_sonnad,
        reynolds_range=(4000.0, 1e8),
        relative_roughness_range=(1e-6, 5e-2),
    ),
    CorrelationInfo(
        name="serghides",
        display_name="Serghides",
        year=1984,
        form="multi-step explicit",
        description="Three-step explicit method. High accuracy with reasonable computational cost.",
        function=serghides,
    ),
    CorrelationInfo(
        name="wood",
        display_name="Wood",
        year=1966,
        form="explicit",
        description="Simple explicit approximation. Less accurate but very fast.",
        function=wood,
    ),
)

CORRELATION_INFO: Mapping[str, CorrelationInfo] = MappingProxyType(
    {info.name: info for info in _CATALOG}
)

CORRELATIONS: Mapping[str, Correlation] = MappingProxyType(
    {info.name: info.function for info in _CATALOG}
)


def list_correlations() -> List[str]:
    """Return the registered correlation names in registration order."""
    return list(CORRELATIONS)


def get_correlation(name: str) -> Correlation:
    """Look up a correlation function by its registered name.

    Raises:
        KeyError: If the name is not registered
    """
    return CORRELATIONS[name]


def get_correlation_info(name: str) -> CorrelationInfo:
    return CORRELATION_INFO[name]
