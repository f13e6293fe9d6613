"""Request and result types, plus the integer/fractional coercion rule.

Coercion is a presentation step only: a value whose fractional part is
exactly zero is reported as ``int``, anything else as ``float``.  It runs
after the metric has finished, so it never changes computation precision.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

__all__ = ["ComputationRequest", "ComputationResult", "Report", "coerce"]

ComputationResult: TypeAlias = int | float
Report: TypeAlias = list[tuple[str, ComputationResult]]


@dataclass(frozen=True, slots=True)
class ComputationRequest:
    """One string pair to compare.

    Attributes:
        left:      First operand (the pipeline input on the command line).
        right:     Second operand (the command argument).
        normalize: Report the normalized value instead of the raw one.
    """

    left: str
    right: str
    normalize: bool = False


def coerce(value: float) -> ComputationResult:
    """Return ``value`` as ``int`` if it is integral, otherwise as ``float``.

    Examples::

        coerce(1.0)    # 1
        coerce(3)      # 3
        coerce(0.857)  # 0.857
    """
    if isinstance(value, int):
        return int(value)
    if value.is_integer():
        return int(value)
    return float(value)
