"""Golden-section minimization over a closed bracket.

Used to find the rotation angle at which a candidate stroke lies closest to a
template. The objective is assumed to be unimodal over the bracket; when it is
not, the search converges to a local minimum rather than the global one.
"""

import math
from collections.abc import Callable
from typing import NamedTuple

PHI = 0.5 * (math.sqrt(5.0) - 1.0)


class SearchResult(NamedTuple):
    """Outcome of a golden-section search.

    Attributes:
        minimum: Smallest objective value seen at the final interior points
        argmin: Argument at which ``minimum`` was evaluated
        lower: Lower end of the final bracket
        upper: Upper end of the final bracket
        evaluations: Number of objective evaluations performed
    """

    minimum: float
    argmin: float
    lower: float
    upper: float
    evaluations: int


def _interior(a: float, b: float) -> float:
    return PHI * a + (1.0 - PHI) * b


def golden_section_search(
    func: Callable[[float], float],
    lower: float,
    upper: float,
    precision: float,
) -> SearchResult:
    """Minimize ``func`` over ``[lower, upper]`` by golden-section search.

    The bracket shrinks by a factor of PHI per iteration until its width is at
    most ``precision``.

    Args:
        func: Objective to minimize
        lower: Lower end of the search bracket
        upper: Upper end of the search bracket
        precision: Terminating bracket width, same units as the bounds

    Returns:
        SearchResult with the minimum found and the final bracket

    Raises:
        ValueError: If a bound is not finite or precision is not a positive
            finite number
    """
    if not (math.isfinite(lower) and math.isfinite(upper)):
        raise ValueError(f"Search bounds must be finite, got [{lower}, {upper}]")
    if not math.isfinite(precision) or precision <= 0.0:
        raise ValueError(f"Search precision must be positive, got {precision}")

    a, b = lower, upper
    x1 = _interior(a, b)
    x2 = _interior(b, a)
    f1 = func(x1)
    f2 = func(x2)
    evaluations = 2

    while abs(b - a) > precision:
        if f1 < f2:
            b = x2
            x2, f2 = x1, f1
            x1 = _interior(a, b)
            f1 = func(x1)
        else:
            a = x1
            x1, f1 = x2, f2
            x2 = _interior(b, a)
            f2 = func(x2)
        evaluations += 1

    if f1 <= f2:
        return SearchResult(f1, x1, a, b, evaluations)
    return SearchResult(f2, x2, a, b, evaluations)
