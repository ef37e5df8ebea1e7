"""Numeric building blocks: quadratic solving, binary search refinement and derivative control points."""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Sequence, Tuple, TypeVar

import numpy as np

from avbezier.consts import UNIT_INTERVAL

PointT = TypeVar("PointT")


###############################################################################
# QuadraticSolver
###############################################################################
class QuadraticSolver:
    """Closed form solver for a*t^2 + b*t + c = 0."""

    @staticmethod
    def solve(a: Any, b: Any, c: Any) -> Optional[Tuple[Any, Any]]:
        """
        Solve the quadratic equation with the given coefficients.

        The roots are not ordered: the first root uses +sqrt(discriminant),
        the second one -sqrt(discriminant).

        Args:
            a: Quadratic coefficient
            b: Linear coefficient
            c: Constant coefficient

        Returns:
            Tuple with both roots, or None if _a_ is zero or the discriminant
            (b^2 - 4ac) is negative.
        """
        if a == 0:
            return None

        discriminant = (b * b) - (4 * a * c)
        if discriminant < 0:
            return None
        delta = np.sqrt(discriminant)

        a2 = a * 2

        t0 = (-b + delta) / a2
        t1 = (-b - delta) / a2

        return (t0, t1)


def solve_axis(a: Any, b: Any, c: Any) -> Tuple[Any, ...]:
    """
    Candidate solutions of a*t^2 + b*t + c = 0 for a single axis.

    Degrades from quadratic to linear (b*t + c = 0) when _a_ is zero, and to the
    constant candidate -c when _b_ is zero as well. An unsolvable quadratic yields
    (-1, -1) which lies outside of every curve's input range.

    Returns:
        Tuple of one (linear, constant) or two (quadratic) candidates, unfiltered.
    """
    if a != 0:
        return QuadraticSolver.solve(a, b, c) or (-1, -1)
    if b != 0:
        return (-c / b,)
    return (-c,)


def in_unit_interval(t: Any) -> bool:
    """Check if _t_ lies within [0, 1]."""
    return UNIT_INTERVAL[0] <= t <= UNIT_INTERVAL[1]


###############################################################################
# Binary search refinement
###############################################################################
def binary_search_input(
    minimum: Any,
    maximum: Any,
    current: Tuple[Any, Any],
    max_iterations: int,
    error_at: Callable[[Any, Any], Optional[Any]],
) -> Any:
    """
    Refine an input by bisecting [minimum, maximum] driven by an error function.

    Each round evaluates `error_at(pivot, current_error)` at the midpoint of the
    current range. A smaller error narrows the range to [start, pivot], a larger
    one to [pivot, end]; in both cases the pivot becomes the current input.
    The search stops when `error_at` returns None, when the error equals the
    current error (a constant stretch, no pivot can be derived from there), or
    after _max_iterations_ rounds.

    Args:
        minimum: Lower bound of the bracketing range
        maximum: Upper bound of the bracketing range
        current: Tuple (input, error) to start with
        max_iterations: Maximal number of accepted rounds
        error_at: Callable (input, current_error) -> new error or None

    Returns:
        The current input when the search stopped. This is the best effort
        result and never fails; if no round ran it is the input of _current_.
    """
    current_input, current_error = current
    start, end = minimum, maximum

    iterations = 0
    while iterations < max_iterations:
        pivot = (start + end) / 2
        next_error = error_at(pivot, current_error)
        if next_error is None:
            break
        iterations += 1

        if next_error == current_error:
            break

        if next_error < current_error:
            end = pivot
        elif next_error > current_error:
            start = pivot

        current_input, current_error = pivot, next_error

    return current_input


###############################################################################
# Derivatives
###############################################################################
def derive(points: Sequence[PointT]) -> List[PointT]:
    """Control points of the derivative of a Bezier curve with the given control points.

    The result describes a curve of one degree less: n * (P[i+1] - P[i]).
    """
    if not points:
        return list(points)

    degree = float(len(points) - 1)
    return [degree * (pn - p) for pn, p in zip(points[1:], points[:-1])]


def derive_all(points: Sequence[PointT]) -> List[List[PointT]]:
    """All derivatives of a Bezier curve, first derivative first, down to a single (constant) point."""
    result: List[List[PointT]] = []

    current = list(points)
    while len(current) > 1:
        current = derive(current)
        result.append(current)

    return result
