"""Base classes shared by all Bezier curve degrees."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray
from scipy.special import comb

from avbezier.common import BoundingRegion, IntersectionPair, check_index, check_steps
from avbezier.consts import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_STEPS,
    DEFAULT_TOLERANCE,
    LENGTH_GAUSS_ORDER,
    REFINE_SLOPE_STEP,
)
from avbezier.intersection import approximate_intersection
from avbezier.lookup import AvLookUpTable, LookUpEntry
from avbezier.solver import binary_search_input

logger = logging.getLogger(__name__)

# Gauss-Legendre nodes on [-1, 1] used to integrate the arc length
_GAUSS_ABSCISSAE, _GAUSS_WEIGHTS = (nodes.tolist() for nodes in np.polynomial.legendre.leggauss(LENGTH_GAUSS_ORDER))


###############################################################################
# De Casteljau
###############################################################################
def de_casteljau(points: Sequence[Any], factor: float) -> Any:
    """
    Evaluate a Bezier curve of arbitrary degree using De Casteljau's algorithm.

    Slower than the polynomial form but numerically stable.

    Args:
        points: Control points, at least two
        factor: Curve input, values outside of [0, 1] extrapolate

    Returns:
        The point on the curve at _factor_
    """
    if len(points) < 2:
        raise ValueError("De Casteljau's algorithm requires at least two control points.")

    work = list(points)
    count = len(work)
    for j in range(1, count):
        for k in range(count - j):
            work[k] = work[k].lerp(work[k + 1], factor)

    return work[0]


def de_casteljau_split(points: Sequence[Any], factor: float) -> Tuple[List[Any], List[Any]]:
    """
    Control points of the two curves created by splitting a Bezier curve at _factor_.

    The first points of each De Casteljau level form the left curve, the last
    points (in reverse order) form the right curve.
    """
    work = list(points)
    left = [work[0]]
    right = [work[-1]]

    for _ in range(1, len(work)):
        work = [p.lerp(pn, factor) for p, pn in zip(work[:-1], work[1:])]
        left.append(work[0])
        right.append(work[-1])

    return left, right[::-1]


###############################################################################
# BezierCurve
###############################################################################
class BezierCurve(ABC):
    """Common interface and default operations of Bezier curves.

    Subclasses provide the primitives `point_count`, `__getitem__`, `compute` and
    `_with_points`; everything else is implemented once on top of them.
    """

    @property
    def start_input(self) -> float:
        """Minimal input that can be computed on this curve."""
        return 0.0

    @property
    def end_input(self) -> float:
        """Maximal input that can be computed on this curve."""
        return 1.0

    @property
    @abstractmethod
    def point_count(self) -> int:
        """Number of control points of this curve."""

    @abstractmethod
    def __getitem__(self, index: int) -> Any:
        """Control point at _index_; raises PointIndexError if out of range."""

    @abstractmethod
    def compute(self, t: float) -> Any:
        """Point on this curve at input _t_ using the fastest evaluation available."""

    @abstractmethod
    def _with_points(self, points: Sequence[Any]) -> BezierCurve:
        """New curve of the same degree with the given control points."""

    @property
    def points(self) -> List[Any]:
        """The control points of this curve."""
        return [self[i] for i in range(self.point_count)]

    def __len__(self) -> int:
        return self.point_count

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.points == other.points  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, tuple(self.points)))

    def __repr__(self) -> str:
        args = ", ".join(f"p{i}={point}" for i, point in enumerate(self.points))
        return f"{type(self).__name__}({args})"

    ###########################################################################
    # Evaluation
    ###########################################################################
    def solve_de_casteljau(self, t: float) -> Any:
        """Point on this curve at input _t_ using De Casteljau's algorithm."""
        return de_casteljau(self.points, t)

    def translated(self, offset: Any) -> BezierCurve:
        """New curve with all control points moved by _offset_."""
        return self._with_points([point + offset for point in self.points])

    def _sample_inputs(self, steps: int) -> List[float]:
        """start_input, end_input and _steps_ evenly spaced inputs in between."""
        check_steps(steps)
        start, end = self.start_input, self.end_input
        total = steps + 1
        return [start + (end - start) * i / total for i in range(total + 1)]

    def compute_series(self, steps: int) -> List[Any]:
        """
        Compute _steps_ + 2 points evenly spaced in input space, including both end points.

        Raises:
            InvalidStepsError: If steps is negative.
        """
        return [self.compute(t) for t in self._sample_inputs(steps)]

    def create_lookup_table(self, steps: int) -> AvLookUpTable:
        """
        Create a lookup table of _steps_ + 2 (input, output) samples of this curve.

        Raises:
            InvalidStepsError: If steps is negative.
        """
        return AvLookUpTable((t, self.compute(t)) for t in self._sample_inputs(steps))

    def polygonize(self, steps: int) -> NDArray[np.float64]:
        """
        Polygonize this curve into _steps_ line segments.

        Evaluates the Bernstein form for all inputs at once, which is the fastest
        way to sample a curve densely. Requires 2D control points.

        Args:
            steps: Number of segments to divide the curve into

        Returns:
            NDArray[np.float64] of shape (steps+1, 2) containing the (x, y) points
        """
        check_steps(steps)
        control = np.array([point.as_tuple() for point in self.points], dtype=np.float64)
        degree = control.shape[0] - 1

        t = np.linspace(self.start_input, self.end_input, steps + 1, dtype=np.float64)[:, np.newaxis]
        i = np.arange(degree + 1)
        basis = comb(degree, i) * t**i * (1.0 - t) ** (degree - i)
        return basis @ control

    ###########################################################################
    # Length
    ###########################################################################
    def length(self) -> float:
        """
        Approximate arc length of this curve.

        Integrates |B'(t)| over [0, 1] with Gauss-Legendre quadrature:
        0.5 * sum(w_i * |B'(0.5 * x_i + 0.5)|).
        """
        derivative = self.derivate()  # type: ignore[attr-defined]

        z = 0.5
        total = 0.0
        for abscissa, weight in zip(_GAUSS_ABSCISSAE, _GAUSS_WEIGHTS):
            t = z * abscissa + z
            pt = derivative.compute(t)
            total += weight * float(np.sqrt(pt.dot(pt)))

        return z * total

    ###########################################################################
    # Approximation
    ###########################################################################
    def _refine_around(
        self,
        table: AvLookUpTable,
        index: int,
        error_of: Callable[[Any], Any],
        max_iterations: int,
        tolerance: float,
    ) -> Tuple[Any, Any, Any]:
        """
        Refine the input of table entry _index_ within the range of its neighbours.

        Bisects [previous input, next input] on the local slope of the error,
        estimated by a central difference around each midpoint: a rising error
        keeps the lower half, a falling one the upper half. The search stops
        after _max_iterations_ rounds, on a flat midpoint, or once the best
        error is below _tolerance_. Every evaluated sample competes for the
        result, so the refined sample is never worse than the table entry.

        Returns:
            Tuple (input, output, error) of the best sample.
        """
        closest: LookUpEntry = table[index]
        lower = table[max(index - 1, 0)].input
        upper = table[min(index + 1, len(table) - 1)].input
        best = [closest.input, closest.output, error_of(closest.output)]
        if lower == upper:
            return best[0], best[1], best[2]

        delta = (upper - lower) * REFINE_SLOPE_STEP

        def sample(t: float) -> Any:
            output = self.compute(t)
            error = error_of(output)
            if error < best[2]:
                best[:] = [t, output, error]
            return error

        def descent_at(t: float, score: int) -> Optional[int]:
            if best[2] < tolerance:
                return None
            sample(t)
            slope = sample(min(t + delta, upper)) - sample(max(t - delta, lower))
            if slope == 0:
                return None
            # a lower score narrows the range to its lower half
            return score - 1 if slope > 0 else score + 1

        binary_search_input(lower, upper, (closest.input, 0), max_iterations, descent_at)
        return best[0], best[1], best[2]

    def project_approximate(
        self,
        point: Any,
        steps: int = DEFAULT_STEPS,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        tolerance: float = DEFAULT_TOLERANCE,
    ) -> Tuple[float, Any]:
        """
        Approximate the closest point on this curve to _point_.

        Finds the closest sample of a lookup table with _steps_ resolution and
        refines it by binary search between its neighbouring samples, using the
        squared distance to _point_ as error.

        Args:
            point: The point to project onto this curve
            steps: Resolution of the lookup table
            max_iterations: Maximal number of refinement rounds
            tolerance: Squared distance considered close enough to stop refining

        Returns:
            Tuple (t, output) of the projected point.
        """
        table = self.create_lookup_table(steps)
        index = table.closest_entry_index_to_output(point)
        if index is None:
            return self.start_input, self.compute(self.start_input)

        t, output, _ = self._refine_around(
            table, index, point.distance_squared, max_iterations, tolerance
        )
        return t, output

    def approximate(
        self,
        producer: Callable[[Any], Any],
        steps: int = DEFAULT_STEPS,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        tolerance: float = DEFAULT_TOLERANCE,
    ) -> List[Tuple[float, Any]]:
        """
        Approximate all inputs at which _producer_ evaluated on this curve approaches zero.

        Every local minimum of _producer_ over a lookup table with _steps_
        resolution is refined by binary search between its neighbouring samples.
        Only results whose value is below _tolerance_ are returned.

        Args:
            producer: Non-negative continuous function of a curve output, e.g. abs(p.y)
            steps: Resolution of the lookup table
            max_iterations: Maximal number of refinement rounds per candidate
            tolerance: Acceptance threshold for the value of _producer_

        Returns:
            List of (t, output) tuples in table order; neighbouring candidates on
            flat stretches may yield near-duplicate results.
        """
        table = self.create_lookup_table(steps)
        candidates = table.approximate_to_zero(producer)

        result: List[Tuple[float, Any]] = []
        for index in candidates:
            t, output, error = self._refine_around(table, index, producer, max_iterations, tolerance)
            if error < tolerance:
                result.append((t, output))

        logger.debug("approximate: %d candidates, %d accepted", len(candidates), len(result))
        return result


###############################################################################
# BoundedBezierCurve
###############################################################################
class BoundedBezierCurve(BezierCurve):
    """A Bezier curve with 2D control points that can be tightly bounded."""

    @abstractmethod
    def bounding_region(self) -> BoundingRegion:
        """Tight axis-aligned bounding region as (minimum, maximum) points."""

    @abstractmethod
    def split(self, t: float) -> Tuple[BoundedBezierCurve, BoundedBezierCurve]:
        """Split this curve at input _t_ into a left and a right curve of the same degree."""

    def rotated(self, angle: float) -> BoundedBezierCurve:
        """New curve with all control points rotated around the origin by _angle_ (radians)."""
        return self._with_points([point.rotated(angle) for point in self.points])  # type: ignore[return-value]

    def aligned(self, line: Any) -> BoundedBezierCurve:
        """
        New curve translated and rotated such that _line_ becomes the positive x-axis.

        Args:
            line (LinearBezier): Baseline; its start maps to the origin.
        """
        return self._with_points([point.transposed(line) for point in self.points])  # type: ignore[return-value]

    def approximate_intersection(self, other: BoundedBezierCurve, threshold: float) -> List[IntersectionPair]:
        """
        Approximate the intersections of this curve with _other_.

        See `avbezier.intersection.approximate_intersection`.

        Returns:
            List of (t_self, t_other) pairs; near-duplicates are to be expected.
        """
        return approximate_intersection(self, other, threshold)


def check_point_count(points: Sequence[Any], count: int, owner: str) -> Sequence[Any]:
    """Validate the number of control points handed to a curve constructor.

    Raises:
        ValueError: If the number of points does not match _count_.
    """
    if len(points) != count:
        raise ValueError(f"{owner} requires exactly {count} control points, got {len(points)}.")
    return points


def point_at(points: Sequence[Any], index: int, owner: str) -> Any:
    """Control point _index_ of _points_; raises PointIndexError if out of range."""
    return points[check_index(index, len(points), owner)]
