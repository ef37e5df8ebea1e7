"""Cubic Bezier curves"""

from __future__ import annotations

from typing import Any, List, NamedTuple, Optional, Sequence, Tuple

from avbezier.common import BoundingRegion
from avbezier.curve import BoundedBezierCurve, check_point_count, de_casteljau_split, point_at
from avbezier.quadratic import QuadBezier
from avbezier.solver import derive, in_unit_interval, solve_axis


class CubicRoots(NamedTuple):
    """Inputs in [0, 1] at which the derivative of a cubic curve is zero, up to two per axis."""

    x0: Optional[float]
    x1: Optional[float]
    y0: Optional[float]
    y1: Optional[float]


class CubicExtremas(NamedTuple):
    """Per axis value profiles of a cubic curve."""

    x: "CubicBezier"
    y: "CubicBezier"


def _roots_in_range(candidates: Sequence[Any]) -> List[Optional[float]]:
    """Two slots filled with the candidates of _candidates_ that lie in [0, 1], None otherwise."""
    result: List[Optional[float]] = [None, None]
    for i, t in enumerate(candidates[:2]):
        if in_unit_interval(t):
            result[i] = t
    return result


###############################################################################
# CubicBezier
###############################################################################
class CubicBezier(BoundedBezierCurve):
    """
    A cubic Bezier curve defined by start point p0, control points p1, p2 and end point p3.

    The polynomial coefficients are computed once when the curve is created:
    B(t) = p0 + c*t + b*t^2 + a*t^3
    """

    POINT_COUNT = 4

    def __init__(self, p0: Any, p1: Any, p2: Any, p3: Any):
        self._points: Tuple[Any, Any, Any, Any] = (p0, p1, p2, p3)

        self._a = (-p0) + (3 * p1) - (3 * p2) + p3
        self._b = (3 * p0) - (6 * p1) + (3 * p2)
        self._c = (-3 * p0) + (3 * p1)

    @classmethod
    def from_points(cls, points: Sequence[Any]) -> CubicBezier:
        """Create a cubic curve from a sequence of exactly four points.

        Raises:
            ValueError: If the number of points is not four.
        """
        return cls(*check_point_count(points, cls.POINT_COUNT, cls.__name__))

    @property
    def p0(self) -> Any:
        return self._points[0]

    @property
    def p1(self) -> Any:
        return self._points[1]

    @property
    def p2(self) -> Any:
        return self._points[2]

    @property
    def p3(self) -> Any:
        return self._points[3]

    @property
    def point_count(self) -> int:
        return self.POINT_COUNT

    def __getitem__(self, index: int) -> Any:
        return point_at(self._points, index, type(self).__name__)

    def _with_points(self, points: Sequence[Any]) -> CubicBezier:
        return type(self).from_points(points)

    def compute(self, t: float) -> Any:
        t2 = t * t
        t3 = t2 * t

        return self.p0 + self._c * t + self._b * t2 + self._a * t3

    def split(self, t: float) -> Tuple[CubicBezier, CubicBezier]:
        left, right = de_casteljau_split(self._points, t)
        return type(self).from_points(left), type(self).from_points(right)

    def derivate(self) -> QuadBezier:
        """The derivative of this curve as quadratic curve: 3(p1-p0), 3(p2-p1), 3(p3-p2)."""
        return QuadBezier.from_points(derive(self._points))

    def normal(self, t: float) -> Any:
        """Normal vector (not normalized) at input _t_, the derivative rotated clockwise."""
        return self.derivate().compute(t).right_rotated()

    def _derivative_coefficients(self) -> Tuple[Any, Any, Any]:
        # B'(t) = 3a*t^2 + 2b*t + c
        return self._a * 3, self._b * 2, self._c

    def roots(self) -> CubicRoots:
        """
        Inputs at which the derivative of this curve is zero, for x and y separately.

        The derivative is solved as quadratic, degrading to a linear and a
        constant equation if its leading coefficients vanish. Roots outside of
        [0, 1] are reported as None.
        """
        a, b, c = self._derivative_coefficients()
        x0, x1 = _roots_in_range(solve_axis(a.x, b.x, c.x))
        y0, y1 = _roots_in_range(solve_axis(a.y, b.y, c.y))
        return CubicRoots(x0, x1, y0, y1)

    def bounding_region(self) -> BoundingRegion:
        """
        Tight bounding region of this curve.

        Starts from the end points and extends by the curve points at the roots
        of the derivative.
        """
        point_type = type(self.p0)
        minimum = point_type.pointwise_min(self.p0, self.p3)
        maximum = point_type.pointwise_max(self.p0, self.p3)

        for t in self.roots():
            if t is None:
                continue
            point = self.compute(t)
            minimum = point_type.pointwise_min(minimum, point)
            maximum = point_type.pointwise_max(maximum, point)

        return (minimum, maximum)

    def extremas(self) -> CubicExtremas:
        """
        Value profiles of the x and the y coordinate as curves of their own.

        Control point i of each profile is (i / 3, coordinate of p_i).
        """
        point_type = type(self.p0)
        degree = self.POINT_COUNT - 1
        x_points = [point_type(i / degree, point.x) for i, point in enumerate(self._points)]
        y_points = [point_type(i / degree, point.y) for i, point in enumerate(self._points)]
        return CubicExtremas(type(self).from_points(x_points), type(self).from_points(y_points))
