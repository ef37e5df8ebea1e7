"""Quadratic Bezier curves"""

from __future__ import annotations

from typing import Any, NamedTuple, Optional, Sequence, Tuple

from avbezier.common import BoundingRegion
from avbezier.curve import BoundedBezierCurve, check_point_count, de_casteljau_split, point_at
from avbezier.linear import LinearBezier
from avbezier.solver import derive, in_unit_interval


class QuadRoots(NamedTuple):
    """Inputs in [0, 1] at which the derivative of a quadratic curve is zero, per axis."""

    x: Optional[float]
    y: Optional[float]


class QuadExtremas(NamedTuple):
    """Per axis value profiles of a quadratic curve."""

    x: "QuadBezier"
    y: "QuadBezier"


###############################################################################
# QuadBezier
###############################################################################
class QuadBezier(BoundedBezierCurve):
    """
    A quadratic Bezier curve defined by start point p0, control point p1 and end point p2.

    B(t) = (1-t)^2 * p0 + 2t(1-t) * p1 + t^2 * p2
    """

    POINT_COUNT = 3

    def __init__(self, p0: Any, p1: Any, p2: Any):
        self._points: Tuple[Any, Any, Any] = (p0, p1, p2)

    @classmethod
    def from_points(cls, points: Sequence[Any]) -> QuadBezier:
        """Create a quadratic curve from a sequence of exactly three points.

        Raises:
            ValueError: If the number of points is not three.
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
    def point_count(self) -> int:
        return self.POINT_COUNT

    def __getitem__(self, index: int) -> Any:
        return point_at(self._points, index, type(self).__name__)

    def _with_points(self, points: Sequence[Any]) -> QuadBezier:
        return type(self).from_points(points)

    def compute(self, t: float) -> Any:
        t2 = t * t
        m_t = 1 - t
        m_t2 = m_t * m_t

        a = self.p0 * m_t2
        b = self.p1 * (2 * t * m_t)
        c = self.p2 * t2

        return a + b + c

    def split(self, t: float) -> Tuple[QuadBezier, QuadBezier]:
        left, right = de_casteljau_split(self._points, t)
        return type(self).from_points(left), type(self).from_points(right)

    def derivate(self) -> LinearBezier:
        """The derivative of this curve as line: 2(p1-p0), 2(p2-p1)."""
        return LinearBezier.from_points(derive(self._points))

    def normal(self, t: float) -> Any:
        """Normal vector (not normalized) at input _t_, the derivative rotated clockwise."""
        return self.derivate().compute(t).right_rotated()

    def roots(self) -> QuadRoots:
        """
        Inputs at which the derivative of this curve is zero, for x and y separately.

        The derivative of a quadratic is linear, so every axis has at most one
        root. Roots outside of [0, 1] are reported as None.
        """
        derivative = self.derivate()
        a = derivative[0]
        dividend = derivative[1] - a

        x = None
        if dividend.x != 0:
            t = -a.x / dividend.x
            if in_unit_interval(t):
                x = t

        y = None
        if dividend.y != 0:
            t = -a.y / dividend.y
            if in_unit_interval(t):
                y = t

        return QuadRoots(x, y)

    def bounding_region(self) -> BoundingRegion:
        """
        Tight bounding region of this curve.

        Starts from the end points and extends by the curve points at the roots
        of the derivative.
        """
        point_type = type(self.p0)
        minimum = point_type.pointwise_min(self.p0, self.p2)
        maximum = point_type.pointwise_max(self.p0, self.p2)

        for t in self.roots():
            if t is None:
                continue
            point = self.compute(t)
            minimum = point_type.pointwise_min(minimum, point)
            maximum = point_type.pointwise_max(maximum, point)

        return (minimum, maximum)

    def extremas(self) -> QuadExtremas:
        """
        Value profiles of the x and the y coordinate as curves of their own.

        Control point i of each profile is (i / 2, coordinate of p_i).
        """
        point_type = type(self.p0)
        degree = self.POINT_COUNT - 1
        x_points = [point_type(i / degree, point.x) for i, point in enumerate(self._points)]
        y_points = [point_type(i / degree, point.y) for i, point in enumerate(self._points)]
        return QuadExtremas(type(self).from_points(x_points), type(self).from_points(y_points))
