"""Linear Bezier curves, i.e. line segments."""

from __future__ import annotations

from typing import Any, Sequence, Tuple

from avbezier.common import BoundingRegion
from avbezier.curve import BoundedBezierCurve, check_point_count, de_casteljau_split, point_at


###############################################################################
# LinearBezier
###############################################################################
class LinearBezier(BoundedBezierCurve):
    """A line segment from p0 to p1."""

    POINT_COUNT = 2

    def __init__(self, p0: Any, p1: Any):
        self._points: Tuple[Any, Any] = (p0, p1)

    @classmethod
    def from_points(cls, points: Sequence[Any]) -> LinearBezier:
        """Create a line from a sequence of exactly two points.

        Raises:
            ValueError: If the number of points is not two.
        """
        return cls(*check_point_count(points, cls.POINT_COUNT, cls.__name__))

    @property
    def p0(self) -> Any:
        """Start point."""
        return self._points[0]

    @property
    def p1(self) -> Any:
        """End point."""
        return self._points[1]

    @property
    def point_count(self) -> int:
        return self.POINT_COUNT

    def __getitem__(self, index: int) -> Any:
        return point_at(self._points, index, type(self).__name__)

    def _with_points(self, points: Sequence[Any]) -> LinearBezier:
        return type(self).from_points(points)

    def compute(self, t: float) -> Any:
        return self.p0 * (1 - t) + self.p1 * t

    def split(self, t: float) -> Tuple[LinearBezier, LinearBezier]:
        left, right = de_casteljau_split(self._points, t)
        return type(self).from_points(left), type(self).from_points(right)

    def bounding_region(self) -> BoundingRegion:
        point_type = type(self.p0)
        return (point_type.pointwise_min(self.p0, self.p1), point_type.pointwise_max(self.p0, self.p1))

    def length(self) -> float:
        """Exact length of the segment."""
        return float(self.p0.distance(self.p1))
