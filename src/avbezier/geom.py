"""Handling axis-aligned boxes"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from avbezier.common import BoundingRegion


###############################################################################
# AvBox
###############################################################################
@dataclass
class AvBox:
    """
    Represents an axis-aligned rectangular box, e.g. the bounding region of a curve.

    Attributes:
        xmin (float): The minimum x-coordinate.
        ymin (float): The minimum y-coordinate.
        xmax (float): The maximum x-coordinate.
        ymax (float): The maximum y-coordinate.
    """

    _xmin: float
    _ymin: float
    _xmax: float
    _ymax: float

    def __init__(self, xmin: float, ymin: float, xmax: float, ymax: float):
        """Initialize AvBox with coordinates.

        Args:
            xmin: The minimum x-coordinate
            ymin: The minimum y-coordinate
            xmax: The maximum x-coordinate
            ymax: The maximum y-coordinate
        """
        self._xmin = xmin
        self._ymin = ymin
        self._xmax = xmax
        self._ymax = ymax

        # Normalize coordinates to ensure xmin ≤ xmax and ymin ≤ ymax
        if self._xmin > self._xmax:
            self._xmin, self._xmax = self._xmax, self._xmin
        if self._ymin > self._ymax:
            self._ymin, self._ymax = self._ymax, self._ymin

    @classmethod
    def from_region(cls, region: BoundingRegion[Any]) -> AvBox:
        """Create an AvBox from a (minimum, maximum) pair of points."""
        minimum, maximum = region
        return cls(xmin=float(minimum.x), ymin=float(minimum.y), xmax=float(maximum.x), ymax=float(maximum.y))

    @property
    def xmin(self) -> float:
        """float: The minimum x-coordinate."""
        return self._xmin

    @property
    def ymin(self) -> float:
        """float: The minimum y-coordinate."""
        return self._ymin

    @property
    def xmax(self) -> float:
        """float: The maximum x-coordinate."""
        return self._xmax

    @property
    def ymax(self) -> float:
        """float: The maximum y-coordinate."""
        return self._ymax

    @property
    def width(self) -> float:
        """float: The width of the box (difference between xmax and xmin)."""

        return self._xmax - self._xmin

    @property
    def height(self) -> float:
        """float: The height of the box (difference between ymax and ymin)."""

        return self._ymax - self._ymin

    def overlaps(self, other: AvBox) -> bool:
        """Check if this box and _other_ share at least one point (touching counts)."""
        return (
            self._xmin <= other.xmax
            and self._xmax >= other.xmin
            and self._ymin <= other.ymax
            and self._ymax >= other.ymin
        )

    def fits_within(self, threshold: float) -> bool:
        """Check if neither width nor height of this box exceed _threshold_."""
        return self.width <= threshold and self.height <= threshold
