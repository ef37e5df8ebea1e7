"""Point types used as control points and outputs of Bezier curves."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Iterator, Tuple, Union

import numpy as np

if TYPE_CHECKING:
    from avbezier.linear import LinearBezier


def _ieee_divide(dividend: Any, divisor: Any) -> Any:
    """Divide following IEEE 754 semantics, i.e. x/0 gives inf or nan instead of raising."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.true_divide(dividend, divisor)


###############################################################################
# AvPointBase
###############################################################################
class AvPointBase(ABC):
    """Vector space contract every control point type has to fulfill.

    Implementations are immutable values: every operation returns a new point.
    Scalars are converted using the class attribute `_scalar`, which decides the
    floating point precision of the point type.
    """

    _scalar: Callable[[Any], Any] = float

    @abstractmethod
    def __add__(self, other: AvPointBase) -> AvPointBase: ...

    @abstractmethod
    def __sub__(self, other: AvPointBase) -> AvPointBase: ...

    @abstractmethod
    def __neg__(self) -> AvPointBase: ...

    @abstractmethod
    def __mul__(self, other: Union[AvPointBase, float]) -> AvPointBase: ...

    @abstractmethod
    def __rmul__(self, other: float) -> AvPointBase: ...

    @abstractmethod
    def __truediv__(self, other: Union[AvPointBase, float]) -> AvPointBase: ...

    @abstractmethod
    def dot(self, other: AvPointBase) -> Any:
        """Dot product of this point with _other_."""

    @abstractmethod
    def lerp(self, end: AvPointBase, factor: float) -> AvPointBase:
        """Linearly interpolate between this point and _end_ by _factor_."""

    @classmethod
    @abstractmethod
    def pointwise_min(cls, v1: AvPointBase, v2: AvPointBase) -> AvPointBase:
        """Point made of the component-wise minimum of _v1_ and _v2_."""

    @classmethod
    @abstractmethod
    def pointwise_max(cls, v1: AvPointBase, v2: AvPointBase) -> AvPointBase:
        """Point made of the component-wise maximum of _v1_ and _v2_."""

    @property
    def magnitude_squared(self) -> Any:
        """Squared length of the vector from origin to this point."""
        return self.dot(self)

    @property
    def magnitude(self) -> Any:
        """Length of the vector from origin to this point."""
        return self._scalar(np.sqrt(self.dot(self)))

    def distance_squared(self, other: AvPointBase) -> Any:
        """Squared distance from this point to _other_."""
        return (self - other).magnitude_squared

    def distance(self, other: AvPointBase) -> Any:
        """Distance from this point to _other_."""
        return self._scalar(np.sqrt(self.distance_squared(other)))


###############################################################################
# AvPoint2D
###############################################################################
@dataclass(frozen=True)
class AvPoint2D(AvPointBase):
    """
    A 2D point with double precision (float64) scalars.

    Attributes:
        x (float): The x-coordinate.
        y (float): The y-coordinate.
    """

    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, "x", self._scalar(self.x))
        object.__setattr__(self, "y", self._scalar(self.y))

    @classmethod
    def zero(cls) -> AvPoint2D:
        """The point (0, 0)."""
        return cls(0.0, 0.0)

    @classmethod
    def repeating(cls, scalar: float) -> AvPoint2D:
        """A point with _scalar_ in both coordinates."""
        return cls(scalar, scalar)

    def __iter__(self) -> Iterator[Any]:
        yield self.x
        yield self.y

    def as_tuple(self) -> Tuple[float, float]:
        """The point as plain (x, y) tuple of Python floats."""
        return (float(self.x), float(self.y))

    def __add__(self, other: AvPointBase) -> AvPoint2D:
        if not isinstance(other, AvPoint2D):
            return NotImplemented
        return type(self)(self.x + other.x, self.y + other.y)

    def __sub__(self, other: AvPointBase) -> AvPoint2D:
        if not isinstance(other, AvPoint2D):
            return NotImplemented
        return type(self)(self.x - other.x, self.y - other.y)

    def __neg__(self) -> AvPoint2D:
        return type(self)(-self.x, -self.y)

    def __mul__(self, other: Union[AvPointBase, float]) -> AvPoint2D:
        if isinstance(other, AvPoint2D):
            return type(self)(self.x * other.x, self.y * other.y)
        scalar = self._scalar(other)
        return type(self)(self.x * scalar, self.y * scalar)

    def __rmul__(self, other: float) -> AvPoint2D:
        scalar = self._scalar(other)
        return type(self)(scalar * self.x, scalar * self.y)

    def __truediv__(self, other: Union[AvPointBase, float]) -> AvPoint2D:
        if isinstance(other, AvPoint2D):
            return type(self)(_ieee_divide(self.x, other.x), _ieee_divide(self.y, other.y))
        scalar = self._scalar(other)
        return type(self)(_ieee_divide(self.x, scalar), _ieee_divide(self.y, scalar))

    def dot(self, other: AvPointBase) -> float:
        return self.x * other.x + self.y * other.y

    def lerp(self, end: AvPointBase, factor: float) -> AvPoint2D:
        # factor stays a double for every scalar precision, it is converted within __mul__
        return self * (1 - factor) + end * factor

    @classmethod
    def pointwise_min(cls, v1: AvPointBase, v2: AvPointBase) -> AvPoint2D:
        return cls(min(v1.x, v2.x), min(v1.y, v2.y))

    @classmethod
    def pointwise_max(cls, v1: AvPointBase, v2: AvPointBase) -> AvPoint2D:
        return cls(max(v1.x, v2.x), max(v1.y, v2.y))

    def rotated(self, angle: float) -> AvPoint2D:
        """Rotate this point around the origin by _angle_ (radians, counter-clockwise)."""
        c = self._scalar(math.cos(angle))
        s = self._scalar(math.sin(angle))
        return type(self)((c * self.x) - (s * self.y), (s * self.x) + (c * self.y))

    def left_rotated(self) -> AvPoint2D:
        """Rotate this point by 90 degrees counter-clockwise around the origin."""
        return type(self)(-self.y, self.x)

    def right_rotated(self) -> AvPoint2D:
        """Rotate this point by 90 degrees clockwise around the origin."""
        return type(self)(self.y, -self.x)

    def angle(self) -> float:
        """Angle of the vector from origin to this point, i.e. atan2(y, x)."""
        return self._scalar(math.atan2(self.y, self.x))

    def transposed(self, line: LinearBezier) -> AvPoint2D:
        """
        Translate and rotate this point into the coordinate frame of _line_.

        The start of the line becomes the origin and the direction of the line
        becomes the positive x-axis.

        Args:
            line (LinearBezier): The baseline to align to.

        Returns:
            AvPoint2D: The transformed point
        """
        direction = line[1] - line[0]
        return (self - line[0]).rotated(-direction.angle())


###############################################################################
# AvPoint2F
###############################################################################
@dataclass(frozen=True)
class AvPoint2F(AvPoint2D):
    """A 2D point with single precision (numpy float32) scalars."""

    _scalar = np.float32


def main():
    """Main"""
    p0 = AvPoint2D(5.0, 13.0)
    p1 = AvPoint2D(15.0, 13.0)
    print(p0, "+", p1, "=", p0 + p1)
    print("lerp(0.25):", p0.lerp(p1, 0.25))
    print("rotated(pi/2):", p0.rotated(math.pi / 2))
    print("float32:", AvPoint2F(1.0, 2.0) * 0.1)


if __name__ == "__main__":
    main()
