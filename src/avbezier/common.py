"""Central module containing shared types and exceptions for Bezier curve handling."""

from __future__ import annotations

from typing import Tuple, TypeVar

###############################################################################
# Types
###############################################################################


PointT = TypeVar("PointT")  # Output type of a curve, usually an AvPoint2D or AvPoint2F

# Pair of (minimum, maximum) outputs describing an axis-aligned bounding region
BoundingRegion = Tuple[PointT, PointT]

# Pair of (input on first curve, input on second curve) describing an approximate intersection
IntersectionPair = Tuple[float, float]


###############################################################################
# Exceptions
###############################################################################


class BezierError(Exception):
    """Base exception for errors raised by the avbezier package."""


class PointIndexError(BezierError, IndexError):
    """Raised when a control point or lookup table entry is indexed out of range."""


class InvalidStepsError(BezierError, ValueError):
    """Raised when a negative sampling resolution is requested."""


###############################################################################
# Functions
###############################################################################


def check_index(index: int, count: int, owner: str) -> int:
    """Validate that _index_ addresses one of _count_ items of _owner_.

    Negative indices are not wrapped around.

    Raises:
        PointIndexError: If index is outside of [0, count).
    """
    if index < 0 or index >= count:
        raise PointIndexError(f"Cannot index a {owner} with an index of {index}.")
    return index


def check_steps(steps: int) -> int:
    """Validate a sampling resolution.

    Raises:
        InvalidStepsError: If steps is negative.
    """
    if steps < 0:
        raise InvalidStepsError(f"steps must be non-negative, got {steps}")
    return steps


def main() -> None:
    """Show the exception hierarchy of the package."""
    for exc in (BezierError, PointIndexError, InvalidStepsError):
        print(exc.__name__, "->", [base.__name__ for base in exc.__mro__[1:-1]])


if __name__ == "__main__":
    main()
