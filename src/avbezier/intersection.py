"""Approximate intersections between two curves by recursive bounding box subdivision."""

from __future__ import annotations

import logging
import math
from typing import Any, List, Tuple

from avbezier.common import IntersectionPair
from avbezier.consts import INTERSECTION_DEPTH_MARGIN, INTERSECTION_MAX_DEPTH
from avbezier.geom import AvBox

logger = logging.getLogger(__name__)

InputRange = Tuple[float, float]


def _left_of(period: InputRange) -> InputRange:
    span = period[1] - period[0]
    return (period[0], period[0] + span / 2)


def _right_of(period: InputRange) -> InputRange:
    span = period[1] - period[0]
    return (period[0] + span / 2, period[1])


def _midpoint(period: InputRange) -> float:
    return (period[0] + period[1]) / 2


def max_subdivision_depth(box1: AvBox, box2: AvBox, threshold: float) -> int:
    """
    Number of halvings after which the subdivision is stopped.

    Derived from how often the larger box extent has to be halved to reach
    _threshold_, plus a margin, capped by INTERSECTION_MAX_DEPTH.
    """
    extent = max(box1.width, box1.height, box2.width, box2.height)
    if not threshold > 0 or not math.isfinite(extent):
        return INTERSECTION_MAX_DEPTH
    if extent <= threshold:
        return INTERSECTION_DEPTH_MARGIN

    depth = math.ceil(math.log2(extent / threshold)) + INTERSECTION_DEPTH_MARGIN
    return min(depth, INTERSECTION_MAX_DEPTH)


def approximate_intersection(curve: Any, other: Any, threshold: float) -> List[IntersectionPair]:
    """
    Approximate the intersections of two bounded curves.

    Both curves are halved again and again; pairs of halves whose bounding boxes
    do not overlap are discarded. Once both boxes fit within _threshold_ on both
    axes, the midpoints of the input ranges of the two halves are reported.
    Sub-ranges are tracked so the reported inputs refer to the original curves.
    Pairs are visited depth-first in the order left/left, left/right,
    right/left, right/right.

    Args:
        curve: First curve, providing `bounding_region()` and `split(t)`
        other: Second curve, providing `bounding_region()` and `split(t)`
        threshold: Box size at which a pair of halves counts as intersection

    Returns:
        List of (t_curve, t_other) pairs. Intersections close to the border of
        boxes are usually reported several times.
    """
    root_box = AvBox.from_region(curve.bounding_region())
    root_other_box = AvBox.from_region(other.bounding_region())
    max_depth = max_subdivision_depth(root_box, root_other_box, threshold)

    result: List[IntersectionPair] = []
    stack = [(curve, (curve.start_input, curve.end_input), other, (other.start_input, other.end_input), 0)]
    visited = 0
    depth_capped = 0

    while stack:
        lhs, lhs_range, rhs, rhs_range, depth = stack.pop()
        visited += 1

        lhs_box = AvBox.from_region(lhs.bounding_region())
        rhs_box = AvBox.from_region(rhs.bounding_region())
        if not lhs_box.overlaps(rhs_box):
            continue

        if lhs_box.fits_within(threshold) and rhs_box.fits_within(threshold):
            result.append((_midpoint(lhs_range), _midpoint(rhs_range)))
            continue
        if depth >= max_depth:
            depth_capped += 1
            result.append((_midpoint(lhs_range), _midpoint(rhs_range)))
            continue

        lhs_left, lhs_right = lhs.split(0.5)
        rhs_left, rhs_right = rhs.split(0.5)

        # pushed in reverse order so left/left is processed first
        stack.append((lhs_right, _right_of(lhs_range), rhs_right, _right_of(rhs_range), depth + 1))
        stack.append((lhs_right, _right_of(lhs_range), rhs_left, _left_of(rhs_range), depth + 1))
        stack.append((lhs_left, _left_of(lhs_range), rhs_right, _right_of(rhs_range), depth + 1))
        stack.append((lhs_left, _left_of(lhs_range), rhs_left, _left_of(rhs_range), depth + 1))

    if depth_capped:
        logger.warning(
            "Intersection subdivision reached depth %d for %d pair(s) before fitting threshold %s",
            max_depth,
            depth_capped,
            threshold,
        )
    logger.debug("Intersection visited %d pairs, found %d candidates", visited, len(result))
    return result
