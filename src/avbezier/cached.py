"""Memoizing wrapper around a Bezier curve."""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, TypeVar

from avbezier.common import BoundingRegion
from avbezier.cubic import CubicBezier
from avbezier.curve import BezierCurve, BoundedBezierCurve
from avbezier.linear import LinearBezier
from avbezier.lookup import AvLookUpTable
from avbezier.quadratic import QuadBezier

logger = logging.getLogger(__name__)

ValueT = TypeVar("ValueT")


###############################################################################
# CachedBezier
###############################################################################
class CachedBezier(BoundedBezierCurve):
    """
    Wraps a curve and memoizes its expensive derived values.

    Series and lookup tables are cached per resolution (steps), the bounding
    region and the length in a slot of their own. Every value is computed at
    most once until `flush_cached_values` is called. Cheap primitives such as
    `compute`, indexing and the input range are forwarded without caching.

    A re-entrant lock guards the cache, so concurrent callers asking for the
    same value trigger a single computation.
    """

    def __init__(self, bezier: BoundedBezierCurve):
        self._bezier = bezier
        self._lock = threading.RLock()

        self._series: Dict[int, Tuple[Any, ...]] = {}
        self._tables: Dict[int, AvLookUpTable] = {}
        self._bounding_region: Optional[BoundingRegion] = None
        self._length: Optional[float] = None

    @classmethod
    def linear(cls, p0: Any, p1: Any) -> CachedBezier:
        """Cached line from p0 to p1."""
        return cls(LinearBezier(p0, p1))

    @classmethod
    def quadratic(cls, p0: Any, p1: Any, p2: Any) -> CachedBezier:
        """Cached quadratic curve."""
        return cls(QuadBezier(p0, p1, p2))

    @classmethod
    def cubic(cls, p0: Any, p1: Any, p2: Any, p3: Any) -> CachedBezier:
        """Cached cubic curve."""
        return cls(CubicBezier(p0, p1, p2, p3))

    @property
    def bezier(self) -> BoundedBezierCurve:
        """The wrapped curve."""
        return self._bezier

    def replace_bezier(self, bezier: BoundedBezierCurve) -> None:
        """Wrap _bezier_ instead of the current curve and drop all cached values."""
        with self._lock:
            self._bezier = bezier
            self.flush_cached_values()

    def flush_cached_values(self) -> None:
        """Drop all cached values."""
        with self._lock:
            self._series.clear()
            self._tables.clear()
            self._bounding_region = None
            self._length = None
        logger.debug("Flushed cached values of %r", self._bezier)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._bezier!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CachedBezier):
            return NotImplemented
        return self._bezier == other.bezier

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._bezier))

    ###########################################################################
    # Forwarded primitives
    ###########################################################################
    @property
    def start_input(self) -> float:
        return self._bezier.start_input

    @property
    def end_input(self) -> float:
        return self._bezier.end_input

    @property
    def point_count(self) -> int:
        return self._bezier.point_count

    def __getitem__(self, index: int) -> Any:
        return self._bezier[index]

    def compute(self, t: float) -> Any:
        return self._bezier.compute(t)

    def solve_de_casteljau(self, t: float) -> Any:
        return self._bezier.solve_de_casteljau(t)

    def split(self, t: float) -> Tuple[BoundedBezierCurve, BoundedBezierCurve]:
        return self._bezier.split(t)

    def derivate(self) -> BezierCurve:
        """Derivative of the wrapped curve (uncached)."""
        return self._bezier.derivate()  # type: ignore[attr-defined]

    def normal(self, t: float) -> Any:
        """Normal of the wrapped curve at input _t_ (uncached)."""
        return self._bezier.normal(t)  # type: ignore[attr-defined]

    def roots(self) -> Any:
        """Per axis roots of the derivative of the wrapped curve (uncached)."""
        return self._bezier.roots()  # type: ignore[attr-defined]

    def extremas(self) -> Any:
        """Per axis value curves of the wrapped curve (uncached)."""
        return self._bezier.extremas()  # type: ignore[attr-defined]

    def _with_points(self, points: Sequence[Any]) -> CachedBezier:
        # translated, rotated and aligned wrap the new curve with an empty cache
        return type(self)(self._bezier._with_points(points))  # pylint: disable=protected-access

    ###########################################################################
    # Cached values
    ###########################################################################
    def _cached(self, cache: Dict[int, ValueT], steps: int, producer: Callable[[int], ValueT], name: str) -> ValueT:
        with self._lock:
            if steps in cache:
                logger.debug("%s(%d): cache hit", name, steps)
                return cache[steps]
            logger.debug("%s(%d): cache miss", name, steps)
            value = producer(steps)
            cache[steps] = value
            return value

    def compute_series(self, steps: int) -> List[Any]:
        series = self._cached(self._series, steps, lambda s: tuple(self._bezier.compute_series(s)), "compute_series")
        return list(series)

    def create_lookup_table(self, steps: int) -> AvLookUpTable:
        return self._cached(self._tables, steps, self._bezier.create_lookup_table, "create_lookup_table")

    def bounding_region(self) -> BoundingRegion:
        with self._lock:
            if self._bounding_region is None:
                logger.debug("bounding_region: cache miss")
                self._bounding_region = self._bezier.bounding_region()
            return self._bounding_region

    def length(self) -> float:
        with self._lock:
            if self._length is None:
                logger.debug("length: cache miss")
                self._length = self._bezier.length()
            return self._length
