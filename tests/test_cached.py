"""Test module for CachedBezier in avbezier.cached

The tests are run using pytest.
"""

import math
import threading

import pytest
from bezier_fixtures import trapezoidal_cubic, wavy_cubic
from proxy_bezier import ProxyBezier

from avbezier.cached import CachedBezier
from avbezier.common import InvalidStepsError
from avbezier.cubic import CubicBezier
from avbezier.linear import LinearBezier
from avbezier.point import AvPoint2D
from avbezier.quadratic import QuadBezier


def make_sut():
    """Cached wavy cubic over a recording proxy."""
    proxy = ProxyBezier(wavy_cubic())
    return CachedBezier(proxy), proxy


###############################################################################
# Caching
###############################################################################


class TestCachedValues:
    """Every expensive value is computed at most once per parameter."""

    def test_compute_series(self):
        """Series are cached per steps."""
        sut, proxy = make_sut()

        for _ in range(3):
            sut.compute_series(10)
        sut.compute_series(11)
        sut.compute_series(11)

        assert proxy.series_calls == [10, 11]

    def test_create_lookup_table(self):
        """Lookup tables are cached per steps and the same table is returned."""
        sut, proxy = make_sut()

        first = sut.create_lookup_table(10)
        second = sut.create_lookup_table(10)
        sut.create_lookup_table(10)
        sut.create_lookup_table(12)

        assert first is second
        assert proxy.table_calls == [10, 12]

    def test_bounding_region(self):
        """The bounding region is computed once."""
        sut, proxy = make_sut()

        first = sut.bounding_region()
        second = sut.bounding_region()

        assert first == second == wavy_cubic().bounding_region()
        assert proxy.bounding_region_calls == 1

    def test_length(self):
        """The length is computed once."""
        sut, proxy = make_sut()

        assert sut.length() == pytest.approx(wavy_cubic().length())
        sut.length()

        assert proxy.length_calls == 1

    def test_project_approximate_reuses_lookup_table(self):
        """Repeated projections build a single lookup table."""
        sut, proxy = make_sut()

        first = sut.project_approximate(AvPoint2D(0.0, 0.0), steps=50)
        second = sut.project_approximate(AvPoint2D(0.0, 0.0), steps=50)

        assert first == second
        assert proxy.table_calls == [50]

    def test_flush(self):
        """After a flush every value is computed again."""
        sut, proxy = make_sut()

        sut.compute_series(11)
        sut.project_approximate(AvPoint2D(0.0, 0.0), steps=50)
        sut.bounding_region()
        sut.length()

        sut.flush_cached_values()

        sut.compute_series(11)
        sut.project_approximate(AvPoint2D(0.0, 0.0), steps=50)
        sut.bounding_region()
        sut.length()

        assert proxy.calls == [11, 50, 11, 50]
        assert proxy.bounding_region_calls == 2
        assert proxy.length_calls == 2

    def test_returned_series_is_a_copy(self):
        """Mutating a returned series leaves the cached series untouched."""
        sut, proxy = make_sut()

        first = sut.compute_series(3)
        first.clear()
        second = sut.compute_series(3)

        assert second == wavy_cubic().compute_series(3)
        assert len(second) == 5
        assert proxy.series_calls == [3]

    def test_errors_are_not_cached(self):
        """Invalid steps raise every time and leave the cache empty."""
        sut, proxy = make_sut()

        for _ in range(2):
            with pytest.raises(InvalidStepsError):
                sut.compute_series(-1)

        assert proxy.series_calls == [-1, -1]

    def test_concurrent_access_computes_once(self):
        """Concurrent callers asking for the same table trigger a single computation."""
        sut, proxy = make_sut()
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            sut.create_lookup_table(200)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert proxy.table_calls == [200]


###############################################################################
# Forwarding and replacement
###############################################################################


class TestCachedForwarding:
    """Cheap primitives are forwarded, transformations start with a fresh cache."""

    def test_forwards_primitives(self):
        """Test compute, indexing and the input range."""
        curve = wavy_cubic()
        sut = CachedBezier(curve)

        assert sut.point_count == 4
        assert sut[1] == curve.p1
        assert sut.points == curve.points
        assert sut.start_input == 0.0
        assert sut.end_input == 1.0
        assert sut.compute(0.3) == curve.compute(0.3)
        assert sut.solve_de_casteljau(0.3) == curve.solve_de_casteljau(0.3)
        assert sut.split(0.3) == curve.split(0.3)
        assert sut.derivate() == curve.derivate()
        assert sut == CachedBezier(wavy_cubic())
        assert repr(sut).startswith("CachedBezier(CubicBezier(")

    def test_forwards_degree_specific_operations(self):
        """Normal, roots and extremas of the wrapped cubic are available on the wrapper."""
        curve = wavy_cubic()
        sut = CachedBezier(curve)

        assert sut.normal(0.3) == curve.normal(0.3)
        assert sut.roots() == curve.roots()
        assert sut.extremas() == curve.extremas()

    def test_replace_bezier_flushes(self):
        """Replacing the wrapped curve drops all cached values."""
        sut = CachedBezier(wavy_cubic())
        sut.bounding_region()
        sut.length()

        sut.replace_bezier(trapezoidal_cubic())

        assert sut.bezier == trapezoidal_cubic()
        assert sut.bounding_region() == trapezoidal_cubic().bounding_region()
        assert sut.length() == pytest.approx(trapezoidal_cubic().length())

    def test_translated_returns_fresh_wrapper(self):
        """A translated curve does not see the bounding region of the original."""
        sut = CachedBezier(wavy_cubic())
        original_region = sut.bounding_region()

        moved = sut.translated(AvPoint2D(10.0, 0.0))

        assert isinstance(moved, CachedBezier)
        assert moved.bezier == wavy_cubic().translated(AvPoint2D(10.0, 0.0))
        assert moved.bounding_region() == wavy_cubic().translated(AvPoint2D(10.0, 0.0)).bounding_region()
        assert sut.bounding_region() == original_region

    def test_rotated_and_aligned(self):
        """Rotated and aligned curves are wrapped as well."""
        sut = CachedBezier(wavy_cubic())
        line = LinearBezier(AvPoint2D(2.0, 4.0), AvPoint2D(3.0, 3.0))

        rotated = sut.rotated(math.pi / 2)
        aligned = sut.aligned(line)

        assert isinstance(rotated, CachedBezier)
        assert isinstance(aligned, CachedBezier)
        assert rotated.bezier == wavy_cubic().rotated(math.pi / 2)
        assert aligned.bezier == wavy_cubic().aligned(line)

    def test_intersection_of_cached_curves(self):
        """Cached curves can be intersected like the curves they wrap."""
        sut = CachedBezier(wavy_cubic())
        line = CachedBezier.linear(AvPoint2D(5.0, 13.0), AvPoint2D(15.0, 13.0))

        result = sut.approximate_intersection(line, 0.05)

        assert any(abs(t1 - 0.5) < 0.02 and abs(t2 - 0.5) < 0.02 for t1, t2 in result)

    def test_convenience_constructors(self):
        """Test the per degree constructors."""
        p0, p1, p2, p3 = wavy_cubic().points

        assert isinstance(CachedBezier.linear(p0, p3).bezier, LinearBezier)
        assert isinstance(CachedBezier.quadratic(p0, p1, p3).bezier, QuadBezier)
        assert isinstance(CachedBezier.cubic(p0, p1, p2, p3).bezier, CubicBezier)
        assert CachedBezier.linear(p0, p3).length() == pytest.approx(10.0)
