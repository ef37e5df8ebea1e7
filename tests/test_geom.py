"""Test module for AvBox in avbezier.geom

The tests are run using pytest.
"""

import pytest

from avbezier.geom import AvBox
from avbezier.point import AvPoint2D


def test_normalizes_coordinates():
    """Swapped minimum and maximum coordinates are normalized."""
    box = AvBox(10.0, 20.0, 0.0, 5.0)

    assert (box.xmin, box.ymin, box.xmax, box.ymax) == (0.0, 5.0, 10.0, 20.0)
    assert box.width == 10.0
    assert box.height == 15.0


def test_from_region():
    """Test creating a box from a pair of points."""
    box = AvBox.from_region((AvPoint2D(1.0, 2.0), AvPoint2D(4.0, 8.0)))

    assert (box.xmin, box.ymin, box.xmax, box.ymax) == (1.0, 2.0, 4.0, 8.0)


@pytest.mark.parametrize(
    "other,expected",
    [
        (AvBox(5.0, 5.0, 15.0, 15.0), True),
        (AvBox(10.0, 0.0, 20.0, 10.0), True),
        (AvBox(10.1, 0.0, 20.0, 10.0), False),
        (AvBox(0.0, -5.0, 10.0, -0.1), False),
        (AvBox(2.0, 2.0, 3.0, 3.0), True),
    ],
)
def test_overlaps(other, expected):
    """Test overlapping, touching, disjoint and nested boxes."""
    box = AvBox(0.0, 0.0, 10.0, 10.0)

    assert box.overlaps(other) is expected
    assert other.overlaps(box) is expected


def test_fits_within():
    """Both width and height have to fit."""
    assert AvBox(0.0, 0.0, 1.0, 0.5).fits_within(1.0)
    assert not AvBox(0.0, 0.0, 1.0, 1.5).fits_within(1.0)
    assert not AvBox(0.0, 0.0, 1.5, 0.5).fits_within(1.0)
