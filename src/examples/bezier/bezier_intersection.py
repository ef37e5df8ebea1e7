"""
This module demonstrates approximating the intersections of two cubic curves
and of a quadratic curve with a line.
"""

from avbezier.cubic import CubicBezier
from avbezier.linear import LinearBezier
from avbezier.point import AvPoint2D
from avbezier.quadratic import QuadBezier


def print_intersections(name, curve, other, threshold):
    """Print all approximate intersections with the points they describe."""
    result = curve.approximate_intersection(other, threshold)
    print(f"{name}: {len(result)} pair(s) with threshold {threshold}")
    for t1, t2 in result:
        print(f"    t1={t1:.6f} t2={t2:.6f} {curve.compute(t1).as_tuple()} {other.compute(t2).as_tuple()}")


def main():
    """Main function to demonstrate approximate intersections."""
    c1 = CubicBezier(
        AvPoint2D(-93.84523543737022, 54.584285962187664),
        AvPoint2D(36.0, 18.0),
        AvPoint2D(106.0, 109.0),
        AvPoint2D(94.0, -33.0),
    )
    c2 = CubicBezier(
        AvPoint2D(106.3978860946466, -98.52483470629815),
        AvPoint2D(149.0, 65.0),
        AvPoint2D(-65.0, 127.0),
        AvPoint2D(-65.0, -5.0),
    )
    print_intersections("cubic x cubic", c1, c2, 1.0)

    quad = QuadBezier(AvPoint2D(80.0, 250.0), AvPoint2D(20.0, 110.0), AvPoint2D(220.0, 60.0))
    line = LinearBezier(AvPoint2D(0.0, 150.0), AvPoint2D(250.0, 150.0))
    print_intersections("quadratic x line", quad, line, 0.5)


if __name__ == "__main__":
    main()
