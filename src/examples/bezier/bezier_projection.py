"""
This module demonstrates approximating the closest point on a curve to a given
point and approximating the inputs at which a function of the curve output
becomes zero.
"""

from avbezier.cached import CachedBezier
from avbezier.point import AvPoint2D

POINTS_TO_PROJECT = [AvPoint2D(0.0, 0.0), AvPoint2D(10.0, 20.0), AvPoint2D(16.0, 13.0)]


def main():
    """Main function to demonstrate projection and zero approximation."""
    curve = CachedBezier.cubic(AvPoint2D(5.0, 13.0), AvPoint2D(6.5, 6.0), AvPoint2D(13.5, 20.0), AvPoint2D(15.0, 13.0))

    # all projections share the cached lookup table of 50 steps
    for point in POINTS_TO_PROJECT:
        t, output = curve.project_approximate(point, steps=50)
        print(f"{point.as_tuple()} -> t={t:.6f} {output.as_tuple()} distance={output.distance(point):.6f}")

    print("Crossings of y=12:")
    for t, output in curve.approximate(lambda p: abs(p.y - 12.0), steps=100, tolerance=0.1):
        print(f"    t={t:.6f} {output.as_tuple()}")


if __name__ == "__main__":
    main()
