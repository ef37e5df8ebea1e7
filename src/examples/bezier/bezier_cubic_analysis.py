"""
This module demonstrates the analysis of a cubic Bezier curve: evaluation,
derivative, roots, bounding region, arc length and splitting.
"""

from avbezier.cubic import CubicBezier
from avbezier.point import AvPoint2D

# S shaped curve going down first and up afterwards
WAVY = CubicBezier(AvPoint2D(5.0, 13.0), AvPoint2D(6.5, 6.0), AvPoint2D(13.5, 20.0), AvPoint2D(15.0, 13.0))


def main():
    """Main function to print the properties of a cubic curve."""
    curve = WAVY
    print("Curve:      ", curve)
    print("compute(.5):", curve.compute(0.5))
    print("De Casteljau", curve.solve_de_casteljau(0.5))
    print("Derivative: ", curve.derivate())
    print("Roots:      ", curve.roots())

    minimum, maximum = curve.bounding_region()
    print(f"Bounds:      min={minimum.as_tuple()} max={maximum.as_tuple()}")
    print(f"Length:      {curve.length():.12f}")
    print("Normal(.5): ", curve.normal(0.5))

    left, right = curve.split(0.3)
    print("Split left: ", left)
    print("Split right:", right)

    extremas = curve.extremas()
    print("x profile:  ", extremas.x)
    print("y profile:  ", extremas.y)


if __name__ == "__main__":
    main()
