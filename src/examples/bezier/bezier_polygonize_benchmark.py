"""
This module compares sampling a cubic curve point by point with the vectorized
polygonization for increasing step counts.
"""

import timeit

from avbezier.cubic import CubicBezier
from avbezier.point import AvPoint2D

# "S" shape
CURVE = CubicBezier(AvPoint2D(0.0, 0.0), AvPoint2D(100.0, 200.0), AvPoint2D(0.0, -200.0), AvPoint2D(200.0, 0.0))

STEPS_LIST = [10, 50, 100, 500, 1_000]


def main(repeats: int = 20):
    """Main function printing the time per call in ms for each step count."""
    print("Steps   |  compute_series  |   polygonize     | Fastest")
    print("-" * 60)

    for steps in STEPS_LIST:
        timings = {
            "compute_series": timeit.timeit(lambda: CURVE.compute_series(steps), number=repeats),
            "polygonize": timeit.timeit(lambda: CURVE.polygonize(steps), number=repeats),
        }
        fastest = min(timings, key=timings.get)
        print(
            f"{steps:6}  |  {timings['compute_series'] * 1000 / repeats:9.3f} ms  |"
            f"  {timings['polygonize'] * 1000 / repeats:9.3f} ms  |  {fastest}"
        )


if __name__ == "__main__":
    main()
