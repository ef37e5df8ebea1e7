"""Central module containing default constants for curve sampling and approximation"""

from __future__ import annotations

# Lookup table resolution used by projection and approximation if none is given
DEFAULT_STEPS: int = 50

# Binary search refinement rounds used by projection and approximation
DEFAULT_MAX_ITERATIONS: int = 10

# Acceptance tolerance for approximated results
DEFAULT_TOLERANCE: float = 0.01

# Fraction of the refinement range used as step of the central difference slope estimate
REFINE_SLOPE_STEP: float = 1e-6

# Number of Gauss-Legendre nodes used to integrate the arc length
LENGTH_GAUSS_ORDER: int = 24

# Hard limit for intersection subdivision depth (a float64 parameter range cannot be halved further)
INTERSECTION_MAX_DEPTH: int = 52

# Extra subdivision levels on top of log2(extent / threshold)
INTERSECTION_DEPTH_MARGIN: int = 8

# Interval in which extrema and roots of a curve are considered
UNIT_INTERVAL = (0.0, 1.0)


def main():
    """Main"""
    print("DEFAULT_STEPS:          ", DEFAULT_STEPS)
    print("DEFAULT_MAX_ITERATIONS: ", DEFAULT_MAX_ITERATIONS)
    print("DEFAULT_TOLERANCE:      ", DEFAULT_TOLERANCE)
    print("REFINE_SLOPE_STEP:      ", REFINE_SLOPE_STEP)
    print("LENGTH_GAUSS_ORDER:     ", LENGTH_GAUSS_ORDER)
    print("INTERSECTION_MAX_DEPTH: ", INTERSECTION_MAX_DEPTH)


if __name__ == "__main__":
    main()
