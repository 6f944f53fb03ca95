"""Internal Bezier curve flattening.

This is an internal module containing the subdivision helper used by
flatten_smoothed_ring. Not intended for public use.
"""

import math

from gooeyblob.domain import Coord


def flatten_quadratic(p0: Coord, p1: Coord, p2: Coord, tolerance: float) -> list[Coord]:
    """Flatten a quadratic Bezier curve using recursive subdivision.

    Args:
        p0: Curve start
        p1: Control point
        p2: Curve end
        tolerance: Maximum distance from true curve

    Returns:
        List of points approximating the curve, including both endpoints
    """
    # Curve point at t=0.5
    curve_mid_x = 0.25 * p0[0] + 0.5 * p1[0] + 0.25 * p2[0]
    curve_mid_y = 0.25 * p0[1] + 0.5 * p1[1] + 0.25 * p2[1]

    # Chord midpoint
    chord_mid_x = (p0[0] + p2[0]) / 2
    chord_mid_y = (p0[1] + p2[1]) / 2

    distance = math.hypot(curve_mid_x - chord_mid_x, curve_mid_y - chord_mid_y)

    if distance <= tolerance:
        return [p0, p2]

    # Subdivide at t=0.5
    mid = (curve_mid_x, curve_mid_y)
    left_ctrl = ((p0[0] + p1[0]) / 2, (p0[1] + p1[1]) / 2)
    right_ctrl = ((p1[0] + p2[0]) / 2, (p1[1] + p2[1]) / 2)

    left = flatten_quadratic(p0, left_ctrl, mid, tolerance)
    right = flatten_quadratic(mid, right_ctrl, p2, tolerance)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right
