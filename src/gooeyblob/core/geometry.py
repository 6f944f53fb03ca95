"""Geometric helpers shared by the smoother, strategies and checks.

All functions operate on plain ``(x, y)`` tuples, are pure and stateless,
and are safe to call from worker processes.
"""

import math

from gooeyblob.core._bezier import flatten_quadratic
from gooeyblob.domain import Coord, SmoothedRing

# Coordinates closer than this are treated as the same point
EPSILON = 1e-9


def same_point(a: Coord, b: Coord, tolerance: float = EPSILON) -> bool:
    """Check if two points coincide within a tolerance."""
    return abs(a[0] - b[0]) <= tolerance and abs(a[1] - b[1]) <= tolerance


def cross(o: Coord, a: Coord, b: Coord) -> float:
    """Z component of (a - o) x (b - o).

    Zero means the three points are collinear.
    """
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def unit_vector(origin: Coord, target: Coord) -> tuple[tuple[float, float], float]:
    """Calculate the unit direction from origin to target.

    Args:
        origin: Start point
        target: End point

    Returns:
        Tuple of ((ux, uy), length). A zero-length vector yields ((0, 0), 0).
    """
    dx = target[0] - origin[0]
    dy = target[1] - origin[1]
    length = math.hypot(dx, dy)
    if length < EPSILON:
        return (0.0, 0.0), 0.0
    return (dx / length, dy / length), length


def point_in_polygon(point: Coord, polygon: list[Coord] | tuple[Coord, ...]) -> bool:
    """Determine if a point is inside a polygon using ray casting.

    Casts a horizontal ray from the point to the right and counts edge
    crossings. Odd count = inside (even-odd rule), even = outside.

    Args:
        point: The point to test
        polygon: Polygon vertices without a repeated closing point

    Returns:
        True if point is inside polygon, False otherwise

    Examples:
        >>> square = [(0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (0.0, 2.0)]
        >>> point_in_polygon((1.0, 1.0), square)
        True
        >>> point_in_polygon((3.0, 3.0), square)
        False
    """
    n = len(polygon)
    if n < 3:
        return False

    inside = False
    x, y = point
    j = n - 1

    for i in range(n):
        xi, yi = polygon[i]
        xj, yj = polygon[j]

        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside


def segments_intersect(p1: Coord, p2: Coord, p3: Coord, p4: Coord) -> Coord | None:
    """Find the intersection point of two line segments.

    Uses parametric line equations. Parallel or coincident segments are
    reported as not intersecting.

    Args:
        p1: First endpoint of segment 1
        p2: Second endpoint of segment 1
        p3: First endpoint of segment 2
        p4: Second endpoint of segment 2

    Returns:
        Intersection point, or None if the segments do not cross
    """
    x1, y1 = p1
    x2, y2 = p2
    x3, y3 = p3
    x4, y4 = p4

    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)

    # Lines are parallel or coincident
    if abs(denom) < 1e-12:
        return None

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / denom
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / denom

    if 0 <= t <= 1 and 0 <= u <= 1:
        return (x1 + t * (x2 - x1), y1 + t * (y2 - y1))

    return None


def flatten_smoothed_ring(ring: SmoothedRing, tolerance: float = 0.25) -> list[Coord]:
    """Approximate a smoothed ring with straight segments.

    Renderers without quadratic curve support (and the intersection
    checks) consume this polyline instead of the curve data.

    Args:
        ring: Smoothed ring to flatten
        tolerance: Maximum distance from the true curve

    Returns:
        Closed polyline without a repeated closing point
    """
    points: list[Coord] = []
    for corner in ring.corners:
        if corner.is_sharp:
            candidates = [corner.vertex]
        else:
            candidates = flatten_quadratic(corner.start, corner.vertex, corner.end, tolerance)
        for point in candidates:
            if not points or not same_point(points[-1], point):
                points.append(point)

    if len(points) > 1 and same_point(points[0], points[-1]):
        points.pop()

    return points
