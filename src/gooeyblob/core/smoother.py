"""Corner smoother: the core of the blob outline.

Every vertex of a ring is replaced by a quadratic curve that starts on the
incoming edge and ends on the outgoing edge, with the vertex itself as the
control point. The same rule handles convex and reflex (concave) corners;
the only safeguard needed is the radius clamp

    r = min(requested, len_prev / 2, len_next / 2)

which guarantees that two neighboring curves can meet at most at the middle
of their shared edge and never overlap, however short that edge is. Short
edges appear whenever two stacked lines differ in width by only a few
pixels.
"""

from gooeyblob.core.geometry import unit_vector
from gooeyblob.domain import Coord, Corner, Polygon, Ring, SmoothedRing


def smooth_corner(prev: Coord, curr: Coord, nxt: Coord, radius: float) -> Corner:
    """Round a single vertex.

    Args:
        prev: Previous vertex on the ring
        curr: Vertex to round
        nxt: Next vertex on the ring
        radius: Requested radius before clamping

    Returns:
        Corner with clamped radius. Vertices with a zero-length adjacent
        edge, or a requested radius of 0, stay sharp.
    """
    (prev_ux, prev_uy), len_prev = unit_vector(prev, curr)
    (next_ux, next_uy), len_next = unit_vector(curr, nxt)

    r = min(radius, len_prev / 2, len_next / 2)
    if r <= 0.0:
        return Corner(vertex=curr, start=curr, end=curr, radius=0.0)

    start = (curr[0] - prev_ux * r, curr[1] - prev_uy * r)
    end = (curr[0] + next_ux * r, curr[1] + next_uy * r)

    return Corner(vertex=curr, start=start, end=end, radius=r)


class CornerSmoother:
    """Rounds every corner of a ring by a fixed requested radius.

    Example:
        smoother = CornerSmoother(radius=12.0)
        smoothed = smoother.smooth_ring(ring)
    """

    def __init__(self, radius: float) -> None:
        """Initialize smoother.

        Args:
            radius: Requested corner radius in pixels (negative is treated as 0)
        """
        self.radius = max(radius, 0.0)

    def smooth_ring(self, ring: Ring) -> SmoothedRing:
        """Round every vertex of a ring.

        Neighbors are found by modulo indexing, so the first and last
        vertices are handled exactly like the others.

        Args:
            ring: Ring to smooth

        Returns:
            Smoothed ring with one corner per vertex, in ring order
        """
        corners = tuple(
            smooth_corner(ring.prev(i), point, ring.next(i), self.radius)
            for i, point in enumerate(ring.points)
        )
        return SmoothedRing(corners=corners)

    def smooth_polygon(self, polygon: Polygon) -> tuple[SmoothedRing, ...]:
        """Smooth each ring of a polygon independently."""
        return tuple(self.smooth_ring(ring) for ring in polygon.rings)
