"""Polygon union engine.

Merges per-line rectangles into closed rings. The engine is specified only
by its contract (``union(rectangles) -> Polygon``) so any correct boolean
primitive can stand behind it; the default wraps shapely's ``unary_union``.
"""

from typing import Protocol

import structlog
from shapely.errors import ShapelyError
from shapely.geometry import GeometryCollection, MultiPolygon
from shapely.geometry import Polygon as ShapelyPolygon
from shapely.geometry import box
from shapely.geometry.polygon import orient
from shapely.ops import unary_union

from gooeyblob.core.geometry import EPSILON, cross, same_point
from gooeyblob.domain import Coord, Polygon, Rectangle, Ring
from gooeyblob.exceptions import DegenerateGeometryError, UnionError

logger = structlog.get_logger(__name__)


class PolygonUnion(Protocol):
    """Boolean union of axis-aligned rectangles."""

    def union(self, rectangles: list[Rectangle]) -> Polygon:
        """Merge rectangles into rings.

        Raises:
            GeometryError: If no valid polygon can be produced
        """
        ...


def normalize_ring(coords: list[Coord]) -> tuple[Coord, ...]:
    """Reduce a raw coordinate ring to its minimal vertex sequence.

    Removes the repeated closing point, consecutive duplicates and
    collinear vertices, then rotates the ring to start at its top-most,
    left-most vertex so that output does not depend on where the boolean
    library happened to start the ring.

    Args:
        coords: Ring coordinates, closed or open

    Returns:
        Minimal ring with winding preserved

    Raises:
        UnionError: If fewer than 3 vertices remain
    """
    points: list[Coord] = []
    for x, y in coords:
        point = (float(x), float(y))
        if not points or not same_point(points[-1], point):
            points.append(point)
    while len(points) > 1 and same_point(points[0], points[-1]):
        points.pop()

    # Collinear removal, repeated until stable (removing one vertex can
    # make its neighbor collinear). The tolerance also absorbs width steps
    # below about 1e-7 px, which the rectangle bounding box still reports.
    changed = True
    while changed and len(points) >= 3:
        changed = False
        for i in range(len(points)):
            prev = points[i - 1]
            curr = points[i]
            nxt = points[(i + 1) % len(points)]
            scale = max(abs(curr[0] - prev[0]) + abs(curr[1] - prev[1]), 1.0) * max(
                abs(nxt[0] - curr[0]) + abs(nxt[1] - curr[1]), 1.0
            )
            if abs(cross(prev, curr, nxt)) <= EPSILON * scale:
                del points[i]
                changed = True
                break

    if len(points) < 3:
        raise UnionError(f"ring collapsed to {len(points)} points")

    start = min(range(len(points)), key=lambda i: (points[i][1], points[i][0]))
    return tuple(points[start:] + points[:start])


class ShapelyUnion:
    """Polygon union backed by shapely (GEOS).

    Exterior rings come out with positive shoelace area (clockwise on a
    y-down screen), holes with negative area.
    """

    def union(self, rectangles: list[Rectangle]) -> Polygon:
        """Merge rectangles into a polygon.

        Args:
            rectangles: Padded line rectangles

        Returns:
            Polygon with one exterior ring per disjoint island, each
            followed by its holes, ordered top-to-bottom then left-to-right

        Raises:
            DegenerateGeometryError: If any rectangle has zero area
            UnionError: If the union is empty or cannot be computed
        """
        if not rectangles:
            return Polygon(rings=())

        for rect in rectangles:
            if rect.is_degenerate():
                raise DegenerateGeometryError(
                    rect.line_index,
                    f"width={rect.width} height={rect.height}",
                )

        try:
            merged = unary_union([box(r.x, r.y, r.right, r.bottom) for r in rectangles])
        except (ShapelyError, ValueError) as e:
            raise UnionError(str(e)) from e

        parts = self._polygon_parts(merged)
        if not parts:
            raise UnionError(f"union produced no polygons ({merged.geom_type})")

        islands: list[tuple[Ring, list[Ring]]] = []
        for part in parts:
            oriented = orient(part, sign=1.0)
            exterior = Ring(points=normalize_ring(list(oriented.exterior.coords)))
            holes = [
                Ring(points=normalize_ring(list(interior.coords)))
                for interior in oriented.interiors
            ]
            holes.sort(key=lambda ring: ring.bounding_box())
            islands.append((exterior, holes))

        islands.sort(key=lambda island: (island[0].bounding_box()[1], island[0].bounding_box()[0]))

        rings: list[Ring] = []
        for exterior, holes in islands:
            rings.append(exterior)
            rings.extend(holes)

        logger.debug(
            "Union complete",
            rectangles=len(rectangles),
            islands=len(islands),
            rings=len(rings),
        )

        return Polygon(rings=tuple(rings))

    @staticmethod
    def _polygon_parts(geometry: object) -> list[ShapelyPolygon]:
        """Extract non-empty polygons from a union result."""
        if isinstance(geometry, ShapelyPolygon):
            candidates = [geometry]
        elif isinstance(geometry, (MultiPolygon, GeometryCollection)):
            candidates = [g for g in geometry.geoms if isinstance(g, ShapelyPolygon)]
        else:
            candidates = []
        return [p for p in candidates if not p.is_empty and p.area > 0]
