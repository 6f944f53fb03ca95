"""Renderer strategies over the shared Line/Rectangle data model.

- MergedBlobStrategy: union of all rectangles, every corner smoothed
  (the "gooey" text-hugging outline)
- PillStrategy: an independent rounded rectangle per line, for consumers
  that draw each line's background separately
"""

from typing import Protocol

from gooeyblob.core.smoother import CornerSmoother
from gooeyblob.core.union import PolygonUnion, ShapelyUnion
from gooeyblob.domain import Rectangle, SmoothedRing
from gooeyblob.exceptions import DegenerateGeometryError, UnionError


class BlobStrategy(Protocol):
    """Turns line rectangles into smoothed rings."""

    def outline(self, rectangles: list[Rectangle], radius: float) -> tuple[SmoothedRing, ...]:
        """Build smoothed rings for the rectangles.

        Raises:
            GeometryError: If the rectangles cannot be outlined
        """
        ...


class MergedBlobStrategy:
    """Union the rectangles, then round every resulting corner."""

    def __init__(self, union: PolygonUnion | None = None) -> None:
        """Initialize strategy.

        Args:
            union: Union engine (defaults to ShapelyUnion)
        """
        self.union = union if union is not None else ShapelyUnion()

    def outline(self, rectangles: list[Rectangle], radius: float) -> tuple[SmoothedRing, ...]:
        polygon = self.union.union(rectangles)
        if not polygon.exteriors():
            raise UnionError("union returned no exterior ring")
        return CornerSmoother(radius).smooth_polygon(polygon)


class PillStrategy:
    """Round each line's rectangle on its own, without merging.

    The smoother's half-edge clamp limits the radius to half the shorter
    side, so narrow lines degrade to a stadium shape.
    """

    def outline(self, rectangles: list[Rectangle], radius: float) -> tuple[SmoothedRing, ...]:
        smoother = CornerSmoother(radius)
        rings: list[SmoothedRing] = []
        for rect in rectangles:
            if rect.is_degenerate():
                raise DegenerateGeometryError(
                    rect.line_index,
                    f"width={rect.width} height={rect.height}",
                )
            rings.append(smoother.smooth_ring(rect.as_ring()))
        return tuple(rings)
