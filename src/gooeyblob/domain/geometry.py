"""Polygon types produced by the rectangle builder and union engine.

Coordinates live in y-down screen space. Exterior rings have a positive
shoelace area, which is clockwise on screen; holes are negative.
"""

from dataclasses import dataclass

from gooeyblob.exceptions import GeometryError

Coord = tuple[float, float]


def shoelace_area(points: tuple[Coord, ...] | list[Coord]) -> float:
    """Calculate signed area using the shoelace formula.

    Args:
        points: Ring vertices without a repeated closing point

    Returns:
        Signed area, 0.0 for fewer than three points
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i][0] * points[j][1]
        area -= points[j][0] * points[i][1]

    return area / 2.0


@dataclass(frozen=True, slots=True)
class Rectangle:
    """Axis-aligned padded rectangle for one text line.

    Attributes:
        x: Left edge
        y: Top edge
        width: Horizontal extent including spread on both sides
        height: Vertical extent including spread on both sides
        line_index: Index of the source line
    """

    x: float
    y: float
    width: float
    height: float
    line_index: int = 0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def is_degenerate(self) -> bool:
        """Check if the rectangle encloses no area."""
        return self.width <= 0 or self.height <= 0

    def as_ring(self) -> "Ring":
        """Convert to a 4-point ring with exterior (clockwise on screen) winding.

        Raises:
            GeometryError: If the rectangle is degenerate
        """
        return Ring(
            points=(
                (self.x, self.y),
                (self.right, self.y),
                (self.right, self.bottom),
                (self.x, self.bottom),
            )
        )


@dataclass(frozen=True, slots=True)
class Ring:
    """A closed polygon boundary.

    The ring is circular: the vertex after the last one is the first.
    Neighbors are found with modulo indexing, never stored.

    Attributes:
        points: Vertices in order, without a repeated closing point
    """

    points: tuple[Coord, ...]

    def __post_init__(self) -> None:
        n = len(self.points)
        if n < 3:
            raise GeometryError(f"Ring needs at least 3 points, got {n}")
        for i in range(n):
            if self.points[i] == self.points[(i + 1) % n]:
                raise GeometryError(f"Ring has duplicate consecutive point at index {i}")

    def __len__(self) -> int:
        return len(self.points)

    def prev(self, i: int) -> Coord:
        return self.points[(i - 1) % len(self.points)]

    def next(self, i: int) -> Coord:
        return self.points[(i + 1) % len(self.points)]

    def signed_area(self) -> float:
        return shoelace_area(self.points)

    def is_hole(self) -> bool:
        """Holes wind opposite to exterior rings (negative area)."""
        return self.signed_area() < 0

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of the ring.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        xs = [p[0] for p in self.points]
        ys = [p[1] for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))


@dataclass(frozen=True, slots=True)
class Polygon:
    """One or more rings; disjoint islands each get their own ring.

    Attributes:
        rings: Exterior rings and any holes, in deterministic order
    """

    rings: tuple[Ring, ...]

    def __len__(self) -> int:
        return len(self.rings)

    def exteriors(self) -> list[Ring]:
        return [ring for ring in self.rings if not ring.is_hole()]
