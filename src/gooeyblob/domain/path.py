"""Smoothed outline types emitted by the corner smoother and path emitter."""

import math
from dataclasses import dataclass, field
from typing import Any

from gooeyblob.domain.geometry import Coord

# Pen command as recorded by fontTools' RecordingPen: (method_name, points)
PenCommand = tuple[str, tuple[Coord, ...]]


@dataclass(frozen=True, slots=True)
class Corner:
    """One smoothed vertex.

    The corner replaces ``vertex`` with a quadratic curve from ``start`` to
    ``end`` using ``vertex`` as its control point. A zero radius means the
    vertex is kept sharp and start, end and vertex coincide.

    Attributes:
        vertex: Original polygon vertex (the curve's control point)
        start: Curve start, on the incoming edge
        end: Curve end, on the outgoing edge
        radius: Effective (clamped) radius
    """

    vertex: Coord
    start: Coord
    end: Coord
    radius: float

    @property
    def is_sharp(self) -> bool:
        return self.radius == 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "vertex": list(self.vertex),
            "start": list(self.start),
            "end": list(self.end),
            "radius": self.radius,
        }


@dataclass(frozen=True, slots=True)
class SmoothedRing:
    """A ring whose every vertex has been replaced by a corner.

    Attributes:
        corners: Corners in the order of the source ring's vertices
    """

    corners: tuple[Corner, ...]

    def __len__(self) -> int:
        return len(self.corners)

    @property
    def vertices(self) -> tuple[Coord, ...]:
        return tuple(corner.vertex for corner in self.corners)

    def max_radius(self) -> float:
        return max((corner.radius for corner in self.corners), default=0.0)


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned box enclosing every input rectangle.

    Attributes:
        min_x: Left edge
        min_y: Top edge
        width: Horizontal extent
        height: Vertical extent
    """

    min_x: float = 0.0
    min_y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def max_x(self) -> float:
        return self.min_x + self.width

    @property
    def max_y(self) -> float:
        return self.min_y + self.height

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def view_box(self, margin: float = 0.0) -> tuple[float, float, float, float]:
        """Get an SVG viewBox tuple, optionally grown by a margin.

        Args:
            margin: Extra space added on every side

        Returns:
            Tuple of (min_x, min_y, width, height)
        """
        return (
            self.min_x - margin,
            self.min_y - margin,
            self.width + 2 * margin,
            self.height + 2 * margin,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "min_x": self.min_x,
            "min_y": self.min_y,
            "width": self.width,
            "height": self.height,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BoundingBox":
        return cls(
            min_x=data.get("min_x", 0.0),
            min_y=data.get("min_y", 0.0),
            width=data["width"],
            height=data["height"],
        )


@dataclass(frozen=True)
class SmoothedPath:
    """Final blob outline.

    Derived once by the path emitter and never mutated afterwards.

    Attributes:
        path: SVG path data using only M, L, Q and Z commands
        bounding_box: Extent of all input rectangles
        rings: Smoothed rings that produced the path
        commands: The same outline as pen commands
        fallback: True when the union failed and a plain box was emitted
    """

    path: str
    bounding_box: BoundingBox
    rings: tuple[SmoothedRing, ...] = field(default=())
    commands: tuple[PenCommand, ...] = field(default=(), repr=False)
    fallback: bool = False

    def is_empty(self) -> bool:
        """Empty results mean "nothing to render", not an error."""
        return self.path == ""

    @property
    def subpath_count(self) -> int:
        return sum(1 for name, _ in self.commands if name == "moveTo")

    def draw(self, pen: Any) -> None:
        """Replay the outline into a fontTools-style segment pen.

        The pen receives moveTo, lineTo, qCurveTo and closePath calls,
        so any ``fontTools.pens`` pen (RecordingPen, BoundsPen,
        TTGlyphPen, ...) can consume the blob directly.

        Args:
            pen: Object implementing the fontTools AbstractPen protocol
        """
        for name, points in self.commands:
            getattr(pen, name)(*points)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Rings are flattened to their corner dictionaries; commands are
        not serialized since ``path`` carries the same information.
        """
        return {
            "path": self.path,
            "bounding_box": self.bounding_box.to_dict(),
            "rings": [[c.to_dict() for c in ring.corners] for ring in self.rings],
            "fallback": self.fallback,
        }


def distance(a: Coord, b: Coord) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])
