"""Domain models for gooeyblob.

This module contains the core domain models representing text lines, the
rectangles built around them, merged polygons and their smoothed outline.
All models are designed to be:

- Immutable (frozen dataclasses), since every call recomputes from scratch
- Serializable for inter-process communication (batch processing)
- Independent of shapely and fontTools implementation details

Key classes:
- Line: A wrapped, measured line of text
- Rectangle: The padded box around one line
- Ring / Polygon: Closed boundaries produced by the union
- Corner / SmoothedRing: Rounded vertices produced by the smoother
- BoundingBox / SmoothedPath: Final emitted outline
"""

from gooeyblob.domain.geometry import Coord, Polygon, Rectangle, Ring, shoelace_area
from gooeyblob.domain.line import Alignment, Line, LineLayoutProvider, index_lines
from gooeyblob.domain.path import (
    BoundingBox,
    Corner,
    PenCommand,
    SmoothedPath,
    SmoothedRing,
    distance,
)

__all__: list[str] = [
    # Enums
    "Alignment",
    # Input
    "Line",
    "LineLayoutProvider",
    "index_lines",
    # Geometry
    "Coord",
    "Rectangle",
    "Ring",
    "Polygon",
    "shoelace_area",
    # Output
    "Corner",
    "SmoothedRing",
    "BoundingBox",
    "PenCommand",
    "SmoothedPath",
    "distance",
]
