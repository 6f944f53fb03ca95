"""Rectangle builder: one padded box per non-empty text line."""

import math

from gooeyblob.config import BlobOptions
from gooeyblob.domain import Alignment, BoundingBox, Line, Rectangle


def _measured_width(line: Line) -> float:
    """Line width with negative or non-finite measurements treated as 0."""
    if not math.isfinite(line.width) or line.width < 0:
        return 0.0
    return line.width


def reference_width(lines: list[Line], options: BlobOptions) -> float:
    """Width that lines are aligned within.

    Uses the explicit container width when given, otherwise the widest
    line (empty lines included).
    """
    if options.reference_width is not None:
        return options.reference_width
    return max((_measured_width(line) for line in lines), default=0.0)


def aligned_x(width: float, container: float, align: Alignment) -> float:
    """Left edge of a line of the given width inside the container."""
    if align == Alignment.CENTER:
        return (container - width) / 2
    if align == Alignment.RIGHT:
        return container - width
    return 0.0


def build_rectangles(lines: list[Line], options: BlobOptions) -> list[Rectangle]:
    """Convert wrapped lines into padded rectangles.

    Each rectangle is vertically centered on the text's font size rather
    than the full line box, so the blob hugs the glyphs instead of the
    half-leading above and below them.

    Args:
        lines: Lines in display order (``line.index`` is the row)
        options: Blob options

    Returns:
        Rectangles for non-empty lines, tagged with their source line index
    """
    container = reference_width(lines, options)
    font_size = options.effective_font_size
    spread = options.spread
    vertical_offset = (options.line_height - font_size) / 2

    rectangles: list[Rectangle] = []
    for line in lines:
        if line.is_empty():
            continue

        width = _measured_width(line)
        x = aligned_x(width, container, options.align)
        y = line.index * options.line_height + vertical_offset

        rectangles.append(
            Rectangle(
                x=x - spread,
                y=y - spread,
                width=width + 2 * spread,
                height=font_size + 2 * spread,
                line_index=line.index,
            )
        )

    return rectangles


def rectangles_bounding_box(rectangles: list[Rectangle]) -> BoundingBox:
    """Calculate the box enclosing every rectangle.

    Args:
        rectangles: Rectangles to enclose (spread already included)

    Returns:
        Bounding box, zero-sized when there are no rectangles
    """
    if not rectangles:
        return BoundingBox()

    min_x = min(r.x for r in rectangles)
    min_y = min(r.y for r in rectangles)
    max_x = max(r.right for r in rectangles)
    max_y = max(r.bottom for r in rectangles)

    return BoundingBox(min_x=min_x, min_y=min_y, width=max_x - min_x, height=max_y - min_y)
