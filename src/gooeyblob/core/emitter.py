"""Path emitter: serializes smoothed rings into SVG path data.

Only move, line, quadratic-curve and close commands are produced. Arc
commands are never emitted, since renderers disagree on how to convert
them (one canvas consumer of the original path data replaced arcs with
straight lines).
"""

from gooeyblob.core.geometry import same_point
from gooeyblob.core.smoother import CornerSmoother
from gooeyblob.domain import BoundingBox, Coord, PenCommand, Ring, SmoothedPath, SmoothedRing

# SVG command letter for each pen method
SVG_COMMANDS: dict[str, str] = {
    "moveTo": "M",
    "lineTo": "L",
    "qCurveTo": "Q",
    "closePath": "Z",
}


def format_number(value: float, precision: int = 3) -> str:
    """Format a coordinate deterministically.

    Fixed precision, trailing zeros stripped, negative zero normalized.

    Examples:
        >>> format_number(12.5)
        '12.5'
        >>> format_number(-0.0001)
        '0'
        >>> format_number(3.0)
        '3'
    """
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def ring_commands(ring: SmoothedRing) -> list[PenCommand]:
    """Convert a smoothed ring into pen commands.

    The subpath starts at the first corner's curve start. Each corner adds
    a straight segment to its start (skipped when already there) and a
    quadratic curve through its vertex; sharp corners add a single line to
    the vertex. An explicit line back to the start point is added when
    needed, so every subpath ends exactly where it began.

    Args:
        ring: Smoothed ring

    Returns:
        Commands in RecordingPen format
    """
    corners = ring.corners
    if not corners:
        return []

    first_start = corners[0].start
    commands: list[PenCommand] = [("moveTo", (first_start,))]
    current: Coord = first_start

    for corner in corners:
        if corner.is_sharp:
            if not same_point(current, corner.vertex):
                commands.append(("lineTo", (corner.vertex,)))
            current = corner.vertex
            continue

        if not same_point(current, corner.start):
            commands.append(("lineTo", (corner.start,)))
        commands.append(("qCurveTo", (corner.vertex, corner.end)))
        current = corner.end

    if not same_point(current, first_start):
        commands.append(("lineTo", (first_start,)))
    commands.append(("closePath", ()))

    return commands


def format_commands(commands: list[PenCommand], precision: int = 3) -> str:
    """Serialize pen commands as SVG path data.

    Args:
        commands: Commands in RecordingPen format
        precision: Decimal places per coordinate

    Returns:
        Path data such as ``"M 0 0 L 10 0 Q 12 0 12 2 Z"``
    """
    parts: list[str] = []
    for name, points in commands:
        parts.append(SVG_COMMANDS[name])
        for x, y in points:
            parts.append(format_number(x, precision))
            parts.append(format_number(y, precision))
    return " ".join(parts)


class PathEmitter:
    """Builds the final SmoothedPath from smoothed rings."""

    def __init__(self, precision: int = 3) -> None:
        """Initialize emitter.

        Args:
            precision: Decimal places used for path coordinates
        """
        self.precision = precision

    def emit(
        self,
        rings: tuple[SmoothedRing, ...],
        bounding_box: BoundingBox,
        fallback: bool = False,
    ) -> SmoothedPath:
        """Concatenate rings into one path descriptor.

        Each ring becomes an independently closed subpath.

        Args:
            rings: Smoothed rings in output order
            bounding_box: Extent of all input rectangles
            fallback: Whether these rings come from the fallback box

        Returns:
            Immutable SmoothedPath
        """
        commands: list[PenCommand] = []
        for ring in rings:
            commands.extend(ring_commands(ring))

        return SmoothedPath(
            path=format_commands(commands, self.precision),
            bounding_box=bounding_box,
            rings=rings,
            commands=tuple(commands),
            fallback=fallback,
        )

    def emit_fallback(self, bounding_box: BoundingBox) -> SmoothedPath:
        """Emit a plain, unsmoothed rectangle spanning the bounding box.

        Used when the union step fails, so the caller still gets a
        renderable shape. A zero-area box yields an empty path.

        Args:
            bounding_box: Extent of all input rectangles

        Returns:
            SmoothedPath flagged as fallback
        """
        if bounding_box.is_empty():
            return SmoothedPath(path="", bounding_box=bounding_box, fallback=True)

        ring = Ring(
            points=(
                (bounding_box.min_x, bounding_box.min_y),
                (bounding_box.max_x, bounding_box.min_y),
                (bounding_box.max_x, bounding_box.max_y),
                (bounding_box.min_x, bounding_box.max_y),
            )
        )
        sharp = CornerSmoother(radius=0.0).smooth_ring(ring)
        return self.emit((sharp,), bounding_box, fallback=True)
