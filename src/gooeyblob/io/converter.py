"""Converters between SVG path data and pen recordings.

Path data is parsed with fontTools' svgLib into a RecordingPen, the same
representation ``SmoothedPath.draw`` produces. This lets emitted paths be
checked the way a downstream renderer would read them.
"""

from dataclasses import dataclass, field
from typing import Any

from fontTools.pens.recordingPen import RecordingPen
from fontTools.svgLib.path import parse_path

from gooeyblob.domain import Coord, PenCommand
from gooeyblob.exceptions import PathParseError


@dataclass
class Subpath:
    """One subpath recovered from a recording.

    Attributes:
        points: On-curve points in drawing order
        control_points: Off-curve points of quadratic and cubic segments
        commands: Pen method names, including the closing command
        closed: True if the subpath ended with closePath
    """

    points: list[Coord] = field(default_factory=list)
    control_points: list[Coord] = field(default_factory=list)
    commands: list[str] = field(default_factory=list)
    closed: bool = False

    @property
    def curve_count(self) -> int:
        return sum(1 for name in self.commands if name in ("qCurveTo", "curveTo"))

    def is_closed_loop(self, tolerance: float = 1e-6) -> bool:
        """Check that the subpath is closed and ends at its start point."""
        if not self.closed or not self.points:
            return False
        first, last = self.points[0], self.points[-1]
        return abs(first[0] - last[0]) <= tolerance and abs(first[1] - last[1]) <= tolerance


def parse_path_data(path_data: str) -> list[PenCommand]:
    """Parse SVG path data into RecordingPen commands.

    Args:
        path_data: SVG path ``d`` attribute

    Returns:
        Recorded ``(method, points)`` commands; empty data yields no commands

    Raises:
        PathParseError: If the path data is malformed
    """
    pen = RecordingPen()
    try:
        parse_path(path_data, pen)
    except (ValueError, IndexError) as e:
        raise PathParseError(path_data, str(e) or type(e).__name__) from e
    return [(name, tuple(points)) for name, points in pen.value]


def recording_to_subpaths(recording: list[tuple[str, tuple[Any, ...]]]) -> list[Subpath]:
    """Split a pen recording into subpaths.

    The RecordingPen records drawing commands like:
    - ('moveTo', ((x, y),))
    - ('lineTo', ((x, y),))
    - ('qCurveTo', ((cx, cy), (x, y)))
    - ('curveTo', ((x1, y1), (x2, y2), (x3, y3)))
    - ('closePath', ())

    Args:
        recording: Commands from a RecordingPen (or ``SmoothedPath.commands``)

    Returns:
        Subpaths in drawing order
    """
    subpaths: list[Subpath] = []
    current: Subpath | None = None

    for command, args in recording:
        if command == "moveTo":
            if current is not None:
                subpaths.append(current)
            current = Subpath()
            current.points.append(tuple(args[0]))
            current.commands.append(command)
            continue

        if current is None:
            continue

        current.commands.append(command)
        if command in ("lineTo", "qCurveTo", "curveTo"):
            *controls, end = args
            current.control_points.extend(tuple(p) for p in controls)
            current.points.append(tuple(end))
        elif command in ("closePath", "endPath"):
            current.closed = command == "closePath"
            subpaths.append(current)
            current = None

    if current is not None:
        subpaths.append(current)

    return subpaths


def parse_subpaths(path_data: str) -> list[Subpath]:
    """Parse path data straight into subpaths.

    Raises:
        PathParseError: If the path data is malformed
    """
    return recording_to_subpaths(parse_path_data(path_data))
