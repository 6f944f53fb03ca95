"""Exception hierarchy for Gooeyblob."""


class GooeyBlobError(Exception):
    """Base exception for all Gooeyblob errors."""

    pass


class GeometryError(GooeyBlobError):
    """Errors in geometric calculations."""

    pass


class UnionError(GeometryError):
    """The polygon union could not produce a usable outline."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Polygon union failed: {reason}")


class DegenerateGeometryError(GeometryError):
    """Input geometry has zero area and cannot take part in a union."""

    def __init__(self, line_index: int, reason: str) -> None:
        self.line_index = line_index
        self.reason = reason
        super().__init__(f"Degenerate rectangle for line {line_index}: {reason}")


class InputError(GooeyBlobError):
    """Errors related to reading or writing user-supplied files."""

    pass


class LineParseError(InputError):
    """Line data could not be parsed."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to parse lines from '{source}': {reason}")


class OutputWriteError(InputError):
    """Error writing an output file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write '{path}': {reason}")


class PathParseError(InputError):
    """SVG path data could not be parsed."""

    def __init__(self, path_data: str, reason: str) -> None:
        self.path_data = path_data
        self.reason = reason
        super().__init__(f"Invalid path data: {reason}")
