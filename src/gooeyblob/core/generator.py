"""Text-hugging blob generator.

``generate(lines, options)`` is a pure function: it recomputes everything
from its inputs on every call and shares no state, so it can be called
concurrently from any number of threads or processes. Debouncing rapid
edits is left to the caller.
"""

from typing import Any

import structlog

from gooeyblob.config import BlobOptions, BlobStyle
from gooeyblob.core.emitter import PathEmitter
from gooeyblob.core.rectangles import build_rectangles, rectangles_bounding_box
from gooeyblob.core.strategies import BlobStrategy, MergedBlobStrategy, PillStrategy
from gooeyblob.core.union import PolygonUnion
from gooeyblob.domain import BoundingBox, Line, SmoothedPath, index_lines
from gooeyblob.exceptions import GeometryError

logger = structlog.get_logger(__name__)


class BlobGenerator:
    """Generates blob outlines for blocks of wrapped text.

    Pipeline: rectangles -> strategy (union + smoothing) -> path emitter.
    Geometry failures never propagate; they fall back to a plain box
    spanning all rectangles.

    Example:
        generator = BlobGenerator(BlobOptions(line_height=40, spread=8))
        result = generator.generate([Line("Hello", 100.0), Line("world", 60.0)])
        svg_d = result.path
    """

    def __init__(
        self,
        options: BlobOptions | None = None,
        union: PolygonUnion | None = None,
    ) -> None:
        """Initialize generator.

        Args:
            options: Blob options (defaults used if None)
            union: Union engine for the merged style (ShapelyUnion if None)
        """
        self.options = options if options is not None else BlobOptions()
        self.union = union

    def strategy(self) -> BlobStrategy:
        """Get the renderer strategy selected by the options."""
        if self.options.style == BlobStyle.PILL:
            return PillStrategy()
        return MergedBlobStrategy(union=self.union)

    def generate(self, lines: list[Line] | list[dict[str, Any]]) -> SmoothedPath:
        """Generate the outline for a block of lines.

        Args:
            lines: Lines in display order, as Line objects or
                ``{"text", "width"}`` dictionaries

        Returns:
            SmoothedPath. No non-empty lines yields an empty path and a
            zero-sized bounding box.
        """
        indexed = index_lines(lines)
        rectangles = build_rectangles(indexed, self.options)
        if not rectangles:
            return SmoothedPath(path="", bounding_box=BoundingBox())

        bounding_box = rectangles_bounding_box(rectangles)
        emitter = PathEmitter(precision=self.options.precision)

        try:
            rings = self.strategy().outline(rectangles, self.options.requested_radius)
        except GeometryError as e:
            logger.warning(
                "Blob outline failed, using bounding box",
                error=str(e),
                error_type=type(e).__name__,
                lines=len(indexed),
                rectangles=len(rectangles),
            )
            return emitter.emit_fallback(bounding_box)

        return emitter.emit(rings, bounding_box)


def generate(
    lines: list[Line] | list[dict[str, Any]],
    options: BlobOptions | dict[str, Any] | None = None,
    *,
    union: PolygonUnion | None = None,
    **overrides: Any,
) -> SmoothedPath:
    """Generate a text-hugging blob outline.

    Args:
        lines: Lines in display order
        options: BlobOptions or a dictionary of option values
        union: Optional replacement union engine
        **overrides: Individual option values (e.g. ``spread=8``) applied
            on top of ``options``

    Returns:
        SmoothedPath with path data and bounding box

    Example:
        >>> result = generate([{"text": "HI", "width": 40}], line_height=30, spread=6)
        >>> (result.bounding_box.width, result.bounding_box.height)
        (52.0, 42.0)
    """
    if options is None:
        resolved = BlobOptions.model_validate(overrides)
    elif isinstance(options, BlobOptions):
        resolved = (
            BlobOptions.model_validate({**options.model_dump(), **overrides})
            if overrides
            else options
        )
    else:
        resolved = BlobOptions.model_validate({**options, **overrides})

    return BlobGenerator(resolved, union=union).generate(lines)
