"""SVG document writer.

Wraps blob path data in a standalone SVG document using svgwrite. The
viewBox is taken from the blob's bounding box, so the document crops
tightly around the outline unless a margin is configured.
"""

from pathlib import Path

import svgwrite

from gooeyblob.config import OutputConfig
from gooeyblob.core.emitter import format_number
from gooeyblob.domain import SmoothedPath
from gooeyblob.exceptions import OutputWriteError

ViewBox = tuple[float, float, float, float]


def build_drawing(
    path_data: str,
    view_box: ViewBox,
    output: OutputConfig | None = None,
    precision: int = 3,
) -> svgwrite.Drawing:
    """Build an SVG drawing holding a single filled path.

    Args:
        path_data: SVG path data (may be empty)
        view_box: (min_x, min_y, width, height)
        output: Fill and opacity settings (defaults if None)
        precision: Decimal places for the viewBox and size attributes

    Returns:
        svgwrite Drawing; an empty path produces a document with no path
    """
    output = output if output is not None else OutputConfig()
    min_x, min_y, width, height = (format_number(v, precision) for v in view_box)

    dwg = svgwrite.Drawing(
        profile="tiny",
        size=(width, height),
        viewBox=f"{min_x} {min_y} {width} {height}",
        debug=False,
    )

    if path_data:
        dwg.add(
            dwg.path(
                d=path_data,
                fill=output.fill,
                fill_opacity=output.opacity,
                fill_rule=output.fill_rule,
            )
        )

    return dwg


def svg_string(result: SmoothedPath, output: OutputConfig | None = None, precision: int = 3) -> str:
    """Render a blob as an SVG document string.

    Args:
        result: Generated blob
        output: Fill, opacity and margin settings
        precision: Decimal places for the viewBox

    Returns:
        SVG markup
    """
    output = output if output is not None else OutputConfig()
    view_box = result.bounding_box.view_box(output.margin)
    return build_drawing(result.path, view_box, output, precision).tostring()


def _save(dwg: svgwrite.Drawing, path: Path) -> Path:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        dwg.saveas(str(path), pretty=True)
    except OSError as e:
        raise OutputWriteError(str(path), str(e)) from e
    return path


def write_svg(
    result: SmoothedPath,
    path: Path,
    output: OutputConfig | None = None,
    precision: int = 3,
) -> Path:
    """Write a blob to an SVG file.

    Args:
        result: Generated blob
        path: Destination file
        output: Fill, opacity and margin settings
        precision: Decimal places for the viewBox

    Returns:
        The written path

    Raises:
        OutputWriteError: If the file cannot be written
    """
    output = output if output is not None else OutputConfig()
    view_box = result.bounding_box.view_box(output.margin)
    return _save(build_drawing(result.path, view_box, output, precision), path)


def write_path_svg(
    path_data: str,
    view_box: ViewBox,
    path: Path,
    output: OutputConfig | None = None,
) -> Path:
    """Write arbitrary path data (such as an organic preset) to an SVG file.

    Raises:
        OutputWriteError: If the file cannot be written
    """
    return _save(build_drawing(path_data, view_box, output), path)


def get_output_path(input_path: Path, output_dir: Path | None = None) -> Path:
    """Derive an SVG output path from an input file.

    Converts: lines.json -> lines-blob.svg
    """
    parent = output_dir if output_dir is not None else input_path.parent
    return parent / f"{input_path.stem}-blob.svg"
