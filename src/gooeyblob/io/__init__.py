"""File I/O layer for gooeyblob.

This module reads line and job files, writes SVG documents and re-parses
path data. It keeps file formats and third-party parsers away from the
pure geometry in ``gooeyblob.core``.

Key responsibilities:
- Read measured lines from JSON or ``TEXT:WIDTH`` specs
- Read batch job files
- Write standalone SVG documents (svgwrite)
- Parse path data back into pen commands (fontTools svgLib)
"""

from gooeyblob.io.converter import (
    Subpath,
    parse_path_data,
    parse_subpaths,
    recording_to_subpaths,
)
from gooeyblob.io.reader import (
    JobInput,
    LineInput,
    parse_line_spec,
    parse_lines,
    read_jobs,
    read_lines,
)
from gooeyblob.io.writer import (
    build_drawing,
    get_output_path,
    svg_string,
    write_path_svg,
    write_svg,
)

__all__ = [
    "JobInput",
    "LineInput",
    "Subpath",
    "build_drawing",
    "get_output_path",
    "parse_line_spec",
    "parse_lines",
    "parse_path_data",
    "parse_subpaths",
    "read_jobs",
    "read_lines",
    "recording_to_subpaths",
    "svg_string",
    "write_path_svg",
    "write_svg",
]
