"""Core processing algorithms for gooeyblob.

This module contains the core algorithms for:

- Rectangle building (one padded box per non-empty line)
- Polygon union (merging boxes into stepped rings)
- Corner smoothing (clamped quadratic corners, convex and concave alike)
- Path emission (SVG path data, pen replay, bounding box fallback)

All services are designed to be:
- Stateless (safe for use in threads and worker processes)
- Pure (no side effects; every call recomputes from scratch)
- Deterministic (identical input yields byte-identical output)

Key functions:
- generate: Lines + options -> SmoothedPath
- build_rectangles: Lines -> Rectangles
- smooth_corner: Round one vertex with a clamped radius
- format_commands: Pen commands -> SVG path data

Key classes:
- BlobGenerator: Runs the full pipeline with bounding box fallback
- ShapelyUnion: Default PolygonUnion implementation
- CornerSmoother: Rounds every vertex of a ring
- PathEmitter: Serializes smoothed rings
- MergedBlobStrategy / PillStrategy: Interchangeable renderers
- BatchProcessor: Parallel rendering of many jobs
"""

from gooeyblob.core.emitter import PathEmitter, format_commands, format_number, ring_commands
from gooeyblob.core.generator import BlobGenerator, generate
from gooeyblob.core.geometry import (
    flatten_smoothed_ring,
    point_in_polygon,
    segments_intersect,
)
from gooeyblob.core.organic import BLOB_PRESETS, get_blob_path, organic_blob_path, preset_names
from gooeyblob.core.processor import BatchProcessor, render_job
from gooeyblob.core.rectangles import build_rectangles, rectangles_bounding_box
from gooeyblob.core.smoother import CornerSmoother, smooth_corner
from gooeyblob.core.strategies import BlobStrategy, MergedBlobStrategy, PillStrategy
from gooeyblob.core.union import PolygonUnion, ShapelyUnion, normalize_ring

__all__ = [
    # Presets
    "BLOB_PRESETS",
    # Processor classes
    "BatchProcessor",
    # Pipeline classes
    "BlobGenerator",
    "BlobStrategy",
    "CornerSmoother",
    "MergedBlobStrategy",
    "PathEmitter",
    "PillStrategy",
    "PolygonUnion",
    "ShapelyUnion",
    # Functions
    "build_rectangles",
    "flatten_smoothed_ring",
    "format_commands",
    "format_number",
    "generate",
    "get_blob_path",
    "normalize_ring",
    "organic_blob_path",
    "point_in_polygon",
    "preset_names",
    "rectangles_bounding_box",
    "render_job",
    "ring_commands",
    "segments_intersect",
    "smooth_corner",
]
