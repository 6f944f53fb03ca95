"""Gooeyblob - Text-hugging blob backgrounds.

Gooeyblob turns a block of wrapped text lines into a single smooth outline
that follows the silhouette of the text: one padded rectangle per line,
merged where lines overlap, with every convex and concave corner rounded.

Example:
    >>> from gooeyblob import BlobOptions, Line, generate
    >>> result = generate([Line("HI", 40.0)], BlobOptions(line_height=30, spread=6))
    >>> result.bounding_box.width
    52.0

The resulting ``result.path`` can be dropped straight into an SVG
``<path d="...">`` attribute.
"""

from gooeyblob.config import BlobOptions
from gooeyblob.core.generator import BlobGenerator, generate
from gooeyblob.domain import Alignment, Line, SmoothedPath

__version__ = "0.1.0"

__all__ = [
    "Alignment",
    "BlobGenerator",
    "BlobOptions",
    "Line",
    "SmoothedPath",
    "__version__",
    "generate",
]
