"""Decorative organic blob shapes.

Predefined blob outlines plus a seeded generator for free-standing blobs
(as opposed to the text-hugging outline). Presets are centered on the
origin; generated blobs are centered on (100, 100). Both fit a 200x200
view box.
"""

import math

from gooeyblob.core.emitter import format_number

PRESET_VIEW_BOX = (-100.0, -100.0, 200.0, 200.0)
GENERATED_VIEW_BOX = (0.0, 0.0, 200.0, 200.0)

BLOB_PRESETS: dict[str, str] = {
    "blob1": (
        "M44.7,-76.4C58.8,-69.2,71.8,-59.1,79.6,-45.8C87.4,-32.6,90,-16.3,88.5,-0.9"
        "C87,14.6,81.4,29.1,73.1,42.3C64.8,55.5,53.8,67.3,40.3,75.4C26.8,83.5,11.1,88,-4.2,88.9"
        "C-19.5,89.8,-34.9,87.2,-48.3,79.5C-61.7,71.8,-72.9,58.9,-80.3,44.5"
        "C-87.7,30.1,-91.3,15.1,-90.1,0.5C-88.9,-14.2,-82.8,-28.3,-74.3,-41.2"
        "C-65.9,-54.1,-55,-65.7,-41.8,-73.3C-28.6,-80.9,-14.3,-84.4,0.1,-84.6"
        "C14.6,-84.7,29.1,-81.6,44.7,-76.4Z"
    ),
    "blob2": (
        "M39.5,-65.9C52.1,-58.6,64.1,-50.2,70.4,-38.5C76.7,-26.8,77.3,-11.8,75.6,2.3"
        "C73.9,16.4,69.9,29.6,62.3,40.2C54.7,50.8,43.5,58.8,31.2,64.4C18.9,70,5.5,73.2,-8.1,73.3"
        "C-21.7,73.4,-35.6,70.4,-47.3,63.5C-59,56.6,-68.5,45.8,-74.4,33.2"
        "C-80.3,20.6,-82.6,6.2,-81.1,-7.8C-79.6,-21.8,-74.3,-35.4,-65.5,-46.2"
        "C-56.7,-57,-44.4,-65,-31.7,-71.3C-19,-77.6,-6,-82.2,5.8,-80.9"
        "C17.6,-79.6,26.9,-73.2,39.5,-65.9Z"
    ),
    "blob3": (
        "M37.3,-63.5C48.9,-56.3,59.4,-47.3,66.2,-35.8C73,-24.3,76.1,-10.3,75.8,3.6"
        "C75.5,17.5,71.8,31.3,64.3,43.2C56.8,55.1,45.5,65.1,32.5,71.4C19.5,77.7,4.8,80.3,-9.4,79.3"
        "C-23.6,78.3,-37.3,73.7,-49.2,66.2C-61.1,58.7,-71.2,48.3,-77.4,35.9"
        "C-83.6,23.5,-85.9,9.1,-84.3,-4.6C-82.7,-18.3,-77.2,-31.3,-68.9,-42.5"
        "C-60.6,-53.7,-49.5,-63.1,-37.2,-69.8C-24.9,-76.5,-11.2,-80.5,1.3,-80.1"
        "C13.8,-79.7,25.7,-70.7,37.3,-63.5Z"
    ),
    "blob4": (
        "M41.2,-71.8C54.2,-64.3,66.1,-55.2,72.8,-43.1C79.5,-31,81,-16,79.3,-1.8"
        "C77.6,12.4,72.7,25.9,65.3,37.8C57.9,49.7,48,60,36.3,66.8C24.6,73.6,11.1,76.9,-2.8,76.3"
        "C-16.7,75.7,-30.8,71.2,-43.2,64.1C-55.6,57,-66.3,47.3,-73.2,35.3"
        "C-80.1,23.3,-83.2,9,-82.3,-5.1C-81.4,-19.2,-76.5,-33.1,-68.1,-44.7"
        "C-59.7,-56.3,-47.8,-65.6,-34.9,-73.1C-22,-80.6,-8.1,-86.3,4.6,-85.8"
        "C17.3,-85.3,28.2,-79.3,41.2,-71.8Z"
    ),
    "blob5": (
        "M35.4,-59.7C46.8,-51.3,57.7,-43.2,64.9,-31.9C72.1,-20.6,75.6,-6.1,74.7,7.9"
        "C73.8,21.9,68.5,35.4,59.8,46.2C51.1,57,39,65.1,25.8,70.4C12.6,75.7,-1.7,78.2,-15.5,76.3"
        "C-29.3,74.4,-42.6,68.1,-54.2,58.9C-65.8,49.7,-75.7,37.6,-80.5,23.8"
        "C-85.3,10,-85,-5.5,-80.3,-19.4C-75.6,-33.3,-66.5,-45.6,-55.1,-54.2"
        "C-43.7,-62.8,-30,-67.7,-16.8,-70.9C-3.6,-74.1,9.1,-75.6,21.1,-73.5"
        "C33.1,-71.4,44.4,-65.7,35.4,-59.7Z"
    ),
}


def preset_names() -> list[str]:
    """Get names of the available presets, in sorted order."""
    return sorted(BLOB_PRESETS)


def organic_blob_points(
    seed: float,
    complexity: int = 8,
    contrast: float = 0.5,
) -> list[tuple[float, float]]:
    """Place blob anchor points on a wobbly circle.

    Args:
        seed: Shape seed; the same seed always yields the same blob
        complexity: Number of anchor points (at least 3)
        contrast: How far radii deviate from the base radius, 0-1

    Returns:
        Anchor points around (100, 100)
    """
    complexity = max(int(complexity), 3)
    contrast = min(max(contrast, 0.0), 1.0)
    angle_step = (math.pi * 2) / complexity

    points: list[tuple[float, float]] = []
    for i in range(complexity):
        angle = i * angle_step
        radius = 50 + math.sin(seed * 1000 + i) * 30 * contrast
        points.append((100 + math.cos(angle) * radius, 100 + math.sin(angle) * radius))
    return points


def organic_blob_path(
    seed: float,
    complexity: int = 8,
    contrast: float = 0.5,
    precision: int = 3,
) -> str:
    """Generate a smooth closed blob path through seeded anchor points.

    Each anchor is joined to the next with a cubic curve whose control
    points lean halfway toward the next anchor and away from the one
    after it.

    Args:
        seed: Shape seed
        complexity: Number of anchor points
        contrast: Radius variation, 0-1
        precision: Decimal places per coordinate

    Returns:
        SVG path data using M, C and Z commands
    """
    points = organic_blob_points(seed, complexity, contrast)

    def fmt(x: float, y: float) -> str:
        return f"{format_number(x, precision)} {format_number(y, precision)}"

    parts = [f"M {fmt(*points[0])}"]
    n = len(points)
    for i in range(n):
        current = points[i]
        nxt = points[(i + 1) % n]
        after = points[(i + 2) % n]

        cp1 = (current[0] + (nxt[0] - current[0]) * 0.5, current[1] + (nxt[1] - current[1]) * 0.5)
        cp2 = (nxt[0] - (after[0] - nxt[0]) * 0.3, nxt[1] - (after[1] - nxt[1]) * 0.3)

        parts.append(f"C {fmt(*cp1)} {fmt(*cp2)} {fmt(*nxt)}")

    parts.append("Z")
    return " ".join(parts)


def get_blob_path(
    preset: str | None = None,
    seed: float = 0.0,
    complexity: int = 8,
    contrast: float = 0.5,
) -> str:
    """Get a preset blob by name, or generate one from a seed.

    Args:
        preset: Preset name; unknown or missing names generate a blob
        seed: Seed for generated blobs
        complexity: Anchor count for generated blobs
        contrast: Radius variation for generated blobs

    Returns:
        SVG path data
    """
    if preset is not None and preset in BLOB_PRESETS:
        return BLOB_PRESETS[preset]
    return organic_blob_path(seed, complexity, contrast)
