"""Configuration settings for Gooeyblob.

Blob options are clamped into range rather than rejected: the generator runs
on every keystroke of a live editor and must never fail on benign input.
"""

import math
from enum import Enum
from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel, Field, field_validator

from gooeyblob.domain.line import Alignment

logger = structlog.get_logger(__name__)

DEFAULT_LINE_HEIGHT = 40.0
DEFAULT_SPREAD = 20.0
DEFAULT_ROUNDNESS = 0.5
DEFAULT_PRECISION = 3
MAX_PRECISION = 6


class BlobStyle(str, Enum):
    """Renderer strategy."""

    MERGED = "merged"
    PILL = "pill"


def _finite_or_none(value: Any) -> float | None:
    """Coerce a raw value to a finite float, or None if that is impossible."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


class BlobOptions(BaseModel):
    """Geometry options for a single blob.

    Out-of-range values are clamped to the nearest valid value:

    - spread below 0 becomes 0
    - roundness is clamped into [0, 1]
    - non-positive line_height falls back to the default
    - non-positive font_size falls back to line_height
    - unknown align/style values fall back to left/merged
    """

    line_height: float = Field(
        default=DEFAULT_LINE_HEIGHT,
        description="Distance between consecutive baselines in pixels",
    )
    font_size: float | None = Field(
        default=None,
        description="Font size in pixels (None = line_height)",
    )
    spread: float = Field(
        default=DEFAULT_SPREAD,
        description="Padding added around each line in pixels (NaN or +inf uses the default)",
    )
    roundness: float = Field(
        default=DEFAULT_ROUNDNESS,
        description="Corner roundness, 0 = sharp, 1 = maximum radius",
    )
    align: Alignment = Field(
        default=Alignment.LEFT,
        description="Horizontal line alignment",
    )
    reference_width: float | None = Field(
        default=None,
        description="Container width used for alignment (None = widest line)",
    )
    style: BlobStyle = Field(
        default=BlobStyle.MERGED,
        description="Merged gooey outline or independent pill per line",
    )
    precision: int = Field(
        default=DEFAULT_PRECISION,
        description="Decimal places used when formatting path coordinates",
    )

    @field_validator("line_height", mode="before")
    @classmethod
    def _clamp_line_height(cls, value: Any) -> float:
        number = _finite_or_none(value)
        if number is None or number <= 0:
            logger.debug("Clamped option", option="line_height", value=value)
            return DEFAULT_LINE_HEIGHT
        return number

    @field_validator("font_size", mode="before")
    @classmethod
    def _clamp_font_size(cls, value: Any) -> float | None:
        if value is None:
            return None
        number = _finite_or_none(value)
        if number is None or number <= 0:
            logger.debug("Clamped option", option="font_size", value=value)
            return None
        return number

    @field_validator("spread", mode="before")
    @classmethod
    def _clamp_spread(cls, value: Any) -> float:
        number = _finite_or_none(value)
        if number is None:
            logger.debug("Clamped option", option="spread", value=value)
            # -inf clamps like any negative value; NaN and +inf have no bound to clamp to
            return 0.0 if value == -math.inf else DEFAULT_SPREAD
        if number < 0:
            logger.debug("Clamped option", option="spread", value=value)
            return 0.0
        return number

    @field_validator("roundness", mode="before")
    @classmethod
    def _clamp_roundness(cls, value: Any) -> float:
        number = _finite_or_none(value)
        if number is None:
            logger.debug("Clamped option", option="roundness", value=value)
            return DEFAULT_ROUNDNESS
        clamped = min(max(number, 0.0), 1.0)
        if clamped != number:
            logger.debug("Clamped option", option="roundness", value=value)
        return clamped

    @field_validator("align", mode="before")
    @classmethod
    def _coerce_align(cls, value: Any) -> Alignment:
        if isinstance(value, Alignment):
            return value
        try:
            return Alignment(str(value).lower())
        except ValueError:
            logger.debug("Clamped option", option="align", value=value)
            return Alignment.LEFT

    @field_validator("reference_width", mode="before")
    @classmethod
    def _clamp_reference_width(cls, value: Any) -> float | None:
        if value is None:
            return None
        number = _finite_or_none(value)
        if number is None or number < 0:
            logger.debug("Clamped option", option="reference_width", value=value)
            return None
        return number

    @field_validator("style", mode="before")
    @classmethod
    def _coerce_style(cls, value: Any) -> BlobStyle:
        if isinstance(value, BlobStyle):
            return value
        try:
            return BlobStyle(str(value).lower())
        except ValueError:
            logger.debug("Clamped option", option="style", value=value)
            return BlobStyle.MERGED

    @field_validator("precision", mode="before")
    @classmethod
    def _clamp_precision(cls, value: Any) -> int:
        number = _finite_or_none(value)
        if number is None:
            return DEFAULT_PRECISION
        return int(min(max(number, 0), MAX_PRECISION))

    @property
    def effective_font_size(self) -> float:
        """Font size used for rectangle height, defaulting to line_height."""
        return self.font_size if self.font_size is not None else self.line_height

    @property
    def max_radius(self) -> float:
        """Largest corner radius reachable at roundness 1."""
        return (self.line_height + 2 * self.spread) / 2

    @property
    def requested_radius(self) -> float:
        """Corner radius before per-vertex clamping."""
        return self.roundness * self.max_radius


class OutputConfig(BaseModel):
    """Configuration for SVG document output."""

    fill: str = Field(
        default="#ffffff",
        description="Blob fill color",
    )
    opacity: float = Field(
        default=1.0,
        ge=0.0,
        le=1.0,
        description="Blob fill opacity",
    )
    fill_rule: str = Field(
        default="nonzero",
        description="SVG fill-rule (nonzero|evenodd)",
    )
    margin: float = Field(
        default=0.0,
        ge=0.0,
        description="Extra space around the bounding box in the viewBox",
    )


class ProcessingConfig(BaseModel):
    """Configuration for batch processing."""

    max_workers: int | None = Field(
        default=None,
        description="Max worker processes (None = auto)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GooeyBlobSettings(BaseModel):
    """Main application settings."""

    blob: BlobOptions = Field(default_factory=BlobOptions)
    output: OutputConfig = Field(default_factory=OutputConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GooeyBlobSettings:
    """Get default application settings."""
    return GooeyBlobSettings()
