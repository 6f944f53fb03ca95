"""Configuration management for gooeyblob.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments, job files or defaults.

Key classes:
- BlobOptions: Geometry options for one blob (clamped, never rejected)
- OutputConfig: SVG document output settings
- ProcessingConfig: Batch processing settings
- LoggingConfig: Logging settings
- GooeyBlobSettings: Main application settings
"""

from gooeyblob.config.settings import (
    Alignment,
    BlobOptions,
    BlobStyle,
    GooeyBlobSettings,
    LoggingConfig,
    OutputConfig,
    ProcessingConfig,
    get_default_settings,
)

__all__ = [
    "Alignment",
    "BlobOptions",
    "BlobStyle",
    "GooeyBlobSettings",
    "LoggingConfig",
    "OutputConfig",
    "ProcessingConfig",
    "get_default_settings",
]
