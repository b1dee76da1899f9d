"""
Pixel Filter Toolkit.

Per-pixel RGBA color filters, a named registry of default configurations,
and ordered filter pipelines applied over in-memory pixel buffers.
"""

from .core import (
    Pixel,
    PixelBuffer,
    clamp,
    PixelFilterError,
    FilterNotFoundError,
    MalformedInputError,
    InvalidParameterError,
)
from .processing import (
    PixelFilter,
    FilterPipeline,
    FilterRegistry,
    ImageProcessor,
    build_default_registry,
    create_filter,
)

__version__ = "0.1.0"

__all__ = [
    "Pixel",
    "PixelBuffer",
    "clamp",
    "PixelFilterError",
    "FilterNotFoundError",
    "MalformedInputError",
    "InvalidParameterError",
    "PixelFilter",
    "FilterPipeline",
    "FilterRegistry",
    "ImageProcessor",
    "build_default_registry",
    "create_filter",
]
