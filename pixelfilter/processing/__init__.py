"""
Processing system for the pixel filter toolkit.

Provides immutable per-pixel filters, a named registry of default
configurations, ordered pipelines, and the executor that runs them over
a pixel buffer.
"""

from .filters import (
    PixelFilter,
    FilterParameter,
    ParameterType,
    EnhancedRedFilter,
    BlackAndWhiteFilter,
    HalfBrightnessFilter,
    HalfBrighterFilter,
    BalanceFilter,
)
from .filters import (
    create_filter,
    get_filters_by_category,
    get_all_categories,
    FILTER_TYPES,
)
from .registry import FilterRegistry, build_default_registry, default_filters
from .pipeline import FilterPipeline
from .executor import ImageProcessor

__all__ = [
    "FilterPipeline",
    "PixelFilter",
    "FilterParameter",
    "ParameterType",
    "FilterRegistry",
    "ImageProcessor",
    # Helpers
    "create_filter",
    "get_filters_by_category",
    "get_all_categories",
    "build_default_registry",
    "default_filters",
    "FILTER_TYPES",
    # Filters
    "EnhancedRedFilter",
    "BlackAndWhiteFilter",
    "HalfBrightnessFilter",
    "HalfBrighterFilter",
    "BalanceFilter",
]
