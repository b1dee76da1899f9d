"""OpenImageIO bridge for loading and saving pixel buffers."""

from .adapter import OiioAdapter

__all__ = ["OiioAdapter"]
