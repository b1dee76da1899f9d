"""Conversions between numpy image arrays and pixel buffers."""

import numpy as np

from .exceptions import MalformedInputError
from .types import CHANNEL_MAX, Pixel, PixelBuffer


def buffer_from_array(array: np.ndarray) -> PixelBuffer:
    """
    Build a PixelBuffer from an 8-bit image array.

    Args:
        array: (height, width) or (height, width, channels) array with 1-4 channels.
            Gray sources are replicated to red, green and blue; a missing
            alpha channel becomes fully opaque.

    Returns:
        PixelBuffer with row-major pixels
    """
    array = np.asarray(array)
    if array.ndim == 2:
        array = array[:, :, np.newaxis]
    if array.ndim != 3:
        raise MalformedInputError(f"Expected a 2D or 3D image array, got {array.ndim} dimensions")
    if array.dtype != np.uint8:
        raise MalformedInputError(f"Expected uint8 image data, got {array.dtype}")

    height, width, nchannels = array.shape

    if nchannels == 1:
        rgba = np.concatenate([array, array, array, _opaque(height, width)], axis=2)
    elif nchannels == 2:
        # gray + alpha
        gray = array[:, :, :1]
        rgba = np.concatenate([gray, gray, gray, array[:, :, 1:2]], axis=2)
    elif nchannels == 3:
        rgba = np.concatenate([array, _opaque(height, width)], axis=2)
    elif nchannels == 4:
        rgba = array
    else:
        raise MalformedInputError(f"Unsupported channel count: {nchannels}")

    pixels = [Pixel(*values) for values in rgba.reshape(-1, 4).tolist()]
    return PixelBuffer(width=width, height=height, pixels=pixels)


def buffer_to_array(buffer: PixelBuffer) -> np.ndarray:
    """Return a (height, width, 4) uint8 array for a PixelBuffer."""
    if len(buffer.pixels) != buffer.width * buffer.height:
        raise MalformedInputError(
            f"Buffer holds {len(buffer.pixels)} pixels, expected {buffer.width * buffer.height}"
        )
    flat = np.array([p.as_tuple() for p in buffer.pixels], dtype=np.uint8)
    return flat.reshape(buffer.height, buffer.width, 4)


def _opaque(height: int, width: int) -> np.ndarray:
    return np.full((height, width, 1), CHANNEL_MAX, dtype=np.uint8)
