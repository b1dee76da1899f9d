"""
OpenImageIO adapter for reading and writing pixel buffers.

Decodes any format OIIO understands into 8-bit RGBA pixel buffers and
encodes buffers back to files. The processing core never imports this module.
"""

import logging
from pathlib import Path
from typing import Union

import numpy as np
import OpenImageIO as oiio

from ..core import ImageIOError, PixelBuffer
from ..core.arrays import buffer_from_array, buffer_to_array


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class OiioAdapter:
    """Thin wrapper for the OIIO bindings."""

    @staticmethod
    def read_image(filepath: PathLike) -> PixelBuffer:
        """
        Read the first subimage of a file as 8-bit RGBA.

        Raises ImageIOError if the file cannot be opened or decoded.
        """
        path = str(filepath)
        # Straight alpha, as stored in the file
        config = oiio.ImageSpec()
        config.attribute("oiio:UnassociatedAlpha", 1)
        inp = oiio.ImageInput.open(path, config)
        if not inp:
            raise ImageIOError(f"Cannot open image: {oiio.geterror()}", path)

        try:
            spec = inp.spec()
            data = inp.read_image(0, 0, 0, spec.nchannels, oiio.UINT8)
            if data is None:
                raise ImageIOError(f"Cannot read pixels: {inp.geterror()}", path)
        finally:
            inp.close()

        array = np.asarray(data, dtype=np.uint8).reshape(spec.height, spec.width, spec.nchannels)
        logger.debug(
            "Read %s: %dx%d, %d channel(s) %s",
            path, spec.width, spec.height, spec.nchannels, list(spec.channelnames),
        )
        return buffer_from_array(array)

    @staticmethod
    def write_image(filepath: PathLike, buffer: PixelBuffer) -> None:
        """
        Write a pixel buffer as an 8-bit RGBA file; format follows the extension.

        Raises ImageIOError if the file cannot be created or written.
        """
        path = str(filepath)
        array = buffer_to_array(buffer)

        out = oiio.ImageOutput.create(path)
        if not out:
            raise ImageIOError(f"No writer for this format: {oiio.geterror()}", path)

        spec = oiio.ImageSpec(buffer.width, buffer.height, 4, oiio.UINT8)
        spec.channelnames = ("R", "G", "B", "A")
        spec.alpha_channel = 3
        spec.attribute("oiio:UnassociatedAlpha", 1)

        if not out.open(path, spec):
            raise ImageIOError(f"Cannot open for writing: {out.geterror()}", path)

        try:
            if not out.write_image(array):
                raise ImageIOError(f"write_image failed: {out.geterror()}", path)
        finally:
            out.close()

        logger.debug("Wrote %s: %dx%d", path, buffer.width, buffer.height)

    @staticmethod
    def get_oiio_version() -> str:
        """Return OIIO version string."""
        return str(getattr(oiio, "__version__", "unknown"))
