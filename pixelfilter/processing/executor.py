"""
Processing executor - applies filters and pipelines to pixel buffers.

Every pixel is transformed independently of its neighbours, so large
buffers can be split into contiguous ranges and processed on a thread
pool without any synchronization.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, Tuple, Union

from ..core import Pixel, PixelBuffer, ValidationEngine
from .filters import PixelFilter
from .pipeline import FilterPipeline
from .registry import FilterRegistry


logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 65536


class ImageProcessor:
    """Executes a filter or pipeline on pixel buffers."""

    def __init__(
        self,
        registry: Optional[FilterRegistry] = None,
        max_workers: Optional[int] = 1,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        """
        Args:
            registry: Registry used by process_named()
            max_workers: Worker threads; None picks a count from the buffer size
            chunk_size: Pixels per worker task
        """
        if max_workers is not None and max_workers < 1:
            raise ValueError("max_workers must be >= 1 or None")
        if chunk_size < 1:
            raise ValueError("chunk_size must be >= 1")

        self.registry = registry
        self.max_workers = max_workers
        self.chunk_size = chunk_size

    def process(
        self,
        pixels: Sequence[Pixel],
        width: int,
        height: int,
        pipeline: Union[FilterPipeline, PixelFilter],
    ) -> List[Pixel]:
        """
        Apply a filter or pipeline to every pixel of a buffer.

        Args:
            pixels: Row-major input pixels, width * height long. Never modified.
            width: Image width
            height: Image height
            pipeline: FilterPipeline or single filter

        Returns:
            New list of transformed pixels, same length as the input

        Raises:
            MalformedInputError: If the buffer does not match its dimensions
        """
        ValidationEngine.raise_for_errors(
            ValidationEngine.validate_buffer(pixels, width, height)
        )

        steps = self._snapshot(pipeline)
        total = len(pixels)
        num_workers = self._resolve_worker_count(total)

        logger.debug(
            "Processing %dx%d image: %d filter(s), %d worker(s)",
            width, height, len(steps), num_workers,
        )

        if num_workers == 1 or total <= self.chunk_size:
            return self._process_range(pixels, 0, total, steps)

        ranges = [
            (start, min(start + self.chunk_size, total))
            for start in range(0, total, self.chunk_size)
        ]

        result: List[Pixel] = []
        with ThreadPoolExecutor(max_workers=num_workers) as executor:
            # map() yields in submission order and re-raises the first worker error
            for chunk in executor.map(
                lambda bounds: self._process_range(pixels, bounds[0], bounds[1], steps),
                ranges,
            ):
                result.extend(chunk)

        return result

    def process_image(
        self,
        image: PixelBuffer,
        pipeline: Union[FilterPipeline, PixelFilter],
    ) -> PixelBuffer:
        """Apply a filter or pipeline to a PixelBuffer, returning a new one."""
        pixels = self.process(image.pixels, image.width, image.height, pipeline)
        return PixelBuffer(width=image.width, height=image.height, pixels=pixels)

    def process_named(
        self,
        pixels: Sequence[Pixel],
        width: int,
        height: int,
        filter_name: str,
    ) -> List[Pixel]:
        """Apply the registry filter called ``filter_name``."""
        if self.registry is None:
            raise ValueError("ImageProcessor has no registry to resolve filter names")
        return self.process(pixels, width, height, self.registry.lookup(filter_name))

    @staticmethod
    def _snapshot(pipeline: Union[FilterPipeline, PixelFilter]) -> Tuple[PixelFilter, ...]:
        """Freeze the filter sequence for the duration of one call."""
        if isinstance(pipeline, FilterPipeline):
            return tuple(pipeline.filters)
        return (pipeline,)

    @staticmethod
    def _process_range(
        pixels: Sequence[Pixel],
        start: int,
        end: int,
        steps: Tuple[PixelFilter, ...],
    ) -> List[Pixel]:
        """Transform pixels[start:end] through every step in order."""
        out = []
        for index in range(start, end):
            pixel = pixels[index]
            for f in steps:
                if f.matches(pixel):
                    pixel = f.apply(pixel)
            out.append(pixel)
        return out

    def _resolve_worker_count(self, num_pixels: int) -> int:
        if self.max_workers is not None:
            return self.max_workers
        return self._get_optimal_worker_count(num_pixels)

    def _get_optimal_worker_count(self, num_pixels: int) -> int:
        """
        Determine optimal number of worker threads.

        Strategy:
        - Buffers that fit in one chunk: 1 worker
        - Up to 16 chunks: min(4, available_cores)
        - Larger buffers: min(8, available_cores)
        """
        available_cores = os.cpu_count() or 4
        num_chunks = -(-num_pixels // self.chunk_size)

        if num_chunks <= 1:
            return 1
        elif num_chunks <= 16:
            return min(4, available_cores, num_chunks)
        else:
            return min(8, available_cores)
