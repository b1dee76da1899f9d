"""Pytest configuration and shared fixtures."""

import shutil
import tempfile
from pathlib import Path

import pytest

from pixelfilter.core import Pixel, PixelBuffer
from pixelfilter.processing import build_default_registry


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def sample_pixel():
    """The reference pixel used throughout the filter tables."""
    return Pixel(128, 64, 32, 255)


@pytest.fixture
def sample_pixels():
    """A spread of pixels covering the channel extremes."""
    values = (0, 1, 3, 5, 64, 127, 128, 200, 254, 255)
    return [
        Pixel(r, g, b, a)
        for r in values
        for g in (0, 77, 255)
        for b in (2, 128, 255)
        for a in (0, 255)
    ]


@pytest.fixture
def sample_image():
    """A 4x3 gradient image."""
    width, height = 4, 3
    pixels = [
        Pixel(x * 60, y * 100, (x + y) * 30, 255 - x)
        for y in range(height)
        for x in range(width)
    ]
    return PixelBuffer(width=width, height=height, pixels=pixels)


@pytest.fixture
def registry():
    """A fresh registry with the stock configurations."""
    return build_default_registry()
