"""Tests for the OpenImageIO adapter and end-to-end CLI runs."""

import pytest

pytest.importorskip("OpenImageIO")

from pixelfilter.core import ImageIOError, Pixel, PixelBuffer  # noqa: E402
from pixelfilter.main import main  # noqa: E402
from pixelfilter.oiio import OiioAdapter  # noqa: E402
from pixelfilter.processing import BlackAndWhiteFilter  # noqa: E402


@pytest.fixture
def opaque_image():
    width, height = 5, 4
    pixels = [
        Pixel((x * 50) % 256, (y * 60) % 256, (x * y * 9) % 256, 255)
        for y in range(height)
        for x in range(width)
    ]
    return PixelBuffer(width=width, height=height, pixels=pixels)


class TestOiioAdapter:
    """Test reading and writing files."""

    def test_write_and_read_png(self, temp_dir, opaque_image):
        path = temp_dir / "image.png"
        OiioAdapter.write_image(path, opaque_image)

        loaded = OiioAdapter.read_image(path)

        assert (loaded.width, loaded.height) == (5, 4)
        assert loaded.pixels == opaque_image.pixels

    def test_read_missing_file(self, temp_dir):
        with pytest.raises(ImageIOError) as exc_info:
            OiioAdapter.read_image(temp_dir / "missing.png")
        assert exc_info.value.path.endswith("missing.png")

    def test_write_unknown_format(self, temp_dir, opaque_image):
        with pytest.raises(ImageIOError):
            OiioAdapter.write_image(temp_dir / "image.notaformat", opaque_image)

    def test_version(self):
        assert OiioAdapter.get_oiio_version()


class TestCommandLine:
    """Test full read/process/write runs."""

    def test_black_and_white(self, temp_dir, opaque_image):
        src, dst = temp_dir / "in.png", temp_dir / "out.png"
        OiioAdapter.write_image(src, opaque_image)

        status = main([
            str(src), str(dst), "-f", "BW",
            "--workers", "2", "--settings", str(temp_dir / "settings.ini"),
        ])

        assert status == 0
        result = OiioAdapter.read_image(dst)
        assert result.pixels == [BlackAndWhiteFilter().apply(p) for p in opaque_image.pixels]

    def test_unreadable_input(self, temp_dir):
        status = main([
            str(temp_dir / "missing.png"), str(temp_dir / "out.png"), "-f", "BW",
            "--settings", str(temp_dir / "settings.ini"),
        ])
        assert status == 1
