"""
Unit Tests for the image file adapter
"""

import pytest
import numpy as np
from pathlib import Path
from PIL import Image

from stegano_core.stego.config import StegoConfig
from stegano_core.stego.errors import ImageIOError
from stegano_core.stego.image import PixelImage, default_output_path, load_image, save_image


class TestLoadImage:
    """Test cases for load_image()."""

    def test_rgba_png(self, cover_png):
        """Test loading an RGBA PNG."""
        image = load_image(cover_png)

        assert image.width == 64
        assert image.height == 48
        assert image.format == "PNG"
        assert image.pixels.shape == (48, 64, 4)
        assert image.pixels.dtype == np.uint8
        assert image.pixels.flags.writeable

    def test_rgb_converted_to_rgba(self, tmp_path):
        """Test that RGB input gains an opaque alpha channel."""
        img_array = np.full((5, 7, 3), 128, dtype=np.uint8)
        path = tmp_path / "rgb.png"
        Image.fromarray(img_array).save(str(path))

        image = load_image(path)

        assert image.pixels.shape == (5, 7, 4)
        assert np.all(image.pixels[:, :, 3] == 255)
        assert np.all(image.pixels[:, :, :3] == 128)

    def test_jpeg_accepted(self, cover_jpeg):
        """Test that JPEG covers load."""
        image = load_image(cover_jpeg)
        assert image.format == "JPEG"
        assert image.pixels.shape == (32, 32, 4)

    def test_missing_file(self, tmp_path):
        """Test a path that does not exist."""
        with pytest.raises(ImageIOError) as exc_info:
            load_image(tmp_path / "missing.png")
        assert exc_info.value.code == 1101

    def test_file_too_large(self, cover_png):
        """Test the configured file size limit."""
        with pytest.raises(ImageIOError) as exc_info:
            load_image(cover_png, StegoConfig(max_file_size=16))
        assert exc_info.value.code == 1102

    def test_unsupported_format(self, tmp_path):
        """Test a readable image in a format that is not accepted."""
        path = tmp_path / "anim.gif"
        Image.new("RGB", (8, 8)).save(str(path), format="GIF")

        with pytest.raises(ImageIOError) as exc_info:
            load_image(path)
        assert exc_info.value.code == 1103
        assert exc_info.value.details["format"] == "GIF"

    def test_custom_accepted_formats(self, tmp_path):
        """Test widening the accepted formats."""
        path = tmp_path / "anim.gif"
        Image.new("RGB", (8, 8)).save(str(path), format="GIF")

        image = load_image(path, StegoConfig(accepted_formats={"gif"}))
        assert image.format == "GIF"

    def test_not_an_image(self, tmp_path):
        """Test a file Pillow cannot identify."""
        path = tmp_path / "notes.png"
        path.write_text("not really a png")

        with pytest.raises(ImageIOError) as exc_info:
            load_image(path)
        assert exc_info.value.code == 1104


class TestSaveImage:
    """Test cases for save_image()."""

    def test_png_is_lossless(self, tmp_path):
        """Test that every sample survives a save and reload."""
        rng = np.random.default_rng(7)
        pixels = rng.integers(0, 256, size=(6, 9, 4), dtype=np.uint8)
        path = save_image(PixelImage(pixels=pixels, width=9, height=6), tmp_path / "out.png")

        reloaded = load_image(path)
        assert reloaded.format == "PNG"
        assert np.array_equal(reloaded.pixels, pixels)

    def test_write_failure(self, tmp_path):
        """Test writing into a directory that does not exist."""
        pixels = np.zeros((2, 2, 4), dtype=np.uint8)
        with pytest.raises(ImageIOError) as exc_info:
            save_image(PixelImage(pixels=pixels, width=2, height=2), tmp_path / "nope" / "out.png")
        assert exc_info.value.code == 1105


class TestOutputPath:
    """Test cases for default_output_path()."""

    def test_prefix_and_png_suffix(self):
        """Test encoded_<stem>.png next to the input."""
        assert default_output_path(Path("pics/photo.jpg")) == Path("pics/encoded_photo.png")

    def test_custom_prefix(self):
        """Test a configured prefix."""
        assert default_output_path("cover.png", prefix="stego_") == Path("stego_cover.png")
