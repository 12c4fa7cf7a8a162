"""
Image File Adapter.

This module moves pixels between image files and the flat RGBA buffers
the codec works on. Any input Pillow can read in an accepted format is
converted to RGBA; output is always written as PNG, since lossy formats
destroy the least significant bits that carry the message.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from .config import StegoConfig
from .errors import ImageIOError

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


@dataclass
class PixelImage:
    """
    A decoded image in the codec's channel layout.

    Attributes:
        pixels: uint8 array of shape (height, width, 4), RGBA, row-major
        width: Width in pixels
        height: Height in pixels
        format: Container format the image was read from (e.g. "PNG")
    """

    pixels: np.ndarray
    width: int
    height: int
    format: Optional[str] = None

    @classmethod
    def from_pil(cls, image: Image.Image, fmt: Optional[str] = None) -> 'PixelImage':
        """Convert a Pillow image to RGBA samples."""
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        pixels = np.array(image, dtype=np.uint8)
        width, height = image.size
        return cls(pixels=pixels, width=width, height=height, format=fmt or image.format)

    def to_pil(self) -> Image.Image:
        """Build a Pillow RGBA image from the samples."""
        return Image.fromarray(self.pixels)


def load_image(path: PathLike, config: Optional[StegoConfig] = None) -> PixelImage:
    """
    Read an image file into an RGBA pixel buffer.

    Args:
        path: Image file to read
        config: Size limit and accepted formats

    Returns:
        PixelImage with a writable (height, width, 4) uint8 array

    Raises:
        ImageIOError: Missing file, file too large, unreadable or
                      unsupported format
    """
    config = config or StegoConfig.default()
    path = Path(path)

    if not path.is_file():
        raise ImageIOError(f"Image not found: {path}", code=1101, details={"path": str(path)})

    size = path.stat().st_size
    if size > config.max_file_size:
        raise ImageIOError(
            f"Image file too large: {size} bytes (limit {config.max_file_size})",
            code=1102,
            details={"size": size, "limit": config.max_file_size},
        )

    try:
        with Image.open(path) as img:
            fmt = img.format
            if fmt not in config.accepted_formats:
                raise ImageIOError(
                    f"Unsupported image format: {fmt}",
                    code=1103,
                    details={"format": fmt, "accepted": sorted(config.accepted_formats)},
                )
            image = PixelImage.from_pil(img, fmt)
    except (UnidentifiedImageError, OSError) as e:
        raise ImageIOError(f"Failed to load image {path}: {e}", code=1104) from e

    logger.debug(f"Loaded {path} ({fmt}, {image.width}x{image.height})")
    return image


def save_image(image: PixelImage, path: PathLike) -> Path:
    """
    Write pixels to a lossless PNG file.

    Raises:
        ImageIOError: If the file cannot be written
    """
    path = Path(path)
    try:
        image.to_pil().save(path, format="PNG")
    except OSError as e:
        raise ImageIOError(f"Failed to write image {path}: {e}", code=1105) from e

    logger.debug(f"Saved {image.width}x{image.height} image to {path}")
    return path


def default_output_path(path: PathLike, prefix: str = "encoded_") -> Path:
    """``photo.jpg`` -> ``encoded_photo.png`` in the same directory."""
    path = Path(path)
    return path.with_name(f"{prefix}{path.stem}.png")
