"""
SteganoTool Steganography Module - LSB message hiding.

This module hides text messages in the least significant bits of the
red, green and blue channels of RGBA pixel buffers. An optional password
applies a reversible XOR mask; it is obfuscation, not encryption.

Modules:
    capacity: Capacity arithmetic
    bits: Bit packing and single-sample LSB access
    mask: Password key derivation and XOR masking
    codec: Frame encoder and decoder
    image: Pillow-based image file adapter
    manager: File-level embed and extract

Usage:
    >>> from stegano_core.stego import SteganographyManager
    >>> manager = SteganographyManager()
    >>> result = manager.embed_file("cover.png", "secret", password="pw")
    >>> manager.extract_file(result.output_path, password="pw").message
    'secret'
"""

from .capacity import capacity
from .codec import LSBCodec, decode, encode
from .config import StegoConfig
from .errors import (
    CapacityExceededError,
    ImageIOError,
    InvalidInputError,
    MessageEncodingError,
    StegoError,
)
from .image import PixelImage, load_image, save_image
from .manager import EmbeddingResult, ExtractionResult, SteganographyManager

__all__ = [
    "capacity",
    "encode",
    "decode",
    "LSBCodec",
    "StegoConfig",
    "StegoError",
    "CapacityExceededError",
    "InvalidInputError",
    "MessageEncodingError",
    "ImageIOError",
    "PixelImage",
    "load_image",
    "save_image",
    "SteganographyManager",
    "EmbeddingResult",
    "ExtractionResult",
]

__version__ = "1.0.0"
