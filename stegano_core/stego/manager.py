"""
Steganography Manager.

File-level entry point combining the image adapter and the LSB codec:
read a carrier image, embed or extract a message, write the result.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .codec import LSBCodec, ProgressCallback
from .config import StegoConfig
from .image import PathLike, default_output_path, load_image, save_image

logger = logging.getLogger(__name__)


@dataclass
class EmbeddingResult:
    """
    Result of embedding a message into an image file.

    Attributes:
        output_path: PNG file holding the carrier image
        width: Carrier width in pixels
        height: Carrier height in pixels
        message_length: Number of characters embedded
        capacity: Maximum number of characters the carrier can hold
    """

    output_path: Path
    width: int
    height: int
    message_length: int
    capacity: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'output_path': str(self.output_path),
            'width': self.width,
            'height': self.height,
            'message_length': self.message_length,
            'capacity': self.capacity,
        }


@dataclass
class ExtractionResult:
    """
    Result of probing an image file for a message.

    Attributes:
        message: Recovered text, or None when no message was found
        width: Carrier width in pixels
        height: Carrier height in pixels
    """

    message: Optional[str]
    width: int
    height: int

    @property
    def found(self) -> bool:
        return self.message is not None


class SteganographyManager:
    """
    Hide and recover text messages in image files.

    Example:
        >>> manager = SteganographyManager()
        >>> result = manager.embed_file("cover.png", "meet at noon", password="pw")
        >>> manager.extract_file(result.output_path, password="pw").message
        'meet at noon'
    """

    def __init__(self, config: Optional[StegoConfig] = None):
        self.config = config or StegoConfig.default()
        self.codec = LSBCodec(self.config)

    def capacity_of(self, carrier_path: PathLike) -> int:
        """Maximum message length, in characters, for an image file."""
        image = load_image(carrier_path, self.config)
        return self.codec.capacity(image.width, image.height)

    def embed_file(
        self,
        carrier_path: PathLike,
        message: str,
        output_path: Optional[PathLike] = None,
        password: Optional[str] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> EmbeddingResult:
        """
        Embed a message into an image file and save the carrier as PNG.

        Args:
            carrier_path: Cover image
            message: Latin-1 text to hide
            output_path: Destination; defaults to ``encoded_<name>.png``
                         next to the cover image
            password: Optional password for the XOR mask
            on_progress: Progress callback forwarded to the codec

        Returns:
            EmbeddingResult describing the written carrier

        Raises:
            StegoError: On unreadable input, oversized message or write failure
        """
        image = load_image(carrier_path, self.config)
        self.codec.encode(image.pixels, image.width, image.height, message, password, on_progress)

        if output_path is None:
            output_path = default_output_path(carrier_path, self.config.output_prefix)
        saved = save_image(image, output_path)

        logger.info(f"Embedded {len(message)} characters into {saved}")
        return EmbeddingResult(
            output_path=saved,
            width=image.width,
            height=image.height,
            message_length=len(message),
            capacity=self.codec.capacity(image.width, image.height),
        )

    def extract_file(
        self,
        carrier_path: PathLike,
        password: Optional[str] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> ExtractionResult:
        """
        Recover a message from an image file.

        Returns:
            ExtractionResult; ``message`` is None when nothing was found

        Raises:
            StegoError: If the image cannot be read
        """
        image = load_image(carrier_path, self.config)
        message = self.codec.decode(image.pixels, image.width, image.height, password, on_progress)
        if message is None:
            logger.info(f"No message found in {carrier_path}")
        return ExtractionResult(message=message, width=image.width, height=image.height)
