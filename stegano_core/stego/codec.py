"""
LSB Codec.

This module hides a text message in the least significant bits of the
red, green and blue samples of a decoded RGBA pixel buffer, and recovers
it again.

Frame layout (one bit per R/G/B sample, MSB first, alpha skipped):

    bits 0..31          message length L, unsigned 32-bit big-endian
    bits 32..32+8L-1    L message bytes, XOR-masked when a password is used
    next 32 bits        four zero bytes as terminator (never masked)

L is the length of the unmasked message. Messages are Latin-1 text, one
byte per character; characters above U+00FF are rejected.

Features:
    - All-or-nothing encode: every check runs before the first write
    - Decode returns None for images without a plausible frame
    - Progress callback invoked at fixed pixel checkpoints

Example:
    >>> import numpy as np
    >>> pixels = np.zeros((10, 10, 4), dtype=np.uint8)
    >>> _ = encode(pixels, 10, 10, "hi")
    >>> decode(pixels, 10, 10)
    'hi'
"""

import logging
import numbers
import struct
from typing import Callable, List, Optional

import numpy as np

from .bits import bits_to_bytes, bytes_to_bits, read_bits, write_bits
from .capacity import CARRIER_CHANNELS, CHANNELS_PER_PIXEL, capacity, carrier_bits
from .config import StegoConfig
from .errors import CapacityExceededError, InvalidInputError, MessageEncodingError
from .mask import key_for, mask_bytes, unmask_bytes

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[float], None]

LENGTH_HEADER_BITS = 32
TERMINATOR = b"\x00\x00\x00\x00"
# Intermediate progress stays below this until the operation completes.
PROGRESS_CEILING = 95.0


def encode_text(message: str) -> bytes:
    """
    Convert a message to one byte per character.

    Raises:
        InvalidInputError: If the message is not a string
        MessageEncodingError: If a character is above U+00FF
    """
    if not isinstance(message, str):
        raise InvalidInputError(f"Message must be a string, got {type(message).__name__}")
    try:
        return message.encode("latin-1")
    except UnicodeEncodeError as e:
        raise MessageEncodingError(message[e.start], e.start) from e


def decode_text(data: bytes) -> str:
    """Convert extracted bytes back to text, one character per byte."""
    return data.decode("latin-1")


def build_frame(data: bytes, key: Optional[int] = None) -> bytes:
    """Length header, optionally masked payload, then the terminator."""
    body = mask_bytes(data, key) if key is not None else bytes(data)
    return struct.pack(">I", len(data)) + body + TERMINATOR


class _Progress:
    """Forwards non-decreasing percentages to an optional callback."""

    def __init__(self, callback: Optional[ProgressCallback]):
        self._callback = callback
        self._last = 0.0

    def report(self, percent: float) -> None:
        if self._callback is None:
            return
        self._last = min(PROGRESS_CEILING, max(self._last, percent))
        self._callback(self._last)

    def finish(self) -> None:
        if self._callback is not None:
            self._last = 100.0
            self._callback(100.0)


def _check_dimensions(width, height) -> None:
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 0:
            raise InvalidInputError(
                f"{name} must be a non-negative integer, got {value!r}",
                details={name: value},
            )


def _sample_view(buffer, width: int, height: int, writable: bool) -> np.ndarray:
    """Return a flat uint8 view sharing memory with ``buffer``."""
    _check_dimensions(width, height)

    if isinstance(buffer, np.ndarray):
        if buffer.dtype != np.uint8:
            raise InvalidInputError(
                f"Pixel buffer must hold uint8 samples, got {buffer.dtype}",
                details={"dtype": str(buffer.dtype)},
            )
        if not buffer.flags.c_contiguous:
            raise InvalidInputError("Pixel buffer must be C-contiguous")
        samples = buffer.reshape(-1)
    elif isinstance(buffer, (bytes, bytearray, memoryview)) and len(buffer) == 0:
        samples = np.zeros(0, dtype=np.uint8)
    else:
        try:
            samples = np.frombuffer(buffer, dtype=np.uint8)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"Unsupported pixel buffer type: {type(buffer).__name__}") from e

    if writable and not samples.flags.writeable:
        raise InvalidInputError("Pixel buffer is read-only")

    expected = width * height * CHANNELS_PER_PIXEL
    if samples.size != expected:
        raise InvalidInputError(
            f"Pixel buffer holds {samples.size} samples, expected {expected} for {width}x{height} RGBA",
            details={"length": int(samples.size), "expected": expected},
        )
    return samples


def _copy_buffer(buffer):
    if isinstance(buffer, np.ndarray):
        return buffer.copy()
    return bytearray(buffer)


class LSBCodec:
    """
    Least significant bit encoder and decoder for RGBA pixel buffers.

    Instances hold only configuration and are safe to share between
    threads. Callers must not mutate a buffer while it is being encoded.

    Attributes:
        config: Progress interval and decode validity limits
    """

    def __init__(self, config: Optional[StegoConfig] = None):
        self.config = config or StegoConfig.default()

    @property
    def _checkpoint_bits(self) -> int:
        return self.config.progress_interval * CARRIER_CHANNELS

    def capacity(self, width: int, height: int) -> int:
        """Maximum message length in characters; see :func:`capacity`."""
        _check_dimensions(width, height)
        return capacity(width, height)

    def encode(
        self,
        buffer,
        width: int,
        height: int,
        message: str,
        password: Optional[str] = None,
        on_progress: Optional[ProgressCallback] = None,
        in_place: bool = True,
    ):
        """
        Embed a message into the R/G/B least significant bits of a buffer.

        Args:
            buffer: RGBA samples, width * height * 4 of them, row-major
                    (bytearray, writable memoryview or uint8 numpy array)
            width: Image width in pixels
            height: Image height in pixels
            message: Latin-1 text to hide
            password: Optional password for the XOR mask; empty means none
            on_progress: Called with non-decreasing percentages, last 100
            in_place: When False the caller's buffer is left untouched and
                      a modified copy is returned

        Returns:
            The modified buffer (the caller's object unless in_place=False)

        Raises:
            InvalidInputError: Bad dimensions or buffer
            MessageEncodingError: Character above U+00FF in the message
            CapacityExceededError: Message longer than the image capacity
        """
        samples = _sample_view(buffer, width, height, writable=in_place)
        data = encode_text(message)

        limit = capacity(width, height)
        if len(message) > limit:
            raise CapacityExceededError(len(message), limit)

        key = key_for(password)
        frame_bits = bytes_to_bits(build_frame(data, key))
        available = carrier_bits(width, height)
        if len(frame_bits) > available:
            # Only reachable when the image is too small for the framing itself.
            raise CapacityExceededError(len(message), limit)

        logger.info(
            f"Encoding {len(data)} characters into {width}x{height} image, "
            f"capacity={limit}, masked={key is not None}"
        )

        if not in_place:
            buffer = _copy_buffer(buffer)
            samples = _sample_view(buffer, width, height, writable=True)

        progress = _Progress(on_progress)
        total = len(frame_bits)
        step = self._checkpoint_bits
        for start in range(0, total, step):
            write_bits(samples, frame_bits[start:start + step], start)
            progress.report((start + step) / total * 100)
        progress.finish()

        logger.debug(f"Wrote {total} frame bits across {-(-total // CARRIER_CHANNELS)} pixels")
        return buffer

    def decode(
        self,
        buffer,
        width: int,
        height: int,
        password: Optional[str] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> Optional[str]:
        """
        Recover a message embedded by :meth:`encode`.

        A wrong password is not detected; it produces a different string.

        Args:
            buffer: RGBA samples, width * height * 4 of them, row-major
            width: Image width in pixels
            height: Image height in pixels
            password: Password used at encode time, if any
            on_progress: Called with non-decreasing percentages, last 100

        Returns:
            The message, or None when no plausible frame is present. A
            declared length that runs past the end of the image counts as
            implausible: None is returned rather than a truncated string.

        Raises:
            InvalidInputError: Bad dimensions or buffer
        """
        samples = _sample_view(buffer, width, height, writable=False)
        available = carrier_bits(width, height)
        if available < LENGTH_HEADER_BITS:
            logger.debug(f"{width}x{height} image too small to hold a length header")
            return None

        header = bits_to_bytes(read_bits(samples, LENGTH_HEADER_BITS))
        declared = struct.unpack(">I", header)[0]
        if declared <= 0 or declared > self.config.max_declared_length:
            logger.debug(f"Rejecting declared length {declared}: no message present")
            return None

        payload_bits = declared * 8
        if LENGTH_HEADER_BITS + payload_bits > available:
            logger.debug(f"Declared length {declared} does not fit in {width}x{height} image")
            return None

        logger.info(f"Decoding {declared} characters from {width}x{height} image")

        progress = _Progress(on_progress)
        bits = self._read_payload(samples, payload_bits, progress)
        payload = bits_to_bytes(bits)

        key = key_for(password)
        if key is not None:
            payload = unmask_bytes(payload, key)
        progress.finish()

        message = decode_text(payload)
        return message if len(message) > 0 else None

    def _read_payload(self, samples: np.ndarray, count: int, progress: _Progress) -> List[int]:
        bits: List[int] = []
        step = self._checkpoint_bits
        for offset in range(0, count, step):
            chunk = min(step, count - offset)
            bits.extend(read_bits(samples, chunk, LENGTH_HEADER_BITS + offset))
            progress.report(len(bits) / count * 100)
        return bits


_default_codec = LSBCodec()


def encode(
    buffer,
    width: int,
    height: int,
    message: str,
    password: Optional[str] = None,
    on_progress: Optional[ProgressCallback] = None,
):
    """Embed ``message`` in place using the default configuration."""
    return _default_codec.encode(buffer, width, height, message, password, on_progress)


def decode(
    buffer,
    width: int,
    height: int,
    password: Optional[str] = None,
    on_progress: Optional[ProgressCallback] = None,
) -> Optional[str]:
    """Recover a message using the default configuration; None if absent."""
    return _default_codec.decode(buffer, width, height, password, on_progress)
