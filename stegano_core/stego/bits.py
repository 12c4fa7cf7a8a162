"""
Bit Packer/Unpacker.

Converts between byte strings and MSB-first bit sequences, and reads or
writes a single bit in the least significant bit of one channel sample.
It also maps positions in the embedded bit stream onto sample indices of
a flat RGBA buffer, skipping every alpha sample.
"""

from typing import Iterable, List, Sequence, Union

import numpy as np

from .capacity import CARRIER_CHANNELS, CHANNELS_PER_PIXEL

ByteLike = Union[bytes, bytearray, memoryview]


def bytes_to_bits(data: ByteLike) -> List[int]:
    """
    Expand each byte into 8 bits, most significant bit first.

    Example:
        >>> bytes_to_bits(b"A")
        [0, 1, 0, 0, 0, 0, 0, 1]
    """
    if not data:
        return []
    return np.unpackbits(np.frombuffer(bytes(data), dtype=np.uint8)).tolist()


def bits_to_bytes(bits: Iterable[int]) -> bytes:
    """
    Pack an MSB-first bit sequence back into bytes.

    A trailing group of fewer than 8 bits is zero-padded on the right,
    so [1, 0, 1] packs to b"\\xa0". Any non-zero value counts as a 1 bit.
    """
    bit_array = np.fromiter((1 if bit else 0 for bit in bits), dtype=np.uint8)
    if bit_array.size == 0:
        return b""
    return np.packbits(bit_array).tobytes()


def write_bit(buffer, index: int, bit: int) -> None:
    """Replace the LSB of ``buffer[index]`` with ``bit``, in place."""
    buffer[index] = (int(buffer[index]) & 0xFE) | (bit & 1)


def read_bit(buffer, index: int) -> int:
    """Return the LSB of ``buffer[index]``."""
    return int(buffer[index]) & 1


def sample_index(bit_position: int) -> int:
    """
    Map a position in the embedded bit stream to a flat sample index.

    Bits fill R, G, B of pixel 0, then R, G, B of pixel 1 and so on; the
    fourth (alpha) sample of every pixel is skipped.
    """
    pixel, channel = divmod(bit_position, CARRIER_CHANNELS)
    return pixel * CHANNELS_PER_PIXEL + channel


def write_bits(buffer, bits: Sequence[int], start: int = 0) -> None:
    """Write ``bits`` into consecutive carrier positions from ``start``."""
    for offset, bit in enumerate(bits):
        write_bit(buffer, sample_index(start + offset), bit)


def read_bits(buffer, count: int, start: int = 0) -> List[int]:
    """Read ``count`` bits from consecutive carrier positions from ``start``."""
    return [read_bit(buffer, sample_index(position)) for position in range(start, start + count)]
