"""
Capacity Calculator.

Every pixel carries three message bits, one in the least significant bit
of each of its red, green and blue samples. The alpha sample is never
used. A fixed 64-bit reservation covers the 32-bit length header and the
32-bit terminator that frame every message.
"""

CHANNELS_PER_PIXEL = 4
CARRIER_CHANNELS = 3
METADATA_BITS = 64


def carrier_bits(width: int, height: int) -> int:
    """Total number of LSB-carrying samples (alpha excluded)."""
    return width * height * CARRIER_CHANNELS


def capacity(width: int, height: int) -> int:
    """
    Maximum message length, in characters, for an image of the given size.

    Args:
        width: Image width in pixels
        height: Image height in pixels

    Returns:
        floor((width * height * 3 - 64) / 8), clamped to 0 for images too
        small to hold the framing overhead.

    Example:
        >>> capacity(10, 10)
        29
    """
    available = carrier_bits(width, height) - METADATA_BITS
    if available < 0:
        return 0
    return available // 8
