"""
Password Masking.

A password is reduced to a 32-bit key with a rolling ``hash * 31 + unit``
hash over its UTF-16 code units. Each message byte is then XOR-ed with
``(key + position) % 256``.

This is obfuscation, not encryption. There is no integrity check, so a
wrong password silently yields different bytes instead of an error, and
the key space is trivially searchable. Encrypt the message beforehand if
confidentiality matters.
"""

from typing import Optional

import numpy as np

from .bits import ByteLike

_UINT32_MASK = 0xFFFFFFFF


def password_key(password: str) -> int:
    """
    Derive the non-negative mask key for a password.

    The hash is truncated to a signed 32-bit integer after every step and
    the absolute value of the final result is returned.

    Example:
        >>> password_key("a")
        97
    """
    value = 0
    # Lone surrogates (e.g. from undecodable argv bytes) hash as their code unit.
    code_units = password.encode("utf-16-be", "surrogatepass")
    for i in range(0, len(code_units), 2):
        unit = (code_units[i] << 8) | code_units[i + 1]
        value = (value * 31 + unit) & _UINT32_MASK
    if value & 0x80000000:
        value -= 1 << 32
    return abs(value)


def mask_bytes(data: ByteLike, key: int) -> bytes:
    """XOR every byte with ``(key + index) % 256``."""
    if not data:
        return b""
    raw = np.frombuffer(bytes(data), dtype=np.uint8)
    offsets = ((key + np.arange(raw.size, dtype=np.int64)) % 256).astype(np.uint8)
    return np.bitwise_xor(raw, offsets).tobytes()


def unmask_bytes(data: ByteLike, key: int) -> bytes:
    """Reverse :func:`mask_bytes`. The XOR mask is its own inverse."""
    return mask_bytes(data, key)


def key_for(password: Optional[str]) -> Optional[int]:
    """Return the mask key, or None when no (or an empty) password is given."""
    if not password:
        return None
    return password_key(password)
