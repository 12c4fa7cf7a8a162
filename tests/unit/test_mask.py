"""
Unit Tests for password masking
"""

import numpy as np
import pytest

from stegano_core.stego.codec import decode, encode
from stegano_core.stego.mask import key_for, mask_bytes, password_key, unmask_bytes


class TestPasswordKey:
    """Test cases for password key derivation."""

    def test_single_character(self):
        """Test that a one-character password hashes to its code."""
        assert password_key("a") == 97

    def test_rolling_hash(self):
        """Test hash = hash * 31 + code."""
        assert password_key("ab") == 97 * 31 + 98
        assert password_key("alpha") == 92909918

    def test_empty_password(self):
        """Test that an empty password hashes to 0."""
        assert password_key("") == 0

    def test_signed_overflow_takes_absolute_value(self):
        """Test that a hash wrapping to the most negative int32 becomes positive."""
        # Hashes to -2**31 after 32-bit truncation
        assert password_key("polygenelubricants") == 2 ** 31

    def test_result_never_negative(self):
        """Test that long passwords still give a non-negative key."""
        key = password_key("a much longer password that overflows many times")
        assert 0 <= key <= 2 ** 31

    def test_astral_characters_hash_per_code_unit(self):
        """Test that characters outside the BMP hash as surrogate pairs."""
        assert password_key("\U0001F600") == 0xD83D * 31 + 0xDE00

    def test_lone_surrogate_hashes_as_code_unit(self):
        """Test that an unpaired surrogate hashes like any other code unit."""
        assert password_key("\udcff") == 0xDCFF
        assert password_key("a\udcff") == 97 * 31 + 0xDCFF

    def test_lone_surrogate_password_round_trip(self):
        """Test encode and decode with a password holding an unpaired surrogate."""
        pixels = np.zeros((10, 10, 4), dtype=np.uint8)
        encode(pixels, 10, 10, "hi", password="\udcff")
        assert decode(pixels, 10, 10, password="\udcff") == "hi"

    def test_key_for_treats_empty_as_no_password(self):
        """Test that None and '' both disable masking."""
        assert key_for(None) is None
        assert key_for("") is None
        assert key_for("a") == 97


class TestMask:
    """Test cases for the positional XOR mask."""

    def test_mask_is_positional(self):
        """Test that byte i is XOR-ed with (key + i) % 256."""
        assert mask_bytes(b"\x00\x00\x00", 254) == bytes([254, 255, 0])

    def test_mask_changes_data(self):
        """Test that masking with a non-zero key alters the message."""
        assert mask_bytes(b"hello", password_key("secret")) != b"hello"

    def test_unmask_reverses_mask(self):
        """Test that unmasking with the same key restores the input."""
        key = password_key("secret")
        masked = mask_bytes(b"attack at dawn", key)
        assert unmask_bytes(masked, key) == b"attack at dawn"

    def test_large_key(self):
        """Test keys near the 32-bit boundary."""
        key = 2 ** 31
        assert mask_bytes(b"\x00\x00", key) == bytes([0, 1])

    @pytest.mark.parametrize("data", [b"", bytearray(), memoryview(b"")])
    def test_empty_input(self, data):
        """Test that empty input masks to empty bytes."""
        assert mask_bytes(data, 123) == b""
