"""Exceptions raised by the steganography package."""

from typing import Any, Dict, Optional


class StegoError(Exception):
    """
    Base exception for steganography errors.

    Raised synchronously, before any pixel is modified, when an operation
    cannot proceed. A missing embedded message is not an error: decoding
    returns None for that case.
    """

    def __init__(self, message: str, code: Optional[int] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        base = f"{type(self).__name__}: {self.message}"
        if self.code:
            base += f" (Code: {self.code})"
        return base


class InvalidInputError(StegoError):
    """Raised for malformed dimensions, buffers or settings."""

    def __init__(self, message: str, code: int = 1001, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code=code, details=details)


class CapacityExceededError(StegoError):
    """Message too long for the carrier image."""

    def __init__(self, message_length: int, capacity: int):
        super().__init__(
            f"Message too long. Maximum capacity: {capacity} characters",
            code=1002,
            details={"message_length": message_length, "capacity": capacity},
        )
        self.message_length = message_length
        self.capacity = capacity


class MessageEncodingError(InvalidInputError):
    """Message contains a character that does not fit in one byte."""

    def __init__(self, character: str, position: int):
        super().__init__(
            f"Character {character!r} at position {position} is outside the single-byte range (U+0000-U+00FF)",
            code=1003,
            details={"character": character, "position": position},
        )
        self.character = character
        self.position = position


class ImageIOError(StegoError):
    """Raised when an image file cannot be read, written or accepted."""

    def __init__(self, message: str, code: int = 1100, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code=code, details=details)
