"""Configuration for the codec and the image file adapter."""

from dataclasses import dataclass, field
from typing import FrozenSet

from .errors import InvalidInputError

DEFAULT_MAX_DECLARED_LENGTH = 1_000_000
DEFAULT_PROGRESS_INTERVAL = 1000
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024


@dataclass
class StegoConfig:
    """
    Settings shared by the codec, the image adapter and the CLI.

    Attributes:
        progress_interval: Pixels walked between two progress checkpoints
        max_declared_length: Largest length header the decoder accepts
        max_file_size: Largest image file, in bytes, the adapter will open
        accepted_formats: Pillow format names accepted as input
        output_prefix: Prefix for generated output file names
    """
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL
    max_declared_length: int = DEFAULT_MAX_DECLARED_LENGTH
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    accepted_formats: FrozenSet[str] = field(
        default_factory=lambda: frozenset({"PNG", "JPEG", "WEBP", "BMP"})
    )
    output_prefix: str = "encoded_"

    def __post_init__(self):
        for name in ("progress_interval", "max_declared_length", "max_file_size"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise InvalidInputError(
                    f"{name} must be a positive integer, got {value!r}",
                    details={"setting": name, "value": value},
                )
        self.accepted_formats = frozenset(fmt.upper() for fmt in self.accepted_formats)

    @classmethod
    def default(cls) -> 'StegoConfig':
        """Get default configuration."""
        return cls()
