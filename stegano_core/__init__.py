"""
SteganoTool Python Core Package

This package provides least-significant-bit steganography for hiding
text messages inside decoded RGBA pixel buffers and recovering them.

Subpackages:
    stego: Capacity arithmetic, bit packing, masking, the LSB codec and
           the image file adapter built on Pillow

Version: 1.0.0
"""

from . import stego

__all__ = ['stego']

__version__ = "1.0.0"
