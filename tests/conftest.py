# SteganoTool Test Configuration
# This file contains test settings and fixtures

import pytest
import sys
import os

import numpy as np
from PIL import Image

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return os.path.dirname(os.path.dirname(__file__))


@pytest.fixture
def zero_pixels():
    """10x10 RGBA buffer with every sample zero."""
    return np.zeros((10, 10, 4), dtype=np.uint8)


@pytest.fixture
def random_pixels():
    """10x10 RGBA buffer filled with reproducible noise."""
    rng = np.random.default_rng(1234)
    return rng.integers(0, 256, size=(10, 10, 4), dtype=np.uint8)


@pytest.fixture
def cover_png(tmp_path):
    """64x48 RGBA PNG cover image on disk."""
    rng = np.random.default_rng(42)
    img_array = rng.integers(0, 256, size=(48, 64, 4), dtype=np.uint8)
    img_array[:, :, 3] = 255
    img_path = tmp_path / "cover.png"
    Image.fromarray(img_array).save(str(img_path))
    return img_path


@pytest.fixture
def cover_jpeg(tmp_path):
    """32x32 RGB JPEG cover image on disk."""
    img_array = np.zeros((32, 32, 3), dtype=np.uint8)
    img_array[:, :, 0] = 200
    img_array[8:24, 8:24, 1] = 120
    img_path = tmp_path / "photo.jpg"
    Image.fromarray(img_array).save(str(img_path), format="JPEG")
    return img_path
