"""
Raster output - Write a brightness raster as a grayscale image
"""

import os

import numpy as np
from PIL import Image


def is_supported_path(path):
    """True if Pillow can write an image for this file extension."""
    ext = os.path.splitext(path)[1].lower()
    fmt = Image.registered_extensions().get(ext)
    return fmt is not None and fmt in Image.SAVE


def save_pixels(pixels, path):
    """Save a (height, width) uint8 array as an 8-bit grayscale image.

    The format follows the file extension (png, bmp, tiff, ...).
    """
    pixels = np.asarray(pixels, dtype=np.uint8)
    if pixels.ndim != 2:
        raise ValueError(f"Expected a 2D raster, got shape {pixels.shape}")
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)
    img = Image.fromarray(pixels)  # uint8 2D -> mode "L"
    img.save(path)
    return path
