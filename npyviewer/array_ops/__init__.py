"""
Array operations for NpyViewer.

UI agnostic numeric helpers that run on any 2-D array in npy format:

- raster_functions
    Min/max normalisation of a sample buffer into an 8-bit grayscale raster,
    and nearest-pixel sampling of the raw values.
- coordinates
    The single pixel -> logical axis transform, plus raster bounds helpers.
"""

from .coordinates import clamp_to_raster, in_raster, pixel_to_logical
from .raster_functions import Raster, normalize_to_raster, sample_value

__all__ = [
    "Raster",
    "normalize_to_raster",
    "sample_value",
    "pixel_to_logical",
    "clamp_to_raster",
    "in_raster",
]
