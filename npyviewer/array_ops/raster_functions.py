"""
Conversion of raw 2-D sample buffers into displayable 8-bit grayscale rasters.

The normaliser is a plain min/max linear stretch; the extrema it finds are kept
on the returned Raster so the legend can show the original data range.
"""
from dataclasses import dataclass
import math

import numpy as np


@dataclass(frozen=True)
class Raster:
    """
    Normalised, display-ready image derived from one loaded array.

    Attributes
    ----------
    gray : (H, W) uint8
        Grayscale level per sample, same row/column layout as the source.
    rgba : (H, W, 4) uint8
        ``gray`` replicated into R, G and B with alpha fixed at 255.
    vmin, vmax : float
        Extrema of the finite source samples.
    """
    gray: np.ndarray
    rgba: np.ndarray
    vmin: float
    vmax: float

    @property
    def width(self) -> int:
        return int(self.gray.shape[1])

    @property
    def height(self) -> int:
        return int(self.gray.shape[0])

    @property
    def extrema(self) -> tuple[float, float]:
        return self.vmin, self.vmax

    @property
    def is_degenerate(self) -> bool:
        return not self.vmax > self.vmin


def _finite_extrema(arr: np.ndarray) -> tuple[float, float]:
    finite = arr[np.isfinite(arr)]
    if finite.size == 0:
        return 0.0, 0.0
    return float(finite.min()), float(finite.max())


def normalize_to_raster(values, shape=None) -> Raster:
    """
    Stretch a numeric buffer linearly onto [0, 255].

    Parameters
    ----------
    values : array_like
        2-D samples, or a flat row-major buffer when ``shape`` is given.
    shape : (rows, cols), optional
        Shape used to reshape a flat buffer.

    Returns
    -------
    Raster
        ``gray = floor(((s - min) / (max - min)) * 255)`` clipped to [0, 255].
        The global minimum maps to 0 and the global maximum to 255.

    Notes
    -----
    A constant buffer (max == min) has no defined stretch and is rendered as
    gray 0 everywhere. Non-finite samples are left out of the extrema and are
    also rendered as 0.

    Raises
    ------
    ValueError
        If the buffer is empty or not 2-D.
    """
    arr = np.asarray(values, dtype=np.float64)
    if shape is not None:
        arr = arr.reshape(tuple(int(s) for s in shape))
    if arr.ndim != 2:
        raise ValueError(f"normalize_to_raster expects a 2-D buffer; got {arr.shape}")
    if arr.size == 0:
        raise ValueError("normalize_to_raster got an empty buffer.")

    vmin, vmax = _finite_extrema(arr)

    if vmax > vmin:
        with np.errstate(invalid="ignore", over="ignore"):
            if math.isfinite(vmax - vmin):
                ratio = (arr - vmin) / (vmax - vmin)
            else:
                # range wider than float64; halve both sides first
                ratio = (arr / 2 - vmin / 2) / (vmax / 2 - vmin / 2)
            scaled = np.floor(ratio * 255.0)
            scaled = np.clip(scaled, 0.0, 255.0)
        scaled[~np.isfinite(scaled)] = 0.0
        scaled[~np.isfinite(arr)] = 0.0
        gray = scaled.astype(np.uint8)
    else:
        gray = np.zeros(arr.shape, dtype=np.uint8)

    H, W = gray.shape
    rgba = np.empty((H, W, 4), dtype=np.uint8)
    rgba[..., :3] = gray[..., None]
    rgba[..., 3] = 255

    gray.setflags(write=False)
    rgba.setflags(write=False)
    return Raster(gray=gray, rgba=rgba, vmin=vmin, vmax=vmax)


def sample_value(values, px: float, py: float) -> float | int:
    """
    Read the raw sample under a pixel position.

    The position is floored to a row/column index (row-major, so the flat
    index is ``row * cols + col``). Indices are clamped into the array so the
    right and bottom raster edges read the last column/row.

    The sample comes back as a Python scalar of the array's kind, so integer
    arrays give exact ints.
    """
    arr = np.asarray(values)
    rows, cols = arr.shape
    r = min(max(int(math.floor(py)), 0), rows - 1)
    c = min(max(int(math.floor(px)), 0), cols - 1)
    return arr.reshape(-1)[r * cols + c].item()
