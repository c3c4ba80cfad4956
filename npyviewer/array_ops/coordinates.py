"""
Pixel <-> logical axis coordinates.

Pixel space has its origin at the top-left of the raster with y growing
downwards. The logical axes are presented with x decreasing left to right and
y increasing upwards, so both ratios are inverted here and nowhere else:

    right edge  -> xmin     left edge -> xmax
    bottom edge -> ymin     top edge  -> ymax
"""


def _check_size(width, height):
    if width <= 0 or height <= 0:
        raise ValueError(f"Raster size must be positive; got {width}x{height}")


def pixel_to_logical(px: float, py: float, width: float, height: float, limits) -> tuple[float, float]:
    """
    Map a pixel position onto the calibrated axes.

    Parameters
    ----------
    px, py : float
        Pixel position inside the raster rectangle [0, width] x [0, height].
        Positions outside are extrapolated, not clamped; use
        :func:`clamp_to_raster` first where that matters.
    width, height : float
        Raster size in pixels.
    limits : AxisLimits
        Anything exposing ``xmin``, ``xmax``, ``ymin`` and ``ymax``.

    Returns
    -------
    (logical_x, logical_y) : tuple of float
    """
    _check_size(width, height)
    x_ratio = 1 - (px / width)
    y_ratio = 1 - (py / height)
    logical_x = limits.xmin + x_ratio * (limits.xmax - limits.xmin)
    logical_y = limits.ymin + y_ratio * (limits.ymax - limits.ymin)
    return logical_x, logical_y


def clamp_to_raster(px: float, py: float, width: float, height: float) -> tuple[float, float]:
    """Clamp a pixel position to the nearest point of [0, width] x [0, height]."""
    _check_size(width, height)
    return min(max(px, 0.0), float(width)), min(max(py, 0.0), float(height))


def in_raster(px: float, py: float, width: float, height: float) -> bool:
    """Inclusive bounds test against the raster rectangle."""
    return 0 <= px <= width and 0 <= py <= height
