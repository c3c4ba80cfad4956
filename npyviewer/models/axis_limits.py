"""
Axis calibration: the four logical bounds stretched over the raster rectangle.
"""

from dataclasses import dataclass, replace
import logging
import math

logger = logging.getLogger(__name__)

EDGES = ("xmin", "xmax", "ymin", "ymax")


@dataclass(frozen=True)
class AxisLimits:
    """
    Logical coordinate bounds.

    Attributes
    ----------
    xmin : float
        Logical x at the right edge of the raster.
    xmax : float
        Logical x at the left edge of the raster.
    ymin : float
        Logical y at the bottom edge of the raster.
    ymax : float
        Logical y at the top edge of the raster.
    """
    xmin: float
    xmax: float
    ymin: float
    ymax: float

    @classmethod
    def for_shape(cls, rows: int, cols: int) -> "AxisLimits":
        """One logical unit per pixel, the default after every load."""
        return cls(xmin=0.0, xmax=float(cols), ymin=0.0, ymax=float(rows))

    def is_valid(self) -> bool:
        return self.xmin < self.xmax and self.ymin < self.ymax


def _parse(value):
    """Finite float from a number or user-typed text, else None."""
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


class AxisCalibrator:
    """
    Holds the current AxisLimits and applies best-effort edits to them.

    Edits that cannot be parsed, or that would leave ``xmin >= xmax`` or
    ``ymin >= ymax``, are dropped silently and the previous limits retained.
    Partially typed text ("-", "1e") arrives here on every keystroke so a
    rejected edit is expected noise, not an error.
    """

    def __init__(self, limits: AxisLimits):
        if not limits.is_valid():
            raise ValueError(f"Invalid axis limits: {limits}")
        self._limits = limits
        self._listeners = []

    @property
    def limits(self) -> AxisLimits:
        return self._limits

    def add_listener(self, func):
        """Register ``func(limits)`` to be called after every accepted change."""
        self._listeners.append(func)

    def _notify(self):
        for func in self._listeners:
            func(self._limits)

    def set_limit(self, edge: str, value) -> AxisLimits:
        if edge not in EDGES:
            raise KeyError(edge)
        number = _parse(value)
        if number is None:
            logger.debug(f"Ignored non-numeric {edge} edit: {value!r}")
            return self._limits

        candidate = replace(self._limits, **{edge: number})
        if not candidate.is_valid():
            logger.debug(f"Ignored {edge}={number}: would break axis ordering {candidate}")
            return self._limits

        if candidate != self._limits:
            self._limits = candidate
            self._notify()
        return self._limits

    def reset(self, limits: AxisLimits) -> AxisLimits:
        """Replace all four bounds at once; used on load and by 'Reset axes'."""
        if not limits.is_valid():
            raise ValueError(f"Invalid axis limits: {limits}")
        self._limits = limits
        self._notify()
        return self._limits
