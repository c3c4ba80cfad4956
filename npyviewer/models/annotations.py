"""
Annotation points placed on the raster and the ordered store that owns them.

Pixel coordinates are authoritative; logical coordinates are derived from them
through :func:`npyviewer.array_ops.pixel_to_logical` at the limits current when
the point is created, moved or recalibrated.
"""

from dataclasses import dataclass
import logging
import math
from typing import Callable, Iterator, Optional

from ..array_ops import pixel_to_logical
from .axis_limits import AxisLimits

logger = logging.getLogger(__name__)

DEFAULT_COLOUR = 0xFF0000


@dataclass(eq=False)
class AnnotationPoint:
    """
    A single labelled point.

    Compared by identity: two points at the same place are still different
    points for hover, drag and removal.

    Attributes
    ----------
    pixel_x, pixel_y : float
        Position in raster pixels, origin top-left.
    logical_x, logical_y : float
        Position on the calibrated axes.
    value : float
        Raw sample read under the point when it was added. Never re-sampled.
    colour : int
        0xRRGGBB marker colour.
    """
    pixel_x: float
    pixel_y: float
    logical_x: float
    logical_y: float
    value: float
    colour: int = DEFAULT_COLOUR

    def distance_to(self, px: float, py: float) -> float:
        return math.hypot(self.pixel_x - px, self.pixel_y - py)


class AnnotationStore:
    """
    Ordered collection of AnnotationPoints for the current raster.

    Parameters
    ----------
    limits_source : callable
        Zero-argument callable returning the current AxisLimits.
    width, height : float
        Size of the raster the points live on.
    """

    def __init__(self, limits_source: Callable[[], AxisLimits], width: float = 1, height: float = 1):
        self._limits_source = limits_source
        self._width = width
        self._height = height
        self._points: list[AnnotationPoint] = []

    # ------------------------------------------------------------------
    # container protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[AnnotationPoint]:
        return iter(tuple(self._points))

    def __contains__(self, point) -> bool:
        return any(p is point for p in self._points)

    @property
    def points(self) -> tuple[AnnotationPoint, ...]:
        return tuple(self._points)

    @property
    def size(self) -> tuple[float, float]:
        return self._width, self._height

    def resize(self, width: float, height: float):
        self._width = width
        self._height = height

    # ------------------------------------------------------------------
    def _logical(self, px, py):
        return pixel_to_logical(px, py, self._width, self._height, self._limits_source())

    def add(self, pixel_x: float, pixel_y: float, value: float, colour: int = DEFAULT_COLOUR) -> AnnotationPoint:
        lx, ly = self._logical(pixel_x, pixel_y)
        point = AnnotationPoint(pixel_x, pixel_y, lx, ly, value, colour)
        self._points.append(point)
        logger.debug(f"Added point at pixel ({pixel_x:.1f}, {pixel_y:.1f}) value {value}")
        return point

    def find_nearest(self, pixel_x: float, pixel_y: float) -> Optional[tuple[AnnotationPoint, float]]:
        """
        Closest point by Euclidean pixel distance, or None if the store is empty.

        Exact ties go to the earliest added point.
        """
        best = None
        best_dist = math.inf
        for point in self._points:
            d = point.distance_to(pixel_x, pixel_y)
            if d < best_dist:
                best, best_dist = point, d
        if best is None:
            return None
        return best, best_dist

    def find_within(self, pixel_x: float, pixel_y: float, threshold: float) -> Optional[AnnotationPoint]:
        """Nearest point if it lies strictly closer than ``threshold``."""
        hit = self.find_nearest(pixel_x, pixel_y)
        if hit is None:
            return None
        point, dist = hit
        return point if dist < threshold else None

    def remove(self, point: AnnotationPoint) -> bool:
        for i, p in enumerate(self._points):
            if p is point:
                del self._points[i]
                return True
        return False

    def remove_nearest(self, pixel_x: float, pixel_y: float, threshold: float) -> Optional[AnnotationPoint]:
        """Remove and return the nearest point closer than ``threshold``; else no-op."""
        point = self.find_within(pixel_x, pixel_y, threshold)
        if point is None:
            return None
        self.remove(point)
        logger.debug(f"Removed point at pixel ({point.pixel_x:.1f}, {point.pixel_y:.1f})")
        return point

    def move_to(self, point: AnnotationPoint, pixel_x: float, pixel_y: float):
        """Move ``point`` and refresh its logical coordinates. The sampled value is kept."""
        point.pixel_x = pixel_x
        point.pixel_y = pixel_y
        point.logical_x, point.logical_y = self._logical(pixel_x, pixel_y)

    def recalibrate(self):
        """Recompute every point's logical coordinates at the current limits."""
        for point in self._points:
            point.logical_x, point.logical_y = self._logical(point.pixel_x, point.pixel_y)

    def clear(self):
        self._points.clear()
