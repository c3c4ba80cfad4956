"""
Pointer state machine for adding, hovering, dragging and removing points.

States and transitions
----------------------
IDLE / HOVERING + down on a point     -> DRAGGING (alt held: remove, -> IDLE)
IDLE / HOVERING + shift-down elsewhere -> add a point, state unchanged
IDLE / HOVERING + move                 -> HOVERING if a point is in range, else IDLE
DRAGGING + move                        -> point follows the clamped pointer
DRAGGING + up (anywhere)               -> hover re-evaluated, drag cleared

All hit-testing goes through ``AnnotationStore.find_within`` with the one
configured radius.
"""
from dataclasses import dataclass
from enum import Enum
import logging
from typing import Callable, Optional

from ..array_ops import clamp_to_raster, in_raster
from ..config import con_dict  # live shared dict
from ..models.annotations import AnnotationPoint, AnnotationStore

logger = logging.getLogger(__name__)


class InteractionMode(Enum):
    IDLE = "idle"
    HOVERING = "hovering"
    DRAGGING = "dragging"


@dataclass(frozen=True)
class Modifiers:
    shift: bool = False
    alt: bool = False


NO_MODIFIERS = Modifiers()


@dataclass(frozen=True)
class CirclePrimitive:
    """One filled circle for the overlay renderer, in pixel coordinates."""
    x: float
    y: float
    radius: float
    colour: int
    alpha: float = 1.0


class InteractionController:
    """
    Consumes pointer events in raster pixel coordinates and drives the store.

    Parameters
    ----------
    store : AnnotationStore
        Points being edited. Its ``size`` is the raster rectangle.
    sampler : callable
        ``sampler(px, py) -> float`` reading the raw value under a new point.
    hit_radius : float, optional
        Overrides ``con_dict["hit_radius_px"]``.

    Every event handler returns True when the overlay needs redrawing.
    """

    def __init__(self, store: AnnotationStore, sampler: Callable[[float, float], float],
                 hit_radius: Optional[float] = None):
        self.store = store
        self.sampler = sampler
        self._hit_radius = hit_radius
        self.hovered: Optional[AnnotationPoint] = None
        self.dragged: Optional[AnnotationPoint] = None

    @property
    def hit_radius(self) -> float:
        if self._hit_radius is not None:
            return self._hit_radius
        return float(con_dict["hit_radius_px"])

    @property
    def mode(self) -> InteractionMode:
        if self.dragged is not None:
            return InteractionMode.DRAGGING
        if self.hovered is not None:
            return InteractionMode.HOVERING
        return InteractionMode.IDLE

    @property
    def active_point(self) -> Optional[AnnotationPoint]:
        """The point to highlight: the dragged one, else the hovered one."""
        return self.dragged if self.dragged is not None else self.hovered

    def reset(self):
        self.hovered = None
        self.dragged = None

    # ------------------------------------------------------------------
    def pointer_down(self, px: float, py: float, modifiers: Modifiers = NO_MODIFIERS) -> bool:
        if self.dragged is not None:
            return False
        width, height = self.store.size
        if not in_raster(px, py, width, height):
            logger.debug(f"Ignored press outside raster at ({px:.1f}, {py:.1f})")
            return False

        point = self.store.find_within(px, py, self.hit_radius)
        if point is not None:
            if modifiers.alt:
                self.store.remove(point)
                self.reset()
                logger.info(f"Removed point at ({point.logical_x:.3f}, {point.logical_y:.3f})")
            else:
                self.dragged = point
                self.hovered = None
            return True

        if modifiers.shift:
            value = self.sampler(px, py)
            point = self.store.add(px, py, value, colour=int(con_dict["marker_colour"]))
            logger.info(f"Added point at ({point.logical_x:.3f}, {point.logical_y:.3f}), value {value}")
            return True
        return False

    def pointer_move(self, px: float, py: float) -> bool:
        width, height = self.store.size
        cx, cy = clamp_to_raster(px, py, width, height)
        if self.dragged is not None:
            self.store.move_to(self.dragged, cx, cy)
            return True

        point = self.store.find_within(cx, cy, self.hit_radius)
        changed = point is not self.hovered
        self.hovered = point
        return changed

    def pointer_up(self, px: float, py: float) -> bool:
        if self.dragged is None:
            return False
        moved = self.dragged
        self.dragged = None
        self.hovered = self.store.find_within(px, py, self.hit_radius)
        logger.debug(f"Drag ended at ({moved.pixel_x:.1f}, {moved.pixel_y:.1f})")
        return True


def overlay_primitives(store: AnnotationStore, controller: Optional[InteractionController] = None) -> list[CirclePrimitive]:
    """
    Circles to draw for the current points, in store order.

    The highlighted point is drawn larger with a white inner ring on top.
    """
    active = controller.active_point if controller is not None else None
    marker_r = float(con_dict["marker_radius"])
    hover_r = float(con_dict["hover_marker_radius"])
    ring_r = float(con_dict["hover_ring_radius"])

    prims = []
    for point in store:
        if point is active:
            prims.append(CirclePrimitive(point.pixel_x, point.pixel_y, hover_r, point.colour))
            prims.append(CirclePrimitive(point.pixel_x, point.pixel_y, ring_r, 0xFFFFFF, alpha=0.8))
        else:
            prims.append(CirclePrimitive(point.pixel_x, point.pixel_y, marker_r, point.colour))
    return prims


def hover_text(point: AnnotationPoint) -> str:
    return f"({point.logical_x:.3f}, {point.logical_y:.3f})\nvalue: {point.value:.6g}"
