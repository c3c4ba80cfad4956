"""
Callback handler for point and axis actions.

"""
import logging
logger = logging.getLogger(__name__)

from ..interface import tools as t
from .base_actions import BaseActions


CONTROLS_TEXT = (
    "Shift + Click: Add point\n"
    "Alt + Click: Remove point\n"
    "Click and drag a point: Move it\n"
    "Hover over points to see coordinates\n"
    "\n"
    "Marker sizes and the pick radius are measured in array pixels,\n"
    "so on large arrays zoom in (toolbar) to pick points comfortably."
)


class AnnotationActions(BaseActions):
    """Point and axis operations"""

    def stage_ribbon(self):
        """Define and register ribbon buttons"""
        self._register_group('Points', [
            ("button", "Clear points", self.clear_points,
             "Remove every annotation point from the image"),
            ("button", "Controls", self.show_controls,
             "Mouse and keyboard controls for placing points"),
        ])
        self._register_group('Axes', [
            ("button", "Reset axes", self.reset_axes,
             "Restore axis limits to one unit per pixel"),
        ])

    def clear_points(self):
        logger.info("Button clicked: Clear points")
        valid_state, msg = self.cxt.requires()
        if not valid_state:
            logger.warning(msg)
            self._show_error("Clear points", msg)
            return
        n = len(self.cxt.store)
        t.clear_points(self.cxt)
        logger.info(f"Cleared {n} points")
        self.controller.refresh()

    def reset_axes(self):
        logger.info("Button clicked: Reset axes")
        valid_state, msg = self.cxt.requires()
        if not valid_state:
            logger.warning(msg)
            self._show_error("Reset axes", msg)
            return
        limits = t.reset_axes(self.cxt)
        logger.info(f"Axis limits reset to {limits}")
        self.controller.refresh()

    def show_controls(self):
        self._show_info("Controls", CONTROLS_TEXT)
