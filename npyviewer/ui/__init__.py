"""
UI module for NpyViewer.

This package contains all Qt-based user-interface components used by the
application:

- ViewerPage:
    The working page. Shows the normalised raster with its annotation
    overlay, the axis-limit editor, the legend/status line and the points
    table.

- AnnotationCanvas:
    Matplotlib canvas that draws the raster and circles, and reports pointer
    presses, moves and releases in raster pixel coordinates.

- AnnotationActions:
    Ribbon handlers for clearing points and resetting the axes.

All pages inherit from `BasePage` and integrate with the interface layer via
the ToolDispatcher.
"""

from .annotation_actions import AnnotationActions
from .ribbon import Groups
from .util_windows import (
    AnnotationCanvas,
    AutoSettingsDialog,
    AxisLimitsPanel,
    InfoTable,
    busy_cursor,
)
from .viewer_page import ViewerPage

__all__ = [
    "ViewerPage",
    "AnnotationActions",
    "Groups",
    "AnnotationCanvas",
    "AxisLimitsPanel",
    "InfoTable",
    "AutoSettingsDialog",
    "busy_cursor",
]
