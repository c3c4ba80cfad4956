"""
The single working page: raster canvas on the left, axis limits, legend and
points table on the right.
"""
import logging

from PyQt5.QtWidgets import QGroupBox, QLabel, QVBoxLayout, QWidget

from ..interface import tools as t
from .base_page import BasePage
from .util_windows import AnnotationCanvas, AxisLimitsPanel, InfoTable

logger = logging.getLogger(__name__)

POINT_HEADERS = ("#", "Pixel", "X", "Y", "Value")


class ViewerPage(BasePage):
    """
      left  = AnnotationCanvas  (raster + points, shift-click add, alt-click remove, drag)
      right = axis limits editor, legend/status line and points table
    """
    def __init__(self, parent=None):
        super().__init__(parent)
        self.controller = None
        self._listening = False

        self._add_left(AnnotationCanvas(self))

        side = QWidget(self)
        side_lay = QVBoxLayout(side)

        axes_box = QGroupBox("Axis limits", side)
        axes_lay = QVBoxLayout(axes_box)
        self.axis_panel = AxisLimitsPanel(axes_box)
        axes_lay.addWidget(self.axis_panel)
        side_lay.addWidget(axes_box)

        self.legend = QLabel("No array loaded", side)
        self.legend.setWordWrap(True)
        side_lay.addWidget(self.legend)

        self.points_table = InfoTable(POINT_HEADERS, side)
        side_lay.addWidget(self.points_table, 1)

        self._add_right(side)
        self._splitter.setStretchFactor(0, 3)
        self._splitter.setStretchFactor(1, 1)

        self.axis_panel.limitEdited.connect(self._on_limit_edited)
        self.left_canvas.overlayChanged.connect(self._refresh_points_table)

    def activate(self):
        super().activate()
        self.controller = t.attach_controller(self.cxt)
        self.left_canvas.bind(self.cxt.store, self.controller)
        self.dispatcher.bind_controller(self.controller)
        if not self._listening:
            self.cxt.calibrator.add_listener(self._on_limits_changed)
            self._listening = True
        self.axis_panel.set_limits(self.cxt.limits, force=True)

    # -------- context → widgets --------
    def update_display(self):
        self.legend.setText(t.legend_text(self.cxt))
        if not self.cxt.has_raster:
            self.left_canvas.clear()
            self._refresh_points_table()
            return
        self.axis_panel.set_limits(self.cxt.limits, force=True)
        self.left_canvas.show_raster(self.cxt.raster, self.cxt.limits)

    def show_status(self):
        """Refresh only the legend line (loading / error text)."""
        self.legend.setText(t.legend_text(self.cxt))

    def _on_limit_edited(self, edge, text):
        t.set_axis_limit(self.cxt, edge, text)

    def _on_limits_changed(self, limits):
        self.axis_panel.set_limits(limits)
        self.left_canvas.update_axis_labels(limits)
        self.left_canvas.refresh_overlay()

    def _refresh_points_table(self):
        self.points_table.set_rows(t.points_table(self.cxt))
