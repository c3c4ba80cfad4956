"""
Canvas widgets, auxiliary panels and modal dialogues.

Contains the annotation canvas that renders the raster and its point overlay,
the axis-limits editor, the info table and the settings dialogue.
"""


from contextlib import contextmanager
import logging

from matplotlib.backends.backend_qt5agg import FigureCanvasQTAgg as FigureCanvas, NavigationToolbar2QT as NavigationTool
from matplotlib.figure import Figure
from matplotlib.patches import Circle

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtWidgets import (
    QApplication,
    QDialog,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from ..interface import tools as t
from ..interface.interaction import Modifiers, hover_text, overlay_primitives

logger = logging.getLogger(__name__)


#==========reference passing and cache update======================
@contextmanager
def busy_cursor(msg=None, window=None):
    """Temporarily set the cursor to busy; restores automatically."""
    QApplication.setOverrideCursor(Qt.WaitCursor)
    if window and hasattr(window, "statusBar") and msg:
        window.statusBar().showMessage(msg)
    try:
        yield
    finally:
        QApplication.restoreOverrideCursor()
        if window and hasattr(window, "statusBar"):
            window.statusBar().clearMessage()


def _hex(colour: int) -> str:
    return f"#{int(colour) & 0xFFFFFF:06x}"


def current_modifiers() -> Modifiers:
    mods = QApplication.keyboardModifiers()
    return Modifiers(shift=bool(mods & Qt.ShiftModifier), alt=bool(mods & Qt.AltModifier))


class InfoTable(QWidget):
    def __init__(self, headers=("Key", "Value"), parent=None):
        super().__init__(parent)
        self.table = QTableWidget(0, len(headers), self)
        self.table.setHorizontalHeaderLabels(list(headers))
        self.table.horizontalHeader().setStretchLastSection(True)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.table)

    def add_row(self, *values):
        r = self.table.rowCount()
        self.table.insertRow(r)
        for c, value in enumerate(values):
            item = QTableWidgetItem(str(value))
            item.setFlags(item.flags() & ~Qt.ItemIsEditable)
            self.table.setItem(r, c, item)

    def set_from_dict(self, d):
        self.table.setRowCount(0)
        for k, v in d.items():
            self.add_row(k, v)

    def set_rows(self, rows: list[dict]):
        """Fill from dicts whose values are in header order."""
        self.table.setRowCount(0)
        for row in rows:
            self.add_row(*row.values())


class AnnotationCanvas(QWidget):
    """
    Matplotlib view of the raster with the annotation overlay on top.

    The image is drawn with ``extent=(0, W, H, 0)`` so axes data coordinates
    are raster pixel coordinates, origin top-left. Pointer events are turned
    into pixel positions and handed to whatever callables are assigned to
    ``on_pointer_down(px, py, modifiers)``, ``on_pointer_move(px, py)`` and
    ``on_pointer_up(px, py)`` (see ToolDispatcher).

    A press grabs the mouse for the Qt widget, so the matching release is
    delivered here even when it happens outside the image or the window;
    positions outside the axes are converted from display coordinates so a
    drag always terminates.
    """
    overlayChanged = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.raster = None
        self.store = None
        self.controller = None
        self._overlay = []
        self._tooltip = None

        self.on_pointer_down = None   # callable(px, py, modifiers) -> None
        self.on_pointer_move = None   # callable(px, py) -> None
        self.on_pointer_up = None     # callable(px, py) -> None

        layout = QVBoxLayout(self)
        self.fig = Figure(figsize=(6, 6))
        self.ax = self.fig.add_subplot(111)
        self.canvas = FigureCanvas(self.fig)
        layout.addWidget(self.canvas)

        self.toolbar = NavigationTool(self.canvas, self)
        layout.addWidget(self.toolbar)

        self.canvas.mpl_connect("button_press_event", self._on_press)
        self.canvas.mpl_connect("motion_notify_event", self._on_motion)
        self.canvas.mpl_connect("button_release_event", self._on_release)

    def bind(self, store, controller):
        self.store = store
        self.controller = controller

    # -------- drawing --------
    def show_raster(self, raster, limits):
        self.raster = raster
        self._overlay = []
        self._tooltip = None
        H, W = raster.height, raster.width

        self.ax.clear()
        self.ax.imshow(raster.rgba, origin="upper", extent=(0, W, H, 0), interpolation="nearest")
        self.ax.set_xlim(0, W)
        self.ax.set_ylim(H, 0)
        self.update_axis_labels(limits)
        self.refresh_overlay()

    def update_axis_labels(self, limits):
        """Axis end labels: ymax top / ymin bottom, xmax left / xmin right."""
        if self.raster is None:
            return
        H, W = self.raster.height, self.raster.width
        self.ax.set_xticks([0, W])
        self.ax.set_xticklabels([f"{limits.xmax:.3f}", f"{limits.xmin:.3f}"])
        self.ax.set_yticks([0, H])
        self.ax.set_yticklabels([f"{limits.ymax:.1f}", f"{limits.ymin:.1f}"])
        self.canvas.draw_idle()

    def refresh_overlay(self):
        for artist in self._overlay:
            artist.remove()
        self._overlay = []
        if self._tooltip is not None:
            self._tooltip.remove()
            self._tooltip = None

        if self.raster is not None and self.store is not None:
            for prim in overlay_primitives(self.store, self.controller):
                patch = Circle((prim.x, prim.y), prim.radius,
                               facecolor=_hex(prim.colour), edgecolor="none", alpha=prim.alpha)
                self.ax.add_patch(patch)
                self._overlay.append(patch)

            active = self.controller.active_point if self.controller is not None else None
            if active is not None:
                self._tooltip = self.ax.annotate(
                    hover_text(active),
                    xy=(active.pixel_x, active.pixel_y),
                    xytext=(15, -15), textcoords="offset points",
                    fontsize=8, va="top",
                    bbox=dict(boxstyle="round,pad=0.3", fc="white", ec="black"),
                )
        self.canvas.draw_idle()
        self.overlayChanged.emit()

    # -------- pointer events --------
    def _pixel_from_event(self, event):
        if event.inaxes is self.ax and event.xdata is not None and event.ydata is not None:
            return float(event.xdata), float(event.ydata)
        px, py = self.ax.transData.inverted().transform((event.x, event.y))
        return float(px), float(py)

    def _tool_active(self):
        # pan/zoom from the toolbar owns the mouse
        return bool(getattr(self.toolbar, "mode", ""))

    def _on_press(self, event):
        if self.raster is None or event.button != 1 or self._tool_active():
            return
        if event.inaxes is not self.ax:
            return
        px, py = self._pixel_from_event(event)
        if callable(self.on_pointer_down):
            self.on_pointer_down(px, py, current_modifiers())

    def _on_motion(self, event):
        if self.raster is None or self._tool_active() or event.x is None:
            return
        px, py = self._pixel_from_event(event)
        if callable(self.on_pointer_move):
            self.on_pointer_move(px, py)

    def _on_release(self, event):
        if self.raster is None or event.button != 1 or event.x is None:
            return
        px, py = self._pixel_from_event(event)
        if callable(self.on_pointer_up):
            self.on_pointer_up(px, py)

    def clear(self):
        self.raster = None
        self._overlay = []
        self._tooltip = None
        self.ax.clear()
        self.canvas.draw_idle()


class AxisLimitsPanel(QWidget):
    """
    Four text inputs bound to the axis limit edges.

    Emits ``limitEdited(edge, text)`` on every keystroke; the calibrator
    decides whether the edit sticks. When an input loses focus its text is
    reset to the accepted value.
    """
    limitEdited = pyqtSignal(str, str)

    LABELS = (
        ("ymax", "Y Max (Top Left):"),
        ("ymin", "Y Min (Bottom Left):"),
        ("xmax", "X Max (Bottom Left):"),
        ("xmin", "X Min (Bottom Right):"),
    )

    def __init__(self, parent=None):
        super().__init__(parent)
        self._limits = None
        self.edits = {}
        grid = QGridLayout(self)
        for row, (edge, text) in enumerate(self.LABELS):
            edit = QLineEdit(self)
            edit.textEdited.connect(lambda s, e=edge: self.limitEdited.emit(e, s))
            edit.editingFinished.connect(self._restore_text)
            grid.addWidget(QLabel(text, self), row, 0)
            grid.addWidget(edit, row, 1)
            self.edits[edge] = edit

    def set_limits(self, limits, force=False):
        """Show ``limits``; fields being typed into are left alone unless forced."""
        self._limits = limits
        for edge, edit in self.edits.items():
            if force or not edit.hasFocus():
                edit.setText(f"{getattr(limits, edge):g}")

    def _restore_text(self):
        if self._limits is not None:
            self.set_limits(self._limits, force=True)


class AutoSettingsDialog(QDialog):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.resize(420, 320)
        cfg = t.get_config()

        # Build dynamic table: Key | Value
        self.tbl = QTableWidget(len(cfg), 2)
        self.tbl.setHorizontalHeaderLabels(["Setting", "Value"])
        self.tbl.horizontalHeader().setStretchLastSection(True)

        for row, (k, v) in enumerate(cfg.items()):
            key_item = QTableWidgetItem(k)
            key_item.setFlags(Qt.ItemIsSelectable | Qt.ItemIsEnabled)
            shown = f"0x{v:06X}" if k == "marker_colour" else str(v)
            val_item = QTableWidgetItem(shown)
            self.tbl.setItem(row, 0, key_item)
            self.tbl.setItem(row, 1, val_item)

        btn_save = QPushButton("Save")
        btn_cancel = QPushButton("Cancel")
        btn_save.clicked.connect(self._on_save)
        btn_cancel.clicked.connect(self.reject)

        row = QHBoxLayout()
        row.addStretch(1)
        row.addWidget(btn_cancel)
        row.addWidget(btn_save)

        root = QVBoxLayout(self)
        root.addWidget(self.tbl)
        root.addLayout(row)

    def _on_save(self):
        for r in range(self.tbl.rowCount()):
            key = self.tbl.item(r, 0).text()
            val = self.tbl.item(r, 1).text()
            try:
                t.modify_config(key, val)
            except ValueError:
                logger.warning(f"Ignored invalid setting {key}={val!r}")

        self.accept()
