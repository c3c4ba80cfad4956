"""
Common page scaffolding: a splitter with left/right widgets, the shared
context and a per-page ToolDispatcher.
"""


from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QSplitter, QVBoxLayout, QWidget

from ..interface import ToolDispatcher
from ..models import CurrentContext
from .util_windows import AnnotationCanvas


class BasePage(QWidget):
    """
    Common base: holds a QSplitter with left/right widgets,
    a per-page ToolDispatcher, and a safe teardown().
    """
    def __init__(self, parent=None):
        super().__init__(parent)
        self._splitter = QSplitter(Qt.Horizontal, self)
        self._left = None     # AnnotationCanvas
        self._right = None    # side panel
        self._dispatcher = None

        lay = QVBoxLayout(self)
        lay.setContentsMargins(0, 0, 0, 0)
        lay.addWidget(self._splitter)

        # Data models available to the page (set by controller)
        self._cxt = CurrentContext()

    @property
    def cxt(self) -> CurrentContext | None:
        return self._cxt

    @cxt.setter
    def cxt(self, new_cxt: CurrentContext | None):
        self._cxt = new_cxt

    # --- building helpers ----------------------------------------------------
    def _add_left(self, w: QWidget):
        self._left = w
        self._splitter.addWidget(w)

    def _add_right(self, w: QWidget):
        self._right = w
        self._splitter.addWidget(w)

    # --- lifecycle -----------------------------------------------------------
    def activate(self):
        """
        Called when the page becomes visible/active.
        Recreate dispatcher so tools can (re)bind safely.
        """
        if isinstance(self._left, AnnotationCanvas):
            self._dispatcher = ToolDispatcher(self._left)
        else:
            self._dispatcher = None

    def teardown(self):
        """
        Must be called when closing the page.
        Disconnects every pointer binding.
        """
        if self._dispatcher:
            self._dispatcher.clear()

    def update_display(self):
        pass

    # --- accessors for the controller ---------------------------------------
    @property
    def left_canvas(self) -> AnnotationCanvas:
        return self._left

    @property
    def dispatcher(self) -> ToolDispatcher:
        return self._dispatcher
