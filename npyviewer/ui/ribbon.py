"""
Main toolbar (ribbon) used to trigger loading, point and axis actions.

Provides labelled button groups plus corner slots for always-present actions.
"""

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import (
    QAction,
    QFrame,
    QHBoxLayout,
    QLabel,
    QSizePolicy,
    QTabWidget,
    QToolBar,
    QVBoxLayout,
    QWidget,
)


class Groups(QTabWidget):
    """
    Ribbon-style control that shows every group of actions as a labelled
    block inside a single visible tab.

    Entry format:
      ("button", label, callback)
      ("button", label, callback, tooltip)
    """

    def __init__(self, parent=None):
        super().__init__(parent)

        self.setTabPosition(QTabWidget.North)
        self.setMovable(False)
        self.setDocumentMode(True)

        self.bars = {}  # name -> QToolBar for that group

        # ----- Single tab that will host all the groups in one row -----
        page = QWidget(self)
        self._group_layout = QHBoxLayout(page)
        self._group_layout.setContentsMargins(8, 8, 8, 8)
        self._group_layout.setSpacing(0)  # space between groups
        self._group_layout.setAlignment(Qt.AlignCenter | Qt.AlignTop)

        self.addTab(page, "NpyViewer Controls")

    def _create_bar(self):
        bar = QToolBar(self)
        bar.setMovable(False)
        bar.setFloatable(False)
        bar.setToolButtonStyle(Qt.ToolButtonTextUnderIcon)
        bar.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)
        return bar

    def _populate(self, bar: QToolBar, entries):
        for entry in entries:
            if not entry:
                continue
            if entry[0] != "button":
                raise ValueError(f"Unknown ribbon entry kind: {entry[0]!r}")

            # ("button", label, callback[, tooltip])
            if len(entry) == 4:
                _kind, label, callback, tooltip = entry
            else:
                _kind, label, callback = entry
                tooltip = None

            act = QAction(label, bar)
            act.triggered.connect(callback)
            if tooltip:
                act.setToolTip(tooltip)
                act.setStatusTip(tooltip)
            bar.addAction(act)

    def _separator(self):
        sep = QFrame(self)
        sep.setFrameShape(QFrame.VLine)
        sep.setFrameShadow(QFrame.Sunken)
        sep.setLineWidth(1)
        sep.setMidLineWidth(0)
        return sep

    def add_group(self, name, entries):
        """
        Create a new group block:

            | Points     |   | Axes       |
            | buttons... |   | buttons... |
        """
        bar = self._create_bar()
        self.bars[name] = bar

        group_widget = QWidget(self)

        # Outer layout: [ VLine |  inner VBox  | VLine ]
        outer = QHBoxLayout(group_widget)
        outer.setContentsMargins(0, 0, 0, 0)
        outer.setSpacing(0)

        inner = QVBoxLayout()
        inner.setContentsMargins(10, 0, 10, 0)  # padding inside group
        inner.setSpacing(2)

        label = QLabel(name)
        label.setAlignment(Qt.AlignHCenter | Qt.AlignVCenter)
        label.setStyleSheet("QLabel { font-weight: bold; }")

        inner.addWidget(label)
        inner.addWidget(bar)

        outer.addWidget(self._separator())
        outer.addLayout(inner)
        outer.addWidget(self._separator())

        self._populate(bar, entries)

        # Let the group size itself to its content, then fix that width
        group_widget.adjustSize()
        group_widget.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Preferred)

        self._group_layout.addWidget(group_widget)

    def add_global_actions(self, perm_act_list, pos='left'):
        """Add permanent buttons (e.g., Open/Settings) to the ribbon corner."""
        tb = QToolBar(self)
        tb.setMovable(False)
        tb.setFloatable(False)
        tb.setToolButtonStyle(Qt.ToolButtonTextOnly)
        tb.setStyleSheet("""
QToolBar {
    background: #d8d8d8;
    border: none;
}

QToolButton {
    padding: 2px;
    margin: 0;
}
""")
        for a in perm_act_list:
            tb.addAction(a)
        corner = Qt.TopLeftCorner if pos == 'left' else Qt.TopRightCorner
        self.setCornerWidget(tb, corner)
