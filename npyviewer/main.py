"""
Entry point and main application window for NpyViewer.

This module defines the `MainRibbonController`, the top-level Qt window that
orchestrates the GUI. It owns the application context (`CurrentContext`),
initialises the ribbon and hosts the single ViewerPage.

`MainRibbonController` wires every ribbon action to a controller method and
delegates the actual data operations to the tool layer
(`npyviewer.interface.tools`):

    - Open      (Ctrl+O) load a .npy file, replacing the image and points
    - Info      (Ctrl+I) summary of the loaded array
    - Settings  edit the shared configuration dictionary
    - Points / Axes groups via AnnotationActions

Run this module directly via:

    python -m npyviewer.main

or call the top-level `main()` function to launch the GUI.
"""
import logging
import sys

from PyQt5.QtWidgets import (
    QAction,
    QApplication,
    QFileDialog,
    QMainWindow,
    QMessageBox,
    QVBoxLayout,
    QWidget,
)

from .config import con_dict
from .interface import tools as t
from .models import CurrentContext
from .ui import (
    AnnotationActions,
    AutoSettingsDialog,
    Groups,
    InfoTable,
    ViewerPage,
    busy_cursor,
)

logger = logging.getLogger(__name__)


class MainRibbonController(QMainWindow):
    """
    Main window that:
      - Hosts the Ribbon (grouped actions)
      - Hosts the ViewerPage
      - Delegates every action to the tool layer and refreshes the page
    """
    def __init__(self, parent=None):
        super().__init__(parent)

        self.setWindowTitle("NpyViewer")
        self.resize(1200, 800)

        self.cxt = CurrentContext()
        self.table_window = None

        # --- UI shell: ribbon + page ---
        central = QWidget(self)
        outer = QVBoxLayout(central)
        outer.setContentsMargins(0, 0, 0, 0)
        self.setCentralWidget(central)
        self.ribbon = Groups(self)
        outer.addWidget(self.ribbon, 0)

        # --- Create actions ---
        self.open_act = QAction("Open", self)
        self.open_act.setShortcut("Ctrl+O")
        self.open_act.triggered.connect(self.load_from_disk)
        self.open_act.setToolTip("Open a .npy array")

        self.ribbon.add_global_actions([self.open_act])
        #====== non-tab buttons=================
        self.info_act = QAction("Info", self)
        self.info_act.setShortcut("Ctrl+I")
        self.info_act.triggered.connect(self.display_info)
        self.settings_act = QAction("Settings", self)
        self.settings_act.triggered.connect(self.on_settings)

        self.ribbon.add_global_actions([self.info_act, self.settings_act], pos='right')

        self.viewer_page = ViewerPage(self)
        self.page_list = [self.viewer_page]
        self._distribute_context()
        outer.addWidget(self.viewer_page, 1)
        self.viewer_page.activate()

        self.annotation_actions = AnnotationActions(self.cxt, self.ribbon, self)

        self.statusBar().showMessage("Ready. Open a .npy file to begin.")

    def _distribute_context(self):
        for pg in self.page_list:
            pg.cxt = self.cxt

    def active_page(self):
        return self.viewer_page

    def refresh(self):
        self.viewer_page.update_display()

    # =============== Everpresent actions ====================
    def load_from_disk(self):
        path, _ = QFileDialog.getOpenFileName(self, "Open array", "", "NumPy arrays (*.npy)")
        if not path:
            return
        self.open_path(path)

    def open_path(self, path):
        logger.info(f"Button clicked: Open {path}")
        self.cxt.begin_load()
        self.viewer_page.show_status()
        QApplication.processEvents()
        try:
            with busy_cursor('loading...', self):
                ok = t.open_array(self.cxt, path)
        except Exception as e:
            logger.error(f"Failed to open {path}", exc_info=True)
            self.cxt.fail_load(f"Failed to load NPY file: {e}")
            ok = False
        finally:
            self.cxt.finish_load()

        self.refresh()
        if not ok:
            QMessageBox.warning(self, "Open array", self.cxt.error or "Failed to load NPY file")
            return
        self.statusBar().showMessage(f"Loaded {self.cxt.dataset.path.name}", 5000)

    def display_info(self):
        logger.info("Button clicked: Info")
        self.table_window = InfoTable(("Key", "Value"))
        if self.cxt.metadata is not None:
            self.table_window.set_from_dict(self.cxt.metadata)
        self.table_window.setWindowTitle("Info Table")
        self.table_window.resize(400, 300)
        self.table_window.show()

    def on_settings(self):
        dlg = AutoSettingsDialog(self)
        if dlg.exec_():
            # new radii/colours only show up on the next draw
            self.viewer_page.left_canvas.refresh_overlay()
            self.statusBar().showMessage("Settings updated.", 3000)

    def closeEvent(self, event):
        for pg in self.page_list:
            pg.teardown()
        super().closeEvent(event)


def main():
    logging.basicConfig(
        level=getattr(logging, str(con_dict["log_level"]).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    app = QApplication(sys.argv)
    win = MainRibbonController()
    win.show()
    if len(sys.argv) > 1:
        win.open_path(sys.argv[1])
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
