"""App window: hosts the pattern view and its status bar labels."""

import logging

from PyQt6.QtWidgets import QMainWindow, QStatusBar

from pattern.view import PatternView

logger = logging.getLogger(__name__)


class AppWindow(QMainWindow):
    """Top-level window for the pi pattern."""

    def __init__(self, config=None, snapshot_dir=None, fps=None):
        super().__init__()
        self.setWindowTitle("Pi Pattern")
        self.resize(1200, 750)

        self.pattern_view = PatternView(
            config=config, snapshot_dir=snapshot_dir, fps=fps,
        )
        self.setCentralWidget(self.pattern_view)

        # --- Status bar ---
        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)
        self._status_bar.addWidget(self.pattern_view.steps_label)
        self._status_bar.addWidget(self.pattern_view.speed_label)
        self._status_bar.addWidget(self.pattern_view.theta_label)
        self._status_bar.addPermanentWidget(self.pattern_view.message_label)

    def showEvent(self, event):
        super().showEvent(event)
        self.pattern_view.start()
        logger.info("Pattern started at %d ms/frame", self.pattern_view.timer.interval())

    def closeEvent(self, event):
        self.pattern_view.stop()
        super().closeEvent(event)
