"""Pattern view: orchestrates the frame pipeline, canvas and controls.

Owns the configuration record, the 60 fps timer and the millisecond
clock. Input from keys and from the control panel goes through the same
config mutations; each timer tick hands a frozen snapshot to the
orchestrator.
"""

import logging
from pathlib import Path

from PyQt6.QtCore import Qt, QTimer, QElapsedTimer
from PyQt6.QtWidgets import QWidget, QHBoxLayout, QSplitter, QLabel

from pattern import config as cfg
from pattern.canvas import PatternCanvas
from pattern.config import PatternConfig
from pattern.controls import PatternControls
from pattern.frame import FrameOrchestrator
from pattern.keymap import handle_key, is_snapshot_key
from pattern.snapshot import save_snapshot

logger = logging.getLogger(__name__)


class PatternView(QWidget):
    """Complete pattern mode: canvas + controls + frame timer."""

    FPS = 60

    def __init__(self, config=None, snapshot_dir=None, fps=None, parent=None):
        super().__init__(parent)

        self.config = config if config is not None else PatternConfig()
        self.snapshot_dir = Path(snapshot_dir) if snapshot_dir else Path.cwd()
        self.orchestrator = FrameOrchestrator()

        self.canvas = PatternCanvas(self.orchestrator)
        self.controls = PatternControls()

        splitter = QSplitter(Qt.Orientation.Horizontal)
        splitter.addWidget(self.canvas)
        splitter.addWidget(self.controls)
        splitter.setStretchFactor(0, 4)
        splitter.setStretchFactor(1, 1)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(splitter)

        # Status bar labels (AppWindow places these in the real status bar)
        self.steps_label = QLabel()
        self.speed_label = QLabel()
        self.theta_label = QLabel()
        self.message_label = QLabel()

        # Clock and timer
        self.clock = QElapsedTimer()
        self.clock.start()
        self.timer = QTimer()
        self.timer.setInterval(int(1000 / (fps or self.FPS)))
        self.timer.timeout.connect(self._on_timer)

        # Wire signals
        self.canvas.key_pressed.connect(self._on_key)
        self.controls.pause_btn.clicked.connect(
            lambda: self._apply(cfg.toggle_pause)
        )
        self.controls.slower_btn.clicked.connect(
            lambda: self._apply(cfg.slow_down)
        )
        self.controls.faster_btn.clicked.connect(
            lambda: self._apply(cfg.speed_up)
        )
        self.controls.iter_spin.valueChanged.connect(
            lambda v: self._apply(cfg.set_iter_per_frame, v)
        )
        self.controls.fade_spin.valueChanged.connect(
            lambda v: self._apply(cfg.set_fade_alpha, v)
        )
        self.controls.permanent_checkbox.toggled.connect(
            lambda checked: self._apply(cfg.set_permanent_trail, checked)
        )
        self.controls.glow_checkbox.toggled.connect(
            lambda checked: self._apply(cfg.set_use_glow, checked)
        )
        self.controls.hue_checkbox.toggled.connect(
            lambda checked: self._apply(cfg.set_disable_hue, checked)
        )
        self.controls.invert_checkbox.toggled.connect(
            lambda checked: self._apply(cfg.set_invert_colors, checked)
        )
        self.controls.snapshot_btn.clicked.connect(self.save_snapshot)

        self._sync_controls()

    # -- Lifecycle --

    def start(self):
        self.canvas.setFocus()
        self.timer.start()

    def stop(self):
        self.timer.stop()

    # -- Input --

    def _apply(self, mutation, *args):
        if self.controls.building:
            return
        mutation(self.config, *args)
        self._sync_controls()

    def _on_key(self, key):
        if is_snapshot_key(key):
            self.save_snapshot()
        elif handle_key(self.config, key):
            self._sync_controls()

    def _sync_controls(self):
        self.controls.sync_from(self.config)
        self.controls.setVisible(self.config.show_controls)

    # -- Frame loop --

    def _on_timer(self):
        result = self.orchestrator.tick(self.config.snapshot(), self.clock.elapsed())
        if result.skipped:
            return
        self.canvas.update()

        state = "paused" if result.paused else f"{result.steps} steps/frame"
        self.steps_label.setText(f"  {state}  ")
        self.speed_label.setText(f"  speed {self.config.time_speed:.2f}x  ")
        self.theta_label.setText(f"  θ = {result.theta:.3f}  ")

    # -- Export --

    def save_snapshot(self):
        try:
            path = save_snapshot(self.orchestrator.frame, self.snapshot_dir)
        except OSError:
            logger.exception("Snapshot failed")
            self.message_label.setText("  Snapshot failed  ")
            return
        self.message_label.setText(f"  Saved {path.name}  ")
