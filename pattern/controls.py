"""Pattern control panel: motion, trail and snapshot controls.

Mirrors the key bindings with widgets. The panel never touches the
configuration itself; PatternView wires its signals to the config
mutations and calls sync_from() after every change.
"""

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QGridLayout, QHBoxLayout,
    QLabel, QPushButton, QGroupBox, QCheckBox, QSpinBox,
)

from pattern.config import (
    ITER_MIN, ITER_MAX, ITER_STEP, FADE_ALPHA_MIN, FADE_ALPHA_MAX,
)
from pattern.keymap import HELP_TEXT


class PatternControls(QWidget):
    """Buttons, spin boxes and check boxes for the pattern configuration."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._building = True
        self._init_ui()
        self._building = False

    def _init_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(8, 8, 8, 8)

        # --- Motion ---
        motion_group = QGroupBox("Motion")
        motion_layout = QGridLayout()
        motion_group.setLayout(motion_layout)

        self.pause_btn = QPushButton("Pause")
        motion_layout.addWidget(self.pause_btn, 0, 0, 1, 3)

        motion_layout.addWidget(QLabel("Iterations / frame"), 1, 0)
        self.iter_spin = QSpinBox()
        self.iter_spin.setRange(ITER_MIN, ITER_MAX)
        self.iter_spin.setSingleStep(ITER_STEP)
        motion_layout.addWidget(self.iter_spin, 1, 1, 1, 2)

        motion_layout.addWidget(QLabel("Time speed"), 2, 0)
        self.slower_btn = QPushButton("−")
        self.faster_btn = QPushButton("+")
        self.slower_btn.setFixedWidth(32)
        self.faster_btn.setFixedWidth(32)
        self.speed_label = QLabel()
        self.speed_label.setMinimumWidth(55)
        self.speed_label.setAlignment(
            Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
        )
        speed_row = QHBoxLayout()
        speed_row.addWidget(self.slower_btn)
        speed_row.addWidget(self.speed_label)
        speed_row.addWidget(self.faster_btn)
        motion_layout.addLayout(speed_row, 2, 1, 1, 2)

        main_layout.addWidget(motion_group)

        # --- Trail ---
        trail_group = QGroupBox("Trail")
        trail_layout = QGridLayout()
        trail_group.setLayout(trail_layout)

        self.permanent_checkbox = QCheckBox("Permanent trail")
        self.glow_checkbox = QCheckBox("Glow")
        self.hue_checkbox = QCheckBox("Disable hue")
        self.invert_checkbox = QCheckBox("Invert colors")
        trail_layout.addWidget(self.permanent_checkbox, 0, 0)
        trail_layout.addWidget(self.glow_checkbox, 0, 1)
        trail_layout.addWidget(self.hue_checkbox, 1, 0)
        trail_layout.addWidget(self.invert_checkbox, 1, 1)

        trail_layout.addWidget(QLabel("Fade alpha"), 2, 0)
        self.fade_spin = QSpinBox()
        self.fade_spin.setRange(FADE_ALPHA_MIN, FADE_ALPHA_MAX)
        trail_layout.addWidget(self.fade_spin, 2, 1)

        main_layout.addWidget(trail_group)

        # --- Snapshot ---
        self.snapshot_btn = QPushButton("Save snapshot")
        main_layout.addWidget(self.snapshot_btn)

        # --- Keys ---
        keys_group = QGroupBox("Keys")
        keys_layout = QVBoxLayout()
        keys_group.setLayout(keys_layout)
        help_label = QLabel(HELP_TEXT)
        help_label.setStyleSheet("color: #aaa;")
        keys_layout.addWidget(help_label)
        main_layout.addWidget(keys_group)

        main_layout.addStretch()

        # Keep keyboard focus on the canvas
        for w in (
            self.pause_btn, self.slower_btn, self.faster_btn, self.snapshot_btn,
            self.permanent_checkbox, self.glow_checkbox,
            self.hue_checkbox, self.invert_checkbox,
        ):
            w.setFocusPolicy(Qt.FocusPolicy.NoFocus)

    @property
    def building(self):
        """True while widgets are being set programmatically."""
        return self._building

    def sync_from(self, config):
        """Show the current configuration without re-emitting changes."""
        self._building = True
        try:
            self.pause_btn.setText("Resume" if config.paused else "Pause")
            self.iter_spin.setValue(config.iter_per_frame)
            self.speed_label.setText(f"{config.time_speed:.2f}x")
            self.permanent_checkbox.setChecked(config.permanent_trail)
            self.glow_checkbox.setChecked(config.use_glow)
            self.hue_checkbox.setChecked(config.disable_hue)
            self.invert_checkbox.setChecked(config.invert_colors)
            self.fade_spin.setValue(config.fade_alpha)
            self.fade_spin.setEnabled(not config.permanent_trail)
        finally:
            self._building = False
