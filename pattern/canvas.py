"""Pattern canvas: shows the orchestrator's frame and forwards input.

The canvas does no drawing of its own beyond blitting the last frame;
resizes go straight to the orchestrator so its surfaces match before the
next tick.
"""

from PyQt6.QtCore import Qt, QPointF, pyqtSignal
from PyQt6.QtGui import QPainter, QColor
from PyQt6.QtWidgets import QWidget

from pattern.frame import FrameOrchestrator
from pattern.keymap import is_repeatable


class PatternCanvas(QWidget):
    """Widget that displays the rendered pattern frame."""

    key_pressed = pyqtSignal(int)

    def __init__(self, orchestrator: FrameOrchestrator, parent=None):
        super().__init__(parent)
        self.orchestrator = orchestrator
        self.setMinimumSize(200, 200)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

    def resizeEvent(self, event):
        size = event.size()
        self.orchestrator.resize(size.width(), size.height())
        super().resizeEvent(event)

    def keyPressEvent(self, event):
        if event.isAutoRepeat() and not is_repeatable(event.key()):
            return
        self.key_pressed.emit(event.key())

    def mousePressEvent(self, event):
        self.setFocus()
        super().mousePressEvent(event)

    def paintEvent(self, event):
        painter = QPainter(self)
        frame = self.orchestrator.frame
        if frame.isNull():
            painter.fillRect(self.rect(), QColor(0, 0, 0))
        else:
            painter.drawImage(QPointF(0, 0), frame)
        painter.end()
