"""Frame orchestrator: the per-tick pipeline that produces one visible frame.

    clear -> [fade -> N x (advance, map, color) -> draw segments]
          -> additive composite -> arm overlay

The bracketed part only runs while not paused. The arm overlay is always
drawn so the current pose stays visible when paused.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from PyQt6.QtCore import Qt, QPointF
from PyQt6.QtGui import QBrush, QColor, QImage, QPainter, QPen

from pattern.coloring import apply_overrides, color_at
from pattern.config import FrameSettings
from pattern.trail import BlendMode, Segment, TrailCompositor
from simulation import AngleState, advance, positions, scale_factor, total_steps

logger = logging.getLogger(__name__)

FRAME_FORMAT = QImage.Format.Format_RGB32

ARM_COLOR = QColor(255, 255, 255)
ARM_WIDTH = 2.0

# (radius px, fill) for the anchor, elbow and tip
ANCHOR_DOT = (12, QColor(255, 255, 255))
JOINT_DOT = (10, QColor(200, 200, 200))
TIP_DOT = (8, QColor(255, 255, 255))


class FrameResult(NamedTuple):
    """Summary of one tick."""

    steps: int      # sub-steps integrated this frame
    paused: bool
    skipped: bool   # zero-area surface, nothing drawn
    theta: float    # theta after the tick


class FrameOrchestrator:
    """Drives the angle state, the trail buffer and the visible frame."""

    def __init__(self, state: AngleState | None = None, width: int = 0, height: int = 0):
        self.state = state if state is not None else AngleState()
        self.trail = TrailCompositor()
        self._frame = QImage()
        self.scale = 0.0
        self.resize(width, height)

    @property
    def frame(self) -> QImage:
        """The last rendered visible frame."""
        return self._frame

    @property
    def width(self) -> int:
        return self._frame.width()

    @property
    def height(self) -> int:
        return self._frame.height()

    @property
    def center(self) -> tuple[float, float]:
        return self.width / 2, self.height / 2

    def resize(self, width: int, height: int) -> None:
        """Match the surfaces to a new canvas size.

        Called from the host's resize notification, before the next tick.
        """
        width, height = max(0, int(width)), max(0, int(height))
        if (width, height) == (self.width, self.height):
            return

        if width == 0 or height == 0:
            self._frame = QImage()
        else:
            self._frame = QImage(width, height, FRAME_FORMAT)
            self._frame.fill(Qt.GlobalColor.black)
        self.trail.resize(width, height)
        self.scale = scale_factor(width, height)
        logger.debug("Resized to %dx%d, scale %.1f px", width, height, self.scale)

    def tick(self, settings: FrameSettings, now_ms: float) -> FrameResult:
        """Render one frame from the given settings at time now_ms."""
        if min(self.width, self.height) == 0:
            return FrameResult(0, settings.paused, True, self.state.theta)

        self._frame.fill(Qt.GlobalColor.black)

        steps = 0
        if not settings.paused:
            if not settings.permanent_trail:
                self.trail.fade(settings.fade_alpha)
            segments = self._integrate(settings, now_ms)
            self.trail.draw_segments(segments, glow=settings.glow)
            steps = len(segments)

        painter = QPainter(self._frame)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.trail.composite(painter, BlendMode.ADDITIVE)
        self._draw_arms(painter, BlendMode.NORMAL)
        painter.end()

        return FrameResult(steps, settings.paused, False, self.state.theta)

    def _integrate(self, settings: FrameSettings, now_ms: float) -> list[Segment]:
        """Advance theta for this frame's sub-steps and collect trail segments.

        All sub-steps share the frame timestamp, so they get one color.
        """
        center = self.center
        color = apply_overrides(
            color_at(now_ms), settings.disable_hue, settings.invert_colors,
        )

        prev = positions(self.state.theta, self.scale, center).tip
        segments = []
        for _ in range(total_steps(settings.iter_per_frame, settings.time_speed)):
            self.state = advance(self.state)
            tip = positions(self.state.theta, self.scale, center).tip
            segments.append(Segment(prev, tip, color))
            prev = tip
        return segments

    def _draw_arms(self, painter: QPainter, blend: BlendMode) -> None:
        painter.setCompositionMode(blend.composition_mode)
        center, joint, tip = positions(self.state.theta, self.scale, self.center)

        pen = QPen(ARM_COLOR)
        pen.setWidthF(ARM_WIDTH)
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawLine(QPointF(*center), QPointF(*joint))
        painter.drawLine(QPointF(*joint), QPointF(*tip))

        painter.setPen(Qt.PenStyle.NoPen)
        for point, (radius, fill) in (
            (center, ANCHOR_DOT), (joint, JOINT_DOT), (tip, TIP_DOT),
        ):
            painter.setBrush(QBrush(fill))
            painter.drawEllipse(QPointF(*point), radius, radius)
