"""Trail compositor: persistent glow buffer with fade and additive composite.

The buffer is an off-screen QImage the same size as the visible frame.
Each running frame it is faded toward black, receives the new line
segments, and is then added onto the visible frame so overlapping strands
brighten each other.
"""

from __future__ import annotations

import enum
import logging
from typing import NamedTuple

import numpy as np
from PyQt6.QtCore import Qt, QPointF
from PyQt6.QtGui import QImage, QPainter, QPen

from pattern.coloring import qimage_view, to_qcolor
from simulation import ScreenPoint

logger = logging.getLogger(__name__)

HALO_WIDTH = 4.0
HALO_ALPHA = 40
CORE_WIDTH = 1.5
CORE_ALPHA = 200

BUFFER_FORMAT = QImage.Format.Format_RGB32


class BlendMode(enum.Enum):
    """How a draw call combines with what is already on the surface."""

    NORMAL = "normal"
    ADDITIVE = "additive"

    @property
    def composition_mode(self) -> QPainter.CompositionMode:
        if self is BlendMode.ADDITIVE:
            # Per-channel min(255, src + dst)
            return QPainter.CompositionMode.CompositionMode_Plus
        return QPainter.CompositionMode.CompositionMode_SourceOver


class Segment(NamedTuple):
    """One sub-step of the trail: a line from start to end in color."""

    start: ScreenPoint
    end: ScreenPoint
    color: tuple


def _line_pen(color, alpha: int, width: float) -> QPen:
    pen = QPen(to_qcolor(color, alpha))
    pen.setWidthF(width)
    pen.setCapStyle(Qt.PenCapStyle.RoundCap)
    return pen


class TrailCompositor:
    """Owns the persistent trail buffer and every write to it."""

    def __init__(self, width: int = 0, height: int = 0):
        self._image = QImage()
        self.resize(width, height)

    @property
    def image(self) -> QImage:
        return self._image

    @property
    def width(self) -> int:
        return self._image.width()

    @property
    def height(self) -> int:
        return self._image.height()

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def resize(self, width: int, height: int) -> bool:
        """Reallocate the buffer if the size changed.

        Reallocation discards the accumulated trail. Returns True when a
        new buffer was allocated.
        """
        width, height = max(0, int(width)), max(0, int(height))
        if (width, height) == (self.width, self.height):
            return False

        if width == 0 or height == 0:
            self._image = QImage()
        else:
            self._image = QImage(width, height, BUFFER_FORMAT)
            self._image.fill(Qt.GlobalColor.black)
        logger.debug("Trail buffer reallocated at %dx%d", width, height)
        return True

    def fade(self, alpha: int) -> None:
        """Decay every pixel toward black by alpha/255, in place.

        Channels are floored after scaling, so any non-zero channel
        strictly decreases each call and eventually reaches 0.
        """
        if self.is_empty or alpha <= 0:
            return
        keep = 255 - min(int(alpha), 255)
        decay = (np.arange(256, dtype=np.uint16) * keep // 255).astype(np.uint8)
        rgb = qimage_view(self._image)[:, :, :3]
        rgb[...] = decay[rgb]

    def draw_segments(
        self,
        segments: list[Segment],
        glow: bool,
        blend: BlendMode = BlendMode.NORMAL,
    ) -> None:
        """Draw trail segments onto the buffer.

        Each segment gets an optional wide faint halo, then a narrow
        bright core on top of it.
        """
        if self.is_empty or not segments:
            return

        painter = QPainter(self._image)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setCompositionMode(blend.composition_mode)
        painter.setBrush(Qt.BrushStyle.NoBrush)

        for seg in segments:
            p0 = QPointF(*seg.start)
            p1 = QPointF(*seg.end)
            if glow:
                painter.setPen(_line_pen(seg.color, HALO_ALPHA, HALO_WIDTH))
                painter.drawLine(p0, p1)
            painter.setPen(_line_pen(seg.color, CORE_ALPHA, CORE_WIDTH))
            painter.drawLine(p0, p1)

        painter.end()

    def composite(
        self,
        painter: QPainter,
        blend: BlendMode = BlendMode.ADDITIVE,
    ) -> None:
        """Draw the whole buffer onto painter's device at the origin.

        The painter is left in NORMAL blend mode afterwards.
        """
        if self.is_empty:
            return
        painter.setCompositionMode(blend.composition_mode)
        painter.drawImage(QPointF(0, 0), self._image)
        painter.setCompositionMode(BlendMode.NORMAL.composition_mode)
