"""Color pipeline: ring palette, per-frame overrides, QImage <-> numpy.

The trail color walks a fixed ring of 8 reference colors at a constant
rate of PALETTE_SPEED ring positions per millisecond, interpolating
linearly between neighbours. Index 7 blends back into index 0, so the
cycle has no seam.
"""

import math

import numpy as np
from PyQt6.QtGui import QColor, QImage


# Red, orange, yellow, green, blue, indigo, violet, pink
PALETTE = (
    (255, 0, 0),
    (255, 127, 0),
    (255, 255, 0),
    (0, 255, 0),
    (0, 0, 255),
    (75, 0, 130),
    (148, 0, 211),
    (255, 192, 203),
)

# Ring positions per millisecond (one full cycle every 40 s)
PALETTE_SPEED = 0.0002

PALETTE_PERIOD_MS = len(PALETTE) / PALETTE_SPEED

WHITE = (255, 255, 255)


def color_at(t_ms: float) -> tuple[float, float, float]:
    """Interpolated palette color at elapsed time t_ms.

    Returns float channels in [0, 255]; callers round when drawing.
    """
    n = len(PALETTE)
    position = (t_ms * PALETTE_SPEED) % n
    i0 = math.floor(position)
    i1 = (i0 + 1) % n
    f = position - i0

    c0 = PALETTE[i0]
    c1 = PALETTE[i1]
    return (
        c0[0] * (1 - f) + c1[0] * f,
        c0[1] * (1 - f) + c1[1] * f,
        c0[2] * (1 - f) + c1[2] * f,
    )


def apply_overrides(color, disable_hue: bool, invert_colors: bool):
    """Apply the hue and inversion switches to a palette color.

    The hue override runs first, so both switches together give black.
    """
    if disable_hue:
        color = WHITE
    if invert_colors:
        color = tuple(255 - c for c in color)
    return color


def to_qcolor(color, alpha: int = 255) -> QColor:
    """QColor from float RGB channels, rounded and clamped to 0..255."""
    r, g, b = (max(0, min(255, round(c))) for c in color)
    return QColor(r, g, b, alpha)


def qimage_view(image: QImage) -> np.ndarray:
    """Writable (H, W, 4) uint8 BGRA view onto a 32-bit QImage's pixels.

    Writes go straight into the image. The view is only valid while the
    image is alive and no QPainter is active on it.
    """
    h, w = image.height(), image.width()
    if h == 0 or w == 0:
        return np.zeros((h, w, 4), dtype=np.uint8)
    ptr = image.bits()
    ptr.setsize(image.sizeInBytes())
    rows = np.frombuffer(ptr, dtype=np.uint8).reshape(h, image.bytesPerLine())
    return rows[:, : 4 * w].reshape(h, w, 4)


def qimage_to_numpy(image: QImage) -> np.ndarray:
    """Copy a 32-bit QImage into an (H, W, 4) uint8 BGRA array."""
    return qimage_view(image).copy()
