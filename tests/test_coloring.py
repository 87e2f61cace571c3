"""Tests for pattern/coloring.py: ring palette, overrides, QImage helpers."""

import numpy as np
import pytest
from PyQt6.QtGui import QColor, QImage

from pattern.coloring import (
    PALETTE, PALETTE_SPEED, PALETTE_PERIOD_MS,
    color_at, apply_overrides, to_qcolor, qimage_view, qimage_to_numpy,
)


class TestPalette:

    def test_eight_colors(self):
        assert len(PALETTE) == 8

    def test_starts_red(self):
        assert PALETTE[0] == (255, 0, 0)

    def test_period(self):
        assert PALETTE_PERIOD_MS == pytest.approx(8 / PALETTE_SPEED)
        assert PALETTE_PERIOD_MS == pytest.approx(40000.0)


class TestColorAt:
    """Test time -> color interpolation around the ring."""

    def test_time_zero_is_first_color(self):
        assert color_at(0) == (255, 0, 0)

    def test_reference_colors_at_integer_positions(self):
        for i, ref in enumerate(PALETTE):
            t = i / PALETTE_SPEED
            assert color_at(t) == pytest.approx(ref, abs=1e-6)

    def test_halfway_between_red_and_orange(self):
        """Position 0.5 is the midpoint of colors 0 and 1."""
        r, g, b = color_at(0.5 / PALETTE_SPEED)
        assert r == pytest.approx(255.0)
        assert g == pytest.approx(63.5)
        assert b == pytest.approx(0.0)

    def test_periodic(self):
        for t in [0.0, 1234.5, 17000.0, 39999.0]:
            assert color_at(t + PALETTE_PERIOD_MS) == pytest.approx(
                color_at(t), abs=1e-6
            )

    def test_continuous_across_wrap(self):
        """The last color blends back into the first without a jump."""
        before = color_at(PALETTE_PERIOD_MS - 1e-3)
        after = color_at(PALETTE_PERIOD_MS + 1e-3)
        assert before == pytest.approx(after, abs=0.05)

    def test_continuous_everywhere(self):
        """Adjacent millisecond samples never jump by more than one step's worth."""
        ts = np.arange(0.0, PALETTE_PERIOD_MS * 1.5, 1.0)
        colors = np.array([color_at(t) for t in ts[::50]])
        jumps = np.abs(np.diff(colors, axis=0))
        # 50 ms * 0.0002 = 0.01 ring positions, at most 255 channel units each
        assert np.all(jumps <= 255 * 0.01 + 1e-9)

    def test_channels_in_range(self):
        for t in np.linspace(0.0, PALETTE_PERIOD_MS, 97):
            assert all(0.0 <= c <= 255.0 for c in color_at(t))


class TestOverrides:
    """Test the hue and inversion switches."""

    def test_no_overrides(self):
        assert apply_overrides((10, 20, 30), False, False) == (10, 20, 30)

    def test_disable_hue_forces_white(self):
        for t in [0.0, 5000.0, 23456.0]:
            assert apply_overrides(color_at(t), True, False) == (255, 255, 255)

    def test_invert_red(self):
        assert apply_overrides((255, 0, 0), False, True) == (0, 255, 255)

    def test_invert_fractional(self):
        assert apply_overrides((255.0, 63.5, 0.0), False, True) == (0.0, 191.5, 255.0)

    def test_hue_then_invert_gives_black(self):
        assert apply_overrides((12, 34, 56), True, True) == (0, 0, 0)


class TestToQColor:

    def test_rounds_channels(self):
        c = to_qcolor((254.6, 63.5, 0.2), 200)
        assert (c.red(), c.green(), c.blue(), c.alpha()) == (255, 64, 0, 200)

    def test_clamps(self):
        c = to_qcolor((300.0, -5.0, 128.0))
        assert (c.red(), c.green(), c.blue(), c.alpha()) == (255, 0, 128, 255)


class TestQImageConversion:
    """Test numpy <-> QImage helpers used by the fade pass."""

    def test_qimage_view_writes_through(self):
        image = QImage(5, 3, QImage.Format.Format_RGB32)
        image.fill(QColor(0, 0, 0))
        view = qimage_view(image)
        view[1, 2, :3] = [30, 20, 10]  # BGR
        assert image.pixelColor(2, 1).getRgb()[:3] == (10, 20, 30)
        assert image.pixelColor(0, 0).getRgb()[:3] == (0, 0, 0)

    def test_qimage_to_numpy_is_a_copy(self):
        """Changing the copy leaves the image alone."""
        image = QImage(2, 2, QImage.Format.Format_RGB32)
        image.fill(QColor(0, 0, 0))
        pixels = qimage_to_numpy(image)
        pixels[:] = 255
        assert image.pixelColor(0, 0).getRgb()[:3] == (0, 0, 0)

    def test_qimage_to_numpy(self):
        image = QImage(4, 2, QImage.Format.Format_RGB32)
        image.fill(QColor(200, 100, 50))
        pixels = qimage_to_numpy(image)
        assert pixels.shape == (2, 4, 4)
        np.testing.assert_array_equal(pixels[..., 0], 50)   # B
        np.testing.assert_array_equal(pixels[..., 1], 100)  # G
        np.testing.assert_array_equal(pixels[..., 2], 200)  # R

    def test_qimage_to_numpy_empty(self):
        assert qimage_to_numpy(QImage()).shape == (0, 0, 4)
