"""Tests for pattern/snapshot.py: PNG export of the visible frame."""

import pytest
from PyQt6.QtGui import QColor, QImage

from pattern.snapshot import next_snapshot_path, save_snapshot


def _image(color=QColor(10, 200, 30)):
    image = QImage(16, 12, QImage.Format.Format_RGB32)
    image.fill(color)
    return image


class TestNextSnapshotPath:

    def test_first_name(self, tmp_path):
        assert next_snapshot_path(tmp_path) == tmp_path / "pi_pattern.png"

    def test_never_overwrites(self, tmp_path):
        (tmp_path / "pi_pattern.png").touch()
        (tmp_path / "pi_pattern_1.png").touch()
        assert next_snapshot_path(tmp_path) == tmp_path / "pi_pattern_2.png"

    def test_custom_stem(self, tmp_path):
        assert next_snapshot_path(tmp_path, "frame") == tmp_path / "frame.png"


class TestSaveSnapshot:

    def test_writes_png(self, tmp_path):
        path = save_snapshot(_image(), tmp_path)
        assert path == tmp_path / "pi_pattern.png"
        loaded = QImage(str(path))
        assert (loaded.width(), loaded.height()) == (16, 12)
        assert loaded.pixelColor(5, 5).getRgb()[:3] == (10, 200, 30)

    def test_second_save_gets_new_name(self, tmp_path):
        first = save_snapshot(_image(), tmp_path)
        second = save_snapshot(_image(), tmp_path)
        assert first != second
        assert second.exists()

    def test_creates_directory(self, tmp_path):
        target = tmp_path / "shots" / "today"
        path = save_snapshot(_image(), target)
        assert path.parent == target
        assert path.exists()

    def test_empty_image_raises(self, tmp_path):
        with pytest.raises(OSError):
            save_snapshot(QImage(), tmp_path)
