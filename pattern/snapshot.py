"""Snapshot export: write the visible frame to a PNG file."""

import logging
from pathlib import Path

from PyQt6.QtGui import QImage

logger = logging.getLogger(__name__)

DEFAULT_STEM = "pi_pattern"


def next_snapshot_path(directory, stem=DEFAULT_STEM):
    """First free path among stem.png, stem_1.png, stem_2.png, ..."""
    directory = Path(directory)
    path = directory / f"{stem}.png"
    n = 0
    while path.exists():
        n += 1
        path = directory / f"{stem}_{n}.png"
    return path


def save_snapshot(image: QImage, directory, stem=DEFAULT_STEM) -> Path:
    """Save image as PNG in directory and return the written path.

    Raises:
        OSError: the image is empty or Qt could not write the file.
    """
    if image.isNull():
        raise OSError("Nothing to save: the frame is empty")

    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = next_snapshot_path(directory, stem)
    if not image.save(str(path), "PNG"):
        raise OSError(f"Could not write snapshot to {path}")

    logger.info("Saved snapshot to %s (%dx%d)", path, image.width(), image.height())
    return path
