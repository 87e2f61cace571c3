"""Entry point for the Pi Pattern application.

Usage:
    python main.py [--fps 60] [--iter-per-frame 45] [--speed 1.0]
                   [--snapshot-dir .]
"""

import argparse
import logging
import math
import sys

from PyQt6.QtWidgets import QApplication

from app_window import AppWindow
from pattern.config import ITER_MIN, ITER_MAX, PatternConfig


def _positive_float(text):
    value = float(text)
    if not (math.isfinite(value) and value > 0):
        raise argparse.ArgumentTypeError(f"must be a positive finite number, got {text}")
    return value


def _iterations(text):
    value = int(text)
    if not ITER_MIN <= value <= ITER_MAX:
        raise argparse.ArgumentTypeError(
            f"must be in [{ITER_MIN}, {ITER_MAX}], got {text}"
        )
    return value


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Glowing trail of the pi pattern double-angle oscillator.",
    )
    parser.add_argument(
        "--fps",
        type=_positive_float,
        default=60.0,
        help="Frame timer rate (default: 60)",
    )
    parser.add_argument(
        "--iter-per-frame",
        type=_iterations,
        default=45,
        help=f"Sub-steps per frame at 1x speed, {ITER_MIN}-{ITER_MAX} (default: 45)",
    )
    parser.add_argument(
        "--speed",
        type=_positive_float,
        default=1.0,
        help="Initial time speed multiplier (default: 1.0)",
    )
    parser.add_argument(
        "--snapshot-dir",
        type=str,
        default=".",
        help="Directory for saved snapshots (default: current directory)",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    config = PatternConfig(iter_per_frame=args.iter_per_frame, time_speed=args.speed)

    app = QApplication(sys.argv[:1])
    window = AppWindow(config=config, snapshot_dir=args.snapshot_dir, fps=args.fps)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
