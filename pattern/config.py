"""Pattern configuration: the shared switches read by the frame pipeline.

PatternConfig is the single mutable record owned by the input layer
(key bindings and the control panel). The frame orchestrator never sees
it directly; each tick it receives a frozen FrameSettings snapshot.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

logger = logging.getLogger(__name__)

ITER_MIN = 1
ITER_MAX = 500
ITER_STEP = 10

SPEED_FACTOR = 1.2

FADE_ALPHA_MIN = 1
FADE_ALPHA_MAX = 255


@dataclass(frozen=True)
class FrameSettings:
    """Read-only view of the configuration for one tick."""

    paused: bool
    iter_per_frame: int
    time_speed: float
    permanent_trail: bool
    glow: bool
    disable_hue: bool
    invert_colors: bool
    fade_alpha: int


@dataclass
class PatternConfig:
    """Mutable configuration record shared by the input layer."""

    paused: bool = False
    iter_per_frame: int = 45
    time_speed: float = 1.0
    permanent_trail: bool = False
    use_glow: bool = True
    disable_hue: bool = False
    invert_colors: bool = False
    show_controls: bool = True
    fade_alpha: int = 10
    tail_brightness: float = 1.6

    def __post_init__(self):
        if not ITER_MIN <= self.iter_per_frame <= ITER_MAX:
            raise ValueError(
                f"iter_per_frame must be in [{ITER_MIN}, {ITER_MAX}], "
                f"got {self.iter_per_frame}"
            )
        if not (math.isfinite(self.time_speed) and self.time_speed > 0):
            raise ValueError(
                f"time_speed must be positive and finite, got {self.time_speed}"
            )
        if not FADE_ALPHA_MIN <= self.fade_alpha <= FADE_ALPHA_MAX:
            raise ValueError(
                f"fade_alpha must be in [{FADE_ALPHA_MIN}, {FADE_ALPHA_MAX}], "
                f"got {self.fade_alpha}"
            )

    @property
    def glow(self) -> bool:
        """The halo pass only runs when the trail is bright enough for it."""
        return self.use_glow and self.tail_brightness > 1

    def snapshot(self) -> FrameSettings:
        return FrameSettings(
            paused=self.paused,
            iter_per_frame=self.iter_per_frame,
            time_speed=self.time_speed,
            permanent_trail=self.permanent_trail,
            glow=self.glow,
            disable_hue=self.disable_hue,
            invert_colors=self.invert_colors,
            fade_alpha=self.fade_alpha,
        )


# ---------------------------------------------------------------------------
# Input-layer mutations
# ---------------------------------------------------------------------------

def toggle_pause(config: PatternConfig) -> None:
    config.paused = not config.paused
    logger.info("Paused" if config.paused else "Resumed")


def set_iter_per_frame(config: PatternConfig, value: int) -> None:
    config.iter_per_frame = max(ITER_MIN, min(int(value), ITER_MAX))


def increase_iterations(config: PatternConfig) -> None:
    set_iter_per_frame(config, config.iter_per_frame + ITER_STEP)


def decrease_iterations(config: PatternConfig) -> None:
    set_iter_per_frame(config, config.iter_per_frame - ITER_STEP)


def speed_up(config: PatternConfig) -> None:
    config.time_speed *= SPEED_FACTOR
    logger.info("Time speed %.3fx", config.time_speed)


def slow_down(config: PatternConfig) -> None:
    config.time_speed /= SPEED_FACTOR
    logger.info("Time speed %.3fx", config.time_speed)


def set_permanent_trail(config: PatternConfig, value: bool) -> None:
    config.permanent_trail = bool(value)


def toggle_permanent_trail(config: PatternConfig) -> None:
    set_permanent_trail(config, not config.permanent_trail)


def set_use_glow(config: PatternConfig, value: bool) -> None:
    config.use_glow = bool(value)


def toggle_glow(config: PatternConfig) -> None:
    set_use_glow(config, not config.use_glow)


def toggle_controls(config: PatternConfig) -> None:
    config.show_controls = not config.show_controls


def set_disable_hue(config: PatternConfig, value: bool) -> None:
    config.disable_hue = bool(value)


def toggle_hue(config: PatternConfig) -> None:
    set_disable_hue(config, not config.disable_hue)


def set_invert_colors(config: PatternConfig, value: bool) -> None:
    config.invert_colors = bool(value)


def toggle_invert(config: PatternConfig) -> None:
    set_invert_colors(config, not config.invert_colors)


def set_fade_alpha(config: PatternConfig, value: int) -> None:
    config.fade_alpha = max(FADE_ALPHA_MIN, min(int(value), FADE_ALPHA_MAX))
