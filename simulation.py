"""Pi pattern kinematics: angle integration and screen-space mapping.

The pattern is a two-arm linkage driven by a single parameter theta.
The first arm turns at angle theta, the second at pi * theta, so the tip
traces a curve that never closes. Integration uses a fixed step; playback
speed only changes how many steps run per frame.
"""

import math
from dataclasses import dataclass, replace
from typing import NamedTuple


# Step size per sub-step (radians of the first arm)
DEFAULT_DTHETA = 0.0037

# Ratio between the second and the first arm's angular speed
ARM_RATIO = math.pi

# The pattern spans -2..+2 arm lengths; min(w, h) / 5 leaves some padding
SCALE_DIVISOR = 5


@dataclass(frozen=True)
class AngleState:
    """Integration state of the pattern."""

    theta: float = 0.0
    dtheta: float = DEFAULT_DTHETA

    @property
    def angle1(self):
        return self.theta

    @property
    def angle2(self):
        return ARM_RATIO * self.theta


def advance(state):
    """Return the state one fixed step further along the curve."""
    return replace(state, theta=state.theta + state.dtheta)


def total_steps(iter_per_frame, time_speed):
    """Number of sub-steps to run this frame.

    Recomputed every frame so speed changes apply on the next tick.
    """
    return math.ceil(iter_per_frame * time_speed)


class ScreenPoint(NamedTuple):
    x: float
    y: float


class ArmPositions(NamedTuple):
    """Pixel positions of the anchor, the elbow joint and the tip."""

    center: ScreenPoint
    joint: ScreenPoint
    tip: ScreenPoint


def scale_factor(width, height):
    """Pixels per arm length for a surface of the given size."""
    return min(width, height) / SCALE_DIVISOR


def positions(theta, scale, center):
    """Map theta to screen coordinates.

    joint = center + scale * (cos theta, sin theta)
    tip   = joint + scale * (cos pi*theta, sin pi*theta)

    Screen y grows downward; the curve is not flipped.
    """
    cx, cy = center
    a2 = ARM_RATIO * theta

    jx = cx + scale * math.cos(theta)
    jy = cy + scale * math.sin(theta)

    tx = jx + scale * math.cos(a2)
    ty = jy + scale * math.sin(a2)

    return ArmPositions(ScreenPoint(cx, cy), ScreenPoint(jx, jy), ScreenPoint(tx, ty))
