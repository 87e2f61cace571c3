"""Key bindings: maps key codes to PatternConfig mutations.

    space       pause / resume
    up / down   iterations per frame +/- 10
    right/left  time speed x/÷ 1.2
    t           permanent trail
    g           glow halo
    h           control panel
    p           disable hue (white trail)
    i           invert colors
    s           save snapshot (handled by the view)
"""

from PyQt6.QtCore import Qt

from pattern.config import (
    toggle_pause, increase_iterations, decrease_iterations,
    speed_up, slow_down, toggle_permanent_trail, toggle_glow,
    toggle_controls, toggle_hue, toggle_invert,
)


def _key_code(key):
    """Accept either a Qt.Key member or the int from QKeyEvent.key()."""
    return int(getattr(key, "value", key))


SNAPSHOT_KEY = _key_code(Qt.Key.Key_S)

KEY_BINDINGS = {
    _key_code(Qt.Key.Key_Space): toggle_pause,
    _key_code(Qt.Key.Key_Up): increase_iterations,
    _key_code(Qt.Key.Key_Down): decrease_iterations,
    _key_code(Qt.Key.Key_Right): speed_up,
    _key_code(Qt.Key.Key_Left): slow_down,
    _key_code(Qt.Key.Key_T): toggle_permanent_trail,
    _key_code(Qt.Key.Key_G): toggle_glow,
    _key_code(Qt.Key.Key_H): toggle_controls,
    _key_code(Qt.Key.Key_P): toggle_hue,
    _key_code(Qt.Key.Key_I): toggle_invert,
}

HELP_TEXT = (
    "Space: pause\n"
    "↑/↓: iterations per frame\n"
    "→/←: time speed\n"
    "T: permanent trail\n"
    "G: glow\n"
    "H: hide controls\n"
    "P: disable hue\n"
    "I: invert colors\n"
    "S: save snapshot"
)


# Held arrow keys keep adjusting; toggles fire once per press
REPEATABLE_KEYS = frozenset(
    _key_code(k) for k in (Qt.Key.Key_Up, Qt.Key.Key_Down, Qt.Key.Key_Right, Qt.Key.Key_Left)
)


def is_repeatable(key) -> bool:
    return _key_code(key) in REPEATABLE_KEYS


def is_snapshot_key(key) -> bool:
    return _key_code(key) == SNAPSHOT_KEY


def handle_key(config, key) -> bool:
    """Apply the binding for key to config. Returns False for unbound keys."""
    action = KEY_BINDINGS.get(_key_code(key))
    if action is None:
        return False
    action(config)
    return True
