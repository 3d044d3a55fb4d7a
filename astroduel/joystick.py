"""Player one's analogue joystick: thresholds, direction priority and names."""

from enum import IntEnum

UP_BIT = 1 << 0
DOWN_BIT = 1 << 1
LEFT_BIT = 1 << 2
RIGHT_BIT = 1 << 3
BUTTON_BIT = 1 << 4

UP_THRESHOLD = 3800
DOWN_THRESHOLD = 3200
LEFT_THRESHOLD = 3000
RIGHT_THRESHOLD = 3800


class JoystickDirection(IntEnum):
    """Direction chosen with the joystick; CENTER is the fire button."""

    NONE = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4
    CENTER = 5


_PRIORITY = (
    (BUTTON_BIT, JoystickDirection.CENTER),
    (UP_BIT, JoystickDirection.UP),
    (DOWN_BIT, JoystickDirection.DOWN),
    (LEFT_BIT, JoystickDirection.LEFT),
    (RIGHT_BIT, JoystickDirection.RIGHT),
)

_NAMES = {
    JoystickDirection.UP: "UP",
    JoystickDirection.DOWN: "DOWN",
    JoystickDirection.LEFT: "LEFT",
    JoystickDirection.RIGHT: "RIGHT",
    JoystickDirection.CENTER: "SHOOT",
}


def read_state(x: int, y: int, button: bool) -> int:
    """Bit mask from the two 12-bit axis readings and the fire button."""
    state = 0
    if y > UP_THRESHOLD:
        state |= UP_BIT
    if y < DOWN_THRESHOLD:
        state |= DOWN_BIT
    if x < LEFT_THRESHOLD:
        state |= LEFT_BIT
    if x > RIGHT_THRESHOLD:
        state |= RIGHT_BIT
    if button:
        state |= BUTTON_BIT
    return state


def direction_from_state(state: int) -> JoystickDirection:
    """Single direction from a bit mask; fire beats up, down, left, right."""
    for bit, direction in _PRIORITY:
        if state & bit:
            return direction
    return JoystickDirection.NONE


def direction_name(direction: JoystickDirection) -> str:
    """Display name of a joystick direction."""
    return _NAMES.get(direction, "NONE")