"""The RGB status LED: which colour channels a colour lights, and the
colour shown for each joystick direction."""

from enum import IntEnum

from .joystick import JoystickDirection


class LedColor(IntEnum):
    """Colours the LED can show by combining its red, green and blue parts."""

    OFF = 0
    RED = 1
    GREEN = 2
    BLUE = 3
    YELLOW = 4
    CYAN = 5
    MAGENTA = 6
    WHITE = 7


_CHANNELS = {
    LedColor.OFF: (False, False, False),
    LedColor.RED: (True, False, False),
    LedColor.GREEN: (False, True, False),
    LedColor.BLUE: (False, False, True),
    LedColor.YELLOW: (True, True, False),
    LedColor.CYAN: (False, True, True),
    LedColor.MAGENTA: (True, False, True),
    LedColor.WHITE: (True, True, True),
}

_DIRECTION_COLORS = {
    JoystickDirection.UP: LedColor.RED,
    JoystickDirection.DOWN: LedColor.BLUE,
    JoystickDirection.LEFT: LedColor.GREEN,
    JoystickDirection.RIGHT: LedColor.YELLOW,
    JoystickDirection.CENTER: LedColor.WHITE,
}


def led_outputs(color: LedColor) -> "tuple[bool, bool, bool]":
    """Whether the red, green and blue parts are lit; unknown colours are off."""
    return _CHANNELS.get(color, _CHANNELS[LedColor.OFF])


def color_for_direction(direction: JoystickDirection) -> LedColor:
    """LED colour shown for a joystick direction."""
    return _DIRECTION_COLORS.get(direction, LedColor.OFF)