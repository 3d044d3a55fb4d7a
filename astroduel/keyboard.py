"""Player two's controls, read from key presses on the serial console."""

from enum import IntEnum
from typing import Callable

_ESC = 0x1B


class KeyDirection(IntEnum):
    """Direction or action chosen from the keyboard."""

    NONE = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4
    CENTER = 5
    SHOOT = 6


_ARROWS = {
    ord("A"): KeyDirection.UP,
    ord("B"): KeyDirection.DOWN,
    ord("C"): KeyDirection.RIGHT,
    ord("D"): KeyDirection.LEFT,
}

_NAMES = {
    KeyDirection.UP: "UP",
    KeyDirection.DOWN: "DOWN",
    KeyDirection.LEFT: "LEFT",
    KeyDirection.RIGHT: "RIGHT",
    KeyDirection.CENTER: "CENTER",
    KeyDirection.SHOOT: "SHOOT",
}


def read_key_direction(read_char: Callable[[], int]) -> KeyDirection:
    """Decode one key press.

    ``read_char`` returns the next received byte, or 0 when none is waiting.
    'p' shoots; the arrow-key sequences ESC [ A/B/C/D move.
    """
    c = read_char()
    if c == ord("p"):
        return KeyDirection.SHOOT
    if c == _ESC and read_char() == ord("["):
        return _ARROWS.get(read_char(), KeyDirection.NONE)
    return KeyDirection.NONE


def key_direction_name(direction: KeyDirection) -> str:
    """Display name of a keyboard direction."""
    return _NAMES.get(direction, "NONE")