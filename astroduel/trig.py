"""Fixed-point trigonometry from a 512-entry sine table.

Angles are in units of pi/256 (512 per full turn).  Table values are in
2.14 fixed point; vectors are in 18.14 fixed point.
"""

import math
from dataclasses import dataclass

SIN_SIZE = 512
_ONE = 1 << 14


def _build_table() -> tuple[int, ...]:
    """Return sin(x * pi / 256) for one full turn, rounded to 2.14."""
    return tuple(
        int(round(math.sin(x * math.pi / 256) * _ONE)) for x in range(SIN_SIZE)
    )


SIN: tuple[int, ...] = _build_table()


@dataclass(frozen=True)
class Vector:
    """A 2-D vector in 18.14 fixed point."""

    x: int
    y: int


def _to_int32(i: int) -> int:
    i &= 0xFFFFFFFF
    return i - (1 << 32) if i & 0x80000000 else i


def expand(i: int) -> int:
    """Convert a 2.14 fixed-point number to 16.16."""
    return i << 2


def format_fix(i: int) -> str:
    """Format a signed 16.16 fixed-point number with four decimals."""
    value = _to_int32(i)
    sign = ""
    if value < 0:
        sign = "-"
        value = -value
    whole = value >> 16
    fraction = (10000 * (value & 0xFFFF)) >> 16
    return f"{sign}{whole}.{fraction:04d}"


def sinus(angle: int) -> int:
    """Sine of ``angle`` (512 per turn) in 2.14 fixed point."""
    return SIN[angle & 0x1FF]


def cosinus(angle: int) -> int:
    """Cosine of ``angle`` (512 per turn) in 2.14 fixed point."""
    return SIN[(angle + 0x80) & 0x1FF]


def rotate_vector(v: Vector, angle: int) -> Vector:
    """Return ``v`` rotated by ``angle`` (512 per turn)."""
    s = sinus(angle)
    c = cosinus(angle)
    return Vector(
        x=(v.x * c - v.y * s) >> 14,
        y=(v.x * s + v.y * c) >> 14,
    )