"""A ball in 16.16 fixed point bouncing off an outer frame and an inner block."""

from dataclasses import dataclass

_ONE = 1 << 16


@dataclass(frozen=True)
class Bounds:
    """An axis-aligned rectangle with inclusive border cells (0-255)."""

    x1: int
    y1: int
    x2: int
    y2: int

    def __post_init__(self) -> None:
        for name in ("x1", "y1", "x2", "y2"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"{name} must be in 0..255, got {value}")


@dataclass
class Ball:
    """Position and velocity in 16.16 fixed point."""

    x: int
    y: int
    vx: int
    vy: int

    @property
    def cell(self) -> tuple[int, int]:
        """The integer cell the ball occupies."""
        return self.x >> 16, self.y >> 16


def bounce_out(ball: Ball, bounds: Bounds) -> bool:
    """Keep the ball inside ``bounds``; reflect it off any wall it crossed."""
    left = (bounds.x1 + 1) << 16
    right = (bounds.x2 - 1) << 16
    top = (bounds.y1 + 1) << 16
    bottom = (bounds.y2 - 1) << 16

    bounced = False
    if ball.x < left:
        ball.x, ball.vx, bounced = left, -ball.vx, True
    if ball.x > right:
        ball.x, ball.vx, bounced = right, -ball.vx, True
    if ball.y < top:
        ball.y, ball.vy, bounced = top, -ball.vy, True
    if ball.y > bottom:
        ball.y, ball.vy, bounced = bottom, -ball.vy, True
    return bounced


def bounce_in(ball: Ball, bounds: Bounds) -> bool:
    """Keep the ball out of ``bounds``.

    Only acts when the ball's next position lies inside the block; the ball
    is then advanced, reflected off the side it was entering through.
    """
    left = bounds.x1 << 16
    right = bounds.x2 << 16
    top = bounds.y1 << 16
    bottom = bounds.y2 << 16

    nx = ball.x + ball.vx
    ny = ball.y + ball.vy

    if not (left <= nx <= right and top <= ny <= bottom):
        return False

    bounced = False
    if ball.x < left and nx >= left:
        ball.vx = -ball.vx
        nx = left - _ONE
        bounced = True
    elif ball.x > right and nx <= right:
        ball.vx = -ball.vx
        nx = right + _ONE
        bounced = True

    if ball.y < top and ny >= top:
        ball.vy = -ball.vy
        ny = top - _ONE
        bounced = True
    elif ball.y > bottom and ny <= bottom:
        ball.vy = -ball.vy
        ny = bottom + _ONE
        bounced = True

    ball.x = nx
    ball.y = ny
    return bounced


def ball_step(ball: Ball, outer: Bounds, inner: Bounds) -> int:
    """Move the ball one step and resolve collisions; return the bounce count."""
    ball.x += ball.vx
    ball.y += ball.vy
    return int(bounce_out(ball, outer)) + int(bounce_in(ball, inner))