"""Bullets fired by the two players, and the points they score on the targets."""

from dataclasses import dataclass
from enum import Enum

from .ansi import gotoxy

MAX_BULLETS = 32
UPDATE_INTERVAL = 5
TOP_LIMIT = 4
TARGET_ROW = 6
TARGET_SPANS = ((10, 20), (45, 55), (80, 90))


class BulletStyle(Enum):
    """How fast a bullet climbs the screen."""

    SLOW = "slow"
    FAST = "fast"

    @property
    def speed(self) -> int:
        """Rows moved per bullet update."""
        return 1 if self is BulletStyle.SLOW else 2


@dataclass
class Bullet:
    """A bullet on screen and the player who fired it (1 or 2)."""

    player: int
    x: int
    y: int
    style: BulletStyle = BulletStyle.SLOW


def _draw(x: int, y: int) -> str:
    return gotoxy(x, y) + "*"


def _erase(x: int, y: int) -> str:
    return gotoxy(x, y) + " "


class BulletSystem:
    """All bullets in flight, moved upward every few frames."""

    def __init__(self, capacity: int = MAX_BULLETS) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.bullets: list[Bullet] = []
        self._ticks = 0

    def __len__(self) -> int:
        return len(self.bullets)

    def spawn(self, shooter: int, p1, p2) -> str:
        """Fire a bullet from player ``shooter`` (1 or 2) and return its drawing.

        The bullet starts one column right of and one row above the player.
        Nothing happens when every bullet slot is taken.
        """
        if shooter not in (1, 2):
            raise ValueError(f"shooter must be 1 or 2, got {shooter}")
        if len(self.bullets) >= self.capacity:
            return ""
        source = p1 if shooter == 1 else p2
        bullet = Bullet(player=shooter, x=source.x + 1, y=source.y - 1)
        self.bullets.append(bullet)
        return _draw(bullet.x, bullet.y)

    def update(self) -> str:
        """Advance the bullets on every fifth call and return the redraw output.

        Bullets that reach the top rows are removed; the last bullet then
        takes the removed one's place.
        """
        self._ticks += 1
        if self._ticks < UPDATE_INTERVAL:
            return ""
        self._ticks = 0

        out = []
        i = 0
        while i < len(self.bullets):
            bullet = self.bullets[i]
            out.append(_erase(bullet.x, bullet.y))
            bullet.y -= bullet.style.speed
            if bullet.y <= TOP_LIMIT:
                self.bullets[i] = self.bullets[-1]
                self.bullets.pop()
                continue
            out.append(_draw(bullet.x, bullet.y))
            i += 1
        return "".join(out)

    def count_points(self, p1, p2) -> int:
        """Award a point for every bullet on a target; return the number of hits."""
        hits = 0
        for bullet in self.bullets:
            if bullet.y != TARGET_ROW:
                continue
            if not any(lo <= bullet.x <= hi for lo, hi in TARGET_SPANS):
                continue
            if bullet.player == 1:
                p1.points += 1
            elif bullet.player == 2:
                p2.points += 1
            else:
                continue
            hits += 1
        return hits