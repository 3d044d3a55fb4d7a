"""Falling asteroids: spawning, moving, drawing and erasing."""

import random
from dataclasses import dataclass
from typing import Optional

from .ansi import fgcolor, gotoxy

MAX_ASTEROIDS = 30
ASTEROID_HEIGHT = 5
ASTEROID_WIDTH = 9

_ERASE_WIDTH = 12
_RESET = "\x1b[0m"
_ROW_OFFSETS = (2, 2, 1, 0, 1)


def _cp437(*codes: int) -> str:
    return bytes(codes).decode("cp437")


ROCKY_ART: tuple[str, ...] = (
    _cp437(248, 176, 248, 219, 248),
    _cp437(176, 219, 248, 176, 219, 176, 248),
    _cp437(248, 219, 176, 248, 176, 219, 248, 176, 219, 248),
    _cp437(219, 176, 248, 176, 219, 176, 248, 219, 176, 219),
    _cp437(248, 219, 176, 248, 176, 219, 248),
)

SOLID_ART: tuple[str, ...] = (
    _cp437(248, 219, 219, 219, 219),
    _cp437(219, 219, 219, 219, 219, 219, 219),
    _cp437(219, 219, 219, 219, 219, 219, 219, 219, 219, 248),
    _cp437(219, 219, 219, 219, 219, 219, 219, 219, 219, 219),
    _cp437(219, 219, 219, 219, 219, 219, 219),
)


def _render(art: "tuple[str, ...]", x: int, y: int) -> str:
    rows = (
        gotoxy(x + dx, y + row) + text
        for row, (dx, text) in enumerate(zip(_ROW_OFFSETS, art))
    )
    return fgcolor(7) + "".join(rows) + _RESET


def draw_asteroid(x: int, y: int) -> str:
    """Output that draws an asteroid with its bounding box at (x, y)."""
    return _render(ROCKY_ART, x, y)


@dataclass
class Asteroid:
    """One asteroid slot; inactive slots are free for spawning."""

    x: int = 0
    y: int = 0
    active: bool = False
    speed: int = 0


def delete_asteroid(asteroid: Asteroid) -> str:
    """Output that blanks the rows an asteroid occupies."""
    return "".join(
        gotoxy(asteroid.x, asteroid.y + row) + " " * _ERASE_WIDTH
        for row in range(ASTEROID_HEIGHT)
    )


class AsteroidField:
    """A fixed number of asteroid slots that fall down the screen."""

    def __init__(
        self,
        capacity: int = MAX_ASTEROIDS,
        spawn_y: int = 5,
        speed: int = 1,
        art: "tuple[str, ...]" = ROCKY_ART,
        rng: Optional[random.Random] = None,
    ) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.asteroids = [Asteroid() for _ in range(capacity)]
        self.spawn_y = spawn_y
        self.speed = speed
        self.art = art
        self._rng = rng if rng is not None else random.Random()

    @classmethod
    def heavy(cls, rng: Optional[random.Random] = None) -> "AsteroidField":
        """Few, solid, fast asteroids that start at the very top."""
        return cls(capacity=5, spawn_y=0, speed=3, art=SOLID_ART, rng=rng)

    def active(self) -> "list[Asteroid]":
        """The asteroids currently on screen."""
        return [a for a in self.asteroids if a.active]

    def spawn(self, grid_width: int) -> Optional[Asteroid]:
        """Activate the first free slot at a random column; None if all are taken."""
        span = grid_width - ASTEROID_WIDTH
        if span <= 0:
            raise ValueError(
                f"grid width must exceed {ASTEROID_WIDTH}, got {grid_width}"
            )
        slot = next((a for a in self.asteroids if not a.active), None)
        if slot is None:
            return None
        slot.x = self._rng.randrange(span)
        slot.y = self.spawn_y
        slot.active = True
        slot.speed = self.speed
        return slot

    def update(self, grid_height: int) -> str:
        """Move every active asteroid down and return the redraw output.

        Asteroids that pass ``grid_height`` are erased and freed.
        """
        out = []
        for asteroid in self.asteroids:
            if not asteroid.active:
                continue
            out.append(delete_asteroid(asteroid))
            asteroid.y += asteroid.speed
            if asteroid.y > grid_height:
                asteroid.active = False
            else:
                out.append(_render(self.art, asteroid.x, asteroid.y))
        return "".join(out)