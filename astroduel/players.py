"""The two players: movement, bounds, firing and asteroid collisions."""

from dataclasses import dataclass

from .asteroids import AsteroidField
from .joystick import JoystickDirection
from .keyboard import KeyDirection
from .shoot import BulletSystem
from .sprite import sprite_draw, sprite_erase

PLAYER_SPEED = 1
JOYSTICK_INTERVAL = 10
RESPAWN_X = 2
RESPAWN_Y = 30
HIT_WIDTH = 10
HIT_HEIGHT = 5
START_HEALTH = 5


@dataclass
class Player:
    """Position, velocity, score and remaining health of a player."""

    x: int
    y: int
    vx: int = 0
    vy: int = 0
    points: int = 0
    health: int = START_HEALTH


@dataclass(frozen=True)
class PlayArea:
    """The rectangle players are kept inside."""

    min_x: int = 2
    max_x: int = 96
    min_y: int = 10
    max_y: int = 36

    def clamp(self, player: Player) -> None:
        """Move ``player`` back inside the area."""
        player.x = min(max(player.x, self.min_x), self.max_x)
        player.y = min(max(player.y, self.min_y), self.max_y)


def new_players() -> "tuple[Player, Player]":
    """The two players at their starting positions."""
    return Player(x=10, y=80), Player(x=86, y=80)


_JOY_VELOCITY = {
    JoystickDirection.UP: (0, -PLAYER_SPEED),
    JoystickDirection.DOWN: (0, PLAYER_SPEED),
    JoystickDirection.LEFT: (-PLAYER_SPEED, 0),
    JoystickDirection.RIGHT: (PLAYER_SPEED, 0),
}

_KEY_VELOCITY = {
    KeyDirection.UP: (0, -PLAYER_SPEED),
    KeyDirection.DOWN: (0, PLAYER_SPEED),
    KeyDirection.LEFT: (-PLAYER_SPEED, 0),
    KeyDirection.RIGHT: (PLAYER_SPEED, 0),
}


def _overlaps(player: Player, x: int, y: int) -> bool:
    return x <= player.x <= x + HIT_WIDTH and y <= player.y <= y + HIT_HEIGHT


class PlayerController:
    """Applies input to both players once per frame."""

    def __init__(self) -> None:
        self._ticks = 0

    def step(
        self,
        p1: Player,
        p2: Player,
        area: PlayArea,
        joy_direction: JoystickDirection,
        key_direction: KeyDirection,
        bullets: BulletSystem,
        field: AsteroidField,
    ) -> str:
        """Advance both players one frame and return the redraw output.

        The joystick is only read every tenth frame; in between the first
        player keeps its last velocity. The second player moves only while a
        key is pressed. A player that lands on an asteroid is sent back to
        the respawn point, and every such collision costs the second player
        one health point.
        """
        out = []

        self._ticks += 1
        if self._ticks >= JOYSTICK_INTERVAL:
            self._ticks = 0
            p1.vx, p1.vy = _JOY_VELOCITY.get(joy_direction, (0, 0))
            if joy_direction == JoystickDirection.CENTER:
                out.append(bullets.spawn(1, p1, p2))

        p2.vx, p2.vy = _KEY_VELOCITY.get(key_direction, (0, 0))
        if key_direction == KeyDirection.SHOOT:
            out.append(bullets.spawn(2, p1, p2))

        out.append(sprite_erase(p1.x, p1.y))
        out.append(sprite_erase(p2.x, p2.y))

        for player in (p1, p2):
            player.x += player.vx
            player.y += player.vy
            area.clamp(player)

        for player in (p1, p2):
            for asteroid in field.asteroids:
                if asteroid.active and _overlaps(player, asteroid.x, asteroid.y):
                    player.x, player.y = RESPAWN_X, RESPAWN_Y
                    p2.health -= 1

        out.append(sprite_draw(p1.x, p1.y))
        out.append(sprite_draw(p2.x, p2.y))
        return "".join(out)