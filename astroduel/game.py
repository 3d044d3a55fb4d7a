"""The game: set-up, the per-frame loop, and the terminal entry point."""

import argparse
import os
import sys
import time
from typing import Iterator, Optional

from .ansi import clrscr, cursor_hide, gotoxy
from .asteroids import AsteroidField
from .joystick import JoystickDirection
from .keyboard import KeyDirection, read_key_direction
from .lcd import LcdBuffer, LcdScroller
from .players import JOYSTICK_INTERVAL, PlayArea, PlayerController, new_players
from .serial_buffer import UartBuffer
from .shoot import BulletSystem
from .timer import Clock
from .ui_screen import MenuAction, run_menu
from .window import WallStyle, WindowStyle, window

SCREEN_WIDTH = 100
SCREEN_HEIGHT = 35
SPAWN_INTERVAL = 500
ASTEROID_INTERVAL = 50
FRAME_WRAP = 10000
LCD_INTERVAL = 10

_HUD_LIMIT = 31
_TARGET_ART = ("<<==++==>>", "||[]||[]||", "<<======>>")
_TARGET_COLUMNS = (10, 45, 80)

DEFAULT_STYLE = WindowStyle(wall=WallStyle.DOUBLE, fg=7, bg=0, title="Asteroids")


class Game:
    """All game state, advanced one frame at a time."""

    def __init__(self, style: WindowStyle = DEFAULT_STYLE, field: Optional[AsteroidField] = None) -> None:
        self.style = style
        self.p1, self.p2 = new_players()
        self.area = PlayArea()
        self.bullets = BulletSystem()
        self.field = field if field is not None else AsteroidField()
        self.controller = PlayerController()
        self.lcd = LcdBuffer()
        self.scroller = LcdScroller()
        self.clock = Clock()
        self.frame_counter = 0
        self.lcd_pushes: "list[tuple[str, bytes]]" = []

    def intro(self) -> str:
        """Show the scores on the LCD and return the output that draws the arena."""
        hud1 = f"P1 <3 :{self.p1.health} Score: {self.p1.points}"
        hud2 = f"P2 <3 :{self.p2.health} Score:{self.p2.points}"
        self.lcd.write_string(1, 1, hud1[:_HUD_LIMIT])
        self.lcd.write_string(1, 2, hud2[:_HUD_LIMIT])
        self.lcd_pushes = list(self.lcd.push_sequence())

        out = [window((1, 1), (SCREEN_WIDTH, 40), self.style)]
        for x in _TARGET_COLUMNS:
            for row, art in enumerate(_TARGET_ART):
                out.append(gotoxy(x, 2 + row) + art)
        return "".join(out)

    def frame(self, joy_direction: JoystickDirection, key_direction: KeyDirection) -> str:
        """Run one frame of the game loop and return its terminal output."""
        if self.clock.hs % LCD_INTERVAL == 0:
            for _ in range(2):
                self.lcd_pushes = self.scroller.update(self.lcd, self.p1, self.p2)

        out = [
            self.controller.step(
                self.p1,
                self.p2,
                self.area,
                joy_direction,
                key_direction,
                self.bullets,
                self.field,
            ),
            self.bullets.update(),
        ]
        self.bullets.count_points(self.p1, self.p2)

        if self.frame_counter % SPAWN_INTERVAL == 0:
            self.field.spawn(SCREEN_WIDTH)
        if self.frame_counter % ASTEROID_INTERVAL == 0:
            out.append(self.field.update(SCREEN_HEIGHT))

        if self.frame_counter % FRAME_WRAP == 0:
            self.frame_counter = 0
        self.frame_counter += 1
        return "".join(out)


def _opening(game: Game) -> str:
    return (
        clrscr()
        + cursor_hide()
        + gotoxy(game.p1.x, game.p1.y)
        + "@"
        + gotoxy(game.p2.x, game.p2.y)
        + "?"
    )


_JOY_KEYS = {
    "w": JoystickDirection.UP,
    "s": JoystickDirection.DOWN,
    "a": JoystickDirection.LEFT,
    "d": JoystickDirection.RIGHT,
    "f": JoystickDirection.CENTER,
}


class _Terminal:
    """Unbuffered keyboard input from the controlling terminal."""

    def __init__(self) -> None:
        self._fd: Optional[int] = None
        self._saved = None

    def __enter__(self) -> "_Terminal":
        if os.name != "nt" and sys.stdin.isatty():
            import termios
            import tty

            self._fd = sys.stdin.fileno()
            self._saved = termios.tcgetattr(self._fd)
            tty.setcbreak(self._fd)
        return self

    def __exit__(self, *exc) -> None:
        if self._fd is not None and self._saved is not None:
            import termios

            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved)

    def read_blocking(self) -> bytes:
        if os.name == "nt":
            import msvcrt

            return msvcrt.getch()
        return os.read(sys.stdin.fileno(), 1)

    def read_available(self) -> bytes:
        if os.name == "nt":
            import msvcrt

            data = bytearray()
            while msvcrt.kbhit():
                data += msvcrt.getch()
            return bytes(data)
        import select

        fd = sys.stdin.fileno()
        data = bytearray()
        while select.select([fd], [], [], 0)[0]:
            chunk = os.read(fd, 64)
            if not chunk:
                break
            data += chunk
        return bytes(data)


def _menu_keys(terminal: _Terminal) -> Iterator[str]:
    while True:
        data = terminal.read_blocking()
        if not data:
            return
        yield from data.decode("latin-1")


def _parse_args(argv: "Optional[list[str]]") -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="astroduel",
        description="Two-player asteroid shooter in the terminal. "
        "Player one: w/a/s/d to move, f to fire. Player two: arrow keys, p to fire.",
    )
    parser.add_argument("--frames", type=int, default=0, help="stop after this many frames (0: run until interrupted)")
    parser.add_argument("--frame-delay", type=float, default=0.002, help="seconds to wait between frames")
    args = parser.parse_args(argv)
    if args.frames < 0:
        parser.error("--frames must not be negative")
    if args.frame_delay < 0:
        parser.error("--frame-delay must not be negative")
    return args


def main(argv: "Optional[list[str]]" = None) -> int:
    """Run the menu and then the game in the terminal."""
    args = _parse_args(argv)
    game = Game()
    write = sys.stdout.write

    def out(text: str) -> None:
        write(text)
        sys.stdout.flush()

    with _Terminal() as terminal:
        try:
            out(_opening(game))
            if run_menu(_menu_keys(terminal), out) is MenuAction.QUIT:
                return 0
            out(game.intro())

            uart = UartBuffer()
            joy = JoystickDirection.NONE
            joy_hold = 0
            start = time.monotonic()
            ticks_done = 0
            frames = 0
            while args.frames == 0 or frames < args.frames:
                for byte in terminal.read_available():
                    direction = _JOY_KEYS.get(chr(byte).lower())
                    if direction is not None:
                        joy, joy_hold = direction, JOYSTICK_INTERVAL
                    else:
                        uart.receive(byte)

                due = int((time.monotonic() - start) * 100)
                for _ in range(due - ticks_done):
                    game.clock.tick()
                ticks_done = max(due, ticks_done)

                out(game.frame(joy, read_key_direction(uart.get_char)))
                if joy_hold > 0:
                    joy_hold -= 1
                    if joy_hold == 0:
                        joy = JoystickDirection.NONE
                frames += 1
                if args.frame_delay:
                    time.sleep(args.frame_delay)
        except KeyboardInterrupt:
            pass
        finally:
            out("\x1b[0m\x1b[?25h")
    return 0