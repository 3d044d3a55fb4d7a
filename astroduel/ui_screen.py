"""Title, help and boss screens, and the menu that moves between them."""

from enum import Enum
from typing import Callable, Iterable, Union

from .ansi import clrscr, gotoxy

_BANNER = (
    " _       __     __                             ",
    "| |     / /__  / /________  ____ ___  ___     ",
    "| | /| / / _ \\/ / ___/ __ \\/ __ `__ \\/ _ \\    ",
    "| |/ |/ /  __/ / /__/ /_/ / / / / / /  __/    ",
    "|__/|__/\\___/_/\\___/\\____/_/ /_/ /_/\\___/     ",
)


class Screen(Enum):
    """The screen the menu is showing."""

    MAIN = "main"
    HELP = "help"
    BOSS = "boss"


class MenuAction(Enum):
    """What the player chose in the menu."""

    QUIT = "quit"
    START_GAME = "start_game"


def draw_box(x1: int, y1: int, x2: int, y2: int) -> str:
    """Output that draws an ASCII box; empty if there is no room inside it."""
    if x2 <= x1 + 1 or y2 <= y1 + 1:
        return ""
    edge = "+" + "-" * (x2 - x1 - 1) + "+"
    out = [gotoxy(x1, y1) + edge]
    for y in range(y1 + 1, y2):
        out.append(gotoxy(x1, y) + "|" + gotoxy(x2, y) + "|")
    out.append(gotoxy(x1, y2) + edge)
    return "".join(out)


def draw_welcome_banner(x: int, y: int) -> str:
    """Output that draws the five-line welcome banner with its top-left at (x, y)."""
    return "".join(gotoxy(x, y + row) + line for row, line in enumerate(_BANNER))


def render_header() -> str:
    """Output for the framed banner at the top of the menu screens."""
    return draw_box(2, 1, 78, 7) + draw_welcome_banner(10, 2) + gotoxy(2, 8)


def _lines(entries: "Iterable[tuple[int, int, str]]") -> str:
    return "".join(gotoxy(x, y) + text for x, y, text in entries)


def render_main() -> str:
    """Output for the main menu screen."""
    return (
        clrscr()
        + render_header()
        + draw_box(2, 8, 78, 22)
        + _lines(
            (
                (4, 10, "Choose an option by pressing a key:"),
                (6, 12, "[s] Start game"),
                (6, 13, "[h] Help menu"),
                (6, 14, "[b] Boss key (toggle)"),
                (6, 15, "[m] Main menu (from any screen)"),
                (6, 16, "[q] Quit (stops here)"),
            )
        )
    )


def render_help() -> str:
    """Output for the help screen."""
    return (
        clrscr()
        + render_header()
        + draw_box(2, 8, 78, 24)
        + _lines(
            (
                (4, 10, "Controls"),
                (6, 12, "s  : start game"),
                (6, 13, "h  : help screen"),
                (6, 14, "b  : boss key"),
                (6, 15, "m  : main menu"),
                (6, 16, "q  : quit demo"),
            )
        )
    )


def render_boss() -> str:
    """Output for the boss screen, an innocent-looking dashboard."""
    return (
        clrscr()
        + draw_box(10, 6, 70, 18)
        + _lines(
            (
                (18, 9, "SYSTEM MONITORING DASHBOARD"),
                (16, 11, "All systems working. Processing reports..."),
                (2, 24, " LOG: STATUS=OK  CPU=12% "),
            )
        )
    )


def run_menu(keys: Iterable[Union[str, int]], out: Callable[[str], object]) -> MenuAction:
    """Run the menu on a stream of key presses, writing screens through ``out``.

    Keys may be characters or byte values. 'q' quits, 'm' returns to the main
    menu, 'b' toggles the boss screen, 'h' toggles help from the main menu and
    's' starts the game from the main menu; other keys are ignored. The end of
    the key stream counts as quitting.
    """
    screen = Screen.MAIN
    boss_active = False
    out(render_main())

    for key in keys:
        c = chr(key) if isinstance(key, int) else key
        c = c.lower()

        if c == "q":
            return MenuAction.QUIT

        if c == "m":
            boss_active = False
            screen = Screen.MAIN
            out(render_main())
            continue

        if c == "b":
            boss_active = not boss_active
            if boss_active:
                screen = Screen.BOSS
                out(render_boss())
            else:
                screen = Screen.MAIN
                out(render_main())
            continue

        if c == "h":
            if screen is Screen.HELP:
                screen = Screen.MAIN
                out(render_main())
            elif screen is Screen.MAIN:
                screen = Screen.HELP
                out(render_help())
            continue

        if screen is Screen.MAIN and c == "s":
            return MenuAction.START_GAME

    return MenuAction.QUIT