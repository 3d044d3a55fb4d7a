"""The player's 4x4 colour sprite drawn with ANSI background colours."""

from .ansi import ESC, gotoxy

SPRITE_W = 4
SPRITE_HEIGHT = 4
SPRITE_TRANSPARENT = 0

PLAYER1_COLORSPRITE: tuple[tuple[int, ...], ...] = (
    (0, 1, 1, 0),
    (1, 2, 2, 1),
    (1, 2, 3, 1),
    (0, 1, 1, 0),
)


def ansi_bg(c: int) -> str:
    """Background colour sequence for palette index ``c`` (taken modulo 8)."""
    return f"{ESC}[{40 + c % 8}m"


def ansi_reset() -> str:
    """Sequence that resets all text attributes."""
    return f"{ESC}[0m"


def sprite_erase(x: int, y: int) -> str:
    """Output that blanks the sprite's 4x4 area with its top-left at (x, y)."""
    return "".join(
        gotoxy(x, y + row) + ansi_reset() + " " * SPRITE_W
        for row in range(SPRITE_HEIGHT)
    )


def _pixel(px: int) -> str:
    if px == SPRITE_TRANSPARENT:
        return " "
    return ansi_bg(px) + " " + ansi_reset()


def sprite_draw(x: int, y: int) -> str:
    """Output that draws the sprite with its top-left at (x, y)."""
    return "".join(
        gotoxy(x, y + row) + "".join(_pixel(px) for px in pixels)
        for row, pixels in enumerate(PLAYER1_COLORSPRITE)
    )