from astroduel.ansi import gotoxy
from astroduel.sprite import (
    PLAYER1_COLORSPRITE,
    SPRITE_HEIGHT,
    SPRITE_W,
    ansi_bg,
    ansi_reset,
    sprite_draw,
    sprite_erase,
)


def test_ansi_bg_sequence():
    assert ansi_bg(1) == "\x1b[41m"


def test_ansi_bg_wraps_modulo_eight():
    assert ansi_bg(9) == ansi_bg(1)
    assert ansi_bg(8) == ansi_bg(0)


def test_ansi_reset_sequence():
    assert ansi_reset() == "\x1b[0m"


def test_erase_blanks_every_cell():
    out = sprite_erase(3, 4)
    assert out.count(" ") == SPRITE_W * SPRITE_HEIGHT
    for row in range(SPRITE_HEIGHT):
        assert gotoxy(3, 4 + row) + ansi_reset() + " " * SPRITE_W in out


def test_draw_visits_every_row():
    out = sprite_draw(10, 20)
    for row in range(SPRITE_HEIGHT):
        assert gotoxy(10, 20 + row) in out
    assert out.count(" ") == SPRITE_W * SPRITE_HEIGHT


def test_draw_colours_only_opaque_pixels():
    out = sprite_draw(1, 1)
    opaque = sum(1 for row in PLAYER1_COLORSPRITE for px in row if px)
    assert out.count(ansi_reset()) == opaque
    for colour in {px for row in PLAYER1_COLORSPRITE for px in row if px}:
        expected = sum(row.count(colour) for row in PLAYER1_COLORSPRITE)
        assert out.count(ansi_bg(colour)) == expected


def test_draw_starts_with_transparent_corner():
    out = sprite_draw(5, 6)
    assert out.startswith(gotoxy(5, 6) + " " + ansi_bg(1))