import pytest

from astroduel.ansi import bgcolor, fgcolor, gotoxy, reset_bgcolor
from astroduel.window import (
    DOUBLE_LINE,
    SINGLE_LINE,
    BoxChars,
    WallStyle,
    WindowStyle,
    window,
)


def test_box_chars_come_from_code_page_437():
    assert DOUBLE_LINE.tl == bytes([201]).decode("cp437")
    assert SINGLE_LINE.tl == bytes([218]).decode("cp437")
    assert BoxChars.from_cp437(201, 187, 200, 188, 205, 186, 185, 204) == DOUBLE_LINE


def test_window_starts_with_colours_and_corner():
    style = WindowStyle(WallStyle.DOUBLE, fg=3, bg=4, title="Asteroids")
    out = window((2, 3), (30, 10), style)
    assert out.startswith(bgcolor(4) + fgcolor(3) + gotoxy(2, 3) + DOUBLE_LINE.tl)


def test_window_ends_by_resetting_colours():
    out = window((1, 1), (20, 5), WindowStyle(title="x"))
    assert out.endswith(reset_bgcolor() + fgcolor(7))


def test_title_sits_between_bar_ends():
    out = window((1, 1), (40, 5), WindowStyle(title="Asteroids"))
    assert DOUBLE_LINE.cl + "Asteroids" + DOUBLE_LINE.cr in out


def test_title_is_cut_to_fit():
    out = window((1, 1), (6, 3), WindowStyle(title="Asteroids"))
    assert DOUBLE_LINE.cl + "Ast" + DOUBLE_LINE.cr + DOUBLE_LINE.tr in out
    assert "Aste" not in out


def test_narrow_window_draws_only_corner():
    style = WindowStyle(title="T")
    out = window((5, 5), (6, 8), style)
    assert out == bgcolor(0) + fgcolor(7) + gotoxy(5, 5) + DOUBLE_LINE.tl


def test_sides_drawn_on_every_inner_row():
    out = window((1, 1), (20, 8), WindowStyle(title="T"))
    assert out.count(DOUBLE_LINE.v) == 2 * (8 - 1 - 1)
    for y in range(2, 8):
        assert gotoxy(1, y) + DOUBLE_LINE.v in out
        assert gotoxy(20, y) + DOUBLE_LINE.v in out


def test_bottom_edge_spans_width():
    out = window((3, 2), (15, 6), WindowStyle(title=""))
    assert gotoxy(3, 6) + DOUBLE_LINE.bl + DOUBLE_LINE.h * 11 + DOUBLE_LINE.br in out


def test_top_edge_length_matches_width_with_empty_title():
    out = window((1, 1), (12, 4), WindowStyle(title=""))
    top = DOUBLE_LINE.tl + DOUBLE_LINE.cl + DOUBLE_LINE.cr + DOUBLE_LINE.h * 8 + DOUBLE_LINE.tr
    assert top in out
    assert len(top) == 12


@pytest.mark.parametrize("wall, used, unused", [
    (WallStyle.SINGLE, SINGLE_LINE, DOUBLE_LINE),
    (WallStyle.DOUBLE, DOUBLE_LINE, SINGLE_LINE),
])
def test_wall_style_selects_characters(wall, used, unused):
    out = window((1, 1), (10, 5), WindowStyle(wall=wall, title="ab"))
    assert used.tl in out and used.br in out
    assert unused.tl not in out and unused.br not in out