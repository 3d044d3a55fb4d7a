import random

import pytest

from astroduel.ansi import gotoxy
from astroduel.asteroids import AsteroidField
from astroduel.game import DEFAULT_STYLE, Game, main
from astroduel.joystick import JoystickDirection
from astroduel.keyboard import KeyDirection
from astroduel.lcd import LcdBuffer
from astroduel.window import window


def _game():
    return Game(field=AsteroidField(rng=random.Random(1)))


def _idle(game, n=1):
    for _ in range(n):
        game.frame(JoystickDirection.NONE, KeyDirection.NONE)


def test_intro_draws_window_and_targets():
    game = _game()
    out = game.intro()
    assert out.startswith(window((1, 1), (100, 40), DEFAULT_STYLE))
    for x in (10, 45, 80):
        assert gotoxy(x, 2) + "<<==++==>>" in out
        assert gotoxy(x, 4) + "<<======>>" in out


def test_intro_writes_scores_to_lcd():
    game = _game()
    game.intro()
    expected = LcdBuffer()
    expected.write_string(1, 1, "P1 <3 :5 Score: 0")
    assert game.lcd.pages()[1] == expected.pages()[1]
    assert game.lcd_pushes == list(game.lcd.push_sequence())


def test_first_frame_spawns_and_moves_asteroid():
    game = _game()
    _idle(game)
    active = game.field.active()
    assert len(active) == 1
    assert active[0].y == game.field.spawn_y + game.field.speed
    assert game.frame_counter == 1


def test_asteroids_move_every_fifty_frames():
    game = _game()
    _idle(game)
    y = game.field.active()[0].y
    _idle(game, 49)
    assert game.field.active()[0].y == y
    _idle(game)
    assert game.field.active()[0].y == y + game.field.speed


def test_players_clamped_into_area():
    game = _game()
    _idle(game)
    assert game.p1.y == game.area.max_y
    assert game.p2.y == game.area.max_y


def test_keyboard_shot_spawns_bullet():
    game = _game()
    game.frame(JoystickDirection.NONE, KeyDirection.SHOOT)
    assert len(game.bullets) == 1
    assert game.bullets.bullets[0].player == 2


def test_lcd_scrolls_twice_per_update():
    game = _game()
    _idle(game)
    assert game.scroller.offset == 2
    assert game.lcd_pushes == list(game.lcd.push_sequence())


def test_lcd_not_updated_off_interval():
    game = _game()
    game.clock.hs = 5
    _idle(game)
    assert game.scroller.offset == 0


@pytest.mark.parametrize("argv", [["--frames", "-1"], ["--frame-delay", "-0.5"]])
def test_main_rejects_negative_options(argv):
    with pytest.raises(SystemExit) as info:
        main(argv)
    assert info.value.code == 2