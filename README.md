# astroduel

A two-player asteroid shooter for an ANSI terminal. Both players move
inside a framed play area, dodge falling asteroids and shoot at three
targets drawn along the top of the arena. A bullet that reaches a
target scores a point for the player who fired it. A player who runs
into an asteroid is sent back to the respawn point, and each such
collision costs player two one health point.

## Installing

```
pip install .
```

The package uses only the standard library.

## Playing

```
astroduel
```

This opens the main menu. Press one of these keys:

- `s` starts the game (only from the main menu).
- `h` opens the help screen, or closes it again.
- `b` switches the boss screen on or off.
- `m` returns to the main menu from any screen.
- `q` quits.

In the game:

- Player one moves with `w`, `a`, `s`, `d` and fires with `f`.
  Player one's input is taken every tenth frame, and a key press holds
  for ten frames.
- Player two moves with the arrow keys and fires with `p`, one step per
  key press.

A new asteroid appears every 500 frames and asteroids move every 50
frames. Press Ctrl-C to stop.

Options:

- `--frames N` stops after `N` frames (default `0`: run until
  interrupted).
- `--frame-delay SECONDS` waits this long between frames (default
  `0.002`).

## What it does not do

The game runs only in a terminal. The status display is kept in memory
as an `LcdBuffer` and its push sequence (`Game.lcd_pushes`); it is not
shown on screen or sent to any device. There is no analogue joystick
or LED output: `astroduel.joystick` decodes axis readings and
`astroduel.led` maps directions to colours, but nothing reads or drives
real hardware. Scores are not saved.

## Using the pieces

The modules also work on their own. Drawing functions return strings
of terminal output rather than printing them.

- `astroduel.ansi`: escape sequences for colour (`fgcolor`, `bgcolor`,
  `color`), cursor movement (`gotoxy`, `cursor_hide`) and text
  attributes.
- `astroduel.trig`: a 512-entry sine table in 2.14 fixed point, with
  `sinus`, `cosinus`, `expand`, `rotate_vector` and `format_fix`.
- `astroduel.ball`: 16.16 fixed-point `Ball` motion inside and around
  `Bounds`, with `bounce_out`, `bounce_in` and `ball_step`.
- `astroduel.charset`: a 5×7 column font, read through `glyph`.
- `astroduel.lcd`: `LcdBuffer`, a 512-byte page buffer, and
  `LcdScroller`, which draws the scrolling banners and scores.
- `astroduel.serial_buffer`: `UartBuffer`, a receive ring buffer,
  plus `translate_newlines` and `baud_divider`.
- `astroduel.window`: boxed windows with an optional title.
- `astroduel.sprite`: the players' 4×4 colour sprite.
- `astroduel.joystick`, `astroduel.keyboard`, `astroduel.led`: input
  decoding and the mapping from directions to LED colours.
- `astroduel.timer`: `Clock`, which counts in hundredths of a second.
- `astroduel.shoot`, `astroduel.asteroids`, `astroduel.players`: the
  game objects (`BulletSystem`, `AsteroidField`, `Player`,
  `PlayArea`, `PlayerController`).
- `astroduel.ui_screen`: the menu screens and `run_menu`.
- `astroduel.game`: `Game`, which runs one frame at a time, and
  `main`.

```python
from astroduel.trig import Vector, expand, format_fix, rotate_vector

v = Vector(1 << 14, 0)
w = rotate_vector(v, 128)     # a quarter turn
print(format_fix(expand(w.y)))  # 1.0000
```

## Running the tests

```
pip install .[test]
pytest
```