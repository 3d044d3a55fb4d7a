"""ANSI terminal escape sequences for colours, cursor movement and text attributes.

Every function returns the escape sequence as a string; the caller decides
where it is written.
"""

ESC = "\x1b"


def _attribute(value: int) -> str:
    return f"{ESC}[{value}m"


def fgcolor(foreground: int) -> str:
    """Foreground colour 0-15; values above 7 select the bold variant."""
    weight = 22
    if foreground > 7:
        weight = 1
        foreground -= 8
    return f"{ESC}[{weight};{foreground + 30}m"


def bgcolor(background: int) -> str:
    """Background colour 0-7."""
    return _attribute(background + 40)


def color(foreground: int, background: int) -> str:
    """Foreground and background colour in a single sequence."""
    weight = 22
    if foreground > 7:
        weight = 1
        foreground -= 8
    return f"{ESC}[{weight};{foreground + 30};{background + 40}m"


def reset_bgcolor() -> str:
    """Reset all attributes: grey text on black, no underline, blink or reverse."""
    return f"{ESC}[m"


def clrscr() -> str:
    """Clear the whole screen."""
    return f"{ESC}[2J"


def clreol() -> str:
    """Clear from the cursor to the end of the line."""
    return f"{ESC}[K"


def gotoxy(x: int, y: int) -> str:
    """Move the cursor to column ``x``, row ``y`` (1-based)."""
    return f"{ESC}[{y};{x}H"


def underline(on: bool) -> str:
    """Switch underlining on or off."""
    return _attribute(4 if on else 24)


def blink(on: bool) -> str:
    """Switch blinking on or off."""
    return _attribute(5 if on else 25)


def inverse(on: bool) -> str:
    """Switch reverse video on or off."""
    return _attribute(7 if on else 27)


def cursor_hide() -> str:
    """Hide the terminal cursor."""
    return f"{ESC}[?25l"