"""Framed, filled terminal windows with an optional title in the top edge."""

from dataclasses import dataclass
from enum import Enum

from .ansi import bgcolor, fgcolor, gotoxy, reset_bgcolor


class WallStyle(Enum):
    """Line style of a window frame."""

    SINGLE = "single"
    DOUBLE = "double"


@dataclass(frozen=True)
class WindowStyle:
    """How a window is drawn: frame style, colours and title."""

    wall: WallStyle = WallStyle.DOUBLE
    fg: int = 7
    bg: int = 0
    title: str = ""


@dataclass(frozen=True)
class BoxChars:
    """Frame characters: corners, edges and the title bar ends."""

    tl: str
    tr: str
    bl: str
    br: str
    h: str
    v: str
    cl: str
    cr: str

    @classmethod
    def from_cp437(cls, *codes: int) -> "BoxChars":
        """Build from code page 437 byte values in field order."""
        return cls(*bytes(codes).decode("cp437"))


SINGLE_LINE = BoxChars.from_cp437(218, 191, 192, 217, 196, 179, 180, 195)
DOUBLE_LINE = BoxChars.from_cp437(201, 187, 200, 188, 205, 186, 185, 204)


def window(xy1: "tuple[int, int]", xy2: "tuple[int, int]", style: WindowStyle) -> str:
    """Return the output that draws a window from corner ``xy1`` to ``xy2``.

    The title sits between the title bar ends at the start of the top edge
    and is cut to fit. A window with no room between its sides draws only
    its top-left corner.
    """
    x1, y1 = xy1
    x2, y2 = xy2
    box = SINGLE_LINE if style.wall is WallStyle.SINGLE else DOUBLE_LINE

    out = [bgcolor(style.bg), fgcolor(style.fg), gotoxy(x1, y1), box.tl]

    inner = x2 - x1 - 1
    if inner <= 0:
        return "".join(out)
    out.append(box.cl)
    inner -= 1

    title = style.title[:inner]
    out.append(title)
    inner -= len(title)

    out.append(box.cr)
    inner -= 1

    out.append(box.h * max(inner, 0))
    out.append(box.tr)

    width = max(x2 - x1 - 1, 0)
    out.append(bgcolor(style.bg))
    for y in range(y1 + 1, y2):
        out.append(gotoxy(x1, y) + box.v)
        out.append(gotoxy(x1 + 1, y) + " " * width)
        out.append(gotoxy(x2, y) + box.v)

    out.append(gotoxy(x1, y2) + box.bl + box.h * width + box.br)
    out.append(reset_bgcolor())
    out.append(fgcolor(7))
    return "".join(out)