"""Frame buffer for the 128x32 monochrome LCD and the scrolling status display."""

from typing import Iterator

from .charset import glyph

LCD_WIDTH = 128
LCD_PAGES = 4
LCD_BUFFER_SIZE = LCD_WIDTH * LCD_PAGES

_GLYPH_WIDTH = 5
_HUD_LIMIT = 31
_SCROLL_TEXT = "x" * 35


def lcd_index(x: int, page: int) -> int:
    """Offset in the frame buffer of column ``x`` on ``page``."""
    return page * LCD_WIDTH + x


def wrap(v: int, period: int) -> int:
    """Wrap ``v`` into ``[0, period)``."""
    if period <= 0:
        raise ValueError(f"period must be positive, got {period}")
    return v % period


class LcdBuffer:
    """512 bytes: four pages of 128 columns, each byte eight vertical pixels."""

    def __init__(self) -> None:
        self.data = bytearray(LCD_BUFFER_SIZE)

    def __len__(self) -> int:
        return len(self.data)

    def __bytes__(self) -> bytes:
        return bytes(self.data)

    def write_string(self, x: int, page: int, text: str) -> None:
        """Draw ``text`` starting at column ``x`` on ``page``.

        Each character takes five glyph columns and one blank column.
        Columns outside the display are clipped.
        """
        if not 0 <= page < LCD_PAGES:
            raise ValueError(f"page must be in 0..{LCD_PAGES - 1}, got {page}")
        for ch in text:
            for column in (*glyph(ch), 0x00):
                if 0 <= x < LCD_WIDTH:
                    self.data[lcd_index(x, page)] = column
                x += 1

    def clear(self) -> None:
        """Blank the whole display."""
        self.data[:] = bytes(LCD_BUFFER_SIZE)

    def pages(self) -> list[bytes]:
        """The four pages, 128 bytes each."""
        return [
            bytes(self.data[lcd_index(0, page):lcd_index(0, page + 1)])
            for page in range(LCD_PAGES)
        ]

    def push_sequence(self) -> Iterator[tuple[str, bytes]]:
        """The writes that send the buffer to the display controller.

        For each page, a ``"command"`` chunk (column 0, page address) and
        then a ``"data"`` chunk with the page's 128 bytes.
        """
        for page, content in enumerate(self.pages()):
            yield "command", bytes((0x00, 0x10, 0xB0 | page))
            yield "data", content


class LcdScroller:
    """Status display: scrolling bands on the outer pages, scores between."""

    def __init__(self) -> None:
        self.offset = 0

    def update(self, buffer: LcdBuffer, p1, p2) -> list[tuple[str, bytes]]:
        """Advance the scroll by one column, redraw, and return the push sequence.

        ``p1`` and ``p2`` need ``health`` and ``points`` attributes.
        """
        text_width = len(_SCROLL_TEXT) * (_GLYPH_WIDTH + 1)
        self.offset = wrap(self.offset + 1, text_width)
        x1 = -self.offset

        buffer.clear()
        for page in (0, 3):
            buffer.write_string(x1, page, _SCROLL_TEXT)
            buffer.write_string(x1 + text_width, page, _SCROLL_TEXT)

        for page, label, player in ((1, "P1", p1), (2, "P2", p2)):
            hud = f"{label} <3:{player.health} Score:{player.points}"
            buffer.write_string(1, page, hud[:_HUD_LIMIT])

        return list(buffer.push_sequence())