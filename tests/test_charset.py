import pytest

from astroduel.charset import glyph


def test_every_printable_glyph_has_five_columns():
    assert all(len(glyph(code)) == 5 for code in range(0x20, 0x7F))


def test_all_glyphs_fit_seven_rows():
    assert all(
        byte < 0x80 for code in range(0x20, 0x7F) for byte in glyph(code)
    )


def test_space_is_blank():
    assert glyph(" ") == bytes(5)


def test_known_glyphs():
    assert glyph("A") == bytes((0x7C, 0x0A, 0x09, 0x0A, 0x7C))
    assert glyph("0") == bytes((0x3E, 0x51, 0x49, 0x45, 0x3E))
    assert glyph("~") == bytes((0x08, 0x04, 0x08, 0x10, 0x08))


def test_code_and_character_agree():
    for code in range(0x20, 0x7F):
        assert glyph(code) == glyph(chr(code))


@pytest.mark.parametrize("ch", ["\n", "\x7f", "\u00e9", 0x1F, 0x7F, 300])
def test_unsupported_drawn_as_space(ch):
    assert glyph(ch) == glyph(" ")


def test_multiple_characters_rejected():
    with pytest.raises(ValueError):
        glyph("AB")
    with pytest.raises(ValueError):
        glyph("")