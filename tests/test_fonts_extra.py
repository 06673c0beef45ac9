import pytest

from paxkit.fonts import FontInfo
from paxkit.fonts_extra import (
    ARIAL_NARROW_17PT,
    GILL_SANS_MT_CONDENSED_16PT,
    GILL_SANS_MT_CONDENSED_18PT,
)

ALL_FONTS = [ARIAL_NARROW_17PT, GILL_SANS_MT_CONDENSED_18PT, GILL_SANS_MT_CONDENSED_16PT]
DIGITS = "0123456789"


def test_bitmap_sizes_match_table():
    assert sum(len(ARIAL_NARROW_17PT.glyph(c)) for c in DIGITS + "-") == 11 * 16 * 2
    assert sum(len(GILL_SANS_MT_CONDENSED_18PT.glyph(c)) for c in DIGITS + "-") == 11 * 16
    assert sum(len(GILL_SANS_MT_CONDENSED_16PT.glyph(c)) for c in DIGITS + "-") == 11 * 14
    assert len(ARIAL_NARROW_17PT.bitmaps) == 11 * 16 * 2
    assert len(GILL_SANS_MT_CONDENSED_18PT.bitmaps) == 11 * 16
    assert len(GILL_SANS_MT_CONDENSED_16PT.bitmaps) == 11 * 14


def test_font_metrics():
    assert ARIAL_NARROW_17PT.descriptor("0").height == 16
    assert GILL_SANS_MT_CONDENSED_18PT.descriptor("0").height == 16
    assert GILL_SANS_MT_CONDENSED_16PT.descriptor("0").height == 14
    assert ARIAL_NARROW_17PT.char_height == 16
    assert GILL_SANS_MT_CONDENSED_18PT.char_height == 16
    assert GILL_SANS_MT_CONDENSED_16PT.char_height == 14
    assert all(f.space_width == 2 for f in ALL_FONTS)


@pytest.mark.parametrize("font", ALL_FONTS)
@pytest.mark.parametrize("char", DIGITS + "-")
def test_glyph_length_matches_descriptor(font, char):
    info = FontInfo.descriptor(font, char)
    glyph = FontInfo.glyph(font, char)
    assert len(glyph) == info.height * info.bytes_per_row
    assert info.height == font.char_height


@pytest.mark.parametrize("font", ALL_FONTS)
def test_dot_and_slash_are_empty(font):
    assert FontInfo.glyph(font, ".") == b""
    assert FontInfo.glyph(font, "/") == b""
    assert FontInfo.descriptor(font, ".").width == 0


def test_gill18_one_is_a_bar():
    assert GILL_SANS_MT_CONDENSED_18PT.glyph("1") == bytes([0x38]) * 16


def test_gill16_one_is_a_bar():
    assert GILL_SANS_MT_CONDENSED_16PT.glyph("1") == bytes([0x38]) * 14


def test_gill18_minus_rows():
    glyph = GILL_SANS_MT_CONDENSED_18PT.glyph("-")
    assert glyph[10] == 0x7C and glyph[11] == 0x7C
    assert sum(glyph) == 2 * 0x7C


def test_arial_uses_two_bytes_per_row():
    info = ARIAL_NARROW_17PT.descriptor("4")
    assert info.width == 10
    assert info.bytes_per_row == 2


def test_arial_descriptor_offsets_kept():
    assert ARIAL_NARROW_17PT.descriptor("0").offset == 32
    assert ARIAL_NARROW_17PT.descriptor("2").offset == 80
    assert ARIAL_NARROW_17PT.descriptor("9").offset == 304


def test_arial_zero_glyph_from_bitmap():
    glyph = ARIAL_NARROW_17PT.glyph("0")
    assert glyph[:2] == bytes([0x1E, 0x00])
    assert glyph[-2:] == bytes([0x1E, 0x00])


@pytest.mark.parametrize("font", ALL_FONTS)
def test_digits_are_distinct(font):
    glyphs = {FontInfo.glyph(font, c) for c in DIGITS}
    assert len(glyphs) > 1


@pytest.mark.parametrize("font", ALL_FONTS)
@pytest.mark.parametrize("char", [":", "A", " ", ","])
def test_missing_char_raises(font, char):
    with pytest.raises(ValueError):
        FontInfo.descriptor(font, char)