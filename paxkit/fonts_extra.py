"""Further LED matrix fonts: Arial Narrow 17pt and Gill Sans MT Condensed 18pt/16pt."""

from __future__ import annotations

from itertools import chain
from typing import Iterable, Sequence

from paxkit.fonts import FontCharInfo, FontInfo


def _pack(rows: Iterable[Sequence[int]]) -> bytes:
    return bytes(chain.from_iterable(rows))


# Arial Narrow 17pt, two bytes per row, 16 rows per glyph

_AN_MINUS = [(0x00, 0x00)] * 9 + [(0x3E, 0x00)] * 2 + [(0x00, 0x00)] * 5
_AN_0 = (
    [(0x1E, 0x00), (0x3F, 0x00), (0x33, 0x00)]
    + [(0x61, 0x80)] * 10
    + [(0x33, 0x00), (0x3F, 0x00), (0x1E, 0x00)]
)
_AN_1 = [
    (0x06, 0x00),
    (0x06, 0x00),
    (0x0E, 0x00),
    (0x1E, 0x00),
    (0x36, 0x00),
    (0x26, 0x00),
] + [(0x06, 0x00)] * 10
_AN_2 = [
    (0x1E, 0x00),
    (0x3F, 0x00),
    (0x33, 0x80),
    (0x61, 0x80),
    (0x61, 0x80),
    (0x01, 0x80),
    (0x01, 0x80),
    (0x03, 0x00),
    (0x07, 0x00),
    (0x0E, 0x00),
    (0x0C, 0x00),
    (0x18, 0x00),
    (0x30, 0x00),
    (0x20, 0x00),
    (0x7F, 0x80),
    (0x7F, 0x80),
]
_AN_3 = [
    (0x1E, 0x00),
    (0x3F, 0x00),
    (0x73, 0x80),
    (0x61, 0x80),
    (0x01, 0x80),
    (0x03, 0x80),
    (0x0F, 0x00),
    (0x0E, 0x00),
    (0x03, 0x00),
    (0x01, 0x80),
    (0x01, 0x80),
    (0x61, 0x80),
    (0x61, 0x80),
    (0x33, 0x80),
    (0x3F, 0x00),
    (0x1E, 0x00),
]
_AN_4 = (
    [(0x07, 0x00)] * 2
    + [(0x0F, 0x00)] * 2
    + [(0x1B, 0x00)] * 2
    + [(0x33, 0x00)]
    + [(0x63, 0x00)] * 2
    + [(0xC3, 0x00)]
    + [(0xFF, 0xC0)] * 2
    + [(0x03, 0x00)] * 4
)
_AN_5 = (
    [(0x3F, 0x00)] * 2
    + [(0x30, 0x00)] * 2
    + [(0x60, 0x00), (0x6E, 0x00), (0x7F, 0x00), (0x73, 0x80)]
    + [(0x01, 0x80)] * 3
    + [(0x61, 0x80)] * 2
    + [(0x33, 0x00), (0x3F, 0x00), (0x1E, 0x00)]
)
_AN_6 = (
    [
        (0x0E, 0x00),
        (0x1F, 0x00),
        (0x33, 0x80),
        (0x21, 0x80),
        (0x60, 0x00),
        (0x6E, 0x00),
        (0x7F, 0x00),
        (0x73, 0x80),
    ]
    + [(0x61, 0x80)] * 5
    + [(0x33, 0x00), (0x3F, 0x00), (0x1E, 0x00)]
)
_AN_7 = (
    [(0x7F, 0x80)] * 2
    + [(0x01, 0x00)]
    + [(0x03, 0x00)] * 2
    + [(0x06, 0x00)] * 2
    + [(0x04, 0x00)]
    + [(0x0C, 0x00)] * 4
    + [(0x18, 0x00)] * 4
)
_AN_8 = (
    [(0x1E, 0x00), (0x3F, 0x00), (0x73, 0x80)]
    + [(0x61, 0x80)] * 2
    + [(0x73, 0x80)]
    + [(0x3F, 0x00)] * 2
    + [(0x33, 0x00)]
    + [(0x61, 0x80)] * 4
    + [(0x73, 0x80), (0x3F, 0x00), (0x1E, 0x00)]
)
_AN_9 = (
    [(0x1E, 0x00), (0x3F, 0x00), (0x33, 0x00)]
    + [(0x61, 0x80)] * 5
    + [
        (0x73, 0x80),
        (0x3F, 0x80),
        (0x1D, 0x80),
        (0x01, 0x80),
        (0x61, 0x00),
        (0x73, 0x00),
        (0x3E, 0x00),
        (0x1C, 0x00),
    ]
)

# The descriptor offsets are kept exactly as the font table defines them.
ARIAL_NARROW_17PT = FontInfo(
    char_height=16,
    start_char="-",
    end_char="9",
    space_width=2,
    descriptors=(
        FontCharInfo(10, 16, 0),  # -
        FontCharInfo(0, 0, 0),  # .
        FontCharInfo(0, 0, 0),  # /
        FontCharInfo(10, 16, 32),  # 0
        FontCharInfo(10, 16, 64),  # 1
        FontCharInfo(10, 16, 80),  # 2
        FontCharInfo(10, 16, 112),  # 3
        FontCharInfo(10, 16, 144),  # 4
        FontCharInfo(10, 16, 176),  # 5
        FontCharInfo(10, 16, 208),  # 6
        FontCharInfo(10, 16, 240),  # 7
        FontCharInfo(10, 16, 272),  # 8
        FontCharInfo(10, 16, 304),  # 9
    ),
    bitmaps=_pack(
        chain(
            _AN_MINUS, _AN_0, _AN_1, _AN_2, _AN_3, _AN_4,
            _AN_5, _AN_6, _AN_7, _AN_8, _AN_9,
        )
    ),
)


# Gill Sans MT Condensed 18pt, one byte per row, 16 rows per glyph

_G18_MINUS = [(0x00,)] * 10 + [(0x7C,)] * 2 + [(0x00,)] * 4
_G18_0 = [(0x3C,), (0x7E,), (0x7E,)] + [(0xE7,)] * 10 + [(0x7E,), (0x7E,), (0x3C,)]
_G18_1 = [(0x38,)] * 16
_G18_2 = (
    [(0xFC,), (0xFE,), (0xCF,)]
    + [(0x07,)] * 4
    + [(0x06,), (0x0E,), (0x0E,), (0x1C,), (0x1C,), (0x38,), (0x70,), (0x7F,), (0xFF,)]
)
_G18_3 = (
    [(0xF8,), (0xFC,), (0x1E,), (0x0E,), (0x0E,), (0x1C,), (0x38,), (0x38,), (0x1C,)]
    + [(0x0E,)] * 4
    + [(0xDE,), (0xFC,), (0xF8,)]
)
_G18_4 = (
    [(0x0E,), (0x0E,), (0x1E,), (0x1E,)]
    + [(0x3E,)] * 3
    + [(0x6E,), (0x6E,), (0xCE,), (0xCE,), (0xFF,)]
    + [(0x0E,)] * 4
)
_G18_5 = (
    [(0x7E,), (0x7E,)]
    + [(0x70,)] * 4
    + [(0x78,), (0x7C,), (0x1E,)]
    + [(0x0E,)] * 4
    + [(0x1C,), (0xFC,), (0xF8,)]
)
_G18_6 = (
    [(0x0E,), (0x1C,), (0x1C,), (0x38,), (0x38,), (0x70,), (0x7C,), (0xFE,), (0xF7,)]
    + [(0xE7,)] * 4
    + [(0xFF,), (0x7E,), (0x3C,)]
)
_G18_7 = (
    [(0xFF,), (0xFF,)]
    + [(0x0E,)] * 4
    + [(0x1C,)] * 4
    + [(0x38,)] * 3
    + [(0x30,), (0x70,), (0x70,)]
)
_G18_8 = (
    [(0x3C,), (0x7E,)]
    + [(0xE7,)] * 4
    + [(0x7E,)] * 3
    + [(0xE7,)] * 4
    + [(0xFF,), (0x7E,), (0x3C,)]
)
_G18_9 = (
    [(0x3C,), (0x7E,), (0xFF,)]
    + [(0xE7,)] * 4
    + [(0xEF,), (0x7F,), (0x3E,), (0x0E,), (0x1C,), (0x1C,), (0x38,), (0x38,), (0x70,)]
)

GILL_SANS_MT_CONDENSED_18PT = FontInfo(
    char_height=16,
    start_char="-",
    end_char="9",
    space_width=2,
    descriptors=(
        FontCharInfo(8, 16, 0),  # -
        FontCharInfo(0, 0, 0),  # .
        FontCharInfo(0, 0, 0),  # /
        FontCharInfo(8, 16, 16),  # 0
        FontCharInfo(8, 16, 32),  # 1
        FontCharInfo(8, 16, 48),  # 2
        FontCharInfo(8, 16, 64),  # 3
        FontCharInfo(8, 16, 80),  # 4
        FontCharInfo(8, 16, 96),  # 5
        FontCharInfo(8, 16, 112),  # 6
        FontCharInfo(8, 16, 128),  # 7
        FontCharInfo(8, 16, 144),  # 8
        FontCharInfo(8, 16, 160),  # 9
    ),
    bitmaps=_pack(
        chain(
            _G18_MINUS, _G18_0, _G18_1, _G18_2, _G18_3, _G18_4,
            _G18_5, _G18_6, _G18_7, _G18_8, _G18_9,
        )
    ),
)


# Gill Sans MT Condensed 16pt, one byte per row, 14 rows per glyph

_G16_MINUS = [(0x00,)] * 8 + [(0x3E,)] * 2 + [(0x00,)] * 4
_G16_0 = [(0x38,), (0x7C,)] + [(0xEE,)] * 10 + [(0x7C,), (0x38,)]
_G16_1 = [(0x38,)] * 14
_G16_2 = (
    [(0xF8,), (0xFC,), (0x1E,)]
    + [(0x0E,)] * 3
    + [(0x0C,), (0x1C,), (0x1C,), (0x38,), (0x38,), (0x70,), (0x7E,), (0xFE,)]
)
_G16_3 = (
    [(0xF0,), (0xF8,)]
    + [(0x1C,)] * 4
    + [(0x38,), (0x38,)]
    + [(0x1C,)] * 4
    + [(0xF8,), (0xF0,)]
)
_G16_4 = (
    [(0x1C,), (0x1C,), (0x3C,), (0x3C,)]
    + [(0x7C,)] * 3
    + [(0xDC,), (0xDC,), (0xFE,)]
    + [(0x1C,)] * 4
)
_G16_5 = (
    [(0x7E,), (0x7E,)]
    + [(0x70,)] * 4
    + [(0x7C,), (0x7C,), (0x1E,), (0x0E,), (0x0E,), (0x1E,), (0xFC,), (0xF8,)]
)
_G16_6 = (
    [(0x1C,), (0x38,), (0x38,), (0x70,), (0x70,), (0x7C,), (0xFC,)]
    + [(0xEE,)] * 5
    + [(0x7C,), (0x78,)]
)
_G16_7 = [(0xFE,), (0xFE,)] + [(0x1C,)] * 5 + [(0x38,)] * 4 + [(0x70,)] * 3
_G16_8 = (
    [(0x7C,), (0x7C,)]
    + [(0xEE,)] * 4
    + [(0x7C,), (0x7C,)]
    + [(0xEE,)] * 4
    + [(0x7C,), (0x7C,)]
)
_G16_9 = (
    [(0x3C,), (0x7C,)]
    + [(0xEE,)] * 5
    + [(0x7E,), (0x7C,), (0x1C,), (0x1C,), (0x38,), (0x38,), (0x70,)]
)

GILL_SANS_MT_CONDENSED_16PT = FontInfo(
    char_height=14,
    start_char="-",
    end_char="9",
    space_width=2,
    descriptors=(
        FontCharInfo(7, 14, 0),  # -
        FontCharInfo(0, 0, 0),  # .
        FontCharInfo(0, 0, 0),  # /
        FontCharInfo(7, 14, 14),  # 0
        FontCharInfo(7, 14, 28),  # 1
        FontCharInfo(7, 14, 42),  # 2
        FontCharInfo(7, 14, 56),  # 3
        FontCharInfo(7, 14, 70),  # 4
        FontCharInfo(7, 14, 84),  # 5
        FontCharInfo(7, 14, 98),  # 6
        FontCharInfo(7, 14, 112),  # 7
        FontCharInfo(7, 14, 126),  # 8
        FontCharInfo(7, 14, 140),  # 9
    ),
    bitmaps=_pack(
        chain(
            _G16_MINUS, _G16_0, _G16_1, _G16_2, _G16_3, _G16_4,
            _G16_5, _G16_6, _G16_7, _G16_8, _G16_9,
        )
    ),
)