"""Bitmap fonts for LED matrix displays, covering the characters '-' to '9'."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import chain
from typing import Iterable, Sequence


@dataclass(frozen=True)
class FontCharInfo:
    """Size of one glyph and its byte offset into the font bitmap."""

    width: int
    height: int
    offset: int

    @property
    def bytes_per_row(self) -> int:
        """Number of bitmap bytes one row of this glyph takes."""
        return 2 if self.width > 8 else 1


@dataclass(frozen=True)
class FontInfo:
    """A font: glyph descriptors for ``start_char``..``end_char`` and their bitmaps."""

    char_height: int
    start_char: str
    end_char: str
    space_width: int
    descriptors: tuple[FontCharInfo, ...]
    bitmaps: bytes

    def __post_init__(self) -> None:
        expected = ord(self.end_char) - ord(self.start_char) + 1
        if len(self.descriptors) != expected:
            raise ValueError(
                f"font needs {expected} descriptors, got {len(self.descriptors)}"
            )

    def _index(self, char: str) -> int:
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        if not self.start_char <= char <= self.end_char:
            raise ValueError(f"character {char!r} is not in this font")
        return ord(char) - ord(self.start_char)

    def descriptor(self, char: str) -> FontCharInfo:
        """Descriptor (width, height, offset) of ``char``."""
        return self.descriptors[self._index(char)]

    def glyph(self, char: str) -> bytes:
        """Bitmap bytes of ``char``, row by row; empty for glyphs of width 0."""
        info = self.descriptor(char)
        if info.width == 0:
            return b""
        size = info.height * info.bytes_per_row
        return self.bitmaps[info.offset : info.offset + size]


def _pack(rows: Iterable[Sequence[int]]) -> bytes:
    return bytes(chain.from_iterable(rows))


_D7_MINUS = [(0x00,)] * 7 + [(0xFE,)] * 2 + [(0x00,)] * 7
_D7_DOT = [(0x00,)] * 14 + [(0xE0,)] * 2
_D7_0 = (
    [(0x3F, 0x80), (0x7F, 0xC0)]
    + [(0xE0, 0xE0)] * 5
    + [(0xC0, 0x60)] * 2
    + [(0xE0, 0xE0)] * 5
    + [(0x7F, 0xC0), (0x3F, 0x80)]
)
_D7_1 = [(0x60,)] + [(0xE0,)] * 6 + [(0x60,)] * 2 + [(0xE0,)] * 6 + [(0x60,)]
_D7_2 = (
    [(0xFF, 0x80), (0x7F, 0xC0)]
    + [(0x00, 0xE0)] * 5
    + [(0x7F, 0xE0), (0xFF, 0xC0)]
    + [(0xE0, 0x00)] * 5
    + [(0x7F, 0xC0), (0x3F, 0xE0)]
)
_D7_3 = (
    [(0xFF, 0x00), (0xFF, 0xC0)]
    + [(0x01, 0xC0)] * 5
    + [(0x7F, 0xC0)] * 2
    + [(0x01, 0xC0)] * 5
    + [(0xFF, 0xC0), (0xFF, 0x00)]
)
_D7_4 = (
    [(0xC0, 0x60)]
    + [(0xE0, 0xE0)] * 6
    + [(0xFF, 0xE0), (0x7F, 0xE0)]
    + [(0x00, 0xE0)] * 6
    + [(0x00, 0x60)]
)
_D7_5 = (
    [(0x3F, 0xC0), (0x7F, 0x80)]
    + [(0xE0, 0x00)] * 5
    + [(0xFF, 0x80), (0x7F, 0xE0)]
    + [(0x00, 0xE0)] * 5
    + [(0x7F, 0xC0), (0xFF, 0x80)]
)
_D7_6 = (
    [(0x3F, 0xC0), (0x7F, 0x80)]
    + [(0xE0, 0x00)] * 5
    + [(0xFF, 0x80), (0xFF, 0xE0)]
    + [(0xE0, 0xE0)] * 5
    + [(0xFF, 0xE0), (0x7F, 0x80)]
)
_D7_7 = (
    [(0x3F, 0x80), (0x7F, 0xE0)]
    + [(0xE0, 0xE0)] * 5
    + [(0xC0, 0x60), (0x00, 0x60)]
    + [(0x00, 0xE0)] * 6
    + [(0x00, 0x60)]
)
_D7_8 = (
    [(0x3F, 0x80), (0x7F, 0xC0)]
    + [(0xE0, 0xE0)] * 5
    + [(0xFF, 0xE0)] * 2
    + [(0xE0, 0xE0)] * 5
    + [(0x7F, 0xC0), (0x3F, 0x80)]
)
_D7_9 = (
    [(0x3F, 0xC0), (0x7F, 0xE0)]
    + [(0xE0, 0xE0)] * 5
    + [(0xFF, 0xE0), (0x7F, 0xE0)]
    + [(0x00, 0xE0)] * 5
    + [(0x7F, 0xC0), (0xFF, 0x80)]
)

DIGITAL7_18PT = FontInfo(
    char_height=16,
    start_char="-",
    end_char="9",
    space_width=2,
    descriptors=(
        FontCharInfo(7, 16, 0),  # -
        FontCharInfo(3, 16, 16),  # .
        FontCharInfo(0, 0, 0),  # /
        FontCharInfo(11, 16, 32),  # 0
        FontCharInfo(3, 16, 64),  # 1
        FontCharInfo(11, 16, 80),  # 2
        FontCharInfo(10, 16, 112),  # 3
        FontCharInfo(11, 16, 144),  # 4
        FontCharInfo(11, 16, 176),  # 5
        FontCharInfo(11, 16, 208),  # 6
        FontCharInfo(11, 16, 240),  # 7
        FontCharInfo(11, 16, 272),  # 8
        FontCharInfo(11, 16, 304),  # 9
    ),
    bitmaps=_pack(
        chain(
            _D7_MINUS, _D7_DOT, _D7_0, _D7_1, _D7_2, _D7_3,
            _D7_4, _D7_5, _D7_6, _D7_7, _D7_8, _D7_9,
        )
    ),
)