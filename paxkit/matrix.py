"""A monochrome frame buffer for LED matrix displays with font rendering."""

from __future__ import annotations

from paxkit.fonts import DIGITAL7_18PT, FontInfo


class MatrixCanvas:
    """One bit per pixel, rows of ``width // 8`` bytes, most significant bit left.

    Pixels that fall outside the canvas are dropped.
    """

    def __init__(self, width: int = 64, height: int = 16, font: FontInfo = DIGITAL7_18PT) -> None:
        if width <= 0 or width % 8:
            raise ValueError(f"width must be a positive multiple of 8: {width}")
        if height <= 0:
            raise ValueError(f"height must be positive: {height}")
        self.width = width
        self.height = height
        self.font = font
        self._stride = width // 8
        self._rows = [bytearray(self._stride) for _ in range(height)]

    def clear(self) -> None:
        """Switch every pixel off."""
        for row in self._rows:
            row[:] = bytes(self._stride)

    def char_width(self, char: str) -> int:
        """Width in pixels of ``char`` in the current font."""
        return self.font.descriptor(char).width

    def _merge(self, row: int, col: int, bits: int) -> None:
        if 0 <= row < self.height and 0 <= col < self._stride:
            self._rows[row][col] |= bits & 0xFF

    def draw_char(self, x: int, y: int, char: str) -> None:
        """Draw ``char`` with its top-left corner at (x, y).

        When the font is shorter than the space below ``y`` and the gap is
        even, the glyph is centred vertically instead.
        """
        if x < 0 or y < 0:
            raise ValueError(f"position must not be negative: ({x}, {y})")
        info = self.font.descriptor(char)
        glyph = self.font.glyph(char)

        free = self.height - y
        if self.font.char_height < free:
            filler = free - self.font.char_height
            if filler % 2 == 0:
                y = filler // 2

        col, shift = divmod(x, 8)
        step = info.bytes_per_row
        for r in range(info.height):
            chunk = glyph[r * step : (r + 1) * step]
            for k, bits in enumerate(chunk):
                self._merge(y + r, col + k, bits >> shift)
                self._merge(y + r, col + k + 1, bits << (8 - shift))

    def draw_number(self, text: str, dot_pos: int = 0) -> int:
        """Draw ``text`` from the left edge; a dot follows character ``dot_pos`` (1-based).

        Returns the x position after the last character.
        """
        for ch in text:
            self.font.descriptor(ch)
        spacing = self.font.space_width
        pos = 0
        for i, ch in enumerate(text, start=1):
            self.draw_char(pos, 0, ch)
            pos += self.char_width(ch) + spacing
            if i == dot_pos:
                self.draw_char(pos, 0, ".")
                pos += self.char_width(".") + spacing
        return pos

    def rows(self) -> tuple[bytes, ...]:
        """The frame buffer, one bytes object per pixel row."""
        return tuple(bytes(row) for row in self._rows)