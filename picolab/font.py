"""8x8 column-major glyphs for the SSD1306 display."""

from __future__ import annotations

_BASIC_GLYPHS: tuple[bytes, ...] = (
    bytes((0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00)),  # blank
    bytes((0x78, 0x14, 0x12, 0x11, 0x12, 0x14, 0x78, 0x00)),  # A
    bytes((0x7F, 0x49, 0x49, 0x49, 0x49, 0x49, 0x7F, 0x00)),  # B
    bytes((0x7E, 0x41, 0x41, 0x41, 0x41, 0x41, 0x41, 0x00)),  # C
    bytes((0x7F, 0x41, 0x41, 0x41, 0x41, 0x41, 0x7E, 0x00)),  # D
    bytes((0x7F, 0x49, 0x49, 0x49, 0x49, 0x49, 0x49, 0x00)),  # E
    bytes((0x7F, 0x09, 0x09, 0x09, 0x09, 0x01, 0x01, 0x00)),  # F
    bytes((0x7F, 0x41, 0x41, 0x41, 0x51, 0x51, 0x73, 0x00)),  # G
    bytes((0x7F, 0x08, 0x08, 0x08, 0x08, 0x08, 0x7F, 0x00)),  # H
    bytes((0x00, 0x00, 0x00, 0x7F, 0x00, 0x00, 0x00, 0x00)),  # I
    bytes((0x21, 0x41, 0x41, 0x3F, 0x01, 0x01, 0x01, 0x00)),  # J
    bytes((0x00, 0x7F, 0x08, 0x08, 0x14, 0x22, 0x41, 0x00)),  # K
    bytes((0x7F, 0x40, 0x40, 0x40, 0x40, 0x40, 0x40, 0x00)),  # L
    bytes((0x7F, 0x02, 0x04, 0x08, 0x04, 0x02, 0x7F, 0x00)),  # M
    bytes((0x7F, 0x02, 0x04, 0x08, 0x10, 0x20, 0x7F, 0x00)),  # N
    bytes((0x3E, 0x41, 0x41, 0x41, 0x41, 0x41, 0x3E, 0x00)),  # O
    bytes((0x7F, 0x11, 0x11, 0x11, 0x11, 0x11, 0x0E, 0x00)),  # P
    bytes((0x3E, 0x41, 0x41, 0x49, 0x51, 0x61, 0x7E, 0x00)),  # Q
    bytes((0x7F, 0x11, 0x11, 0x11, 0x31, 0x51, 0x0E, 0x00)),  # R
    bytes((0x46, 0x49, 0x49, 0x49, 0x49, 0x30, 0x00, 0x00)),  # S
    bytes((0x01, 0x01, 0x01, 0x7F, 0x01, 0x01, 0x01, 0x00)),  # T
    bytes((0x3F, 0x40, 0x40, 0x40, 0x40, 0x40, 0x3F, 0x00)),  # U
    bytes((0x0F, 0x10, 0x20, 0x40, 0x20, 0x10, 0x0F, 0x00)),  # V
    bytes((0x7F, 0x20, 0x10, 0x08, 0x10, 0x20, 0x7F, 0x00)),  # W
    bytes((0x00, 0x41, 0x22, 0x14, 0x14, 0x22, 0x41, 0x00)),  # X
    bytes((0x01, 0x02, 0x04, 0x78, 0x04, 0x02, 0x01, 0x00)),  # Y
    bytes((0x41, 0x61, 0x59, 0x45, 0x43, 0x41, 0x00, 0x00)),  # Z
    bytes((0x3E, 0x41, 0x41, 0x49, 0x41, 0x41, 0x3E, 0x00)),  # 0
    bytes((0x00, 0x00, 0x42, 0x7F, 0x40, 0x00, 0x00, 0x00)),  # 1
    bytes((0x30, 0x49, 0x49, 0x49, 0x49, 0x46, 0x00, 0x00)),  # 2
    bytes((0x49, 0x49, 0x49, 0x49, 0x49, 0x49, 0x36, 0x00)),  # 3
    bytes((0x3F, 0x20, 0x20, 0x78, 0x20, 0x20, 0x00, 0x00)),  # 4
    bytes((0x4F, 0x49, 0x49, 0x49, 0x49, 0x30, 0x00, 0x00)),  # 5
    bytes((0x3F, 0x48, 0x48, 0x48, 0x48, 0x48, 0x30, 0x00)),  # 6
    bytes((0x01, 0x01, 0x01, 0x61, 0x31, 0x0D, 0x03, 0x00)),  # 7
    bytes((0x36, 0x49, 0x49, 0x49, 0x49, 0x49, 0x36, 0x00)),  # 8
    bytes((0x06, 0x09, 0x09, 0x09, 0x09, 0x09, 0x7F, 0x00)),  # 9
)

_SYMBOL_GLYPHS: tuple[bytes, ...] = (
    bytes((0x08, 0x08, 0x3E, 0x08, 0x08, 0x00, 0x00, 0x00)),  # +
    bytes((0x08, 0x08, 0x08, 0x08, 0x08, 0x00, 0x00, 0x00)),  # -
    bytes((0x14, 0x7F, 0x14, 0x14, 0x7F, 0x14, 0x00, 0x00)),  # #
    bytes((0x00, 0x36, 0x36, 0x00, 0x00, 0x00, 0x00, 0x00)),  # :
    bytes((0x20, 0x10, 0x08, 0x04, 0x02, 0x00, 0x00, 0x00)),  # /
    bytes((0x00, 0x00, 0x00, 0x00, 0x40, 0x00, 0x00, 0x00)),  # .
    bytes((0x00, 0x00, 0x08, 0x08, 0x14, 0x14, 0x22, 0x00)),  # <
    bytes((0x00, 0x22, 0x14, 0x14, 0x08, 0x08, 0x00, 0x00)),  # >
)

_EXTENDED_GLYPHS = _BASIC_GLYPHS + _SYMBOL_GLYPHS

# Symbols available only in the extended font, in table order after the digits.
_SYMBOLS = "+-#:/.<>"
_FIRST_SYMBOL_INDEX = 37


def glyph_index(character: str, extended: bool = True) -> int:
    """Return the table index of ``character``; 0 (blank) when it has no glyph.

    Only upper-case letters, digits and, in the extended font, the symbols
    ``+-#:/.<>`` have glyphs.
    """
    if len(character) != 1:
        raise ValueError(f"expected a single character, got {character!r}")
    if "A" <= character <= "Z":
        return ord(character) - ord("A") + 1
    if "0" <= character <= "9":
        return ord(character) - ord("0") + 27
    if extended:
        position = _SYMBOLS.find(character)
        if position >= 0:
            return _FIRST_SYMBOL_INDEX + position
    return 0


def glyph(character: str, extended: bool = True) -> bytes:
    """Return the eight column bytes drawn for ``character``."""
    table = _EXTENDED_GLYPHS if extended else _BASIC_GLYPHS
    return table[glyph_index(character, extended)]