import pytest

from picolab.font import glyph, glyph_index


def test_letters_start_after_blank():
    assert glyph_index("A", False) == 1
    assert glyph_index("Z", False) == 26


def test_digits_follow_letters():
    assert glyph_index("0") == 27
    assert glyph_index("9") == 36


def test_extended_symbols_indices():
    assert glyph_index("+") == 37
    assert glyph_index(">") == 44
    indices = [glyph_index(c) for c in "+-#:/.<>"]
    assert indices == list(range(37, 45))


def test_symbols_are_blank_in_basic_font():
    for c in "+-#:/.<>":
        assert glyph_index(c, False) == 0
        assert glyph(c, False) == bytes(8)


def test_lowercase_has_no_glyph():
    assert glyph_index("a") == 0
    assert glyph("q") == bytes(8)


def test_glyph_a_bytes():
    assert glyph("A") == bytes((0x78, 0x14, 0x12, 0x11, 0x12, 0x14, 0x78, 0x00))


def test_basic_and_extended_share_alphanumerics():
    for c in "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789":
        assert glyph(c, True) == glyph(c, False)
        assert len(glyph(c)) == 8
        assert glyph(c) != bytes(8)


def test_unknown_character_is_blank():
    assert glyph("?") == bytes(8)
    assert glyph(" ") == bytes(8)


def test_multi_character_rejected():
    with pytest.raises(ValueError):
        glyph_index("AB")
    with pytest.raises(ValueError):
        glyph("")