"""Tests for the width correspondence table."""

import pytest
from hfwidth.table import FULLWIDTH_MAP, HALFWIDTH_MAP, WIDTH_TABLE, WidthPair

UNMAPPED_FORMS = {
    0xFF00,
    0xFFBF, 0xFFC0, 0xFFC1,
    0xFFC8, 0xFFC9,
    0xFFD0, 0xFFD1,
    0xFFD8, 0xFFD9,
    0xFFDD, 0xFFDE, 0xFFDF,
    0xFFE7,
    0xFFEF,
}  # fmt: skip


def _in_forms_block(cp: int) -> bool:
    return 0xFF00 <= cp <= 0xFFEF


def test_table_size():
    """Test the number of entries per group adds up."""
    # ASCII, white parens, currency, katakana, hangul, symbols
    assert len(WIDTH_TABLE) == 94 + 2 + 7 + 63 + 52 + 7


def test_views_are_injective():
    """Test that no code point appears twice on either side."""
    assert len(HALFWIDTH_MAP) == len(WIDTH_TABLE)
    assert len(FULLWIDTH_MAP) == len(WIDTH_TABLE)


def test_view_domains_are_disjoint():
    """Test that a character is never in both lookup directions."""
    assert set(HALFWIDTH_MAP).isdisjoint(FULLWIDTH_MAP)


def test_constants_are_scalar_values():
    """Test that every constant is a valid non-surrogate code point."""
    for pair in WIDTH_TABLE:
        for cp in pair:
            assert 0 <= cp <= 0x10FFFF
            assert not 0xD800 <= cp <= 0xDFFF
            assert len(chr(cp)) == 1


def test_exactly_one_side_in_forms_block():
    """Test that each entry pairs a Forms character with a natural one."""
    for pair in WIDTH_TABLE:
        assert _in_forms_block(pair.fullwidth) != _in_forms_block(pair.halfwidth), pair


def test_forms_block_coverage():
    """Test that every Forms code point is mapped or a documented gap."""
    mapped = {cp for pair in WIDTH_TABLE for cp in pair if _in_forms_block(cp)}

    for cp in range(0xFF00, 0xFFF0):
        assert (cp in mapped) != (cp in UNMAPPED_FORMS), hex(cp)


def test_views_are_read_only():
    """Test that the lookup views cannot be mutated."""
    with pytest.raises(TypeError):
        HALFWIDTH_MAP[0x41] = 0x61
    with pytest.raises(TypeError):
        FULLWIDTH_MAP[0x41] = 0x61


def test_views_mirror_table():
    """Test that both views are generated from the same entries."""
    for pair in WIDTH_TABLE:
        assert isinstance(pair, WidthPair)
        assert HALFWIDTH_MAP[pair.fullwidth] == pair.halfwidth
        assert FULLWIDTH_MAP[pair.halfwidth] == pair.fullwidth
