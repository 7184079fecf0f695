"""
Width correspondence table for the Unicode Halfwidth and Fullwidth Forms block.

Every entry pairs a fullwidth character with its halfwidth sibling. Exactly one
side of each pair lies in the Forms block (U+FF00..U+FFEF); the other side is
the "natural" character. The two lookup directions are generated from the one
canonical sequence so they can never drift apart.
"""

from types import MappingProxyType
from typing import Iterator, List, Mapping, NamedTuple, Tuple


class WidthPair(NamedTuple):
    """A fullwidth/halfwidth code point pair."""

    fullwidth: int
    halfwidth: int


def _offset_range(full_start: int, full_end: int, half_start: int) -> Iterator[WidthPair]:
    for offset in range(full_end - full_start + 1):
        yield WidthPair(full_start + offset, half_start + offset)


def _halfwidth_run(half_start: int, fullwidth_points: Tuple[int, ...]) -> Iterator[WidthPair]:
    for offset, full in enumerate(fullwidth_points):
        yield WidthPair(full, half_start + offset)


# fmt: off
# Natural fullwidth targets of U+FF61..U+FF9F, in Forms block order
_KATAKANA_FULLWIDTH = (
    0x3002, 0x300C, 0x300D, 0x3001, 0x30FB, 0x30F2, 0x30A1, 0x30A3,
    0x30A5, 0x30A7, 0x30A9, 0x30E3, 0x30E5, 0x30E7, 0x30C3, 0x30FC,
    0x30A2, 0x30A4, 0x30A6, 0x30A8, 0x30AA, 0x30AB, 0x30AD, 0x30AF,
    0x30B1, 0x30B3, 0x30B5, 0x30B7, 0x30B9, 0x30BB, 0x30BD, 0x30BF,
    0x30C1, 0x30C4, 0x30C6, 0x30C8, 0x30CA, 0x30CB, 0x30CC, 0x30CD,
    0x30CE, 0x30CF, 0x30D2, 0x30D5, 0x30D8, 0x30DB, 0x30DE, 0x30DF,
    0x30E0, 0x30E1, 0x30E2, 0x30E4, 0x30E6, 0x30E8, 0x30E9, 0x30EA,
    0x30EB, 0x30EC, 0x30ED, 0x30EF, 0x30F3, 0x3099, 0x309A,
)
# fmt: on


def _build_table() -> Tuple[WidthPair, ...]:
    pairs: List[WidthPair] = []

    # Fullwidth ASCII, white parens and currency signs
    pairs.extend(_offset_range(0xFF01, 0xFF5E, 0x0021))
    pairs.extend(_offset_range(0xFF5F, 0xFF60, 0x2985))
    pairs.extend(_offset_range(0xFFE0, 0xFFE1, 0x00A2))
    pairs.extend(
        [
            WidthPair(0xFFE2, 0x00AC),
            WidthPair(0xFFE3, 0x00AF),
            WidthPair(0xFFE4, 0x00A6),
            WidthPair(0xFFE5, 0x00A5),
            WidthPair(0xFFE6, 0x20A9),
        ]
    )

    # Halfwidth CJK punctuation and katakana
    pairs.extend(_halfwidth_run(0xFF61, _KATAKANA_FULLWIDTH))

    # Halfwidth Hangul jamo. The filler sits apart from the compatibility jamo
    # and the vowel rows skip 0xFFBF-0xFFC1, 0xFFC8-9, 0xFFD0-1 and 0xFFD8-9.
    pairs.append(WidthPair(0x3164, 0xFFA0))
    pairs.extend(_offset_range(0x3131, 0x314E, 0xFFA1))
    pairs.extend(_offset_range(0x314F, 0x3154, 0xFFC2))
    pairs.extend(_offset_range(0x3155, 0x315A, 0xFFCA))
    pairs.extend(_offset_range(0x315B, 0x3160, 0xFFD2))
    pairs.extend(_offset_range(0x3161, 0x3163, 0xFFDA))

    # Halfwidth box drawing, arrows and shapes
    pairs.append(WidthPair(0x2502, 0xFFE8))
    pairs.extend(_offset_range(0x2190, 0x2193, 0xFFE9))
    pairs.append(WidthPair(0x25A0, 0xFFED))
    pairs.append(WidthPair(0x25CB, 0xFFEE))

    return tuple(pairs)


WIDTH_TABLE: Tuple[WidthPair, ...] = _build_table()

# fullwidth -> halfwidth
HALFWIDTH_MAP: Mapping[int, int] = MappingProxyType({pair.fullwidth: pair.halfwidth for pair in WIDTH_TABLE})

# halfwidth -> fullwidth
FULLWIDTH_MAP: Mapping[int, int] = MappingProxyType({pair.halfwidth: pair.fullwidth for pair in WIDTH_TABLE})
