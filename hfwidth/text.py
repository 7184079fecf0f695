"""Utilities for applying width conversion to every character of a string."""

from typing import Dict, List

from .mapper import FORMS_BLOCK_END, FORMS_BLOCK_START, to_standard_width
from .schema import CharWidthAnalysis
from .table import FULLWIDTH_MAP, HALFWIDTH_MAP

# str.translate tables; characters without an entry pass through unchanged
_TO_HALFWIDTH: Dict[int, int] = dict(HALFWIDTH_MAP)
_TO_FULLWIDTH: Dict[int, int] = dict(FULLWIDTH_MAP)


def _standard_width_table() -> Dict[int, str]:
    table = {}
    for cp in range(FORMS_BLOCK_START, FORMS_BLOCK_END + 1):
        standard = to_standard_width(chr(cp))
        if standard is not None:
            table[cp] = standard
    return table


_TO_STANDARD_WIDTH = _standard_width_table()


def convert_to_halfwidth(text: str) -> str:
    """
    Convert characters to their halfwidth forms where possible.

    Args:
        text: Text to convert

    Returns:
        Converted text; characters without a halfwidth form are kept as is
    """
    return text.translate(_TO_HALFWIDTH)


def convert_to_fullwidth(text: str) -> str:
    """
    Convert characters to their fullwidth forms where possible.

    Args:
        text: Text to convert

    Returns:
        Converted text; characters without a fullwidth form are kept as is
    """
    return text.translate(_TO_FULLWIDTH)


def convert_to_standard_width(text: str) -> str:
    """
    Replace Forms block characters with their standard-width forms.

    Args:
        text: Text to convert

    Returns:
        Converted text; characters outside the Forms block are kept as is
    """
    return text.translate(_TO_STANDARD_WIDTH)


def analyze_char_widths(text: str) -> CharWidthAnalysis:
    """
    Analyze the character widths in a given text.

    Each character is counted as nonstandard (inside the Forms block),
    convertible (outside the block but with an alternate-width sibling)
    or other.

    Args:
        text: Text to analyze

    Returns:
        Analysis result
    """
    nonstandard_chars: List[str] = []
    convertible_chars: List[str] = []
    other_chars: List[str] = []

    for char in text:
        cp = ord(char)
        if FORMS_BLOCK_START <= cp <= FORMS_BLOCK_END:
            nonstandard_chars.append(char)
        elif cp in _TO_HALFWIDTH or cp in _TO_FULLWIDTH:
            convertible_chars.append(char)
        else:
            other_chars.append(char)

    return CharWidthAnalysis(
        text=text,
        total_chars=len(text),
        nonstandard_chars=nonstandard_chars,
        convertible_chars=convertible_chars,
        other_chars=other_chars,
        nonstandard_count=len(nonstandard_chars),
        convertible_count=len(convertible_chars),
        other_count=len(other_chars),
        is_all_nonstandard=len(nonstandard_chars) == len(text) and len(text) > 0,
        has_nonstandard=len(nonstandard_chars) > 0,
    )
