"""
Single-character conversion between standard width and the Unicode
"Halfwidth and Fullwidth Forms" block.
"""

from typing import Mapping, Optional

from .exceptions import InvalidCharacterError
from .table import FULLWIDTH_MAP, HALFWIDTH_MAP

FORMS_BLOCK_START = 0xFF00
FORMS_BLOCK_END = 0xFFEE  # 0xFFEF is unassigned


def _code_point(ch: str) -> int:
    if not isinstance(ch, str) or len(ch) != 1:
        raise InvalidCharacterError(ch)
    return ord(ch)


class WidthMapper:
    """
    Stateless width mapper over a pair of directional lookup views.

    The module-level functions delegate to a default instance built from the
    canonical table; a separate instance can be given its own views.
    """

    def __init__(
        self,
        halfwidth_map: Mapping[int, int] = HALFWIDTH_MAP,
        fullwidth_map: Mapping[int, int] = FULLWIDTH_MAP,
    ):
        self.halfwidth_map = halfwidth_map
        self.fullwidth_map = fullwidth_map

    def is_nonstandard_width(self, ch: str) -> bool:
        """
        Check if a character is in the Halfwidth and Fullwidth Forms block.

        Args:
            ch: Single character to check

        Returns:
            True if the code point lies in U+FF00..U+FFEE, False otherwise
        """
        return FORMS_BLOCK_START <= _code_point(ch) <= FORMS_BLOCK_END

    def to_halfwidth(self, ch: str) -> Optional[str]:
        """
        Return the halfwidth form of a character.

        Covers the fullwidth Forms characters (ASCII, white parens, currency
        signs) and natural fullwidth characters with a halfwidth sibling
        (CJK punctuation, katakana, Hangul jamo, box/arrow/shape glyphs).

        Args:
            ch: Single character to convert

        Returns:
            The halfwidth character, or None if there is none
        """
        target = self.halfwidth_map.get(_code_point(ch))
        return None if target is None else chr(target)

    def to_fullwidth(self, ch: str) -> Optional[str]:
        """
        Return the fullwidth form of a character.

        Exact inverse of :meth:`to_halfwidth`.

        Args:
            ch: Single character to convert

        Returns:
            The fullwidth character, or None if there is none
        """
        target = self.fullwidth_map.get(_code_point(ch))
        return None if target is None else chr(target)

    def to_standard_width(self, ch: str) -> Optional[str]:
        """
        Return the standard-width form of a Forms block character.

        The direction is chosen from the code point range alone. Characters
        outside the Forms block always give None, even when they have an
        alternate-width sibling.

        Args:
            ch: Single character to convert

        Returns:
            The standard-width character, or None
        """
        cp = _code_point(ch)
        if 0xFF01 <= cp <= 0xFF60:
            return self.to_halfwidth(ch)
        if 0xFF61 <= cp <= 0xFFDC:
            return self.to_fullwidth(ch)
        if 0xFFE0 <= cp <= 0xFFE6:
            return self.to_halfwidth(ch)
        if 0xFFE8 <= cp <= 0xFFEE:
            return self.to_fullwidth(ch)
        return None


default_mapper = WidthMapper()


def is_nonstandard_width(ch: str) -> bool:
    """Check if `ch` is in the Halfwidth and Fullwidth Forms block."""
    return default_mapper.is_nonstandard_width(ch)


def to_halfwidth(ch: str) -> Optional[str]:
    """Return the halfwidth form of `ch`, or None."""
    return default_mapper.to_halfwidth(ch)


def to_fullwidth(ch: str) -> Optional[str]:
    """Return the fullwidth form of `ch`, or None."""
    return default_mapper.to_fullwidth(ch)


def to_standard_width(ch: str) -> Optional[str]:
    """Return the standard-width form of a Forms block character, or None."""
    return default_mapper.to_standard_width(ch)
