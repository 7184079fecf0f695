"""
Conversion between standard-width characters and the Unicode
"Halfwidth and Fullwidth Forms" block (U+FF00..U+FFEF).
"""

from .exceptions import ConfigurationError, InvalidCharacterError, WidthError
from .mapper import WidthMapper, is_nonstandard_width, to_fullwidth, to_halfwidth, to_standard_width
from .schema import CharConversion, CharWidthAnalysis
from .text import analyze_char_widths, convert_to_fullwidth, convert_to_halfwidth, convert_to_standard_width

__all__ = [
    # mapper
    "WidthMapper",
    "is_nonstandard_width",
    "to_halfwidth",
    "to_fullwidth",
    "to_standard_width",
    # text
    "convert_to_halfwidth",
    "convert_to_fullwidth",
    "convert_to_standard_width",
    "analyze_char_widths",
    # schema
    "CharWidthAnalysis",
    "CharConversion",
    # exceptions
    "WidthError",
    "InvalidCharacterError",
    "ConfigurationError",
]
