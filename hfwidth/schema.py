"""Schema for character width analysis and conversion."""

from typing import List, Optional

from pydantic import BaseModel

from .mapper import WidthMapper, default_mapper


class CharWidthAnalysis(BaseModel):
    """Character width analysis result."""
    text: str
    total_chars: int
    nonstandard_chars: List[str]
    convertible_chars: List[str]
    other_chars: List[str]
    nonstandard_count: int
    convertible_count: int
    other_count: int
    is_all_nonstandard: bool
    has_nonstandard: bool


class CharConversion(BaseModel):
    """Every width form of a single character."""
    char: str
    code_point: str
    is_nonstandard_width: bool
    halfwidth: Optional[str] = None
    fullwidth: Optional[str] = None
    standard_width: Optional[str] = None

    @classmethod
    def from_char(cls, ch: str, mapper: WidthMapper = default_mapper) -> "CharConversion":
        # is_nonstandard_width rejects anything but a single character
        nonstandard = mapper.is_nonstandard_width(ch)
        return cls(
            char=ch,
            code_point=f"U+{ord(ch):04X}",
            is_nonstandard_width=nonstandard,
            halfwidth=mapper.to_halfwidth(ch),
            fullwidth=mapper.to_fullwidth(ch),
            standard_width=mapper.to_standard_width(ch),
        )
