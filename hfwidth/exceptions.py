"""
Custom exceptions for the width conversion library.
"""


from typing import Any


class WidthError(Exception):
    """Base exception for all hfwidth errors."""

    pass


class InvalidCharacterError(WidthError, ValueError):
    """Input was not a single character."""

    def __init__(self, value: Any):
        super().__init__(f"expected a single character, got {value!r}")
        self.value = value


class ConfigurationError(WidthError):
    """Configuration-related errors."""

    pass
