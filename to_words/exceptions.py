"""
Custom exception hierarchy for number-to-words conversion.

Each exception type maps to a specific category of conversion failure,
so callers can tell a bad input apart from a bad locale code or a broken
locale table. Conversions never return partial results: they either
succeed or raise one of these.
"""

from __future__ import annotations


class ToWordsError(Exception):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class InvalidNumberError(ToWordsError):
    """The input is not a finite real number."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_NUMBER", message, details)


class UnknownLocaleError(ToWordsError):
    """No locale is registered under the requested code."""

    def __init__(self, locale_code: str):
        super().__init__(
            "UNKNOWN_LOCALE",
            f'Unknown Locale "{locale_code}"',
            {"locale_code": locale_code},
        )


class IncompleteLocaleDefinitionError(ToWordsError):
    """A locale is missing a word or table its own grammar requires.

    This is a configuration defect, not something a caller can recover from.
    """

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INCOMPLETE_LOCALE_DEFINITION", message, details)
