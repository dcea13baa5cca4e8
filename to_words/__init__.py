"""
to_words — Spell numbers and currency amounts as words, in any locale.

Architecture: Normalize → Decompose into base-1000 groups → Compose words →
              Agree scale nouns → Fraction / currency → Sign
Locales:      Pure data plus one grammar function; the engine is language-agnostic.
"""

from .converter import ToWords
from .exceptions import (
    IncompleteLocaleDefinitionError,
    InvalidNumberError,
    ToWordsError,
    UnknownLocaleError,
)
from .models import ConversionOptions, CurrencyDefinition, LocaleDefinition, PluralClass, PluralForms, ScaleTier

__version__ = "1.0.0"

__all__ = [
    "ConversionOptions",
    "CurrencyDefinition",
    "IncompleteLocaleDefinitionError",
    "InvalidNumberError",
    "LocaleDefinition",
    "PluralClass",
    "PluralForms",
    "ScaleTier",
    "ToWords",
    "ToWordsError",
    "UnknownLocaleError",
]
