"""
Pydantic models for locale data and conversion options.

A locale is pure data plus one grammar function (``plural_class_of``). The
conversion engine never hard-codes a language rule: everything that differs
between languages lives in a ``LocaleDefinition``. Definitions are frozen and
checked for completeness when constructed, so a broken table fails loudly at
import time instead of halfway through a conversion.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from .exceptions import IncompleteLocaleDefinitionError

# Largest value a single scale group can hold
GROUP_MAX = 999


# ─── Plural Classes ─────────────────────────────────────────────────


class PluralClass(str, Enum):
    """Grammatical-number class of a noun following a count."""

    ONE = "one"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


class PluralForms(BaseModel):
    """The realizations of one noun, keyed by plural class."""

    model_config = ConfigDict(frozen=True)

    forms: dict[PluralClass, str]

    @classmethod
    def of(cls, **words: str) -> PluralForms:
        """Shorthand: ``PluralForms.of(one="cents", other="centi")``."""
        return cls(forms={PluralClass(name): word for name, word in words.items()})

    def word_for(self, plural_class: PluralClass) -> str:
        try:
            return self.forms[plural_class]
        except KeyError:
            raise IncompleteLocaleDefinitionError(
                f"No word form for plural class '{plural_class.value}'",
                {"plural_class": plural_class.value, "available": sorted(c.value for c in self.forms)},
            ) from None


# ─── Locale Building Blocks ─────────────────────────────────────────


class ScaleTier(BaseModel):
    """A magnitude tier (thousand = 10**3, million = 10**6, ...) and its noun."""

    model_config = ConfigDict(frozen=True)

    exponent: int = Field(gt=0, multiple_of=3)
    forms: PluralForms


class CurrencyDefinition(BaseModel):
    """Major and minor currency unit nouns."""

    model_config = ConfigDict(frozen=True)

    name: PluralForms  # e.g. euro / euros
    fractional_unit: PluralForms  # e.g. cent / cents


# ─── Locale Definition ──────────────────────────────────────────────


class LocaleDefinition(BaseModel):
    """Word tables and grammar for one language.

    ``plural_class_of`` must be a pure, total function over non-negative
    integers. It is applied to scale-group values (0-999), to whole integer
    magnitudes (currency major unit) and to cent amounts (1-99).
    """

    model_config = ConfigDict(frozen=True)

    code: str
    digit_words: tuple[str, ...]  # 0..9
    teen_words: dict[int, str]  # 11..19
    tens_words: dict[int, str]  # 10, 20, ..., 90
    hundred_singular: str  # hundreds digit == 1, no separate "one" word
    hundred_plural: str  # follows a digit word
    scale_tiers: tuple[ScaleTier, ...]
    plural_class_of: Callable[[int], PluralClass]
    zero_word: str
    decimal_separator_word: str
    negative_word: str
    currency: CurrencyDefinition
    currency_conjunction_word: str
    only_word: Optional[str] = None
    word_separator: str = " "

    @model_validator(mode="after")
    def _check_complete(self) -> LocaleDefinition:
        """Reject a locale whose tables do not cover its own grammar."""
        if len(self.digit_words) != 10:
            raise self._incomplete("digit_words must hold exactly 10 entries (0-9)")
        missing_teens = set(range(11, 20)) - set(self.teen_words)
        if missing_teens:
            raise self._incomplete("teen_words is missing entries", missing=sorted(missing_teens))
        missing_tens = set(range(10, 100, 10)) - set(self.tens_words)
        if missing_tens:
            raise self._incomplete("tens_words is missing entries", missing=sorted(missing_tens))

        for index, tier in enumerate(self.scale_tiers, start=1):
            if tier.exponent != 3 * index:
                raise self._incomplete(
                    "scale_tiers must be contiguous powers of 1000",
                    position=index,
                    exponent=tier.exponent,
                )

        tables = {f"10^{tier.exponent}": tier.forms for tier in self.scale_tiers}
        tables["currency.name"] = self.currency.name
        tables["currency.fractional_unit"] = self.currency.fractional_unit

        for value in range(GROUP_MAX + 1):
            plural_class = self.plural_class_of(value)
            if not isinstance(plural_class, PluralClass):
                raise self._incomplete(
                    "plural_class_of must return a PluralClass",
                    value=value,
                    returned=repr(plural_class),
                )
            for table_name, forms in tables.items():
                if plural_class not in forms.forms:
                    raise self._incomplete(
                        f"{table_name} has no form for plural class '{plural_class.value}'",
                        table=table_name,
                        value=value,
                    )
        return self

    def _incomplete(self, message: str, **details) -> IncompleteLocaleDefinitionError:
        return IncompleteLocaleDefinitionError(
            f"Locale '{self.code}': {message}", {"locale_code": self.code, **details}
        )

    def scale_tier(self, tier_index: int) -> ScaleTier:
        """Return the tier for a group position (1 = thousand, 2 = million, ...)."""
        if not 1 <= tier_index <= len(self.scale_tiers):
            raise IncompleteLocaleDefinitionError(
                f"Locale '{self.code}' has no scale noun for 10^{3 * tier_index}",
                {"locale_code": self.code, "exponent": 3 * tier_index},
            )
        return self.scale_tiers[tier_index - 1]


# ─── Conversion Options ─────────────────────────────────────────────


class ConversionOptions(BaseModel):
    """Formatting flags for one conversion. All default to off.

    Accepts snake_case field names or their camelCase aliases
    (``ignoreZeroCurrency``), so JSON payloads can use either.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    currency: bool = False
    do_not_add_only: bool = False
    ignore_zero_currency: bool = False
    ignore_decimal: bool = False
    currency_options: Optional[CurrencyDefinition] = None  # replaces the locale's currency nouns

    def merged_with(self, overrides: ConversionOptions | dict | None) -> ConversionOptions:
        """Return a copy where every field explicitly set in ``overrides`` wins."""
        if overrides is None:
            return self
        if not isinstance(overrides, ConversionOptions):
            overrides = ConversionOptions.model_validate(overrides)
        if not overrides.model_fields_set:
            return self
        update = {name: getattr(overrides, name) for name in overrides.model_fields_set}
        return self.model_copy(update=update)
