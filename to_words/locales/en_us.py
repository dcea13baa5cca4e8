"""English, United States (en-US)."""

from __future__ import annotations

from ..models import CurrencyDefinition, LocaleDefinition, PluralClass, PluralForms, ScaleTier


def plural_class_of(n: int) -> PluralClass:
    return PluralClass.ONE if n == 1 else PluralClass.OTHER


def _scale(exponent: int, word: str) -> ScaleTier:
    # English scale nouns do not inflect after a count: "Two Thousand"
    return ScaleTier(exponent=exponent, forms=PluralForms.of(one=word, other=word))


LOCALE = LocaleDefinition(
    code="en-US",
    digit_words=("Zero", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine"),
    teen_words={
        11: "Eleven",
        12: "Twelve",
        13: "Thirteen",
        14: "Fourteen",
        15: "Fifteen",
        16: "Sixteen",
        17: "Seventeen",
        18: "Eighteen",
        19: "Nineteen",
    },
    tens_words={
        10: "Ten",
        20: "Twenty",
        30: "Thirty",
        40: "Forty",
        50: "Fifty",
        60: "Sixty",
        70: "Seventy",
        80: "Eighty",
        90: "Ninety",
    },
    hundred_singular="One Hundred",
    hundred_plural="Hundred",
    scale_tiers=(
        _scale(3, "Thousand"),
        _scale(6, "Million"),
        _scale(9, "Billion"),
        _scale(12, "Trillion"),
        _scale(15, "Quadrillion"),
    ),
    plural_class_of=plural_class_of,
    zero_word="Zero",
    decimal_separator_word="Point",
    negative_word="Minus",
    currency=CurrencyDefinition(
        name=PluralForms.of(one="Dollar", other="Dollars"),
        fractional_unit=PluralForms.of(one="Cent", other="Cents"),
    ),
    currency_conjunction_word="And",
    only_word="Only",
)
