"""Latvian (lv-LV)."""

from __future__ import annotations

from ..models import CurrencyDefinition, LocaleDefinition, PluralClass, PluralForms, ScaleTier


def plural_class_of(n: int) -> PluralClass:
    """Nouns agree with the last word of the count: "viens" takes the singular.

    21 → divdesmit viens tūkstotis, but 11 → vienpadsmit tūkstoši.
    """
    if n % 10 == 1 and n % 100 != 11:
        return PluralClass.ONE
    return PluralClass.OTHER


LOCALE = LocaleDefinition(
    code="lv-LV",
    digit_words=("nulle", "viens", "divi", "trīs", "četri", "pieci", "seši", "septiņi", "astoņi", "deviņi"),
    teen_words={
        11: "vienpadsmit",
        12: "divpadsmit",
        13: "trīspadsmit",
        14: "četrpadsmit",
        15: "piecpadsmit",
        16: "sešpadsmit",
        17: "septiņpadsmit",
        18: "astoņpadsmit",
        19: "deviņpadsmit",
    },
    tens_words={
        10: "desmit",
        20: "divdesmit",
        30: "trīsdesmit",
        40: "četrdesmit",
        50: "piecdesmit",
        60: "sešdesmit",
        70: "septiņdesmit",
        80: "astoņdesmit",
        90: "deviņdesmit",
    },
    hundred_singular="simtu",
    hundred_plural="simti",
    scale_tiers=(
        ScaleTier(exponent=3, forms=PluralForms.of(one="tūkstotis", other="tūkstoši")),
        ScaleTier(exponent=6, forms=PluralForms.of(one="miljons", other="miljoni")),
        ScaleTier(exponent=9, forms=PluralForms.of(one="miljards", other="miljardi")),
        ScaleTier(exponent=12, forms=PluralForms.of(one="triljons", other="triljoni")),
        ScaleTier(exponent=15, forms=PluralForms.of(one="kvadriljons", other="kvadriljoni")),
        ScaleTier(exponent=18, forms=PluralForms.of(one="kvintiljons", other="kvintiljoni")),
    ),
    plural_class_of=plural_class_of,
    zero_word="nulle",
    decimal_separator_word="komats",
    negative_word="mīnus",
    currency=CurrencyDefinition(
        # "eiro" does not decline
        name=PluralForms.of(one="eiro", other="eiro"),
        fractional_unit=PluralForms.of(one="cents", other="centi"),
    ),
    currency_conjunction_word="un",
)
