"""Lithuanian (lt-LT)."""

from __future__ import annotations

from ..models import CurrencyDefinition, LocaleDefinition, PluralClass, PluralForms, ScaleTier


def plural_class_of(n: int) -> PluralClass:
    """Three forms: 1, 21, 31 → ONE; 2-9, 22-29 → FEW; 0, 10-20, 30 → MANY (genitive plural)."""
    last_two = n % 100
    last_one = n % 10
    if 10 <= last_two <= 20:
        return PluralClass.MANY
    if last_one == 1:
        return PluralClass.ONE
    if last_one >= 2:
        return PluralClass.FEW
    return PluralClass.MANY


def _forms(one: str, few: str, many: str) -> PluralForms:
    return PluralForms.of(one=one, few=few, many=many)


LOCALE = LocaleDefinition(
    code="lt-LT",
    digit_words=("nulis", "vienas", "du", "trys", "keturi", "penki", "šeši", "septyni", "aštuoni", "devyni"),
    teen_words={
        11: "vienuolika",
        12: "dvylika",
        13: "trylika",
        14: "keturiolika",
        15: "penkiolika",
        16: "šešiolika",
        17: "septyniolika",
        18: "aštuoniolika",
        19: "devyniolika",
    },
    tens_words={
        10: "dešimt",
        20: "dvidešimt",
        30: "trisdešimt",
        40: "keturiasdešimt",
        50: "penkiasdešimt",
        60: "šešiasdešimt",
        70: "septyniasdešimt",
        80: "aštuoniasdešimt",
        90: "devyniasdešimt",
    },
    # Lithuanian keeps the count: "vienas šimtas", "du šimtai"
    hundred_singular="vienas šimtas",
    hundred_plural="šimtai",
    scale_tiers=(
        ScaleTier(exponent=3, forms=_forms("tūkstantis", "tūkstančiai", "tūkstančių")),
        ScaleTier(exponent=6, forms=_forms("milijonas", "milijonai", "milijonų")),
        ScaleTier(exponent=9, forms=_forms("milijardas", "milijardai", "milijardų")),
        ScaleTier(exponent=12, forms=_forms("trilijonas", "trilijonai", "trilijonų")),
    ),
    plural_class_of=plural_class_of,
    zero_word="nulis",
    decimal_separator_word="kablelis",
    negative_word="minus",
    currency=CurrencyDefinition(
        name=_forms("euras", "eurai", "eurų"),
        fractional_unit=_forms("centas", "centai", "centų"),
    ),
    currency_conjunction_word="ir",
)
