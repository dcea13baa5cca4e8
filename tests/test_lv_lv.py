"""
Reference vectors for the Latvian locale.

Covers every option combination on the same integer and float tables:
plain, negative, currency, doNotAddOnly, ignoreZeroCurrency, ignoreDecimal.

Run: pytest tests/ -v
"""

from __future__ import annotations

import re

import pytest

from to_words import ToWords, UnknownLocaleError
from to_words.locales.lv_lv import LOCALE as LV_LV

LOCALE_CODE = "lv-LV"
to_words = ToWords(LOCALE_CODE)


# ─── Test Data ───────────────────────────────────────────────────────

INTEGERS: list[tuple[int, str]] = [
    (0, "nulle"),
    (137, "simtu trīsdesmit septiņi"),
    (700, "septiņi simti"),
    (4680, "četri tūkstoši seši simti astoņdesmit"),
    (63892, "sešdesmit trīs tūkstoši astoņi simti deviņdesmit divi"),
    (792581, "septiņi simti deviņdesmit divi tūkstoši pieci simti astoņdesmit viens"),
    (1234567, "viens miljons divi simti trīsdesmit četri tūkstoši pieci simti sešdesmit septiņi"),
    (2741034, "divi miljoni septiņi simti četrdesmit viens tūkstotis trīsdesmit četri"),
    (
        86429753,
        "astoņdesmit seši miljoni četri simti divdesmit deviņi tūkstoši septiņi simti piecdesmit trīs",
    ),
    (
        975310864,
        "deviņi simti septiņdesmit pieci miljoni trīs simti desmit tūkstoši astoņi simti sešdesmit četri",
    ),
    (
        9876543210,
        "deviņi miljardi astoņi simti septiņdesmit seši miljoni pieci simti četrdesmit trīs "
        "tūkstoši divi simti desmit",
    ),
    (
        98765432101,
        "deviņdesmit astoņi miljardi septiņi simti sešdesmit pieci miljoni četri simti trīsdesmit "
        "divi tūkstoši simtu viens",
    ),
    (
        987654321012,
        "deviņi simti astoņdesmit septiņi miljardi seši simti piecdesmit četri miljoni trīs simti "
        "divdesmit viens tūkstotis divpadsmit",
    ),
    (
        9876543210123,
        "deviņi triljoni astoņi simti septiņdesmit seši miljardi pieci simti četrdesmit trīs "
        "miljoni divi simti desmit tūkstoši simtu divdesmit trīs",
    ),
    (
        98765432101234,
        "deviņdesmit astoņi triljoni septiņi simti sešdesmit pieci miljardi četri simti "
        "trīsdesmit divi miljoni simtu viens tūkstotis divi simti trīsdesmit četri",
    ),
]

FLOATS: list[tuple[float, str]] = [
    (0.0, "nulle"),
    (0.04, "nulle komats nulle četri"),
    (0.0468, "nulle komats nulle četri seši astoņi"),
    (0.4, "nulle komats četri"),
    (0.63, "nulle komats sešdesmit trīs"),
    (0.973, "nulle komats deviņi simti septiņdesmit trīs"),
    (0.999, "nulle komats deviņi simti deviņdesmit deviņi"),
    (37.06, "trīsdesmit septiņi komats nulle seši"),
    (37.068, "trīsdesmit septiņi komats nulle seši astoņi"),
    (37.68, "trīsdesmit septiņi komats sešdesmit astoņi"),
    (37.683, "trīsdesmit septiņi komats seši simti astoņdesmit trīs"),
]

FLOATS_CURRENCY: list[tuple[float, str]] = [
    (0.0, "nulle eiro"),
    (0.04, "nulle eiro un četri centi"),
    (0.0468, "nulle eiro un pieci centi"),
    (0.4, "nulle eiro un četrdesmit centi"),
    (0.63, "nulle eiro un sešdesmit trīs centi"),
    (0.973, "nulle eiro un deviņdesmit septiņi centi"),
    (0.999, "viens eiro"),
    (37.06, "trīsdesmit septiņi eiro un seši centi"),
    (37.068, "trīsdesmit septiņi eiro un septiņi centi"),
    (37.68, "trīsdesmit septiņi eiro un sešdesmit astoņi centi"),
    (37.683, "trīsdesmit septiņi eiro un sešdesmit astoņi centi"),
]

_MINOR_PHRASE = re.compile(r" un .* centi")


# ═══════════════════════════════════════════════════════════════════════
# LOCALE LOOKUP
# ═══════════════════════════════════════════════════════════════════════


class TestLocale:
    def test_locale_class(self):
        assert to_words.get_locale_class() is LV_LV

    def test_wrong_locale_fails_on_convert(self):
        wrong = ToWords(LOCALE_CODE + "-wrong")
        with pytest.raises(UnknownLocaleError, match="Unknown Locale"):
            wrong.convert(1)


# ═══════════════════════════════════════════════════════════════════════
# INTEGERS
# ═══════════════════════════════════════════════════════════════════════


class TestIntegers:
    @pytest.mark.parametrize("value, expected", INTEGERS)
    def test_plain(self, value, expected):
        assert to_words.convert(value) == expected

    @pytest.mark.parametrize("value, expected", INTEGERS[1:])
    def test_negative(self, value, expected):
        assert to_words.convert(-value) == f"mīnus {expected}"

    @pytest.mark.parametrize("value, expected", INTEGERS)
    def test_currency(self, value, expected):
        assert to_words.convert(value, {"currency": True}) == f"{expected} eiro"

    @pytest.mark.parametrize("value, expected", INTEGERS)
    def test_currency_do_not_add_only(self, value, expected):
        result = to_words.convert(value, {"currency": True, "doNotAddOnly": True})
        assert result == f"{expected} eiro"

    @pytest.mark.parametrize("value, expected", INTEGERS)
    def test_currency_ignore_zero_currency(self, value, expected):
        result = to_words.convert(value, {"currency": True, "ignoreZeroCurrency": True})
        assert result == ("" if value == 0 else f"{expected} eiro")


# ═══════════════════════════════════════════════════════════════════════
# FLOATS
# ═══════════════════════════════════════════════════════════════════════


class TestFloats:
    @pytest.mark.parametrize("value, expected", FLOATS)
    def test_plain(self, value, expected):
        assert to_words.convert(value) == expected

    @pytest.mark.parametrize("value, expected", FLOATS_CURRENCY)
    def test_currency(self, value, expected):
        assert to_words.convert(value, {"currency": True}) == expected

    @pytest.mark.parametrize("value, expected", FLOATS_CURRENCY)
    def test_currency_ignore_zero_currency(self, value, expected):
        if value == 0:
            expected = ""
        elif 0 < value < 1:
            expected = expected.replace("nulle eiro un ", "")
        result = to_words.convert(value, {"currency": True, "ignoreZeroCurrency": True})
        assert result == expected

    @pytest.mark.parametrize("value, expected", FLOATS_CURRENCY)
    def test_currency_ignore_decimal(self, value, expected):
        expected = "nulle eiro" if value == 0.999 else _MINOR_PHRASE.sub("", expected)
        result = to_words.convert(value, {"currency": True, "ignoreDecimal": True})
        assert result == expected

    @pytest.mark.parametrize("value, expected", FLOATS_CURRENCY)
    def test_currency_ignore_zero_currency_and_decimal(self, value, expected):
        expected = "" if value < 1 else _MINOR_PHRASE.sub("", expected)
        result = to_words.convert(
            value, {"currency": True, "ignoreZeroCurrency": True, "ignoreDecimal": True}
        )
        assert result == expected
