"""
Convert a normalized number to words using a locale's tables and grammar.

The engine is language-agnostic. It knows how numbers are built
(base-1000 groups, hundreds/tens/ones inside a group, an optional fraction)
but every word and every agreement rule comes from the LocaleDefinition.

    137            → [hundred_singular] [tens 30] [digit 7]
    2_741_034      → [2] [million] [7] [hundreds] [40] [1] [thousand] [30] [4]
    0.0468         → [zero] [point] [0] [4] [6] [8]        (leading zero: digit by digit)
    0.973          → [zero] [point] [9] [hundreds] [70] [3] (read as a whole number)
    0.999 currency → [1] [major unit]                        (cents round to 100 and carry)
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterator, Optional

from .models import GROUP_MAX, ConversionOptions, CurrencyDefinition, LocaleDefinition, ScaleTier
from .normalizer import NormalizedNumber

# Minor units per major unit, and the precision cents are rounded to
MINOR_UNITS = 100
_CENT = Decimal("0.01")


# ─── Scale Groups ────────────────────────────────────────────────────


def decompose_groups(n: int) -> Iterator[tuple[int, int]]:
    """Yield ``(tier_index, group_value)`` pairs, most significant first.

    Leading zero groups are never produced, but the ones group always is,
    so 0 yields a single ``(0, 0)``.

        1_002_003 → (2, 1), (1, 2), (0, 3)
    """
    if n < 0:
        raise ValueError(f"Cannot decompose a negative number: {n}")

    groups: list[int] = []
    while True:
        groups.append(n % 1000)
        n //= 1000
        if n == 0:
            break

    for tier_index in range(len(groups) - 1, -1, -1):
        yield tier_index, groups[tier_index]


def _below_hundred_to_words(r: int, locale: LocaleDefinition) -> list[str]:
    if r == 0:
        return []
    if 11 <= r <= 19:
        return [locale.teen_words[r]]
    if r >= 10:
        words = [locale.tens_words[r - r % 10]]
        if r % 10:
            words.append(locale.digit_words[r % 10])
        return words
    return [locale.digit_words[r]]


def compose_group(group: int, locale: LocaleDefinition) -> list[str]:
    """Words for a single 0-999 group, without any scale noun.

    A hundreds digit of 1 uses the locale's contracted ``hundred_singular``
    on its own; any other hundreds digit is spelled followed by
    ``hundred_plural``.
    """
    if not 0 <= group <= GROUP_MAX:
        raise ValueError(f"Group value out of range 0-{GROUP_MAX}: {group}")

    hundreds, remainder = divmod(group, 100)
    words: list[str] = []

    if hundreds == 1:
        words.append(locale.hundred_singular)
    elif hundreds > 1:
        words.append(locale.digit_words[hundreds])
        words.append(locale.hundred_plural)

    words.extend(_below_hundred_to_words(remainder, locale))
    return words


def resolve_scale_noun(tier: ScaleTier, group: int, locale: LocaleDefinition) -> Optional[str]:
    """Pick the scale noun form that agrees with this tier's own group value.

    Returns None for a zero group; the whole tier is then skipped.
    """
    if group == 0:
        return None
    return tier.forms.word_for(locale.plural_class_of(group))


def integer_to_words(n: int, locale: LocaleDefinition) -> list[str]:
    """Spell a non-negative integer of any size."""
    if n == 0:
        return [locale.zero_word]

    words: list[str] = []
    for tier_index, group in decompose_groups(n):
        if group == 0:
            continue
        words.extend(compose_group(group, locale))
        if tier_index > 0:
            words.append(resolve_scale_noun(locale.scale_tier(tier_index), group, locale))
    return words


# ─── Fractions ───────────────────────────────────────────────────────


def fraction_digits_to_words(fraction_digits: str, locale: LocaleDefinition) -> list[str]:
    """Words for the part after the decimal point (non-currency mode).

    A fraction that starts with 0 is read digit by digit ("04" → zero four);
    otherwise the digits are read as one whole number ("973" → nine hundred
    seventy-three). An empty or all-zero fraction produces nothing.
    """
    if not fraction_digits or not fraction_digits.strip("0"):
        return []

    words = [locale.decimal_separator_word]
    if fraction_digits[0] == "0":
        words.extend(locale.digit_words[int(digit)] for digit in fraction_digits)
    else:
        words.extend(integer_to_words(int(fraction_digits), locale))
    return words


def round_to_minor_units(integer_part: int, fraction_digits: str) -> tuple[int, int]:
    """Round the fraction to whole cents (half-up), carrying into the integer.

    Returns:
        (major, minor) with 0 <= minor < 100, e.g. (0, "999") → (1, 0).
    """
    if not fraction_digits:
        return integer_part, 0

    fraction = Decimal(f"0.{fraction_digits}").quantize(_CENT, rounding=ROUND_HALF_UP)
    cents = int(fraction * MINOR_UNITS)
    if cents == MINOR_UNITS:
        return integer_part + 1, 0
    return integer_part, cents


# ─── Currency ────────────────────────────────────────────────────────


def currency_to_words(
    integer_part: int,
    fraction_digits: str,
    options: ConversionOptions,
    locale: LocaleDefinition,
) -> tuple[list[str], bool]:
    """Spell an amount with major and minor currency units.

    Returns:
        (words, amount_is_zero). ``words`` is empty when a zero amount is
        suppressed by ``ignore_zero_currency``.
    """
    currency: CurrencyDefinition = options.currency_options or locale.currency

    if options.ignore_decimal:
        major, minor = integer_part, 0
    else:
        major, minor = round_to_minor_units(integer_part, fraction_digits)

    amount_is_zero = major == 0 and minor == 0
    if options.ignore_zero_currency and amount_is_zero:
        return [], True

    words: list[str] = []
    if major > 0 or not options.ignore_zero_currency:
        words.extend(integer_to_words(major, locale))
        words.append(currency.name.word_for(locale.plural_class_of(major)))

    if minor > 0:
        if words:
            words.append(locale.currency_conjunction_word)
        words.extend(integer_to_words(minor, locale))
        words.append(currency.fractional_unit.word_for(locale.plural_class_of(minor)))
    elif locale.only_word and not options.do_not_add_only:
        words.append(locale.only_word)

    return words, amount_is_zero


# ─── Main Converter ─────────────────────────────────────────────────


def spell_number(
    number: NormalizedNumber,
    options: ConversionOptions,
    locale: LocaleDefinition,
) -> str:
    """Render a normalized number as words under the given options.

    Args:
        number: output of ``normalize_number``.
        options: formatting flags.
        locale: word tables and grammar.

    Returns:
        The spelled-out number, or "" when ``ignore_zero_currency``
        suppresses a zero currency amount.

    The negative word is only added when something non-zero is actually
    rendered: -0.001 as currency rounds to zero and gets no sign.
    """
    if options.currency:
        words, amount_is_zero = currency_to_words(
            number.integer_part, number.fraction_digits, options, locale
        )
    else:
        fraction_words = []
        if not options.ignore_decimal:
            fraction_words = fraction_digits_to_words(number.fraction_digits, locale)
        words = integer_to_words(number.integer_part, locale) + fraction_words
        amount_is_zero = number.integer_part == 0 and not fraction_words

    if not words:
        return ""
    if number.is_negative and not amount_is_zero:
        words.insert(0, locale.negative_word)
    return locale.word_separator.join(words)
