"""
Public entry point: validates input, resolves the locale and dispatches.

Flow:
    value ──► normalize_number ──► get_locale ──► spell_number ──► str
               (InvalidNumber)     (UnknownLocale)

The input is validated before the locale is looked up, and the locale is
looked up lazily: a ToWords built with an unknown code only fails when it is
first asked to convert.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

from .config import load_settings
from .locales import get_locale
from .models import ConversionOptions, LocaleDefinition
from .normalizer import normalize_number
from .number_to_words import spell_number

logger = logging.getLogger(__name__)


class ToWords:
    """Converts numbers to words in one locale.

    Usage:
        to_words = ToWords("lv-LV")
        to_words.convert(137)                    # 'simtu trīsdesmit septiņi'
        to_words.convert(37.06, currency=True)   # 'trīsdesmit septiņi eiro un seši centi'
    """

    def __init__(
        self,
        locale_code: str | None = None,
        converter_options: ConversionOptions | dict | None = None,
    ):
        self.locale_code = locale_code or load_settings().default_locale
        self.converter_options = ConversionOptions().merged_with(converter_options)

    def get_locale_class(self) -> LocaleDefinition:
        """Return the LocaleDefinition for this converter's code.

        Raises:
            UnknownLocaleError: if the code is not registered.
        """
        return get_locale(self.locale_code)

    def convert(
        self,
        value: int | float | Decimal | str,
        options: ConversionOptions | dict | None = None,
        **overrides: Any,
    ) -> str:
        """Spell ``value`` in this converter's locale.

        Args:
            value: the number to convert.
            options: per-call options; fields set here override the
                instance's ``converter_options``.
            **overrides: individual option fields, e.g. ``currency=True``.

        Raises:
            InvalidNumberError: value is not a finite number.
            UnknownLocaleError: the locale code is not registered.
            IncompleteLocaleDefinitionError: the locale cannot express the value.
        """
        number = normalize_number(value)
        locale = self.get_locale_class()

        effective = self.converter_options.merged_with(options)
        if overrides:
            effective = effective.merged_with(overrides)

        logger.debug(
            "Converting %r in %s with %s",
            value,
            locale.code,
            effective.model_dump(exclude_defaults=True),
        )
        return spell_number(number, effective, locale)
