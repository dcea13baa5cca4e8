#!/usr/bin/env python3
"""
to_words — Entry Point
======================

Spell numbers from the command line.

Usage:
    python main.py                                   # Demo table in the default locale
    python main.py --locale lv-LV 137 37.06          # Plain conversion
    python main.py --locale lv-LV --currency 0.999   # Currency mode
    TO_WORDS_LOCALE=lt-LT python main.py 2741034     # Locale from the environment
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from to_words.config import load_settings
from to_words.converter import ToWords
from to_words.exceptions import ToWordsError
from to_words.locales import available_locales
from to_words.models import ConversionOptions

load_dotenv()


# ─── Demo Values ─────────────────────────────────────────────────────

DEMO_VALUES: list[str] = [
    "0",
    "137",
    "700",
    "2741034",
    "98765432101234",
    "-4680",
    "0.04",
    "0.973",
    "37.06",
    "0.999",
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Argument Parsing ────────────────────────────────────────────────


def _build_parser(default_locale: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Spell numbers as words.")
    parser.add_argument("values", nargs="*", help="numbers to convert (default: demo table)")
    parser.add_argument(
        "--locale",
        default=default_locale,
        help=f"locale code, one of {', '.join(available_locales())} (default: {default_locale})",
    )
    parser.add_argument("--currency", action="store_true", help="render as a currency amount")
    parser.add_argument("--ignore-decimal", action="store_true", help="drop the fraction, no rounding")
    parser.add_argument(
        "--ignore-zero-currency", action="store_true", help="render a zero amount as an empty string"
    )
    parser.add_argument("--do-not-add-only", action="store_true", help="suppress the 'only' word")
    return parser


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_conversions(to_words: ToWords, values: list[str], options: ConversionOptions) -> int:
    """Print one line per value.

    Returns:
        0 if every value converted, 1 otherwise.
    """
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  NUMBER TO WORDS  ({to_words.locale_code}){_RESET}")
    flags = options.model_dump(exclude_defaults=True)
    if flags:
        print(f"  {_DIM}options: {flags}{_RESET}")
    print(f"{'─' * _WIDTH}")

    failures = 0
    for value in values:
        try:
            words = to_words.convert(value, options)
        except ToWordsError as exc:
            failures += 1
            print(f"  {value:>16}  {_RED}[{exc.code}] {exc}{_RESET}")
            continue
        print(f"  {value:>16}  {words}")

    print(f"{'=' * _WIDTH}\n")
    return 1 if failures else 0


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, convert and print."""
    settings = load_settings()
    logging.basicConfig(level=settings.log_level)

    args = _build_parser(settings.default_locale).parse_args(argv)
    options = ConversionOptions(
        currency=args.currency,
        ignore_decimal=args.ignore_decimal,
        ignore_zero_currency=args.ignore_zero_currency,
        do_not_add_only=args.do_not_add_only,
    )
    return print_conversions(ToWords(args.locale), args.values or DEMO_VALUES, options)


if __name__ == "__main__":
    sys.exit(main())
