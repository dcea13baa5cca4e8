"""
Locale registry: look up a LocaleDefinition by code.

Built-in locales are imported lazily on first lookup and cached for the life
of the process. The cache is the only shared mutable state in the package;
writes happen once per code, under a lock, and every reader afterwards sees
the same immutable definition.
"""

from __future__ import annotations

import importlib
import logging
import threading

from ..exceptions import UnknownLocaleError
from ..models import LocaleDefinition

logger = logging.getLogger(__name__)

# Locale code → module exposing a module-level LOCALE
_BUILTIN_LOCALES: dict[str, str] = {
    "en-US": "to_words.locales.en_us",
    "lt-LT": "to_words.locales.lt_lt",
    "lv-LV": "to_words.locales.lv_lv",
}

_registry: dict[str, LocaleDefinition] = {}
_lock = threading.Lock()


# ─── Public API ──────────────────────────────────────────────────────


def get_locale(code: str) -> LocaleDefinition:
    """Return the locale registered under ``code``.

    Raises:
        UnknownLocaleError: if no such locale exists.
    """
    locale = _registry.get(code)
    if locale is not None:
        return locale

    with _lock:
        locale = _registry.get(code)
        if locale is None:
            module_name = _BUILTIN_LOCALES.get(code)
            if module_name is None:
                raise UnknownLocaleError(code)
            locale = importlib.import_module(module_name).LOCALE
            _registry[code] = locale
            logger.info("Loaded locale %s", code)
    return locale


def register_locale(locale: LocaleDefinition) -> None:
    """Add (or replace) a locale under its own code."""
    with _lock:
        _registry[locale.code] = locale
    logger.debug("Registered locale %s", locale.code)


def available_locales() -> list[str]:
    """All codes that ``get_locale`` will accept."""
    return sorted(set(_BUILTIN_LOCALES) | set(_registry))
