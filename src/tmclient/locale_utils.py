"""Locale utilities for BCP-47 and POSIX locale identifiers.

The server addresses locales by BCP-47 id (``de-DE``), while on-disk
file names often use the POSIX form (``de_DE``). Centralizes conversion
between the two and Babel locale lookup.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "canonical_locale_id",
    "clear_locale_cache",
    "get_babel_locale",
    "to_underscore",
]


def to_underscore(locale_id: str) -> str:
    """Convert a BCP-47 locale id to its underscore form.

    Case is preserved; only separators change.

    Example:
        >>> to_underscore("de-DE")
        'de_DE'
        >>> to_underscore("zh-Hant-TW")
        'zh_Hant_TW'
    """
    return locale_id.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_id: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_id: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(to_underscore(locale_id))


def canonical_locale_id(locale_id: str) -> str:
    """Return the canonical BCP-47 spelling of a locale id.

    Example:
        >>> canonical_locale_id("pt_br")
        'pt-BR'
    """
    locale = get_babel_locale(locale_id)
    parts = [locale.language, locale.script, locale.territory, locale.variant]
    return "-".join(part for part in parts if part)


def clear_locale_cache() -> None:
    """Clear the Babel locale cache."""
    get_babel_locale.cache_clear()
